from typer.testing import CliRunner

from pavlov.cli import app

runner = CliRunner()


def test_checks_lists_default_catalog():
    result = runner.invoke(app, ["checks"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0].split()[0] == "equals"
    assert any(line.split()[:2] == ["is_equal_to", "2"] for line in lines)
    assert any(line.split()[:2] == ["is_true", "1"] for line in lines)
    assert "is not equal to" in result.output


def test_message_binary_with_description():
    result = runner.invoke(app, ["message", "is_equal_to", "5", "-e", "6", "-d", "count"])
    assert result.exit_code == 0
    assert result.output.strip() == "asserting that (count), being 5, is equal to 6"


def test_message_parses_yaml_values():
    result = runner.invoke(app, ["message", "is_same_as", "[1, 2]", "--expected", "hello"])
    assert result.exit_code == 0
    assert result.output.strip() == 'asserting [1,2] is same as "hello"'


def test_message_unary_without_value_is_undefined():
    result = runner.invoke(app, ["message", "is_defined"])
    assert result.exit_code == 0
    assert result.output.strip() == "asserting undefined is defined"


def test_message_binary_requires_expected():
    result = runner.invoke(app, ["message", "is_equal_to", "5"])
    assert result.exit_code == 1


def test_message_unknown_check():
    result = runner.invoke(app, ["message", "is_purple", "5"])
    assert result.exit_code == 1


def test_run_passing_check():
    result = runner.invoke(app, ["run", "is_equal_to", "5", "-e", "5"])
    assert result.exit_code == 0
    assert "passed" in result.output


def test_run_failing_check():
    result = runner.invoke(app, ["run", "is_equal_to", "5", "-e", "6", "-d", "count"])
    assert result.exit_code == 1
    assert "FAILED: asserting that (count), being 5, is equal to 6" in result.output


def test_run_explicit_message():
    result = runner.invoke(app, ["run", "is_null", "3", "-m", "expected nothing"])
    assert result.exit_code == 1
    assert "FAILED: expected nothing" in result.output


def test_run_null_literal():
    result = runner.invoke(app, ["run", "is_not_defined", "null"])
    assert result.exit_code == 0


def test_run_rejects_callable_checks():
    result = runner.invoke(app, ["run", "throws_error", "5"])
    assert result.exit_code == 1


def test_run_missing_config():
    result = runner.invoke(app, ["run", "is_true", "true", "--config", "nonexistent.yaml"])
    assert result.exit_code == 1


def test_run_writes_debug_log_from_config(tmp_path):
    config = tmp_path / "pavlov.yaml"
    config.write_text("debug_log: logs/debug.log\n")
    result = runner.invoke(
        app, ["run", "is_equal_to", "1", "-e", "1", "--config", str(config)]
    )
    assert result.exit_code == 0
    debug_log = tmp_path / "logs" / "debug.log"
    assert debug_log.exists()
    assert "Dispatching is_equal_to" in debug_log.read_text()
