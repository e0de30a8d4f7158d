from __future__ import annotations

from pathlib import Path
from typing import Any

import typer

app = typer.Typer(name="pavlov", help="Inspect and try out pavlov assertion checks")

# Subjects parsed from the command line are never callable.
_CALLABLE_SUBJECT_CHECKS = frozenset({"throws_error", "throws_error_with_message"})


def _parse_literal(text: str | None) -> Any:
    """Parse a command-line value as YAML; a missing value means UNDEFINED."""
    import yaml

    from pavlov.introspection import UNDEFINED

    if text is None:
        return UNDEFINED
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        typer.echo(f"Error: cannot parse value {text!r}: {exc}", err=True)
        raise typer.Exit(1)


def _load_settings(config: str | None, verbose: bool):
    from pavlov.config import PavlovConfig, load_config
    from pavlov.verbose import setup_logger

    if config is None:
        settings = PavlovConfig(verbose=verbose)
    else:
        try:
            settings = load_config(Path(config))
        except (FileNotFoundError, ValueError) as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)
        if verbose:
            settings.verbose = True

    if settings.debug_log is not None:
        setup_logger(Path(settings.debug_log), verbose=settings.verbose)
    return settings


def _lookup(name: str):
    from pavlov.assertions import DEFAULT_CATALOG

    if name not in DEFAULT_CATALOG:
        typer.echo(
            f"Error: unknown check {name!r}. Run 'pavlov checks' for the list.",
            err=True,
        )
        raise typer.Exit(1)
    return DEFAULT_CATALOG[name]


@app.command()
def checks(
    config: str | None = typer.Option(None, help="Path to pavlov YAML settings"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
):
    """List the default checks in registration order."""
    from pavlov.assertions import DEFAULT_CATALOG
    from pavlov.introspection import to_phrase

    _load_settings(config, verbose)

    width = max(len(name) for name in DEFAULT_CATALOG.names())
    for check in DEFAULT_CATALOG:
        typer.echo(f"{check.name:<{width}}  {check.arity}  {to_phrase(check.name)}")


@app.command()
def message(
    name: str = typer.Argument(help="Check name, e.g. is_equal_to"),
    value: str | None = typer.Argument(
        None, help="Subject value as YAML (omit for undefined)"
    ),
    expected: str | None = typer.Option(
        None, "--expected", "-e", help="Expected value as YAML (binary checks)"
    ),
    description: str | None = typer.Option(
        None, "--description", "-d", help="Description of the subject"
    ),
):
    """Print the default failure message a check would produce."""
    from pavlov.assertions import BinaryCheck
    from pavlov.handler import format_message

    check = _lookup(name)
    subject = _parse_literal(value)
    if isinstance(check, BinaryCheck):
        if expected is None:
            typer.echo(f"Error: {name} needs --expected", err=True)
            raise typer.Exit(1)
        typer.echo(format_message(check, subject, description, _parse_literal(expected)))
    else:
        typer.echo(format_message(check, subject, description))


@app.command()
def run(
    name: str = typer.Argument(help="Check name, e.g. is_equal_to"),
    value: str | None = typer.Argument(
        None, help="Subject value as YAML (omit for undefined)"
    ),
    expected: str | None = typer.Option(
        None, "--expected", "-e", help="Expected value as YAML (binary checks)"
    ),
    description: str | None = typer.Option(
        None, "--description", "-d", help="Description of the subject"
    ),
    msg: str | None = typer.Option(
        None, "--message", "-m", help="Explicit failure message"
    ),
    config: str | None = typer.Option(None, help="Path to pavlov YAML settings"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
):
    """Run a check against a value and exit non-zero if it fails."""
    from pavlov import assert_that
    from pavlov.assertions import BinaryCheck
    from pavlov.primitives import AssertionFailure

    _load_settings(config, verbose)
    check = _lookup(name)
    if name in _CALLABLE_SUBJECT_CHECKS:
        typer.echo(f"Error: {name} needs a callable subject", err=True)
        raise typer.Exit(1)

    args: list[Any] = []
    if isinstance(check, BinaryCheck):
        if expected is None:
            typer.echo(f"Error: {name} needs --expected", err=True)
            raise typer.Exit(1)
        args.append(_parse_literal(expected))

    try:
        assert_that(_parse_literal(value), description).run(name, *args, msg)
    except AssertionFailure as e:
        typer.echo(f"FAILED: {e}", err=True)
        raise typer.Exit(1)
    typer.echo("passed")
