"""Default checks available on every ``assert_that(...)`` handler."""

from __future__ import annotations

from typing import Any, Callable

from pavlov import primitives
from pavlov.assertions.catalog import Catalog
from pavlov.introspection import UNDEFINED, classify
from pavlov.primitives import AssertionFailure

DEFAULT_CATALOG = Catalog()

_ERROR_MESSAGE = "Expected error"


@DEFAULT_CATALOG.binary()
def equals(actual: Any, expected: Any, message: str | None = None) -> None:
    primitives.strict_equal(actual, expected, message)


@DEFAULT_CATALOG.binary()
def is_similar_to(actual: Any, expected: Any, message: str | None = None) -> None:
    primitives.equal(actual, expected, message)


@DEFAULT_CATALOG.binary()
def is_not_similar_to(actual: Any, expected: Any, message: str | None = None) -> None:
    primitives.not_equal(actual, expected, message)


@DEFAULT_CATALOG.binary()
def is_equal_to(actual: Any, expected: Any, message: str | None = None) -> None:
    primitives.strict_equal(actual, expected, message)


@DEFAULT_CATALOG.binary()
def is_not_equal_to(actual: Any, expected: Any, message: str | None = None) -> None:
    primitives.not_strict_equal(actual, expected, message)


@DEFAULT_CATALOG.binary()
def is_of_type(actual: Any, expected: str, message: str | None = None) -> None:
    primitives.strict_equal(classify(actual), expected, message)


@DEFAULT_CATALOG.unary()
def is_true(actual: Any, message: str | None = None) -> None:
    primitives.strict_equal(actual, True, message)


@DEFAULT_CATALOG.unary()
def is_false(actual: Any, message: str | None = None) -> None:
    primitives.strict_equal(actual, False, message)


@DEFAULT_CATALOG.unary()
def is_defined(actual: Any, message: str | None = None) -> None:
    primitives.not_strict_equal(actual, UNDEFINED, message)
    primitives.not_strict_equal(actual, None, message)


@DEFAULT_CATALOG.unary()
def is_not_defined(actual: Any, message: str | None = None) -> None:
    primitives.ok(actual is UNDEFINED or actual is None, message)


@DEFAULT_CATALOG.binary()
def is_same_as(actual: Any, expected: Any, message: str | None = None) -> None:
    primitives.deep_equal(actual, expected, message)


@DEFAULT_CATALOG.binary()
def is_not_same_as(actual: Any, expected: Any, message: str | None = None) -> None:
    primitives.not_deep_equal(actual, expected, message)


@DEFAULT_CATALOG.unary(name="pass_", print_value=False)
def pass_(actual: Any, message: str | None = None) -> None:
    primitives.ok(True, message)


@DEFAULT_CATALOG.unary(print_value=False)
def fail(actual: Any, message: str | None = None) -> None:
    primitives.ok(False, message)


def _call_expecting_error(actual: Callable[[], Any], message: str) -> Exception:
    try:
        actual()
    except KeyboardInterrupt:
        raise
    except Exception as exc:
        return exc
    except BaseException as exc:
        raise AssertionFailure(
            f"{message} (thrown object is not an Error)",
            actual=exc,
            expected=Exception,
            operator="throws",
        ) from exc
    raise AssertionFailure(
        f"{message} (no error was thrown)", expected=Exception, operator="throws"
    )


@DEFAULT_CATALOG.unary()
def throws_error(actual: Callable[[], Any], message: str | None = None) -> Exception:
    """Call *actual* and return the exception it raised."""
    return _call_expecting_error(actual, message or _ERROR_MESSAGE)


@DEFAULT_CATALOG.binary()
def throws_error_with_message(
    actual: Callable[[], Any], expected_message: str, message: str | None = None
) -> Exception:
    """Like ``throws_error``, also requiring ``str(exc) == expected_message``."""
    message = message or _ERROR_MESSAGE
    exc = _call_expecting_error(actual, message)
    primitives.strict_equal(
        str(exc), expected_message, f"{message} (error message does not match)"
    )
    return exc


KIND_NAMES = (
    "string",
    "array",
    "object",
    "function",
    "regexp",
    "date",
    "number",
    "boolean",
    "undefined",
    "null",
)


def _kind_checks(kind: str) -> None:
    def is_kind(actual: Any, message: str | None = None) -> None:
        primitives.strict_equal(classify(actual), kind, message)

    def is_not_kind(actual: Any, message: str | None = None) -> None:
        primitives.not_strict_equal(classify(actual), kind, message)

    DEFAULT_CATALOG.unary(name=f"is_{kind}")(is_kind)
    DEFAULT_CATALOG.unary(name=f"is_not_{kind}")(is_not_kind)


for _kind in KIND_NAMES:
    _kind_checks(_kind)

DEFAULT_CATALOG.freeze()
