"""Comparison primitives that fail with an ``AssertionFailure``.

These are the only place where pavlov decides whether two values match.
Checks in the catalog delegate here and pass their assembled message along.
"""

from __future__ import annotations

import numbers
from typing import Any, Callable


class AssertionFailure(AssertionError):
    """A failed check.

    Attributes:
        message: Human-readable failure text (explicit or generated).
        actual: The value under test, when the failing primitive had one.
        expected: The value it was compared against, when there was one.
        operator: Name of the primitive that failed (e.g. "strict_equal").
        generated_message: True when no message was supplied and the text
            was produced by the primitive itself.
    """

    def __init__(
        self,
        message: str | None = None,
        *,
        actual: Any = None,
        expected: Any = None,
        operator: str = "fail",
    ) -> None:
        self.generated_message = message is None
        if message is None:
            if operator == "fail":
                message = "Assertion failed"
            else:
                message = f"{actual!r} {operator} {expected!r}"
        super().__init__(message)
        self.message = message
        self.actual = actual
        self.expected = expected
        self.operator = operator


def fail(message: str | None = None) -> None:
    raise AssertionFailure(message)


def ok(value: Any, message: str | None = None) -> None:
    """Fail unless *value* is truthy."""
    if not value:
        raise AssertionFailure(message, actual=value, expected=True, operator="==")


def _loosely_equal(actual: Any, expected: Any) -> bool:
    return bool(actual == expected)


def _strictly_equal(actual: Any, expected: Any) -> bool:
    if actual is expected:
        return True
    # Numbers of different types compare by value; bool stays its own kind.
    if (
        isinstance(actual, numbers.Number)
        and isinstance(expected, numbers.Number)
        and not isinstance(actual, bool)
        and not isinstance(expected, bool)
    ):
        return _loosely_equal(actual, expected)
    return type(actual) is type(expected) and _loosely_equal(actual, expected)


def _deep_equal(
    actual: Any, expected: Any, seen: set[tuple[int, int]] | None = None
) -> bool:
    if actual is expected:
        return True
    if seen is None:
        seen = set()
    key = (id(actual), id(expected))
    if key in seen:
        return True
    if isinstance(actual, dict) and isinstance(expected, dict):
        if actual.keys() != expected.keys():
            return False
        seen.add(key)
        return all(_deep_equal(actual[k], expected[k], seen) for k in actual)
    if isinstance(actual, (list, tuple)) and isinstance(expected, (list, tuple)):
        if type(actual) is not type(expected) or len(actual) != len(expected):
            return False
        seen.add(key)
        return all(_deep_equal(a, e, seen) for a, e in zip(actual, expected))
    if _loosely_equal(actual, expected):
        return True
    # Plain objects without their own __eq__ compare by attributes.
    if (
        type(actual) is type(expected)
        and type(actual).__eq__ is object.__eq__
        and hasattr(actual, "__dict__")
    ):
        seen.add(key)
        return _deep_equal(vars(actual), vars(expected), seen)
    return False


def _compare(
    predicate: Callable[[Any, Any], bool],
    actual: Any,
    expected: Any,
    operator: str,
    message: str | None,
) -> bool:
    try:
        return predicate(actual, expected)
    except (TypeError, ValueError) as exc:
        # An __eq__ without a single truth value (elementwise array results).
        raise AssertionFailure(
            message, actual=actual, expected=expected, operator=operator
        ) from exc


def equal(actual: Any, expected: Any, message: str | None = None) -> None:
    """Fail unless ``actual == expected``."""
    if not _compare(_loosely_equal, actual, expected, "==", message):
        raise AssertionFailure(message, actual=actual, expected=expected, operator="==")


def not_equal(actual: Any, expected: Any, message: str | None = None) -> None:
    if _compare(_loosely_equal, actual, expected, "!=", message):
        raise AssertionFailure(message, actual=actual, expected=expected, operator="!=")


def strict_equal(actual: Any, expected: Any, message: str | None = None) -> None:
    """Fail unless *actual* is *expected*, or both compare equal and share a kind.

    Values of the same type compare with ``==``. Two non-bool numbers compare
    by value whatever their types, so ``3 == 3.0`` holds but ``1 == True``
    does not.
    """
    if not _compare(_strictly_equal, actual, expected, "strict_equal", message):
        raise AssertionFailure(
            message, actual=actual, expected=expected, operator="strict_equal"
        )


def not_strict_equal(actual: Any, expected: Any, message: str | None = None) -> None:
    if _compare(_strictly_equal, actual, expected, "not_strict_equal", message):
        raise AssertionFailure(
            message, actual=actual, expected=expected, operator="not_strict_equal"
        )


def deep_equal(actual: Any, expected: Any, message: str | None = None) -> None:
    """Fail unless the two values are structurally equal.

    Dicts, lists and tuples are compared element by element; objects that
    do not define ``__eq__`` are compared by their attributes.
    """
    if not _compare(_deep_equal, actual, expected, "deep_equal", message):
        raise AssertionFailure(
            message, actual=actual, expected=expected, operator="deep_equal"
        )


def not_deep_equal(actual: Any, expected: Any, message: str | None = None) -> None:
    if _compare(_deep_equal, actual, expected, "not_deep_equal", message):
        raise AssertionFailure(
            message, actual=actual, expected=expected, operator="not_deep_equal"
        )
