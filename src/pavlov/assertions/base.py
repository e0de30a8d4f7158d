"""Check descriptors for the assertion catalog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class UnaryCheck:
    """A check over the subject alone: ``func(value, message)``.

    Attributes:
        name: Member name the check is installed under (e.g. "is_true").
        func: The implementation. Returns normally or raises AssertionFailure.
        print_value: Whether the subject appears in the default message.
        print_details: Render callable subjects with their source text.
    """

    name: str
    func: Callable[[Any, str | None], Any]
    print_value: bool = True
    print_details: bool = False

    @property
    def arity(self) -> int:
        return 1


@dataclass(frozen=True)
class BinaryCheck:
    """A check of the subject against an expected value: ``func(value, expected, message)``.

    Attributes:
        name: Member name the check is installed under (e.g. "is_equal_to").
        func: The implementation. Returns normally or raises AssertionFailure.
        print_value: Whether the subject appears in the default message.
        print_details: Render callable subjects with their source text.
        print_expected: Optional predicate over the expected value; when it
            returns False the expected value is left out of the default message.
    """

    name: str
    func: Callable[[Any, Any, str | None], Any]
    print_value: bool = True
    print_details: bool = False
    print_expected: Callable[[Any], bool] | None = None

    @property
    def arity(self) -> int:
        return 2

    def shows_expected(self, expected: Any) -> bool:
        return self.print_expected is None or bool(self.print_expected(expected))


Check = UnaryCheck | BinaryCheck
