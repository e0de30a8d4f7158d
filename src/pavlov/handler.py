"""Assertion handler and the dispatch engine behind its generated methods.

Every check in a catalog becomes a method on a handler class. The methods
are thin wrappers: the argument shape, the default failure message and the
call into the check all happen in :func:`dispatch`.
"""

from __future__ import annotations

import logging
from typing import Any

from pavlov.assertions.base import BinaryCheck, Check, UnaryCheck
from pavlov.assertions.builtin import DEFAULT_CATALOG
from pavlov.assertions.catalog import Catalog, CatalogError
from pavlov.introspection import render, to_phrase

logger = logging.getLogger(__name__)

_MISSING = object()

_RESERVED_NAMES = frozenset({"value", "description", "run", "catalog"})


def build_default_message(check: Check, value: Any, description: str | None = None) -> str:
    """Build the automatic failure message for *check* applied to *value*.

    ``asserting that (count), being 5, is equal to`` with a description,
    ``asserting 5 is equal to`` without one. Expected values are appended
    by :func:`format_message`.
    """
    words = ["asserting", to_phrase(check.name)]
    if check.print_value:
        words.insert(1, render(value, check.print_details))
    if description:
        if check.print_value:
            words[1] += ","
        words.insert(1, f"that ({description}), being")
    return " ".join(words)


def format_message(
    check: Check, value: Any, description: str | None = None, expected: Any = _MISSING
) -> str:
    """Full default failure message, including the expected value of binary checks."""
    message = build_default_message(check, value, description)
    if isinstance(check, BinaryCheck) and expected is not _MISSING:
        if check.shows_expected(expected):
            message += " " + render(expected)
    return message


def dispatch(
    check: Check,
    value: Any,
    description: str | None = None,
    expected: Any = _MISSING,
    message: str | None = None,
) -> Any:
    """Run *check* against *value* and return whatever the check returns.

    When *message* is None a default message is built from the check name,
    the value, the description and, for binary checks, the expected value.
    """
    if not isinstance(check, (UnaryCheck, BinaryCheck)):
        raise TypeError(f"Not a check descriptor: {check!r}")
    explicit = message is not None
    logger.debug(
        f"Dispatching {check.name} (arity={check.arity}, explicit_message={explicit})"
    )
    if isinstance(check, UnaryCheck):
        if expected is not _MISSING:
            raise TypeError(f"{check.name}() takes no expected value")
        if not explicit:
            message = build_default_message(check, value, description)
        return check.func(value, message)

    if expected is _MISSING:
        raise TypeError(f"{check.name}() missing required argument: 'expected'")
    if not explicit:
        message = format_message(check, value, description, expected)
    return check.func(value, expected, message)


class AssertionHandler:
    """Wraps a test-produced value and an optional description.

    Every check of :attr:`catalog` is available as a method; see
    :func:`install`. ``run(name, ...)`` reaches the same checks by name.
    """

    catalog: Catalog

    def __init__(self, value: Any, description: str | None = None) -> None:
        self.value = value
        self.description = description

    def run(self, name: str, *args: Any, **kwargs: Any) -> Any:
        if name not in self.catalog:
            raise AttributeError(
                f"Unknown check: {name!r}. "
                f"Available: {', '.join(sorted(self.catalog.names()))}"
            )
        check = self.catalog[name]
        if isinstance(check, BinaryCheck):
            return _binary_member(check)(self, *args, **kwargs)
        return _unary_member(check)(self, *args, **kwargs)

    def __repr__(self) -> str:
        if self.description:
            return f"{type(self).__name__}({self.value!r}, {self.description!r})"
        return f"{type(self).__name__}({self.value!r})"


def _unary_member(check: UnaryCheck):
    def member(self: AssertionHandler, message: str | None = None) -> Any:
        return dispatch(check, self.value, self.description, message=message)

    return member


def _binary_member(check: BinaryCheck):
    def member(self: AssertionHandler, expected: Any, message: str | None = None) -> Any:
        return dispatch(check, self.value, self.description, expected, message)

    return member


def install(catalog: Catalog, target_cls: type) -> type:
    """Add one method per check of *catalog* to *target_cls*.

    Names are validated up front, so a rejected catalog leaves *target_cls*
    untouched.
    """
    for name in catalog.names():
        if name in _RESERVED_NAMES or name.startswith("__"):
            raise CatalogError(f"Check name '{name}' is reserved")
    for check in catalog:
        if isinstance(check, BinaryCheck):
            member = _binary_member(check)
        else:
            member = _unary_member(check)
        member.__name__ = check.name
        member.__qualname__ = f"{target_cls.__name__}.{check.name}"
        member.__doc__ = check.func.__doc__ or f"Assert that the value {to_phrase(check.name)}."
        setattr(target_cls, check.name, member)
    target_cls.catalog = catalog
    logger.debug(f"Installed {len(catalog)} checks on {target_cls.__name__}")
    return target_cls


def make_handler_class(
    catalog: Catalog, name: str = "CustomAssertionHandler", base: type = AssertionHandler
) -> type:
    """Create a handler subclass exposing the checks of *base* plus *catalog*.

    Checks in *catalog* take precedence over same-named checks of *base*.
    """
    merged = Catalog(on_collision="replace")
    merged.update(base.catalog)
    merged.update(catalog)
    return install(merged.freeze(), type(name, (base,), {}))


install(DEFAULT_CATALOG, AssertionHandler)
