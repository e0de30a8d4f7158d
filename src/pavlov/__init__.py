"""Fluent assertion helpers for test suites.

>>> from pavlov import assert_that
>>> assert_that(5, "count").is_equal_to(5)
"""

from __future__ import annotations

from typing import Any

from pavlov.assertions import DEFAULT_CATALOG, BinaryCheck, Catalog, CatalogError, UnaryCheck
from pavlov.handler import AssertionHandler, dispatch, install, make_handler_class
from pavlov.introspection import UNDEFINED, classify, render, to_phrase
from pavlov.primitives import AssertionFailure


def assert_that(value: Any = UNDEFINED, description: str | None = None) -> AssertionHandler:
    """Wrap *value* so a named check can be chained onto it."""
    return AssertionHandler(value, description)


def pass_(message: str | None = None) -> None:
    assert_that(UNDEFINED).pass_(message)


def fail(message: str | None = None) -> None:
    assert_that(UNDEFINED).fail(message)


__all__ = [
    "AssertionFailure",
    "AssertionHandler",
    "BinaryCheck",
    "Catalog",
    "CatalogError",
    "DEFAULT_CATALOG",
    "UNDEFINED",
    "UnaryCheck",
    "assert_that",
    "classify",
    "dispatch",
    "fail",
    "install",
    "make_handler_class",
    "pass_",
    "render",
    "to_phrase",
]
