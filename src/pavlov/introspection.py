"""Value classification and rendering used by default failure messages."""

from __future__ import annotations

import datetime
import functools
import inspect
import numbers
import re
from typing import Any


class _Undefined:
    """Sentinel for "no value was produced", distinct from ``None``."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Any = _Undefined()

# Order matters: bool is a Number, and classes are callable.
_KIND_TAGS: tuple[tuple[type | tuple[type, ...], str], ...] = (
    (bool, "boolean"),
    (str, "string"),
    (numbers.Number, "number"),
    ((list, tuple), "array"),
    (re.Pattern, "regexp"),
    ((datetime.date, datetime.time), "date"),
    (BaseException, "error"),
    ((set, frozenset), "set"),
    ((bytes, bytearray), "bytes"),
    ((functools.partial, type), "function"),
)


def classify(value: Any) -> str:
    """Return the lowercase kind tag of *value* (``"string"``, ``"array"``, ...)."""
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    for types, tag in _KIND_TAGS:
        if isinstance(value, types):
            return tag
    if inspect.isroutine(value):
        return "function"
    return "object"


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)


def _render_element(value: Any, seen: frozenset[int] = frozenset()) -> str:
    kind = classify(value)
    if kind in ("null", "undefined"):
        return ""
    if kind != "array":
        return _safe_str(value)
    if id(value) in seen:
        return "[...]"
    seen = seen | {id(value)}
    return "[" + ",".join(_render_element(v, seen) for v in value) + "]"


def render(value: Any, verbose: bool = False) -> str:
    """Convert *value* to a short human-readable string.

    Strings are quoted, arrays are bracketed with their elements joined by
    commas, and callables show up as ``function()`` unless *verbose* asks
    for their source text.
    """
    kind = classify(value)
    if kind == "string":
        return '"' + value + '"'
    if kind == "array":
        return _render_element(value)
    if kind == "function":
        if not verbose:
            return "function()"
        try:
            return inspect.getsource(value).strip()
        except (OSError, TypeError):
            return _safe_str(value)
    return _safe_str(value)


_CAPITAL = re.compile(r"(?<=.)(?=[A-Z])")
_SEPARATORS = re.compile(r"[\s_]+")


def to_phrase(name: str) -> str:
    """Turn a camel, Pascal or snake case identifier into a lowercase phrase.

    >>> to_phrase("isNotEqualTo")
    'is not equal to'
    >>> to_phrase("is_not_equal_to")
    'is not equal to'
    """
    spaced = _CAPITAL.sub(" ", name)
    return _SEPARATORS.sub(" ", spaced).strip().lower()
