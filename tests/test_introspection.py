"""Tests for value classification, rendering and phrase casing."""

import datetime
import functools
import re

import pytest

from pavlov.introspection import UNDEFINED, classify, render, to_phrase


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y


class BrokenStr:
    def __str__(self):
        raise RuntimeError("no string for you")


def sample_function():
    return 42


# --- classify ---


@pytest.mark.parametrize(
    "value,expected",
    [
        (UNDEFINED, "undefined"),
        (None, "null"),
        ("x", "string"),
        ("", "string"),
        (0, "number"),
        (1.5, "number"),
        (True, "boolean"),
        (False, "boolean"),
        ([], "array"),
        ((1, 2), "array"),
        ({}, "object"),
        (Point(1, 2), "object"),
        (sample_function, "function"),
        (lambda: None, "function"),
        (len, "function"),
        (functools.partial(sample_function), "function"),
        (Point, "function"),
        (re.compile("a+"), "regexp"),
        (datetime.datetime.now(), "date"),
        (datetime.date.today(), "date"),
        (ValueError("bad"), "error"),
        ({1, 2}, "set"),
        (b"raw", "bytes"),
    ],
)
def test_classify(value, expected):
    assert classify(value) == expected


def test_classify_cyclic_structure():
    cycle = []
    cycle.append(cycle)
    assert classify(cycle) == "array"


def test_classify_bound_method():
    assert classify(Point(1, 2).__init__) == "function"


def test_undefined_is_singleton_and_falsy():
    assert type(UNDEFINED)() is UNDEFINED
    assert not UNDEFINED
    assert repr(UNDEFINED) == "undefined"


# --- render ---


def test_render_string_is_quoted():
    assert render("x") == '"x"'


def test_render_array_joins_elements():
    assert render([1, 2]) == "[1,2]"
    assert render((1, 2)) == "[1,2]"


def test_render_array_elements_use_plain_strings():
    assert render(["a", "b"]) == "[a,b]"


def test_render_nested_array():
    assert render([1, [2, 3]]) == "[1,[2,3]]"


def test_render_empty_array():
    assert render([]) == "[]"


def test_render_function_is_marker():
    assert render(sample_function) == "function()"
    assert render(lambda: 1) == "function()"


def test_render_function_verbose_shows_source():
    rendered = render(sample_function, verbose=True)
    assert rendered.startswith("def sample_function():")
    assert "return 42" in rendered


def test_render_builtin_verbose_falls_back():
    assert render(len, verbose=True) == str(len)


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, "None"),
        (UNDEFINED, "undefined"),
        (5, "5"),
        (True, "True"),
        ({"a": 1}, "{'a': 1}"),
    ],
)
def test_render_default_string_form(value, expected):
    assert render(value) == expected


def test_render_never_raises_on_broken_str():
    rendered = render(BrokenStr())
    assert "BrokenStr object" in rendered


def test_render_cyclic_array_does_not_loop():
    cycle = [1]
    cycle.append(cycle)
    assert render(cycle) == "[1,[...]]"
    assert render([cycle]) == "[[1,[...]]]"


# --- to_phrase ---


@pytest.mark.parametrize(
    "name,expected",
    [
        ("isNotEqualTo", "is not equal to"),
        ("is_not_equal_to", "is not equal to"),
        ("IsTrue", "is true"),
        ("equals", "equals"),
        ("pass_", "pass"),
        ("isRegExp", "is reg exp"),
    ],
)
def test_to_phrase(name, expected):
    assert to_phrase(name) == expected


def test_render_array_leaves_missing_elements_empty():
    assert render([None, 1]) == "[,1]"
    assert render([1, UNDEFINED, 3]) == "[1,,3]"
    assert render([[None]]) == "[[]]"
