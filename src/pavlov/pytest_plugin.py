"""pytest plugin exposing pavlov's entry point as a fixture."""

from __future__ import annotations

import pytest


@pytest.fixture
def assert_that():
    """The ``pavlov.assert_that`` entry point.

    Example::

        def test_count(assert_that):
            assert_that(len(items), "item count").is_equal_to(3)
    """
    from pavlov import assert_that as _assert_that

    return _assert_that
