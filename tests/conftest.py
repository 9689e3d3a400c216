"""Pytest fixtures for tallyfile tests."""

from collections.abc import Callable
from io import StringIO

import pytest
from rich.console import Console

from tallyfile.ui.console import TALLY_THEME


def scripted_keys(*keys: object) -> Callable[[], str]:
    """Return a ``read_key`` replacement that yields *keys* in order.

    Passing ``KeyboardInterrupt`` raises it instead, the way ``readchar``
    reports ctrl-c.
    """
    pending = iter(keys)

    def read_key() -> str:
        try:
            pressed = next(pending)
        except StopIteration:
            raise AssertionError("ran out of scripted keys") from None
        if pressed is KeyboardInterrupt:
            raise KeyboardInterrupt
        return pressed  # type: ignore[return-value]

    return read_key


@pytest.fixture
def keys():
    """Factory for scripted key readers: ``keys("+", "+", "q")``."""
    return scripted_keys


@pytest.fixture
def test_console():
    """A non-terminal console that records everything printed."""
    return Console(file=StringIO(), width=120, theme=TALLY_THEME)


@pytest.fixture
def counter_path(tmp_path):
    """Path for a counter file that does not exist yet."""
    return tmp_path / "count.txt"
