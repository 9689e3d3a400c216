"""Blocking single-key choice reader.

``read_choice`` knows how to read one key; the caller decides what each key
means by passing a ``{key: outcome}`` mapping. The same reader drives the
counter prompt and the overwrite confirmation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import readchar
from readchar import key
from rich.control import Control
from rich.segment import ControlType

from tallyfile.core.exceptions import ConfigError
from tallyfile.ui.console import console as default_console

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from rich.console import Console
    from rich.text import Text

T = TypeVar("T")

# Terminals disagree on what Enter and Backspace send
NAMED_KEY_CODES: dict[str, tuple[str, ...]] = {
    "space": (key.SPACE,),
    "backspace": tuple(dict.fromkeys((key.BACKSPACE, "\x7f", "\x08"))),
    "enter": tuple(dict.fromkeys((key.ENTER, "\r", "\n"))),
    "tab": (key.TAB,),
    "esc": (key.ESC,),
    "ctrl-c": (key.CTRL_C,),
}


def parse_key_name(name: str) -> tuple[str, ...]:
    """Return the key strings ``readchar`` produces for a configured key name.

    Raises:
        ConfigError: If *name* is neither a single character nor a known key name.
    """
    if len(name) == 1:
        return (name,)
    try:
        return NAMED_KEY_CODES[name.lower()]
    except KeyError:
        msg = f"Unknown key name: {name!r}"
        raise ConfigError(msg) from None


def build_choice_map(groups: Mapping[T, Iterable[str]]) -> dict[str, T]:
    """Build a ``{key: outcome}`` mapping from ``{outcome: [key names]}``.

    Raises:
        ConfigError: If a key is bound to two different outcomes.
    """
    choices: dict[str, T] = {}
    for outcome, names in groups.items():
        for name in names:
            for code in parse_key_name(name):
                if code in choices and choices[code] != outcome:
                    msg = f"Key {name!r} is bound to both {choices[code]} and {outcome}"
                    raise ConfigError(msg)
                choices[code] = outcome
    return choices


def render_prompt(prompt: str | Text, console: Console) -> None:
    """Overwrite the current line with *prompt*, leaving the cursor after it."""
    console.control(
        Control.move_to_column(0),
        Control((ControlType.ERASE_IN_LINE, 2)),
    )
    console.print(prompt, end="", markup=False, highlight=False, soft_wrap=True)


def read_choice(
    prompt: str | Text,
    choices: Mapping[str, T],
    *,
    read_key: Callable[[], str] | None = None,
    console: Console | None = None,
) -> T:
    """Show *prompt* and block until a key in *choices* is pressed.

    Keys not in *choices* are ignored and the prompt is redrawn. Ctrl-C,
    which ``readchar`` raises as ``KeyboardInterrupt``, counts as the key
    ``readchar.key.CTRL_C``; when that key is not bound the interrupt
    propagates.
    """
    read_key = read_key or readchar.readkey
    out = console or default_console

    while True:
        render_prompt(prompt, out)
        try:
            pressed = read_key()
        except KeyboardInterrupt:
            if key.CTRL_C not in choices:
                raise
            pressed = key.CTRL_C
        if pressed in choices:
            return choices[pressed]


__all__ = [
    "NAMED_KEY_CODES",
    "build_choice_map",
    "parse_key_name",
    "read_choice",
    "render_prompt",
]
