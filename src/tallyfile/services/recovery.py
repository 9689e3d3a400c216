"""Counter initialization with recovery from non-counter file content.

When the counter file does not start with an integer and no explicit start
value was given, the user decides whether the content may be overwritten.
Nothing is written until that decision is made.
"""

from __future__ import annotations

from contextlib import nullcontext
from enum import Enum
from typing import TYPE_CHECKING

from rich.markup import escape

from tallyfile.core.exceptions import InvalidDataError, UserAbort
from tallyfile.io.store import CounterStore
from tallyfile.ui.console import console as default_console
from tallyfile.ui.keys import build_choice_map, read_choice
from tallyfile.ui.logging import log
from tallyfile.ui.messages import warning

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from rich.console import Console

    from tallyfile.ui.terminal import RawTerminal


class RecoveryChoice(Enum):
    """Answer to the overwrite prompt."""

    YES = "yes"
    NO = "no"
    QUIT = "quit"


OVERWRITE_PROMPT = "File contains non-counter data. Use anyway? (data will be lost!)  [y/n]"

RECOVERY_KEYS = {
    RecoveryChoice.YES: ["y", "Y"],
    RecoveryChoice.NO: ["n", "N"],
    RecoveryChoice.QUIT: ["q", "Q", "ctrl-c"],
}


def ask_overwrite(
    *,
    read_key: Callable[[], str] | None = None,
    console: Console | None = None,
) -> RecoveryChoice:
    """Ask whether non-counter data may be overwritten (y/n, q to quit)."""
    return read_choice(
        OVERWRITE_PROMPT,
        build_choice_map(RECOVERY_KEYS),
        read_key=read_key,
        console=console,
    )


def prompt_overwrite(
    content: str,
    *,
    terminal: RawTerminal | None = None,
    read_key: Callable[[], str] | None = None,
    console: Console | None = None,
) -> RecoveryChoice:
    """Show the offending content, then run ``ask_overwrite`` on its own line."""
    out = console or default_console
    preview = content if len(content) <= 60 else content[:57] + "..."
    with terminal.suspend() if terminal is not None else nullcontext():
        warning(f"First line: {escape(repr(preview))}", console=out, do_log=False)

    choice = ask_overwrite(read_key=read_key, console=out)
    out.line()
    return choice


def initialize_counter(
    path: Path | str,
    start_value: int | None = None,
    *,
    sync: bool = True,
    trailing_newline: bool = False,
    confirm: Callable[[str], RecoveryChoice],
) -> CounterStore:
    """Open the counter file, resolve invalid content, and write the starting value.

    Args:
        path: Counter file, created if missing.
        start_value: Explicit starting value; overrides the file content.
        sync: Force a data sync after every write.
        trailing_newline: Terminate the stored value with a newline.
        confirm: Called with the offending first line when the file holds
            non-counter data.

    Returns:
        An open ``CounterStore`` whose file already holds the starting value.

    Raises:
        StorageError: If the file cannot be opened, read or written.
        InvalidDataError: If the user refused to overwrite non-counter data.
        UserAbort: If the user chose to quit at the overwrite prompt.
    """
    store, result = CounterStore.open(
        path,
        start_value,
        sync=sync,
        trailing_newline=trailing_newline,
    )
    try:
        if result.was_invalid:
            assert result.invalid_content is not None
            choice = confirm(result.invalid_content)
            log(f"Overwrite prompt answered: {choice.value}")
            if choice is RecoveryChoice.NO:
                msg = "File contained non-counter data"
                raise InvalidDataError(msg)
            if choice is RecoveryChoice.QUIT:
                msg = "Quit at the overwrite prompt"
                raise UserAbort(msg)
            store.reset(0)
        store.persist()
    except BaseException:
        store.close()
        raise
    return store


__all__ = [
    "OVERWRITE_PROMPT",
    "RECOVERY_KEYS",
    "RecoveryChoice",
    "ask_overwrite",
    "initialize_counter",
    "prompt_overwrite",
]
