"""Keystroke-driven interaction loop for the counter."""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING

from rich.text import Text

from tallyfile.core.config import KeysConfig
from tallyfile.core.counter import StepResult
from tallyfile.ui.console import console as default_console
from tallyfile.ui.keys import build_choice_map, read_choice
from tallyfile.ui.logging import log
from tallyfile.ui.messages import warning
from tallyfile.ui.terminal import RawTerminal

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from rich.console import Console

    from tallyfile.io.store import CounterStore


class SessionState(Enum):
    RUNNING = auto()
    QUITTING = auto()


class Action(Enum):
    """Logical choices offered by the counter prompt."""

    INCREMENT = "increment"
    DECREMENT = "decrement"
    QUIT = "quit"


_NOTICES = {
    StepResult.OVERFLOW: "overflow!",
    StepResult.UNDERFLOW: "underflow!",
}


def bindings_from_config(keys: KeysConfig) -> dict[str, Action]:
    """Build the ``{key: Action}`` map for the counter prompt."""
    return build_choice_map(
        {
            Action.INCREMENT: keys.increment,
            Action.DECREMENT: keys.decrement,
            Action.QUIT: keys.quit,
        }
    )


def key_hint(keys: KeysConfig) -> str:
    """Return the short ``+/-/q`` hint shown after the count."""
    return "/".join((keys.increment[0], keys.decrement[0], keys.quit[0]))


class TallySession:
    """Runs the counter prompt until a quit key is pressed.

    The session owns the store for its lifetime: every accepted increment or
    decrement is persisted before the next key is read. Steps that would
    leave the 64-bit range are reported and skipped without writing.
    """

    def __init__(
        self,
        store: CounterStore,
        *,
        terminal: RawTerminal | None = None,
        bindings: Mapping[str, Action] | None = None,
        hint: str | None = None,
        read_key: Callable[[], str] | None = None,
        console: Console | None = None,
    ) -> None:
        keys = KeysConfig()
        self.store = store
        self.console = console or default_console
        self.terminal = terminal or RawTerminal(self.console)
        self.bindings = dict(bindings) if bindings is not None else bindings_from_config(keys)
        self.hint = hint or key_hint(keys)
        self.read_key = read_key
        self.state = SessionState.RUNNING

    @property
    def value(self) -> int:
        return self.store.value

    def prompt(self) -> Text:
        return Text.assemble(
            ("Count: ", "key"),
            (str(self.store.value), "number"),
            (f"    [{self.hint}]", "hint"),
        )

    def apply(self, action: Action) -> StepResult | None:
        """Apply one choice; returns the step result, or None for quit."""
        if self.state is SessionState.QUITTING:
            msg = "session has already ended"
            raise RuntimeError(msg)

        if action is Action.QUIT:
            self.state = SessionState.QUITTING
            log(f"Quit with count {self.store.value}")
            return None

        counter = self.store.counter
        result = counter.increment() if action is Action.INCREMENT else counter.decrement()
        if result is StepResult.CHANGED:
            self.store.persist()
        else:
            self._notice(_NOTICES[result])
        return result

    def _notice(self, message: str) -> None:
        log(f"{message} (count stays {self.store.value})", level="warning")
        with self.terminal.suspend():
            self.console.line()
            warning(message, console=self.console, do_log=False)

    def run(self) -> int:
        """Loop until quit and return the final count."""
        while self.state is SessionState.RUNNING:
            action = read_choice(
                self.prompt(),
                self.bindings,
                read_key=self.read_key,
                console=self.console,
            )
            self.apply(action)
        return self.store.value


__all__ = [
    "Action",
    "SessionState",
    "TallySession",
    "bindings_from_config",
    "key_hint",
]
