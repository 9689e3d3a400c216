"""Scoped raw-mode and cursor guard for interactive prompts.

``RawTerminal`` switches stdin to unbuffered, no-echo input and hides the
cursor on entry, and restores both on every exit path: normal return,
exceptions, and SIGTERM/SIGHUP (turned into ``SystemExit`` while the guard is
active so the restore still runs).
"""

from __future__ import annotations

import os
import signal
import sys
import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, TextIO

from tallyfile.ui.console import console as default_console

if TYPE_CHECKING:
    from collections.abc import Iterator

    from rich.console import Console

try:  # POSIX-only import guarded for portability.
    import termios  # type: ignore[attr-defined]
except ImportError:  # pragma: no cover - Windows has no termios; readchar handles raw reads there.
    termios = None

_EXIT_SIGNALS = tuple(
    sig for sig in (getattr(signal, "SIGTERM", None), getattr(signal, "SIGHUP", None)) if sig is not None
)


def _exit_on_signal(signum: int, frame: Any) -> None:
    raise SystemExit(128 + signum)


class RawTerminal:
    """Context manager owning the terminal input mode and cursor visibility."""

    def __init__(self, console: Console | None = None, stream: TextIO | None = None) -> None:
        self.console = console or default_console
        self._stream = stream if stream is not None else sys.stdin
        self._fd: int | None = None
        self._saved_attrs: list[Any] | None = None
        self._saved_handlers: dict[int, Any] = {}
        self.active = False

    def _tty_fileno(self) -> int | None:
        if termios is None:
            return None
        try:
            fd = self._stream.fileno()
        except (AttributeError, OSError, ValueError):
            return None
        return fd if os.isatty(fd) else None

    @property
    def is_raw(self) -> bool:
        return self._saved_attrs is not None

    def _enter_raw(self) -> None:
        fd = self._tty_fileno()
        if fd is None:
            return
        saved = termios.tcgetattr(fd)
        raw = termios.tcgetattr(fd)
        raw[3] &= ~(termios.ICANON | termios.ECHO | termios.ISIG | termios.IEXTEN)
        raw[6][termios.VMIN] = 1
        raw[6][termios.VTIME] = 0
        termios.tcsetattr(fd, termios.TCSADRAIN, raw)
        self._fd = fd
        self._saved_attrs = saved

    def _leave_raw(self) -> None:
        if self._saved_attrs is None or self._fd is None:
            return
        try:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved_attrs)
        finally:
            self._saved_attrs = None

    def _install_signal_handlers(self) -> None:
        if threading.current_thread() is not threading.main_thread():
            return
        for sig in _EXIT_SIGNALS:
            self._saved_handlers[sig] = signal.signal(sig, _exit_on_signal)

    def _restore_signal_handlers(self) -> None:
        while self._saved_handlers:
            sig, handler = self._saved_handlers.popitem()
            signal.signal(sig, handler)

    def __enter__(self) -> RawTerminal:
        self._install_signal_handlers()
        try:
            self._enter_raw()
            self.console.show_cursor(False)
        except BaseException:
            self._leave_raw()
            self._restore_signal_handlers()
            raise
        self.active = True
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.active = False
        try:
            self.console.show_cursor(True)
            self.console.line()
        finally:
            try:
                self._leave_raw()
            finally:
                self._restore_signal_handlers()

    @contextmanager
    def suspend(self) -> Iterator[None]:
        """Temporarily return to normal mode, e.g. to print a full line."""
        if not self.active:
            yield
            return
        self._leave_raw()
        self.console.show_cursor(True)
        try:
            yield
        finally:
            self._enter_raw()
            self.console.show_cursor(False)


__all__ = ["RawTerminal"]
