"""UI messages and status indicators."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .console import console as default_console
from .console import err_console, icon
from .logging import log

if TYPE_CHECKING:
    from rich.console import Console

__all__ = [
    "error",
    "warning",
]


def warning(message: str, *, console: Console | None = None, do_log: bool = True) -> None:
    """Display a warning message on its own line."""
    out = console or default_console
    out.print(f"[warning]{icon('warn')}[/warning]  {message}", highlight=False)
    if do_log:
        log(message, level="warning")


def error(message: str, do_log: bool = True) -> None:
    """Display an error message on stderr."""
    err_console.print(f"[error]{icon('error')} Error:[/error] {message}", highlight=False)
    if do_log:
        log(message, level="error")
