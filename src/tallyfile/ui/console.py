"""Console configuration and theme for tallyfile UI.

This module provides the console instances and theme used throughout the
application for consistent styling. Prompts go to stdout; errors and
verbose logging go to stderr so they never interleave with the counter line.
"""

import os
import sys

from rich.console import Console
from rich.theme import Theme

try:
    from tallyfile import __version__ as _PKG_VERSION  # type: ignore
except Exception:
    _PKG_VERSION = "dev"

TALLY_THEME = Theme(
    {
        # --- Semantic Status ---
        "warning": "bold yellow",
        "error": "bold red",
        # --- UI Structure ---
        "header": "bold cyan",
        # --- Data & Values ---
        "key": "cyan",
        "number": "bold green",
        "hint": "dim",
    }
)

console = Console(theme=TALLY_THEME)
err_console = Console(theme=TALLY_THEME, stderr=True)

VERSION = _PKG_VERSION
LOGO_EMOJI = "🧮"

__all__ = [
    "LOGO_EMOJI",
    "TALLY_THEME",
    "VERSION",
    "console",
    "err_console",
    "icon",
]

_EMOJI_DISABLED = os.getenv("TALLYFILE_NO_EMOJI", "").lower() in {"1", "true", "yes"}


def _supports_emoji() -> bool:
    """Best-effort detection if the terminal supports Unicode symbols."""
    if _EMOJI_DISABLED:
        return False
    enc = getattr(console, "encoding", None) or sys.getdefaultencoding()
    return enc is None or "utf" in enc.lower()


def icon(name: str) -> str:
    """Return a UI icon string based on terminal capabilities.

    Names: warn, error
    """
    use_emoji = _supports_emoji()
    mapping = {
        "warn": "⚠" if use_emoji else "!",
        "error": "✗" if use_emoji else "x",
    }
    return mapping.get(name, mapping["warn"])
