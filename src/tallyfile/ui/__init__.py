"""UI and terminal handling for tallyfile.

Submodules:
- console: Theme and console instances
- logging: Logging setup and the ``log`` helper
- branding: Version display
- messages: Status messages (error, warning)
- terminal: Raw-mode and cursor guard
- keys: Single-key choice reader and key bindings
"""

from tallyfile.ui.branding import show_version
from tallyfile.ui.console import TALLY_THEME, VERSION, console, err_console, icon
from tallyfile.ui.keys import build_choice_map, parse_key_name, read_choice, render_prompt
from tallyfile.ui.logging import close_logging, level_from_name, log, setup_logging
from tallyfile.ui.messages import error, warning
from tallyfile.ui.terminal import RawTerminal

__all__ = [
    "TALLY_THEME",
    "VERSION",
    "RawTerminal",
    "build_choice_map",
    "close_logging",
    "console",
    "err_console",
    "error",
    "icon",
    "level_from_name",
    "log",
    "parse_key_name",
    "read_choice",
    "render_prompt",
    "setup_logging",
    "show_version",
    "warning",
]
