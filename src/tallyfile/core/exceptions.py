"""Exception taxonomy for tallyfile.

Every failure surfaced to the command line derives from ``TallyError`` so the
CLI can report it with a readable message and a non-zero exit status.
Arithmetic limits are not errors; see ``tallyfile.core.counter.StepResult``.
"""

from __future__ import annotations

from pathlib import Path


class TallyError(Exception):
    """Base class for all tallyfile-specific exceptions."""


class ConfigError(TallyError):
    """Configuration-related errors (unreadable file, schema issues, key clashes)."""


class StorageError(TallyError):
    """Counter file errors (open, read, write, flush, sync)."""

    def __init__(self, path: Path | str, action: str, reason: str) -> None:
        self.path = Path(path)
        self.action = action
        self.reason = reason
        super().__init__(f"Cannot {action} counter file {self.path}: {reason}")


class InvalidDataError(TallyError):
    """The counter file holds non-counter data and the user declined to overwrite it."""


class UserAbort(TallyError):
    """The user asked to quit from an interactive prompt before the counter started."""


__all__ = [
    "ConfigError",
    "InvalidDataError",
    "StorageError",
    "TallyError",
    "UserAbort",
]
