"""In-memory counter value with checked 64-bit arithmetic."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class StepResult(Enum):
    """Outcome of a single increment or decrement."""

    CHANGED = auto()
    OVERFLOW = auto()
    UNDERFLOW = auto()


def in_range(value: int) -> bool:
    """Return True when *value* fits in a signed 64-bit integer."""
    return INT64_MIN <= value <= INT64_MAX


def parse_value(text: str) -> int | None:
    """Parse a stored counter line.

    Trailing whitespace is ignored. Returns None when the text is not a
    decimal signed integer or does not fit in 64 bits.
    """
    candidate = text.rstrip()
    if not _INTEGER_RE.fullmatch(candidate):
        return None
    value = int(candidate)
    return value if in_range(value) else None


def format_value(value: int) -> str:
    """Render *value* the way it is written to disk."""
    return str(value)


@dataclass(slots=True)
class Counter:
    """The tally value.

    Mutations never leave the signed 64-bit range: a step that would cross a
    bound leaves ``value`` untouched and reports it through ``StepResult``.
    """

    value: int = 0

    def __post_init__(self) -> None:
        if not in_range(self.value):
            msg = f"Counter value {self.value} is outside the 64-bit range"
            raise ValueError(msg)

    def increment(self) -> StepResult:
        if self.value == INT64_MAX:
            return StepResult.OVERFLOW
        self.value += 1
        return StepResult.CHANGED

    def decrement(self) -> StepResult:
        if self.value == INT64_MIN:
            return StepResult.UNDERFLOW
        self.value -= 1
        return StepResult.CHANGED


__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "Counter",
    "StepResult",
    "format_value",
    "in_range",
    "parse_value",
]
