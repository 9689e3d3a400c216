"""Configuration models for tallyfile."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

# Key names accepted in the [keys] table besides single characters
NAMED_KEYS = ("space", "backspace", "enter", "tab", "esc", "ctrl-c")


class StorageConfig(BaseModel):
    """How the counter value is written to disk."""

    model_config = ConfigDict(extra="forbid")

    sync: bool = Field(
        default=True,
        description="Force a data sync to the storage device after every write.",
    )
    trailing_newline: bool = Field(
        default=False,
        description="Terminate the stored value with a newline.",
    )


class KeysConfig(BaseModel):
    """Key bindings for the counter prompt.

    Each entry is either a single character or one of the named keys
    ``space``, ``backspace``, ``enter``, ``tab``, ``esc`` and ``ctrl-c``.

    Example TOML:
        [keys]
        increment = ["+", "=", "space"]
        decrement = ["-", "_", "backspace"]
        quit = ["q", "Q", "ctrl-c"]
    """

    model_config = ConfigDict(extra="forbid")

    increment: list[str] = Field(
        default_factory=lambda: ["+", "=", "space"],
        min_length=1,
        description="Keys that add one to the counter.",
    )
    decrement: list[str] = Field(
        default_factory=lambda: ["-", "_", "backspace"],
        min_length=1,
        description="Keys that subtract one from the counter.",
    )
    quit: list[str] = Field(
        default_factory=lambda: ["q", "Q", "ctrl-c"],
        min_length=1,
        description="Keys that end the session.",
    )

    @field_validator("increment", "decrement", "quit")
    @classmethod
    def _check_key_names(cls, keys: list[str]) -> list[str]:
        for name in keys:
            if len(name) != 1 and name.lower() not in NAMED_KEYS:
                msg = f"unknown key {name!r} (use a single character or one of {', '.join(NAMED_KEYS)})"
                raise ValueError(msg)
        return keys

    @model_validator(mode="after")
    def _check_no_shared_keys(self) -> "KeysConfig":
        seen: dict[str, str] = {}
        for action in ("increment", "decrement", "quit"):
            for name in getattr(self, action):
                key = name if len(name) == 1 else name.lower()
                if key in seen and seen[key] != action:
                    msg = f"key {name!r} is bound to both {seen[key]} and {action}"
                    raise ValueError(msg)
                seen[key] = action
        return self


class LoggingConfig(BaseModel):
    """Optional session log."""

    model_config = ConfigDict(extra="forbid")

    file: Path | None = Field(
        default=None,
        description="Log file path; a .json suffix selects JSON lines.",
    )
    level: LogLevel = Field(default="INFO", description="Minimum level written to the log.")


class TallyConfig(BaseModel):
    """Top-level tallyfile configuration.

    Example TOML configuration:
        [storage]
        sync = true
        trailing_newline = false

        [keys]
        increment = ["+", "=", "space"]

        [logging]
        file = "tally.log"
        level = "INFO"
    """

    model_config = ConfigDict(extra="forbid")

    storage: StorageConfig = Field(default_factory=StorageConfig)
    keys: KeysConfig = Field(default_factory=KeysConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


__all__ = [
    "NAMED_KEYS",
    "KeysConfig",
    "LogLevel",
    "LoggingConfig",
    "StorageConfig",
    "TallyConfig",
]
