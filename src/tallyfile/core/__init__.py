"""Domain layer: counter arithmetic, configuration models and errors."""

from tallyfile.core.config import KeysConfig, LoggingConfig, StorageConfig, TallyConfig
from tallyfile.core.counter import INT64_MAX, INT64_MIN, Counter, StepResult
from tallyfile.core.exceptions import (
    ConfigError,
    InvalidDataError,
    StorageError,
    TallyError,
    UserAbort,
)

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "ConfigError",
    "Counter",
    "InvalidDataError",
    "KeysConfig",
    "LoggingConfig",
    "StepResult",
    "StorageConfig",
    "StorageError",
    "TallyConfig",
    "TallyError",
    "UserAbort",
]
