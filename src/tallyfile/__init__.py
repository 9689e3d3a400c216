"""tallyfile - Terminal tally counter with file-backed storage.

Public API:
    - CounterStore: Load, persist and close the counter file
    - TallySession: Keystroke-driven interaction loop

Configuration:
    - TallyConfig: Main configuration object
    - StorageConfig, KeysConfig, LoggingConfig: Sub-configurations
"""

import contextlib
from importlib import metadata

__version__ = "0.1.0"

with contextlib.suppress(metadata.PackageNotFoundError):
    __version__ = metadata.version(__name__)

from tallyfile.core.config import KeysConfig, LoggingConfig, StorageConfig, TallyConfig
from tallyfile.core.counter import INT64_MAX, INT64_MIN, Counter, StepResult
from tallyfile.core.exceptions import (
    ConfigError,
    InvalidDataError,
    StorageError,
    TallyError,
    UserAbort,
)
from tallyfile.io.store import CounterStore, LoadResult
from tallyfile.services import TallySession, initialize_counter

__all__ = [
    # Version
    "__version__",
    # Services
    "CounterStore",
    "LoadResult",
    "TallySession",
    "initialize_counter",
    # Configuration
    "TallyConfig",
    "StorageConfig",
    "KeysConfig",
    "LoggingConfig",
    # Domain
    "Counter",
    "StepResult",
    "INT64_MAX",
    "INT64_MIN",
    # Errors
    "TallyError",
    "ConfigError",
    "StorageError",
    "InvalidDataError",
    "UserAbort",
]
