"""Input/output: counter file storage and configuration files."""

from tallyfile.io.config import generate_default_config, load_config
from tallyfile.io.store import CounterStore, LoadResult

__all__ = ["CounterStore", "LoadResult", "generate_default_config", "load_config"]
