"""Configuration file loading."""

import tomllib
from pathlib import Path

from pydantic import ValidationError

from tallyfile.core.config import TallyConfig
from tallyfile.core.exceptions import ConfigError


def load_config(path: Path) -> TallyConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the TOML configuration file.

    Returns:
        TallyConfig: Validated configuration object.

    Raises:
        ConfigError: If the file is missing, is not valid TOML, or fails validation.
    """
    if not path.exists():
        msg = f"Configuration file not found: {path}"
        raise ConfigError(msg)

    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {path}: {e}"
        raise ConfigError(msg) from e
    except OSError as e:
        msg = f"Cannot read configuration file {path}: {e.strerror or e}"
        raise ConfigError(msg) from e

    try:
        return TallyConfig.model_validate(data)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        msg = f"Invalid configuration in {path}: {details}"
        raise ConfigError(msg) from e


def generate_default_config() -> str:
    """Generate a default configuration file as a string.

    Returns:
        str: TOML-formatted default configuration.
    """
    return """# tallyfile configuration
# Generated automatically - edit as needed

[storage]
sync = true              # sync data to disk after every change
trailing_newline = false # end the stored value with a newline

[keys]
# Single characters or: space, backspace, enter, tab, esc, ctrl-c
increment = ["+", "=", "space"]
decrement = ["-", "_", "backspace"]
quit = ["q", "Q", "ctrl-c"]

[logging]
# file = "tally.log"     # uncomment to keep a session log (.json for JSON lines)
level = "INFO"
"""
