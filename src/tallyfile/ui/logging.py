"""Logging configuration for tallyfile."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime
from pathlib import Path

from rich.logging import RichHandler

from tallyfile.ui.console import VERSION, err_console

# Module-level logger (configured by setup_logging)
_logger: logging.Logger | None = None

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


class JSONFormatter(logging.Formatter):
    """JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_record)


def setup_logging(
    log_file: Path | None = None,
    verbose: bool = False,
    level: int = logging.INFO,
) -> None:
    """Configure logging for tallyfile.

    Nothing is logged unless a log file is given or *verbose* is set. Verbose
    records go to stderr so the counter prompt on stdout stays on one line.
    """
    global _logger

    if log_file is None and not verbose:
        _logger = None
        return

    _logger = logging.getLogger("tallyfile")
    _logger.setLevel(level)
    _logger.handlers.clear()
    _logger.propagate = False

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setLevel(level)

        if log_file.suffix == ".json":
            file_formatter: logging.Formatter = JSONFormatter()
        else:
            file_formatter = logging.Formatter(
                "%(asctime)s | %(levelname)-5s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )

        file_handler.setFormatter(file_formatter)
        _logger.addHandler(file_handler)

    if verbose:
        console_handler = RichHandler(
            console=err_console,
            show_time=False,
            show_path=False,
            markup=False,
        )
        console_handler.setLevel(level)
        _logger.addHandler(console_handler)

    _logger.info(f"tallyfile v{VERSION} - Session Started")
    _logger.info(f"Command: {' '.join(sys.argv)}")
    _logger.debug(f"Python: {sys.version.split()[0]} | Platform: {sys.platform}")


def level_from_name(name: str) -> int:
    """Translate a configuration level name (``"INFO"``) to a logging level."""
    return _LEVELS.get(name.lower(), logging.INFO)


def log(message: str, level: str = "info") -> None:
    """Log a message (if logging is enabled)."""
    if _logger is None:
        return

    _logger.log(level_from_name(level), message)


def close_logging() -> None:
    """Close logging and release the log file."""
    global _logger

    if _logger is None:
        return

    _logger.info("tallyfile Session Ended")

    for handler in _logger.handlers[:]:
        handler.close()
        _logger.removeHandler(handler)
    _logger = None


__all__ = [
    "JSONFormatter",
    "close_logging",
    "level_from_name",
    "log",
    "setup_logging",
]
