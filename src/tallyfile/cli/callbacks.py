"""Typer callbacks for CLI."""

import typer

from tallyfile.io.config import generate_default_config
from tallyfile.ui import console, show_version


def version_callback(value: bool | None) -> None:
    """Show version information and exit."""
    if value:
        show_version()
        raise typer.Exit


def default_config_callback(value: bool | None) -> None:
    """Print a commented default configuration file and exit."""
    if value:
        console.print(generate_default_config(), markup=False, highlight=False, soft_wrap=True, end="")
        raise typer.Exit
