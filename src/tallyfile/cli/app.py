"""Main Typer application for tallyfile.

A single command: ``tallyfile PATH [START_VALUE] [--no-sync]``.
"""

import typer

from tallyfile.cli.commands import count_command

app = typer.Typer(
    name="tallyfile",
    help="Tally counter with file-backed storage",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"max_content_width": 110},
)

app.command(name="count")(count_command)


def main() -> None:
    """Console-script entry point."""
    app()
