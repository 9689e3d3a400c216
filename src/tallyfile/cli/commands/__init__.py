"""CLI command modules for tallyfile.

Each module exports a command function carrying its Typer annotations;
app.py imports and registers them.
"""

from tallyfile.cli.commands.count import count_command, run_counter

__all__ = ["count_command", "run_counter"]
