"""Count command implementation."""

from __future__ import annotations

from functools import partial
from pathlib import Path  # Required at runtime by Typer  # noqa: TC003
from typing import TYPE_CHECKING, Annotated

import typer  # Required at runtime by Typer

from tallyfile.cli.callbacks import default_config_callback, version_callback
from tallyfile.core.config import TallyConfig
from tallyfile.core.counter import INT64_MAX, INT64_MIN
from tallyfile.core.exceptions import TallyError
from tallyfile.io.config import load_config
from tallyfile.services import (
    TallySession,
    bindings_from_config,
    initialize_counter,
    key_hint,
    prompt_overwrite,
)
from tallyfile.ui import (
    RawTerminal,
    close_logging,
    console,
    error,
    level_from_name,
    log,
    setup_logging,
)

if TYPE_CHECKING:
    from collections.abc import Callable


def run_counter(
    path: Path,
    start_value: int | None,
    config: TallyConfig,
    *,
    read_key: Callable[[], str] | None = None,
) -> int:
    """Initialize the counter file and run the interactive session.

    The terminal guard wraps both the overwrite prompt and the counter loop,
    so every way out of here leaves the terminal in normal mode.

    Returns:
        The final count.
    """
    bindings = bindings_from_config(config.keys)

    with RawTerminal(console) as terminal:
        store = initialize_counter(
            path,
            start_value,
            sync=config.storage.sync,
            trailing_newline=config.storage.trailing_newline,
            confirm=partial(prompt_overwrite, terminal=terminal, read_key=read_key, console=console),
        )
        with store:
            session = TallySession(
                store,
                terminal=terminal,
                bindings=bindings,
                hint=key_hint(config.keys),
                read_key=read_key,
                console=console,
            )
            return session.run()


def count_command(
    path: Annotated[
        Path,
        typer.Argument(
            metavar="PATH",
            help="Path to file where the counter value is stored (will be overwritten)",
            show_default=False,
        ),
    ],
    start_value: Annotated[
        int | None,
        typer.Argument(
            metavar="START_VALUE",
            help="Starting value (default: value in PATH, else 0)",
            min=INT64_MIN,
            max=INT64_MAX,
            show_default=False,
        ),
    ] = None,
    no_sync: Annotated[
        bool,
        typer.Option(
            "--no-sync",
            "-n",
            help="Disable syncing of data to disk on every operation",
        ),
    ] = False,
    newline: Annotated[
        bool,
        typer.Option(
            "--newline",
            help="End the stored value with a newline",
        ),
    ] = False,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="TOML configuration file",
            dir_okay=False,
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Append a session log to this file (.json for JSON lines)",
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            help="Log session events to stderr",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    default_config: Annotated[
        bool | None,
        typer.Option(
            "--default-config",
            help="Print a default configuration file and exit.",
            callback=default_config_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Tally counter with file-backed storage.

    Press [bold]+[/], [bold]=[/] or [bold]space[/] to count up, [bold]-[/], [bold]_[/] or
    [bold]backspace[/] to count down, and [bold]q[/] or [bold]ctrl-c[/] to quit.
    The value is written to PATH after every change.

    Examples
    --------
      Resume the count stored in a file:
        $ tallyfile laps.txt

      Start over from 10, without syncing every write:
        $ tallyfile laps.txt 10 --no-sync

      Start from a negative value:
        $ tallyfile laps.txt -- -5
    """
    try:
        settings = load_config(config) if config is not None else TallyConfig()
        if no_sync:
            settings.storage.sync = False
        if newline:
            settings.storage.trailing_newline = True

        try:
            setup_logging(
                log_file or settings.logging.file,
                verbose=verbose,
                level=level_from_name(settings.logging.level),
            )
        except OSError as e:
            error(f"Cannot open log file: {e.strerror or e}")
            raise typer.Exit(code=1) from e

        final = run_counter(path, start_value, settings)
        log(f"Final count: {final}")
    except TallyError as e:
        error(str(e))
        raise typer.Exit(code=1) from e
    finally:
        close_logging()
