"""CLI entry point for logshade."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from logshade.config import DEFAULT_CONFIG_PATH
from logshade.log import configure_logging
from logshade.reader import is_pipe, open_input
from logshade.utils import parse_duration

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False)


@app.command()
def run(
    config: Annotated[
        Path, typer.Option("--config", "-c", help="Path to the configuration file")
    ] = DEFAULT_CONFIG_PATH,
    input_file: Annotated[
        Path | None, typer.Option("--input", "-i", help="Path to the input log file (default: stdin)")
    ] = None,
    interval: Annotated[
        str, typer.Option("--interval", help="Polling interval for config file changes (e.g. 2s, 500ms)")
    ] = "2s",
    exit_on_eof: Annotated[
        bool, typer.Option("--exit-on-eof", help="Exit when input ends instead of watching the config")
    ] = False,
    force_terminal: Annotated[
        bool, typer.Option("--force-terminal", help="Emit clear and color codes even when stdout is not a terminal")
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug diagnostics")] = False,
) -> None:
    """Filter and colorize a log stream, re-rendering when the config file changes."""
    try:
        seconds = parse_duration(interval)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    try:
        stream = open_input(input_file)
    except OSError as e:
        typer.echo(f"Error opening input file: {e}", err=True)
        raise typer.Exit(1) from e

    configure_logging(verbose=verbose)
    if input_file is None and not is_pipe():
        logger.warning("Reading log lines from the terminal; pipe input or pass --input")

    from logshade.app import LogShadeApp

    console = Console(force_terminal=True) if force_terminal else None
    log_app = LogShadeApp(config, interval=seconds, console=console, exit_on_eof=exit_on_eof)
    try:
        with stream:
            ok = log_app.run(stream)
    except KeyboardInterrupt:
        log_app.stop()
        return

    if not ok:
        raise typer.Exit(1)


def main() -> None:
    """Entry point for the CLI."""
    app()
