#!/usr/bin/env python3
"""
runtrack - GPS run tracker CLI

Usage:
    runtrack track FILE          # Replay a recorded GPS track and save the run
    runtrack track FILE -p 60-90 # ...with a pause from 60s to 90s
    runtrack runs                # List stored runs
    runtrack add -d 5 -t 28      # Log a 5 km run of 28 minutes by hand
    runtrack stats               # Show overall statistics
    runtrack show ID             # Show a single run
    runtrack share ID            # Share a run publicly
    runtrack delete ID           # Delete a run
"""

import logging

import typer
from rich.console import Console

from src.cli import __version__
from src.cli.commands import runs, stats, track
from src.tracking.config import get_settings

# Create the main app
app = typer.Typer(
    name="runtrack",
    help="Track runs from GPS samples in the terminal.",
    no_args_is_help=True,
    add_completion=True,
)

# Console for output
console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"runtrack version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-v", callback=version_callback, is_eager=True, help="Show version"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """
    runtrack - Track runs from GPS samples in the terminal.
    """
    level = "DEBUG" if verbose else get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register commands directly on the app
app.command(name="track")(track.track)
app.command(name="runs")(runs.list_runs)
app.command(name="add")(runs.add)
app.command(name="show")(runs.show)
app.command(name="delete")(runs.delete)
app.command(name="share")(runs.share)
app.command(name="stats")(stats.overall)


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
