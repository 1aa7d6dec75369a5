"""Stats commands for the runtrack CLI."""

import typer

from src.cli import display
from src.cli.commands.runs import get_store
from src.tracking.config import get_settings
from src.tracking.errors import RunStoreError
from src.tracking.stats import compute_stats


def overall(
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Show overall running statistics."""
    try:
        runs = get_store().list_runs()
    except RunStoreError as e:
        display.display_error(str(e))
        raise typer.Exit(1) from e

    stats = compute_stats(runs)

    if json_output:
        print(stats.model_dump_json(indent=2))
    else:
        display.display_overall_stats(stats, get_settings().unit_system)
