"""Run log commands for the runtrack CLI."""

import json
from datetime import datetime

import typer

from src.cli import display
from src.tracking.config import get_settings
from src.tracking.errors import RunStoreError
from src.tracking.models import Run
from src.tracking.store import RunStore


def get_store() -> RunStore:
    """Run store at the configured path."""
    return RunStore(get_settings().store_path)


def list_runs(
    offset: int = typer.Option(0, "--offset", "-o", help="Pagination offset"),
    limit: int = typer.Option(20, "--limit", "-n", help="Number of runs"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """List stored runs, newest first."""
    store = get_store()
    try:
        total = store.count()
        runs = store.list_runs(offset=offset, limit=limit)
    except RunStoreError as e:
        display.display_error(str(e))
        raise typer.Exit(1) from e

    if json_output:
        data = [run.model_dump(mode="json", by_alias=True, exclude={"route"}) for run in runs]
        print(json.dumps(data, indent=2))
    elif not runs:
        display.display_info("No runs yet. Record one with 'runtrack track FILE'")
    else:
        display.display_runs(runs, total, get_settings().unit_system)


def show(
    run_id: str = typer.Argument(..., help="Run id or unique prefix"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Show a single run."""
    try:
        run = get_store().get_run(run_id)
    except RunStoreError as e:
        display.display_error(str(e))
        raise typer.Exit(1) from e

    if json_output:
        print(run.model_dump_json(indent=2, by_alias=True))
    else:
        display.display_run(run, get_settings().unit_system)


def delete(
    run_id: str = typer.Argument(..., help="Run id or unique prefix"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
) -> None:
    """Delete a run from the log."""
    store = get_store()
    try:
        run = store.get_run(run_id)
        if not yes and not typer.confirm(f"Delete run {run.run_id[:8]} from {run.run_date}?"):
            display.display_info("Cancelled")
            raise typer.Exit()
        store.delete_run(run.run_id)
    except RunStoreError as e:
        display.display_error(str(e))
        raise typer.Exit(1) from e

    display.display_success(f"Deleted run {run.run_id[:8]}")


def share(
    run_id: str = typer.Argument(..., help="Run id or unique prefix"),
    private: bool = typer.Option(False, "--private", help="Stop sharing the run"),
) -> None:
    """Make a run public (or private again)."""
    try:
        run = get_store().set_public(run_id, not private)
    except RunStoreError as e:
        display.display_error(str(e))
        raise typer.Exit(1) from e

    if run.is_public:
        display.display_success(f"Run {run.run_id[:8]} is public: {run.share_url}")
    else:
        display.display_success(f"Run {run.run_id[:8]} is private")


def add(
    distance: float = typer.Option(..., "--distance", "-d", help="Distance in km"),
    duration: int = typer.Option(..., "--duration", "-t", help="Duration in minutes"),
    run_date: datetime | None = typer.Option(
        None, "--date", formats=["%Y-%m-%d"], help="Run date (default today)"
    ),
    notes: str | None = typer.Option(None, "--notes", "-n", help="Free-form notes"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Log a run by hand without a GPS track."""
    if distance <= 0:
        raise typer.BadParameter("Distance must be greater than zero", param_hint="--distance")
    if duration <= 0:
        raise typer.BadParameter("Duration must be greater than zero", param_hint="--duration")

    try:
        run = get_store().add_run(
            Run.from_entry(
                distance,
                duration,
                notes=notes,
                run_date=run_date.date() if run_date else None,
            )
        )
    except (ValueError, RunStoreError) as e:
        display.display_error(str(e))
        raise typer.Exit(1) from e

    if json_output:
        print(run.model_dump_json(indent=2, by_alias=True))
    else:
        display.display_success(f"Saved run {run.run_id[:8]}")
        display.display_run(run, get_settings().unit_system)
