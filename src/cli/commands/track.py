"""Track commands for the runtrack CLI."""

import logging
from pathlib import Path

import typer

from src.cli import display
from src.tracking.config import get_settings
from src.tracking.errors import RunStoreError, TrackFileError
from src.tracking.models import Run, TrackSnapshot
from src.tracking.replay import load_track, parse_pause_window, replay
from src.tracking.store import RunStore

logger = logging.getLogger(__name__)


def track(
    path: Path = typer.Argument(..., help="Recorded track (JSON list of GPS samples)"),
    pause: list[str] | None = typer.Option(
        None, "--pause", "-p", help="Pause window START-END in seconds (repeatable)"
    ),
    notes: str | None = typer.Option(None, "--notes", help="Notes stored with the run"),
    save: bool = typer.Option(True, "--save/--no-save", help="Store the run in the run log"),
    live: bool = typer.Option(False, "--live", "-l", help="Print status after each sample"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Replay a recorded GPS track as a tracking session."""
    settings = get_settings()
    unit = settings.unit_system

    try:
        windows = [parse_pause_window(text) for text in pause or []]
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--pause") from e

    try:
        events = load_track(path)
    except TrackFileError as e:
        display.display_error(str(e))
        raise typer.Exit(1) from e

    snapshots: list[TrackSnapshot] = []

    def show_progress(snapshot: TrackSnapshot) -> None:
        snapshots.append(snapshot)
        if live and not json_output:
            display.console.print(display.snapshot_line(snapshot, unit))

    result = replay(
        events,
        pauses=windows,
        options=settings.location_options,
        on_progress=show_progress,
    )
    summary = result.summary

    run: Run | None = None
    if save:
        try:
            run = RunStore(settings.store_path).add_summary(summary, notes=notes)
        except RunStoreError as e:
            display.display_error(str(e))
            raise typer.Exit(1) from e

    if json_output:
        print(summary.model_dump_json(indent=2, by_alias=True))
        return

    # Final live panel, also shown when the location source misbehaved
    if snapshots and (live or result.warnings):
        display.display_snapshot(snapshots[-1], unit, show_warning=False)
    for warning in result.warnings:
        display.display_warning(warning)
    display.display_summary(summary, unit)
    if run is not None:
        display.display_success(f"Saved run {run.run_id[:8]} to {settings.store_path}")
