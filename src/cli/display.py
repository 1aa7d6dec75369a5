"""Display utilities for the runtrack CLI with Rich formatting."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from src.tracking.models import (
    Run,
    RunSummary,
    TrackingPhase,
    TrackSnapshot,
    UnitSystem,
    format_distance,
    format_pace,
    format_speed,
    pace_for_unit,
)
from src.tracking.stats import RunStats

console = Console()

PHASE_BADGES = {
    TrackingPhase.TRACKING: "[bold red]●[/bold red] Recording",
    TrackingPhase.PAUSED: "[bold yellow]❚❚[/bold yellow] Paused",
    TrackingPhase.IDLE: "[dim]Idle[/dim]",
}


def format_duration(minutes: int) -> str:
    """Format whole minutes as "1h 05m" or "42m"."""
    hours, mins = divmod(minutes, 60)
    if hours > 0:
        return f"{hours}h {mins:02d}m"
    return f"{mins}m"


def snapshot_line(snapshot: TrackSnapshot, unit: UnitSystem = UnitSystem.METRIC) -> str:
    """One-line live status used while a track is replaying."""
    pace = format_pace(pace_for_unit(snapshot.current_pace_min_per_km, unit), unit)
    return (
        f"{PHASE_BADGES[snapshot.phase]}  {snapshot.formatted_elapsed}  "
        f"{format_distance(snapshot.distance_km, unit)}  {pace}  "
        f"{format_speed(snapshot.current_speed_kmh, unit)}  "
        f"[dim]{snapshot.sample_count} GPS points[/dim]"
    )


def display_snapshot(
    snapshot: TrackSnapshot,
    unit: UnitSystem = UnitSystem.METRIC,
    show_warning: bool = True,
) -> None:
    """Display the live metrics of a session."""
    table = Table.grid(padding=(0, 3))
    table.add_column(style="cyan")
    table.add_column(style="bold green", justify="right")

    table.add_row("Distance", format_distance(snapshot.distance_km, unit))
    table.add_row("Time", snapshot.formatted_elapsed)
    table.add_row(
        "Pace", format_pace(pace_for_unit(snapshot.current_pace_min_per_km, unit), unit)
    )
    table.add_row("Speed", format_speed(snapshot.current_speed_kmh, unit))
    table.add_row("Max Speed", format_speed(snapshot.max_speed_kmh, unit))
    table.add_row("Elevation", f"{snapshot.elevation_gain_m:.0f} m")
    table.add_row("GPS Points", str(snapshot.sample_count))

    console.print(
        Panel(
            table,
            title=f"[bold cyan]GPS Tracking[/bold cyan] {PHASE_BADGES[snapshot.phase]}",
            border_style="cyan",
        )
    )
    if show_warning and snapshot.last_warning:
        display_warning(snapshot.last_warning)


def display_summary(summary: RunSummary, unit: UnitSystem = UnitSystem.METRIC) -> None:
    """Display the summary of a finished session."""
    avg_pace = Run.calculate_pace(summary.total_distance_km, summary.elapsed_seconds / 60)

    table = Table(title="Run Complete", show_header=True, border_style="cyan")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")

    table.add_row("Distance", format_distance(summary.total_distance_km, unit))
    table.add_row("Duration", format_duration(summary.total_duration_minutes))
    table.add_row("Average Pace", format_pace(pace_for_unit(avg_pace or None, unit), unit))
    table.add_row("Average Speed", format_speed(summary.average_speed_kmh, unit))
    table.add_row("Max Speed", format_speed(summary.max_speed_kmh, unit))
    table.add_row("Elevation Gain", f"{summary.elevation_gain_m:.0f} m")
    table.add_row("GPS Points", f"{len(summary.route):,}")

    console.print(table)


def display_overall_stats(stats: RunStats, unit: UnitSystem = UnitSystem.METRIC) -> None:
    """Display overall running statistics."""
    table = Table(title="Overall Statistics", show_header=True, border_style="cyan")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")

    table.add_row("Total Runs", f"{stats.total_runs:,}")
    table.add_row("Total Distance", format_distance(stats.total_distance_km, unit))
    table.add_row("Total Time", format_duration(stats.total_duration_minutes))
    table.add_row(
        "Average Pace", format_pace(pace_for_unit(stats.avg_pace_min_per_km or None, unit), unit)
    )
    table.add_row(
        "Best Pace", format_pace(pace_for_unit(stats.best_pace_min_per_km or None, unit), unit)
    )
    table.add_row(
        "This Week",
        f"{stats.this_week.runs} runs, {format_distance(stats.this_week.distance_km, unit)}",
    )
    table.add_row(
        "This Month",
        f"{stats.this_month.runs} runs, {format_distance(stats.this_month.distance_km, unit)}",
    )

    console.print(table)


def display_runs(runs: list[Run], total: int, unit: UnitSystem = UnitSystem.METRIC) -> None:
    """Display stored runs in a table."""
    table = Table(
        title=f"My Runs ({len(runs)} of {total})",
        show_header=True,
        border_style="cyan",
    )
    table.add_column("ID", style="dim")
    table.add_column("Date", style="cyan")
    table.add_column("Distance", justify="right", style="green")
    table.add_column("Time", justify="right")
    table.add_column("Pace", justify="right", style="yellow")
    table.add_column("kcal", justify="right", style="magenta")
    table.add_column("GPS", justify="center")
    table.add_column("", justify="center")

    for run in runs:
        table.add_row(
            run.run_id[:8],
            run.run_date.isoformat(),
            format_distance(run.distance_km, unit),
            format_duration(run.duration_minutes),
            format_pace(pace_for_unit(run.pace_min_per_km or None, unit), unit),
            str(run.calories) if run.calories is not None else "-",
            "✓" if run.route else "",
            "[bold yellow]public[/bold yellow]" if run.is_public else "",
        )

    console.print(table)


def display_run(run: Run, unit: UnitSystem = UnitSystem.METRIC) -> None:
    """Display every stored field of a single run."""
    table = Table(title=f"Run {run.run_id[:8]}", show_header=False, border_style="cyan")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Date", run.run_date.isoformat())
    table.add_row("Distance", format_distance(run.distance_km, unit))
    table.add_row("Duration", format_duration(run.duration_minutes))
    table.add_row("Pace", format_pace(pace_for_unit(run.pace_min_per_km or None, unit), unit))
    if run.calories is not None:
        table.add_row("Calories", f"{run.calories} kcal")
    if run.avg_speed_kmh is not None:
        table.add_row("Average Speed", format_speed(run.avg_speed_kmh, unit))
    if run.max_speed_kmh is not None:
        table.add_row("Max Speed", format_speed(run.max_speed_kmh, unit))
    if run.elevation_gain_m is not None:
        table.add_row("Elevation Gain", f"{run.elevation_gain_m:.0f} m")
    if run.route:
        table.add_row("GPS Points", f"{len(run.route):,}")
    if run.notes:
        table.add_row("Notes", run.notes)
    if run.is_public and run.share_url:
        table.add_row("Shared", run.share_url)

    console.print(table)


def display_success(message: str) -> None:
    """Display success message."""
    console.print(f"[green]✓[/green] {message}")


def display_error(message: str) -> None:
    """Display error message."""
    console.print(f"[red]✗[/red] {message}")


def display_warning(message: str) -> None:
    """Display warning message."""
    console.print(f"[yellow]![/yellow] {message}")


def display_info(message: str) -> None:
    """Display info message."""
    console.print(f"[dim]ℹ[/dim] {message}")
