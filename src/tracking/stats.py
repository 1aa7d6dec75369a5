"""Aggregate statistics over the local run log."""

import logging
from collections.abc import Iterable
from datetime import date, timedelta

from pydantic import BaseModel, Field

from .models import Run

logger = logging.getLogger(__name__)

WEEK_DAYS = 7
MONTH_DAYS = 30


class PeriodStats(BaseModel):
    """Run count and distance over a trailing window."""

    runs: int = Field(0, description="Runs on or after the window start")
    distance_km: float = Field(0.0, description="Distance of those runs")


class RunStats(BaseModel):
    """Overall running statistics."""

    total_runs: int = Field(0, description="Number of stored runs")
    total_distance_km: float = Field(0.0, description="Sum of run distances")
    total_duration_minutes: int = Field(0, description="Sum of run durations")
    avg_pace_min_per_km: float = Field(
        0.0, description="Total time over total distance, 0 without distance"
    )
    best_pace_min_per_km: float = Field(
        0.0, description="Fastest recorded pace, 0 when no run has one"
    )
    this_week: PeriodStats = Field(default_factory=PeriodStats)
    this_month: PeriodStats = Field(default_factory=PeriodStats)


def _period(runs: list[Run], since: date) -> PeriodStats:
    recent = [run for run in runs if run.run_date >= since]
    return PeriodStats(runs=len(recent), distance_km=sum(run.distance_km for run in recent))


def compute_stats(runs: Iterable[Run], today: date | None = None) -> RunStats:
    """
    Summarize a set of runs.

    Args:
        runs: Runs to aggregate
        today: Reference day for the weekly and monthly windows

    Returns:
        RunStats, all zeros when there are no runs
    """
    runs = list(runs)
    today = today or date.today()
    if not runs:
        return RunStats()

    total_distance = sum(run.distance_km for run in runs)
    total_minutes = sum(run.duration_minutes for run in runs)
    # Runs saved without distance carry a pace of 0
    paces = [run.pace_min_per_km for run in runs if run.pace_min_per_km > 0]

    stats = RunStats(
        total_runs=len(runs),
        total_distance_km=total_distance,
        total_duration_minutes=total_minutes,
        avg_pace_min_per_km=total_minutes / total_distance if total_distance > 0 else 0.0,
        best_pace_min_per_km=min(paces) if paces else 0.0,
        this_week=_period(runs, today - timedelta(days=WEEK_DAYS)),
        this_month=_period(runs, today - timedelta(days=MONTH_DAYS)),
    )
    logger.debug(f"Computed stats over {stats.total_runs} runs")
    return stats
