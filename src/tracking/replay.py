"""
Replay a recorded track through a tracking session.

Samples, one-second ticks and pause/resume commands are merged into a
single time-ordered queue and dispatched one at a time, the same way a
host event loop would deliver them to a live session.
"""

import heapq
import json
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .errors import LocationError, TrackFileError
from .models import GeoSample, LocationErrorCode, RunSummary, TrackingPhase, TrackSnapshot
from .session import RunTrackingSession
from .sources import LocationOptions, ManualLocationSource, ManualTicker

logger = logging.getLogger(__name__)

# Dispatch order for events sharing a timestamp
_CONTROL, _TICK, _TRACK = range(3)

# One tick is one second of elapsed time
TICK_MILLIS = 1000


@dataclass(frozen=True)
class PauseWindow:
    """Pause between two offsets (milliseconds from the first sample)."""

    pause_at_millis: int
    resume_at_millis: int | None = None

    def __post_init__(self) -> None:
        if self.resume_at_millis is not None and self.resume_at_millis < self.pause_at_millis:
            raise ValueError("resume_at_millis must not be before pause_at_millis")


@dataclass(frozen=True)
class TrackEvent:
    """One entry of a recorded track: a sample or a location error."""

    timestamp_millis: int
    sample: GeoSample | None = None
    error: LocationErrorCode | None = None


@dataclass
class ReplayResult:
    """Outcome of a replay: the final summary plus any warnings seen."""

    summary: RunSummary
    warnings: list[str] = field(default_factory=list)
    ticks: int = 0


def parse_pause_window(text: str) -> PauseWindow:
    """
    Parse "START-END" or "START-" (seconds from the first sample).

    Raises:
        ValueError: If the text is not a valid window
    """
    start_text, sep, end_text = text.partition("-")
    if not sep or not start_text.strip():
        raise ValueError(f"Invalid pause window {text!r}, expected START-END in seconds")
    start = int(float(start_text) * 1000)
    end = int(float(end_text) * 1000) if end_text.strip() else None
    return PauseWindow(pause_at_millis=start, resume_at_millis=end)


def parse_track(items: Iterable[dict[str, Any]]) -> list[TrackEvent]:
    """
    Convert raw track entries into events.

    Sample entries use the geolocation shape (lat, lng, timestamp,
    altitude, speed). An entry with an "error" key (one of
    permission_denied, position_unavailable, timeout) and a timestamp
    replays a location error at that moment.
    """
    events: list[TrackEvent] = []
    for index, item in enumerate(items):
        try:
            if "error" in item:
                events.append(
                    TrackEvent(
                        timestamp_millis=int(item["timestamp"]),
                        error=LocationErrorCode(item["error"]),
                    )
                )
            else:
                sample = GeoSample.model_validate(item)
                events.append(TrackEvent(timestamp_millis=sample.timestamp_millis, sample=sample))
        except (KeyError, TypeError, ValueError, ValidationError) as e:
            raise TrackFileError(f"Invalid track entry #{index}: {e}") from e
    return events


def load_track(path: Path) -> list[TrackEvent]:
    """
    Load a recorded track from a JSON file.

    The file holds either a list of entries or an object with a
    "samples" (or "gpsRoute") list.

    Raises:
        TrackFileError: If the file is missing or malformed
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise TrackFileError(f"Cannot read track file {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("samples", data.get("gpsRoute"))
    if not isinstance(data, list):
        raise TrackFileError(f"Track file {path} does not contain a list of samples")

    events = parse_track(data)
    logger.info(f"Loaded {len(events)} track events from {path}")
    return events


def replay(
    events: list[TrackEvent],
    pauses: Iterable[PauseWindow] = (),
    options: LocationOptions | None = None,
    on_complete: Callable[[RunSummary], Any] | None = None,
    on_progress: Callable[[TrackSnapshot], Any] | None = None,
) -> ReplayResult:
    """
    Run a full session over recorded events.

    Time starts at the first event's timestamp. One-second ticks fire up
    to and including the last event, then the session is stopped.

    Args:
        events: Track events in recorded order
        pauses: Pause windows relative to the first event
        options: Fix requirements handed to the location source
        on_complete: Run-store collaborator for the finished summary
        on_progress: Called with a snapshot after each delivered sample

    Returns:
        ReplayResult with the summary, warnings and delivered tick count
    """
    source = ManualLocationSource()
    ticker = ManualTicker()
    session = RunTrackingSession(source, ticker, options=options, on_complete=on_complete)
    warnings: list[str] = []
    ticks = 0

    origin = events[0].timestamp_millis if events else 0

    queue: list[tuple[int, int, int, Any]] = []
    seq = 0

    def push(at: int, kind: int, payload: Any = None) -> None:
        nonlocal seq
        heapq.heappush(queue, (at, kind, seq, payload))
        seq += 1

    # Track events are delivered in recorded order; one stamped earlier
    # than its predecessor arrives right after it
    end = origin
    for event in events:
        end = max(end, event.timestamp_millis)
        push(end, _TRACK, event)
    for at in range(origin + TICK_MILLIS, end + 1, TICK_MILLIS):
        push(at, _TICK)
    for window in pauses:
        push(origin + window.pause_at_millis, _CONTROL, "pause")
        if window.resume_at_millis is not None:
            push(origin + window.resume_at_millis, _CONTROL, "resume")

    with session:
        session.start()
        while queue:
            _, kind, _, payload = heapq.heappop(queue)
            if kind == _CONTROL:
                if payload == "pause" and session.phase == TrackingPhase.TRACKING:
                    session.pause()
                elif payload == "resume" and session.phase == TrackingPhase.PAUSED:
                    session.resume()
            elif kind == _TICK:
                ticks += ticker.tick()
            elif payload.error is not None:
                error = LocationError(payload.error)
                source.fail(error)
                warnings.append(str(error))
            else:
                source.push(payload.sample)
                if on_progress is not None:
                    on_progress(session.snapshot())
        summary = session.stop()

    return ReplayResult(summary=summary, warnings=warnings, ticks=ticks)
