"""Run tracking session: turns a live position stream into run metrics."""

import logging
from collections.abc import Callable
from typing import Any

from .errors import InvalidTransitionError, LocationError, LocationUnavailableError
from .geo import haversine_km
from .models import GeoSample, RunSummary, TrackingPhase, TrackSnapshot, format_elapsed
from .sources import LocationOptions, LocationSource, Subscription, Ticker

logger = logging.getLogger(__name__)

MILLIS_PER_HOUR = 3_600_000
SECONDS_PER_HOUR = 3600


class RunTrackingSession:
    """
    Owns one start-to-stop tracking lifecycle.

    Distance, speed and elevation are accumulated from consecutive sample
    pairs; elapsed time comes from a one-second ticker that only runs while
    tracking. Pausing stops the ticker but not the location subscription, so
    samples received while paused still add distance.

    All handlers (on_sample, on_tick, on_location_error) are synchronous and
    must be invoked from the same event loop as the lifecycle calls.
    """

    def __init__(
        self,
        location_source: LocationSource,
        ticker: Ticker,
        options: LocationOptions | None = None,
        on_complete: Callable[[RunSummary], Any] | None = None,
    ) -> None:
        """
        Initialize an idle session.

        Args:
            location_source: Pushes GeoSample events once subscribed
            ticker: Repeating one-second timer for elapsed time
            options: Fix requirements passed on subscribe
            on_complete: Run-store collaborator receiving each finished summary
        """
        self.location_source = location_source
        self.ticker = ticker
        self.options = options or LocationOptions()
        self.on_complete = on_complete

        self._location_subscription: Subscription | None = None
        self._ticker_subscription: Subscription | None = None

        self._phase = TrackingPhase.IDLE
        self._last_warning: str | None = None
        self._reset()

    def __enter__(self) -> "RunTrackingSession":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _reset(self) -> None:
        self._elapsed_seconds = 0
        self._distance_km = 0.0
        self._current_speed_kmh = 0.0
        self._max_speed_kmh = 0.0
        self._elevation_gain_m = 0.0
        self._route: list[GeoSample] = []
        self._last_sample: GeoSample | None = None

    # Lifecycle

    def start(self) -> None:
        """
        Begin tracking: subscribe to the location source and start the ticker.

        Raises:
            InvalidTransitionError: If the session is not idle
            LocationUnavailableError: If the host has no location capability;
                the session stays idle and nothing is acquired
        """
        if self._phase != TrackingPhase.IDLE:
            raise InvalidTransitionError(f"Cannot start a session that is {self._phase.value}")

        if not self.location_source.is_available():
            logger.warning("Location services unavailable, session not started")
            raise LocationUnavailableError()

        self._reset()
        self._last_warning = None
        self._phase = TrackingPhase.TRACKING
        self._location_subscription = self.location_source.subscribe(
            self.on_sample, self.on_location_error, self.options
        )
        self._start_ticker()
        logger.info("Tracking started")

    def pause(self) -> None:
        """Suspend the elapsed-time ticker. Samples keep being accepted."""
        if self._phase != TrackingPhase.TRACKING:
            raise InvalidTransitionError(f"Cannot pause a session that is {self._phase.value}")

        self._stop_ticker()
        self._phase = TrackingPhase.PAUSED
        logger.info(f"Tracking paused at {self._elapsed_seconds}s")

    def resume(self) -> None:
        """Restart the elapsed-time ticker from the current count."""
        if self._phase != TrackingPhase.PAUSED:
            raise InvalidTransitionError(f"Cannot resume a session that is {self._phase.value}")

        self._phase = TrackingPhase.TRACKING
        self._start_ticker()
        logger.info(f"Tracking resumed at {self._elapsed_seconds}s")

    def stop(self) -> RunSummary:
        """
        Finish the session.

        Releases the location subscription and ticker, builds the run summary,
        resets the session to idle and hands the summary to on_complete.

        Returns:
            The finalized RunSummary

        Raises:
            InvalidTransitionError: If the session is idle
        """
        if self._phase == TrackingPhase.IDLE:
            raise InvalidTransitionError("Cannot stop a session that is idle")

        self._release()
        summary = self._summarize()
        self._phase = TrackingPhase.IDLE
        self._reset()

        logger.info(
            f"Tracking stopped: {summary.total_distance_km:.3f} km "
            f"in {summary.elapsed_seconds}s, {len(summary.route)} samples"
        )

        if self.on_complete is not None:
            self.on_complete(summary)
        return summary

    def close(self) -> None:
        """
        Tear down without producing a summary.

        Used when the host goes away mid-session. Safe to call in any phase.
        """
        if self._phase != TrackingPhase.IDLE:
            logger.info("Tracking session closed without summary")
        self._release()
        self._phase = TrackingPhase.IDLE
        self._reset()

    def _start_ticker(self) -> None:
        self._ticker_subscription = self.ticker.start(self.on_tick)

    def _stop_ticker(self) -> None:
        if self._ticker_subscription is not None:
            self._ticker_subscription.cancel()
            self._ticker_subscription = None

    def _release(self) -> None:
        if self._location_subscription is not None:
            self._location_subscription.cancel()
            self._location_subscription = None
        self._stop_ticker()

    # Event handlers

    def on_sample(self, sample: GeoSample) -> None:
        """Accumulate one position sample into the running metrics."""
        if self._phase == TrackingPhase.IDLE:
            logger.debug("Ignoring sample received while idle")
            return

        self._route.append(sample)

        last = self._last_sample
        self._last_sample = sample
        if last is None:
            return

        # Every pair counts, including jitter while standing still
        distance_km = haversine_km(
            last.latitude, last.longitude, sample.latitude, sample.longitude
        )
        self._distance_km += distance_km

        hours = (sample.timestamp_millis - last.timestamp_millis) / MILLIS_PER_HOUR
        if hours > 0:
            self._current_speed_kmh = distance_km / hours
            self._max_speed_kmh = max(self._max_speed_kmh, self._current_speed_kmh)
        else:
            logger.debug(
                f"Non-increasing timestamp {sample.timestamp_millis}, speed not updated"
            )

        if sample.altitude_meters is not None and last.altitude_meters is not None:
            climb = sample.altitude_meters - last.altitude_meters
            if climb > 0:
                self._elevation_gain_m += climb

    def on_tick(self) -> None:
        """Count one second of elapsed time while tracking."""
        if self._phase == TrackingPhase.TRACKING:
            self._elapsed_seconds += 1

    def on_location_error(self, error: LocationError) -> None:
        """Record a recoverable location error; tracking continues."""
        if self._phase == TrackingPhase.IDLE:
            logger.debug(f"Ignoring location error received while idle: {error}")
            return
        logger.warning(f"Location error ({error.code.value}): {error}")
        self._last_warning = str(error)

    # Read-only metrics

    @property
    def phase(self) -> TrackingPhase:
        return self._phase

    @property
    def is_active(self) -> bool:
        return self._phase != TrackingPhase.IDLE

    @property
    def elapsed_seconds(self) -> int:
        return self._elapsed_seconds

    @property
    def distance_km(self) -> float:
        return self._distance_km

    @property
    def current_speed_kmh(self) -> float:
        return self._current_speed_kmh

    @property
    def max_speed_kmh(self) -> float:
        return self._max_speed_kmh

    @property
    def elevation_gain_m(self) -> float:
        return self._elevation_gain_m

    @property
    def route(self) -> list[GeoSample]:
        return list(self._route)

    @property
    def sample_count(self) -> int:
        return len(self._route)

    @property
    def last_warning(self) -> str | None:
        return self._last_warning

    @property
    def current_pace_min_per_km(self) -> float | None:
        """Minutes per kilometer so far, None while no distance is covered."""
        if self._distance_km > 0:
            return (self._elapsed_seconds / 60) / self._distance_km
        return None

    @property
    def formatted_elapsed(self) -> str:
        return format_elapsed(self._elapsed_seconds)

    @property
    def average_speed_kmh(self) -> float:
        if self._elapsed_seconds > 0:
            return self._distance_km / (self._elapsed_seconds / SECONDS_PER_HOUR)
        return 0.0

    def snapshot(self) -> TrackSnapshot:
        """Capture the current metrics for display."""
        return TrackSnapshot(
            phase=self._phase,
            elapsed_seconds=self._elapsed_seconds,
            formatted_elapsed=self.formatted_elapsed,
            distance_km=self._distance_km,
            current_speed_kmh=self._current_speed_kmh,
            max_speed_kmh=self._max_speed_kmh,
            elevation_gain_m=self._elevation_gain_m,
            sample_count=self.sample_count,
            current_pace_min_per_km=self.current_pace_min_per_km,
            last_warning=self._last_warning,
        )

    def _summarize(self) -> RunSummary:
        return RunSummary(
            total_distance_km=self._distance_km,
            total_duration_minutes=self._elapsed_seconds // 60,
            elapsed_seconds=self._elapsed_seconds,
            route=list(self._route),
            elevation_gain_m=self._elevation_gain_m,
            max_speed_kmh=self._max_speed_kmh,
            average_speed_kmh=self.average_speed_kmh,
        )
