"""
Event sources that drive a tracking session.

The session never talks to a platform API directly. It is handed a
LocationSource and a Ticker, subscribes to them on start/resume and
releases the returned Subscription handles on pause/stop.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from .errors import LocationError
from .models import GeoSample

SampleCallback = Callable[[GeoSample], None]
ErrorCallback = Callable[[LocationError], None]
TickCallback = Callable[[], None]


@dataclass(frozen=True)
class LocationOptions:
    """Fix requirements passed to a location source on subscribe."""

    high_accuracy: bool = True
    timeout_millis: int = 5000
    max_cached_age_millis: int = 0


class Subscription(Protocol):
    """Handle for an active subscription; cancel() must be idempotent."""

    def cancel(self) -> None: ...


class LocationSource(Protocol):
    """Something that pushes position samples until unsubscribed."""

    def is_available(self) -> bool: ...

    def subscribe(
        self,
        on_sample: SampleCallback,
        on_error: ErrorCallback,
        options: LocationOptions,
    ) -> Subscription: ...


class Ticker(Protocol):
    """A repeating one-second timer."""

    def start(self, callback: TickCallback) -> Subscription: ...


class CallbackSubscription:
    """Subscription that clears a stored callback when cancelled."""

    def __init__(self, owner: "ManualLocationSource | ManualTicker") -> None:
        self._owner = owner
        self.active = True

    def cancel(self) -> None:
        if self.active:
            self.active = False
            self._owner._release(self)


class ManualLocationSource:
    """
    Location source fed explicitly by the host.

    Used by the replay driver and by tests: push() delivers a sample to
    the current subscriber, fail() delivers a recoverable error. Nothing
    is delivered when there is no active subscription.
    """

    def __init__(self, available: bool = True) -> None:
        self.available = available
        self.options: LocationOptions | None = None
        self._subscription: CallbackSubscription | None = None
        self._on_sample: SampleCallback | None = None
        self._on_error: ErrorCallback | None = None

    @property
    def subscribed(self) -> bool:
        return self._subscription is not None

    def is_available(self) -> bool:
        return self.available

    def subscribe(
        self,
        on_sample: SampleCallback,
        on_error: ErrorCallback,
        options: LocationOptions,
    ) -> CallbackSubscription:
        self.options = options
        self._on_sample = on_sample
        self._on_error = on_error
        self._subscription = CallbackSubscription(self)
        return self._subscription

    def push(self, sample: GeoSample) -> bool:
        """Deliver a sample; returns False if nobody is subscribed."""
        if self._on_sample is None:
            return False
        self._on_sample(sample)
        return True

    def fail(self, error: LocationError) -> bool:
        """Deliver a recoverable location error; returns False if unsubscribed."""
        if self._on_error is None:
            return False
        self._on_error(error)
        return True

    def _release(self, subscription: CallbackSubscription) -> None:
        if subscription is self._subscription:
            self._subscription = None
            self._on_sample = None
            self._on_error = None


class ManualTicker:
    """Ticker advanced explicitly with tick(); stands in for a wall clock."""

    def __init__(self) -> None:
        self._subscription: CallbackSubscription | None = None
        self._callback: TickCallback | None = None

    @property
    def running(self) -> bool:
        return self._subscription is not None

    def start(self, callback: TickCallback) -> CallbackSubscription:
        self._callback = callback
        self._subscription = CallbackSubscription(self)
        return self._subscription

    def tick(self, count: int = 1) -> int:
        """Fire the callback count times; returns how many ticks were delivered."""
        delivered = 0
        for _ in range(count):
            if self._callback is None:
                break
            self._callback()
            delivered += 1
        return delivered

    def _release(self, subscription: CallbackSubscription) -> None:
        if subscription is self._subscription:
            self._subscription = None
            self._callback = None
