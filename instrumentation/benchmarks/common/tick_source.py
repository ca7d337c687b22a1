"""
Per-frame tick sources.

A tick source delivers monotonic timestamps (μs) to its subscribers in the
order the ticks occur, one callback per tick, never batched. Subscribers
detach with `TickSubscription.cancel()`.

- `ManualTickSource` delivers injected timestamps synchronously (replays, tests).
- `AsyncioTickSource` is a frame ticker on an asyncio event loop. Each tick
  re-arms the next one, so when the loop is blocked the next tick is late and
  the gap shows up as a long frame interval.
"""

import asyncio
from typing import Callable, Iterable, List, Optional

from .capabilities import monotonic_microseconds

TickCallback = Callable[[int], None]


class TickSubscription:
    """Handle returned by `TickSource.subscribe`."""

    def __init__(self, source: "TickSource", callback: TickCallback):
        self._source = source
        self.callback = callback
        self.active = True

    def cancel(self) -> None:
        if not self.active:
            return
        self.active = False
        self._source._unsubscribe(self)


class TickSource:
    """Base class: subscriber bookkeeping and in-order delivery."""

    def __init__(self):
        self._subscriptions: List[TickSubscription] = []

    def subscribe(self, callback: TickCallback) -> TickSubscription:
        subscription = TickSubscription(self, callback)
        self._subscriptions.append(subscription)
        self._on_first_subscriber()
        return subscription

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def _unsubscribe(self, subscription: TickSubscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)

    def _deliver(self, timestamp_us: int) -> None:
        # Snapshot so a callback may cancel itself or others mid-delivery
        for subscription in list(self._subscriptions):
            if subscription.active:
                subscription.callback(timestamp_us)

    def _on_first_subscriber(self) -> None:
        pass


class ManualTickSource(TickSource):
    """Tick source driven by explicitly injected timestamps."""

    def emit(self, timestamp_us: int) -> None:
        self._deliver(timestamp_us)

    def emit_many(self, timestamps: Iterable[int]) -> None:
        for ts in timestamps:
            self._deliver(ts)


class AsyncioTickSource(TickSource):
    """
    Frame ticker on an asyncio event loop.

    Args:
        interval_s: Nominal frame period (default 1/60 s)
        clock: Monotonic μs clock used to stamp each tick
        loop: Event loop to schedule on (default: the running loop)
    """

    def __init__(
        self,
        interval_s: float = 1 / 60,
        clock: Callable[[], int] = monotonic_microseconds,
        loop: Optional[asyncio.AbstractEventLoop] = None
    ):
        super().__init__()
        if interval_s <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval_s}")
        self.interval_s = interval_s
        self.clock = clock
        self._loop = loop
        self._handle: Optional[asyncio.Handle] = None
        self._deadline = 0.0

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        return self._loop or asyncio.get_running_loop()

    def _on_first_subscriber(self) -> None:
        if self._handle is None:
            loop = self._get_loop()
            self._deadline = loop.time()
            self._handle = loop.call_soon(self._tick)

    def _unsubscribe(self, subscription: TickSubscription) -> None:
        super()._unsubscribe(subscription)
        if not self._subscriptions and self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _tick(self) -> None:
        self._handle = None
        if not self._subscriptions:
            return

        self._deliver(self.clock())

        if self._subscriptions:
            loop = self._get_loop()
            # Next deadline on the frame grid; deadlines missed while the
            # loop was blocked are skipped, like a display refresh would.
            now = loop.time()
            self._deadline += self.interval_s
            if self._deadline <= now:
                missed = int((now - self._deadline) // self.interval_s) + 1
                self._deadline += missed * self.interval_s
            self._handle = loop.call_at(self._deadline, self._tick)
