"""
Fixed-interval tick source for the game loop.

The scheduler does not own a thread or a timer. The window loop polls
`tick_due()` between input events, so ticks and input handling never
run at the same time.
"""

import time
from typing import Callable, Optional


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class FixedIntervalScheduler:
    """
    Reports when the next tick is due.

    At most one tick is reported per poll: if the loop falls behind by
    several periods, the missed ticks are coalesced into one.
    """

    def __init__(self, interval_ms: int, clock: Callable[[], float] = monotonic_ms):
        if interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval_ms}")
        self.interval_ms = interval_ms
        self.clock = clock
        self._next_tick_at: Optional[float] = None

    @property
    def is_running(self) -> bool:
        return self._next_tick_at is not None

    def start(self) -> None:
        """Start (or restart) the schedule; the first tick is one interval away."""
        self._next_tick_at = self.clock() + self.interval_ms

    def stop(self) -> None:
        self._next_tick_at = None

    def tick_due(self, now: Optional[float] = None) -> bool:
        if self._next_tick_at is None:
            return False
        if now is None:
            now = self.clock()
        if now < self._next_tick_at:
            return False

        self._next_tick_at += self.interval_ms
        if self._next_tick_at <= now:
            self._next_tick_at = now + self.interval_ms
        return True

    def time_until_next_tick(self, now: Optional[float] = None) -> Optional[float]:
        """Milliseconds left before the next tick, or None when stopped."""
        if self._next_tick_at is None:
            return None
        if now is None:
            now = self.clock()
        return max(0.0, self._next_tick_at - now)
