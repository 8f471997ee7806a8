"""Virtual clock for driving time-based view models from tests.

Time only moves when ``advance`` is called. Sleeps whose deadline falls
inside the advanced window wake in deadline order (ties in scheduling
order), and the clock reads the sleep's deadline while its callback runs,
so sleeps scheduled from a callback can still wake within the same window.
"""

from __future__ import annotations

import heapq
import itertools
from typing import List, Tuple

from loginflow.domain.ports import ClockPort, SleepHandle, WakeCallback

_NS_PER_S = 1_000_000_000


def _to_ns(seconds: float) -> int:
    return int(round(seconds * _NS_PER_S))


class VirtualSleep(SleepHandle):
    """Pending sleep registered on a ``TestClock``."""

    def __init__(self, deadline_ns: int, on_wake: WakeCallback) -> None:
        self.deadline_ns = deadline_ns
        self._on_wake = on_wake
        self._cancelled = False
        self.fired = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True

    def _fire(self) -> None:
        self.fired = True
        self._on_wake()


class TestClock(ClockPort):
    """Deterministic clock on an integer-nanosecond timeline."""

    __test__ = False

    def __init__(self, start: float = 0.0) -> None:
        self._now_ns = _to_ns(start)
        self._seq = itertools.count()
        self._heap: List[Tuple[int, int, VirtualSleep]] = []

    @property
    def now(self) -> float:
        return self._now_ns / _NS_PER_S

    @property
    def pending_count(self) -> int:
        return sum(1 for _, _, sleep in self._heap if not sleep.cancelled)

    def sleep(self, seconds: float, on_wake: WakeCallback) -> VirtualSleep:
        if seconds < 0:
            raise ValueError("sleep duration must be non-negative.")
        handle = VirtualSleep(self._now_ns + _to_ns(seconds), on_wake)
        heapq.heappush(self._heap, (handle.deadline_ns, next(self._seq), handle))
        return handle

    def advance(self, by: float = 0.0) -> int:
        """Move time forward by ``by`` seconds and wake due sleeps.

        Returns:
            Number of sleeps that woke during the advance.
        """
        if by < 0:
            raise ValueError("cannot advance a clock backwards.")
        target_ns = self._now_ns + _to_ns(by)
        woke = 0
        while self._heap and self._heap[0][0] <= target_ns:
            deadline_ns, _, handle = heapq.heappop(self._heap)
            if handle.cancelled:
                continue
            self._now_ns = deadline_ns
            handle._fire()
            woke += 1
        self._now_ns = target_ns
        return woke


__all__ = ["TestClock", "VirtualSleep"]
