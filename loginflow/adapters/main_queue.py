"""Main-queue implementations that view models report state changes on."""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque

from loginflow.domain.ports import MainQueuePort

ScheduleFn = Callable[[int, Callable[[], None]], str]


class ImmediateQueue(MainQueuePort):
    """Run every callback synchronously at schedule time."""

    def schedule(self, callback: Callable[[], None]) -> None:
        callback()


class TestQueue(MainQueuePort):
    """Queue callbacks until the test advances the run loop."""

    __test__ = False

    def __init__(self) -> None:
        self._pending: Deque[Callable[[], None]] = deque()

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def schedule(self, callback: Callable[[], None]) -> None:
        self._pending.append(callback)

    def advance(self) -> int:
        """Drain the queue, including callbacks scheduled while draining.

        Returns:
            Number of callbacks executed.
        """
        ran = 0
        while self._pending:
            callback = self._pending.popleft()
            callback()
            ran += 1
        return ran


class AfterQueue(MainQueuePort):
    """Dispatch through a Tk-compatible ``after(delay_ms, callback)`` function."""

    def __init__(self, schedule: ScheduleFn) -> None:
        self._after = schedule

    def schedule(self, callback: Callable[[], None]) -> None:
        self._after(0, callback)


__all__ = ["AfterQueue", "ImmediateQueue", "ScheduleFn", "TestQueue"]
