"""Clock adapter that sleeps through a UI scheduler (for example Tk).

The composition root passes Tk ``after`` and ``after_cancel`` callables so
sleeps wake on the UI thread and can be cancelled in one place when a view
model stops or the window closes.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from loginflow.domain.ports import ClockPort, SleepHandle, WakeCallback

ScheduleFn = Callable[[int, Callable[[], None]], str]
CancelFn = Callable[[str], None]

_log = logging.getLogger(__name__)


class AfterSleep(SleepHandle):
    """Timer token for one pending ``after`` callback.

    Attributes:
        token: Scheduler token returned by the UI scheduler implementation.
    """

    def __init__(self, cancel: CancelFn) -> None:
        self.token: Optional[str] = None
        self._cancel_fn = cancel
        self._cancelled = False
        self.fired = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        if self._cancelled or self.fired:
            return
        self._cancelled = True
        if self.token is None:
            return
        try:
            self._cancel_fn(self.token)
        except Exception as exc:
            # Tk raises for tokens that already ran; the wake guard covers it.
            _log.debug("after_cancel(%s) failed: %s", self.token, exc)


class AfterClock(ClockPort):
    """Clock whose sleeps are ``after(delay_ms, callback)`` timers."""

    def __init__(self, schedule: ScheduleFn, cancel: CancelFn) -> None:
        """Store schedule/cancel functions.

        Args:
            schedule: Function compatible with ``after(delay_ms, callback)``.
            cancel: Function compatible with ``after_cancel(token)``.
        """
        self._schedule = schedule
        self._cancel = cancel

    def sleep(self, seconds: float, on_wake: WakeCallback) -> AfterSleep:
        if seconds < 0:
            raise ValueError("sleep duration must be non-negative.")
        delay = max(1, int(round(seconds * 1000)))
        handle = AfterSleep(self._cancel)

        def _wake() -> None:
            if handle.cancelled:
                return
            handle.fired = True
            on_wake()

        handle.token = self._schedule(delay, _wake)
        return handle


__all__ = ["AfterClock", "AfterSleep", "CancelFn", "ScheduleFn"]
