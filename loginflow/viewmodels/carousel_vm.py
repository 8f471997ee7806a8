"""Onboarding carousel that advances its current card on a clock.

Call context:
    The onboarding view calls ``start`` when it appears and ``stop`` when it
    disappears, and re-renders ``current_card`` from ``subscribe`` callbacks.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from loginflow.domain.errors import InvalidArgument
from loginflow.domain.ports import ClockPort, SleepHandle, Unsubscribe

IndexListener = Callable[[int], None]


class CarouselVM:
    """
    View-model for an auto-advancing card carousel.

    Every ``interval_s`` seconds of clock time while running, the current
    index moves one position forward, wrapping at the end. Stopping freezes
    the index; starting again waits a full interval before the next move.
    """

    def __init__(
        self,
        items: Sequence[str],
        clock: ClockPort,
        *,
        interval_s: float = 1.0,
        on_change: Optional[IndexListener] = None,
    ) -> None:
        if not items:
            raise InvalidArgument("CarouselVM requires at least one item.")
        if interval_s <= 0:
            raise InvalidArgument("interval_s must be positive.")
        self._log = logging.getLogger(__name__)
        self.items: Tuple[str, ...] = tuple(items)
        self.interval_s = float(interval_s)
        self._clock = clock
        self._current_index = 0
        self._sleep: Optional[SleepHandle] = None
        self._listeners: List[IndexListener] = []
        if on_change is not None:
            self.subscribe(on_change)

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def current_card(self) -> str:
        return self.items[self._current_index]

    @property
    def running(self) -> bool:
        return self._sleep is not None

    def start(self) -> None:
        if self._sleep is not None:
            self._log.debug("start ignored: carousel already running")
            return
        self._schedule_next()

    def stop(self) -> None:
        sleep, self._sleep = self._sleep, None
        if sleep is None:
            return
        sleep.cancel()
        self._log.debug("Carousel stopped at index %d", self._current_index)

    def subscribe(self, listener: IndexListener) -> Unsubscribe:
        """Register ``listener`` to receive the new index after each advance."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def close(self) -> None:
        self.stop()
        self._listeners.clear()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _schedule_next(self) -> None:
        handle: Optional[SleepHandle] = None

        def _on_wake() -> None:
            # A wake from a sleep replaced by stop/start must not advance.
            if self._sleep is not handle:
                return
            try:
                self._advance()
            finally:
                if self._sleep is handle:
                    self._schedule_next()

        handle = self._clock.sleep(self.interval_s, _on_wake)
        self._sleep = handle

    def _advance(self) -> None:
        self._current_index = (self._current_index + 1) % len(self.items)
        self._log.debug("Carousel advanced to index %d", self._current_index)
        for listener in list(self._listeners):
            listener(self._current_index)


__all__ = ["CarouselVM", "IndexListener"]
