"""Debounced viewport resize handling."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Tuple

from config import tuning


class ResizeDebouncer:
    """Coalesce bursts of resize events into one callback with the latest size.

    Every ``push`` restarts the quiet period; ``poll`` is called once per
    frame and fires the callback when the quiet period has elapsed. Events
    arriving while the callback runs are dropped, not queued.
    """

    def __init__(
        self,
        callback: Callable[[float, float], None],
        interval_ms: float = tuning.RESIZE_DEBOUNCE_MS,
    ) -> None:
        self.callback = callback
        self.interval_ms = interval_ms
        self.pending: Optional[Tuple[float, float]] = None
        self.deadline = 0.0
        self.in_flight = False

    def push(self, width: float, height: float, now: float) -> bool:
        if self.in_flight:
            logging.debug("Dropping resize to %sx%s, recompute in flight", width, height)
            return False
        self.pending = (width, height)
        self.deadline = now + self.interval_ms
        return True

    def poll(self, now: float) -> bool:
        """Fire the pending resize if it is due; returns True if it fired."""
        if self.pending is None or self.in_flight or now < self.deadline:
            return False
        width, height = self.pending
        self.pending = None
        self.in_flight = True
        try:
            self.callback(width, height)
        finally:
            self.in_flight = False
        return True
