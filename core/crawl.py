"""Resumable top-to-bottom crawl animation for the story synopsis."""

from __future__ import annotations

import logging
import textwrap
from enum import Enum
from typing import Callable, List, Optional

from config import settings, tuning
from core.errors import PreconditionError
from core.viewport import Viewport


class CrawlState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"


def _lerp(start: float, end: float, t: float) -> float:
    return start + (end - start) * t


def wrap_crawl_text(text: str, viewport: Viewport) -> List[str]:
    """Word-wrap the crawl text to the width it gets on this viewport."""
    font_px = settings.TEXT_FONT_SIZE * viewport.scale_factor
    glyph_px = font_px * tuning.CRAWL_GLYPH_WIDTH_RATIO
    columns = max(1, int(viewport.width * tuning.CRAWL_WIDTH_RATIO / glyph_px))
    return textwrap.wrap(text, width=columns) or [""]


def crawl_line_height(viewport: Viewport) -> float:
    return settings.TEXT_FONT_SIZE * viewport.scale_factor * tuning.CRAWL_LINE_SPACING


def crawl_text_height(text: str, viewport: Viewport) -> float:
    return len(wrap_crawl_text(text, viewport)) * crawl_line_height(viewport)


def crawl_start_y(viewport: Viewport) -> float:
    return viewport.height + tuning.CRAWL_START_OFFSET


def crawl_end_y(text: str, viewport: Viewport) -> float:
    return -crawl_text_height(text, viewport)


class CrawlAnimator:
    """One-shot crawl that survives resizes by re-basing, never restarting.

    Times are in milliseconds. ``clock`` supplies "now" for calls that do
    not pass a time explicitly.
    """

    def __init__(
        self,
        clock: Callable[[], float],
        on_complete: Optional[Callable[[], None]] = None,
    ) -> None:
        self.clock = clock
        self.on_complete = on_complete
        self.state = CrawlState.IDLE
        self.start_y = 0.0
        self.end_y = 0.0
        self.duration = 0.0
        self.duration_total = 0.0
        self.start_time = 0.0
        self.y = 0.0
        self._last_tick: Optional[float] = None

    @property
    def active(self) -> bool:
        return self.state is CrawlState.RUNNING

    @property
    def completed(self) -> bool:
        return self.state is CrawlState.COMPLETED

    def reset(self) -> None:
        self.state = CrawlState.IDLE
        self.start_y = self.end_y = self.y = 0.0
        self.duration = self.duration_total = self.start_time = 0.0
        self._last_tick = None

    def start(self, start_y: float, end_y: float, duration: float, now: Optional[float] = None) -> bool:
        if duration <= 0:
            raise PreconditionError(f"crawl duration must be positive, got {duration}")
        if self.state is not CrawlState.IDLE:
            return False
        now = self.clock() if now is None else now
        self.start_y = self.y = start_y
        self.end_y = end_y
        self.duration = self.duration_total = duration
        self.start_time = now
        self._last_tick = now
        self.state = CrawlState.RUNNING
        logging.info("Crawl started: %.1f -> %.1f over %dms", start_y, end_y, duration)
        return True

    def progress_at(self, now: float) -> float:
        if self.duration <= 0:
            return 1.0
        return max(0.0, min(1.0, (now - self.start_time) / self.duration))

    def tick(self, now: float) -> float:
        """Advance to ``now`` and return the current y."""
        if self.state is not CrawlState.RUNNING:
            return self.y
        if self._last_tick is not None and now <= self._last_tick:
            return self.y
        self._last_tick = now
        progress = self.progress_at(now)
        self.y = _lerp(self.start_y, self.end_y, progress)
        if progress >= 1.0:
            self._complete()
        return self.y

    def rebase(self, new_end_y: float, viewport_changed: bool = True, now: Optional[float] = None) -> float:
        """Retarget a running crawl without moving it.

        The remaining duration shrinks by the progress already made on the
        current segment, so the crawl keeps its pace and arrives at the new
        endpoint when it would have arrived at the old one.
        """
        if self.state is CrawlState.COMPLETED:
            self.y = self.end_y
            return self.y
        if self.state is not CrawlState.RUNNING:
            return self.y
        if not viewport_changed and new_end_y == self.end_y:
            return self.y
        now = self.clock() if now is None else now
        if self._last_tick is not None:
            now = max(now, self._last_tick)
        progress = self.progress_at(now)
        current_y = _lerp(self.start_y, self.end_y, progress)
        # duration * (1 - progress), kept exact so the arrival time does not drift
        elapsed = max(0.0, min(self.duration, now - self.start_time))
        self.start_y = self.y = current_y
        self.end_y = new_end_y
        self.start_time = now
        self._last_tick = now
        self.duration = self.duration - elapsed
        logging.debug("Crawl rebased at %.1f%%: y=%.1f -> %.1f in %dms", progress * 100, current_y, new_end_y, self.duration)
        if self.duration <= 0:
            self.y = self.end_y
            self._complete()
        return self.y

    def _complete(self) -> None:
        self.y = self.end_y
        self.state = CrawlState.COMPLETED
        logging.info("Crawl completed")
        if self.on_complete is not None:
            self.on_complete()
