"""Event-facing core: the presentation layer feeds events in and reads state out."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, NamedTuple, Optional

from config import settings, tuning
from core.brightness import BrightnessOverlay, OverlayState, slider_percentage
from core.context import SettingsContext
from core.crawl import CrawlAnimator, crawl_end_y, crawl_start_y
from core.errors import PreconditionError, UnknownElementError
from core.keybinds import ActionId, KeyRemapSession
from core.layout import Geometry, LayoutEngine
from core.resize import ResizeDebouncer
from core.viewport import Viewport
from ui import screens
from ui.screens import ScreenId


class InteractionKind(str, Enum):
    NONE = "none"
    NAVIGATE = "navigate"
    REMAP = "remap"
    EXIT = "exit"


class Interaction(NamedTuple):
    kind: InteractionKind
    target: Optional[ScreenId] = None
    action: Optional[ActionId] = None


NO_INTERACTION = Interaction(InteractionKind.NONE)


class ShellCore:
    """Layout, overlay, crawl and remap state for the active screen.

    Time comes from ``on_tick``; calls that need "now" use the most recent
    tick timestamp unless a ``clock`` is supplied.
    """

    def __init__(
        self,
        viewport: Viewport,
        context: Optional[SettingsContext] = None,
        clock: Optional[Callable[[], float]] = None,
        on_crawl_complete: Optional[Callable[[], None]] = None,
    ) -> None:
        self.viewport = Viewport.of(*viewport)
        self.context = context if context is not None else SettingsContext()
        self.now_ms = 0.0
        self.clock = clock if clock is not None else (lambda: self.now_ms)
        self.on_crawl_complete = on_crawl_complete

        self.layout = LayoutEngine()
        self.overlay = BrightnessOverlay(self.layout)
        self.crawl = CrawlAnimator(self.clock, on_complete=self._crawl_finished)
        self.remap = KeyRemapSession(self.context.keybinds)
        self.debouncer = ResizeDebouncer(self._apply_resize)

        self.screen: Optional[ScreenId] = None
        self._geometry: Dict[str, Geometry] = {}
        self._pending: Optional[Interaction] = None

    # ---- Screen lifecycle ----

    def activate(self, screen_id) -> None:
        try:
            screen_id = ScreenId(screen_id)
        except ValueError:
            raise PreconditionError(f"unknown screen {screen_id!r}") from None

        self.remap.cancel()
        self.layout.clear()
        self.crawl.reset()
        self._pending = None
        screens.SCREEN_BUILDERS[screen_id](self.layout, self.context)
        self.overlay = BrightnessOverlay(self.layout)
        self.overlay.apply(self.context.brightness)
        self.screen = screen_id
        if screen_id is ScreenId.STORY:
            self.crawl.start(
                crawl_start_y(self.viewport),
                crawl_end_y(settings.CRAWL_TEXT, self.viewport),
                tuning.CRAWL_DURATION_MS,
                now=self.clock(),
            )
        self._geometry = self.layout.recompute(self.viewport)
        logging.info("Screen %s activated at %dx%d", screen_id.value, self.viewport.width, self.viewport.height)

    # ---- Inbound events ----

    def on_resize(self, width: float, height: float) -> bool:
        Viewport.of(width, height)
        return self.debouncer.push(width, height, self.clock())

    def on_tick(self, timestamp_ms: float) -> Optional[Interaction]:
        """Advance time; returns a navigation request when the crawl finishes."""
        if timestamp_ms > self.now_ms:
            self.now_ms = timestamp_ms
        self.debouncer.poll(self.clock())
        self.crawl.tick(self.clock())
        pending, self._pending = self._pending, None
        return pending

    def on_pointer_drag(self, element_id: str, pointer_x: float) -> Optional[int]:
        """Move the brightness slider; returns the new brightness percentage."""
        self._require(element_id)
        if element_id not in (screens.BRIGHTNESS_HANDLE, screens.BRIGHTNESS_TRACK):
            return None
        percentage = slider_percentage(pointer_x, self._geometry[screens.BRIGHTNESS_TRACK])
        self.set_brightness(percentage)
        return percentage

    def set_brightness(self, value: int) -> bool:
        """Store a brightness and refresh the overlay and slider geometry."""
        changed = self.context.set_brightness(value)
        self._sync_brightness()
        return changed

    def on_pointer_down(self, element_id: str) -> Interaction:
        self._require(element_id)
        button = screens.BUTTONS.get(element_id)
        if button is not None:
            if button.target is None:
                return Interaction(InteractionKind.EXIT)
            return Interaction(InteractionKind.NAVIGATE, target=button.target)
        action = screens.action_for_element(element_id)
        if action is not None:
            self.remap.begin_remap(action)
            return Interaction(InteractionKind.REMAP, action=action)
        return NO_INTERACTION

    def on_raw_key_down(self, key_event) -> Optional[str]:
        return self.remap.consume_key(key_event)

    # ---- Outbound state ----

    def get_geometry(self, element_id: str) -> Geometry:
        self._sync_brightness()
        self._require(element_id)
        return self._geometry[element_id]

    def geometry(self) -> Dict[str, Geometry]:
        self._sync_brightness()
        return dict(self._geometry)

    def element_at(self, x: float, y: float) -> Optional[str]:
        self._sync_brightness()
        return self.layout.element_at(self._geometry, x, y)

    def get_overlay_state(self) -> OverlayState:
        self._sync_brightness()
        return self.overlay.state

    def get_crawl_y(self) -> float:
        return self.crawl.y

    def get_keybind_map(self) -> Dict[str, str]:
        return self.context.keybinds.as_dict()

    def get_key_labels(self) -> Dict[str, str]:
        return self.remap.labels()

    # ---- Internals ----

    def _require(self, element_id: str) -> None:
        if element_id not in self._geometry:
            raise UnknownElementError(element_id)

    def _sync_brightness(self) -> None:
        # The context may be written directly by other owners of it
        if self.overlay.brightness == self.context.brightness:
            return
        self.overlay.apply(self.context.brightness)
        self._geometry = self.layout.recompute(self.viewport)

    def _apply_resize(self, width: float, height: float) -> None:
        self.viewport = Viewport.of(width, height)
        if self.screen is ScreenId.STORY:
            self.crawl.rebase(crawl_end_y(settings.CRAWL_TEXT, self.viewport), viewport_changed=True, now=self.clock())
        self._geometry = self.layout.recompute(self.viewport)

    def _crawl_finished(self) -> None:
        if self.screen is ScreenId.STORY:
            self._pending = Interaction(InteractionKind.NAVIGATE, target=ScreenId.GAME)
        if self.on_crawl_complete is not None:
            self.on_crawl_complete()
