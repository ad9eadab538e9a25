"""Brightness to background/darkness alpha mapping and the darkness overlay."""

from __future__ import annotations

import math
from typing import NamedTuple, Optional

from core.errors import PreconditionError
from core.layout import Geometry, LayoutEngine
from core.viewport import Viewport

DARKNESS_OVERLAY_ID = "darkness_overlay"

BACKGROUND_ALPHA_MIN = 0.2
BACKGROUND_ALPHA_SPAN = 1.3
DARKNESS_ALPHA_MAX = 0.7
# Below this brightness the darkness overlay is shown
DARKNESS_THRESHOLD = 50


class OverlayState(NamedTuple):
    background_alpha: float
    darkness_alpha: float
    overlay_visible: bool


def validate_brightness(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise PreconditionError(f"brightness must be an integer, got {value!r}")
    if not 0 <= value <= 100:
        raise PreconditionError(f"brightness must be within 0..100, got {value}")
    return value


def overlay_state(brightness: int) -> OverlayState:
    """Map a 0-100 brightness to background and darkness overlay alpha.

    The background never drops below 0.2 and the overlay never exceeds 0.7,
    so the scene stays visible even at zero brightness.
    """
    validate_brightness(brightness)
    background_alpha = BACKGROUND_ALPHA_MIN + (brightness / 100) * BACKGROUND_ALPHA_SPAN
    darkness_alpha = 0.0
    if brightness < DARKNESS_THRESHOLD:
        darkness_alpha = max(0.0, DARKNESS_ALPHA_MAX - (brightness / DARKNESS_THRESHOLD) * DARKNESS_ALPHA_MAX)
    return OverlayState(background_alpha, darkness_alpha, darkness_alpha > 0)


def slider_percentage(pointer_x: float, track: Geometry) -> int:
    """Convert a drag position on a slider track into a 0-100 percentage."""
    if not track.width:
        raise PreconditionError("slider track has no width")
    left = track.x - track.width / 2
    right = track.x + track.width / 2
    handle_x = max(left, min(right, pointer_x))
    # round half up, not to even
    return int(math.floor((handle_x - left) / track.width * 100 + 0.5))


def full_viewport_rule(viewport: Viewport) -> Geometry:
    return Geometry(viewport.center_x, viewport.center_y, viewport.width, viewport.height)


class BrightnessOverlay:
    """Per-screen owner of the darkness overlay element.

    The overlay is registered with the layout engine the first time it is
    needed and afterwards only its alpha changes.
    """

    def __init__(self, layout: LayoutEngine, element_id: str = DARKNESS_OVERLAY_ID) -> None:
        self.layout = layout
        self.element_id = element_id
        self.created = False
        self.brightness: Optional[int] = None
        self.state = overlay_state(100)

    def apply(self, brightness: int) -> OverlayState:
        state = overlay_state(brightness)
        if state.overlay_visible and not self.created:
            self.layout.register(self.element_id, full_viewport_rule)
            self.created = True
        self.brightness = brightness
        self.state = state
        return state
