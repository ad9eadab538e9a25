"""Viewport dimensions and the scale values layouts derive from them."""

from __future__ import annotations

from numbers import Real
from typing import NamedTuple

from config import settings
from core.errors import PreconditionError


class Viewport(NamedTuple):
    width: float
    height: float

    @classmethod
    def of(cls, width: float, height: float) -> "Viewport":
        """Build a viewport, rejecting non-positive or non-numeric sizes."""
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, Real):
                raise PreconditionError(f"viewport {name} must be a number, got {value!r}")
            if value <= 0:
                raise PreconditionError(f"viewport {name} must be positive, got {value!r}")
        return cls(width, height)

    @classmethod
    def clamped(cls, width: float, height: float) -> "Viewport":
        """Clamp a raw window size into the configured viewport range."""
        return cls.of(
            max(settings.VIEWPORT_MIN_WIDTH, min(settings.VIEWPORT_MAX_WIDTH, width)),
            max(settings.VIEWPORT_MIN_HEIGHT, min(settings.VIEWPORT_MAX_HEIGHT, height)),
        )

    @property
    def center_x(self) -> float:
        return self.width / 2

    @property
    def center_y(self) -> float:
        return self.height / 2

    @property
    def height_ratio(self) -> float:
        return self.height / settings.REFERENCE_HEIGHT

    @property
    def scale_factor(self) -> float:
        return max(settings.SCALE_MIN, min(settings.SCALE_MAX, self.width / settings.REFERENCE_WIDTH))
