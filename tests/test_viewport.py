from __future__ import annotations

import math

import pytest

from core.errors import PreconditionError
from core.viewport import Viewport


def test_height_ratio_and_scale_factor() -> None:
    viewport = Viewport.of(800, 600)
    assert viewport.height_ratio == 1.0
    assert viewport.scale_factor == 1.0
    assert viewport.center_x == 400
    assert viewport.center_y == 300

    wide = Viewport.of(1600, 900)
    assert wide.height_ratio == 1.5
    assert wide.scale_factor == 1.2

    narrow = Viewport.of(300, 300)
    assert narrow.scale_factor == 0.6

    mid = Viewport.of(720, 600)
    assert math.isclose(mid.scale_factor, 0.9)


@pytest.mark.parametrize("width,height", [(0, 600), (800, -1), (800, "600"), (None, 600)])
def test_viewport_rejects_invalid_dimensions(width, height) -> None:
    with pytest.raises(PreconditionError):
        Viewport.of(width, height)


def test_clamped_keeps_viewport_in_configured_range() -> None:
    assert Viewport.clamped(100, 100) == (250, 250)
    assert Viewport.clamped(4000, 3000) == (1920, 1080)
    assert Viewport.clamped(1024, 768) == (1024, 768)
