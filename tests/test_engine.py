from __future__ import annotations

import math

import pytest

from config import settings, tuning
from core.brightness import DARKNESS_OVERLAY_ID
from core.crawl import crawl_end_y
from core.engine import InteractionKind, ShellCore
from core.errors import PreconditionError, UnknownElementError
from core.layout import Geometry
from core.viewport import Viewport
from ui import screens
from ui.screens import ScreenId


def _count_recomputes(core: ShellCore) -> list:
    calls: list = []
    original = core.layout.recompute

    def recompute(viewport: Viewport):
        calls.append(viewport)
        return original(viewport)

    core.layout.recompute = recompute
    return calls


def test_main_menu_geometry(core: ShellCore) -> None:
    core.activate(ScreenId.MAIN_MENU)

    assert core.get_geometry(screens.START_BUTTON) == Geometry(400, 250, 200, 50, 1.0)
    assert core.get_geometry(screens.OPTIONS_BUTTON).y == 330
    assert core.get_geometry(screens.EXIT_BUTTON).y == 410
    assert core.get_geometry(screens.TITLE) == Geometry(400, 100, font_scale=1.0)


def test_unknown_element_is_reported(core: ShellCore) -> None:
    core.activate(ScreenId.MAIN_MENU)

    with pytest.raises(UnknownElementError):
        core.get_geometry("nope")
    with pytest.raises(UnknownElementError):
        core.get_geometry(DARKNESS_OVERLAY_ID)
    with pytest.raises(KeyError):
        core.on_pointer_down("nope")


def test_activate_rejects_unknown_screen(core: ShellCore) -> None:
    with pytest.raises(PreconditionError):
        core.activate("credits")


def test_resize_burst_triggers_single_recompute(core: ShellCore) -> None:
    core.activate(ScreenId.MAIN_MENU)
    calls = _count_recomputes(core)

    core.on_tick(1000)
    core.on_resize(1000, 700)
    core.on_tick(1020)
    core.on_resize(1100, 750)
    core.on_tick(1040)
    core.on_resize(1200, 800)

    core.on_tick(1200)
    assert calls == []
    core.on_tick(1290)
    core.on_tick(1400)

    assert calls == [Viewport(1200, 800)]
    assert core.viewport == (1200, 800)
    assert core.get_geometry(screens.START_BUTTON).x == 600
    assert core.get_geometry(screens.START_BUTTON).font_scale == 1.2


def test_resize_rejects_invalid_dimensions(core: ShellCore) -> None:
    with pytest.raises(PreconditionError):
        core.on_resize(0, 600)


def test_recompute_is_idempotent_across_screens(core: ShellCore) -> None:
    for screen in ScreenId:
        core.activate(screen)
        assert core.layout.recompute(core.viewport) == core.layout.recompute(core.viewport)


def test_brightness_drag_updates_settings_overlay_and_handle(core: ShellCore) -> None:
    core.activate(ScreenId.OPTIONS)
    track = core.get_geometry(screens.BRIGHTNESS_TRACK)
    assert track.x == 420
    assert core.get_geometry(screens.BRIGHTNESS_HANDLE).x == 520

    assert core.on_pointer_drag(screens.BRIGHTNESS_HANDLE, 370) == 25
    assert core.context.brightness == 25
    assert core.get_geometry(screens.BRIGHTNESS_HANDLE).x == 370
    overlay = core.get_overlay_state()
    assert overlay.overlay_visible is True
    assert math.isclose(overlay.darkness_alpha, 0.35)
    assert core.get_geometry(DARKNESS_OVERLAY_ID) == Geometry(400, 300, 800, 600)

    assert core.on_pointer_drag(screens.BRIGHTNESS_HANDLE, -50) == 0
    assert math.isclose(core.get_overlay_state().darkness_alpha, 0.7)

    assert core.on_pointer_drag(screens.BRIGHTNESS_TRACK, 2000) == 100
    assert core.get_overlay_state().overlay_visible is False
    assert math.isclose(core.get_overlay_state().background_alpha, 1.5)


def test_brightness_survives_screen_changes(core: ShellCore) -> None:
    core.activate(ScreenId.OPTIONS)
    core.on_pointer_drag(screens.BRIGHTNESS_HANDLE, 340)
    assert core.context.brightness == 10

    core.activate(ScreenId.GAME)

    assert core.context.brightness == 10
    assert core.get_overlay_state().overlay_visible is True
    assert DARKNESS_OVERLAY_ID in core.geometry()


def test_buttons_produce_declarative_interactions(core: ShellCore) -> None:
    core.activate(ScreenId.MAIN_MENU)

    start = core.on_pointer_down(screens.START_BUTTON)
    assert start.kind is InteractionKind.NAVIGATE
    assert start.target is ScreenId.STORY
    assert core.on_pointer_down(screens.OPTIONS_BUTTON).target is ScreenId.OPTIONS
    assert core.on_pointer_down(screens.EXIT_BUTTON).kind is InteractionKind.EXIT
    assert core.on_pointer_down(screens.TITLE).kind is InteractionKind.NONE


def test_keybind_remap_through_core(core: ShellCore) -> None:
    core.activate(ScreenId.OPTIONS)

    assert core.on_raw_key_down({"key": "x"}) is None
    core.on_pointer_down(screens.keybind_button_id(screens.ActionId.JUMP))
    interaction = core.on_pointer_down("keybind_button.attack")
    assert interaction.kind is InteractionKind.REMAP
    assert core.get_key_labels()["jump"] == "W"
    assert core.get_key_labels()["attack"] == settings.REMAP_PROMPT

    assert core.on_raw_key_down({"key": " "}) == "SPACE"
    assert core.get_keybind_map()["attack"] == "SPACE"
    assert core.get_keybind_map()["jump"] == "W"


def test_leaving_options_cancels_pending_remap(core: ShellCore) -> None:
    core.activate(ScreenId.OPTIONS)
    core.on_pointer_down("keybind_button.left")

    core.activate(ScreenId.MAIN_MENU)

    assert core.remap.awaiting_key is False
    assert core.on_raw_key_down({"key": "q"}) is None
    assert core.get_keybind_map()["left"] == "A"


def test_story_crawl_rebases_on_resize_and_navigates_once(core: ShellCore) -> None:
    completions: list = []
    core.on_crawl_complete = lambda: completions.append(True)
    core.activate(ScreenId.STORY)
    start_y, end_y = core.crawl.start_y, core.crawl.end_y
    assert start_y == 600 + tuning.CRAWL_START_OFFSET
    assert end_y == crawl_end_y(settings.CRAWL_TEXT, core.viewport)

    assert core.on_tick(4000) is None
    core.on_resize(1200, 800)
    core.on_tick(4000 + tuning.RESIZE_DEBOUNCE_MS)

    expected_y = start_y + (end_y - start_y) * 0.425
    assert core.get_crawl_y() == pytest.approx(expected_y)
    assert core.crawl.end_y == crawl_end_y(settings.CRAWL_TEXT, Viewport(1200, 800))
    assert core.crawl.duration == pytest.approx(tuning.CRAWL_DURATION_MS * 0.575)
    assert core.get_geometry(screens.CRAWL_TEXT).x == 600

    result = core.on_tick(tuning.CRAWL_DURATION_MS)
    assert result.kind is InteractionKind.NAVIGATE
    assert result.target is ScreenId.GAME
    assert core.get_crawl_y() == pytest.approx(core.crawl.end_y)
    assert core.on_tick(tuning.CRAWL_DURATION_MS + 500) is None
    assert completions == [True]


def test_resize_after_crawl_completion_keeps_crawl_pinned(core: ShellCore) -> None:
    core.activate(ScreenId.STORY)
    core.on_tick(tuning.CRAWL_DURATION_MS)
    pinned = core.get_crawl_y()

    core.on_resize(400, 600)
    core.on_tick(tuning.CRAWL_DURATION_MS + 1000)

    assert core.get_crawl_y() == pinned
    assert core.crawl.completed


def test_programmatic_brightness_refreshes_overlay_and_handle(core: ShellCore) -> None:
    core.activate(ScreenId.OPTIONS)

    assert core.set_brightness(10) is True
    overlay = core.get_overlay_state()
    assert math.isclose(overlay.background_alpha, 0.33)
    assert math.isclose(overlay.darkness_alpha, 0.56)
    assert overlay.overlay_visible is True
    assert core.get_geometry(screens.BRIGHTNESS_HANDLE).x == 340
    assert DARKNESS_OVERLAY_ID in core.geometry()


def test_direct_context_write_is_picked_up(core: ShellCore) -> None:
    core.activate(ScreenId.OPTIONS)

    core.context.set_brightness(10)

    overlay = core.get_overlay_state()
    assert math.isclose(overlay.background_alpha, 0.33)
    assert math.isclose(overlay.darkness_alpha, 0.56)
    assert overlay.overlay_visible is True
    assert core.get_geometry(screens.BRIGHTNESS_HANDLE).x == 340

    core.context.set_brightness(75)
    assert core.get_overlay_state().overlay_visible is False
    assert core.get_geometry(screens.BRIGHTNESS_HANDLE).x == 470
