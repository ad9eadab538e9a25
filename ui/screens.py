"""Screen identities and the layout rules registered for each screen."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, NamedTuple, Optional

from config import settings, tuning
from core.context import SettingsContext
from core.crawl import crawl_start_y, crawl_text_height
from core.keybinds import ActionId
from core.layout import Geometry, LayoutEngine
from core.viewport import Viewport


class ScreenId(str, Enum):
    MAIN_MENU = "main_menu"
    OPTIONS = "options"
    STORY = "story"
    GAME = "game"


class ButtonSpec(NamedTuple):
    text: str
    color: tuple[int, int, int]
    hover_color: tuple[int, int, int]
    target: Optional[ScreenId]


BACKGROUND = "background"
TITLE = "title"
START_BUTTON = "start_button"
OPTIONS_BUTTON = "options_button"
EXIT_BUTTON = "exit_button"
OPTIONS_TITLE = "options_title"
BRIGHTNESS_LABEL = "brightness_label"
BRIGHTNESS_TRACK = "brightness_track"
BRIGHTNESS_HANDLE = "brightness_handle"
BRIGHTNESS_VALUE = "brightness_value"
BACK_BUTTON = "back_button"
CRAWL_TEXT = "crawl_text"
GAME_TITLE = "game_title"
GAME_SUBTITLE = "game_subtitle"
MENU_BUTTON = "menu_button"

KEYBIND_LABEL_PREFIX = "keybind_label."
KEYBIND_BUTTON_PREFIX = "keybind_button."

# A target of None means "leave the application"
BUTTONS: Dict[str, ButtonSpec] = {
    START_BUTTON: ButtonSpec("START", settings.COSMIC_BLUE, (0x5B, 0xC8, 0xE0), ScreenId.STORY),
    OPTIONS_BUTTON: ButtonSpec("OPTIONS", settings.MIXED_PURPLE, (0xB3, 0xA1, 0xFF), ScreenId.OPTIONS),
    EXIT_BUTTON: ButtonSpec("EXIT", settings.WARM_ORANGE, (0xFF, 0xAC, 0x62), None),
    BACK_BUTTON: ButtonSpec("BACK", settings.MIXED_PURPLE, (0xB3, 0xA1, 0xFF), ScreenId.MAIN_MENU),
    MENU_BUTTON: ButtonSpec("MAIN MENU", settings.COSMIC_BLUE, (0x5B, 0xC8, 0xE0), ScreenId.MAIN_MENU),
}

BRIGHTNESS_ROW_Y = 400
KEYBIND_ROWS_Y = 160
KEYBIND_ROW_SPACING = 50


def keybind_button_id(action: ActionId) -> str:
    return KEYBIND_BUTTON_PREFIX + action.value


def keybind_label_id(action: ActionId) -> str:
    return KEYBIND_LABEL_PREFIX + action.value


def action_for_element(element_id: str) -> Optional[ActionId]:
    if element_id.startswith(KEYBIND_BUTTON_PREFIX):
        return ActionId(element_id[len(KEYBIND_BUTTON_PREFIX):])
    return None


def background_rule(viewport: Viewport) -> Geometry:
    return Geometry(viewport.center_x, viewport.center_y, viewport.width, viewport.height)


def _text_rule(x: Callable[[Viewport], float], y: Callable[[Viewport], float]):
    def rule(viewport: Viewport) -> Geometry:
        return Geometry(x(viewport), y(viewport), font_scale=viewport.scale_factor)

    return rule


def _button_rule(y: Callable[[Viewport], float], width: float = settings.BUTTON_WIDTH,
                 height: float = settings.BUTTON_HEIGHT, x: Optional[Callable[[Viewport], float]] = None):
    def rule(viewport: Viewport) -> Geometry:
        scale = viewport.scale_factor
        center_x = viewport.center_x if x is None else x(viewport)
        return Geometry(center_x, y(viewport), width * scale, height * scale, scale)

    return rule


def _centered(viewport: Viewport) -> float:
    return viewport.center_x


def register_main_menu(layout: LayoutEngine, context: SettingsContext) -> None:
    layout.register(BACKGROUND, background_rule)
    layout.register(TITLE, _text_rule(_centered, lambda v: 100 * v.height_ratio))
    layout.register(START_BUTTON, _button_rule(lambda v: v.center_y - 50 * v.height_ratio), interactive=True)
    layout.register(OPTIONS_BUTTON, _button_rule(lambda v: v.center_y + 30 * v.height_ratio), interactive=True)
    layout.register(EXIT_BUTTON, _button_rule(lambda v: v.center_y + 110 * v.height_ratio), interactive=True)


def _slider_x(viewport: Viewport) -> float:
    return viewport.center_x + 20 * viewport.scale_factor


def _brightness_row_y(viewport: Viewport) -> float:
    return BRIGHTNESS_ROW_Y * viewport.height_ratio


def register_options(layout: LayoutEngine, context: SettingsContext) -> None:
    layout.register(BACKGROUND, background_rule)
    layout.register(OPTIONS_TITLE, _text_rule(_centered, lambda v: 50 * v.height_ratio))

    for index, action in enumerate(ActionId):
        def row_y(viewport: Viewport, index: int = index) -> float:
            return (KEYBIND_ROWS_Y + index * KEYBIND_ROW_SPACING) * viewport.height_ratio

        layout.register(keybind_label_id(action), _text_rule(lambda v: v.center_x - 150 * v.scale_factor, row_y))
        layout.register(
            keybind_button_id(action),
            _button_rule(row_y, settings.KEY_BUTTON_WIDTH, settings.KEY_BUTTON_HEIGHT, x=_slider_x),
            interactive=True,
        )

    layout.register(BRIGHTNESS_LABEL, _text_rule(lambda v: v.center_x - 150 * v.scale_factor, _brightness_row_y))
    layout.register(
        BRIGHTNESS_TRACK,
        _button_rule(_brightness_row_y, settings.SLIDER_TRACK_WIDTH, settings.SLIDER_TRACK_HEIGHT, x=_slider_x),
        interactive=True,
    )

    def handle_rule(viewport: Viewport) -> Geometry:
        scale = viewport.scale_factor
        track_width = settings.SLIDER_TRACK_WIDTH * scale
        left = _slider_x(viewport) - track_width / 2
        return Geometry(
            left + context.brightness / 100 * track_width,
            _brightness_row_y(viewport),
            settings.SLIDER_HANDLE_WIDTH * scale,
            settings.SLIDER_HANDLE_HEIGHT * scale,
            scale,
        )

    layout.register(BRIGHTNESS_HANDLE, handle_rule, interactive=True)
    layout.register(BRIGHTNESS_VALUE, _text_rule(lambda v: v.center_x + 140 * v.scale_factor, _brightness_row_y))
    layout.register(BACK_BUTTON, _button_rule(lambda v: v.height - 50), interactive=True)


def register_story(layout: LayoutEngine, context: SettingsContext) -> None:
    layout.register(BACKGROUND, background_rule)

    def crawl_rule(viewport: Viewport) -> Geometry:
        return Geometry(
            viewport.center_x,
            crawl_start_y(viewport),
            viewport.width * tuning.CRAWL_WIDTH_RATIO,
            crawl_text_height(settings.CRAWL_TEXT, viewport),
            viewport.scale_factor,
        )

    layout.register(CRAWL_TEXT, crawl_rule)


def register_game(layout: LayoutEngine, context: SettingsContext) -> None:
    layout.register(BACKGROUND, background_rule)
    layout.register(GAME_TITLE, _text_rule(_centered, lambda v: v.center_y))
    layout.register(GAME_SUBTITLE, _text_rule(_centered, lambda v: v.center_y + 70 * v.height_ratio))
    layout.register(MENU_BUTTON, _button_rule(lambda v: v.height - 100), interactive=True)


SCREEN_BUILDERS: Dict[ScreenId, Callable[[LayoutEngine, SettingsContext], None]] = {
    ScreenId.MAIN_MENU: register_main_menu,
    ScreenId.OPTIONS: register_options,
    ScreenId.STORY: register_story,
    ScreenId.GAME: register_game,
}
