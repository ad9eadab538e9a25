"""Drawing helpers for menu screens: buttons, slider, keybind rows, crawl."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

import pygame

from assets.loaders import load_font
from config import settings
from core.crawl import crawl_line_height, wrap_crawl_text
from core.keybinds import ActionId
from core.layout import Geometry
from ui import screens


def geometry_rect(geometry: Geometry) -> pygame.Rect:
    rect = pygame.Rect(0, 0, int(geometry.width or 0), int(geometry.height or 0))
    rect.center = (int(geometry.x), int(geometry.y))
    return rect


def draw_background(surface: pygame.Surface, image: pygame.Surface, geometry: Geometry, alpha: float) -> None:
    """Stretch the background over the viewport at the given brightness alpha.

    Alpha above 1.0 brightens the image instead of making it more opaque.
    """
    scaled = pygame.transform.smoothscale(image, (int(geometry.width), int(geometry.height)))
    if alpha < 1.0:
        scaled.set_alpha(int(alpha * 255))
    surface.blit(scaled, geometry_rect(geometry))
    if alpha > 1.0:
        boost = int((alpha - 1.0) * 80)
        surface.fill((boost, boost, boost), geometry_rect(geometry), special_flags=pygame.BLEND_RGB_ADD)


def draw_darkness_overlay(surface: pygame.Surface, geometry: Geometry, alpha: float) -> None:
    if alpha <= 0.0:
        return
    overlay = pygame.Surface((int(geometry.width), int(geometry.height)), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, int(alpha * 255)))
    surface.blit(overlay, geometry_rect(geometry))


def draw_text(
    surface: pygame.Surface,
    text: str,
    geometry: Geometry,
    base_size: int,
    color: Tuple[int, int, int] = settings.TEXT_COLOR,
    anchor: str = "center",
) -> None:
    font = load_font(base_size * (geometry.font_scale or 1.0))
    rendered = font.render(text, True, color)
    rect = rendered.get_rect()
    setattr(rect, anchor, (int(geometry.x), int(geometry.y)))
    surface.blit(rendered, rect)


def draw_title(surface: pygame.Surface, geometry: Geometry) -> None:
    """Draw the title one letter at a time with fixed spacing."""
    scale = geometry.font_scale or 1.0
    spacing = settings.TITLE_LETTER_SPACING * scale
    start_x = geometry.x - (len(settings.TITLE_TEXT) - 1) * spacing / 2
    for index, letter in enumerate(settings.TITLE_TEXT):
        letter_geometry = geometry._replace(x=start_x + index * spacing)
        draw_text(surface, letter, letter_geometry, settings.TITLE_FONT_SIZE)


def draw_button(surface: pygame.Surface, element_id: str, geometry: Geometry, hovered: bool) -> None:
    spec = screens.BUTTONS[element_id]
    rect = geometry_rect(geometry)
    pygame.draw.rect(surface, spec.hover_color if hovered else spec.color, rect)
    pygame.draw.rect(surface, settings.TEXT_COLOR, rect, 4)
    color = settings.HOVER_TEXT_COLOR if hovered else settings.TEXT_COLOR
    draw_text(surface, spec.text, geometry, settings.BUTTON_FONT_SIZE, color)


def draw_keybind_rows(
    surface: pygame.Surface,
    geometries: Dict[str, Geometry],
    labels: Dict[str, str],
    selected: Optional[ActionId],
    hovered: Optional[str],
) -> None:
    for action in ActionId:
        label_geometry = geometries[screens.keybind_label_id(action)]
        draw_text(surface, action.value.upper(), label_geometry, settings.TEXT_FONT_SIZE, anchor="midright")

        button_id = screens.keybind_button_id(action)
        button_geometry = geometries[button_id]
        if action is selected:
            fill = settings.KEY_BUTTON_ACTIVE_COLOR
        elif hovered == button_id:
            fill = settings.KEY_BUTTON_HOVER_COLOR
        else:
            fill = settings.KEY_BUTTON_COLOR
        rect = geometry_rect(button_geometry)
        pygame.draw.rect(surface, fill, rect)
        pygame.draw.rect(surface, settings.TEXT_COLOR, rect, 2)
        draw_text(surface, labels[action.value], button_geometry, settings.TEXT_FONT_SIZE)


def draw_brightness_slider(surface: pygame.Surface, geometries: Dict[str, Geometry], brightness: int) -> None:
    draw_text(surface, "BRIGHTNESS", geometries[screens.BRIGHTNESS_LABEL], settings.TEXT_FONT_SIZE, anchor="midright")
    pygame.draw.rect(surface, settings.SLIDER_TRACK_COLOR, geometry_rect(geometries[screens.BRIGHTNESS_TRACK]))
    pygame.draw.rect(surface, settings.SLIDER_HANDLE_COLOR, geometry_rect(geometries[screens.BRIGHTNESS_HANDLE]))
    draw_text(
        surface,
        f"{brightness}%",
        geometries[screens.BRIGHTNESS_VALUE],
        settings.TEXT_FONT_SIZE,
        anchor="midleft",
    )


def draw_crawl(surface: pygame.Surface, geometry: Geometry, crawl_y: float, viewport) -> None:
    """Draw the wrapped synopsis with its top edge at ``crawl_y``."""
    line_height = crawl_line_height(viewport)
    for index, line in enumerate(wrap_crawl_text(settings.CRAWL_TEXT, viewport)):
        y = crawl_y + index * line_height + line_height / 2
        if y < -line_height or y > viewport.height + line_height:
            continue
        draw_text(surface, line, geometry._replace(y=y), settings.TEXT_FONT_SIZE)
