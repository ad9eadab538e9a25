"""Asset loading helpers (background image, fonts)."""

from __future__ import annotations

import logging

import pygame

from assets.paths import ARCADE_FONT_PATH, BACKGROUND_IMAGE_PATH
from config import settings

_font_cache: dict[int, pygame.font.Font] = {}


def load_background(path=None) -> pygame.Surface:
    """Load the menu background, falling back to a vertical gradient."""
    target_path = path or BACKGROUND_IMAGE_PATH
    try:
        return pygame.image.load(str(target_path)).convert()
    except (FileNotFoundError, pygame.error):
        logging.warning("Background image not found at %s, using gradient fallback", target_path)
    surface = pygame.Surface((settings.REFERENCE_WIDTH, settings.REFERENCE_HEIGHT))
    for y in range(settings.REFERENCE_HEIGHT):
        shade = y / settings.REFERENCE_HEIGHT
        color = (int(10 + 30 * shade), int(12 + 20 * shade), int(40 + 60 * shade))
        pygame.draw.line(surface, color, (0, y), (settings.REFERENCE_WIDTH, y))
    return surface


def load_font(size: int) -> pygame.font.Font:
    """Return the arcade font at ``size`` pixels, cached per size."""
    size = max(1, int(size))
    font = _font_cache.get(size)
    if font is not None:
        return font
    if ARCADE_FONT_PATH.exists():
        font = pygame.font.Font(ARCADE_FONT_PATH.as_posix(), size)
    else:
        if not _font_cache:
            logging.warning("Font not found at %s, using default system font", ARCADE_FONT_PATH)
        font = pygame.font.SysFont("arial", size)
    _font_cache[size] = font
    return font
