"""Pygame presentation loop that drives the shell core."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Tuple

import pygame

from assets.loaders import load_background
from config import settings, tuning
from core.brightness import DARKNESS_OVERLAY_ID
from core.context import SettingsContext
from core.engine import Interaction, InteractionKind, ShellCore
from core.viewport import Viewport
from ui import menu, screens
from ui.screens import ScreenId

ARROW_KEY_NAMES = {
    pygame.K_UP: "ArrowUp",
    pygame.K_DOWN: "ArrowDown",
    pygame.K_LEFT: "ArrowLeft",
    pygame.K_RIGHT: "ArrowRight",
}

SLIDER_ELEMENTS = (screens.BRIGHTNESS_HANDLE, screens.BRIGHTNESS_TRACK)


def raw_key_from_event(event) -> str:
    """Translate a pygame KEYDOWN event into a browser-style key label."""
    if event.key in ARROW_KEY_NAMES:
        return ARROW_KEY_NAMES[event.key]
    if event.key == pygame.K_SPACE:
        return " "
    if event.unicode and event.unicode.isprintable():
        return event.unicode
    return pygame.key.name(event.key)


class ShellApp:
    def __init__(self) -> None:
        pygame.init()
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

        self.screen = pygame.display.set_mode((settings.WIDTH, settings.HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption("Solara")
        self.clock = pygame.time.Clock()
        self.background = load_background()

        self.context = SettingsContext()
        self.core = ShellCore(Viewport.of(settings.WIDTH, settings.HEIGHT), self.context)
        self.core.activate(ScreenId.MAIN_MENU)

        self.dragging = False
        self.pressed: Optional[str] = None
        self.scheduled: Optional[Tuple[Interaction, float]] = None
        self.running = True

    def _now(self) -> float:
        return float(pygame.time.get_ticks())

    def _schedule(self, element_id: str, interaction: Interaction) -> None:
        # The button shows its pressed colour briefly before acting
        self.pressed = element_id
        self.scheduled = (interaction, self._now() + tuning.BUTTON_PRESS_DELAY_MS)

    def apply_interaction(self, interaction: Optional[Interaction]) -> None:
        if interaction is None:
            return
        if interaction.kind is InteractionKind.NAVIGATE:
            logging.info("Switching to %s", interaction.target.value)
            self.core.activate(interaction.target)
        elif interaction.kind is InteractionKind.EXIT:
            logging.info("Exit requested")
            self.running = False

    def handle_pointer_down(self, pos: Tuple[int, int]) -> None:
        element_id = self.core.element_at(*pos)
        if element_id is None:
            return
        if element_id in SLIDER_ELEMENTS:
            self.dragging = True
            self.core.on_pointer_drag(element_id, pos[0])
            return
        interaction = self.core.on_pointer_down(element_id)
        if interaction.kind in (InteractionKind.NAVIGATE, InteractionKind.EXIT):
            self._schedule(element_id, interaction)

    def handle_key_down(self, event) -> None:
        if self.core.remap.awaiting_key:
            self.core.on_raw_key_down(raw_key_from_event(event))
        elif event.key == pygame.K_ESCAPE and self.core.screen is not ScreenId.MAIN_MENU:
            self.core.activate(ScreenId.MAIN_MENU)

    def process_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.VIDEORESIZE:
                viewport = Viewport.clamped(event.w, event.h)
                self.core.on_resize(viewport.width, viewport.height)
            elif event.type == pygame.KEYDOWN:
                self.handle_key_down(event)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if self.scheduled is None:
                    self.handle_pointer_down(event.pos)
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self.dragging = False
            elif event.type == pygame.MOUSEMOTION and self.dragging:
                if self.core.screen is ScreenId.OPTIONS:
                    self.core.on_pointer_drag(screens.BRIGHTNESS_HANDLE, event.pos[0])

    def update(self) -> None:
        now = self._now()
        self.apply_interaction(self.core.on_tick(now))
        if self.scheduled is not None and now >= self.scheduled[1]:
            interaction, _ = self.scheduled
            self.scheduled = None
            self.pressed = None
            self.apply_interaction(interaction)

    def draw(self) -> None:
        geometries = self.core.geometry()
        overlay = self.core.get_overlay_state()
        hovered = self.core.element_at(*pygame.mouse.get_pos())

        self.screen.fill(settings.BG_COLOR)
        menu.draw_background(self.screen, self.background, geometries[screens.BACKGROUND], overlay.background_alpha)

        for element_id in screens.BUTTONS:
            if element_id in geometries:
                menu.draw_button(
                    self.screen,
                    element_id,
                    geometries[element_id],
                    hovered == element_id or self.pressed == element_id,
                )

        if self.core.screen is ScreenId.MAIN_MENU:
            menu.draw_title(self.screen, geometries[screens.TITLE])
        elif self.core.screen is ScreenId.OPTIONS:
            menu.draw_text(self.screen, "OPTIONS", geometries[screens.OPTIONS_TITLE], settings.HEADING_FONT_SIZE)
            menu.draw_keybind_rows(
                self.screen,
                geometries,
                self.core.get_key_labels(),
                self.core.remap.selected_action,
                hovered,
            )
            menu.draw_brightness_slider(self.screen, geometries, self.context.brightness)
        elif self.core.screen is ScreenId.STORY:
            menu.draw_crawl(self.screen, geometries[screens.CRAWL_TEXT], self.core.get_crawl_y(), self.core.viewport)
        elif self.core.screen is ScreenId.GAME:
            menu.draw_text(self.screen, "GAME STARTED!", geometries[screens.GAME_TITLE], settings.HEADING_FONT_SIZE)
            menu.draw_text(
                self.screen,
                "GAMEPLAY COMING SOON",
                geometries[screens.GAME_SUBTITLE],
                settings.TEXT_FONT_SIZE,
                settings.HOVER_TEXT_COLOR,
            )

        if DARKNESS_OVERLAY_ID in geometries:
            menu.draw_darkness_overlay(self.screen, geometries[DARKNESS_OVERLAY_ID], overlay.darkness_alpha)

    def run(self) -> None:
        while self.running:
            self.process_events()
            self.update()
            self.draw()
            pygame.display.flip()
            self.clock.tick(tuning.TARGET_FPS)

        pygame.quit()
        sys.exit()
