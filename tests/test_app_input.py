from __future__ import annotations

from types import SimpleNamespace

import pygame

from core.keybinds import normalize_key_name
from runtime.app import raw_key_from_event


def _event(key: int, unicode: str = "") -> SimpleNamespace:
    return SimpleNamespace(key=key, unicode=unicode)


def test_arrow_and_space_keys_use_browser_labels() -> None:
    assert raw_key_from_event(_event(pygame.K_UP)) == "ArrowUp"
    assert raw_key_from_event(_event(pygame.K_LEFT)) == "ArrowLeft"
    assert raw_key_from_event(_event(pygame.K_SPACE, " ")) == " "


def test_printable_keys_use_their_character() -> None:
    assert raw_key_from_event(_event(pygame.K_q, "q")) == "q"
    assert normalize_key_name(raw_key_from_event(_event(pygame.K_q, "q"))) == "Q"
    assert normalize_key_name(raw_key_from_event(_event(pygame.K_DOWN))) == "DOWN"
