"""Process-wide settings shared by every screen."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from config import settings
from core.brightness import validate_brightness
from core.keybinds import KeybindMap


@dataclass
class SettingsContext:
    """Owned by the app and handed to each screen; outlives screen changes."""

    brightness: int = settings.DEFAULT_BRIGHTNESS
    sound_volume: int = settings.DEFAULT_SOUND_VOLUME
    music_volume: int = settings.DEFAULT_MUSIC_VOLUME
    keybinds: KeybindMap = field(default_factory=KeybindMap)

    def set_brightness(self, value: int) -> bool:
        """Store a new brightness; returns False when it did not change."""
        validate_brightness(value)
        if value == self.brightness:
            return False
        self.brightness = value
        logging.info("Brightness set to %d%%", value)
        return True
