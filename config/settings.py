"""Screen, color, and layout constants."""

WIDTH = 800
HEIGHT = 600

# Layouts are authored against this size and scaled from it
REFERENCE_WIDTH = 800
REFERENCE_HEIGHT = 600

# Window sizes are clamped to this range before reaching the core
VIEWPORT_MIN_WIDTH = 250
VIEWPORT_MIN_HEIGHT = 250
VIEWPORT_MAX_WIDTH = 1920
VIEWPORT_MAX_HEIGHT = 1080

SCALE_MIN = 0.6
SCALE_MAX = 1.2

BG_COLOR = (0, 0, 0)
TEXT_COLOR = (255, 255, 255)
HOVER_TEXT_COLOR = (255, 255, 0)

COSMIC_BLUE = (0x4A, 0xA8, 0xC0)
WARM_ORANGE = (0xFF, 0x8C, 0x42)
MIXED_PURPLE = (0x93, 0x81, 0xFF)
KEY_BUTTON_COLOR = (0x33, 0x33, 0x33)
KEY_BUTTON_HOVER_COLOR = (0x55, 0x55, 0x55)
KEY_BUTTON_ACTIVE_COLOR = (0xFF, 0x00, 0x00)
SLIDER_TRACK_COLOR = (0x33, 0x33, 0x33)
SLIDER_HANDLE_COLOR = (0xFF, 0xFF, 0xFF)

TITLE_FONT_SIZE = 82
HEADING_FONT_SIZE = 48
BUTTON_FONT_SIZE = 32
TEXT_FONT_SIZE = 24

BUTTON_WIDTH = 200
BUTTON_HEIGHT = 50
KEY_BUTTON_WIDTH = 100
KEY_BUTTON_HEIGHT = 40
SLIDER_TRACK_WIDTH = 200
SLIDER_TRACK_HEIGHT = 10
SLIDER_HANDLE_WIDTH = 20
SLIDER_HANDLE_HEIGHT = 30

TITLE_TEXT = "SOLARA"
TITLE_LETTER_SPACING = 50
REMAP_PROMPT = "PRESS KEY"

CRAWL_TEXT = (
    "Long after the last colony ships left the inner worlds, the star Solara "
    "began to dim. Its keepers, a scattered order of engineers and pilots, "
    "learned that something beyond the rim was drinking its light. "
    "With the fleets gone and the relay stations falling silent one by one, "
    "a single courier is sent into the dark to find the source before the "
    "last sun goes out."
)

# Global settings defaults
DEFAULT_BRIGHTNESS = 100
DEFAULT_SOUND_VOLUME = 80
DEFAULT_MUSIC_VOLUME = 60
DEFAULT_KEYBINDS = {
    "attack": "SPACE",
    "jump": "W",
    "left": "A",
    "right": "D",
    "crouch": "S",
}
