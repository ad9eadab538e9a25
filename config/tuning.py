"""Timing and animation tuning values (milliseconds unless noted)."""

# Quiet period before a burst of resize events is applied
RESIZE_DEBOUNCE_MS = 250

CRAWL_DURATION_MS = 10000
# Crawl starts this far below the bottom edge
CRAWL_START_OFFSET = 50
CRAWL_WIDTH_RATIO = 0.8
CRAWL_LINE_SPACING = 1.4
# Average glyph width relative to the font size, used for word wrapping
CRAWL_GLYPH_WIDTH_RATIO = 0.55

# Delay between a button press and the screen change it triggers
BUTTON_PRESS_DELAY_MS = 100

TARGET_FPS = 60
