"""Utilities for locating asset files."""

from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent
ASSETS_DIR = BASE_DIR / "materials"

BACKGROUND_IMAGE_PATH = ASSETS_DIR / "images" / "background.png"
ARCADE_FONT_PATH = ASSETS_DIR / "fonts" / "ARCADECLASSIC.ttf"
