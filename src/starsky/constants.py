"""Grid geometry, timing and limits - no circular dependencies."""

from __future__ import annotations

GRID_COLS = 20
GRID_ROWS = 10
STAR_COUNT = 40

# Seconds between one-shot animation ticks
TICK_INTERVAL = 0.5

# Each cell is two text columns so wide glyphs line up with blanks
CELL_BLANK = "  "

TWINKLE_BLINK_CHANCE = 0.30
DRIFT_BLINK_CHANCE = 0.10

# Keys that select a theme, by catalog index
THEME_KEYS: dict[str, int] = {"1": 0, "2": 1, "3": 2}
QUIT_KEYS = ("q", "ctrl+c")

MAX_LOG_MESSAGE_LENGTH = 4096
