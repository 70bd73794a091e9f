"""Runtime settings for Starsky.

Settings are built in-process (CLI options, tests); nothing is read from disk
or the environment.
"""

from __future__ import annotations

import random

from pydantic import BaseModel, ConfigDict, Field, field_validator

from starsky.constants import GRID_COLS, GRID_ROWS, STAR_COUNT, TICK_INTERVAL
from starsky.themes import theme_count


class SkyConfig(BaseModel):
    """Grid geometry, animation pacing and the random seed."""

    model_config = ConfigDict(frozen=True)

    cols: int = Field(default=GRID_COLS, ge=1, description="Grid width in cells")
    rows: int = Field(default=GRID_ROWS, ge=1, description="Grid height in cells")
    star_count: int = Field(default=STAR_COUNT, ge=1, description="Stars per theme")
    tick_interval: float = Field(
        default=TICK_INTERVAL, gt=0, description="Seconds between animation ticks"
    )
    initial_theme: int = Field(default=0, description="Catalog index shown at startup")
    seed: int | None = Field(default=None, description="Random seed (None = unseeded)")

    @field_validator("initial_theme")
    @classmethod
    def validate_initial_theme(cls, value: int) -> int:
        if not 0 <= value < theme_count():
            raise ValueError(f"initial_theme must be in 0..{theme_count() - 1}")
        return value

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)
