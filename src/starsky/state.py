"""Animation state for the sky view."""

from __future__ import annotations

import random
from dataclasses import dataclass, field, replace

from starsky.constants import GRID_COLS, GRID_ROWS, STAR_COUNT
from starsky.grid import render_grid, render_header
from starsky.stars import Star, advance_stars, create_stars
from starsky.themes import SkyTheme, theme_at


@dataclass
class SkyState:
    """Active theme plus the stars drawn for it.

    Ticks mutate ``stars`` in place. Switching theme never mutates: it returns
    a new state with a freshly drawn star set.
    """

    theme_index: int = 0
    stars: list[Star] = field(default_factory=list)
    cols: int = GRID_COLS
    rows: int = GRID_ROWS
    star_count: int = STAR_COUNT
    rng: random.Random = field(default_factory=random.Random, repr=False)

    @classmethod
    def start(
        cls,
        theme_index: int = 0,
        *,
        rng: random.Random | None = None,
        cols: int = GRID_COLS,
        rows: int = GRID_ROWS,
        star_count: int = STAR_COUNT,
    ) -> SkyState:
        """Build the opening state with stars drawn for ``theme_index``."""
        state = cls(
            theme_index=theme_index,
            cols=cols,
            rows=rows,
            star_count=star_count,
            rng=rng if rng is not None else random.Random(),
        )
        return state.with_theme(theme_index)

    @property
    def theme(self) -> SkyTheme:
        return theme_at(self.theme_index)

    def with_theme(self, theme_index: int) -> SkyState:
        """Return a new state on ``theme_index`` with a fresh star set."""
        theme = theme_at(theme_index)
        stars = create_stars(
            theme,
            self.rng,
            count=self.star_count,
            cols=self.cols,
            rows=self.rows,
        )
        return replace(self, theme_index=theme_index, stars=stars)

    def tick(self) -> None:
        advance_stars(self.stars, self.theme, self.rng, cols=self.cols)

    def render(self) -> str:
        """Header, a blank line, then the grid."""
        grid = render_grid(self.stars, cols=self.cols, rows=self.rows)
        return f"{render_header(self.theme)}\n\n{grid}"
