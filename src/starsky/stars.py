"""Star records and the per-theme rules that move them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from starsky.constants import GRID_COLS, GRID_ROWS, STAR_COUNT
from starsky.themes import Motion

if TYPE_CHECKING:
    import random
    from collections.abc import Callable, Iterable

    from starsky.themes import SkyTheme


@dataclass(slots=True)
class Star:
    """One positioned glyph on the grid."""

    x: int
    y: int
    visible: bool
    symbol: str
    velocity: int = 0


def _initial_velocity(motion: Motion, rng: random.Random) -> int:
    if motion is Motion.SWAY:
        return rng.choice((-1, 1))
    if motion is Motion.FLOW:
        return 1
    return 0


def create_stars(
    theme: SkyTheme,
    rng: random.Random,
    *,
    count: int = STAR_COUNT,
    cols: int = GRID_COLS,
    rows: int = GRID_ROWS,
) -> list[Star]:
    """Draw a fresh set of stars for ``theme``.

    Position, visibility and glyph are uniform draws from ``rng``; velocity
    follows the theme's motion profile (0 to twinkle, +/-1 to sway, +1 to flow).
    """
    stars: list[Star] = []
    for _ in range(count):
        x = rng.randrange(cols)
        y = rng.randrange(rows)
        visible = rng.randrange(2) == 0
        symbol = rng.choice(theme.symbols)
        stars.append(
            Star(
                x=x,
                y=y,
                visible=visible,
                symbol=symbol,
                velocity=_initial_velocity(theme.motion, rng),
            )
        )
    return stars


def _stay(star: Star, cols: int) -> None:
    """Twinkling stars keep their cell."""


def _sway(star: Star, cols: int) -> None:
    star.x += star.velocity
    if star.x < 0:
        star.x = 0
        star.velocity = 1
    elif star.x >= cols:
        star.x = cols - 1
        star.velocity = -1


def _flow(star: Star, cols: int) -> None:
    star.x = (star.x + 1) % cols


_MOVERS: dict[Motion, Callable[[Star, int], None]] = {
    Motion.TWINKLE: _stay,
    Motion.SWAY: _sway,
    Motion.FLOW: _flow,
}


def advance_stars(
    stars: Iterable[Star],
    theme: SkyTheme,
    rng: random.Random,
    *,
    cols: int = GRID_COLS,
) -> None:
    """Apply one tick of ``theme``'s rules to ``stars`` in place."""
    move = _MOVERS[theme.motion]
    for star in stars:
        # Blink draw comes before the move so seeded runs replay exactly
        if rng.random() < theme.blink_chance:
            star.visible = not star.visible
        move(star, cols)
