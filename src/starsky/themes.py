"""Theme catalog: colors, glyphs and the motion profile of each sky."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from textual.theme import Theme

from starsky.constants import DRIFT_BLINK_CHANCE, TWINKLE_BLINK_CHANCE


class Motion(Enum):
    """How stars move between ticks."""

    TWINKLE = "twinkle"  # blink in place
    SWAY = "sway"  # drift left/right, bounce off the edges
    FLOW = "flow"  # drift right, wrap around


class UnknownThemeError(IndexError):
    """Raised when a theme index falls outside the catalog."""

    def __init__(self, index: int, count: int) -> None:
        super().__init__(f"Theme index {index} out of range (0..{count - 1})")
        self.index = index


@dataclass(frozen=True, slots=True)
class SkyTheme:
    """A named bundle of colors, candidate glyphs and a motion profile."""

    name: str
    foreground: str
    background: str
    symbols: tuple[str, ...]
    motion: Motion
    blink_chance: float

    def __post_init__(self) -> None:
        if not self.symbols:
            raise ValueError(f"Theme {self.name!r} needs at least one symbol")

    @property
    def slug(self) -> str:
        return self.name.lower().replace(" ", "-")

    @property
    def textual_name(self) -> str:
        """Name under which the matching Textual theme is registered."""
        return f"starsky-{self.slug}"


THEMES: tuple[SkyTheme, ...] = (
    SkyTheme(
        name="Starry Sky",
        foreground="#FAFAFA",
        background="#0B1020",
        symbols=("✨",),
        motion=Motion.TWINKLE,
        blink_chance=TWINKLE_BLINK_CHANCE,
    ),
    SkyTheme(
        name="Flowers",
        foreground="#FFD3E0",
        background="#1B2F2B",
        symbols=("🌸", "🌼", "🌺"),
        motion=Motion.SWAY,
        blink_chance=DRIFT_BLINK_CHANCE,
    ),
    SkyTheme(
        name="Ocean",
        foreground="#A3DFF7",
        background="#0E3B5F",
        symbols=("🌊", "💧"),
        motion=Motion.FLOW,
        blink_chance=DRIFT_BLINK_CHANCE,
    ),
)


def theme_count() -> int:
    return len(THEMES)


def theme_at(index: int) -> SkyTheme:
    """Return the catalog entry at ``index``.

    Negative indices are rejected rather than counted from the end.

    Raises:
        UnknownThemeError: If ``index`` is outside ``[0, theme_count())``.
    """
    if not 0 <= index < len(THEMES):
        raise UnknownThemeError(index, len(THEMES))
    return THEMES[index]


def to_textual_theme(theme: SkyTheme) -> Theme:
    """Build the Textual color theme that paints ``theme``."""
    return Theme(
        name=theme.textual_name,
        primary=theme.foreground,
        foreground=theme.foreground,
        background=theme.background,
        surface=theme.background,
        panel=theme.background,
        dark=True,
    )
