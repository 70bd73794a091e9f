"""Main Starsky TUI application."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.app import App

from starsky.config import SkyConfig
from starsky.debug_log import log
from starsky.keybindings import APP_BINDINGS
from starsky.state import SkyState
from starsky.themes import THEMES, to_textual_theme
from starsky.ui.widgets import SkyView

if TYPE_CHECKING:
    from textual.app import ComposeResult


class StarskyApp(App):
    """Starsky TUI Application - a themed, animated sky of glyphs."""

    TITLE = "starsky"
    CSS_PATH = "styles/starsky.tcss"
    ENABLE_COMMAND_PALETTE = False

    BINDINGS = APP_BINDINGS

    def __init__(self, config: SkyConfig | None = None) -> None:
        super().__init__()
        self.config = config if config is not None else SkyConfig()

        for sky_theme in THEMES:
            self.register_theme(to_textual_theme(sky_theme))

        self._initial_state = SkyState.start(
            self.config.initial_theme,
            rng=self.config.make_rng(),
            cols=self.config.cols,
            rows=self.config.rows,
            star_count=self.config.star_count,
        )
        self.theme = self._initial_state.theme.textual_name

    @property
    def sky(self) -> SkyView:
        return self.query_one(SkyView)

    def compose(self) -> ComposeResult:
        yield SkyView(self._initial_state, tick_interval=self.config.tick_interval)

    def on_mount(self) -> None:
        log.info(
            "Starsky started",
            theme=self._initial_state.theme.name,
            seed=self.config.seed,
        )

    def action_select_theme(self, index: int) -> None:
        """Switch to catalog theme ``index`` with a freshly drawn sky."""
        sky = self.sky
        sky.select_theme(index)
        self.theme = sky.state.theme.textual_name
        log.info("Theme changed", theme=sky.state.theme.name)

    async def action_quit(self) -> None:
        """Stop the animation and exit."""
        self.sky.stop()
        log.info("Quit requested")
        self.exit()
