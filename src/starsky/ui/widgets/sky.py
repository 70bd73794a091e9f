"""SkyView widget: the animated star grid and its tick timer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.widgets import Static

from starsky.constants import TICK_INTERVAL
from starsky.debug_log import log

if TYPE_CHECKING:
    from textual.timer import Timer

    from starsky.state import SkyState


class SkyView(Static):
    """Paints a SkyState and advances it on a one-shot timer.

    Every tick re-arms a fresh single-shot timer once its own work is done, so
    a slow tick pushes the next one back instead of catching up.
    """

    def __init__(
        self, state: SkyState, *, tick_interval: float = TICK_INTERVAL, **kwargs
    ) -> None:
        if "id" not in kwargs:
            kwargs["id"] = "sky"
        super().__init__("", markup=False, **kwargs)
        self.state = state
        self.tick_interval = tick_interval
        self.ticks = 0
        self._timer: Timer | None = None
        self._stopped = False

    @property
    def is_stopped(self) -> bool:
        return self._stopped

    def on_mount(self) -> None:
        self._paint()
        self._arm_timer()

    def on_unmount(self) -> None:
        """Clean up timer when the view is removed."""
        self.stop()

    def select_theme(self, index: int) -> None:
        """Swap in a fresh state for theme ``index`` and repaint."""
        self.state = self.state.with_theme(index)
        self._paint()

    def stop(self) -> None:
        """Cancel the pending tick; no further ticks are scheduled."""
        self._stopped = True
        if self._timer is not None:
            self._timer.stop()
            self._timer = None

    def _arm_timer(self) -> None:
        if self._stopped:
            return
        self._timer = self.set_timer(self.tick_interval, self._on_tick, name="sky-tick")

    def _on_tick(self) -> None:
        self._timer = None
        if self._stopped:
            return
        self.state.tick()
        self.ticks += 1
        log.debug("Sky tick", tick=self.ticks, theme=self.state.theme.name)
        self._paint()
        self._arm_timer()

    def _paint(self) -> None:
        self.update(self.state.render())
