"""Keybindings for the Starsky app, using Textual's Binding class directly."""

from __future__ import annotations

from textual.binding import Binding, BindingType

from starsky.constants import QUIT_KEYS, THEME_KEYS
from starsky.themes import theme_at

# =============================================================================
# App Bindings
# =============================================================================

THEME_BINDINGS: list[BindingType] = [
    Binding(key, f"select_theme({index})", theme_at(index).name)
    for key, index in THEME_KEYS.items()
]

QUIT_BINDINGS: list[BindingType] = [
    Binding(key, "quit", "Quit", priority=True, show=key == "q") for key in QUIT_KEYS
]

APP_BINDINGS: list[BindingType] = [*THEME_BINDINGS, *QUIT_BINDINGS]
