"""Starsky: a themed terminal sky of blinking, swaying and flowing glyphs."""

__version__ = "0.1.0"
