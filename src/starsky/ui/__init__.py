"""Textual UI components for Starsky."""
