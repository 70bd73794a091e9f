"""Widget components for Starsky."""

from starsky.ui.widgets.sky import SkyView

__all__ = ["SkyView"]
