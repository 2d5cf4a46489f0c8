from __future__ import annotations


class PlotDataError(ValueError):
    """Chart input that cannot be read as numeric (x, y) series."""


class PlotConfigError(ValueError):
    """Render options with an unknown name, role, or value."""
