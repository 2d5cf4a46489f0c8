from __future__ import annotations

from typing import Any

from textplot.figure import Figure
from textplot.settings import PlotConfig


def render(chart: Any, config: PlotConfig | None = None) -> str:
    return Figure(chart=chart, config=config or PlotConfig()).render()


def plot(chart: Any, **options: Any) -> str:
    """Render ``chart`` with keyword options.

    Options use the ``PlotConfig`` field names; the camelCase spellings used by
    JSON callers (``yRange``, ``showTickLabel`` ...) are accepted as well.
    """
    return render(chart, PlotConfig.from_mapping(options))
