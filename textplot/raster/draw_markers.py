from __future__ import annotations

from collections.abc import Iterable

from textplot.raster.grid import Grid


def draw_markers(grid: Grid, cells: Iterable[tuple[int, int]], symbol: str) -> int:
    drawn = 0
    for col, row in cells:
        if grid.draw(col + 1, row + 1, symbol):
            drawn += 1
    return drawn
