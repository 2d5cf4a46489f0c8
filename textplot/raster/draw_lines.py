from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from textplot.raster.grid import Grid
from textplot.scales import AxisPosition, round_half_up
from textplot.series import CustomSymbol, LineFormatter, LineFormatterArgs
from textplot.symbols import ChartSymbols


def draw_line(
    grid: Grid,
    scaled: np.ndarray,
    index: int,
    *,
    col: int,
    row: int,
    plot_height: int,
    empty: str,
    symbols: ChartSymbols,
) -> None:
    """Draw the segment ending at ``scaled[index]``.

    ``scaled`` holds value-space cell coordinates (y grows upward); ``col`` and
    ``row`` are the grid cell of the current point.
    """
    if index > 0:
        prev_x, prev_y = (float(v) for v in scaled[index - 1])
        curr_x, curr_y = (float(v) for v in scaled[index])
        prev_level = round_half_up(prev_y)
        curr_level = round_half_up(curr_y)

        steps = abs(curr_level - prev_level)
        for step in range(steps):
            if prev_level > curr_level:
                grid.draw(col, row + 1, symbols.nse)
                grid.draw(col, row - step, symbols.wns if step == steps - 1 else symbols.ns)
            else:
                grid.draw(col, row + step + 2, symbols.wsn)
                grid.draw(col, row + step + 1, symbols.ns)

        if prev_level < curr_level:
            grid.draw(col, row + 1, symbols.sne)
        elif prev_level == curr_level and grid.get(col, row + 1) == empty:
            grid.draw(col, row + 1, symbols.we)

        start = round_half_up(prev_x)
        gap = abs(round_half_up(curr_x) - start)
        for step in range(gap - 1):
            grid.draw(start + step + 1, plot_height - prev_level, symbols.we)

    if index == len(scaled) - 1:
        grid.draw(col + 1, row + 1, symbols.we)


def draw_bar(
    grid: Grid,
    *,
    col: int,
    row: int,
    axis: AxisPosition,
    has_axis_center: bool,
    symbol: str,
    horizontal: bool = False,
) -> None:
    if horizontal:
        lo, hi = sorted((col, axis.x))
        for x in range(lo, hi + 1):
            grid.draw(x, row + 1, symbol)
        return

    column = col if has_axis_center else col + 1
    lo, hi = sorted((row, axis.y))
    for y in range(lo, hi + 1):
        grid.draw(column, y, symbol)


def fill_area(grid: Grid, symbols: ChartSymbols) -> None:
    """Single downward pass: each cell under a line or area glyph becomes area."""
    triggers = {symbols.nse, symbols.wsn, symbols.we, symbols.area}
    cells = grid.cells
    for y in range(grid.height - 1):
        mask = np.fromiter((cell in triggers for cell in cells[y]), dtype=bool, count=grid.width)
        cells[y + 1, mask] = symbols.area


def draw_custom_line(grid: Grid, formatter: LineFormatter, args: LineFormatterArgs) -> None:
    result = formatter(args)
    custom: Sequence[CustomSymbol] = [result] if isinstance(result, CustomSymbol) else list(result)
    for item in custom:
        grid.draw(int(item.x), int(item.y), item.symbol)
