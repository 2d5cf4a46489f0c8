from __future__ import annotations

from collections.abc import Container, Sequence
from dataclasses import dataclass
import math

from textplot.raster.grid import Grid
from textplot.scales import AxisPosition, round_half_up
from textplot.symbols import AXIS_JOINTS, AxisSymbols


# (cell, label) pairs; the cell is a plot column for x ticks and a grid row for y ticks.
Tick = tuple[int, str]

_NEIGHBORS: dict[str, tuple[int, int]] = {"n": (0, -1), "s": (0, 1), "e": (1, 0), "w": (-1, 0)}


@dataclass(frozen=True)
class LabelShift:
    x_shift: int
    y_shift: int


def draw_axis(
    grid: Grid,
    axis: AxisPosition,
    symbols: AxisSymbols,
    *,
    has_axis_center: bool,
    hide_x_axis: bool = False,
    hide_y_axis: bool = False,
) -> None:
    if not hide_x_axis and 0 <= axis.y < grid.height:
        grid.fill_row(axis.y, symbols.we)
        grid.draw(grid.width - 1, axis.y, symbols.e)
    if not hide_y_axis and 0 <= axis.x < grid.width:
        grid.fill_column(axis.x, symbols.ns)
        grid.draw(axis.x, 0, symbols.n)
        if not has_axis_center and not hide_x_axis:
            grid.draw(axis.x, grid.height - 1, symbols.nse)


def label_shift(x_labels: Sequence[str], y_labels: Sequence[str], min_x_label: str | None) -> LabelShift:
    x_shift = max((len(label) for label in x_labels), default=0)
    longest_y = max((len(label) for label in y_labels), default=0)
    x0_shift = len(min_x_label) - 2 if min_x_label is not None else 0
    return LabelShift(x_shift=x_shift, y_shift=max(x0_shift, longest_y))


def grow_for_labels(grid: Grid, columns: Sequence[int], *, plot_width: int, shift: LabelShift, empty: str) -> bool:
    """Reserve the x-label row and the y-label gutter.

    Returns True when neighbouring points sit closer than the widest x label,
    in which case a second label row is reserved for staggering.
    """
    grid.add_row(fill=empty)

    step = plot_width
    for prev, curr in zip(columns, columns[1:]):
        step = min(step, curr - prev)

    has_to_be_moved = step < shift.x_shift
    if has_to_be_moved:
        grid.add_row(fill=empty)

    grid.add_columns(shift.y_shift + 1, left=True, fill=empty)
    return has_to_be_moved


def draw_axis_crossing(grid: Grid, x: int, y: int, symbols: AxisSymbols, *, free: Container[str]) -> None:
    if not grid.in_bounds(x, y):
        return
    sides = set()
    for side, (dx, dy) in _NEIGHBORS.items():
        cell = grid.get(x + dx, y + dy)
        if cell is not None and cell not in free:
            sides.add(side)
    if not sides:
        return
    if not sides & {"e", "w"}:
        glyph = symbols.ns
    elif not sides & {"n", "s"}:
        glyph = symbols.we
    else:
        glyph = AXIS_JOINTS[frozenset(sides)]
    grid.draw(x, y, glyph)


def dense_y_ticks(y_range: tuple[float, float], plot_height: int) -> list[tuple[int, float]]:
    """Evenly spaced (row, value) ticks over the whole y range.

    Values are rounded to integers; later ticks landing on the same row win.
    """
    y_min, y_max = min(y_range), max(y_range)
    span = y_max - y_min
    if span == 0 or plot_height <= 0:
        return []
    step = span / plot_height
    ticks: list[tuple[int, float]] = []
    for i in range(plot_height + 1):
        value = round_half_up(y_max - i * step)
        row = math.floor(((y_max - value) / span) * (plot_height - 1)) + 1
        ticks.append((row, value))
    return ticks


def draw_y_labels(
    grid: Grid,
    ticks: Sequence[Tick],
    *,
    column: int,
    tick: str,
    skip_duplicates: bool,
    protect: tuple[int, int] | None = None,
) -> None:
    """Right-align each label just left of ``column`` and mark ``column`` with the tick."""
    for row, label in ticks:
        if not 0 <= row < grid.height:
            continue
        if skip_duplicates and grid.get(column, row) == tick:
            continue
        for i, char in enumerate(reversed(label)):
            grid.draw(column - 1 - i, row, char)
        if (column, row) != protect:
            grid.draw(column, row, tick)


def draw_x_labels(
    grid: Grid,
    ticks: Sequence[Tick],
    *,
    offset: int,
    tick_row: int,
    label_row: int,
    stagger: bool,
    tick: str,
    free: Container[str],
    protect: tuple[int, int] | None = None,
) -> None:
    """Right-align each label so it ends under its tick mark.

    With ``stagger`` a label whose cells on ``label_row`` are taken drops to
    the row below.
    """
    for col, label in ticks:
        tick_col = col + offset
        if grid.get(tick_col, tick_row) == tick:
            continue
        chars = list(label)
        row = label_row
        if stagger and not all(_is_free(grid, tick_col - i, label_row, free) for i in range(len(chars))):
            row = label_row + 1
        for i, char in enumerate(reversed(chars)):
            grid.draw(tick_col - i, row, char)
        if (tick_col, tick_row) != protect:
            grid.draw(tick_col, tick_row, tick)


def _is_free(grid: Grid, x: int, y: int, free: Container[str]) -> bool:
    cell = grid.get(x, y)
    return cell is None or cell in free
