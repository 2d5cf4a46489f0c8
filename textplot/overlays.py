from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from textplot.adapters.normalize import normalize_labels, pad_or_trim
from textplot.raster.grid import Grid
from textplot.scales import round_half_up, scaler, to_plot
from textplot.series import GraphPoint, Legend, Range, Threshold
from textplot.symbols import ChartSymbols, ThresholdSymbols, colorize


@dataclass(frozen=True)
class LegendEntry:
    swatch: str
    label: str


@dataclass(frozen=True)
class PlotFrame:
    """Plot-space geometry shared by the value-anchored overlays."""

    plot_width: int
    plot_height: int
    x_range: Range
    y_range: Range

    def cell(self, x: float, y: float) -> tuple[int, int]:
        sx = scaler(self.x_range, (0, self.plot_width - 1))
        sy = scaler(self.y_range, (0, self.plot_height - 1))
        return to_plot(self.plot_width, self.plot_height)(sx(x), sy(y))


def add_thresholds(grid: Grid, thresholds: Sequence[Threshold], frame: PlotFrame, symbols: ThresholdSymbols) -> None:
    for threshold in thresholds:
        col, row = frame.cell(
            threshold.x if threshold.x is not None else frame.x_range[0],
            threshold.y if threshold.y is not None else frame.y_range[0],
        )
        if threshold.x is not None and 0 <= col + 1 < grid.width:
            grid.fill_column(col + 1, colorize(symbols.x, threshold.color))
        if threshold.y is not None and 0 <= row + 1 < grid.height:
            grid.fill_row(row + 1, colorize(symbols.y, threshold.color))


def add_points(grid: Grid, points: Sequence[GraphPoint], frame: PlotFrame, symbol: str) -> None:
    for point in points:
        col, row = frame.cell(point.x, point.y)
        if grid.in_bounds(col + 1, row + 1):
            grid.draw(col + 1, row + 1, colorize(symbol, point.color))


def add_background(grid: Grid, *, empty: str, background: str) -> None:
    cells = grid.cells
    for y in range(grid.height):
        for x in range(grid.width):
            if cells[y, x] != empty:
                break
            cells[y, x] = background


def remove_empty_lines(grid: Grid, background: str) -> None:
    """Drop all-background rows and strip leading all-background columns.

    The column strip runs once per row visited, so at most ``height`` columns
    are removed.
    """
    blank_rows: list[int] = []
    for y in range(grid.height):
        if grid.row_is(y, background):
            blank_rows.append(y)
        if grid.width > 0 and grid.column_is(0, background):
            grid.shift_left()
    grid.remove_rows(blank_rows)


def legend_entries(
    legend: Legend,
    *,
    series_symbols: Sequence[ChartSymbols],
    thresholds: Sequence[Threshold],
    points: Sequence[GraphPoint],
    threshold_symbols: ThresholdSymbols,
    point_symbol: str,
    background: str,
) -> list[LegendEntry]:
    groups = [
        _labelled(legend.series, [LegendEntry(s.area, "") for s in series_symbols]),
        _labelled(legend.thresholds, [LegendEntry(colorize(threshold_symbols.x, t.color), "") for t in thresholds]),
        _labelled(legend.points, [LegendEntry(colorize(point_symbol, p.color), "") for p in points]),
    ]
    entries: list[LegendEntry] = []
    for group in groups:
        if group and entries:
            entries.append(LegendEntry(background, ""))
        entries.extend(group)
    return entries


def add_legend(grid: Grid, legend: Legend, entries: Sequence[LegendEntry], background: str) -> None:
    if not entries:
        return
    width = 2 + max(len(entry.label) for entry in entries)
    rows = [_legend_row(entry, width, background) for entry in entries]

    if legend.position in ("top", "bottom"):
        rows = [_fit(row, grid.width, background) for row in rows]
        if legend.position == "top":
            for row in reversed(rows):
                grid.add_row(row, top=True, fill=background)
        else:
            for row in rows:
                grid.add_row(row, fill=background)
        return

    left = legend.position == "left"
    # a right legend keeps two background columns between it and the plot
    grid.add_columns(width if left else width + 2, left=left, fill=background)
    start = 0 if left else grid.width - width
    for y, row in enumerate(rows[: grid.height]):
        for i, cell in enumerate(row):
            grid.draw(start + i, y, cell)


def set_title(grid: Grid, title: str, background: str) -> None:
    grid.add_row(list(title), top=True, fill=background)


def add_x_label(grid: Grid, label: str, background: str) -> None:
    chars = list(label)
    start = max(0, round_half_up((grid.width - len(chars)) / 2))
    grid.add_row([background] * start + chars, fill=background)


def add_y_label(grid: Grid, label: str, background: str) -> None:
    chars = list(label)
    grid.add_columns(1, left=True, fill=background)
    start = round_half_up((grid.height - len(chars)) / 2) - 1
    for y in range(grid.height):
        pos = y - start - 1
        if y > start and pos < len(chars):
            grid.draw(0, y, chars[pos])


def add_border(grid: Grid, symbol: str) -> None:
    grid.add_columns(1, left=True, fill=symbol)
    grid.add_columns(1, fill=symbol)
    grid.add_row(top=True, fill=symbol)
    grid.add_row(fill=symbol)


def _labelled(labels: str | Sequence[str] | None, entries: list[LegendEntry]) -> list[LegendEntry]:
    names = normalize_labels(labels)
    if not names:
        return []
    return [LegendEntry(entry.swatch, name) for entry, name in zip(entries, pad_or_trim(names, len(entries)))]


def _legend_row(entry: LegendEntry, width: int, background: str) -> list[str]:
    row = [entry.swatch, background, *entry.label]
    return row + [background] * (width - len(row))


def _fit(row: list[str], width: int, background: str) -> list[str]:
    return row[:width] + [background] * (width - len(row))
