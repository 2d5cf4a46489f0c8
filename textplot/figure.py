from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any

import numpy as np

from textplot.adapters import classify_chart, filter_y_range, sort_series, to_chart, to_series_list
from textplot.diagnostics import DiagnosticSink, log_diagnostic
from textplot.formatting import LabelFormatter
from textplot.overlays import (
    PlotFrame,
    add_background,
    add_border,
    add_legend,
    add_points,
    add_thresholds,
    add_x_label,
    add_y_label,
    legend_entries,
    remove_empty_lines,
    set_title,
)
from textplot.raster import (
    Grid,
    LabelShift,
    dense_y_ticks,
    draw_axis,
    draw_axis_crossing,
    draw_bar,
    draw_custom_line,
    draw_line,
    draw_markers,
    draw_x_labels,
    draw_y_labels,
    fill_area,
    grow_for_labels,
    label_shift,
)
from textplot.scales import AxisPosition, ChartSize, axis_position, chart_size, plot_coords, to_plot
from textplot.series import Chart, LineFormatterArgs
from textplot.settings import PlotConfig, SymbolSet, chart_symbols, resolve_color, resolve_symbols
from textplot.symbols import ChartSymbols, colorize

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class AxisTicks:
    x: list[tuple[int, str]]
    y: list[tuple[int, str]]
    min_x_label: str | None
    dense: bool = False


@dataclass
class Figure:
    """One chart and its options; ``render`` turns them into terminal text.

    Every call to ``render`` builds a fresh grid, so a figure can be rendered
    any number of times with identical output.
    """

    chart: Any
    config: PlotConfig = field(default_factory=PlotConfig)
    x_column: str | None = None
    y_column: str | None = None

    def render(self) -> str:
        cfg = self.config
        series = to_series_list(classify_chart(self.chart, x=self.x_column, y=self.y_column))
        if not any(arr.shape[0] for arr in series):
            return ""
        # a fully filtered chart still renders its axis frame
        series = filter_y_range(series, cfg.y_range)

        chart = to_chart(series)
        size = chart_size(chart, width=cfg.width, height=cfg.height, y_range=cfg.y_range)
        LOGGER.debug(
            "chart size: %sx%s x_range=%s y_range=%s",
            size.plot_width,
            size.plot_height,
            size.x_range,
            size.y_range,
        )

        symbols = resolve_symbols(cfg.symbols)
        grid = Grid.blank(size.plot_width + 2, size.plot_height + 2, symbols.empty, diagnostics=self._sink())
        has_axis_center = cfg.axis_center is not None
        axis = axis_position(
            cfg.axis_center,
            size.plot_width,
            size.plot_height,
            size.x_range,
            size.y_range,
            default=(0, grid.height - 1),
        )

        series_symbols: list[ChartSymbols] = []
        columns: list[int] = []
        for index, points in enumerate(series):
            glyphs, columns = self._draw_series(grid, index, points, chart, size, axis, symbols)
            series_symbols.append(glyphs)

        frame = PlotFrame(size.plot_width, size.plot_height, size.x_range, size.y_range)
        add_thresholds(grid, cfg.thresholds, frame, symbols.thresholds)
        add_points(grid, cfg.points, frame, symbols.point)

        draw_axis(
            grid,
            axis,
            symbols.axis,
            has_axis_center=has_axis_center,
            hide_x_axis=cfg.hide_x_axis,
            hide_y_axis=cfg.hide_y_axis,
        )

        ticks = self._ticks(chart, size)
        shift = label_shift([label for _, label in ticks.x], [label for _, label in ticks.y], ticks.min_x_label)
        has_to_be_moved = grow_for_labels(
            grid, columns, plot_width=size.plot_width, shift=shift, empty=symbols.empty
        )
        LOGGER.debug("label shift: %s staggered=%s", shift, has_to_be_moved)

        add_background(grid, empty=symbols.empty, background=symbols.background)

        free = {symbols.empty, symbols.background}
        crossing: tuple[int, int] | None = None
        if has_axis_center and not cfg.hide_x_axis and not cfg.hide_y_axis:
            crossing = (axis.x + shift.y_shift + 1, axis.y)
            draw_axis_crossing(grid, crossing[0], crossing[1], symbols.axis, free=free)

        self._draw_labels(grid, ticks, axis, shift, has_to_be_moved, size, symbols, crossing)
        remove_empty_lines(grid, symbols.background)

        if cfg.title:
            set_title(grid, cfg.title, symbols.background)
        if cfg.x_label:
            add_x_label(grid, cfg.x_label, symbols.background)
        if cfg.y_label:
            add_y_label(grid, cfg.y_label, symbols.background)
        if cfg.legend is not None:
            entries = legend_entries(
                cfg.legend,
                series_symbols=series_symbols,
                thresholds=cfg.thresholds,
                points=cfg.points,
                threshold_symbols=symbols.thresholds,
                point_symbol=symbols.point,
                background=symbols.background,
            )
            add_legend(grid, cfg.legend, entries, symbols.background)
        if symbols.border:
            add_border(grid, symbols.border)

        return grid.to_text()

    def _sink(self) -> DiagnosticSink | None:
        if not self.config.debug_mode:
            return None
        return self.config.diagnostics or log_diagnostic

    def _draw_series(
        self,
        grid: Grid,
        index: int,
        points: np.ndarray,
        chart: Chart,
        size: ChartSize,
        axis: AxisPosition,
        symbols: SymbolSet,
    ) -> tuple[ChartSymbols, list[int]]:
        cfg = self.config
        color = resolve_color(cfg.color, index, chart)
        glyphs = chart_symbols(symbols.chart, color, fill_area=cfg.fill_area)

        ordered = sort_series(points)
        scaled = plot_coords(ordered, size.plot_width, size.plot_height, size.x_range, size.y_range)
        to_grid = to_plot(size.plot_width, size.plot_height)
        cells = [to_grid(float(sx), float(sy)) for sx, sy in scaled]
        has_axis_center = cfg.axis_center is not None
        frame = PlotFrame(size.plot_width, size.plot_height, size.x_range, size.y_range)
        sorted_points = [(float(px), float(py)) for px, py in ordered.tolist()]

        for i, (col, row) in enumerate(cells):
            if cfg.line_formatter is not None:
                args = LineFormatterArgs(
                    x=sorted_points[i][0],
                    y=sorted_points[i][1],
                    plot_x=col + 1,
                    plot_y=row + 1,
                    index=i,
                    series=sorted_points,
                    min_x=size.min_x,
                    min_y=size.min_y,
                    to_plot_coordinates=frame.cell,
                    x_range=size.x_range,
                    y_range=size.y_range,
                )
                draw_custom_line(grid, cfg.line_formatter, args)
            elif cfg.mode == "point":
                draw_markers(grid, [(col, row)], colorize(symbols.point, color))
            elif cfg.mode in ("bar", "horizontal_bar"):
                draw_bar(
                    grid,
                    col=col,
                    row=row,
                    axis=axis,
                    has_axis_center=has_axis_center,
                    symbol=glyphs.area,
                    horizontal=cfg.mode == "horizontal_bar",
                )
            else:
                draw_line(
                    grid,
                    scaled,
                    i,
                    col=col,
                    row=row,
                    plot_height=size.plot_height,
                    empty=symbols.empty,
                    symbols=glyphs,
                )

        if cfg.fill_area and cfg.line_formatter is None:
            fill_area(grid, glyphs)
        return glyphs, [col for col, _ in cells]

    def _ticks(self, chart: Chart, size: ChartSize) -> AxisTicks:
        cfg = self.config
        fmt = LabelFormatter(cfg.formatter, size.x_range, size.y_range)
        frame = PlotFrame(size.plot_width, size.plot_height, size.x_range, size.y_range)

        x_ticks: list[tuple[int, str]] = []
        min_x_label: str | None = None
        if not cfg.hide_x_axis and not cfg.hide_x_axis_ticks:
            if cfg.custom_x_axis_ticks is not None:
                values = list(cfg.custom_x_axis_ticks)
            else:
                values = [px for series in chart for px, _ in series]
            for value in values:
                col = frame.cell(value, size.y_range[0])[0]
                if cfg.custom_x_axis_ticks is not None and not 0 <= col < size.plot_width:
                    continue
                x_ticks.append((col, fmt(value, "x")))
            min_x_label = fmt(size.min_x, "x")

        y_ticks: list[tuple[int, str]] = []
        is_dense = False
        if not cfg.hide_y_axis and not cfg.hide_y_axis_ticks:
            dense = dense_y_ticks(size.y_range, size.plot_height) if cfg.show_tick_label else []
            if cfg.custom_y_axis_ticks is not None:
                for value in cfg.custom_y_axis_ticks:
                    row = frame.cell(size.x_range[0], value)[1] + 1
                    if 1 <= row <= size.plot_height:
                        y_ticks.append((row, fmt(value, "y")))
            elif dense:
                is_dense = True
                y_ticks = [(row, fmt(value, "y")) for row, value in dense]
            else:
                for series in chart:
                    for _, py in series:
                        y_ticks.append((frame.cell(size.x_range[0], py)[1] + 1, fmt(py, "y")))
        return AxisTicks(x=x_ticks, y=y_ticks, min_x_label=min_x_label, dense=is_dense)

    def _draw_labels(
        self,
        grid: Grid,
        ticks: AxisTicks,
        axis: AxisPosition,
        shift: LabelShift,
        has_to_be_moved: bool,
        size: ChartSize,
        symbols: SymbolSet,
        crossing: tuple[int, int] | None,
    ) -> None:
        cfg = self.config
        has_axis_center = cfg.axis_center is not None
        free = {symbols.empty, symbols.background}

        if ticks.y:
            draw_y_labels(
                grid,
                ticks.y,
                column=axis.x + shift.y_shift + 1,
                tick=symbols.axis.y,
                skip_duplicates=not ticks.dense,
                protect=crossing,
            )
        if ticks.x:
            centered_y = cfg.axis_center is not None and cfg.axis_center[1] is not None
            draw_x_labels(
                grid,
                ticks.x,
                offset=shift.y_shift + 2 + (-1 if has_axis_center else 0),
                tick_row=axis.y,
                label_row=axis.y + 1 if centered_y else size.plot_height + 2,
                stagger=has_to_be_moved,
                tick=symbols.axis.x,
                free=free,
                protect=crossing,
            )
