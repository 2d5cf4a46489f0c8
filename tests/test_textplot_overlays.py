from __future__ import annotations

import unittest
from unittest import mock

from textplot.overlays import (
    LegendEntry,
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
from textplot.raster import Grid
from textplot.series import GraphPoint, Legend, Threshold
from textplot.symbols import CHART, THRESHOLDS, ChartSymbols


def _grid(*rows: str) -> Grid:
    return Grid.from_rows([list(row) for row in rows])


class BackgroundTests(unittest.TestCase):
    def test_background_fills_leading_empty_run_only(self) -> None:
        grid = _grid("  x ", "    ")
        add_background(grid, empty=" ", background=".")
        self.assertEqual(grid.lines(), ["..x ", "...."])

    def test_remove_empty_lines(self) -> None:
        grid = _grid(".a", "..", ".b")
        remove_empty_lines(grid, ".")
        self.assertEqual(grid.lines(), ["a", "b"])


class ThresholdTests(unittest.TestCase):
    def setUp(self) -> None:
        self.frame = PlotFrame(plot_width=3, plot_height=2, x_range=(0, 2), y_range=(0, 1))

    def test_x_threshold_fills_column_and_y_threshold_fills_row(self) -> None:
        grid = Grid.blank(5, 4)
        add_thresholds(grid, [Threshold(x=1, y=1)], self.frame, THRESHOLDS)
        self.assertEqual(grid.lines(), ["  ┃  ", "━━━━━", "  ┃  ", "  ┃  "])

    def test_zero_is_a_valid_threshold(self) -> None:
        grid = Grid.blank(5, 4)
        add_thresholds(grid, [Threshold(x=0)], self.frame, THRESHOLDS)
        self.assertEqual(grid.lines(), [" ┃   "] * 4)

    def test_out_of_range_threshold_is_skipped(self) -> None:
        grid = Grid.blank(5, 4)
        add_thresholds(grid, [Threshold(x=100), Threshold(y=-100)], self.frame, THRESHOLDS)
        self.assertEqual(grid.lines(), ["     "] * 4)

    def test_threshold_color(self) -> None:
        grid = Grid.blank(5, 4)
        add_thresholds(grid, [Threshold(x=2, color="ansiRed")], self.frame, THRESHOLDS)
        self.assertEqual(grid.get(3, 0), "\x1b[31m┃\x1b[0m")


class PointTests(unittest.TestCase):
    def test_points_land_on_scaled_cells(self) -> None:
        grid = Grid.blank(12, 10)
        frame = PlotFrame(plot_width=10, plot_height=8, x_range=(0, 10), y_range=(0, 8))
        add_points(grid, [GraphPoint(1, 1), GraphPoint(3, 3), GraphPoint(8, 8, color="ansiBlue")], frame, "●")
        self.assertEqual(grid.get(2, 7), "●")
        self.assertEqual(grid.get(4, 5), "●")
        self.assertEqual(grid.get(8, 1), "\x1b[34m●\x1b[0m")

    def test_out_of_range_point_is_not_reported(self) -> None:
        sink = mock.Mock()
        grid = Grid.blank(4, 4, diagnostics=sink)
        frame = PlotFrame(plot_width=2, plot_height=2, x_range=(0, 1), y_range=(0, 1))
        add_points(grid, [GraphPoint(50, 50)], frame, "●")
        sink.assert_not_called()
        self.assertEqual(grid.lines(), ["    "] * 4)


class LegendTests(unittest.TestCase):
    def test_entries_are_grouped_with_spacers(self) -> None:
        entries = legend_entries(
            Legend(series="S", points=["P1", "P2", "P3"]),
            series_symbols=[CHART, ChartSymbols(area="▒")],
            thresholds=[Threshold(y=1)],
            points=[GraphPoint(0, 0), GraphPoint(1, 1, color="ansiRed")],
            threshold_symbols=THRESHOLDS,
            point_symbol="●",
            background=" ",
        )
        self.assertEqual(
            entries,
            [
                LegendEntry("█", "S"),
                LegendEntry("▒", ""),
                LegendEntry(" ", ""),
                LegendEntry("●", "P1"),
                LegendEntry("\x1b[31m●\x1b[0m", "P2"),
            ],
        )

    def test_threshold_swatch_uses_column_glyph(self) -> None:
        entries = legend_entries(
            Legend(thresholds="limit"),
            series_symbols=[CHART],
            thresholds=[Threshold(y=1, color="ansiGreen")],
            points=[],
            threshold_symbols=THRESHOLDS,
            point_symbol="●",
            background=" ",
        )
        self.assertEqual(entries, [LegendEntry("\x1b[32m┃\x1b[0m", "limit")])

    def test_empty_label_list_hides_group(self) -> None:
        entries = legend_entries(
            Legend(series=[]),
            series_symbols=[CHART],
            thresholds=[],
            points=[],
            threshold_symbols=THRESHOLDS,
            point_symbol="●",
            background=" ",
        )
        self.assertEqual(entries, [])

    def test_legend_positions(self) -> None:
        entries = [LegendEntry("█", "ab")]
        cases = {
            "bottom": ["....", "....", "█.ab"],
            "top": ["█.ab", "....", "...."],
            "left": ["█.ab....", "........"],
            "right": ["......█.ab", ".........."],
        }
        for position, expected in cases.items():
            with self.subTest(position=position):
                grid = Grid.blank(4, 2, ".")
                add_legend(grid, Legend(position=position), entries, ".")
                self.assertEqual(grid.lines(), expected)

    def test_top_legend_rows_are_cut_to_grid_width(self) -> None:
        grid = Grid.blank(4, 1, ".")
        add_legend(grid, Legend(position="top"), [LegendEntry("█", "abcdef")], ".")
        self.assertEqual(grid.lines(), ["█.ab", "...."])


class LabelAndBorderTests(unittest.TestCase):
    def test_title_widens_grid(self) -> None:
        grid = Grid.blank(2, 1, ".")
        set_title(grid, "abc", ".")
        self.assertEqual(grid.lines(), ["abc", "..."])

    def test_x_label_is_centered(self) -> None:
        grid = Grid.blank(6, 1, ".")
        add_x_label(grid, "ab", ".")
        self.assertEqual(grid.lines(), ["......", "..ab.."])

    def test_y_label_runs_down_a_new_left_column(self) -> None:
        grid = Grid.blank(1, 5, ".")
        add_y_label(grid, "ab", ".")
        self.assertEqual(grid.lines(), ["..", "..", "a.", "b.", ".."])

    def test_border_wraps_grid(self) -> None:
        grid = _grid("ab")
        add_border(grid, "#")
        self.assertEqual(grid.lines(), ["####", "#ab#", "####"])


if __name__ == "__main__":
    unittest.main()
