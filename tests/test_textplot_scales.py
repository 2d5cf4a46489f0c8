from __future__ import annotations

import math
import unittest

import numpy as np

from textplot.scales import (
    AxisPosition,
    axis_position,
    chart_size,
    extrema,
    from_plot,
    plot_coords,
    round_half_up,
    scaler,
    to_coordinates,
    to_plot,
)


class ScalerTests(unittest.TestCase):
    def test_scaler_maps_domain_onto_range(self) -> None:
        self.assertEqual(scaler((0, 1), (0, 3))(0.5), 1.5)
        self.assertEqual(scaler((-1, 1), (-100, 100))(0.5), 50)

    def test_zero_length_domain_does_not_divide_by_zero(self) -> None:
        scale = scaler((2, 2), (0, 9))
        self.assertEqual(scale(2), 0)

    def test_scaler_accepts_numpy_arrays(self) -> None:
        out = scaler((0, 10), (0, 5))(np.array([0.0, 10.0]))
        np.testing.assert_allclose(out, [0.0, 5.0])

    def test_round_half_up_matches_terminal_layout_rounding(self) -> None:
        self.assertEqual(round_half_up(0.5), 1)
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(-0.5), 0)
        self.assertEqual(round_half_up(-1.5), -1)


class ExtremaTests(unittest.TestCase):
    def test_extrema_returns_value_for_field(self) -> None:
        self.assertEqual(extrema([(0, 1), (1, 1), (4, 1), (2, 1)], "max", 0), 4)
        self.assertEqual(extrema([(-1, 1), (1.3, 10), (1, -10), (0, 100)], "max", 1), 100)
        self.assertEqual(extrema([(-1, 1), (1.3, 10), (1, -10), (0, 100)], "min", 1), -10)

    def test_extrema_ties_return_the_shared_value(self) -> None:
        self.assertEqual(extrema([(0, 3), (1, 3), (2, 3)], "max", 1), 3)

    def test_extrema_of_empty_input(self) -> None:
        self.assertEqual(extrema([], "max"), -math.inf)
        self.assertEqual(extrema([], "min"), math.inf)


class PlotSpaceTests(unittest.TestCase):
    def test_to_plot_flips_rows(self) -> None:
        convert = to_plot(3, 3)
        self.assertEqual(convert(0, 0), (0, 2))
        self.assertEqual(convert(2, 2), (2, 0))
        self.assertEqual(convert(1.5, 0.4), (2, 2))

    def test_from_plot(self) -> None:
        self.assertEqual(from_plot(3, 3)(1, 1), (1, 1))
        self.assertEqual(from_plot(4, 4)(0, 0), (0, 3))

    def test_to_coordinates_rounds_scaled_point(self) -> None:
        self.assertEqual(to_coordinates((5, 5), 10, 10, (0, 10), (0, 10)), (5, 5))
        self.assertEqual(to_coordinates((0, 10), 10, 10, (0, 10), (0, 10)), (0, 9))

    def test_plot_coords_defaults_to_series_extrema(self) -> None:
        out = plot_coords([(1, 1), (2, 2)], 2, 2)
        np.testing.assert_allclose(out, [[0, 0], [1, 1]])

    def test_plot_coords_with_explicit_ranges(self) -> None:
        out = plot_coords([(5, 5)], 11, 11, (0, 10), (0, 20))
        np.testing.assert_allclose(out, [[5, 2.5]])


class ChartSizeTests(unittest.TestCase):
    def test_default_size_from_data(self) -> None:
        size = chart_size([[(1, 2), (2, 4), (3, 6)]])
        self.assertEqual(size.min_x, 1)
        self.assertEqual(size.min_y, 2)
        self.assertEqual(size.plot_width, 3)
        self.assertEqual(size.plot_height, 5)
        self.assertEqual(size.x_range, (1, 3))
        self.assertEqual(size.y_range, (2, 6))

    def test_explicit_size(self) -> None:
        size = chart_size([[(1, 2), (2, 4), (3, 6)]], width=10, height=10)
        self.assertEqual((size.plot_width, size.plot_height), (10, 10))
        self.assertEqual(size.x_range, (1, 3))

    def test_small_value_span_uses_unique_y_count(self) -> None:
        size = chart_size([[(0, 2), (1, 2)]])
        self.assertEqual(size.plot_height, 1)
        self.assertEqual(size.plot_width, 2)

    def test_mixed_signs(self) -> None:
        size = chart_size([[(-3, -2), (-2, 4), (0, 0), (3, -1)]])
        self.assertEqual(size.plot_width, 4)
        self.assertEqual(size.plot_height, 7)
        self.assertEqual(size.x_range, (-3, 3))
        self.assertEqual(size.y_range, (-2, 4))

    def test_y_range_overrides_expansion(self) -> None:
        size = chart_size([[(1, 2), (2, 3)]], width=5, height=5, y_range=(0, 10))
        self.assertEqual(size.y_range, (0, 10))


class AxisPositionTests(unittest.TestCase):
    def test_default_position_without_center(self) -> None:
        pos = axis_position(None, 10, 10, (0, 1), (0, 1), default=(0, 11))
        self.assertEqual(pos, AxisPosition(x=0, y=11))

    def test_center_is_scaled_and_rounded(self) -> None:
        pos = axis_position((0, 0), 40, 10, (0, 7), (-5, 4), default=(0, 11))
        self.assertEqual(pos, AxisPosition(x=0, y=5))

    def test_missing_center_coordinate_keeps_default(self) -> None:
        pos = axis_position((3.5, None), 8, 10, (0, 7), (-5, 4), default=(0, 11))
        self.assertEqual(pos, AxisPosition(x=4, y=11))


if __name__ == "__main__":
    unittest.main()
