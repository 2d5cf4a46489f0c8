from __future__ import annotations

from decimal import Decimal
import importlib.util
import unittest

import numpy as np

from textplot.adapters import (
    ManySeries,
    OneSeries,
    classify_chart,
    filter_y_range,
    normalize_labels,
    pad_or_trim,
    sort_series,
    to_chart,
    to_series_list,
)
from textplot.errors import PlotDataError


HAS_PANDAS = importlib.util.find_spec("pandas") is not None
HAS_TORCH = importlib.util.find_spec("torch") is not None


class ClassifyTests(unittest.TestCase):
    def test_single_series_list(self) -> None:
        out = classify_chart([[1, 2], [3, 4]])
        self.assertIsInstance(out, OneSeries)
        np.testing.assert_allclose(out.points, [[1, 2], [3, 4]])

    def test_multi_series_list(self) -> None:
        out = classify_chart([[[1, 2], [3, 4]], [[0, 1]]])
        self.assertIsInstance(out, ManySeries)
        self.assertEqual([arr.shape for arr in out.series], [(2, 2), (1, 2)])

    def test_empty_chart(self) -> None:
        self.assertEqual(to_series_list(classify_chart([])), [])
        self.assertEqual(to_series_list(classify_chart(np.empty((0, 2)))), [])

    def test_numpy_shapes(self) -> None:
        self.assertIsInstance(classify_chart(np.zeros((3, 2))), OneSeries)
        many = classify_chart(np.zeros((2, 3, 2)))
        self.assertIsInstance(many, ManySeries)
        self.assertEqual(len(many.series), 2)
        with self.assertRaises(PlotDataError):
            classify_chart(np.zeros((3, 3)))
        with self.assertRaises(PlotDataError):
            classify_chart(np.zeros((1, 2, 2, 2)))

    def test_decimal_and_numpy_scalars_are_numeric(self) -> None:
        out = classify_chart([[Decimal("1.5"), np.int64(2)], [3, np.float32(0.5)]])
        np.testing.assert_allclose(out.points, [[1.5, 2], [3, 0.5]])

    def test_bad_values_raise(self) -> None:
        bad = [
            [[1, "a"]],
            [[1, 2, 3]],
            [[True, 1]],
            [[1, float("nan")]],
            [[1, float("inf")]],
            "not a chart",
            42,
        ]
        for raw in bad:
            with self.subTest(raw=raw):
                with self.assertRaises(PlotDataError):
                    classify_chart(raw)

    def test_data_error_is_value_error(self) -> None:
        with self.assertRaises(ValueError):
            classify_chart([[1, None]])

    @unittest.skipUnless(HAS_PANDAS, "pandas is not installed")
    def test_dataframe_columns(self) -> None:
        import pandas as pd

        frame = pd.DataFrame({"name": ["a", "b"], "t": [1, 2], "v": [3.0, 4.0], "w": [9, 9]})
        np.testing.assert_allclose(classify_chart(frame).points, [[1, 3], [2, 4]])
        np.testing.assert_allclose(classify_chart(frame, x="t", y="w").points, [[1, 9], [2, 9]])
        np.testing.assert_allclose(classify_chart(frame, y="t").points, [[3, 1], [4, 2]])
        with self.assertRaises(PlotDataError):
            classify_chart(frame, x="missing")

    @unittest.skipUnless(HAS_TORCH, "torch is not installed")
    def test_tensor_input(self) -> None:
        import torch

        out = classify_chart(torch.tensor([[[1.0, 2.0], [2.0, 3.0]]]))
        self.assertIsInstance(out, ManySeries)
        np.testing.assert_allclose(out.series[0], [[1, 2], [2, 3]])


class SeriesHelperTests(unittest.TestCase):
    def test_sort_is_stable_for_equal_x(self) -> None:
        points = np.asarray([[2, 0], [1, 5], [2, 1], [1, 6]], dtype=np.float64)
        np.testing.assert_allclose(sort_series(points), [[1, 5], [1, 6], [2, 0], [2, 1]])

    def test_filter_y_range_is_inclusive(self) -> None:
        series = [np.asarray([[1, -1], [2, 0], [3, 5], [4, 6]], dtype=np.float64)]
        out = filter_y_range(series, (5, 0))
        np.testing.assert_allclose(out[0], [[2, 0], [3, 5]])
        self.assertIs(filter_y_range(series, None)[0], series[0])

    def test_to_chart(self) -> None:
        chart = to_chart([np.asarray([[1, 2]], dtype=np.float64)])
        self.assertEqual(chart, [[(1.0, 2.0)]])

    def test_labels(self) -> None:
        self.assertEqual(normalize_labels(None), [])
        self.assertEqual(normalize_labels("a"), ["a"])
        self.assertEqual(normalize_labels(("a", "b")), ["a", "b"])
        self.assertEqual(pad_or_trim(["a", "b", "c"], 2), ["a", "b"])
        self.assertEqual(pad_or_trim(["a"], 3), ["a", "", ""])
        self.assertEqual(pad_or_trim([], 0), [])


if __name__ == "__main__":
    unittest.main()
