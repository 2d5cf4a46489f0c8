from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import math
from typing import Callable, Literal

import numpy as np

from textplot.series import Chart, Point, Range


@dataclass(frozen=True)
class ChartSize:
    min_x: float
    min_y: float
    plot_width: int
    plot_height: int
    x_range: Range
    y_range: Range


@dataclass(frozen=True)
class AxisPosition:
    x: int
    y: int


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def scaler(domain: Range, range_: Range) -> Callable[[float], float]:
    domain_min, domain_max = domain
    range_min, range_max = range_
    domain_length = abs(domain_max - domain_min) or 1
    range_length = abs(range_max - range_min)

    def scale(value: float) -> float:
        return range_min + (range_length * (value - domain_min)) / domain_length

    return scale


def as_points(points: Sequence[Point] | np.ndarray) -> np.ndarray:
    return np.asarray(points, dtype=np.float64).reshape(-1, 2)


def extrema(points: Sequence[Point] | np.ndarray, kind: Literal["min", "max"] = "max", field: int = 1) -> float:
    values = as_points(points)[:, field]
    if values.size == 0:
        return -math.inf if kind == "max" else math.inf
    if kind == "max":
        return float(np.max(values))
    return float(np.min(values))


def to_plot(plot_width: int, plot_height: int) -> Callable[[float, float], tuple[int, int]]:
    def convert(x: float, y: float) -> tuple[int, int]:
        return round_half_up(x), plot_height - 1 - round_half_up(y)

    return convert


def from_plot(plot_width: int, plot_height: int) -> Callable[[float, float], tuple[int, int]]:
    def convert(x: float, y: float) -> tuple[int, int]:
        return round_half_up(x), round_half_up((1 - y / plot_height) * (plot_height - 1))

    return convert


def to_coordinates(point: Point, plot_width: int, plot_height: int, x_range: Range, y_range: Range) -> tuple[int, int]:
    x, y = point
    sx = scaler(x_range, (0, plot_width - 1))
    sy = scaler(y_range, (0, plot_height - 1))
    return round_half_up(sx(x)), round_half_up(sy(y))


def plot_coords(
    points: Sequence[Point] | np.ndarray,
    plot_width: int,
    plot_height: int,
    x_range: Range | None = None,
    y_range: Range | None = None,
) -> np.ndarray:
    arr = as_points(points)
    if x_range is None:
        x_range = (extrema(arr, "min", 0), extrema(arr, "max", 0))
    if y_range is None:
        y_range = (extrema(arr, "min", 1), extrema(arr, "max", 1))
    sx = scaler(x_range, (0, plot_width - 1))
    sy = scaler(y_range, (0, plot_height - 1))
    out = np.empty_like(arr)
    out[:, 0] = sx(arr[:, 0])
    out[:, 1] = sy(arr[:, 1])
    return out


def chart_size(
    chart: Chart,
    *,
    width: int | None = None,
    height: int | None = None,
    y_range: Range | None = None,
) -> ChartSize:
    arr = as_points([point for series in chart for point in series])
    if arr.shape[0] == 0:
        min_x = max_x = min_y = max_y = 0.0
    else:
        min_x, max_x = extrema(arr, "min", 0), extrema(arr, "max", 0)
        min_y, max_y = extrema(arr, "min", 1), extrema(arr, "max", 1)

    plot_width = int(width or np.unique(arr[:, 0]).size)
    plot_height = round_half_up(height or max_y - min_y + 1)
    if not height and plot_height < 3:
        plot_height = int(np.unique(arr[:, 1]).size)

    return ChartSize(
        min_x=min_x,
        min_y=min_y,
        plot_width=plot_width,
        plot_height=plot_height,
        x_range=(min_x, max_x),
        y_range=y_range if y_range is not None else (min_y, max_y),
    )


def axis_position(
    axis_center: tuple[float | None, float | None] | None,
    plot_width: int,
    plot_height: int,
    x_range: Range,
    y_range: Range,
    default: tuple[int, int],
) -> AxisPosition:
    x, y = default
    if axis_center is not None:
        center_x, center_y = axis_center
        if center_x is not None:
            x = round_half_up(scaler(x_range, (0, plot_width - 1))(center_x))
        if center_y is not None:
            scaled = scaler(y_range, (0, plot_height - 1))(center_y)
            y = to_plot(plot_width, plot_height)(0, scaled)[1] + 1
    return AxisPosition(x=x, y=y)
