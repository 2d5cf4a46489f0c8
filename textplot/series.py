from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Callable, Literal


Point = tuple[float, float]
Series = list[Point]
Chart = list[Series]

PlotMode = Literal["line", "point", "bar", "horizontal_bar"]
LegendPosition = Literal["top", "bottom", "left", "right"]
AxisName = Literal["x", "y"]
Range = tuple[float, float]

PLOT_MODES: tuple[str, ...] = ("line", "point", "bar", "horizontal_bar")
LEGEND_POSITIONS: tuple[str, ...] = ("top", "bottom", "left", "right")


@dataclass(frozen=True)
class Threshold:
    x: float | None = None
    y: float | None = None
    color: str | None = None


@dataclass(frozen=True)
class GraphPoint:
    x: float
    y: float
    color: str | None = None


@dataclass(frozen=True)
class Legend:
    position: LegendPosition = "bottom"
    series: str | Sequence[str] | None = None
    thresholds: str | Sequence[str] | None = None
    points: str | Sequence[str] | None = None


@dataclass(frozen=True)
class FormatterHelpers:
    axis: AxisName
    x_range: Range
    y_range: Range


@dataclass(frozen=True)
class CustomSymbol:
    x: int
    y: int
    symbol: str


@dataclass(frozen=True)
class LineFormatterArgs:
    x: float
    y: float
    plot_x: int
    plot_y: int
    index: int
    series: Series
    min_x: float
    min_y: float
    to_plot_coordinates: Callable[[float, float], tuple[int, int]]
    x_range: Range
    y_range: Range


Formatter = Callable[[float, FormatterHelpers], "str | float | int"]
LineFormatter = Callable[[LineFormatterArgs], "CustomSymbol | Sequence[CustomSymbol]"]
ColorGetter = Callable[[int, Chart], str]
