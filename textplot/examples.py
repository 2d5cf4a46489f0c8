from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from textplot.api import plot
from textplot.series import CustomSymbol, LineFormatterArgs


@dataclass(frozen=True)
class Example:
    title: str
    chart: Any
    options: dict[str, Any] = field(default_factory=dict)
    only: bool = False

    def render(self) -> str:
        return plot(self.chart, title=self.title, **self.options)


DATASETS: dict[str, list[tuple[float, float]]] = {
    "default": [(1, 2), (2, 3), (3, 4), (4, 1), (5, -1), (6, 3), (7, -1), (8, 9), (9, 10), (10, 11)],
    "small": [(0.001, 0.001), (0.002, 0.004), (0.003, 0.002), (0.004, -0.001), (0.005, 0.004), (0.006, 0.014)],
    "short": [(1, 2), (2, 3), (3, 4), (4, 1)],
    "negative_mixed": [(-1, 2), (1, 2), (2, 3), (5, 5), (6, -2)],
    "simple_high": [(1, 10), (2, 20), (3, 30), (4, 40), (5, 50)],
    "limited": [(1, 2), (2, 3), (3, 4), (4, 8)],
    "tick_test": [(1, 2), (2, 3), (5, 5), (6, 10)],
    "thresholds": [(1, 1), (2, 4), (3, 4), (4, 2), (5, -1), (6, 3), (7, -1), (8, 9)],
    "swing": [(0, 3), (1, 2), (2, 3), (3, 4), (4, -2), (5, -5), (6, 2), (7, 0)],
}

_SECOND = [(1, -2), (2, -3), (3, 3), (4, 0)]
_MULTILINE = [
    DATASETS["short"],
    _SECOND,
    [(1, -6), (2, -3), (3, 3), (4, 0)],
    [(1, -2), (2, -3), (3, 3), (4, 0), (5, 3)],
]
_CUSTOM_TICKS = {
    "custom_y_axis_ticks": [-30, -2, 0, 2, 4, 6, 30],
    "custom_x_axis_ticks": [-30, 0, 2, 4, 6, 30],
}

# Option sweeps over the default dataset, two values per option.
_SWEEP: dict[str, tuple[Any, ...]] = {
    "show_tick_label": (True, False),
    "hide_x_axis": (True, False),
    "hide_x_axis_ticks": (True, False),
    "hide_y_axis": (True, False),
    "hide_y_axis_ticks": (True, False),
    "fill_area": (True, False),
    "width": (10, 50),
    "height": (10, 50),
    "x_label": ("label",),
    "y_label": ("label",),
    "y_range": ((0, 10), (-5, 5)),
    "axis_center": ((0, 10), (-5, 5)),
}


def _fill_to_min_x(args: LineFormatterArgs) -> list[CustomSymbol]:
    start, _ = args.to_plot_coordinates(args.min_x, args.min_y)
    return [CustomSymbol(x, args.plot_y, "█") for x in range(start, args.plot_x + 1)]


def _drop_to_min_y(args: LineFormatterArgs) -> list[CustomSymbol]:
    _, bottom = args.to_plot_coordinates(args.x, args.min_y)
    return [CustomSymbol(args.plot_x, y, "█") for y in range(args.plot_y, bottom + 2)]


def _describe(value: Any) -> str:
    if isinstance(value, tuple):
        return f"[{', '.join(str(v) for v in value)}]"
    if isinstance(value, str):
        return f'"{value}"'
    return str(value)


def _setting_sweep(chart: Any) -> list[Example]:
    return [
        Example(f"{name} = {_describe(value)}", chart, {name: value})
        for name, values in _SWEEP.items()
        for value in values
    ]


EXAMPLES: tuple[Example, ...] = (
    Example("simple example", DATASETS["default"]),
    Example("small numbers", DATASETS["small"], {"hide_y_axis_ticks": True, "width": 20, "height": 10}),
    Example(
        "Tick Label",
        DATASETS["default"],
        {"hide_y_axis_ticks": True, "show_tick_label": True, "y_range": (0, 120), "width": 50, "height": 27},
    ),
    Example(
        "Border",
        DATASETS["default"],
        {"symbols": {"border": "█"}, "x_label": "x", "y_label": "y", "width": 20, "height": 8},
    ),
    Example("Simple chart", DATASETS["simple_high"], {"width": 10, "height": 5, "y_range": (60, 70)}),
    Example("bar chart", DATASETS["short"], {"width": 10, "mode": "bar", "height": 10}),
    Example(
        "horizontal bar chart",
        [(-1, 2), (2, 3), (3, 4), (4, 1)],
        {"width": 20, "mode": "horizontal_bar", "height": 10},
    ),
    Example("area", DATASETS["short"], {"width": 20, "fill_area": True, "height": 10}),
    Example("labels", DATASETS["short"], {"width": 20, "x_label": "x", "y_label": "y", "height": 10}),
    Example(
        "legend",
        [DATASETS["short"], _SECOND],
        {
            "width": 20,
            "height": 10,
            "legend": {"position": "bottom", "series": ["first", "second"]},
            "x_label": "x",
            "y_label": "y",
        },
    ),
    Example("multiline", _MULTILINE, {"width": 50}),
    Example("multiline points", _MULTILINE, {"width": 50, "mode": "point"}),
    Example("yRange", DATASETS["limited"], {"width": 20, "height": 10, "y_range": (1, 3)}),
    Example("yRange", DATASETS["short"], {"width": 20, "height": 10, "y_range": (0, 5)}),
    Example(
        "showTickLabel",
        DATASETS["short"] + [(5, 5), (6, 10)],
        {"width": 20, "height": 10, "show_tick_label": True},
    ),
    Example("hideXAxis", DATASETS["tick_test"], {"width": 20, "height": 10, "hide_x_axis": True}),
    Example("hideYAxis", DATASETS["tick_test"], {"width": 20, "height": 10, "hide_y_axis": True}),
    Example(
        "axisCenter",
        DATASETS["negative_mixed"],
        {"width": 20, "height": 10, "axis_center": (0, 0), "show_tick_label": True},
    ),
    Example(
        "lineFormatter",
        DATASETS["negative_mixed"],
        {"width": 20, "height": 10, "line_formatter": _fill_to_min_x},
    ),
    Example(
        "lineFormatter",
        DATASETS["negative_mixed"],
        {"width": 20, "height": 10, "line_formatter": _drop_to_min_y},
    ),
    Example(
        "symbols",
        DATASETS["negative_mixed"],
        {"width": 20, "height": 10, "symbols": {"background": "█", "border": "A", "empty": "B"}},
    ),
    Example("colors", DATASETS["short"], {"width": 20, "color": "ansiGreen", "height": 10}),
    Example("custom y axis", DATASETS["default"], {"width": 20, "height": 10, **_CUSTOM_TICKS}),
    Example(
        "custom ticks and axis center",
        DATASETS["default"],
        {"width": 20, "height": 10, "axis_center": (3, 3), **_CUSTOM_TICKS},
    ),
    Example(
        "custom ticks and axis center, hide x axis",
        DATASETS["default"],
        {"width": 20, "height": 10, "hide_x_axis": True, "axis_center": (3, 3), **_CUSTOM_TICKS},
    ),
    Example(
        "custom ticks and axis center, hide y axis",
        DATASETS["default"],
        {"width": 20, "height": 10, "hide_y_axis": True, "axis_center": (3, 3), **_CUSTOM_TICKS},
    ),
    Example(
        "colors with legend",
        [DATASETS["short"], [(1, 3), (2, 1), (3, 0), (4, 4)]],
        {
            "width": 20,
            "height": 10,
            "thresholds": [{"x": 2, "y": 2, "color": "ansiBlue"}],
            "color": ["ansiGreen", "ansiMagenta"],
            "legend": {"position": "bottom", "series": ["first", "second"]},
        },
    ),
    Example(
        "thresholds",
        DATASETS["thresholds"],
        {"width": 40, "thresholds": [{"y": 5, "x": 5, "color": "ansiBlue"}, {"y": 2, "color": "ansiGreen"}]},
    ),
    Example(
        "thresholds",
        DATASETS["thresholds"],
        {
            "width": 40,
            "symbols": {"thresholds": {"x": "X", "y": "Y"}},
            "thresholds": [{"y": 5, "x": 5, "color": "ansiBlue"}, {"y": 2, "color": "ansiGreen"}],
        },
    ),
    Example(
        "points and legend",
        [DATASETS["thresholds"], [(1, 6), (2, -3), (3, 0), (4, 0)]],
        {
            "width": 40,
            "legend": {"position": "right", "series": ["series 1"], "thresholds": ["threshold 1"], "points": ["point 1"]},
            "thresholds": [{"y": 5, "x": 2}, {"y": 2}],
            "points": [{"x": 5, "y": 5}, {"x": 1, "y": -1}, {"x": 2, "y": 2, "color": "ansiRed"}],
        },
    ),
    Example(
        "with axis center",
        DATASETS["swing"],
        {"color": "ansiGreen", "show_tick_label": True, "width": 40, "axis_center": (0, 2)},
    ),
    Example(
        "bar chart with colors",
        DATASETS["swing"],
        {"color": "ansiGreen", "mode": "bar", "show_tick_label": True, "width": 40, "axis_center": (0, 0)},
    ),
    Example(
        "horizontal bar chart with axis center",
        DATASETS["swing"],
        {"mode": "horizontal_bar", "show_tick_label": True, "width": 40, "height": 20, "axis_center": (3, 1)},
    ),
    Example(
        "horizontal bar chart",
        [(1, 0), (2, 20), (3, 29)],
        {"height": 10, "mode": "horizontal_bar", "width": 20, "show_tick_label": True},
    ),
    Example(
        "bar chart",
        [(1, 0), (2, 20), (3, 29)],
        {"height": 10, "mode": "bar", "width": 20, "show_tick_label": True},
    ),
    Example("axis center", DATASETS["default"], {"width": 20, "axis_center": (3, 5)}),
    Example("axis center", DATASETS["default"], {"axis_center": (0, -10)}),
    Example("axis center", DATASETS["default"], {"axis_center": (0, 0)}),
    Example("Small and big values", [(-8, 8), (-4, 4), (-3, 3), (80, 80)], {"width": 60, "height": 10}),
    *_setting_sweep(DATASETS["default"]),
    Example("axis center", DATASETS["default"], {"axis_center": (-20, 5), "width": 50, "height": 20}),
    Example("axis center", DATASETS["default"], {"axis_center": (20, 5), "width": 50, "height": 20}),
    Example("axis center", DATASETS["default"], {"axis_center": (0, 20), "width": 50, "height": 20}),
    Example(
        "axis center",
        DATASETS["default"],
        {"axis_center": (0, -20), "hide_x_axis": True, "width": 50, "height": 20},
    ),
    Example(
        "two complicated graphs with moved axis",
        [[(-8, -8), (-4, -4), (-3, -3), (-2, -2), (-1, -1), (0, 0), (2, 2), (3, 3), (4, 4), (8, 8)]],
        {"width": 40, "height": 20, "axis_center": (0, 0)},
    ),
    Example(
        "hide axis",
        [(-5, 2), (2, -3), (13, 0.1), (4, 2), (5, -2), (6, 12)],
        {"width": 40, "height": 10, "hide_y_axis": True, "hide_x_axis": True},
    ),
    Example(
        "bar chart with axis",
        DATASETS["swing"],
        {"mode": "bar", "show_tick_label": True, "width": 40, "axis_center": (0, 0)},
    ),
)


def iter_examples(only: Iterable[str] | None = None, examples: Iterable[Example] = EXAMPLES) -> Iterator[Example]:
    """Yield gallery entries.

    With ``only`` the entries whose title matches one of the names are
    yielded; otherwise entries flagged ``only`` win when any exist.
    """
    pool = list(examples)
    if only is not None:
        wanted = set(only)
        yield from (example for example in pool if example.title in wanted)
        return
    flagged = [example for example in pool if example.only]
    yield from flagged or pool
