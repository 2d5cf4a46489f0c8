from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, fields, replace
from typing import Any

from textplot.diagnostics import DiagnosticSink
from textplot.errors import PlotConfigError
from textplot.series import (
    LEGEND_POSITIONS,
    PLOT_MODES,
    Chart,
    ColorGetter,
    Formatter,
    GraphPoint,
    Legend,
    LineFormatter,
    PlotMode,
    Range,
    Threshold,
)
from textplot.symbols import (
    AXIS,
    CHART,
    EMPTY,
    POINT,
    THRESHOLDS,
    AxisSymbols,
    ChartSymbols,
    ThresholdSymbols,
    colorize,
)


ColorOption = str | Sequence[str] | ColorGetter

_MODE_ALIASES: dict[str, str] = {"horizontalBar": "horizontal_bar", "horizontal-bar": "horizontal_bar"}

# camelCase option names accepted from JSON and TOML callers.
_OPTION_ALIASES: dict[str, str] = {
    "yRange": "y_range",
    "showTickLabel": "show_tick_label",
    "hideXAxis": "hide_x_axis",
    "hideYAxis": "hide_y_axis",
    "hideXAxisTicks": "hide_x_axis_ticks",
    "hideYAxisTicks": "hide_y_axis_ticks",
    "xLabel": "x_label",
    "yLabel": "y_label",
    "fillArea": "fill_area",
    "axisCenter": "axis_center",
    "lineFormatter": "line_formatter",
    "customXAxisTicks": "custom_x_axis_ticks",
    "customYAxisTicks": "custom_y_axis_ticks",
    "debugMode": "debug_mode",
}


@dataclass(frozen=True)
class SymbolOverrides:
    axis: Mapping[str, str] | None = None
    chart: Mapping[str, str] | None = None
    thresholds: Mapping[str, str] | None = None
    empty: str | None = None
    background: str | None = None
    border: str | None = None
    point: str | None = None


@dataclass(frozen=True)
class SymbolSet:
    axis: AxisSymbols = AXIS
    chart: ChartSymbols = CHART
    thresholds: ThresholdSymbols = THRESHOLDS
    empty: str = EMPTY
    background: str = EMPTY
    border: str | None = None
    point: str = POINT


def resolve_symbols(overrides: SymbolOverrides | None = None) -> SymbolSet:
    if overrides is None:
        return SymbolSet()
    empty = overrides.empty or EMPTY
    return SymbolSet(
        axis=_merge_roles(AXIS, overrides.axis, "symbols.axis"),
        chart=_merge_roles(CHART, overrides.chart, "symbols.chart"),
        thresholds=_merge_roles(THRESHOLDS, overrides.thresholds, "symbols.thresholds"),
        empty=empty,
        background=overrides.background or empty,
        border=overrides.border or None,
        point=overrides.point or POINT,
    )


def resolve_color(color: ColorOption | None, series_index: int, chart: Chart) -> str | None:
    if color is None:
        return None
    if isinstance(color, str):
        return color
    if callable(color):
        return color(series_index, chart)
    if series_index < len(color):
        return color[series_index]
    return None


def chart_symbols(base: ChartSymbols, color: str | None, *, fill_area: bool = False) -> ChartSymbols:
    """Per-series line glyphs: collapsed to the area glyph for fills, then colorized."""
    glyphs = {f.name: getattr(base, f.name) for f in fields(base)}
    if fill_area:
        glyphs = {name: base.area for name in glyphs}
    if color:
        glyphs = {name: colorize(glyph, color) for name, glyph in glyphs.items()}
    return ChartSymbols(**glyphs)


@dataclass(frozen=True)
class PlotConfig:
    width: int | None = None
    height: int | None = None
    y_range: Range | None = None
    show_tick_label: bool = False
    hide_x_axis: bool = False
    hide_y_axis: bool = False
    hide_x_axis_ticks: bool = False
    hide_y_axis_ticks: bool = False
    title: str | None = None
    x_label: str | None = None
    y_label: str | None = None
    thresholds: tuple[Threshold, ...] = ()
    points: tuple[GraphPoint, ...] = ()
    fill_area: bool = False
    legend: Legend | None = None
    axis_center: tuple[float | None, float | None] | None = None
    color: ColorOption | None = None
    formatter: Formatter | None = None
    line_formatter: LineFormatter | None = None
    symbols: SymbolOverrides | None = None
    mode: PlotMode = "line"
    custom_x_axis_ticks: tuple[float, ...] | None = None
    custom_y_axis_ticks: tuple[float, ...] | None = None
    debug_mode: bool = False
    diagnostics: DiagnosticSink | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "mode", _MODE_ALIASES.get(self.mode, self.mode))
        if self.mode not in PLOT_MODES:
            raise PlotConfigError(f"unknown plot mode: {self.mode!r}")
        if self.width is not None and self.width <= 0:
            raise PlotConfigError("width must be > 0")
        if self.height is not None and self.height <= 0:
            raise PlotConfigError("height must be > 0")
        if self.legend is not None and self.legend.position not in LEGEND_POSITIONS:
            raise PlotConfigError(f"unknown legend position: {self.legend.position!r}")

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> PlotConfig:
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in raw.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in known:
                raise PlotConfigError(f"unknown plot option: {key}")
            values[name] = value
        return cls(**_coerce_options(values))

    def with_options(self, **changes: Any) -> PlotConfig:
        return replace(self, **_coerce_options(changes))


def _coerce_options(values: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for name, value in values.items():
        coerce = _COERCERS.get(name)
        out[name] = value if coerce is None or value is None else coerce(value, name)
    return out


def _merge_roles(defaults: Any, overrides: Mapping[str, str] | None, field_name: str) -> Any:
    if not overrides:
        return defaults
    roles = {f.name for f in fields(defaults)}
    for role, glyph in overrides.items():
        if role not in roles:
            raise PlotConfigError(f"{field_name} has unknown role: {role}")
        if not isinstance(glyph, str):
            raise PlotConfigError(f"{field_name}.{role} must be a string")
    return replace(defaults, **dict(overrides))


def _coerce_positive_int(value: object, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PlotConfigError(f"{field_name} must be a number")
    if value <= 0:
        raise PlotConfigError(f"{field_name} must be > 0")
    return int(value)


def _coerce_bool(value: object, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise PlotConfigError(f"{field_name} must be a boolean")
    return value


def _coerce_optional_str(value: object, field_name: str) -> str | None:
    if not isinstance(value, str):
        raise PlotConfigError(f"{field_name} must be a string if provided")
    return value


def _coerce_number(value: object, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PlotConfigError(f"{field_name} must be a number")
    return value


def _coerce_optional_number(value: object, field_name: str) -> float | None:
    if value is None:
        return None
    return _coerce_number(value, field_name)


def _coerce_pair(value: object, field_name: str) -> Range:
    if not isinstance(value, Sequence) or isinstance(value, str) or len(value) != 2:
        raise PlotConfigError(f"{field_name} must be a [min, max] pair")
    return (_coerce_number(value[0], field_name), _coerce_number(value[1], field_name))


def _coerce_axis_center(value: object, field_name: str) -> tuple[float | None, float | None]:
    if isinstance(value, Mapping):
        value = [value.get("x"), value.get("y")]
    if not isinstance(value, Sequence) or isinstance(value, str) or len(value) != 2:
        raise PlotConfigError(f"{field_name} must be an [x, y] pair")
    return (_coerce_optional_number(value[0], field_name), _coerce_optional_number(value[1], field_name))


def _coerce_ticks(value: object, field_name: str) -> tuple[float, ...]:
    if not isinstance(value, Sequence) or isinstance(value, str):
        raise PlotConfigError(f"{field_name} must be a list of numbers")
    return tuple(_coerce_number(item, field_name) for item in value)


def _coerce_thresholds(value: object, field_name: str) -> tuple[Threshold, ...]:
    if not isinstance(value, Sequence) or isinstance(value, str):
        raise PlotConfigError(f"{field_name} must be a list")
    out: list[Threshold] = []
    for item in value:
        if isinstance(item, Threshold):
            out.append(item)
            continue
        if not isinstance(item, Mapping):
            raise PlotConfigError(f"{field_name} entries must be objects")
        out.append(
            Threshold(
                x=_coerce_optional_number(item.get("x"), f"{field_name}.x"),
                y=_coerce_optional_number(item.get("y"), f"{field_name}.y"),
                color=_coerce_color_name(item.get("color"), f"{field_name}.color"),
            )
        )
    return tuple(out)


def _coerce_points(value: object, field_name: str) -> tuple[GraphPoint, ...]:
    if not isinstance(value, Sequence) or isinstance(value, str):
        raise PlotConfigError(f"{field_name} must be a list")
    out: list[GraphPoint] = []
    for item in value:
        if isinstance(item, GraphPoint):
            out.append(item)
            continue
        if not isinstance(item, Mapping):
            raise PlotConfigError(f"{field_name} entries must be objects")
        if "x" not in item or "y" not in item:
            raise PlotConfigError(f"{field_name} entries require x and y")
        out.append(
            GraphPoint(
                x=_coerce_number(item["x"], f"{field_name}.x"),
                y=_coerce_number(item["y"], f"{field_name}.y"),
                color=_coerce_color_name(item.get("color"), f"{field_name}.color"),
            )
        )
    return tuple(out)


def _coerce_color_name(value: object, field_name: str) -> str | None:
    if value is None:
        return None
    return _coerce_optional_str(value, field_name)


def _coerce_labels(value: object, field_name: str) -> str | tuple[str, ...] | None:
    if value is None or isinstance(value, str):
        return value
    if not isinstance(value, Sequence):
        raise PlotConfigError(f"{field_name} must be a string or a list of strings")
    out: list[str] = []
    for item in value:
        if not isinstance(item, str):
            raise PlotConfigError(f"{field_name} entries must be strings")
        out.append(item)
    return tuple(out)


def _coerce_legend(value: object, field_name: str) -> Legend:
    if isinstance(value, Legend):
        return value
    if not isinstance(value, Mapping):
        raise PlotConfigError(f"{field_name} must be an object")
    position = value.get("position", "bottom")
    if position not in LEGEND_POSITIONS:
        raise PlotConfigError(f"unknown legend position: {position!r}")
    return Legend(
        position=position,
        series=_coerce_labels(value.get("series"), f"{field_name}.series"),
        thresholds=_coerce_labels(value.get("thresholds"), f"{field_name}.thresholds"),
        points=_coerce_labels(value.get("points"), f"{field_name}.points"),
    )


def _coerce_color(value: object, field_name: str) -> ColorOption:
    if isinstance(value, str) or callable(value):
        return value
    if isinstance(value, Sequence):
        for item in value:
            if not isinstance(item, str):
                raise PlotConfigError(f"{field_name} entries must be color names")
        return tuple(value)
    raise PlotConfigError(f"{field_name} must be a color name, a list of names or a callable")


def _coerce_callable(value: object, field_name: str) -> Any:
    if not callable(value):
        raise PlotConfigError(f"{field_name} must be callable")
    return value


def _coerce_symbols(value: object, field_name: str) -> SymbolOverrides:
    if isinstance(value, SymbolOverrides):
        return value
    if not isinstance(value, Mapping):
        raise PlotConfigError(f"{field_name} must be an object")
    known = {f.name for f in fields(SymbolOverrides)}
    unknown = sorted(set(value) - known)
    if unknown:
        raise PlotConfigError(f"{field_name} has unknown keys: {', '.join(unknown)}")
    overrides = SymbolOverrides(**value)
    # Fail on bad roles now rather than mid-render.
    resolve_symbols(overrides)
    return overrides


def _coerce_mode(value: object, field_name: str) -> str:
    if not isinstance(value, str):
        raise PlotConfigError(f"{field_name} must be a string")
    mode = _MODE_ALIASES.get(value, value)
    if mode not in PLOT_MODES:
        raise PlotConfigError(f"unknown plot mode: {value!r}")
    return mode


_COERCERS: dict[str, Any] = {
    "width": _coerce_positive_int,
    "height": _coerce_positive_int,
    "y_range": _coerce_pair,
    "show_tick_label": _coerce_bool,
    "hide_x_axis": _coerce_bool,
    "hide_y_axis": _coerce_bool,
    "hide_x_axis_ticks": _coerce_bool,
    "hide_y_axis_ticks": _coerce_bool,
    "title": _coerce_optional_str,
    "x_label": _coerce_optional_str,
    "y_label": _coerce_optional_str,
    "thresholds": _coerce_thresholds,
    "points": _coerce_points,
    "fill_area": _coerce_bool,
    "legend": _coerce_legend,
    "axis_center": _coerce_axis_center,
    "color": _coerce_color,
    "formatter": _coerce_callable,
    "line_formatter": _coerce_callable,
    "symbols": _coerce_symbols,
    "mode": _coerce_mode,
    "custom_x_axis_ticks": _coerce_ticks,
    "custom_y_axis_ticks": _coerce_ticks,
    "debug_mode": _coerce_bool,
    "diagnostics": _coerce_callable,
}
