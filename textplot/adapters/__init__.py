from .normalize import (
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

__all__ = [
    "ManySeries",
    "OneSeries",
    "classify_chart",
    "filter_y_range",
    "normalize_labels",
    "pad_or_trim",
    "sort_series",
    "to_chart",
    "to_series_list",
]
