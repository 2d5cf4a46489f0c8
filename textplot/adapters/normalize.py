from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from numbers import Real
from typing import Any

import numpy as np

from textplot.errors import PlotDataError
from textplot.series import Chart, Range


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


@dataclass(frozen=True)
class OneSeries:
    points: np.ndarray


@dataclass(frozen=True)
class ManySeries:
    series: tuple[np.ndarray, ...]


def classify_chart(raw: Any, *, x: str | None = None, y: str | None = None) -> OneSeries | ManySeries:
    """Resolve raw chart input into a single series or a list of series.

    Accepts nested sequences of ``(x, y)`` pairs, numpy arrays shaped ``(n, 2)``
    or ``(k, n, 2)``, torch tensors of the same shapes, and pandas DataFrames.
    """
    if torch is not None and isinstance(raw, torch.Tensor):
        tensor = raw.detach()
        if tensor.is_cuda:
            tensor = tensor.cpu()
        raw = tensor.to(torch.float64).numpy()

    if pd is not None and isinstance(raw, pd.DataFrame):
        return OneSeries(points=_frame_points(raw, x=x, y=y))

    if isinstance(raw, np.ndarray):
        if raw.size == 0:
            return ManySeries(series=())
        if raw.ndim == 2:
            return OneSeries(points=_coerce_points(raw, label="series"))
        if raw.ndim == 3:
            return ManySeries(series=tuple(_coerce_points(item, label=f"series {i}") for i, item in enumerate(raw)))
        raise PlotDataError(f"chart array must have shape (n, 2) or (k, n, 2), got {raw.shape}")

    if isinstance(raw, Sequence) and not isinstance(raw, (str, bytes, bytearray)):
        if len(raw) == 0:
            return ManySeries(series=())
        first = raw[0]
        if _is_point(first):
            return OneSeries(points=_coerce_points(raw, label="series"))
        return ManySeries(series=tuple(_coerce_points(item, label=f"series {i}") for i, item in enumerate(raw)))

    raise PlotDataError(f"unsupported chart input type: {type(raw)!r}")


def to_series_list(classified: OneSeries | ManySeries) -> list[np.ndarray]:
    if isinstance(classified, OneSeries):
        return [classified.points]
    return list(classified.series)


def to_chart(series: Sequence[np.ndarray]) -> Chart:
    return [[(float(px), float(py)) for px, py in arr.tolist()] for arr in series]


def sort_series(points: np.ndarray) -> np.ndarray:
    """Order points by x; points sharing an x keep their input order."""
    if points.shape[0] < 2:
        return points
    return points[np.argsort(points[:, 0], kind="stable")]


def filter_y_range(series: Sequence[np.ndarray], y_range: Range | None) -> list[np.ndarray]:
    if y_range is None:
        return list(series)
    lo, hi = min(y_range), max(y_range)
    return [arr[(arr[:, 1] >= lo) & (arr[:, 1] <= hi)] for arr in series]


def normalize_labels(labels: str | Sequence[str] | None) -> list[str]:
    if labels is None:
        return []
    if isinstance(labels, str):
        return [labels]
    return [str(label) for label in labels]


def pad_or_trim(labels: Sequence[str], count: int) -> list[str]:
    out = list(labels[: max(0, count)])
    out.extend("" for _ in range(count - len(out)))
    return out


def _is_point(value: Any) -> bool:
    if isinstance(value, np.ndarray):
        return value.ndim == 1
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return len(value) > 0 and _is_scalar(value[0])
    return False


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (Real, Decimal, np.number)) and not isinstance(value, bool)


def _frame_points(frame: Any, *, x: str | None, y: str | None) -> np.ndarray:
    for name in (x, y):
        if name is not None and name not in frame.columns:
            raise PlotDataError(f"column not found: {name}")
    numeric_cols = [c for c in frame.columns if _is_numeric_dtype(frame[c])]
    if x is None and y is None:
        if len(numeric_cols) < 2:
            raise PlotDataError("DataFrame input must contain at least two numeric columns")
        x, y = numeric_cols[0], numeric_cols[1]
    elif y is None:
        remaining = [c for c in numeric_cols if c != x]
        if not remaining:
            raise PlotDataError("DataFrame input has no numeric y column")
        y = remaining[0]
    elif x is None:
        remaining = [c for c in numeric_cols if c != y]
        if not remaining:
            raise PlotDataError("DataFrame input has no numeric x column")
        x = remaining[0]
    xs = _coerce_ndarray(frame[x].to_numpy(), label=str(x))
    ys = _coerce_ndarray(frame[y].to_numpy(), label=str(y))
    return _finite(np.column_stack([xs, ys]), label="series")


def _is_numeric_dtype(column: Any) -> bool:
    if pd is None:
        return False
    return bool(pd.api.types.is_numeric_dtype(column))


def _coerce_points(value: Any, *, label: str) -> np.ndarray:
    if isinstance(value, np.ndarray):
        arr = value
    elif isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        if len(value) == 0:
            return np.empty((0, 2), dtype=np.float64)
        if not all(_is_pair(item) for item in value):
            raise PlotDataError(f"{label} must be a list of [x, y] pairs")
        arr = np.asarray([list(item) for item in value], dtype=object)
    else:
        raise PlotDataError(f"unsupported {label} input type: {type(value)!r}")

    if arr.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise PlotDataError(f"{label} must have shape (n, 2), got {arr.shape}")
    xs = _coerce_ndarray(arr[:, 0], label=f"{label} x")
    ys = _coerce_ndarray(arr[:, 1], label=f"{label} y")
    return _finite(np.column_stack([xs, ys]), label=label)


def _is_pair(item: Any) -> bool:
    if isinstance(item, np.ndarray):
        return item.shape == (2,)
    return isinstance(item, Sequence) and not isinstance(item, (str, bytes, bytearray)) and len(item) == 2


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if not _is_scalar(raw):
            raise PlotDataError(f"{label} contains non-numeric value at index {i}: {raw!r}")
        out[i] = float(raw)
    return out


def _finite(points: np.ndarray, *, label: str) -> np.ndarray:
    if not np.all(np.isfinite(points)):
        raise PlotDataError(f"{label} contains non-finite values")
    return points
