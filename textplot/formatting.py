from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
import math

from textplot.series import AxisName, Formatter, FormatterHelpers, Range


def default_formatter(value: float, helpers: FormatterHelpers | None = None) -> str:
    if abs(value) >= 1000:
        return f"{_fixed(value / 1000)}k"
    return _fixed(value)


def label_text(label: object) -> str:
    if isinstance(label, float) and label.is_integer():
        return str(int(label))
    return str(label)


@dataclass(frozen=True)
class LabelFormatter:
    formatter: Formatter | None
    x_range: Range
    y_range: Range

    def __call__(self, value: float, axis: AxisName) -> str:
        helpers = FormatterHelpers(axis=axis, x_range=self.x_range, y_range=self.y_range)
        if self.formatter is None:
            return default_formatter(value, helpers)
        return label_text(self.formatter(value, helpers))


def _fixed(value: float) -> str:
    if not math.isfinite(value):
        return str(value)
    try:
        q = Decimal(str(value)).quantize(Decimal("0.001"), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return str(value)
    out = format(q, "f")
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out
