from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np

from textplot.diagnostics import DiagnosticSink
from textplot.symbols import EMPTY


def new_cells(width: int, height: int, fill: str = EMPTY) -> np.ndarray:
    cells = np.empty((max(0, height), max(0, width)), dtype=object)
    cells.fill(fill)
    return cells


class Grid:
    """Rectangular buffer of glyph cells addressed as (column, row), row 0 on top.

    Writes outside the buffer are skipped; when a diagnostic sink is attached
    each skipped write is reported to it.
    """

    def __init__(self, cells: np.ndarray, *, diagnostics: DiagnosticSink | None = None) -> None:
        if cells.ndim != 2:
            raise ValueError("grid cells must be a 2-D array")
        self._cells = cells
        self._diagnostics = diagnostics

    @classmethod
    def blank(cls, width: int, height: int, fill: str = EMPTY, *, diagnostics: DiagnosticSink | None = None) -> Grid:
        return cls(new_cells(width, height, fill), diagnostics=diagnostics)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]], fill: str = EMPTY) -> Grid:
        width = max((len(row) for row in rows), default=0)
        cells = new_cells(width, len(rows), fill)
        for y, row in enumerate(rows):
            for x, cell in enumerate(row):
                cells[y, x] = cell
        return cls(cells)

    @property
    def height(self) -> int:
        return int(self._cells.shape[0])

    @property
    def width(self) -> int:
        return int(self._cells.shape[1])

    @property
    def cells(self) -> np.ndarray:
        return self._cells

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= y < self.height and 0 <= x < self.width

    def get(self, x: int, y: int) -> str | None:
        if not self.in_bounds(x, y):
            return None
        return self._cells[y, x]

    def draw(self, x: int, y: int, symbol: str) -> bool:
        if y < 0 or y >= self.height:
            self._report("y", x, y, symbol)
            return False
        if x < 0 or x >= self.width:
            self._report("x", x, y, symbol)
            return False
        self._cells[y, x] = symbol
        return True

    def fill_row(self, y: int, symbol: str) -> None:
        if 0 <= y < self.height:
            self._cells[y, :] = symbol

    def fill_column(self, x: int, symbol: str) -> None:
        if 0 <= x < self.width:
            self._cells[:, x] = symbol

    def row_is(self, y: int, symbol: str) -> bool:
        return all(cell == symbol for cell in self._cells[y])

    def column_is(self, x: int, symbol: str) -> bool:
        if self.width == 0:
            return False
        return all(cell == symbol for cell in self._cells[:, x])

    def add_row(self, values: Sequence[str] = (), *, top: bool = False, fill: str = EMPTY) -> None:
        if len(values) > self.width:
            self.pad_right(len(values), fill)
        row = new_cells(self.width, 1, fill)
        row[0, : len(values)] = list(values)
        if top:
            self._cells = np.vstack([row, self._cells])
        else:
            self._cells = np.vstack([self._cells, row])

    def add_columns(self, count: int, *, left: bool = False, fill: str = EMPTY) -> None:
        if count <= 0:
            return
        block = new_cells(count, self.height, fill)
        if left:
            self._cells = np.hstack([block, self._cells])
        else:
            self._cells = np.hstack([self._cells, block])

    def pad_right(self, width: int, fill: str = EMPTY) -> None:
        self.add_columns(width - self.width, fill=fill)

    def remove_rows(self, indices: Iterable[int]) -> None:
        drop = sorted(set(indices))
        if drop:
            self._cells = np.delete(self._cells, drop, axis=0)

    def shift_left(self) -> None:
        self._cells = self._cells[:, 1:]

    def lines(self) -> list[str]:
        return ["".join(row) for row in self._cells.tolist()]

    def to_text(self) -> str:
        return "\n" + "\n".join(self.lines()) + "\n"

    def _report(self, axis: str, x: int, y: int, symbol: str) -> None:
        if self._diagnostics is None:
            return
        self._diagnostics(
            {
                "event": "out_of_bounds",
                "axis": axis,
                "x": int(x),
                "y": int(y),
                "symbol": symbol,
                "rows": self.height,
                "columns": self.width,
            }
        )
