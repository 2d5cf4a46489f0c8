from __future__ import annotations

from collections import Counter
import json
import logging
from pathlib import Path
import threading
from typing import Any, Callable, Iterator

LOGGER = logging.getLogger(__name__)

DiagnosticSink = Callable[[dict[str, Any]], None]


def log_diagnostic(entry: dict[str, Any]) -> None:
    LOGGER.warning(
        "Drawing at [%s, %s] Error: out of bounds %s (symbol=%r, grid=%sx%s)",
        entry.get("x"),
        entry.get("y"),
        str(entry.get("axis", "")).upper(),
        entry.get("symbol"),
        entry.get("columns"),
        entry.get("rows"),
    )


class ListDiagnosticSink:
    def __init__(self) -> None:
        self.events: list[dict[str, Any]] = []

    def log(self, entry: dict[str, Any]) -> None:
        self.events.append(dict(entry))

    def clear(self) -> None:
        self.events.clear()


class JsonlDiagnosticSink:
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    def log(self, entry: dict[str, Any]) -> None:
        with self._lock:
            with self.path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(entry, separators=(",", ":"), sort_keys=True, ensure_ascii=False))
                f.write("\n")

    def events(self) -> Iterator[dict[str, Any]]:
        if not self.path.exists():
            return
        with self.path.open("r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                try:
                    yield json.loads(line)
                except json.JSONDecodeError:
                    LOGGER.debug("skipping malformed diagnostic line: %r", line)

    def summarize(self) -> dict[str, Any]:
        """Out-of-bounds counts per axis and per glyph, plus the furthest miss per axis."""
        by_axis: Counter[str] = Counter()
        by_symbol: Counter[str] = Counter()
        overshoot: dict[str, int] = {}
        for entry in self.events():
            axis = str(entry.get("axis", ""))
            by_axis[axis] += 1
            by_symbol[str(entry.get("symbol", ""))] += 1
            distance = _overshoot(entry)
            if distance is not None:
                overshoot[axis] = max(overshoot.get(axis, 0), distance)
        return {
            "total": sum(by_axis.values()),
            "by_axis": dict(by_axis),
            "by_symbol": dict(by_symbol),
            "max_overshoot": overshoot,
        }


def _overshoot(entry: dict[str, Any]) -> int | None:
    # cells between the write and the nearest edge of the grid it missed
    axis = entry.get("axis")
    if axis == "x":
        position, size = entry.get("x"), entry.get("columns")
    elif axis == "y":
        position, size = entry.get("y"), entry.get("rows")
    else:
        return None
    if not isinstance(position, int) or not isinstance(size, int):
        return None
    if position < 0:
        return -position
    return max(0, position - size + 1)
