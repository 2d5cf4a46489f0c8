from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import difflib
import logging
from pathlib import Path
import re

from textplot.examples import EXAMPLES, Example

LOGGER = logging.getLogger(__name__)

_UNSAFE = re.compile(r"[^\w.-]+")


@dataclass(frozen=True)
class SnapshotMismatch:
    path: Path
    diff: str
    missing: bool = False


def snapshot_file_name(index: int, title: str | None) -> str:
    return _UNSAFE.sub("_", f"{index:02d}_{title or 'example'}") + ".txt"


def write_snapshots(directory: str | Path, examples: Iterable[Example] = EXAMPLES) -> list[Path]:
    root = Path(directory)
    root.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for index, example in enumerate(examples):
        path = root / snapshot_file_name(index, example.title)
        path.write_text(example.render(), encoding="utf-8")
        written.append(path)
    LOGGER.info("wrote %d snapshots to %s", len(written), root)
    return written


def check_snapshots(directory: str | Path, examples: Iterable[Example] = EXAMPLES) -> list[SnapshotMismatch]:
    root = Path(directory)
    mismatches: list[SnapshotMismatch] = []
    for index, example in enumerate(examples):
        path = root / snapshot_file_name(index, example.title)
        actual = example.render()
        if not path.exists():
            mismatches.append(SnapshotMismatch(path=path, diff="", missing=True))
            continue
        expected = path.read_text(encoding="utf-8")
        if expected == actual:
            continue
        diff = "".join(
            difflib.unified_diff(
                expected.splitlines(keepends=True),
                actual.splitlines(keepends=True),
                fromfile=str(path),
                tofile=f"{path} (rendered)",
            )
        )
        mismatches.append(SnapshotMismatch(path=path, diff=diff))
    if mismatches:
        LOGGER.warning("%d snapshot(s) differ under %s", len(mismatches), root)
    return mismatches
