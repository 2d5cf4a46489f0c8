from __future__ import annotations

from dataclasses import dataclass


ANSI_CODES: dict[str, int] = {
    "ansiBlack": 30,
    "ansiRed": 31,
    "ansiGreen": 32,
    "ansiYellow": 33,
    "ansiBlue": 34,
    "ansiMagenta": 35,
    "ansiCyan": 36,
    "ansiWhite": 37,
}
ANSI_RESET = "\u001b[0m"

EMPTY = " "
POINT = "●"


@dataclass(frozen=True)
class AxisSymbols:
    n: str = "▲"
    ns: str = "│"
    y: str = "┤"
    nse: str = "└"
    x: str = "┬"
    we: str = "─"
    e: str = "▶"


@dataclass(frozen=True)
class ChartSymbols:
    we: str = "━"
    wns: str = "┓"
    ns: str = "┃"
    nse: str = "┗"
    wsn: str = "┛"
    sne: str = "┏"
    area: str = "█"


@dataclass(frozen=True)
class ThresholdSymbols:
    # x thresholds draw a column, y thresholds a row.
    x: str = "┃"
    y: str = "━"


AXIS = AxisSymbols()
CHART = ChartSymbols()
THRESHOLDS = ThresholdSymbols()

# Axis crossing glyphs keyed by the occupied neighbor sides (n, s, e, w).
AXIS_JOINTS: dict[frozenset[str], str] = {
    frozenset("nsew"): "┼",
    frozenset("nse"): "├",
    frozenset("nsw"): "┤",
    frozenset("sew"): "┬",
    frozenset("new"): "┴",
    frozenset("ne"): "└",
    frozenset("nw"): "┘",
    frozenset("se"): "┌",
    frozenset("sw"): "┐",
}


def ansi_color(color: str | None) -> str:
    code = ANSI_CODES.get(color or "", ANSI_CODES["ansiWhite"])
    return f"\u001b[{code}m"


def colorize(glyph: str, color: str | None) -> str:
    if not color:
        return glyph
    return f"{ansi_color(color)}{glyph}{ANSI_RESET}"
