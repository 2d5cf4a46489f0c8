from __future__ import annotations

import argparse
from collections.abc import Sequence
import json
import logging
from pathlib import Path
import sys
import tomllib
from typing import Any

from textplot.api import render
from textplot.diagnostics import JsonlDiagnosticSink
from textplot.examples import iter_examples
from textplot.series import PLOT_MODES
from textplot.settings import PlotConfig
from textplot.snapshots import check_snapshots, write_snapshots

LOGGER = logging.getLogger(__name__)

ERROR_MESSAGE = "Oops! Something went wrong!"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="textplot")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    plot = sub.add_parser("plot", help="Render a JSON chart to stdout.")
    plot.add_argument("-i", "--input", required=True, help="Chart as JSON: [[x, y], ...] or [[[x, y], ...], ...].")
    plot.add_argument("-o", "--options", default=None, help="Plot options as a JSON object.")
    plot.add_argument("--config", type=Path, default=None, help="TOML file with plot options.")
    plot.add_argument("-W", "--width", type=int, default=None)
    plot.add_argument("-H", "--height", type=int, default=None)
    plot.add_argument("--hide-x-axis", action="store_true", default=None)
    plot.add_argument("--hide-y-axis", action="store_true", default=None)
    plot.add_argument("--fill-area", action="store_true", default=None)
    plot.add_argument("--show-tick-label", action="store_true", default=None)
    plot.add_argument("-t", "--title", default=None)
    plot.add_argument("--x-label", default=None)
    plot.add_argument("--y-label", default=None)
    plot.add_argument("-c", "--color", action="extend", nargs="+", default=None, help="One color per series.")
    plot.add_argument("--axis-center", type=float, nargs=2, metavar=("X", "Y"), default=None)
    plot.add_argument("--y-range", type=float, nargs=2, metavar=("MIN", "MAX"), default=None)
    plot.add_argument("--mode", choices=PLOT_MODES, default=None)
    plot.add_argument("--diagnostics-jsonl", type=Path, default=None, help="Enable debug mode and log skipped writes.")

    examples = sub.add_parser("examples", help="Print the demo gallery.")
    examples.add_argument("--only", action="append", default=None, help="Only print examples with this title.")

    snapshots = sub.add_parser("snapshots", help="Write or check gallery snapshot files.")
    snapshots.add_argument("action", choices=["write", "check"])
    snapshots.add_argument("--dir", type=Path, default=Path("snapshots"))

    report = sub.add_parser("diagnostics-report", help="Summarize a JSONL diagnostics file.")
    report.add_argument("path", type=Path)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "plot":
        try:
            chart, config = prepare_params(args)
            output = render(chart, config)
        except Exception:
            LOGGER.debug("plot command failed", exc_info=True)
            sys.stderr.write(ERROR_MESSAGE + "\n")
            return 1
        sys.stdout.write(output)
        return 0

    if args.command == "examples":
        for example in iter_examples(only=args.only):
            sys.stdout.write(example.render())
        return 0

    if args.command == "snapshots":
        if args.action == "write":
            written = write_snapshots(args.dir)
            print(f"wrote snapshots={len(written)} dir={args.dir}")
            return 0
        mismatches = check_snapshots(args.dir)
        for mismatch in mismatches:
            if mismatch.missing:
                print(f"missing snapshot: {mismatch.path}")
            else:
                print(mismatch.diff)
        print(f"snapshot mismatches={len(mismatches)}")
        return 1 if mismatches else 0

    if args.command == "diagnostics-report":
        print(json.dumps(JsonlDiagnosticSink(args.path).summarize(), indent=2, sort_keys=True))
        return 0

    raise RuntimeError(f"unsupported command: {args.command}")


def prepare_params(args: argparse.Namespace) -> tuple[Any, PlotConfig]:
    """Merge the option layers: TOML file, then JSON options, then explicit flags."""
    options: dict[str, Any] = {}
    if args.config is not None:
        with args.config.open("rb") as f:
            options.update(tomllib.load(f))
    if args.options:
        decoded = json.loads(args.options)
        if not isinstance(decoded, dict):
            raise ValueError("--options must be a JSON object")
        options.update(decoded)

    flags = {
        "width": args.width,
        "height": args.height,
        "hide_x_axis": args.hide_x_axis,
        "hide_y_axis": args.hide_y_axis,
        "fill_area": args.fill_area,
        "show_tick_label": args.show_tick_label,
        "title": args.title,
        "x_label": args.x_label,
        "y_label": args.y_label,
        "axis_center": tuple(args.axis_center) if args.axis_center else None,
        "y_range": tuple(args.y_range) if args.y_range else None,
        "mode": args.mode,
    }
    if args.color:
        flags["color"] = args.color[0] if len(args.color) == 1 else list(args.color)
    if args.diagnostics_jsonl is not None:
        flags["debug_mode"] = True
        flags["diagnostics"] = JsonlDiagnosticSink(args.diagnostics_jsonl).log

    config = PlotConfig.from_mapping(options).with_options(
        **{name: value for name, value in flags.items() if value is not None}
    )
    return json.loads(args.input), config
