from __future__ import annotations

import contextlib
import io
import json
from pathlib import Path
import tempfile
import unittest

from textplot.cli import ERROR_MESSAGE, main


BASIC = "\n ▲   \n2┤┏━ \n1┤┛  \n └┬┬▶\n  12 \n"


def _run(argv: list[str]) -> tuple[int, str, str]:
    out = io.StringIO()
    err = io.StringIO()
    with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
        code = main(argv)
    return code, out.getvalue(), err.getvalue()


class PlotCommandTests(unittest.TestCase):
    def test_plot_from_flags(self) -> None:
        code, out, _ = _run(["plot", "-i", "[[1, 1], [2, 2]]", "-W", "2", "-H", "2"])
        self.assertEqual(code, 0)
        self.assertEqual(out, BASIC)

    def test_flags_override_json_options(self) -> None:
        code, out, _ = _run(
            ["plot", "-i", "[[1, 1], [2, 2]]", "-o", '{"width": 9, "height": 2, "hideYAxisTicks": false}', "-W", "2"]
        )
        self.assertEqual(code, 0)
        self.assertEqual(out, BASIC)

    def test_toml_config_layer(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            config = Path(td) / "plot.toml"
            config.write_text("width = 2\nheight = 2\n", encoding="utf-8")
            code, out, _ = _run(["plot", "-i", "[[1, 1], [2, 2]]", "--config", str(config)])
        self.assertEqual(code, 0)
        self.assertEqual(out, BASIC)

    def test_bad_input_prints_generic_error(self) -> None:
        for argv in (
            ["plot", "-i", "not json"],
            ["plot", "-i", "[[1, 1]]", "-o", "[1, 2]"],
            ["plot", "-i", '[[1, "a"]]'],
            ["plot", "-i", "[[1, 1]]", "-o", '{"colour": "ansiRed"}'],
        ):
            with self.subTest(argv=argv):
                code, out, err = _run(argv)
                self.assertEqual(code, 1)
                self.assertEqual(out, "")
                self.assertEqual(err, ERROR_MESSAGE + "\n")

    def test_diagnostics_jsonl_flag(self) -> None:
        formatter_free = ["plot", "-i", "[[1, 1], [2, 2]]", "-W", "2", "-H", "2"]
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "diag" / "events.jsonl"
            code, out, _ = _run([*formatter_free, "--diagnostics-jsonl", str(path)])
            self.assertEqual(code, 0)
            self.assertEqual(out, BASIC)
            self.assertFalse(path.exists())

            event = {"event": "out_of_bounds", "axis": "x", "x": 5, "y": 0, "symbol": "━", "rows": 4, "columns": 4}
            path.write_text(json.dumps(event) + "\n", encoding="utf-8")
            code, out, _ = _run(["diagnostics-report", str(path)])
        self.assertEqual(code, 0)
        self.assertEqual(
            json.loads(out),
            {"total": 1, "by_axis": {"x": 1}, "by_symbol": {"━": 1}, "max_overshoot": {"x": 2}},
        )


class GalleryCommandTests(unittest.TestCase):
    def test_examples_only(self) -> None:
        code, out, _ = _run(["examples", "--only", "simple example"])
        self.assertEqual(code, 0)
        self.assertIn("\nsimple example", out)
        self.assertNotIn("bar chart", out)

    def test_snapshot_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            code, out, _ = _run(["snapshots", "write", "--dir", td])
            self.assertEqual(code, 0)
            self.assertIn("wrote snapshots=", out)

            code, out, _ = _run(["snapshots", "check", "--dir", td])
            self.assertEqual(code, 0)
            self.assertIn("snapshot mismatches=0", out)

            first = sorted(Path(td).glob("*.txt"))[0]
            first.write_text("stale\n", encoding="utf-8")
            code, out, _ = _run(["snapshots", "check", "--dir", td])
            self.assertEqual(code, 1)
            self.assertIn("snapshot mismatches=1", out)


if __name__ == "__main__":
    unittest.main()
