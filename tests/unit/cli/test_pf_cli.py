"""CLI argument and output-stream behavior tests.

Only the selected path may reach stdout; bad start paths exit early.
"""

from __future__ import annotations

import io
import logging
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from folderpicker import cli


class CliTests(unittest.TestCase):
    def _main(self, argv: list[str], selection: Path | None = None, **kwargs):
        stdout = io.StringIO()
        with mock.patch.object(sys, "argv", ["pf", *argv]), mock.patch(
            "folderpicker.cli.run_picker", return_value=selection
        ) as run_picker, mock.patch("sys.stdout", stdout):
            cli.main(**kwargs)
        return run_picker, stdout.getvalue()

    def test_defaults_to_current_working_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            previous_cwd = Path.cwd()
            try:
                os.chdir(root)
                run_picker, output = self._main([])
            finally:
                os.chdir(previous_cwd)

        start = run_picker.call_args.args[0]
        self.assertEqual(start.resolve(), root)
        self.assertEqual(output, "")

    def test_prints_selection_followed_by_newline(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            run_picker, output = self._main([str(root)], selection=root / "chosen")

        self.assertEqual(run_picker.call_args.args[0], root)
        self.assertEqual(output, f"{root / 'chosen'}\n")

    def test_default_path_argument_is_used_when_no_positional(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            run_picker, _output = self._main([], default_path=root)

        self.assertEqual(run_picker.call_args.args[0], root)

    def test_tilde_expands_to_home(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            home = Path(tmp)
            (home / "projects").mkdir()
            with mock.patch("pathlib.Path.home", return_value=home):
                run_picker, _output = self._main(["~/projects"])

        self.assertEqual(run_picker.call_args.args[0], home / "projects")

    def test_theme_and_color_flags_are_forwarded(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            run_picker, _output = self._main([tmp, "--theme", "ocean", "--no-color"])

        self.assertEqual(run_picker.call_args.kwargs, {"theme_name": "ocean", "no_color": True})

    def test_missing_path_exits_before_running(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing"
            with self.assertRaises(SystemExit) as ctx:
                self._main([str(missing)])

        self.assertEqual(str(ctx.exception), f"Path not found: {missing}")

    def test_file_path_is_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "file.txt"
            target.write_text("x\n", encoding="utf-8")
            with self.assertRaises(SystemExit) as ctx:
                self._main([str(target)])

        self.assertEqual(str(ctx.exception), f"Not a directory: {target}")

    def test_log_file_attaches_debug_handler(self) -> None:
        package_logger = logging.getLogger("folderpicker")
        before = list(package_logger.handlers)
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "pf.log"
            try:
                self._main([tmp, "--log-file", str(log_path)])
                added = [handler for handler in package_logger.handlers if handler not in before]
                self.assertEqual(len(added), 1)
                self.assertIsInstance(added[0], logging.FileHandler)
                self.assertEqual(package_logger.level, logging.DEBUG)
            finally:
                for handler in package_logger.handlers[:]:
                    if handler not in before:
                        package_logger.removeHandler(handler)
                        handler.close()
                package_logger.setLevel(logging.NOTSET)


if __name__ == "__main__":
    unittest.main()
