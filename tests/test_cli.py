"""CLI argument parsing and option resolution tests.

Verifies how ``pagepick.cli.main`` loads items and builds session options.
The interactive runtime is patched out.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from pagepick import cli
from pagepick.ui_theme import DEFAULT_THEME, PLAIN_THEME


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.root = Path(tmp.name)
        self.items_path = self.root / "items.txt"
        self.items_path.write_text("x\n\ny\nz\n", encoding="utf-8")
        self.output = self.root / "out.txt"
        for target, value in (
            ("pagepick.cli.load_config", {}),
            ("pagepick.cli.load_page_size", 10),
            ("pagepick.cli.load_view", "all"),
            ("pagepick.cli.load_no_color", False),
        ):
            patcher = mock.patch(target, return_value=value)
            patcher.start()
            self.addCleanup(patcher.stop)
        env_patcher = mock.patch.dict("pagepick.ui_theme.os.environ", {}, clear=True)
        env_patcher.start()
        self.addCleanup(env_patcher.stop)

    def _main(self, *argv: str, exit_code: int = 0):
        with mock.patch("pagepick.cli.run_picker", return_value=exit_code) as run_picker:
            cli.main(list(argv))
        run_picker.assert_called_once()
        return run_picker.call_args.args

    def test_defaults_and_item_loading(self) -> None:
        items, options = self._main("-i", str(self.items_path), "-o", str(self.output))

        self.assertEqual(items, ["x", "y", "z"])
        self.assertEqual(options.output, str(self.output))
        self.assertEqual(options.output_number, "")
        self.assertEqual(options.page_size, 10)
        self.assertEqual(options.view, "all")
        self.assertIs(options.theme, DEFAULT_THEME)

    def test_reverse_and_explicit_options(self) -> None:
        items, options = self._main(
            "--input", str(self.items_path),
            "--output", "-",
            "--output-number", str(self.root / "n.txt"),
            "--reverse",
            "--page-size", "3",
            "--view", "minimal",
            "--no-color",
        )

        self.assertEqual(items, ["z", "y", "x"])
        self.assertEqual(options.output, "-")
        self.assertEqual(options.output_number, str(self.root / "n.txt"))
        self.assertEqual(options.page_size, 3)
        self.assertEqual(options.view, "minimal")
        self.assertIs(options.theme, PLAIN_THEME)

    def test_legacy_page_size_spelling_is_accepted(self) -> None:
        _, options = self._main("-i", str(self.items_path), "-o", "-", "--page_size", "7")

        self.assertEqual(options.page_size, 7)

    def test_config_defaults_apply_when_flags_are_absent(self) -> None:
        with mock.patch("pagepick.cli.load_page_size", return_value=4), mock.patch(
            "pagepick.cli.load_view", return_value="minimal"
        ):
            _, options = self._main("-i", str(self.items_path), "-o", "-")

        self.assertEqual(options.page_size, 4)
        self.assertEqual(options.view, "minimal")

    def test_zero_page_size_is_rejected(self) -> None:
        with mock.patch("pagepick.cli.run_picker") as run_picker, mock.patch("sys.stderr"):
            with self.assertRaises(SystemExit) as exc_info:
                cli.main(["-i", str(self.items_path), "-o", "-", "-p", "0"])

        self.assertEqual(exc_info.exception.code, 2)
        run_picker.assert_not_called()

    def test_missing_input_file_is_fatal_before_runtime(self) -> None:
        with mock.patch("pagepick.cli.run_picker") as run_picker:
            with self.assertRaises(SystemExit) as exc_info:
                cli.main(["-i", str(self.root / "missing.txt"), "-o", "-"])

        run_picker.assert_not_called()
        self.assertIn("Cannot read input file", str(exc_info.exception.code))

    def test_config_file_is_read_once_and_shared_by_loaders(self) -> None:
        stored = {"page_size": 6, "view": "minimal", "no_color": True}
        with mock.patch("pagepick.cli.load_config", return_value=stored) as load_config, mock.patch(
            "pagepick.cli.load_page_size", wraps=lambda config: config["page_size"]
        ) as load_page_size:
            _, options = self._main("-i", str(self.items_path), "-o", "-")

        load_config.assert_called_once_with()
        load_page_size.assert_called_once_with(stored)
        self.assertEqual(options.page_size, 6)

    def test_help_documents_cancel_exit_status(self) -> None:
        help_text = cli.build_parser().format_help()

        self.assertIn("130", help_text)
        self.assertIn("Ctrl-C", help_text)

    def test_cancel_exit_code_is_propagated(self) -> None:
        with mock.patch("pagepick.cli.run_picker", return_value=130):
            with self.assertRaises(SystemExit) as exc_info:
                cli.main(["-i", str(self.items_path), "-o", "-"])

        self.assertEqual(exc_info.exception.code, 130)


if __name__ == "__main__":
    unittest.main()
