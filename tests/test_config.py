"""Tests for config defaults and input sanitization.

Malformed or wrongly typed values must fall back to built-in defaults.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from pagepick.runtime import config


class ConfigBehaviorTests(unittest.TestCase):
    def _with_config(self, payload: str):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        config_path = Path(tmp.name) / "config.json"
        config_path.write_text(payload, encoding="utf-8")
        patcher = mock.patch("pagepick.runtime.config.CONFIG_PATH", config_path)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_missing_file_uses_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("pagepick.runtime.config.CONFIG_PATH", Path(tmp) / "absent.json"):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_page_size(), 10)
                self.assertEqual(config.load_view(), "all")
                self.assertFalse(config.load_no_color())

    def test_valid_values_are_loaded(self) -> None:
        self._with_config(json.dumps({"page_size": 5, "view": " minimal ", "no_color": True}))

        self.assertEqual(config.load_page_size(), 5)
        self.assertEqual(config.load_view(), "minimal")
        self.assertTrue(config.load_no_color())

    def test_invalid_values_fall_back(self) -> None:
        self._with_config(json.dumps({"page_size": True, "view": "  ", "no_color": "yes"}))

        self.assertEqual(config.load_page_size(), 10)
        self.assertEqual(config.load_view(), "all")
        self.assertFalse(config.load_no_color())

    def test_loaders_use_given_config_without_reading_file(self) -> None:
        with mock.patch("pagepick.runtime.config.load_config") as load_config:
            stored = {"page_size": 3, "view": "minimal", "no_color": True}
            self.assertEqual(config.load_page_size(stored), 3)
            self.assertEqual(config.load_view(stored), "minimal")
            self.assertTrue(config.load_no_color(stored))

        load_config.assert_not_called()

    def test_zero_page_size_falls_back(self) -> None:
        self._with_config(json.dumps({"page_size": 0}))

        self.assertEqual(config.load_page_size(), 10)

    def test_malformed_json_and_non_object_are_ignored(self) -> None:
        self._with_config("{not json")
        self.assertEqual(config.load_config(), {})

    def test_top_level_list_is_ignored(self) -> None:
        self._with_config("[1, 2]")
        self.assertEqual(config.load_config(), {})


if __name__ == "__main__":
    unittest.main()
