"""Tests for persisted treeshell config."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from treeshell import config
from treeshell.history import MAX_HISTORY_ENTRIES


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_config_gives_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("treeshell.config.CONFIG_PATH", Path(tmp) / "missing.json"):
                self.assertEqual(config.load_config(), {})
                self.assertIsNone(config.load_theme_name())
                self.assertEqual(config.load_style_name(), config.DEFAULT_STYLE)
                self.assertEqual(config.load_history_size(), MAX_HISTORY_ENTRIES)

    def test_malformed_config_is_ignored_with_warning(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("{not json", encoding="utf-8")
            with mock.patch("treeshell.config.CONFIG_PATH", config_path):
                with self.assertLogs("treeshell.config", level="WARNING"):
                    self.assertEqual(config.load_config(), {})

    def test_non_object_config_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("[1, 2]", encoding="utf-8")
            with mock.patch("treeshell.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

    def test_save_theme_preserves_other_keys(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("treeshell.config.CONFIG_PATH", config_path):
                self.assertTrue(config.save_config({"style": "native"}))
                self.assertTrue(config.save_theme_name(" ocean "))
                self.assertFalse(config.save_theme_name("   "))

                data = json.loads(config_path.read_text(encoding="utf-8"))
                self.assertEqual(data, {"style": "native", "theme": "ocean"})
                self.assertEqual(config.load_theme_name(), "ocean")
                self.assertEqual(config.load_style_name(), "native")

    def test_history_size_validation(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("treeshell.config.CONFIG_PATH", config_path):
                for value, expected in ((25, 25), (0, MAX_HISTORY_ENTRIES), (True, MAX_HISTORY_ENTRIES), ("9", MAX_HISTORY_ENTRIES)):
                    with self.subTest(value=value):
                        config_path.write_text(json.dumps({"history_size": value}), encoding="utf-8")
                        self.assertEqual(config.load_history_size(), expected)


if __name__ == "__main__":
    unittest.main()
