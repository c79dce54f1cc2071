"""Tests for persisted listing defaults.

Validates round-tripping through the JSON config file and the fallback to
built-in defaults when stored values are malformed.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from showfiles import config
from showfiles.ordering import SortCriterion


class ListingDefaultsConfigTests(unittest.TestCase):
    def test_missing_config_yields_builtin_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("showfiles.config.CONFIG_PATH", Path(tmp) / "missing.json"):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_defaults(), config.ListingDefaults())

    def test_defaults_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            expected = config.ListingDefaults(
                show_all=True,
                sort_chain=(SortCriterion.BY_SIZE, SortCriterion.REVERSE),
                theme="ocean",
            )
            with mock.patch("showfiles.config.CONFIG_PATH", config_path):
                config.save_defaults(expected)

                self.assertEqual(config.load_config(), {"show_all": True, "sort": "s!", "theme": "ocean"})
                self.assertEqual(config.load_defaults(), expected)

    def test_save_defaults_keeps_unrelated_keys(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("showfiles.config.CONFIG_PATH", Path(tmp) / "config.json"):
                config.save_config({"other": 1})
                config.save_defaults(config.ListingDefaults())

                saved = config.load_config()
        self.assertEqual(saved.get("other"), 1)
        self.assertEqual(saved.get("sort"), "")

    def test_malformed_json_falls_back(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("{not json", encoding="utf-8")
            with mock.patch("showfiles.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_defaults(), config.ListingDefaults())

    def test_non_object_json_falls_back(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("[1, 2]\n", encoding="utf-8")
            with mock.patch("showfiles.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

    def test_invalid_values_are_sanitized(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("showfiles.config.CONFIG_PATH", Path(tmp) / "config.json"):
                config.save_config({"show_all": "yes", "sort": "zz", "theme": "neon"})

                self.assertFalse(config.load_show_all())
                self.assertEqual(config.load_sort_chain(), ())
                self.assertEqual(config.load_theme_name(), "default")

    def test_theme_name_is_normalized(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("showfiles.config.CONFIG_PATH", Path(tmp) / "config.json"):
                config.save_config({"theme": " Ocean "})
                self.assertEqual(config.load_theme_name(), "ocean")


if __name__ == "__main__":
    unittest.main()
