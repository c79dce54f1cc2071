"""Tests for entry construction and name/extension splitting."""

from __future__ import annotations

import unittest

from showfiles.entries import Entry, EntryKind, make_entry, split_suffix


class SplitSuffixTests(unittest.TestCase):
    def test_splits_at_last_dot_and_rejoins_to_raw_name(self) -> None:
        for raw in ("report.txt", "archive.tar.gz", "a.b", "x..y", ".config.json", "Makefile.in"):
            with self.subTest(raw=raw):
                name, extension = split_suffix(raw)
                self.assertIsNotNone(extension)
                self.assertNotIn(".", extension)
                self.assertEqual(f"{name}.{extension}", raw)

    def test_archive_keeps_inner_dot_in_name(self) -> None:
        self.assertEqual(split_suffix("archive.tar.gz"), ("archive.tar", "gz"))

    def test_names_without_qualifying_dot_have_no_extension(self) -> None:
        for raw in ("README", ".bashrc", ".config", "notes."):
            with self.subTest(raw=raw):
                self.assertEqual(split_suffix(raw), (raw, None))


class MakeEntryTests(unittest.TestCase):
    def test_directory_keeps_full_name_and_no_extension(self) -> None:
        entry = make_entry("site.packages", EntryKind.DIRECTORY, 4096)

        self.assertEqual(entry.name, "site.packages")
        self.assertIsNone(entry.extension)
        self.assertTrue(entry.is_dir)
        self.assertEqual(entry.suffix_len, 0)

    def test_file_is_split_and_reports_full_name(self) -> None:
        entry = make_entry("main.rs", EntryKind.FILE, 120, created=5, modified=7)

        self.assertEqual(entry, Entry(name="main", extension="rs", size=120, kind=EntryKind.FILE, created=5, modified=7))
        self.assertEqual(entry.full_name, "main.rs")
        self.assertEqual(entry.suffix_len, 2)
        self.assertFalse(entry.is_dir)

    def test_hidden_file_without_second_dot_has_no_extension(self) -> None:
        entry = make_entry(".gitignore", EntryKind.FILE, 10)

        self.assertEqual(entry.name, ".gitignore")
        self.assertIsNone(entry.extension)
        self.assertEqual(entry.full_name, ".gitignore")

    def test_entries_are_immutable(self) -> None:
        entry = make_entry("a.txt", EntryKind.FILE, 1)

        with self.assertRaises(AttributeError):
            entry.size = 2  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
