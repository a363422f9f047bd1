"""Tests for directory listing construction.

Covers the self-entry, directory-only children, exclusions, and ordering.
"""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from folderpicker.listing import Entry, list_subdirectory_names, load_listing, self_entry


class LoadListingTests(unittest.TestCase):
    def test_listing_has_self_entry_then_sorted_visible_subdirectories(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            work = Path(tmp) / "work"
            for name in ("alpha", "Beta", ".hidden", "node_modules", "vendor"):
                (work / name).mkdir(parents=True)
            (work / "notes.txt").write_text("x\n", encoding="utf-8")

            listing = load_listing(work)

        self.assertEqual([entry.display_name for entry in listing], ["[work]", "Beta", "alpha"])
        self.assertEqual(
            [entry.path for entry in listing],
            [work, work / "Beta", work / "alpha"],
        )

    def test_first_entry_path_is_the_directory_itself(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            listing = load_listing(root)

        self.assertEqual(listing[0], Entry(display_name=f"[{root.name}]", path=root))
        self.assertEqual(len(listing), 1)

    def test_unreadable_directory_degrades_to_self_entry_only(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing"
            listing = load_listing(missing)

        self.assertEqual(listing, (self_entry(missing),))

    def test_symlinked_directories_are_not_listed(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "real").mkdir()
            os.symlink(root / "real", root / "link")

            names = list_subdirectory_names(root)

        self.assertEqual(names, ["real"])

    def test_custom_ignored_names_replace_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ("build", "node_modules", "src"):
                (root / name).mkdir()

            names = list_subdirectory_names(root, ignored_names={"build"})

        self.assertEqual(names, ["node_modules", "src"])

    def test_sort_is_ordinal_not_case_folded(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ("b", "A", "a", "_x", "Z"):
                (root / name).mkdir()

            names = list_subdirectory_names(root)

        self.assertEqual(names, ["A", "Z", "_x", "a", "b"])


class SelfEntryTests(unittest.TestCase):
    def test_filesystem_root_is_shown_as_slash(self) -> None:
        self.assertEqual(self_entry(Path("/")).display_name, "[/]")

    def test_nested_directory_uses_base_name(self) -> None:
        entry = self_entry(Path("/home/u/work"))
        self.assertEqual(entry.display_name, "[work]")
        self.assertEqual(entry.path, Path("/home/u/work"))


if __name__ == "__main__":
    unittest.main()
