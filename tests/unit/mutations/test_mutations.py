"""Tests for folder create, delete, and archive operations.

Each failure must surface as ``FilesystemError`` with a display-ready message.
"""

from __future__ import annotations

import errno
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from folderpicker import mutations
from folderpicker.mutations import (
    FilesystemError,
    archive_folder,
    create_folder,
    delete_folder,
    describe_os_error,
)


class CreateFolderTests(unittest.TestCase):
    def test_creates_single_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            parent = Path(tmp)

            created = create_folder(parent, "newdir")

            self.assertEqual(created, parent / "newdir")
            self.assertTrue(created.is_dir())

    def test_existing_directory_fails(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            parent = Path(tmp)
            (parent / "newdir").mkdir()

            with self.assertRaises(FilesystemError) as ctx:
                create_folder(parent, "newdir")

        self.assertTrue(str(ctx.exception).startswith("Error: "))
        self.assertIn("newdir", str(ctx.exception))

    def test_invalid_names_are_rejected_without_touching_disk(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            parent = Path(tmp)
            (parent / "a").mkdir()
            for name in ("", ".", "..", "a/b", "bad\x00name"):
                with self.subTest(name=name):
                    with self.assertRaises(FilesystemError):
                        create_folder(parent, name)
            self.assertFalse((parent / "a" / "b").exists())

    def test_missing_parent_fails(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(FilesystemError):
                create_folder(Path(tmp) / "missing", "child")


class DeleteFolderTests(unittest.TestCase):
    def test_removes_directory_recursively(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "doomed"
            (target / "nested" / "deeper").mkdir(parents=True)
            (target / "nested" / "file.txt").write_text("data\n", encoding="utf-8")

            delete_folder(target)

            self.assertFalse(target.exists())

    def test_missing_path_counts_as_deleted(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            delete_folder(Path(tmp) / "never-there")

    def test_os_error_is_wrapped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "locked"
            target.mkdir()
            denied = PermissionError(errno.EACCES, "Permission denied", str(target))
            with mock.patch("folderpicker.mutations.shutil.rmtree", side_effect=denied):
                with self.assertRaises(FilesystemError) as ctx:
                    delete_folder(target)

        self.assertEqual(str(ctx.exception), f"Error: Permission denied: {target}")
        self.assertIs(ctx.exception.__cause__, denied)


class ArchiveFolderTests(unittest.TestCase):
    def test_creates_archive_dir_and_moves_folder(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            base = Path(tmp)
            target = base / "work" / "project"
            (target / "src").mkdir(parents=True)
            archive_dir = base / "home" / "Dev-Archive"

            destination = archive_folder(target, archive_dir)

            self.assertEqual(destination, archive_dir / "project")
            self.assertTrue((destination / "src").is_dir())
            self.assertFalse(target.exists())

    def test_existing_destination_is_never_replaced(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            base = Path(tmp)
            target = base / "project"
            target.mkdir()
            archive_dir = base / "archive"
            (archive_dir / "project").mkdir(parents=True)

            with self.assertRaises(FilesystemError) as ctx:
                archive_folder(target, archive_dir)

            self.assertTrue(target.is_dir())
        self.assertIn("already archived", str(ctx.exception))

    def test_archive_dir_creation_failure_has_its_own_message(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            base = Path(tmp)
            target = base / "project"
            target.mkdir()
            blocker = base / "archive"
            blocker.write_text("not a directory\n", encoding="utf-8")

            with self.assertRaises(FilesystemError) as ctx:
                archive_folder(target, blocker)

        self.assertTrue(str(ctx.exception).startswith("Error creating archive dir: "))

    def test_unknown_archive_dir_fails(self) -> None:
        with self.assertRaises(FilesystemError) as ctx:
            archive_folder(Path("/somewhere/project"), None)

        self.assertTrue(str(ctx.exception).startswith("Error creating archive dir: "))

    def test_cross_device_rename_is_reported_not_copied(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            base = Path(tmp)
            target = base / "project"
            target.mkdir()
            archive_dir = base / "archive"
            exdev = OSError(errno.EXDEV, "Invalid cross-device link", str(target), str(archive_dir / "project"))
            with mock.patch("folderpicker.mutations.os.rename", side_effect=exdev):
                with self.assertRaises(FilesystemError) as ctx:
                    archive_folder(target, archive_dir)

            self.assertTrue(target.is_dir())
        self.assertIn("Invalid cross-device link", str(ctx.exception))


class DescribeOsErrorTests(unittest.TestCase):
    def test_formats_reason_and_paths(self) -> None:
        self.assertEqual(describe_os_error(OSError(errno.EEXIST, "File exists", "/x")), "File exists: /x")
        self.assertEqual(
            describe_os_error(OSError(errno.EXDEV, "Invalid cross-device link", "/a", "/b")),
            "Invalid cross-device link: /a -> /b",
        )

    def test_falls_back_to_plain_message(self) -> None:
        self.assertEqual(describe_os_error(OSError("boom")), "boom")

    def test_default_archive_name(self) -> None:
        self.assertEqual(mutations.DEFAULT_ARCHIVE_DIRNAME, "Dev-Archive")


if __name__ == "__main__":
    unittest.main()
