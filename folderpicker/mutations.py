"""Filesystem mutations requested from the picker: create, delete, archive.

Each operation is a single synchronous attempt. Failures are raised as
``FilesystemError`` whose message is ready to show in the status line.
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_ARCHIVE_DIRNAME = "Dev-Archive"


class FilesystemError(Exception):
    """A requested folder mutation did not happen."""


def describe_os_error(exc: OSError) -> str:
    """Return a short ``reason: path`` message for ``exc``."""
    reason = exc.strerror or str(exc)
    if exc.filename is None:
        return reason
    if exc.filename2 is not None:
        return f"{reason}: {exc.filename} -> {exc.filename2}"
    return f"{reason}: {exc.filename}"


def _is_invalid_folder_name(name: str) -> bool:
    if not name or name in {".", ".."} or "\x00" in name:
        return True
    if os.sep in name:
        return True
    return bool(os.altsep) and os.altsep in name


def create_folder(parent: Path, name: str) -> Path:
    """Create one directory named ``name`` inside ``parent`` and return its path."""
    if _is_invalid_folder_name(name):
        logger.warning("rejected folder name %r in %s", name, parent)
        raise FilesystemError(f"Error: invalid folder name: {name!r}")

    target = parent / name
    try:
        target.mkdir(mode=0o755)
    except OSError as exc:
        logger.warning("create %s failed: %s", target, exc)
        raise FilesystemError(f"Error: {describe_os_error(exc)}") from exc
    logger.info("created folder %s", target)
    return target


def delete_folder(path: Path) -> None:
    """Remove ``path`` and everything below it. A missing path counts as removed."""
    if not os.path.lexists(path):
        logger.info("delete %s skipped: already gone", path)
        return
    try:
        shutil.rmtree(path)
    except OSError as exc:
        logger.warning("delete %s failed: %s", path, exc)
        raise FilesystemError(f"Error: {describe_os_error(exc)}") from exc
    logger.info("deleted folder %s", path)


def archive_destination(path: Path, archive_dir: Path) -> Path:
    """Return where ``path`` lands when archived into ``archive_dir``."""
    return archive_dir / path.name


def archive_folder(path: Path, archive_dir: Path | None) -> Path:
    """Move ``path`` into ``archive_dir`` under its own base name.

    The archive directory is created on demand. The move is a plain rename, so
    it fails across filesystems and never replaces an existing destination.
    """
    if archive_dir is None:
        raise FilesystemError("Error creating archive dir: home directory is unknown")
    try:
        archive_dir.mkdir(mode=0o755, parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning("archive dir %s unavailable: %s", archive_dir, exc)
        raise FilesystemError(f"Error creating archive dir: {describe_os_error(exc)}") from exc

    destination = archive_destination(path, archive_dir)
    if os.path.lexists(destination):
        logger.warning("archive %s refused: %s exists", path, destination)
        raise FilesystemError(f"Error: already archived: {destination}")
    try:
        os.rename(path, destination)
    except OSError as exc:
        logger.warning("archive %s -> %s failed: %s", path, destination, exc)
        raise FilesystemError(f"Error: {describe_os_error(exc)}") from exc
    logger.info("archived folder %s -> %s", path, destination)
    return destination


__all__ = [
    "DEFAULT_ARCHIVE_DIRNAME",
    "FilesystemError",
    "describe_os_error",
    "create_folder",
    "delete_folder",
    "archive_destination",
    "archive_folder",
]
