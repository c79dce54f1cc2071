"""Filesystem enumeration into listing entries."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..errors import DirectoryScanError, EntryMetadataError
from .types import Entry, EntryKind, make_entry

logger = logging.getLogger(__name__)


def birth_time_ns(stat: os.stat_result) -> int | None:
    """Return creation time in nanoseconds, or ``None`` where unsupported.

    Windows reported creation time in ``st_ctime_ns`` before ``st_birthtime``
    existed there.
    """
    value = getattr(stat, "st_birthtime_ns", None)
    if value is not None:
        return int(value)
    seconds = getattr(stat, "st_birthtime", None)
    if seconds is None:
        if os.name == "nt":
            return getattr(stat, "st_ctime_ns", None)
        return None
    return int(seconds * 1_000_000_000)


def entry_from_dir_entry(child: os.DirEntry) -> Entry:
    """Build an ``Entry`` from one ``os.scandir`` item.

    Raises ``EntryMetadataError`` when the item cannot be stat'ed; callers must
    not skip such entries.
    """
    try:
        stat = child.stat(follow_symlinks=False)
        is_dir = child.is_dir(follow_symlinks=False)
    except OSError as exc:
        raise EntryMetadataError(child.name, exc) from exc

    return make_entry(
        child.name,
        EntryKind.DIRECTORY if is_dir else EntryKind.FILE,
        int(stat.st_size),
        created=birth_time_ns(stat),
        modified=int(stat.st_mtime_ns),
    )


def scan_directory(directory: Path) -> list[Entry]:
    """Return one ``Entry`` per child of ``directory`` in enumeration order."""
    entries: list[Entry] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                entries.append(entry_from_dir_entry(child))
    except OSError as exc:
        raise DirectoryScanError(directory, exc) from exc
    logger.debug("scanned %d entries in %s", len(entries), directory)
    return entries


def is_hidden(entry: Entry) -> bool:
    return entry.name.startswith(".")


def filter_hidden(entries: Iterable[Entry], show_all: bool) -> list[Entry]:
    """Drop dot-prefixed entries unless ``show_all`` is set."""
    if show_all:
        return list(entries)
    return [entry for entry in entries if not is_hidden(entry)]


__all__ = [
    "birth_time_ns",
    "entry_from_dir_entry",
    "scan_directory",
    "is_hidden",
    "filter_hidden",
]
