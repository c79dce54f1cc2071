"""Domain datatypes for one listed filesystem item."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EntryKind(Enum):
    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class Entry:
    """One listed item with its name split from the extension.

    ``created`` and ``modified`` are nanosecond timestamps; ``None`` means the
    platform cannot report that value.
    """

    name: str
    extension: str | None
    size: int
    kind: EntryKind
    created: int | None = None
    modified: int | None = None

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def full_name(self) -> str:
        if self.extension is None:
            return self.name
        return f"{self.name}.{self.extension}"

    @property
    def suffix_len(self) -> int:
        return len(self.extension) if self.extension is not None else 0


def split_suffix(raw_name: str) -> tuple[str, str | None]:
    """Split ``raw_name`` at its last dot into ``(name, extension)``.

    A dot in the first position does not start an extension, so ``.bashrc``
    stays whole. A trailing dot would leave an empty extension and is kept as
    part of the name.
    """
    pos = raw_name.rfind(".")
    if pos <= 0 or pos == len(raw_name) - 1:
        return raw_name, None
    return raw_name[:pos], raw_name[pos + 1 :]


def make_entry(
    raw_name: str,
    kind: EntryKind,
    size: int,
    created: int | None = None,
    modified: int | None = None,
) -> Entry:
    """Build an ``Entry``; directories keep their full name and no extension."""
    if kind is EntryKind.DIRECTORY:
        name, extension = raw_name, None
    else:
        name, extension = split_suffix(raw_name)
    return Entry(
        name=name,
        extension=extension,
        size=max(0, int(size)),
        kind=kind,
        created=created,
        modified=modified,
    )


__all__ = [
    "EntryKind",
    "Entry",
    "split_suffix",
    "make_entry",
]
