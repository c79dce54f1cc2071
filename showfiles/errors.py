"""Exception types raised while building a listing.

Every ``ListingError`` is fatal for the whole invocation: the CLI reports it
and exits without printing any partial listing.
"""

from __future__ import annotations

from pathlib import Path


class ListingError(Exception):
    """Base class for failures that abort a listing."""


class DirectoryScanError(ListingError):
    """The target directory could not be enumerated."""

    def __init__(self, directory: Path, cause: OSError) -> None:
        super().__init__(f"cannot read directory {directory}: {cause.strerror or cause}")
        self.directory = directory
        self.cause = cause


class EntryMetadataError(ListingError):
    """Metadata for one directory entry could not be retrieved."""

    def __init__(self, name: str, cause: OSError) -> None:
        super().__init__(f"failed to retrieve metadata for {name!r}: {cause.strerror or cause}")
        self.name = name
        self.cause = cause


class TimestampUnavailableError(ListingError):
    """A time-based sort was requested but an entry has no such timestamp."""

    def __init__(self, field: str, name: str) -> None:
        super().__init__(f"{field} time is not available on this platform (entry {name!r})")
        self.field = field
        self.name = name


class SortDirectiveError(ValueError):
    """A ``sort=`` directive could not be parsed."""


__all__ = [
    "ListingError",
    "DirectoryScanError",
    "EntryMetadataError",
    "TimestampUnavailableError",
    "SortDirectiveError",
]
