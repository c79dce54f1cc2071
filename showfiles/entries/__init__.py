"""Entry model for directory listings.

This package contains the non-rendering listing primitives:
- the immutable ``Entry`` datatype and name/extension splitting
- directory enumeration into entries plus the hidden-entry filter
"""

from __future__ import annotations

from .types import Entry, EntryKind, make_entry, split_suffix
from .fs import birth_time_ns, entry_from_dir_entry, filter_hidden, is_hidden, scan_directory

__all__ = [
    "Entry",
    "EntryKind",
    "make_entry",
    "split_suffix",
    "birth_time_ns",
    "entry_from_dir_entry",
    "filter_hidden",
    "is_hidden",
    "scan_directory",
]
