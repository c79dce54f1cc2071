"""Listing pipeline: scan, filter, order, render."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .entries import Entry, filter_hidden, scan_directory
from .layout import render_listing
from .ordering import SortChain, order_entries
from .ui_theme import DEFAULT_THEME, RowTheme

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListingOptions:
    """Everything that shapes one listing besides the directory and width."""

    show_all: bool = False
    sort_chain: SortChain = ()
    show_header: bool = False
    show_created: bool = False
    show_modified: bool = False
    theme: RowTheme = DEFAULT_THEME


def collect_entries(directory: Path, show_all: bool, sort_chain: SortChain = ()) -> list[Entry]:
    """Return the visible entries of ``directory`` in final display order."""
    scanned = scan_directory(directory)
    visible = filter_hidden(scanned, show_all)
    if len(visible) != len(scanned):
        logger.debug("hid %d dot entries", len(scanned) - len(visible))
    return order_entries(visible, sort_chain)


def build_listing(directory: Path, terminal_width: int, options: ListingOptions = ListingOptions()) -> list[str]:
    """Render the listing for ``directory`` as coloured lines.

    Every line is produced before any is returned, so a failure part way
    through leaves nothing half-printed.
    """
    entries = collect_entries(directory, options.show_all, options.sort_chain)
    return render_listing(
        entries,
        terminal_width,
        options.theme,
        show_header=options.show_header,
        show_created=options.show_created,
        show_modified=options.show_modified,
    )


__all__ = [
    "ListingOptions",
    "collect_entries",
    "build_listing",
]
