"""Fixed-width row layout for directory listings.

Each entry renders as::

    <name padded> |<extension padded>|<size right-aligned>[|<time>...]

padded with spaces to the terminal width (never truncated) and wrapped in a
background colour chosen by entry kind and the row's rendered position.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from .ansi import set_background
from .entries import Entry
from .ui_theme import DEFAULT_THEME, RowTheme

SIZE_FIELD_WIDTH = 6
TIME_FIELD_WIDTH = 16
TIME_FORMAT = "%Y-%m-%d %H:%M"
MISSING_TIME = "-"

KIB = 1024
MIB = 1024 * 1024
GIB = 1024 * 1024 * 1024

HEADER_NAME = "Name"
HEADER_EXTENSION = "Ext"
HEADER_SIZE = "Size"
HEADER_CREATED = "Created"
HEADER_MODIFIED = "Modified"


@dataclass(frozen=True)
class ColumnWidths:
    """Measured column widths shared by every row of one listing."""

    name: int
    suffix: int
    size: int = SIZE_FIELD_WIDTH


def measure_columns(entries: Sequence[Entry], *, fit_header: bool = False) -> ColumnWidths:
    """Return the widest name and extension over ``entries``.

    With ``fit_header`` the widths also fit the header labels.
    """
    name_width = max((len(entry.name) for entry in entries), default=0)
    suffix_width = max((entry.suffix_len for entry in entries), default=0)
    if fit_header:
        name_width = max(name_width, len(HEADER_NAME))
        suffix_width = max(suffix_width, len(HEADER_EXTENSION))
    return ColumnWidths(name=name_width, suffix=suffix_width)


def readable_size(size: int, width: int = SIZE_FIELD_WIDTH) -> str:
    """Format a byte count as ``512B``, ``2KB``, ``1.50MB`` or ``1.00GB``.

    KB values use integer division; MB and GB keep two decimals. The result
    is left-padded to ``width`` and never truncated.
    """
    if size >= GIB:
        text = f"{size / GIB:.2f}GB"
    elif size >= MIB:
        text = f"{size / MIB:.2f}MB"
    elif size >= KIB:
        text = f"{size // KIB}KB"
    else:
        text = f"{size}B"
    return text.rjust(width)


def format_timestamp(timestamp_ns: int | None) -> str:
    """Format a nanosecond timestamp as local time, or ``-`` when missing."""
    if timestamp_ns is None:
        return MISSING_TIME.rjust(TIME_FIELD_WIDTH)
    moment = datetime.fromtimestamp(timestamp_ns / 1_000_000_000)
    return moment.strftime(TIME_FORMAT).ljust(TIME_FIELD_WIDTH)


def pad_to_width(text: str, width: int) -> str:
    return text + " " * max(0, width - len(text))


def format_row_text(
    entry: Entry,
    widths: ColumnWidths,
    *,
    show_created: bool = False,
    show_modified: bool = False,
) -> str:
    """Return the uncoloured, unpadded text of one entry row."""
    parts = [
        entry.name.ljust(widths.name),
        " |",
        (entry.extension or "").ljust(widths.suffix),
        "|",
        readable_size(entry.size, widths.size),
    ]
    if show_created:
        parts.extend(("|", format_timestamp(entry.created)))
    if show_modified:
        parts.extend(("|", format_timestamp(entry.modified)))
    return "".join(parts)


def format_header_text(
    widths: ColumnWidths,
    *,
    show_created: bool = False,
    show_modified: bool = False,
) -> str:
    parts = [
        HEADER_NAME.ljust(widths.name),
        " |",
        HEADER_EXTENSION.ljust(widths.suffix),
        "|",
        HEADER_SIZE.rjust(widths.size),
    ]
    if show_created:
        parts.extend(("|", HEADER_CREATED.ljust(TIME_FIELD_WIDTH)))
    if show_modified:
        parts.extend(("|", HEADER_MODIFIED.ljust(TIME_FIELD_WIDTH)))
    return "".join(parts)


def render_row(
    entry: Entry,
    widths: ColumnWidths,
    row_index: int,
    terminal_width: int,
    theme: RowTheme = DEFAULT_THEME,
    *,
    show_created: bool = False,
    show_modified: bool = False,
) -> str:
    """Render one padded, background-coloured entry row.

    ``row_index`` is the rendered position; index 0 is an even row.
    """
    text = format_row_text(entry, widths, show_created=show_created, show_modified=show_modified)
    color = theme.background_for(entry.is_dir, row_index % 2 == 0)
    return set_background(pad_to_width(text, terminal_width), color)


def render_header(
    widths: ColumnWidths,
    terminal_width: int,
    theme: RowTheme = DEFAULT_THEME,
    *,
    show_created: bool = False,
    show_modified: bool = False,
) -> str:
    text = format_header_text(widths, show_created=show_created, show_modified=show_modified)
    return set_background(pad_to_width(text, terminal_width), theme.header)


def render_listing(
    entries: Sequence[Entry],
    terminal_width: int,
    theme: RowTheme = DEFAULT_THEME,
    *,
    show_header: bool = False,
    show_created: bool = False,
    show_modified: bool = False,
) -> list[str]:
    """Render ``entries`` in their given order, one line each.

    Row parity follows the position in ``entries``; the optional header line
    does not count as a row.
    """
    widths = measure_columns(entries, fit_header=show_header)
    lines: list[str] = []
    if show_header:
        lines.append(
            render_header(
                widths,
                terminal_width,
                theme,
                show_created=show_created,
                show_modified=show_modified,
            )
        )
    for row_index, entry in enumerate(entries):
        lines.append(
            render_row(
                entry,
                widths,
                row_index,
                terminal_width,
                theme,
                show_created=show_created,
                show_modified=show_modified,
            )
        )
    return lines


__all__ = [
    "SIZE_FIELD_WIDTH",
    "TIME_FIELD_WIDTH",
    "ColumnWidths",
    "measure_columns",
    "readable_size",
    "format_timestamp",
    "pad_to_width",
    "format_row_text",
    "format_header_text",
    "render_row",
    "render_header",
    "render_listing",
]
