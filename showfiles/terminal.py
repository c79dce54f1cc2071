"""Terminal width detection."""

from __future__ import annotations

import os
import shutil
from collections.abc import Callable

FALLBACK_WIDTH = 140
FALLBACK_HEIGHT = 24


def terminal_width(get_terminal_size: Callable[[tuple[int, int]], os.terminal_size] | None = None) -> int:
    """Return the terminal column count, or ``FALLBACK_WIDTH`` when unknown.

    ``shutil.get_terminal_size`` reports ``0`` columns on some pseudo
    terminals; that is treated as unknown too.
    """
    if get_terminal_size is None:
        get_terminal_size = shutil.get_terminal_size
    columns = get_terminal_size((FALLBACK_WIDTH, FALLBACK_HEIGHT)).columns
    return columns if columns > 0 else FALLBACK_WIDTH
