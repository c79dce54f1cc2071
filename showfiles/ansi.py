"""ANSI escape helpers for row backgrounds."""

from __future__ import annotations

import re

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
RESET = "\x1b[0m"


def set_background(text: str, color: int) -> str:
    """Wrap ``text`` in a 256-colour background, reset at the end."""
    return f"\x1b[48;5;{color}m{text}{RESET}"


def strip_ansi(text: str) -> str:
    """Remove escape sequences, leaving only printable text."""
    return ANSI_ESCAPE_RE.sub("", text)
