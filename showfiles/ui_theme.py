"""Row background palettes.

Each theme is a 2x2 table of 256-colour background codes keyed by entry kind
and row parity, plus a code for the optional header row.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RowTheme:
    """256-colour background codes used by the layout engine."""

    name: str
    dir_even: int
    dir_odd: int
    file_even: int
    file_odd: int
    header: int

    def background_for(self, is_dir: bool, is_even: bool) -> int:
        if is_dir:
            return self.dir_even if is_even else self.dir_odd
        return self.file_even if is_even else self.file_odd


DEFAULT_THEME = RowTheme(
    name="default",
    dir_even=244,
    dir_odd=243,
    file_even=140,
    file_odd=146,
    header=238,
)

OCEAN_THEME = RowTheme(
    name="ocean",
    dir_even=24,
    dir_odd=23,
    file_even=31,
    file_odd=67,
    header=17,
)

_THEMES: dict[str, RowTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None) -> RowTheme:
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "RowTheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
