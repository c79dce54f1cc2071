"""Entry ordering: directory-first baseline plus user sort chains.

A sort chain is a sequence of independent stable sort passes applied in the
order written. Each pass reorders the whole list by its own key, and entries
that tie keep the order left by the previous pass, so the last criterion in a
chain dominates the final order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from enum import Enum

from .entries import Entry
from .errors import SortDirectiveError, TimestampUnavailableError

logger = logging.getLogger(__name__)

SORT_DIRECTIVE_PREFIX = "sort="
CLEAR_SORT_TOKEN = "-"


class SortCriterion(Enum):
    """One step of a sort chain, keyed by its directive token."""

    BY_KIND = "d"
    BY_NAME = "n"
    BY_SIZE = "s"
    BY_CREATED = "c"
    BY_MODIFIED = "m"
    REVERSE = "!"

    @property
    def token(self) -> str:
        return self.value


SortChain = tuple[SortCriterion, ...]

_TOKENS = {criterion.token: criterion for criterion in SortCriterion}


def parse_sort_tokens(tokens: str) -> SortChain:
    """Parse directive tokens such as ``"dn!"`` into a sort chain."""
    if not tokens:
        raise SortDirectiveError("sort directive needs at least one of: d n s c m !")
    chain: list[SortCriterion] = []
    for token in tokens:
        criterion = _TOKENS.get(token)
        if criterion is None:
            raise SortDirectiveError(f"unknown sort token {token!r} (expected one of: d n s c m !)")
        chain.append(criterion)
    return tuple(chain)


def parse_sort_directive(directive: str) -> SortChain:
    """Parse a full ``sort=<tokens>`` directive.

    ``sort=-`` yields the empty chain, leaving the default ordering alone.
    """
    if not directive.startswith(SORT_DIRECTIVE_PREFIX):
        raise SortDirectiveError(f"expected {SORT_DIRECTIVE_PREFIX}<tokens>, got {directive!r}")
    tokens = directive[len(SORT_DIRECTIVE_PREFIX) :]
    if tokens == CLEAR_SORT_TOKEN:
        return ()
    return parse_sort_tokens(tokens)


def format_sort_chain(chain: Sequence[SortCriterion]) -> str:
    return "".join(criterion.token for criterion in chain)


def default_order(entries: Iterable[Entry]) -> list[Entry]:
    """Sort directories before files, then by case-insensitive name."""
    return sorted(entries, key=lambda entry: (not entry.is_dir, entry.name.lower()))


def _timestamp_key(field: str) -> Callable[[Entry], int]:
    def key(entry: Entry) -> int:
        value = getattr(entry, field)
        if value is None:
            raise TimestampUnavailableError(field, entry.full_name)
        return value

    return key


_SORT_KEYS: dict[SortCriterion, Callable[[Entry], object]] = {
    SortCriterion.BY_KIND: lambda entry: entry.is_dir,
    SortCriterion.BY_NAME: lambda entry: entry.name.lower(),
    SortCriterion.BY_SIZE: lambda entry: entry.size,
    SortCriterion.BY_CREATED: _timestamp_key("created"),
    SortCriterion.BY_MODIFIED: _timestamp_key("modified"),
}


def apply_sort_chain(chain: Sequence[SortCriterion], entries: Iterable[Entry]) -> list[Entry]:
    """Apply ``chain`` to ``entries`` as successive stable passes.

    ``BY_KIND`` keys on ``is_dir`` directly, so it groups files before
    directories. ``REVERSE`` flips everything ordered so far. Timestamp
    criteria raise ``TimestampUnavailableError`` if any entry lacks the value.
    """
    ordered = list(entries)
    for criterion in chain:
        if criterion is SortCriterion.REVERSE:
            ordered.reverse()
            continue
        ordered.sort(key=_SORT_KEYS[criterion])
    return ordered


def order_entries(entries: Iterable[Entry], chain: Sequence[SortCriterion] = ()) -> list[Entry]:
    """Apply the default ordering, then refine it with ``chain``."""
    ordered = default_order(entries)
    if chain:
        logger.debug("applying sort chain %r to %d entries", format_sort_chain(chain), len(ordered))
    return apply_sort_chain(chain, ordered)


__all__ = [
    "SORT_DIRECTIVE_PREFIX",
    "CLEAR_SORT_TOKEN",
    "SortCriterion",
    "SortChain",
    "parse_sort_tokens",
    "parse_sort_directive",
    "format_sort_chain",
    "default_order",
    "apply_sort_chain",
    "order_entries",
]
