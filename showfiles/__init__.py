"""Public package surface for showfiles.

Exports ``main`` for programmatic CLI invocation.
The listing engine lives in ``showfiles.ordering`` and ``showfiles.layout``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
