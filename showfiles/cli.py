"""Command-line front door for showfiles.

Parses flags and the ``sort=<tokens>`` directive, merges them over the
persisted defaults, and prints the rendered listing.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .errors import ListingError, SortDirectiveError
from .listing import ListingOptions, build_listing
from .ordering import SORT_DIRECTIVE_PREFIX, SortChain, parse_sort_directive
from .terminal import terminal_width
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(name)s: %(levelname)s: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    # -h is the header flag, so help is only reachable as --help.
    parser = argparse.ArgumentParser(
        prog="s",
        description="Show files in a directory (default: the current directory).",
        epilog=(
            "Order entries with sort=<tokens>, applied left to right: "
            "d kind, n name, s size, c created, m modified, ! reverse. "
            "sort=- clears a saved sort chain."
        ),
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="Show this help message and exit.")
    parser.add_argument(
        "-a",
        "--all",
        dest="show_all",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Print all files, including dot files (--no-all overrides a saved default).",
    )
    parser.add_argument("-h", "--header", dest="show_header", action="store_true", help="Print a column header row.")
    parser.add_argument("-c", "--created", dest="show_created", action="store_true", help="Show creation time.")
    parser.add_argument("-m", "--modified", dest="show_modified", action="store_true", help="Show modification time.")
    parser.add_argument(
        "--theme",
        default=None,
        choices=available_theme_names(),
        help="Row colour theme (default: persisted theme or 'default').",
    )
    parser.add_argument(
        "--width",
        type=_positive_int,
        default=None,
        help="Row width in columns (default: terminal width, 140 when unknown).",
    )
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Store the effective -a, sort= and --theme settings as future defaults.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    parser.add_argument(
        "targets",
        nargs="*",
        metavar="TARGET",
        help="A sort=<tokens> directive and/or the directory to list.",
    )
    return parser


def split_targets(parser: argparse.ArgumentParser, targets: list[str]) -> tuple[SortChain | None, Path | None]:
    """Separate ``sort=`` directives from the directory argument.

    A later directive replaces an earlier one; more than one path is an error.
    """
    chain: SortChain | None = None
    path: Path | None = None
    for target in targets:
        if target.startswith(SORT_DIRECTIVE_PREFIX):
            try:
                chain = parse_sort_directive(target)
            except SortDirectiveError as exc:
                parser.error(str(exc))
            continue
        if path is not None:
            parser.error(f"only one directory may be listed, got {path} and {target}")
        path = Path(target)
    return chain, path


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and print the listing.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is listed.
    """
    parser = build_parser()
    args = parser.parse_intermixed_args()
    configure_logging(args.verbose)
    chain, path = split_targets(parser, args.targets)

    if path is None:
        path = default_path if default_path is not None else Path.cwd()
    if not path.exists():
        raise SystemExit(f"s: path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"s: not a directory: {path}")

    logger.debug("config path: %s", config.CONFIG_PATH)
    defaults = config.load_defaults()
    effective = config.ListingDefaults(
        show_all=args.show_all if args.show_all is not None else defaults.show_all,
        sort_chain=chain if chain is not None else defaults.sort_chain,
        theme=args.theme or defaults.theme,
    )
    if args.save_defaults:
        config.save_defaults(effective)

    width = args.width if args.width is not None else terminal_width()
    logger.debug("rendering %s at width %d", path, width)
    options = ListingOptions(
        show_all=effective.show_all,
        sort_chain=effective.sort_chain,
        show_header=args.show_header,
        show_created=args.show_created,
        show_modified=args.show_modified,
        theme=resolve_theme(effective.theme),
    )
    try:
        lines = build_listing(path, width, options)
    except ListingError as exc:
        logger.debug("listing %s failed", path, exc_info=True)
        raise SystemExit(f"s: {exc}") from exc

    sys.stdout.write("".join(f"{line}\n" for line in lines))


if __name__ == "__main__":
    main()
