"""Find the symbolic links that resolve to each of the given file paths."""

import argparse
import logging
import time
from typing import List, Optional

import coloredlogs  # type: ignore[import]

from . import defaults
from .finder import find_symlinks, find_symlinks_single_walk
from .output import format_duration, print_report, write_to_json
from .utils.file_utils import parse_skip_list
from .utils.types import FileLink, FinderConfig


def _positive_int(value: str) -> int:
    ivalue = int(value)
    if ivalue < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer ({value})")
    return ivalue


def get_parser() -> argparse.ArgumentParser:
    """Get the argument parser."""
    parser = argparse.ArgumentParser(
        description="Walk the filesystem and find every symbolic link that "
        "resolves to each PATH.",
        epilog="Notes: (1) symbolic links are never followed while walking."
        " (2) --skip-dirs is a plain prefix match: '/proc' also skips '/procfs'.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "paths",
        metavar="PATHS",
        nargs="*",
        help="file path(s) to find symlinks for",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=defaults.OUTPUT,
        help="path to the output JSON file",
    )
    parser.add_argument(
        "--skip-dirs",
        dest="skip_dirs",
        default=defaults.SKIP_DIRS,
        help="comma-separated list of directory prefixes to skip while walking;"
        " empty items are ignored, so '' skips nothing",
    )
    parser.add_argument(
        "--root",
        default=defaults.ROOT,
        help="directory to walk",
    )
    parser.add_argument(
        "--report",
        default=defaults.REPORT,
        action="store_true",
        help="print a plain-text report of the results",
    )
    parser.add_argument(
        "--workers",
        type=_positive_int,
        default=defaults.WORKERS,
        help="max number of concurrent walkers (by default, one per path)",
    )
    parser.add_argument(
        "--single-walk",
        dest="single_walk",
        default=defaults.SINGLE_WALK,
        action="store_true",
        help="walk the filesystem once for all paths, instead of once per path",
    )
    parser.add_argument(
        "--debug",
        default=defaults.DEBUG,
        action="store_true",
        help="log each walker's start and finish (at INFO)",
    )
    parser.add_argument(
        "-l",
        "--log",
        default=defaults.LOG_LEVEL,
        help="the output logging level",
    )
    return parser


def run(paths: List[str], config: FinderConfig, single_walk: bool) -> List[FileLink]:
    """Find symlinks for each path, using the chosen strategy."""
    if single_walk:
        return find_symlinks_single_walk(paths, config)
    return find_symlinks(paths, config)


def main(argv: Optional[List[str]] = None) -> None:
    """Parse args, find symlinks, and report/write the results."""
    start = time.monotonic()

    args = get_parser().parse_args(argv)
    coloredlogs.install(level=args.log.upper())
    for arg, val in vars(args).items():
        logging.debug(f"{arg}: {val}")

    if not args.paths:
        print("Please provide file paths as arguments.")
        return

    config = FinderConfig(
        root=args.root,
        skip_list=parse_skip_list(args.skip_dirs),
        debug=args.debug,
        workers=args.workers,
    )
    results = run(args.paths, config, args.single_walk)

    if args.output:
        write_to_json(results, args.output)

    if args.report:
        print_report(results)

    print(f"Runtime: {format_duration(time.monotonic() - start)}")
