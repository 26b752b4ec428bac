"""Write out the symlink finder's results."""

import json
import logging
from typing import List

from .utils.types import FileLink


def write_to_json(results: List[FileLink], filename: str) -> bool:
    """Write `results` as pretty-printed JSON.

    Return `False` if the file could not be written; the error is logged,
    not raised.
    """
    try:
        with open(filename, "w") as f:
            f.write(json.dumps(results, indent=4))
    except OSError as e:
        logging.error(f"Error writing JSON to {filename}: {e}")
        return False

    logging.info(f"Wrote {len(results)} record(s) to {filename}")
    return True


def _print_line(line: str) -> None:
    try:
        print(line)
    except UnicodeEncodeError:
        logging.info(f"Invalid file name, not printed: {line!r}")


def print_report(results: List[FileLink]) -> None:
    """Print each target, followed by a `link: <path>` line per symlink.

    Lines that can't be encoded for stdout (eg: non-UTF-8 filenames) are
    logged instead of printed.
    """
    for file_link in results:
        _print_line(f"{file_link['file_path']}:")
        for symlink in file_link["symlinks"]:
            _print_line(f"link: {symlink}")
        print()


def format_duration(seconds: float) -> str:
    """Format a duration, truncating to the largest sensible unit.

    Examples: "250ms", "42s", "3m 5s", "1h 2m 3s".
    """
    if seconds < 1:
        return f"{int(seconds * 1000)}ms"

    total = int(seconds)
    hours, rem = divmod(total, 3600)
    minutes, secs = divmod(rem, 60)
    if total < 60:
        return f"{secs}s"
    if total < 3600:
        return f"{minutes}m {secs}s"
    return f"{hours}h {minutes}m {secs}s"
