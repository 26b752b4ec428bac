"""Path utilities: directory pruning and symlink matching."""

import logging
import os
from typing import Optional

from .types import SkipList


def parse_skip_list(skip_dirs: str) -> SkipList:
    """Split a comma-separated string into directory prefixes.

    Empty items are dropped (an empty prefix would match every path).
    """
    return tuple(d for d in skip_dirs.split(",") if d)


def should_skip(path: str, skip_list: SkipList) -> bool:
    """Return `True` if `path` starts with any prefix in `skip_list`.

    NOTE: this is a plain string-prefix test, not path-segment aware,
    so "/proc" also matches "/procfs".
    """
    for prefix in skip_list:
        if path.startswith(prefix):
            return True
    return False


def resolve_link(path: str) -> Optional[str]:
    """Return the fully-resolved absolute path of `path`, or `None`.

    Broken links, loops, and unreadable components all give `None`.
    """
    try:
        return os.path.realpath(path, strict=True)
    except OSError as e:
        logging.debug(f"Cannot resolve {path}, {e.__class__.__name__}.")
        return None


def matches(resolved: Optional[str], target: str) -> bool:
    """Return whether a resolved link path is exactly `target`."""
    return resolved is not None and resolved == target
