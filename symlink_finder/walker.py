"""Walk a filesystem tree and collect the symlinks pointing at a target."""

import logging
import os
import threading
from typing import Iterator, List, Optional, Tuple

from .utils.file_utils import matches, resolve_link, should_skip
from .utils.types import FinderConfig, LinkRecord, SkipList


def _sorted_entries(path: str) -> List[os.DirEntry]:  # type: ignore[type-arg]
    """Return the entries of the directory at `path`, sorted by name.

    An unreadable directory gives no entries.
    """
    try:
        with os.scandir(path) as scan:
            return sorted(scan, key=lambda e: e.name)
    except OSError as e:
        logging.debug(f"Skipping {path}, {e.__class__.__name__}.")
        return []


def iter_symlinks(root: str, skip_list: SkipList) -> Iterator[Tuple[str, str]]:
    """Yield `(link_path, resolved_path)` for every resolvable symlink.

    Depth-first, pre-order, lexical order within each directory. Paths
    matching `skip_list` are pruned (whole subtree for directories).
    Symlinks are never followed while descending.
    """
    if should_skip(root, skip_list):
        logging.debug(f"Skipping {root}, path is in skip list.")
        return

    stack = [iter(_sorted_entries(root))]
    while stack:
        dir_entry = next(stack[-1], None)
        if dir_entry is None:
            stack.pop()
            continue

        if should_skip(dir_entry.path, skip_list):
            logging.debug(f"Skipping {dir_entry.path}, path is in skip list.")
            continue

        try:
            if dir_entry.is_symlink():
                resolved = resolve_link(dir_entry.path)
                if resolved is not None:
                    yield dir_entry.path, resolved
            elif dir_entry.is_dir(follow_symlinks=False):
                stack.append(iter(_sorted_entries(dir_entry.path)))
        except OSError as e:
            logging.debug(f"Skipping {dir_entry.path}, {e.__class__.__name__}.")


def target_is_valid(target: str) -> bool:
    """Return `True` if `target` can be stat'd and has device/inode info."""
    try:
        info = os.stat(target)
    except OSError as e:
        logging.error(f"Error stating file: {e}")
        return False

    if not (info.st_dev or info.st_ino):
        logging.error(f"No device/inode metadata available for {target}")
        return False
    return True


def walk(target: str, config: FinderConfig) -> Optional[LinkRecord]:
    """Walk `config.root` and return every symlink that resolves to `target`.

    Return `None` if `target` itself is not valid -- the caller records
    nothing for it, not even an empty list.
    """
    if config.debug:
        logging.info(f"Starting walk for file: {target}")

    if not target_is_valid(target):
        return None

    links: LinkRecord = []
    lock = threading.Lock()

    for link_path, resolved in iter_symlinks(config.root, config.skip_list):
        if matches(resolved, target):
            with lock:
                links.append(link_path)

    if config.debug:
        logging.info(f"Finished walk for file: {target} ({len(links)} links)")
    return links
