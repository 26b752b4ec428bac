"""Find the symlinks that point at each of a set of target files."""

import logging
from collections import defaultdict
from concurrent.futures import Future, ThreadPoolExecutor
from time import sleep
from typing import Dict, List, Tuple

from .utils.types import FileLink, FinderConfig, LinkRecord, SkipList
from .walker import iter_symlinks, target_is_valid, walk

WalkFuture = Tuple[str, Future]  # type: ignore[type-arg]


# Aggregating --------------------------------------------------------------------------


def collect_results(futures: List[WalkFuture]) -> List[FileLink]:
    """Gather each walker's record as it finishes.

    Records are in completion order. Targets whose walker gave no record
    (`None`) are left out.
    """
    results: List[FileLink] = []
    futures = list(futures)

    while futures:
        # get next finished future
        while True:
            try:
                fin = next(f for f in futures if f[1].done())
                futures.remove(fin)
                break
            except StopIteration:  # there were no finished futures
                sleep(0.1)

        target, future = fin
        links = future.result()
        if links is None:
            logging.debug(f"No record for {target}.")
            continue
        logging.debug(f"Walker finished: {target} ({len(links)} links).")
        results.append({"file_path": target, "symlinks": links})

    return results


# Dispatching --------------------------------------------------------------------------


def find_symlinks(targets: List[str], config: FinderConfig) -> List[FileLink]:
    """Walk `config.root` once per target, concurrently.

    By default one walker runs per target (no bound on concurrency);
    `config.workers` caps the pool size. Duplicate targets are walked
    independently. Returns once every walker has finished.
    """
    if not targets:
        return []

    max_workers = config.workers if config.workers else len(targets)
    logging.debug(f"Walking {config.root} for {len(targets)} target(s)...")

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures: List[WalkFuture] = [
            (target, pool.submit(walk, target, config)) for target in targets
        ]
        return collect_results(futures)


# Single Walk --------------------------------------------------------------------------


def index_symlinks(root: str, skip_list: SkipList) -> Dict[str, LinkRecord]:
    """Walk `root` once and map each resolved path to the links pointing at it."""
    index: Dict[str, LinkRecord] = defaultdict(list)
    for link_path, resolved in iter_symlinks(root, skip_list):
        index[resolved].append(link_path)
    return index


def find_symlinks_single_walk(
    targets: List[str], config: FinderConfig
) -> List[FileLink]:
    """Same records as `find_symlinks()`, from a single shared walk.

    Records are in input order.
    """
    if config.debug:
        for target in targets:
            logging.info(f"Queuing lookup for file: {target}")

    valid = [t for t in targets if target_is_valid(t)]
    if not valid:
        return []

    index = index_symlinks(config.root, config.skip_list)
    return [{"file_path": t, "symlinks": list(index.get(t, []))} for t in valid]
