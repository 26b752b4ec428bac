"""Type hints."""

from typing import List, NamedTuple, Optional, Tuple, TypedDict

SkipList = Tuple[str, ...]
LinkRecord = List[str]


class FileLink(TypedDict):
    """A target and the symlinks that resolve to it."""

    file_path: str
    symlinks: LinkRecord


class FinderConfig(NamedTuple):
    """Read-only settings shared by the dispatcher and every walker."""

    root: str = "/"
    skip_list: SkipList = ("/proc",)
    debug: bool = False
    workers: Optional[int] = None  # None: one worker per target
