"""Test skip-list parsing, directory pruning, and symlink matching."""

import os
import pathlib
import sys

sys.path.append(".")
from symlink_finder.utils.file_utils import (  # isort:skip # noqa # pylint: disable=C0413
    matches,
    parse_skip_list,
    resolve_link,
    should_skip,
)


def test_parse_skip_list() -> None:
    """Test splitting the comma-separated skip-dirs string."""
    assert parse_skip_list("/proc") == ("/proc",)
    assert parse_skip_list("/proc,/sys,/dev") == ("/proc", "/sys", "/dev")

    # empty items are dropped
    assert parse_skip_list("") == ()
    assert parse_skip_list("/proc,,/sys,") == ("/proc", "/sys")

    # no stripping / normalizing
    assert parse_skip_list("/proc, /sys") == ("/proc", " /sys")
    assert parse_skip_list("/proc/") == ("/proc/",)


def test_should_skip() -> None:
    """Test prefix-based pruning."""
    skip_list = ("/proc", "/foo/bar")

    assert should_skip("/proc", skip_list)
    assert should_skip("/proc/1/fd", skip_list)
    assert should_skip("/foo/bar", skip_list)
    assert should_skip("/foo/bar/baz", skip_list)

    assert not should_skip("/", skip_list)
    assert not should_skip("/foo", skip_list)
    assert not should_skip("/data/proc", skip_list)
    assert not should_skip("/pro", skip_list)


def test_should_skip_is_not_segment_aware() -> None:
    """Test that a prefix also prunes siblings sharing the prefix."""
    assert should_skip("/procfs", ("/proc",))
    assert should_skip("/proc2/foo", ("/proc",))
    assert should_skip("/foo/barbaz", ("/foo/bar",))
    assert should_skip("/proc2", ("/pro",))


def test_should_skip_empty() -> None:
    """Test that an empty skip list prunes nothing."""
    assert not should_skip("/", ())
    assert not should_skip("/proc", ())


def test_matches() -> None:
    """Test exact string matching of resolved paths."""
    assert matches("/data/file.txt", "/data/file.txt")

    assert not matches(None, "/data/file.txt")
    assert not matches("/data/file.txt", "/data/file.txt/")
    assert not matches("/data/file.txt", "data/file.txt")
    assert not matches("/data/file.txt", "/data//file.txt")
    assert not matches("/data/file.txt2", "/data/file.txt")


def test_resolve_link(tmp_path: pathlib.Path) -> None:
    """Test full resolution of symlinks, including chains."""
    root = tmp_path.resolve()
    target = root / "file.txt"
    target.write_text("foo")

    os.symlink(target, root / "a")
    os.symlink(root / "a", root / "b")  # chain: b -> a -> file.txt
    os.symlink("file.txt", root / "rel")  # relative link

    assert resolve_link(str(root / "a")) == str(target)
    assert resolve_link(str(root / "b")) == str(target)
    assert resolve_link(str(root / "rel")) == str(target)


def test_resolve_link_errors(tmp_path: pathlib.Path) -> None:
    """Test that broken links and loops resolve to `None`."""
    root = tmp_path.resolve()

    os.symlink(root / "nonexistent", root / "broken")
    os.symlink(root / "loop2", root / "loop1")
    os.symlink(root / "loop1", root / "loop2")

    assert resolve_link(str(root / "broken")) is None
    assert resolve_link(str(root / "loop1")) is None
    assert resolve_link(str(root / "loop2")) is None
