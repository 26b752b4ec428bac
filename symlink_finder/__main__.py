"""Run the symlink finder with `python -m symlink_finder`."""

from .cli import main

main()
