"""Run the symlink finder as a script."""

from symlink_finder import cli

if __name__ == "__main__":
    cli.main()
