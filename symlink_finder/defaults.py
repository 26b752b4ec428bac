# defaults.py
"""Default values for starting the symlink finder."""

DEBUG = False
LOG_LEVEL = "INFO"
OUTPUT = ""
REPORT = False
ROOT = "/"
SINGLE_WALK = False
SKIP_DIRS = "/proc"
WORKERS = None
