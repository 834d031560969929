"""Operator-facing messages for the CLI tools.

info()  -> stdout (report content only)
warn()  -> stderr, always
abort() -> stderr, then exit 1
log()   -> timestamped progress; stderr when verbose, always to the log file
"""

from __future__ import annotations

import os
import sys
from datetime import datetime

LOG_FILE: str | None = None
VERBOSE = False


def configure(verbose: bool = False, log_file: str | None = None) -> None:
    """Set verbosity and the log file. Raises OSError if the log file can't be opened.

    On failure the previous log file is dropped, so abort() still works.
    """
    global LOG_FILE, VERBOSE
    VERBOSE = verbose
    LOG_FILE = None
    if log_file:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)) or ".", exist_ok=True)
        open(log_file, "a", encoding="utf-8").close()
    LOG_FILE = log_file


def _append_to_log_file(line: str) -> None:
    if LOG_FILE:
        with open(LOG_FILE, "a", encoding="utf-8") as f:
            f.write(line + "\n")


def log(msg: str, level: str = "INFO") -> None:
    timestamp = datetime.now().strftime("%H:%M:%S")
    line = f"[{timestamp}] [{level}] {msg}"
    if VERBOSE:
        print(line, file=sys.stderr, flush=True)
    _append_to_log_file(line)


def info(msg: str) -> None:
    """Print info to stdout."""
    print(msg)


def warn(msg: str) -> None:
    """Print warning to stderr."""
    print(f"WARNING: {msg}", file=sys.stderr)
    _append_to_log_file(f"[{datetime.now().strftime('%H:%M:%S')}] [WARN] {msg}")


def abort(msg: str) -> None:
    """Print error and exit."""
    print(f"ERROR: {msg}", file=sys.stderr)
    _append_to_log_file(f"[{datetime.now().strftime('%H:%M:%S')}] [ERROR] {msg}")
    sys.exit(1)
