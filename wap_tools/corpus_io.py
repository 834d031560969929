#!/usr/bin/env python3
"""Plain-text file access shared by every stage.

All inputs (corpus, term lists, expected report) are local UTF-8 text files
read in full. An input that cannot be opened raises ResourceUnavailable with
the offending path; callers decide whether that is fatal.
"""

from __future__ import annotations

import hashlib
import os


class ResourceUnavailable(Exception):
    """An input file could not be opened."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        msg = f"Could not open file: {path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


def read_lines(path: str) -> list[str]:
    """Read a text file and return its lines without terminators.

    A trailing newline does not produce an empty last line. A UTF-8 BOM is
    dropped and undecodable bytes are replaced.
    """
    try:
        with open(path, encoding="utf-8-sig", errors="replace") as f:
            text = f.read()
    except OSError as e:
        raise ResourceUnavailable(str(path), e.strerror or str(e)) from e

    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def read_text(path: str) -> str:
    """Read a text file as one blob, line boundaries kept as newlines."""
    return "\n".join(read_lines(path))


def write_lines(path: str, lines: list[str]) -> None:
    """Write lines with a trailing LF each, creating parent directories."""
    os.makedirs(os.path.dirname(os.path.abspath(path)) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        for line in lines:
            f.write(line + "\n")


def sha256_file(path: str) -> str:
    h = hashlib.sha256()
    try:
        with open(path, "rb") as f:
            for chunk in iter(lambda: f.read(1 << 20), b""):
                h.update(chunk)
    except OSError as e:
        raise ResourceUnavailable(str(path), e.strerror or str(e)) from e
    return h.hexdigest()
