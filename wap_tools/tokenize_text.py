#!/usr/bin/env python3
"""Tokenizer: ASCII whitespace split, then strip ASCII punctuation from each fragment.

Fragments made only of punctuation ("--", "...") are dropped, so every token
is a non-empty string. No case folding.

Usage:
  python -m wap_tools.tokenize_text --input files/war_and_peace.txt [--lines 1]
"""

from __future__ import annotations

import argparse
import re
import string
import sys

from wap_tools.corpus_io import ResourceUnavailable, read_lines
from wap_tools.console import abort, info

# C-locale ispunct() set
PUNCTUATION = string.punctuation
_STRIP_TABLE = str.maketrans("", "", PUNCTUATION)

# C-locale isspace() set; NBSP and other Unicode spaces stay inside tokens
WHITESPACE_RE = re.compile(r"[ \t\n\r\f\v]+")


def strip_punctuation(fragment: str) -> str:
    return fragment.translate(_STRIP_TABLE)


def tokenize(text: str) -> list[str]:
    tokens = []
    for fragment in WHITESPACE_RE.split(text):
        token = strip_punctuation(fragment)
        if token:
            tokens.append(token)
    return tokens


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Preview tokenization of the first lines of a text file.")
    ap.add_argument("--input", required=True, help="Path to a text file")
    ap.add_argument("--lines", type=int, default=1,
                    help="Number of leading lines to tokenize (default: 1)")
    args = ap.parse_args(argv)

    try:
        lines = read_lines(args.input)
    except ResourceUnavailable as e:
        abort(str(e))

    if not lines:
        info("File is empty. Nothing to tokenize.")
        return 0

    head = lines[:max(args.lines, 0)]
    tokens = tokenize("\n".join(head))
    info(f"First {len(head)} line(s) tokenized into {len(tokens)} token(s):")
    info(" ".join(tokens))
    return 0


if __name__ == "__main__":
    sys.exit(main())
