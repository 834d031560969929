#!/usr/bin/env python3
"""Chapter Splitter: partition a token stream at each CHAPTER marker.

Rules:
  - The marker stays in the output as the first token of the chapter it opens.
  - A marker closes the current chapter only when that chapter holds at least
    one non-marker token. A marker at the very start, or one that directly
    follows another marker, joins the chapter being built.
  - Text before the first marker is its own chapter.
  - No marker at all -> one chapter holding every token.
  - No chapter is ever empty; every token lands in exactly one chapter.

Usage:
  python -m wap_tools.split_chapters \\
    --corpus files/war_and_peace.txt \\
    --out-jsonl output/chapters.jsonl \\
    [--opening 8]
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Iterable

from wap_tools.corpus_io import ResourceUnavailable, read_text, write_lines
from wap_tools.console import abort, info
from wap_tools.tokenize_text import tokenize

CHAPTER_MARKER = "CHAPTER"


def split_chapters(tokens: Iterable[str]) -> list[list[str]]:
    chapters: list[list[str]] = []
    current: list[str] = []
    has_content = False  # current holds a non-marker token

    for token in tokens:
        if token == CHAPTER_MARKER:
            if has_content:
                chapters.append(current)
                current = []
                has_content = False
        else:
            has_content = True
        current.append(token)

    if current:
        chapters.append(current)
    return chapters


def chapter_to_jsonl_record(index: int, chapter: list[str], opening: int = 8) -> dict:
    return {
        "record_type": "chapter",
        "chapter_index": index,
        "token_count": len(chapter),
        "opening": chapter[:opening],
    }


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Split a corpus into chapters at each CHAPTER marker.")
    ap.add_argument("--corpus", required=True, help="Path to corpus text file")
    ap.add_argument("--out-jsonl", required=True, help="Output JSONL file path (one record per chapter)")
    ap.add_argument("--opening", type=int, default=8,
                    help="Number of leading tokens to keep per record (default: 8)")
    args = ap.parse_args(argv)

    try:
        text = read_text(args.corpus)
    except ResourceUnavailable as e:
        abort(str(e))

    tokens = tokenize(text)
    chapters = split_chapters(tokens)

    write_lines(args.out_jsonl, [
        json.dumps(chapter_to_jsonl_record(i, ch, args.opening), ensure_ascii=False)
        for i, ch in enumerate(chapters, start=1)
    ])

    info(f"Tokens: {len(tokens)}")
    info(f"Chapters: {len(chapters)}")
    info(f"Wrote: {args.out_jsonl}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
