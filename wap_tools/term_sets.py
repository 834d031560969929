"""Term Set Loader.

A term list may hold one term per line or several whitespace-separated terms
per line; both read the same because lines are joined with newlines before
tokenizing. Terms go through the same punctuation stripping as the corpus so
that "cease-fire" in a list matches "ceasefire," in the text.
"""

from __future__ import annotations

from typing import Iterable

from wap_tools.corpus_io import read_lines
from wap_tools.tokenize_text import tokenize


def terms_from_lines(lines: Iterable[str]) -> frozenset[str]:
    return frozenset(tokenize("\n".join(lines)))


def load_terms(path: str) -> frozenset[str]:
    """Load a term list file into a frozenset. Raises ResourceUnavailable."""
    return terms_from_lines(read_lines(path))


def shared_terms(a: frozenset[str], b: frozenset[str]) -> list[str]:
    """Terms present in both sets, sorted."""
    return sorted(a & b)
