"""Density Scorer and Classifier.

density = (chapter tokens found in the term set) / (chapter tokens)
Repeated tokens count every time they occur. An empty chapter scores 0.0.

A chapter is war-related only when its war density is strictly greater than
its peace density; ties (including 0.0 vs 0.0) are peace-related.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

WAR = "war"
PEACE = "peace"
LABELS = (WAR, PEACE)


@dataclass(frozen=True)
class ChapterScore:
    """Scores for one chapter."""
    chapter_index: int            # 1-based position in the corpus
    token_count: int
    war_matches: int
    peace_matches: int
    war_density: float
    peace_density: float
    label: str                    # WAR or PEACE


def count_matches(chapter: Sequence[str], terms: frozenset[str]) -> int:
    return sum(1 for token in chapter if token in terms)


def density(chapter: Sequence[str], terms: frozenset[str]) -> float:
    if not chapter:
        return 0.0
    return count_matches(chapter, terms) / len(chapter)


def classify(war_density: float, peace_density: float) -> str:
    return WAR if war_density > peace_density else PEACE


def score_chapter(index: int, chapter: Sequence[str],
                  war_terms: frozenset[str], peace_terms: frozenset[str]) -> ChapterScore:
    war_density = density(chapter, war_terms)
    peace_density = density(chapter, peace_terms)
    return ChapterScore(
        chapter_index=index,
        token_count=len(chapter),
        war_matches=count_matches(chapter, war_terms),
        peace_matches=count_matches(chapter, peace_terms),
        war_density=war_density,
        peace_density=peace_density,
        label=classify(war_density, peace_density),
    )


def score_chapters(chapters: Sequence[Sequence[str]],
                   war_terms: frozenset[str], peace_terms: frozenset[str]) -> list[ChapterScore]:
    return [
        score_chapter(i, chapter, war_terms, peace_terms)
        for i, chapter in enumerate(chapters, start=1)
    ]


def format_report_line(score: ChapterScore) -> str:
    return f"Chapter {score.chapter_index}: {score.label}-related"


def label_counts(scores: Sequence[ChapterScore]) -> dict[str, int]:
    counts = {label: 0 for label in LABELS}
    for s in scores:
        counts[s.label] += 1
    return counts
