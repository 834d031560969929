#!/usr/bin/env python3
"""Line-by-line comparison of a produced report against an expected one.

similarity = 100 * (identical lines at the same position) / (pairs compared)

Only the first min(len(left), len(right)) positions are compared; extra lines
in the longer file do not count against the score. Two empty files are 100%
similar; one empty file against a non-empty one is 0%.

Usage:
  python -m wap_tools.compare_reports \\
    --actual output/report.txt \\
    --expected files/expected_output.txt \\
    [--show-mismatches]
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field

from wap_tools.corpus_io import ResourceUnavailable, read_lines
from wap_tools.console import info, warn


class ComparisonResourceUnavailable(ResourceUnavailable):
    """One of the two files handed to the comparison could not be opened."""


@dataclass
class ComparisonResult:
    lines_compared: int
    lines_identical: int
    actual_lines: int
    expected_lines: int
    mismatches: list[tuple[int, str, str]] = field(default_factory=list)  # (line_no, actual, expected)

    @property
    def similarity(self) -> float:
        if self.lines_compared == 0:
            return 100.0 if self.actual_lines == self.expected_lines else 0.0
        return 100.0 * self.lines_identical / self.lines_compared

    def to_dict(self) -> dict:
        return {
            "lines_compared": self.lines_compared,
            "lines_identical": self.lines_identical,
            "actual_lines": self.actual_lines,
            "expected_lines": self.expected_lines,
            "similarity_percent": round(self.similarity, 4),
            "mismatch_line_numbers": [m[0] for m in self.mismatches],
        }


def compare_lines(actual: list[str], expected: list[str]) -> ComparisonResult:
    compared = min(len(actual), len(expected))
    mismatches = []
    for i in range(compared):
        if actual[i] != expected[i]:
            mismatches.append((i + 1, actual[i], expected[i]))
    return ComparisonResult(
        lines_compared=compared,
        lines_identical=compared - len(mismatches),
        actual_lines=len(actual),
        expected_lines=len(expected),
        mismatches=mismatches,
    )


def compare_files(actual_path: str, expected_path: str) -> ComparisonResult:
    """Compare two report files. Raises ComparisonResourceUnavailable."""
    try:
        actual = read_lines(actual_path)
        expected = read_lines(expected_path)
    except ResourceUnavailable as e:
        raise ComparisonResourceUnavailable(e.path, e.reason) from e
    return compare_lines(actual, expected)


def format_similarity(result: ComparisonResult) -> str:
    return f"Similarity to expected output: {result.similarity:.2f}%"


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Compare a report file line by line against an expected report.")
    ap.add_argument("--actual", required=True, help="Report produced by the classifier")
    ap.add_argument("--expected", required=True, help="Reference report")
    ap.add_argument("--show-mismatches", action="store_true",
                    help="List every differing line")
    args = ap.parse_args(argv)

    try:
        result = compare_files(args.actual, args.expected)
    except ComparisonResourceUnavailable as e:
        warn(f"Comparison skipped: {e}")
        return 1

    info(format_similarity(result))
    info(f"  Lines compared: {result.lines_compared} "
         f"(actual {result.actual_lines}, expected {result.expected_lines})")
    if args.show_mismatches:
        for line_no, actual, expected in result.mismatches:
            info(f"  line {line_no}: {actual!r} != {expected!r}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
