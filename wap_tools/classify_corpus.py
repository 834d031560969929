#!/usr/bin/env python3
"""Classify every chapter of a corpus as war- or peace-related.

Pipeline:
  corpus text -> tokenize -> split at CHAPTER -> density against both term
  sets -> label -> report line "Chapter <n>: <war|peace>-related"

The report goes to stdout and to the output file with identical content. When
an expected report is configured, the written file is then compared line by
line against it and the similarity is printed. A missing comparison input is
a warning only; a missing pipeline input aborts with status 1 before the
report file is opened. An output, summary or log file that cannot be written
also aborts with status 1.

Usage:
  python -m wap_tools.classify_corpus --config config/classify.yaml

  python -m wap_tools.classify_corpus \\
    --corpus files/war_and_peace.txt \\
    --war-terms files/war_terms.txt \\
    --peace-terms files/peace_terms.txt \\
    --output output/report.txt \\
    [--expected files/expected_output.txt] \\
    [--summary output/summary.json] \\
    [--verbose] [--log-file output/run.log]
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from dataclasses import asdict, dataclass
from typing import Optional, TextIO

from wap_tools import TOOL_VERSION
from wap_tools.compare_reports import (
    ComparisonResourceUnavailable,
    ComparisonResult,
    compare_files,
    format_similarity,
)
from wap_tools.config import ClassifyConfig, build_config
from wap_tools.console import abort, configure, info, log, warn
from wap_tools.corpus_io import ResourceUnavailable, read_text, sha256_file
from wap_tools.score_chapters import (
    PEACE,
    WAR,
    ChapterScore,
    format_report_line,
    label_counts,
    score_chapters,
)
from wap_tools.split_chapters import split_chapters
from wap_tools.term_sets import load_terms, shared_terms
from wap_tools.tokenize_text import tokenize

TOOL_NAME = "wap_tools/classify_corpus.py"


@dataclass(frozen=True)
class CorpusInputs:
    """Everything the pipeline reads, loaded once per run."""
    tokens: tuple[str, ...]
    war_terms: frozenset[str]
    peace_terms: frozenset[str]


# ─── Pipeline ──────────────────────────────────────────────────────────────

def load_inputs(cfg: ClassifyConfig) -> CorpusInputs:
    """Read corpus and both term lists. Raises ResourceUnavailable."""
    log(f"Loading corpus from {cfg.corpus}")
    tokens = tuple(tokenize(read_text(cfg.corpus)))
    log(f"Loading war terms from {cfg.war_terms}")
    war_terms = load_terms(cfg.war_terms)
    log(f"Loading peace terms from {cfg.peace_terms}")
    peace_terms = load_terms(cfg.peace_terms)
    log(f"Loaded {len(tokens)} tokens, {len(war_terms)} war terms, {len(peace_terms)} peace terms")
    return CorpusInputs(tokens=tokens, war_terms=war_terms, peace_terms=peace_terms)


def classify_tokens(tokens, war_terms: frozenset[str], peace_terms: frozenset[str]) -> list[ChapterScore]:
    chapters = split_chapters(tokens)
    log(f"Split corpus into {len(chapters)} chapters")
    return score_chapters(chapters, war_terms, peace_terms)


def report_lines(scores: list[ChapterScore]) -> list[str]:
    return [format_report_line(s) for s in scores]


def emit_report(lines: list[str], output_path: str, stream: Optional[TextIO] = None) -> None:
    """Write each line to the console stream and the output file."""
    stream = stream if stream is not None else sys.stdout
    os.makedirs(os.path.dirname(os.path.abspath(output_path)) or ".", exist_ok=True)
    with open(output_path, "w", encoding="utf-8", newline="\n") as f:
        for line in lines:
            print(line, file=stream)
            f.write(line + "\n")
    log(f"Wrote {len(lines)} report lines to {output_path}")


def build_summary(cfg: ClassifyConfig, inputs: CorpusInputs, scores: list[ChapterScore],
                  comparison: Optional[ComparisonResult]) -> dict:
    counts = label_counts(scores)
    return {
        "tool": TOOL_NAME,
        "tool_version": TOOL_VERSION,
        "corpus_file": cfg.corpus,
        "corpus_sha256": sha256_file(cfg.corpus),
        "war_terms_file": cfg.war_terms,
        "peace_terms_file": cfg.peace_terms,
        "war_term_count": len(inputs.war_terms),
        "peace_term_count": len(inputs.peace_terms),
        "shared_terms": shared_terms(inputs.war_terms, inputs.peace_terms),
        "total_tokens": len(inputs.tokens),
        "total_chapters": len(scores),
        "war_chapters": counts[WAR],
        "peace_chapters": counts[PEACE],
        "output_file": cfg.output,
        "expected_file": cfg.expected,
        "comparison": comparison.to_dict() if comparison is not None else None,
        "chapters": [asdict(s) for s in scores],
    }


# ─── CLI ───────────────────────────────────────────────────────────────────

def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        description="Classify corpus chapters as war- or peace-related by term density.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument("--config", help="YAML run configuration (paths relative to the file)")
    ap.add_argument("--corpus", help="Corpus text file")
    ap.add_argument("--war-terms", help="War term list file")
    ap.add_argument("--peace-terms", help="Peace term list file")
    ap.add_argument("--output", help="Report file to write")
    ap.add_argument("--expected", help="Expected report to compare against")
    ap.add_argument("--summary", help="Write a JSON run summary to this path")
    ap.add_argument("--log-file", help="Append progress and diagnostics to this file")
    ap.add_argument("--verbose", "-v", action="store_true",
                    help="Print progress to stderr")
    return ap.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        cfg = build_config(args.config, {
            "corpus": args.corpus,
            "war_terms": args.war_terms,
            "peace_terms": args.peace_terms,
            "output": args.output,
            "expected": args.expected,
            "summary": args.summary,
            "log_file": args.log_file,
        })
    except RuntimeError as e:
        abort(str(e))

    try:
        configure(verbose=args.verbose, log_file=cfg.log_file)
    except OSError as e:
        abort(f"Could not write {cfg.log_file}: {e.strerror or e}")
    log(f"{TOOL_NAME} {TOOL_VERSION}")

    try:
        inputs = load_inputs(cfg)
    except ResourceUnavailable as e:
        abort(str(e))

    overlap = shared_terms(inputs.war_terms, inputs.peace_terms)
    if overlap:
        warn(f"{len(overlap)} term(s) appear in both lists and count for both: {overlap}")

    scores = classify_tokens(inputs.tokens, inputs.war_terms, inputs.peace_terms)
    counts = label_counts(scores)
    log(f"Labels: {counts[WAR]} war-related, {counts[PEACE]} peace-related")

    try:
        emit_report(report_lines(scores), cfg.output)
    except OSError as e:
        abort(f"Could not write {cfg.output}: {e.strerror or e}")

    comparison = None
    if cfg.expected:
        try:
            comparison = compare_files(cfg.output, cfg.expected)
        except ComparisonResourceUnavailable as e:
            warn(f"Comparison skipped: {e}")
        else:
            info(format_similarity(comparison))
            log(f"Compared {comparison.lines_compared} lines, "
                f"{len(comparison.mismatches)} mismatch(es)")

    if cfg.summary:
        summary = build_summary(cfg, inputs, scores, comparison)
        try:
            os.makedirs(os.path.dirname(os.path.abspath(cfg.summary)) or ".", exist_ok=True)
            with open(cfg.summary, "w", encoding="utf-8") as f:
                json.dump(summary, f, ensure_ascii=False, indent=2)
        except OSError as e:
            abort(f"Could not write {cfg.summary}: {e.strerror or e}")
        log(f"Wrote summary to {cfg.summary}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
