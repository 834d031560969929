"""Chapter-level war/peace classification tools for plain-text corpora.

Stages:
  tokenize_text   -> whitespace split + punctuation strip
  term_sets       -> term list file -> frozenset of tokens
  split_chapters  -> token stream -> chapters at each CHAPTER marker
  score_chapters  -> term densities per chapter + war/peace label
  compare_reports -> line-by-line similarity against an expected report
  classify_corpus -> end-to-end run (CLI)
"""

TOOL_VERSION = "v0.1"
