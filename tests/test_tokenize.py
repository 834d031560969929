#!/usr/bin/env python3
"""
Tests for text access, tokenization and term lists
(wap_tools/corpus_io.py, wap_tools/tokenize_text.py, wap_tools/term_sets.py)

Run: pytest tests/test_tokenize.py -v
"""

import pytest

from wap_tools.corpus_io import ResourceUnavailable, read_lines, read_text, sha256_file, write_lines
from wap_tools.term_sets import load_terms, shared_terms, terms_from_lines
from wap_tools.tokenize_text import PUNCTUATION, main, strip_punctuation, tokenize


# ═══════════════════════════════════════════════════════════════════════════
# corpus_io
# ═══════════════════════════════════════════════════════════════════════════

class TestReadLines:
    def test_trailing_newline_not_an_extra_line(self, tmp_path):
        p = tmp_path / "a.txt"
        p.write_text("one\ntwo\n", encoding="utf-8")
        assert read_lines(str(p)) == ["one", "two"]

    def test_no_trailing_newline(self, tmp_path):
        p = tmp_path / "a.txt"
        p.write_text("one\ntwo", encoding="utf-8")
        assert read_lines(str(p)) == ["one", "two"]

    def test_blank_lines_kept(self, tmp_path):
        p = tmp_path / "a.txt"
        p.write_text("one\n\ntwo\n", encoding="utf-8")
        assert read_lines(str(p)) == ["one", "", "two"]

    def test_empty_file(self, tmp_path):
        p = tmp_path / "a.txt"
        p.write_text("", encoding="utf-8")
        assert read_lines(str(p)) == []

    def test_crlf_lines(self, tmp_path):
        p = tmp_path / "a.txt"
        p.write_bytes(b"one\r\ntwo\r\n")
        assert read_lines(str(p)) == ["one", "two"]

    def test_bom_dropped(self, tmp_path):
        p = tmp_path / "a.txt"
        p.write_bytes(b"\xef\xbb\xbfThe Project\n")
        assert read_lines(str(p)) == ["The Project"]

    def test_undecodable_bytes_replaced(self, tmp_path):
        p = tmp_path / "a.txt"
        p.write_bytes(b"ok \xff ok\n")
        assert read_lines(str(p)) == ["ok � ok"]

    def test_missing_file_raises(self, tmp_path):
        missing = tmp_path / "nope.txt"
        with pytest.raises(ResourceUnavailable) as exc:
            read_lines(str(missing))
        assert exc.value.path == str(missing)
        assert "Could not open file" in str(exc.value)
        assert str(missing) in str(exc.value)

    def test_directory_raises(self, tmp_path):
        with pytest.raises(ResourceUnavailable):
            read_lines(str(tmp_path))


class TestReadWriteText:
    def test_read_text_joins_with_newlines(self, tmp_path):
        p = tmp_path / "a.txt"
        p.write_text("one\ntwo\n", encoding="utf-8")
        assert read_text(str(p)) == "one\ntwo"

    def test_write_lines_creates_parents(self, tmp_path):
        out = tmp_path / "nested" / "dir" / "out.txt"
        write_lines(str(out), ["a", "b"])
        assert out.read_bytes() == b"a\nb\n"

    def test_sha256_stable(self, tmp_path):
        p = tmp_path / "a.txt"
        p.write_bytes(b"abc")
        assert sha256_file(str(p)) == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"

    def test_sha256_missing_raises(self, tmp_path):
        with pytest.raises(ResourceUnavailable):
            sha256_file(str(tmp_path / "nope.bin"))


# ═══════════════════════════════════════════════════════════════════════════
# tokenize
# ═══════════════════════════════════════════════════════════════════════════

class TestTokenize:
    def test_basic_sentence(self):
        assert tokenize("War, and Peace!") == ["War", "and", "Peace"]

    def test_empty_input(self):
        assert tokenize("") == []

    def test_whitespace_only(self):
        assert tokenize("  \n\t  ") == []

    def test_tabs_and_newlines_split(self):
        assert tokenize("a\tb\nc  d") == ["a", "b", "c", "d"]

    def test_punctuation_only_fragments_dropped(self):
        assert tokenize("a -- b ... c") == ["a", "b", "c"]

    def test_inner_punctuation_removed_in_order(self):
        assert tokenize("don't (x.y) [z]") == ["dont", "xy", "z"]

    def test_line_break_does_not_rejoin_words(self):
        assert tokenize("hyphen-\nated") == ["hyphen", "ated"]

    def test_case_preserved(self):
        assert tokenize("CHAPTER Chapter chapter") == ["CHAPTER", "Chapter", "chapter"]

    def test_marker_with_punctuation(self):
        assert tokenize("CHAPTER. one") == ["CHAPTER", "one"]

    def test_non_ascii_marks_kept(self):
        assert tokenize("“Well,”") == ["“Well”"]

    def test_only_ascii_whitespace_splits(self):
        """NBSP, ideographic space and ASCII separators stay inside a token."""
        assert tokenize("a\xa0b") == ["a\xa0b"]
        assert tokenize("a\u3000b c") == ["a\u3000b", "c"]
        assert tokenize("a\x1cb") == ["a\x1cb"]

    def test_vertical_tab_and_form_feed_split(self):
        assert tokenize("a\vb\fc\r\nd") == ["a", "b", "c", "d"]

    def test_duplicates_and_order_kept(self):
        assert tokenize("war peace war") == ["war", "peace", "war"]

    def test_strip_punctuation_all(self):
        assert strip_punctuation(PUNCTUATION) == ""


class TestTokenizePreviewCli:
    def test_first_line(self, tmp_path, capsys):
        p = tmp_path / "book.txt"
        p.write_text("War, and Peace!\nsecond line\n", encoding="utf-8")
        assert main(["--input", str(p)]) == 0
        out = capsys.readouterr().out
        assert "3 token(s)" in out
        assert "War and Peace" in out
        assert "second" not in out

    def test_multiple_lines(self, tmp_path, capsys):
        p = tmp_path / "book.txt"
        p.write_text("a b\nc\nd\n", encoding="utf-8")
        main(["--input", str(p), "--lines", "2"])
        assert "a b c" in capsys.readouterr().out

    def test_empty_file(self, tmp_path, capsys):
        p = tmp_path / "book.txt"
        p.write_text("", encoding="utf-8")
        assert main(["--input", str(p)]) == 0
        assert "Nothing to tokenize" in capsys.readouterr().out

    def test_missing_file_exits_1(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--input", str(tmp_path / "nope.txt")])
        assert exc.value.code == 1
        assert "Could not open file" in capsys.readouterr().err


# ═══════════════════════════════════════════════════════════════════════════
# term_sets
# ═══════════════════════════════════════════════════════════════════════════

class TestLoadTerms:
    def test_one_per_line_equals_whitespace_separated(self, tmp_path):
        a = tmp_path / "a.txt"
        b = tmp_path / "b.txt"
        a.write_text("war\nbattle\narmy\n", encoding="utf-8")
        b.write_text("war battle\tarmy", encoding="utf-8")
        assert load_terms(str(a)) == load_terms(str(b)) == frozenset({"war", "battle", "army"})

    def test_lines_do_not_merge(self):
        assert terms_from_lines(["war", "battle"]) == frozenset({"war", "battle"})

    def test_duplicates_collapse(self, tmp_path):
        p = tmp_path / "t.txt"
        p.write_text("war\nwar\nwar\n", encoding="utf-8")
        assert load_terms(str(p)) == frozenset({"war"})

    def test_punctuation_stripped_like_corpus(self, tmp_path):
        p = tmp_path / "t.txt"
        p.write_text("cease-fire\n\"truce\"\n", encoding="utf-8")
        assert load_terms(str(p)) == frozenset({"ceasefire", "truce"})

    def test_case_sensitive(self, tmp_path):
        p = tmp_path / "t.txt"
        p.write_text("war\n", encoding="utf-8")
        terms = load_terms(str(p))
        assert "war" in terms
        assert "War" not in terms

    def test_empty_list(self, tmp_path):
        p = tmp_path / "t.txt"
        p.write_text("\n\n", encoding="utf-8")
        assert load_terms(str(p)) == frozenset()

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(ResourceUnavailable):
            load_terms(str(tmp_path / "nope.txt"))


class TestSharedTerms:
    def test_sorted_intersection(self):
        assert shared_terms(frozenset({"b", "a", "x"}), frozenset({"a", "b", "y"})) == ["a", "b"]

    def test_disjoint(self):
        assert shared_terms(frozenset({"war"}), frozenset({"peace"})) == []
