"""Tests for the span locator."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from quickspellfix.buffer import LineBuffer, Position
from quickspellfix.locator import (
    WordSpan, build_fragment, candidate_spans, effective_offset,
    find_paragraph_start, find_paragraph_end, last_word_before,
)


def texts(spans):
    return [s.text for s in spans]


def test_paragraph_bounds():
    buf = LineBuffer("intro\n\nfirst\nsecond\nthird\n   \nafter")
    assert find_paragraph_start(buf, 3) == 2
    assert find_paragraph_end(buf, 3) == 4
    assert find_paragraph_start(buf, 0) == 0
    assert find_paragraph_end(buf, 6) == 6


def test_fragment_modes():
    buf = LineBuffer("one\ntwo\nthree\n\nfour")
    para = build_fragment(buf, 1, "paragraph")
    assert para.text == "one\ntwo\nthree"
    assert para.start_line == 0
    line = build_fragment(buf, 1, "line")
    assert line.text == "two"


def test_effective_offset_skips_rest_of_word():
    assert effective_offset("helo world", 2) == 4
    assert effective_offset("helo world", 4) == 4
    assert effective_offset("helo world", 5) == 5
    assert effective_offset("helo\nworld", 2) == 4
    assert effective_offset("helo", 0) == 0


def test_candidates_closest_first():
    buf = LineBuffer("Teh quikc fox")
    buf.move_to_end()
    spans = candidate_spans(buf, buf.get_cursor())
    assert texts(spans) == ["fox", "quikc", "Teh"]
    assert spans[-1] == WordSpan("Teh", 0, 0, 3)


def test_candidates_exclude_words_after_cursor():
    buf = LineBuffer("alpha beta gamma")
    spans = candidate_spans(buf, Position(0, 6))
    assert texts(spans) == ["alpha"]


def test_candidates_include_word_under_cursor():
    buf = LineBuffer("alpha beta gamma")
    spans = candidate_spans(buf, Position(0, 8))
    assert texts(spans) == ["beta", "alpha"]


def test_paragraph_candidates_span_lines():
    buf = LineBuffer("abc\nxyz wrng\n\nnext paragraph")
    spans = candidate_spans(buf, Position(1, 8), "paragraph")
    assert spans[0] == WordSpan("wrng", 1, 4, 8)
    assert spans[1] == WordSpan("xyz", 1, 0, 3)
    assert spans[2] == WordSpan("abc", 0, 0, 3)


def test_paragraph_stops_at_blank_line():
    buf = LineBuffer("helo there\n\nfine words")
    buf.move_to_end()
    assert texts(candidate_spans(buf, buf.get_cursor(), "paragraph")) == ["words", "fine"]


def test_line_mode_only_current_line():
    buf = LineBuffer("helo world\nnext")
    assert candidate_spans(buf, Position(1, 0), "line") == []
    assert texts(candidate_spans(buf, Position(1, 0), "paragraph")) == ["world", "helo"]


def test_line_mode_columns():
    buf = LineBuffer("first\nsome wrng")
    buf.move_to_end()
    spans = candidate_spans(buf, buf.get_cursor(), "line")
    assert spans[0] == WordSpan("wrng", 1, 5, 9)


def test_last_word_before_space():
    buf = LineBuffer("I beleive ")
    assert last_word_before(buf, Position(0, 10)) == WordSpan("beleive", 0, 2, 9)


def test_last_word_before_skips_punctuation():
    buf = LineBuffer("a wrod. ")
    assert last_word_before(buf, Position(0, 8)) == WordSpan("wrod", 0, 2, 6)


def test_last_word_before_none():
    assert last_word_before(LineBuffer("I "), Position(0, 2)) is None
    assert last_word_before(LineBuffer("42 "), Position(0, 3)) is None
    assert last_word_before(LineBuffer(" "), Position(0, 1)) is None
