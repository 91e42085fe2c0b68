"""Span locator: turns a cursor position into candidate words."""
import logging
from dataclasses import dataclass
from typing import List, Optional

from quickspellfix.buffer import Position
from quickspellfix.offsets import offset_to_position, position_to_offset
from quickspellfix.tokenizer import iter_tokens, has_digit, MIN_WORD_LENGTH

logger = logging.getLogger(__name__)

PARAGRAPH = "paragraph"
LINE = "line"


@dataclass
class WordSpan:
    text: str
    start_line: int
    start_col: int
    end_col: int

    @property
    def start(self) -> Position:
        return Position(self.start_line, self.start_col)

    @property
    def end(self) -> Position:
        return Position(self.start_line, self.end_col)


@dataclass
class Fragment:
    text: str
    start_line: int


def find_paragraph_start(host, line: int) -> int:
    start = line
    while start > 0 and host.get_line(start - 1).strip() != '':
        start -= 1
    return start


def find_paragraph_end(host, line: int) -> int:
    last = host.line_count() - 1
    end = line
    while end < last and host.get_line(end + 1).strip() != '':
        end += 1
    return end


def build_fragment(host, line: int, mode: str = PARAGRAPH) -> Fragment:
    """Searchable text around line: its paragraph, or just the line itself."""
    if mode == LINE:
        return Fragment(host.get_line(line), line)
    start = find_paragraph_start(host, line)
    end = find_paragraph_end(host, line)
    text = '\n'.join(host.get_line(i) for i in range(start, end + 1))
    return Fragment(text, start)


def effective_offset(text: str, offset: int) -> int:
    """Push offset past the rest of a word the cursor is sitting in."""
    if offset > 0 and not text[offset - 1].isspace():
        while offset < len(text) and not text[offset].isspace():
            offset += 1
    return offset


def candidate_spans(host, cursor: Position, mode: str = PARAGRAPH) -> List[WordSpan]:
    """Words before the cursor, closest to the cursor first.

    Words containing digits are left out.
    """
    fragment = build_fragment(host, cursor.line, mode)
    if mode == LINE:
        cursor_offset = min(cursor.col, len(fragment.text))
    else:
        cursor_offset = position_to_offset(host, fragment.start_line, cursor.line, cursor.col)
    search_text = fragment.text[:effective_offset(fragment.text, cursor_offset)]

    spans = []
    for offset, word in iter_tokens(search_text):
        if has_digit(word):
            continue
        if mode == LINE:
            pos = Position(fragment.start_line, offset)
        else:
            pos = offset_to_position(host, fragment.start_line, offset)
        spans.append(WordSpan(word, pos.line, pos.col, pos.col + len(word)))
    spans.reverse()
    logger.debug("Found %d candidate words before %s (%s mode)", len(spans), cursor, mode)
    return spans


def last_word_before(host, pos: Position) -> Optional[WordSpan]:
    """The word just before freshly typed whitespace at pos.

    Trailing whitespace and punctuation between the word and pos are
    skipped; the result is None when no word of at least two letters
    directly precedes them.
    """
    line = host.get_line(pos.line)
    end = min(pos.col, len(line))
    while end > 0 and line[end - 1].isspace():
        end -= 1
    while end > 0 and not line[end - 1].isalpha() and not line[end - 1].isspace():
        end -= 1
    start = end
    while start > 0 and line[start - 1].isalpha():
        start -= 1
    word = line[start:end]
    if len(word) < MIN_WORD_LENGTH:
        return None
    return WordSpan(word, pos.line, start, end)
