"""Flat offset <-> (line, col) mapping over a run of editor lines.

A fragment is the text of consecutive lines starting at ``start_line``,
joined with newlines, so each full line contributes ``len(line) + 1``.
"""
from quickspellfix.buffer import Position


def offset_to_position(host, start_line: int, offset: int) -> Position:
    """Map a fragment offset to document coordinates.

    An offset equal to a line's length stays at the end of that line.
    Offsets past the end of the document clamp to the end of the last line.
    """
    consumed = 0
    line = start_line
    count = host.line_count()
    while line < count:
        length = len(host.get_line(line))
        if consumed + length >= offset:
            return Position(line, offset - consumed)
        consumed += length + 1
        line += 1
    last = count - 1
    return Position(last, len(host.get_line(last)))


def position_to_offset(host, start_line: int, line: int, col: int) -> int:
    offset = 0
    for i in range(start_line, line):
        offset += len(host.get_line(i)) + 1
    return offset + col
