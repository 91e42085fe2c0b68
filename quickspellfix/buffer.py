"""Editor host capability and an in-memory line buffer implementing it."""
import logging
from typing import List, NamedTuple

logger = logging.getLogger(__name__)


class Position(NamedTuple):
    line: int
    col: int


class EditorHost:
    """What the corrector needs from a text editor.

    Lines are addressed by index, columns by character offset within the
    line. ``replace_range`` never spans lines for the corrector's own calls.
    """

    def get_cursor(self) -> Position:
        raise NotImplementedError

    def get_line(self, n: int) -> str:
        raise NotImplementedError

    def line_count(self) -> int:
        raise NotImplementedError

    def set_cursor(self, pos: Position):
        raise NotImplementedError

    def set_selection(self, start: Position, end: Position):
        raise NotImplementedError

    def replace_range(self, text: str, start: Position, end: Position):
        raise NotImplementedError

    def notify(self, message: str):
        """Show a short user-visible notice."""
        logger.info("%s", message)


class LineBuffer(EditorHost):
    """Plain in-memory document.

    Keeps the cursor where a real editor would: a replacement before the
    cursor shifts it by the length difference.
    """

    def __init__(self, text: str = "", cursor: Position = None):
        self._lines: List[str] = text.split("\n")
        self._cursor = Position(0, 0)
        self._selection = None
        self.notices: List[str] = []
        if cursor is not None:
            self.set_cursor(cursor)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    @property
    def selection(self):
        return self._selection

    def get_cursor(self) -> Position:
        return self._cursor

    def get_line(self, n: int) -> str:
        return self._lines[n]

    def line_count(self) -> int:
        return len(self._lines)

    def set_cursor(self, pos: Position):
        self._cursor = self._clamp(Position(*pos))
        self._selection = None

    def set_selection(self, start: Position, end: Position):
        self._selection = (self._clamp(Position(*start)), self._clamp(Position(*end)))
        self._cursor = self._selection[1]

    def move_to_end(self):
        last = len(self._lines) - 1
        self.set_cursor(Position(last, len(self._lines[last])))

    def type_text(self, text: str):
        """Insert text at the cursor and move the cursor after it."""
        start = self._cursor
        self.replace_range(text, start, start)
        lines = text.split("\n")
        if len(lines) == 1:
            self._cursor = Position(start.line, start.col + len(text))
        else:
            self._cursor = Position(start.line + len(lines) - 1, len(lines[-1]))

    def replace_range(self, text: str, start: Position, end: Position):
        start = self._clamp(Position(*start))
        end = self._clamp(Position(*end))
        if end < start:
            start, end = end, start
        head = self._lines[start.line][:start.col]
        tail = self._lines[end.line][end.col:]
        new_lines = (head + text + tail).split("\n")
        self._lines[start.line:end.line + 1] = new_lines
        self._cursor = self._shift(self._cursor, start, end, text)
        self._selection = None

    def notify(self, message: str):
        self.notices.append(message)
        super().notify(message)

    def _clamp(self, pos: Position) -> Position:
        line = max(0, min(pos.line, len(self._lines) - 1))
        col = max(0, min(pos.col, len(self._lines[line])))
        return Position(line, col)

    @staticmethod
    def _shift(cursor: Position, start: Position, end: Position, text: str) -> Position:
        if cursor < end:
            return cursor if cursor <= start else start
        inserted = text.split("\n")
        if cursor.line != end.line:
            return Position(cursor.line + len(inserted) - 1 - (end.line - start.line), cursor.col)
        if len(inserted) == 1:
            return Position(start.line, start.col + len(text) + cursor.col - end.col)
        return Position(start.line + len(inserted) - 1, len(inserted[-1]) + cursor.col - end.col)
