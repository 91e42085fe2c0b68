"""Qt plain-text editor wired to the spelling commands."""
import logging
from pathlib import Path
from typing import Callable, Optional

from PyQt5.QtWidgets import (
    QMainWindow, QPlainTextEdit, QAction, QStatusBar, QFileDialog, QMessageBox,
)
from PyQt5.QtGui import QKeySequence, QTextCursor
from PyQt5.QtCore import QTimer

from quickspellfix.buffer import EditorHost, Position
from quickspellfix.commands import COMMANDS, CommandDispatcher

logger = logging.getLogger(__name__)

NOTICE_TIMEOUT_MS = 4000


def _utf16_len(text: str) -> int:
    return len(text.encode("utf-16-le")) // 2


def _col_from_utf16(line: str, units: int) -> int:
    """Qt counts UTF-16 code units; Python strings count code points."""
    col = 0
    consumed = 0
    while col < len(line) and consumed < units:
        consumed += 2 if ord(line[col]) > 0xFFFF else 1
        col += 1
    return col


class QtEditorHost(EditorHost):
    """Exposes a QPlainTextEdit through the editor host interface."""

    def __init__(self, edit: QPlainTextEdit, notifier: Optional[Callable[[str], None]] = None):
        self._edit = edit
        self._notifier = notifier

    def _block(self, n: int):
        return self._edit.document().findBlockByNumber(n)

    def _absolute(self, pos: Position) -> int:
        block = self._block(min(pos.line, self.line_count() - 1))
        text = block.text()
        return block.position() + _utf16_len(text[:max(0, pos.col)])

    def get_cursor(self) -> Position:
        cursor = self._edit.textCursor()
        line = cursor.blockNumber()
        return Position(line, _col_from_utf16(self.get_line(line), cursor.positionInBlock()))

    def get_line(self, n: int) -> str:
        return self._block(n).text()

    def line_count(self) -> int:
        return self._edit.document().blockCount()

    def set_cursor(self, pos: Position):
        cursor = self._edit.textCursor()
        cursor.setPosition(self._absolute(pos))
        self._edit.setTextCursor(cursor)

    def set_selection(self, start: Position, end: Position):
        cursor = self._edit.textCursor()
        cursor.setPosition(self._absolute(start))
        cursor.setPosition(self._absolute(end), QTextCursor.KeepAnchor)
        self._edit.setTextCursor(cursor)

    def replace_range(self, text: str, start: Position, end: Position):
        cursor = QTextCursor(self._edit.document())
        cursor.setPosition(self._absolute(start))
        cursor.setPosition(self._absolute(end), QTextCursor.KeepAnchor)
        cursor.insertText(text)

    def notify(self, message: str):
        super().notify(message)
        if self._notifier:
            self._notifier(message)


class SpellEdit(QPlainTextEdit):
    """Plain text edit that reports typed text after the edit went through."""

    def __init__(self, on_text_typed: Optional[Callable[[str], None]] = None, parent=None):
        super().__init__(parent)
        self._on_text_typed = on_text_typed

    def keyPressEvent(self, event):
        super().keyPressEvent(event)
        text = event.text()
        if text and self._on_text_typed:
            self._on_text_typed(text)


class EditorWindow(QMainWindow):
    """Editor window with a Spelling menu bound to the configured hotkeys."""

    def __init__(self, config, dispatcher: CommandDispatcher, path: Optional[str] = None, parent=None):
        super().__init__(parent)
        self.config = config
        self.dispatcher = dispatcher
        self._path: Optional[Path] = None
        self._settings_window = None
        self._command_actions = {}

        self.setWindowTitle("QuickSpellFix")
        self.resize(720, 520)

        self.edit = SpellEdit(on_text_typed=self._on_text_typed)
        self.setCentralWidget(self.edit)

        self._statusbar = QStatusBar()
        self.setStatusBar(self._statusbar)

        self.host = QtEditorHost(self.edit, notifier=self.show_notice)
        self._build_menus()

        if path:
            self.open_file(path)

    def _build_menus(self):
        file_menu = self.menuBar().addMenu("&File")

        open_action = QAction("&Open…", self)
        open_action.setShortcut(QKeySequence.Open)
        open_action.triggered.connect(self._choose_file)
        file_menu.addAction(open_action)

        save_action = QAction("&Save", self)
        save_action.setShortcut(QKeySequence.Save)
        save_action.triggered.connect(self.save_file)
        file_menu.addAction(save_action)

        file_menu.addSeparator()
        quit_action = QAction("&Quit", self)
        quit_action.setShortcut(QKeySequence.Quit)
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

        spelling_menu = self.menuBar().addMenu("&Spelling")
        for command in COMMANDS:
            action = QAction(command.name, self)
            action.triggered.connect(lambda _=False, cid=command.id: self.run_command(cid))
            spelling_menu.addAction(action)
            self._command_actions[command.id] = action

        spelling_menu.addSeparator()
        self._autocorrect_action = QAction("Autocorrect on space", self)
        self._autocorrect_action.setCheckable(True)
        self._autocorrect_action.setChecked(self.config.autocorrect)
        self._autocorrect_action.toggled.connect(self._on_autocorrect_toggled)
        spelling_menu.addAction(self._autocorrect_action)

        settings_action = QAction("Settings…", self)
        settings_action.triggered.connect(self._open_settings)
        spelling_menu.addAction(settings_action)

        self.apply_hotkeys()

    def apply_hotkeys(self):
        for command_id, action in self._command_actions.items():
            action.setShortcut(QKeySequence(self.config.hotkey(command_id)))

    def run_command(self, command_id: str):
        self.dispatcher.run(command_id, self.host)

    def show_notice(self, message: str):
        self._statusbar.showMessage(message, NOTICE_TIMEOUT_MS)

    def _on_text_typed(self, text: str):
        if self.dispatcher.should_autocorrect(text):
            # Runs after the space is in the document.
            QTimer.singleShot(0, lambda: self.dispatcher.autocorrect(self.host))

    def _on_autocorrect_toggled(self, checked):
        self.config.autocorrect = checked

    def _open_settings(self):
        from quickspellfix.settings_ui import SettingsWindow
        if self._settings_window is None:
            self._settings_window = SettingsWindow(self.config, on_saved=self._on_settings_saved)
        self._settings_window.show()
        self._settings_window.raise_()
        self._settings_window.activateWindow()

    def _on_settings_saved(self):
        self.apply_hotkeys()
        self._autocorrect_action.setChecked(self.config.autocorrect)

    def _choose_file(self):
        path, _ = QFileDialog.getOpenFileName(self, "Open file", "", "Text files (*.txt *.md);;All files (*)")
        if path:
            self.open_file(path)

    def open_file(self, path):
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8") if path.exists() else ""
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Cannot open %s: %s", path, e)
            QMessageBox.warning(self, "QuickSpellFix", f"Cannot open {path}:\n{e}")
            return
        self.edit.setPlainText(text)
        self._path = path
        self.setWindowTitle(f"QuickSpellFix — {path.name}")

    def save_file(self):
        if self._path is None:
            path, _ = QFileDialog.getSaveFileName(self, "Save file", "", "Text files (*.txt *.md);;All files (*)")
            if not path:
                return
            self._path = Path(path)
        try:
            self._path.write_text(self.edit.toPlainText(), encoding="utf-8")
        except OSError as e:
            logger.error("Cannot save %s: %s", self._path, e)
            QMessageBox.warning(self, "QuickSpellFix", f"Cannot save {self._path}:\n{e}")
            return
        self.setWindowTitle(f"QuickSpellFix — {self._path.name}")
        self.show_notice(f"Saved {self._path}")
