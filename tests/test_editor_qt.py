"""Qt editor tests: run on the offscreen platform, skipped without PyQt5."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

pytest.importorskip("PyQt5.QtWidgets")

from PyQt5.QtWidgets import QApplication, QPlainTextEdit
from PyQt5.QtTest import QTest
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QTextCursor

from quickspellfix.buffer import Position
from quickspellfix.commands import CommandDispatcher, FIX_PREVIOUS_SPELLING, CYCLE_SUGGESTION
from quickspellfix.config import Config
from quickspellfix.corrector import Corrector
from quickspellfix.editor import EditorWindow, QtEditorHost
from quickspellfix.oracle import SpellOracle
from quickspellfix.pipeline import SuggestionPipeline
from quickspellfix.settings_ui import SettingsWindow


class FakeOracle(SpellOracle):
    def __init__(self, suggestions):
        self.suggestions = suggestions

    def is_misspelled(self, word):
        return word in self.suggestions

    def suggest(self, word):
        return list(self.suggestions.get(word, []))


@pytest.fixture(scope="module")
def app():
    return QApplication.instance() or QApplication([])


@pytest.fixture
def config(tmp_path):
    return Config(config_file=tmp_path / "config.json")


def make_window(config, suggestions, text):
    pipeline = SuggestionPipeline(FakeOracle(suggestions))
    dispatcher = CommandDispatcher(config, Corrector(config, pipeline))
    window = EditorWindow(config, dispatcher)
    window.edit.setPlainText(text)
    window.edit.moveCursor(QTextCursor.End)
    return window


def test_host_reads_and_replaces(app):
    edit = QPlainTextEdit()
    edit.setPlainText("first line\nsecond")
    host = QtEditorHost(edit)
    assert host.line_count() == 2
    assert host.get_line(1) == "second"
    host.replace_range("1st", Position(0, 0), Position(0, 5))
    assert edit.toPlainText() == "1st line\nsecond"
    host.set_cursor(Position(1, 3))
    assert host.get_cursor() == Position(1, 3)


def test_host_columns_count_code_points(app):
    edit = QPlainTextEdit()
    edit.setPlainText("\U0001F600 helo")
    host = QtEditorHost(edit)
    host.set_cursor(Position(0, 6))
    assert host.get_cursor() == Position(0, 6)
    host.replace_range("hello", Position(0, 2), Position(0, 6))
    assert edit.toPlainText() == "\U0001F600 hello"


def test_host_notify_calls_notifier(app):
    seen = []
    host = QtEditorHost(QPlainTextEdit(), notifier=seen.append)
    host.notify("hi")
    assert seen == ["hi"]


def test_window_fix_and_cycle(app, config):
    window = make_window(config, {"Teh": ["The", "Ten"]}, "Teh quikc fox")
    window.run_command(FIX_PREVIOUS_SPELLING)
    assert window.edit.toPlainText() == "The quikc fox"
    window.run_command(CYCLE_SUGGESTION)
    assert window.edit.toPlainText() == "Ten quikc fox"


def test_window_autocorrect_on_space(app, config):
    config.autocorrect = True
    window = make_window(config, {"beleive": ["believe"]}, "I beleive")
    QTest.keyClick(window.edit, Qt.Key_Space)
    QTest.qWait(50)
    assert window.edit.toPlainText() == "I believe "
    assert window.host.get_cursor() == Position(0, 10)


def test_window_no_autocorrect_when_disabled(app, config):
    window = make_window(config, {"beleive": ["believe"]}, "I beleive")
    QTest.keyClick(window.edit, Qt.Key_Space)
    QTest.qWait(50)
    assert window.edit.toPlainText() == "I beleive "


def test_hotkeys_from_config(app, config):
    config.set("hotkeys", dict(config.get("hotkeys"), **{"cycle-suggestion": "Ctrl+Alt+C"}))
    window = make_window(config, {}, "")
    shortcut = window._command_actions["cycle-suggestion"].shortcut().toString()
    assert shortcut == "Ctrl+Alt+C"


def test_settings_save_keeps_disabled_backend(app, config):
    config.set("oracle", "none")
    window = SettingsWindow(config)
    window._save()
    assert Config(config_file=config.config_file).oracle == "none"


def test_settings_save_switches_backend(app, config):
    window = SettingsWindow(config)
    window._radio_api.setChecked(True)
    window._save()
    assert Config(config_file=config.config_file).oracle == "api"
