"""Settings window (Qt) for QuickSpellFix."""
import logging
from typing import Callable, Optional

from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QGroupBox, QLabel, QCheckBox, QRadioButton,
    QLineEdit, QSpinBox, QPushButton, QButtonGroup,
    QFormLayout, QStatusBar,
)

from quickspellfix.commands import COMMANDS

logger = logging.getLogger(__name__)


class SettingsWindow(QMainWindow):
    """Settings window with all configuration options."""

    def __init__(self, config, on_saved: Optional[Callable[[], None]] = None, parent=None):
        super().__init__(parent)
        self.config = config
        self._on_saved = on_saved

        self.setWindowTitle("QuickSpellFix — Settings")
        self.setMinimumWidth(450)

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)

        # === Suggestions ===
        sugg_group = QGroupBox("Suggestions")
        sugg_layout = QFormLayout(sugg_group)

        self._single_letter_cb = QCheckBox("Ignore single letter suggestions")
        self._single_letter_cb.setToolTip(
            "Filter out single-character spelling suggestions. Helps prevent "
            "incorrect replacements, especially with non-Latin scripts.")
        self._single_letter_cb.setChecked(config.ignore_single_letter_suggestions)
        self._single_letter_cb.toggled.connect(self._on_single_letter_toggled)
        sugg_layout.addRow(self._single_letter_cb)

        self._exceptions_input = QLineEdit(config.get("singleLetterExceptions", ""))
        self._exceptions_input.setPlaceholderText("I a")
        self._exceptions_input.setEnabled(config.ignore_single_letter_suggestions)
        sugg_layout.addRow("Single letter exceptions:", self._exceptions_input)

        self._ignored_input = QLineEdit(config.get("suggestionsToIgnore", ""))
        self._ignored_input.setPlaceholderText("ht Th")
        sugg_layout.addRow("Suggestions to ignore:", self._ignored_input)

        self._keep_iterating_cb = QCheckBox("Keep looking further back when all suggestions are filtered")
        self._keep_iterating_cb.setChecked(config.keep_iterating_when_filtered)
        sugg_layout.addRow(self._keep_iterating_cb)

        self._autocorrect_cb = QCheckBox("Autocorrect the previous word when typing a space")
        self._autocorrect_cb.setChecked(config.autocorrect)
        sugg_layout.addRow(self._autocorrect_cb)

        layout.addWidget(sugg_group)

        # === Search ===
        scan_group = QGroupBox("Search back through")
        scan_layout = QVBoxLayout(scan_group)
        self._scan_btn_group = QButtonGroup(self)

        self._radio_paragraph = QRadioButton("Current paragraph")
        self._radio_paragraph.setChecked(config.scan_mode == "paragraph")
        self._scan_btn_group.addButton(self._radio_paragraph, 0)
        scan_layout.addWidget(self._radio_paragraph)

        self._radio_line = QRadioButton("Current line only")
        self._radio_line.setChecked(config.scan_mode == "line")
        self._scan_btn_group.addButton(self._radio_line, 1)
        scan_layout.addWidget(self._radio_line)

        layout.addWidget(scan_group)

        # === Spell backend ===
        oracle_group = QGroupBox("Spell checker (applies after restart)")
        oracle_layout = QVBoxLayout(oracle_group)
        self._oracle_btn_group = QButtonGroup(self)

        self._radio_pyspell = QRadioButton("Built-in dictionary (pyspellchecker)")
        self._radio_pyspell.setChecked(config.oracle == "pyspellchecker")
        self._oracle_btn_group.addButton(self._radio_pyspell, 0)
        oracle_layout.addWidget(self._radio_pyspell)

        self._radio_api = QRadioButton("Local spell service (HTTP)")
        self._radio_api.setChecked(config.oracle == "api")
        self._oracle_btn_group.addButton(self._radio_api, 1)
        oracle_layout.addWidget(self._radio_api)

        self._radio_none = QRadioButton("None (spell fixing off)")
        self._radio_none.setChecked(config.oracle == "none")
        self._oracle_btn_group.addButton(self._radio_none, 2)
        oracle_layout.addWidget(self._radio_none)

        api_row = QHBoxLayout()
        api_row.addWidget(QLabel("API URL:"))
        self._api_url_input = QLineEdit(config.api_url)
        self._api_url_input.setPlaceholderText("http://localhost:8080/v1/spell")
        api_row.addWidget(self._api_url_input)
        oracle_layout.addLayout(api_row)

        lang_row = QHBoxLayout()
        lang_row.addWidget(QLabel("Language:"))
        self._language_input = QLineEdit(config.language)
        lang_row.addWidget(self._language_input)
        oracle_layout.addLayout(lang_row)

        layout.addWidget(oracle_group)

        # === Hotkeys ===
        hotkey_group = QGroupBox("Hotkeys")
        hotkey_layout = QFormLayout(hotkey_group)
        self._hotkey_inputs = {}
        for command in COMMANDS:
            field = QLineEdit(config.hotkey(command.id))
            hotkey_layout.addRow(f"{command.name}:", field)
            self._hotkey_inputs[command.id] = field
        layout.addWidget(hotkey_group)

        # === Advanced ===
        adv_group = QGroupBox("Advanced")
        adv_layout = QFormLayout(adv_group)

        self._timeout_spin = QSpinBox()
        self._timeout_spin.setRange(10, 10000)
        self._timeout_spin.setSuffix(" ms")
        self._timeout_spin.setValue(config.api_timeout_ms)
        adv_layout.addRow("API timeout:", self._timeout_spin)

        self._retry_spin = QSpinBox()
        self._retry_spin.setRange(0, 10000)
        self._retry_spin.setSuffix(" ms")
        self._retry_spin.setValue(config.api_retry_window_ms)
        adv_layout.addRow("API retry window:", self._retry_spin)

        self._dictionary_input = QLineEdit(config.custom_dictionary_path)
        self._dictionary_input.setPlaceholderText("(platform default)")
        adv_layout.addRow("Custom dictionary:", self._dictionary_input)

        self._debug_cb = QCheckBox("Enable debug logging")
        self._debug_cb.setChecked(config.debug_logging)
        adv_layout.addRow(self._debug_cb)

        layout.addWidget(adv_group)

        # === Buttons ===
        btn_row = QHBoxLayout()
        save_btn = QPushButton("Save")
        save_btn.clicked.connect(self._save)
        btn_row.addWidget(save_btn)

        close_btn = QPushButton("Close")
        close_btn.clicked.connect(self.close)
        btn_row.addWidget(close_btn)

        layout.addLayout(btn_row)

        self._statusbar = QStatusBar()
        self.setStatusBar(self._statusbar)

    def _on_single_letter_toggled(self, checked):
        self._exceptions_input.setEnabled(checked)

    def _save(self):
        self.config.set("ignoreSingleLetterSuggestions", self._single_letter_cb.isChecked())
        self.config.set("singleLetterExceptions", self._exceptions_input.text().strip())
        self.config.set("suggestionsToIgnore", self._ignored_input.text().strip())
        self.config.set("keepIteratingWhenFiltered", self._keep_iterating_cb.isChecked())
        self.config.set("autocorrect", self._autocorrect_cb.isChecked())
        self.config.set("scanMode", "line" if self._radio_line.isChecked() else "paragraph")
        if self._radio_api.isChecked():
            self.config.set("oracle", "api")
        elif self._radio_none.isChecked():
            self.config.set("oracle", "none")
        elif self._radio_pyspell.isChecked():
            self.config.set("oracle", "pyspellchecker")
        self.config.set("apiUrl", self._api_url_input.text().strip())
        self.config.set("language", self._language_input.text().strip() or "en")
        self.config.set("apiTimeoutMs", self._timeout_spin.value())
        self.config.set("apiRetryWindowMs", self._retry_spin.value())
        self.config.set("customDictionaryPath", self._dictionary_input.text().strip())
        self.config.set("debugLogging", self._debug_cb.isChecked())
        hotkeys = {cid: field.text().strip() for cid, field in self._hotkey_inputs.items()}
        self.config.set("hotkeys", hotkeys)
        logger.info("Settings saved to %s", self.config.config_file)
        self._statusbar.showMessage("Settings saved.", 3000)
        if self._on_saved:
            self._on_saved()
