"""Configuration management: JSON-based, stored in ~/.config/quickspellfix/."""
import json
import os
from pathlib import Path

DEFAULT_CONFIG = {
    "ignoreSingleLetterSuggestions": True,
    "singleLetterExceptions": "I a",  # space-separated
    "suggestionsToIgnore": "",  # space-separated
    "keepIteratingWhenFiltered": False,
    "autocorrect": False,
    "scanMode": "paragraph",  # "paragraph" or "line"
    "oracle": "pyspellchecker",  # "pyspellchecker", "api" or "none"
    "language": "en",
    "apiUrl": "http://localhost:8080/v1/spell",
    "apiTimeoutMs": 500,
    "apiRetryWindowMs": 3000,
    "customDictionaryPath": "",  # empty = platform default
    "debugLogging": False,
    "hotkeys": {
        "fix-previous-spelling": "Alt+F",
        "cycle-suggestion": "Alt+C",
        "restore-original-word": "Alt+R",
        "add-last-suggestion-to-ignored": "Alt+I",
    },
}

CONFIG_DIR = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config") / "quickspellfix"
CONFIG_FILE = CONFIG_DIR / "config.json"


def split_words(value) -> list:
    """Split a space-separated settings value, dropping empty entries.

    Hand-edited configs may hold a number or list here; lists are taken
    as words, anything else is read through ``str``.
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(w) for w in value if str(w).strip()]
    return [w for w in str(value).split() if w]


class Config:
    def __init__(self, config_file=None):
        self.config_file = Path(config_file) if config_file else CONFIG_FILE
        self._data = dict(DEFAULT_CONFIG)
        self._data["hotkeys"] = dict(DEFAULT_CONFIG["hotkeys"])
        self.load()

    def load(self):
        if self.config_file.exists():
            try:
                with open(self.config_file, "r", encoding="utf-8") as f:
                    stored = json.load(f)
                hotkeys = stored.pop("hotkeys", None)
                self._data.update(stored)
                if isinstance(hotkeys, dict):
                    self._data["hotkeys"].update(hotkeys)
            except (json.JSONDecodeError, OSError, AttributeError):
                pass

    def save(self):
        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w", encoding="utf-8") as f:
            json.dump(self._data, f, indent=2, ensure_ascii=False)

    def get(self, key, default=None):
        return self._data.get(key, default)

    def set(self, key, value):
        self._data[key] = value
        self.save()

    @property
    def ignore_single_letter_suggestions(self):
        return bool(self._data["ignoreSingleLetterSuggestions"])

    @ignore_single_letter_suggestions.setter
    def ignore_single_letter_suggestions(self, val):
        self._data["ignoreSingleLetterSuggestions"] = bool(val)
        self.save()

    @property
    def single_letter_exceptions(self):
        return set(split_words(self._data["singleLetterExceptions"]))

    @property
    def suggestions_to_ignore(self):
        return set(split_words(self._data["suggestionsToIgnore"]))

    def add_suggestion_to_ignore(self, suggestion: str) -> bool:
        """Persist suggestion into the ignore list. Returns False if already there."""
        words = split_words(self._data["suggestionsToIgnore"])
        if suggestion in words:
            return False
        words.append(suggestion)
        self.set("suggestionsToIgnore", " ".join(words))
        return True

    @property
    def keep_iterating_when_filtered(self):
        return bool(self._data["keepIteratingWhenFiltered"])

    @property
    def autocorrect(self):
        return bool(self._data["autocorrect"])

    @autocorrect.setter
    def autocorrect(self, val):
        self._data["autocorrect"] = bool(val)
        self.save()

    @property
    def scan_mode(self):
        mode = self._data.get("scanMode", "paragraph")
        return mode if mode in ("paragraph", "line") else "paragraph"

    @property
    def oracle(self):
        return self._data.get("oracle", "pyspellchecker")

    @property
    def language(self):
        return self._data.get("language", "en")

    @property
    def api_url(self):
        return self._data["apiUrl"]

    @property
    def api_timeout_ms(self):
        return self._data["apiTimeoutMs"]

    @property
    def api_retry_window_ms(self):
        return self._data.get("apiRetryWindowMs", 3000)

    @property
    def custom_dictionary_path(self):
        return self._data.get("customDictionaryPath") or ""

    @property
    def debug_logging(self):
        return bool(self._data["debugLogging"])

    def hotkey(self, command_id: str) -> str:
        return self._data["hotkeys"].get(command_id, "")
