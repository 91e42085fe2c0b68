"""Tests for JSON configuration and the custom dictionary."""
import sys
import os
import json
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from quickspellfix.config import Config, split_words
from quickspellfix.custom_dictionary import CustomDictionary, default_dictionary_path
from quickspellfix.pipeline import FilterConfig


def test_defaults(tmp_path):
    config = Config(config_file=tmp_path / "config.json")
    assert config.ignore_single_letter_suggestions is True
    assert config.single_letter_exceptions == {"I", "a"}
    assert config.suggestions_to_ignore == set()
    assert config.keep_iterating_when_filtered is False
    assert config.autocorrect is False
    assert config.scan_mode == "paragraph"
    assert config.hotkey("cycle-suggestion") == "Alt+C"


def test_stored_values_merge_with_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "autocorrect": True,
        "scanMode": "line",
        "hotkeys": {"cycle-suggestion": "Ctrl+Alt+C"},
    }))
    config = Config(config_file=path)
    assert config.autocorrect is True
    assert config.scan_mode == "line"
    assert config.hotkey("cycle-suggestion") == "Ctrl+Alt+C"
    assert config.hotkey("restore-original-word") == "Alt+R"


def test_unknown_scan_mode_falls_back(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"scanMode": "sideways"}))
    assert Config(config_file=path).scan_mode == "paragraph"


def test_broken_file_keeps_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    config = Config(config_file=path)
    assert config.single_letter_exceptions == {"I", "a"}


def test_add_suggestion_to_ignore_persists(tmp_path):
    path = tmp_path / "sub" / "config.json"
    config = Config(config_file=path)
    assert config.add_suggestion_to_ignore("Th") is True
    assert config.add_suggestion_to_ignore("ht") is True
    assert config.add_suggestion_to_ignore("Th") is False
    reloaded = Config(config_file=path)
    assert reloaded.get("suggestionsToIgnore") == "Th ht"
    assert reloaded.suggestions_to_ignore == {"Th", "ht"}


def test_split_words():
    assert split_words("  I  a ") == ["I", "a"]
    assert split_words("") == []
    assert split_words(None) == []


def test_split_words_tolerates_hand_edited_values():
    assert split_words(5) == ["5"]
    assert split_words(["ht", "Th", ""]) == ["ht", "Th"]


def test_non_string_word_lists_in_config_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"suggestionsToIgnore": 5, "singleLetterExceptions": ["I"]}),
                    encoding="utf-8")
    config = Config(config_file=path)
    filters = FilterConfig.from_config(config)
    assert filters.ignored_suggestions == frozenset({"5"})
    assert filters.single_letter_exceptions == frozenset({"I"})
    assert config.add_suggestion_to_ignore("ht") is True
    assert config.suggestions_to_ignore == {"5", "ht"}


def test_custom_dictionary_load(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("Obsidian\nkubernetes\n\n  trailing  \n", encoding="utf-8")
    dictionary = CustomDictionary.load(path)
    assert len(dictionary) == 3
    assert "Obsidian" in dictionary
    assert "Kubernetes" in dictionary
    assert "trailing" in dictionary
    assert "obsidian" not in dictionary


def test_custom_dictionary_missing_file(tmp_path):
    dictionary = CustomDictionary.load(tmp_path / "missing.txt")
    assert len(dictionary) == 0
    assert "anything" not in dictionary


def test_default_dictionary_path_linux(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert default_dictionary_path() == tmp_path / "quickspellfix" / "custom_dictionary.txt"


def test_default_dictionary_path_windows(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "platform", "win32")
    monkeypatch.setenv("APPDATA", str(tmp_path))
    assert default_dictionary_path() == tmp_path / "QuickSpellFix" / "Custom Dictionary.txt"
