"""User's custom dictionary: plain newline-separated word list."""
import logging
import os
import sys
from pathlib import Path
from typing import Iterable, Optional

logger = logging.getLogger(__name__)


def default_dictionary_path() -> Path:
    """Well-known location of the custom dictionary on this platform."""
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "QuickSpellFix" / "Custom Dictionary.txt"
    if sys.platform.startswith("win"):
        base = os.environ.get("APPDATA") or Path.home() / "AppData" / "Roaming"
        return Path(base) / "QuickSpellFix" / "Custom Dictionary.txt"
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / "quickspellfix" / "custom_dictionary.txt"


class CustomDictionary:
    """Words the user has declared correct."""

    def __init__(self, words: Iterable[str] = ()):
        self._words = {w for w in words if w}

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "CustomDictionary":
        path = Path(path) if path else default_dictionary_path()
        try:
            with open(path, "r", encoding="utf-8") as f:
                words = [line.strip() for line in f]
        except OSError:
            logger.debug("No custom dictionary at %s", path)
            return cls()
        except UnicodeDecodeError as e:
            logger.warning("Custom dictionary %s unreadable: %s", path, e)
            return cls()
        logger.debug("Loaded %d custom words from %s", len(words), path)
        return cls(words)

    def __contains__(self, word: str) -> bool:
        return word in self._words or word.lower() in self._words

    def __len__(self) -> int:
        return len(self._words)
