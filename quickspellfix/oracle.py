"""Spell-oracle backends: answer "is this misspelled?" and "what instead?".

The backend is chosen once at startup by ``create_oracle``; everything
downstream only sees the ``SpellOracle`` interface.
"""
import logging
import time
from typing import List, Optional

import requests

logger = logging.getLogger(__name__)


class SpellOracle:
    """Interface for spelling backends."""

    name = "base"

    def is_misspelled(self, word: str) -> bool:
        raise NotImplementedError

    def suggest(self, word: str) -> List[str]:
        """Ranked suggestions, best first."""
        raise NotImplementedError


class NullOracle(SpellOracle):
    """Stand-in when no backend is available: every word is correct."""

    name = "none"

    def is_misspelled(self, word: str) -> bool:
        return False

    def suggest(self, word: str) -> List[str]:
        return []


class PySpellOracle(SpellOracle):
    """Direct dictionary lookup with pyspellchecker."""

    name = "pyspellchecker"

    def __init__(self, language: str = "en", distance: int = 2):
        from spellchecker import SpellChecker
        self._spell = SpellChecker(language=language, distance=distance)

    def is_misspelled(self, word: str) -> bool:
        return bool(self._spell.unknown([word]))

    def suggest(self, word: str) -> List[str]:
        lower = word.lower()
        candidates = set(self._spell.candidates(lower) or ())
        candidates.discard(lower)
        ranked = []
        for candidate in self._rank(lower, candidates):
            cased = self._apply_casing(word, candidate)
            if cased not in ranked:
                ranked.append(cased)
        return ranked

    def _rank(self, original: str, candidates) -> List[str]:
        """Order by edit distance, then corpus frequency, then length difference."""
        scored = []
        for c in candidates:
            dist = self._damerau_levenshtein(original, c)
            freq = self._spell.word_usage_frequency(c)
            len_diff = abs(len(original) - len(c))
            scored.append((dist, -freq, len_diff, c))
        scored.sort()
        return [c for _, _, _, c in scored]

    @staticmethod
    def _apply_casing(original: str, corrected: str) -> str:
        """Apply the casing pattern of original to corrected."""
        if len(original) > 1 and original.isupper():
            return corrected.upper()
        if original and original[0].isupper():
            return corrected[:1].upper() + corrected[1:]
        return corrected

    @staticmethod
    def _damerau_levenshtein(a: str, b: str) -> int:
        """Damerau-Levenshtein distance (with transpositions)."""
        la, lb = len(a), len(b)
        d = [[0] * (lb + 1) for _ in range(la + 1)]

        for i in range(la + 1):
            d[i][0] = i
        for j in range(lb + 1):
            d[0][j] = j

        for i in range(1, la + 1):
            for j in range(1, lb + 1):
                cost = 0 if a[i - 1] == b[j - 1] else 1
                d[i][j] = min(
                    d[i - 1][j] + 1,
                    d[i][j - 1] + 1,
                    d[i - 1][j - 1] + cost,
                )
                if (i > 1 and j > 1 and
                        a[i - 1] == b[j - 2] and a[i - 2] == b[j - 1]):
                    d[i][j] = min(d[i][j], d[i - 2][j - 2] + cost)

        return d[la][lb]


class HTTPSpellOracle(SpellOracle):
    """Spell service reached over HTTP.

    Expected API: POST ``{"word": ..., "language": ...}``, answered with
    ``{"misspelled": bool, "suggestions": [...]}``. While the service is
    unreachable the request is retried every ``poll_interval_ms`` until
    ``retry_window_ms`` runs out; then the word counts as having no
    suggestion, and further lookups answer the same at once until another
    retry window has passed.
    """

    name = "api"

    def __init__(self, url: str, language: str = "en", timeout_ms: int = 500,
                 retry_window_ms: int = 3000, poll_interval_ms: int = 100):
        self.url = url
        self.language = language
        self.timeout_sec = timeout_ms / 1000.0
        self.retry_window_sec = retry_window_ms / 1000.0
        self.poll_interval_sec = poll_interval_ms / 1000.0
        self._last_word: Optional[str] = None
        self._last_result: Optional[dict] = None
        self._unreachable_until = 0.0

    def is_misspelled(self, word: str) -> bool:
        result = self._lookup(word)
        return bool(result and result["misspelled"])

    def suggest(self, word: str) -> List[str]:
        result = self._lookup(word)
        return list(result["suggestions"]) if result else []

    def _lookup(self, word: str) -> Optional[dict]:
        if word == self._last_word:
            return self._last_result
        result = self._request(word)
        if result is not None:
            self._last_word = word
            self._last_result = result
        return result

    def _request(self, word: str) -> Optional[dict]:
        now = time.monotonic()
        if now < self._unreachable_until:
            return None
        payload = {"word": word, "language": self.language}
        deadline = now + self.retry_window_sec
        while True:
            try:
                resp = requests.post(self.url, json=payload, timeout=self.timeout_sec)
                resp.raise_for_status()
                return self._extract_result(resp.json())
            except (requests.Timeout, requests.ConnectionError):
                now = time.monotonic()
                if now + self.poll_interval_sec >= deadline:
                    logger.debug("Spell API unreachable at %s, giving up on %r", self.url, word)
                    self._unreachable_until = now + self.retry_window_sec
                    return None
                time.sleep(self.poll_interval_sec)
            except (requests.RequestException, ValueError) as e:
                logger.debug("Spell API error for %r: %s", word, e)
                return None

    @staticmethod
    def _extract_result(data) -> Optional[dict]:
        """Normalize a response.

        Accepts ``{"misspelled": ..., "suggestions": [...]}``, a bare
        suggestion list, or ``{"suggestions": [...]}`` alone (misspelled
        when non-empty).
        """
        if isinstance(data, list):
            suggestions = data
            misspelled = bool(suggestions)
        elif isinstance(data, dict):
            suggestions = data.get("suggestions") or []
            misspelled = data.get("misspelled", bool(suggestions))
        else:
            return None
        suggestions = [s for s in suggestions if isinstance(s, str) and s]
        return {"misspelled": bool(misspelled), "suggestions": suggestions}


def create_oracle(config) -> SpellOracle:
    """Pick the spelling backend named in config."""
    kind = config.oracle
    try:
        if kind == "pyspellchecker":
            oracle = PySpellOracle(language=config.language)
        elif kind == "api":
            oracle = HTTPSpellOracle(
                url=config.api_url,
                language=config.language,
                timeout_ms=config.api_timeout_ms,
                retry_window_ms=config.api_retry_window_ms,
            )
        else:
            oracle = NullOracle()
    except Exception as e:
        logger.warning("Spell backend %r unavailable (%s), spell fixing disabled", kind, e)
        oracle = NullOracle()
    logger.info("Using spell backend: %s", oracle.name)
    return oracle
