"""Suggestion pipeline: oracle lookup followed by suggestion filters."""
import enum
import logging
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional

from quickspellfix.custom_dictionary import CustomDictionary

logger = logging.getLogger(__name__)


class Outcome(enum.Enum):
    NOT_MISSPELLED = "not_misspelled"
    FULLY_FILTERED = "fully_filtered"
    RANKED = "ranked"


@dataclass(frozen=True)
class Candidates:
    outcome: Outcome
    suggestions: List[str] = field(default_factory=list)

    @property
    def ranked(self) -> bool:
        return self.outcome is Outcome.RANKED


NOT_MISSPELLED = Candidates(Outcome.NOT_MISSPELLED)


@dataclass(frozen=True)
class FilterConfig:
    suppress_single_letter_suggestions: bool = True
    single_letter_exceptions: FrozenSet[str] = frozenset()
    ignored_suggestions: FrozenSet[str] = frozenset()
    continue_on_fully_filtered: bool = False

    @classmethod
    def from_config(cls, config) -> "FilterConfig":
        return cls(
            suppress_single_letter_suggestions=config.ignore_single_letter_suggestions,
            single_letter_exceptions=frozenset(config.single_letter_exceptions),
            ignored_suggestions=frozenset(config.suggestions_to_ignore),
            continue_on_fully_filtered=config.keep_iterating_when_filtered,
        )


def filter_suggestions(suggestions: List[str], config: FilterConfig) -> List[str]:
    """Drop unwanted suggestions, keeping the rest in their original order."""
    result = list(suggestions)
    if config.suppress_single_letter_suggestions:
        result = [s for s in result if len(s) != 1 or s in config.single_letter_exceptions]
    return [s for s in result if s not in config.ignored_suggestions]


class SuggestionPipeline:
    """Decides whether a word needs fixing and with what."""

    def __init__(self, oracle, dictionary: Optional[CustomDictionary] = None):
        self.oracle = oracle
        self.dictionary = dictionary if dictionary is not None else CustomDictionary()

    def resolve(self, word: str, config: FilterConfig) -> Candidates:
        if word in self.dictionary:
            return NOT_MISSPELLED

        try:
            if not self.oracle.is_misspelled(word):
                return NOT_MISSPELLED
            raw = list(self.oracle.suggest(word) or [])
        except Exception as e:
            logger.debug("Spell backend failed for %r: %s", word, e)
            return NOT_MISSPELLED

        if not raw:
            logger.debug("No suggestions for %r", word)
            return NOT_MISSPELLED

        kept = filter_suggestions(raw, config)
        if not kept:
            logger.debug("All suggestions for %r filtered out: %r", word, raw)
            return Candidates(Outcome.FULLY_FILTERED)
        return Candidates(Outcome.RANKED, kept)
