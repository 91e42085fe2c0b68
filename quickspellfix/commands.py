"""Command dispatch: ties the editor host, corrector and correction session."""
import logging
from typing import Callable, Dict, NamedTuple, Optional

from quickspellfix.config import Config
from quickspellfix.corrector import Corrector
from quickspellfix.custom_dictionary import CustomDictionary
from quickspellfix.oracle import create_oracle
from quickspellfix.pipeline import SuggestionPipeline
from quickspellfix.session import CorrectionSession, SessionSlot

logger = logging.getLogger(__name__)

FIX_PREVIOUS_SPELLING = "fix-previous-spelling"
CYCLE_SUGGESTION = "cycle-suggestion"
RESTORE_ORIGINAL_WORD = "restore-original-word"
ADD_LAST_SUGGESTION_TO_IGNORED = "add-last-suggestion-to-ignored"


class Command(NamedTuple):
    id: str
    name: str


COMMANDS = (
    Command(FIX_PREVIOUS_SPELLING, "Fix previous spelling"),
    Command(CYCLE_SUGGESTION, "Cycle suggestion"),
    Command(RESTORE_ORIGINAL_WORD, "Restore original word"),
    Command(ADD_LAST_SUGGESTION_TO_IGNORED, "Add last suggestion to ignored suggestions"),
)


class CommandDispatcher:
    """Runs commands against a host and owns the last-correction session."""

    def __init__(self, config: Config, corrector: Corrector):
        self.config = config
        self.corrector = corrector
        self._slot = SessionSlot()
        self._handlers: Dict[str, Callable] = {
            FIX_PREVIOUS_SPELLING: self.fix_previous_spelling,
            CYCLE_SUGGESTION: self.cycle_suggestion,
            RESTORE_ORIGINAL_WORD: self.restore_original_word,
            ADD_LAST_SUGGESTION_TO_IGNORED: self.add_last_suggestion_to_ignored,
        }

    @classmethod
    def from_config(cls, config: Config) -> "CommandDispatcher":
        """Build the full stack; the spell backend is chosen here, once."""
        dictionary = CustomDictionary.load(config.custom_dictionary_path or None)
        pipeline = SuggestionPipeline(create_oracle(config), dictionary)
        return cls(config, Corrector(config, pipeline))

    @property
    def session(self) -> Optional[CorrectionSession]:
        return self._slot.get()

    def run(self, command_id: str, host):
        handler = self._handlers.get(command_id)
        if handler is None:
            logger.warning("Unknown command: %s", command_id)
            return
        logger.debug("Running command %s", command_id)
        handler(host)

    def fix_previous_spelling(self, host):
        session = self.corrector.fix_previous(host)
        if session is not None:
            self._slot.put(session)

    def autocorrect(self, host):
        """Space-triggered fix of the word just typed."""
        session = self.corrector.autocorrect_last_word(host)
        if session is not None:
            self._slot.put(session)

    def cycle_suggestion(self, host):
        self.corrector.cycle_forward(host, self._slot.get())

    def restore_original_word(self, host):
        self.corrector.revert(host, self._slot.get())

    def add_last_suggestion_to_ignored(self, host):
        self.corrector.exclude_current(host, self._slot.get())

    def should_autocorrect(self, char: str) -> bool:
        """Whether a typed character should schedule an autocorrect."""
        return char == " " and self.config.autocorrect
