"""Correction operations: find and fix a word, then cycle, restore or ignore.

Every operation runs to completion against the editor host it is given.
Operations on an existing correction take the session explicitly; they
re-read the live line rather than trusting the stored end column, so
edits made elsewhere on the line since the correction are tolerated.
"""
import logging
from typing import List, Optional

from quickspellfix.buffer import Position
from quickspellfix.locator import WordSpan, candidate_spans, last_word_before
from quickspellfix.pipeline import FilterConfig, Outcome, SuggestionPipeline
from quickspellfix.session import CorrectionSession

logger = logging.getLogger(__name__)


class Corrector:
    """Spelling fixer bound to a configuration and a suggestion pipeline."""

    def __init__(self, config, pipeline: SuggestionPipeline):
        self.config = config
        self.pipeline = pipeline

    def fix_previous(self, host) -> Optional[CorrectionSession]:
        """Replace the closest misspelled word before the cursor.

        Returns the new session, or None when nothing was changed.
        """
        cursor = host.get_cursor()
        filters = FilterConfig.from_config(self.config)

        for span in candidate_spans(host, cursor, self.config.scan_mode):
            result = self.pipeline.resolve(span.text, filters)
            if result.outcome is Outcome.NOT_MISSPELLED:
                continue
            if result.outcome is Outcome.FULLY_FILTERED:
                host.notify(f'No valid suggestions for "{span.text}"')
                if filters.continue_on_fully_filtered:
                    continue
                return None
            return self.apply(host, span, result.suggestions)

        logger.debug("No misspelled word before %s", tuple(cursor))
        return None

    def autocorrect_last_word(self, host) -> Optional[CorrectionSession]:
        """Fix the word just finished by a space, keeping the cursor after it."""
        cursor = host.get_cursor()
        span = last_word_before(host, cursor)
        if span is None:
            return None

        result = self.pipeline.resolve(span.text, FilterConfig.from_config(self.config))
        if result.outcome is Outcome.FULLY_FILTERED:
            host.notify(f'No valid suggestions for "{span.text}"')
            return None
        if not result.ranked:
            return None

        session = self.apply(host, span, result.suggestions)
        delta = len(session.anchor.text) - len(span.text)
        host.set_cursor(Position(cursor.line, cursor.col + delta))
        return session

    def apply(self, host, span: WordSpan, candidates: List[str]) -> CorrectionSession:
        """Put the best candidate in place of span and start a new session."""
        first = candidates[0]
        logger.info("Correcting: %r → %r", span.text, first)
        host.replace_range(first, span.start, span.end)
        return CorrectionSession(
            original_word=span.text,
            candidates=list(candidates),
            index=0,
            anchor=WordSpan(first, span.start_line, span.start_col, span.start_col + len(first)),
        )

    def cycle_forward(self, host, session: Optional[CorrectionSession]) -> bool:
        """Swap in the next candidate, wrapping around after the last."""
        if not self._usable(host, session):
            return False
        next_index = (session.index + 1) % len(session.candidates)
        logger.info("Cycle: %r → %r", session.anchor.text, session.candidates[next_index])
        self._materialize(host, session, session.candidates[next_index])
        session.index = next_index
        return True

    def revert(self, host, session: Optional[CorrectionSession]) -> bool:
        """Put the original word back. The session and its index are kept."""
        if not self._usable(host, session):
            return False
        logger.info("Restore: %r → %r", session.anchor.text, session.original_word)
        self._materialize(host, session, session.original_word)
        return True

    def exclude_current(self, host, session: Optional[CorrectionSession]) -> bool:
        """Ignore the current candidate from now on and show another one."""
        if not self._usable(host, session):
            return False

        excluded = session.current
        if excluded in self.config.suggestions_to_ignore:
            host.notify(f'"{excluded}" is already in ignored suggestions')
            return False

        del session.candidates[session.index]
        self.config.add_suggestion_to_ignore(excluded)
        logger.info("Ignoring suggestion %r for %r", excluded, session.original_word)

        if session.candidates:
            if session.index >= len(session.candidates):
                session.index = 0
            self._materialize(host, session, session.candidates[session.index])
            host.notify(f'Added "{excluded}" to ignored suggestions')
        else:
            session.index = 0
            self._materialize(host, session, session.original_word)
            host.notify(f'Added "{excluded}" to ignored suggestions; no suggestions left, '
                        f'restored "{session.original_word}"')
        return True

    def _usable(self, host, session: Optional[CorrectionSession]) -> bool:
        if session is None or session.anchor is None:
            logger.debug("No correction to act on")
            return False
        line = session.anchor.start_line
        if line >= host.line_count() or host.get_cursor().line != line:
            logger.debug("Cursor left line %d of the last correction", line)
            return False
        if not session.candidates:
            host.notify(f'No suggestions left for "{session.original_word}"')
            return False
        return True

    @staticmethod
    def _materialize(host, session: CorrectionSession, text: str):
        """Replace whatever now occupies the anchor with text."""
        anchor = session.anchor
        line = host.get_line(anchor.start_line)
        occupant = line[anchor.start_col:anchor.end_col]
        host.replace_range(
            text,
            anchor.start,
            Position(anchor.start_line, anchor.start_col + len(occupant)),
        )
        session.anchor = WordSpan(text, anchor.start_line, anchor.start_col,
                                  anchor.start_col + len(text))
