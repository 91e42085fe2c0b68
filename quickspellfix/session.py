"""Last-correction session: what cycle/restore/ignore act on."""
from dataclasses import dataclass, field
from typing import List, Optional

from quickspellfix.locator import WordSpan


@dataclass
class CorrectionSession:
    original_word: str                                    # what the user typed
    candidates: List[str] = field(default_factory=list)   # best first
    index: int = 0                                        # candidate now in the document
    anchor: Optional[WordSpan] = None                     # where it sits

    @property
    def current(self) -> Optional[str]:
        if 0 <= self.index < len(self.candidates):
            return self.candidates[self.index]
        return None


class SessionSlot:
    """Holds at most one session; putting a new one drops the old."""

    def __init__(self):
        self._session: Optional[CorrectionSession] = None

    def put(self, session: CorrectionSession):
        self._session = session

    def get(self) -> Optional[CorrectionSession]:
        return self._session
