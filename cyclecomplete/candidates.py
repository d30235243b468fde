"""Candidate store: the working set of completions for one prefix."""
import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, List, Optional

logger = logging.getLogger(__name__)


class MatchType(IntEnum):
    EXACT = 0
    FUZZY_FORWARD = 1


class SortOrder(IntEnum):
    ALPHABETICAL = 0
    BY_DISTANCE = 1


@dataclass
class Candidate:
    text: str           # the word as found in the buffer
    distance: int       # offset of the nearest occurrence from the cursor
    match_type: MatchType = MatchType.EXACT


class CandidateStore:
    """Collects unique candidate words found by a scan.

    Neither the word being completed nor the trailing text is stored as a
    regular candidate; the trailing text comes back as the last entry
    appended by finalize(), so cycling always leads back to what the user
    typed and every text appears exactly once.
    """

    def __init__(self, current_word: str = "", trailing_text: Optional[str] = None):
        self._current_word = current_word
        self._trailing_text = current_word if trailing_text is None else trailing_text
        self._candidates: List[Candidate] = []
        self._trailing: Optional[Candidate] = None

    def __len__(self) -> int:
        return len(self._candidates) + (1 if self._trailing else 0)

    def __bool__(self) -> bool:
        return len(self) > 0

    def __iter__(self) -> Iterator[Candidate]:
        yield from self._candidates
        if self._trailing:
            yield self._trailing

    @property
    def finalized(self) -> bool:
        return self._trailing is not None

    def texts(self) -> List[str]:
        return [c.text for c in self]

    def find(self, text: str) -> Optional[Candidate]:
        for c in self._candidates:
            if c.text == text:
                return c
        return None

    def upsert(self, text: str, distance: int, match_type: MatchType) -> bool:
        """Add a found word. Returns True only if a new candidate was inserted."""
        if self._trailing is not None:
            raise RuntimeError("cannot add candidates to a finalized store")

        existing = self.find(text)
        if existing:
            existing.distance = min(existing.distance, distance)
            return False

        if not text or text in (self._current_word, self._trailing_text):
            return False

        self._candidates.append(Candidate(text, distance, match_type))
        return True

    def sort(self, order: SortOrder, skip_fuzzy_if_exact: bool = False):
        """Sort by the primary key, grouping exact before fuzzy matches.

        With skip_fuzzy_if_exact only one kind of match can be present
        after a scan, so the match type is left out of the key.
        """
        if order == SortOrder.ALPHABETICAL:
            def primary(c):
                return c.text
        else:
            def primary(c):
                return c.distance

        # on equal keys the candidate found last comes first
        self._candidates.reverse()
        if skip_fuzzy_if_exact:
            self._candidates.sort(key=lambda c: (primary(c),))
        else:
            self._candidates.sort(key=lambda c: (c.match_type, primary(c)))

    def finalize(self):
        """Append the trailing text as the last entry, if anything was found."""
        if self._candidates and self._trailing is None:
            self._trailing = Candidate(self._trailing_text, 0, MatchType.EXACT)
            logger.debug("Finalized %d candidate(s), trailing %r",
                         len(self._candidates), self._trailing_text)

    def clear(self):
        self._candidates.clear()
        self._trailing = None
