"""Completion session: drives a scan and the cycler for each cycle action."""
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from cyclecomplete.candidates import CandidateStore
from cyclecomplete.config import Config
from cyclecomplete.cycler import Direction, cycle
from cyclecomplete.scanner import find_candidates

logger = logging.getLogger(__name__)


@dataclass
class SessionState:
    previous_prefix: Optional[str] = None     # prefix the candidates were built for
    previous_selection: Optional[str] = None  # completion last written to the buffer
    candidates: CandidateStore = field(default_factory=CandidateStore)
    document: Any = None                      # buffer the candidates came from


def _log_report(message: str):
    logger.info(message)


class SessionController:
    """Handles the cycle-forward/backward actions for the current document.

    A session lasts as long as the text before the cursor is still the
    completion inserted by the previous action. Typing, moving the cursor
    or switching document starts a new session with a fresh scan.
    """

    def __init__(self, config: Config, report: Optional[Callable[[str], None]] = None):
        self.config = config
        self.report = report or _log_report
        self._state = SessionState()

    @property
    def state(self) -> SessionState:
        return self._state

    def reset(self):
        """Forget the current session (document switch or plugin cleanup)."""
        self._state = SessionState()

    def _continues_session(self, buffer, prefix: str) -> bool:
        state = self._state
        return (state.previous_selection is not None
                and state.document is buffer
                and prefix == state.previous_selection)

    def cycle(self, buffer, direction: Direction = Direction.FORWARD) -> Optional[str]:
        """Replace the word before the cursor with the next completion.

        Returns the inserted completion, or None when nothing was changed.
        """
        # selection start, so the direction of a selection does not matter
        pos = buffer.get_cursor_position()
        start = buffer.word_start(pos)
        end = buffer.word_end(pos)

        # cursor in front of a word or not touching one: nothing to complete
        if pos <= start:
            logger.debug("No prefix before cursor at %d", pos)
            return None

        prefix = buffer.get_text_range(start, pos)
        word = buffer.get_text_range(start, end)

        if not self._continues_session(buffer, prefix):
            self._state = SessionState(
                previous_prefix=prefix,
                candidates=find_candidates(buffer, prefix, word, pos, self.config),
                document=buffer,
            )

        state = self._state
        if not state.candidates:
            self.report('No completions found for "%s".' % prefix)
            self.reset()
            return None

        completion = cycle(state.candidates.texts(), state.previous_selection, direction)
        logger.debug("Cycle %s from %r to %r", direction.name.lower(),
                     state.previous_selection, completion)

        buffer.dismiss_popup()
        with buffer.undo_group():
            buffer.replace_range(
                start, end if self.config.remove_trailing_word_part else pos, completion)
            buffer.set_cursor_position(start + len(completion))

        state.previous_selection = completion
        return completion

    def cycle_forward(self, buffer) -> Optional[str]:
        return self.cycle(buffer, Direction.FORWARD)

    def cycle_backward(self, buffer) -> Optional[str]:
        return self.cycle(buffer, Direction.BACKWARD)
