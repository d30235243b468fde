"""Undo stack: groups buffer edits into single user-facing undo steps."""
from dataclasses import dataclass, field
from typing import List, Optional
from collections import deque


@dataclass
class EditEntry:
    start: int          # offset where the edit happened
    removed: str        # text that was replaced
    inserted: str       # text put in its place


@dataclass
class EditGroup:
    edits: List[EditEntry] = field(default_factory=list)
    cursor_before: int = 0  # cursor position to restore on undo


class UndoStack:
    """Stack of edit groups; nested begin/end pairs collapse into one group."""

    def __init__(self, max_size: int = 100):
        self._stack: deque[EditGroup] = deque(maxlen=max_size)
        self._open: Optional[EditGroup] = None
        self._depth = 0

    def begin_group(self, cursor: int):
        self._depth += 1
        if self._depth == 1:
            self._open = EditGroup(cursor_before=cursor)

    def end_group(self):
        if self._depth == 0:
            raise RuntimeError("end_group() without matching begin_group()")
        self._depth -= 1
        if self._depth == 0:
            if self._open.edits:
                self._stack.append(self._open)
            self._open = None

    def record(self, entry: EditEntry, cursor: int):
        if self._open is not None:
            self._open.edits.append(entry)
        else:
            self._stack.append(EditGroup([entry], cursor))

    def pop(self) -> Optional[EditGroup]:
        if self._stack:
            return self._stack.pop()
        return None

    @property
    def size(self) -> int:
        return len(self._stack)
