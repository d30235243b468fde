"""Text buffers: the editor-side view the completion engine works on."""
import re
from contextlib import contextmanager

from cyclecomplete.matcher import is_word_char
from cyclecomplete.undo import UndoStack, EditEntry


class BaseBuffer:
    """Word extents and searching over a buffer's text.

    Subclasses provide the `text` property, cursor access and editing.
    All positions are character offsets into `text`.
    """

    def __init__(self, extra_word_chars: str = ""):
        self.extra_word_chars = extra_word_chars

    @property
    def text(self) -> str:
        raise NotImplementedError

    def get_cursor_position(self) -> int:
        raise NotImplementedError

    def set_cursor_position(self, pos: int):
        raise NotImplementedError

    def replace_range(self, start: int, end: int, text: str):
        raise NotImplementedError

    def begin_undo_group(self):
        pass

    def end_undo_group(self):
        pass

    def dismiss_popup(self):
        pass

    @contextmanager
    def undo_group(self):
        """Group every edit made inside the block into one undo step."""
        self.begin_undo_group()
        try:
            yield self
        finally:
            self.end_undo_group()

    def get_length(self) -> int:
        return len(self.text)

    def get_text_range(self, start: int, end: int) -> str:
        return self.text[start:end]

    def is_word_char(self, char: str) -> bool:
        return is_word_char(char, self.extra_word_chars)

    def word_start(self, pos: int) -> int:
        """Move back from pos over word characters."""
        text = self.text
        while pos > 0 and self.is_word_char(text[pos - 1]):
            pos -= 1
        return pos

    def word_end(self, pos: int) -> int:
        """Move forward from pos over word characters."""
        text = self.text
        length = len(text)
        while pos < length and self.is_word_char(text[pos]):
            pos += 1
        return pos

    def _word_char_class(self) -> str:
        return r"\w" + "".join(re.escape(c) for c in self.extra_word_chars)

    def find_text(self, pattern: str, start: int, end: int,
                  word_start_only: bool = True, match_case: bool = True) -> int:
        """Find pattern inside [start, end]. Returns the match start or -1.

        With word_start_only the character before the match must not be a
        word character; that character may lie before `start`.
        """
        if not pattern:
            return -1
        regex = re.escape(pattern)
        if word_start_only:
            regex = "(?<![%s])%s" % (self._word_char_class(), regex)
        flags = 0 if match_case else re.IGNORECASE
        match = re.compile(regex, flags).search(self.text, max(start, 0), end)
        return match.start() if match else -1


class TextBuffer(BaseBuffer):
    """In-memory buffer with a cursor and grouped undo."""

    def __init__(self, text: str = "", cursor: int = None, extra_word_chars: str = ""):
        super().__init__(extra_word_chars)
        self._text = text
        self._cursor = len(text) if cursor is None else cursor
        self._undo_stack = UndoStack()
        self.popup_visible = False

    @property
    def text(self) -> str:
        return self._text

    @property
    def undo_stack(self):
        return self._undo_stack

    def get_cursor_position(self) -> int:
        return self._cursor

    def set_cursor_position(self, pos: int):
        self._cursor = max(0, min(pos, len(self._text)))

    def replace_range(self, start: int, end: int, text: str):
        removed = self._text[start:end]
        self._undo_stack.record(EditEntry(start, removed, text), self._cursor)
        self._text = self._text[:start] + text + self._text[end:]
        if self._cursor > end:
            self._cursor += len(text) - (end - start)
        elif self._cursor > start:
            self._cursor = start + len(text)

    def insert(self, text: str):
        """Type text at the cursor, as the user would."""
        pos = self._cursor
        self.replace_range(pos, pos, text)
        self._cursor = pos + len(text)

    def begin_undo_group(self):
        self._undo_stack.begin_group(self._cursor)

    def end_undo_group(self):
        self._undo_stack.end_group()

    def dismiss_popup(self):
        self.popup_visible = False

    def undo(self) -> bool:
        """Revert the most recent edit group. Returns False if nothing to undo."""
        group = self._undo_stack.pop()
        if group is None:
            return False
        for entry in reversed(group.edits):
            end = entry.start + len(entry.inserted)
            self._text = self._text[:entry.start] + entry.removed + self._text[end:]
        self._cursor = group.cursor_before
        return True
