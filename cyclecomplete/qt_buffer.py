"""Buffer backed by a Qt QPlainTextEdit."""
import logging
from typing import Optional

from PyQt5.QtGui import QTextCursor
from PyQt5.QtWidgets import QPlainTextEdit, QWidget

from cyclecomplete.buffer import BaseBuffer

logger = logging.getLogger(__name__)


def _utf16_len(text: str) -> int:
    return len(text.encode("utf-16-le")) // 2


class QtTextBuffer(BaseBuffer):
    """Adapts a QPlainTextEdit to the buffer interface.

    Qt counts positions in UTF-16 code units while the engine works on
    Python characters, so positions are converted at the Qt boundary.
    The plain text is cached until the document reports a change.
    """

    def __init__(self, editor: QPlainTextEdit, popup: Optional[QWidget] = None,
                 extra_word_chars: str = ""):
        super().__init__(extra_word_chars)
        self.editor = editor
        self.popup = popup
        self._text: Optional[str] = None
        self._edit_cursor: Optional[QTextCursor] = None
        editor.document().contentsChanged.connect(self._invalidate)

    def _invalidate(self):
        self._text = None

    @property
    def text(self) -> str:
        if self._text is None:
            self._text = self.editor.document().toPlainText()
        return self._text

    def _to_qt(self, pos: int) -> int:
        return _utf16_len(self.text[:pos])

    def _from_qt(self, qt_pos: int) -> int:
        text = self.text
        units = 0
        for index, char in enumerate(text):
            if units >= qt_pos:
                return index
            units += 2 if ord(char) > 0xFFFF else 1
        return len(text)

    def get_cursor_position(self) -> int:
        return self._from_qt(self.editor.textCursor().selectionStart())

    def set_cursor_position(self, pos: int):
        cursor = self.editor.textCursor()
        cursor.setPosition(self._to_qt(pos))
        self.editor.setTextCursor(cursor)

    def replace_range(self, start: int, end: int, text: str):
        old = self.text
        qt_start, qt_end = self._to_qt(start), self._to_qt(end)
        cursor = self._edit_cursor
        if cursor is None:
            cursor = QTextCursor(self.editor.document())
        cursor.setPosition(qt_start)
        cursor.setPosition(qt_end, QTextCursor.KeepAnchor)
        cursor.insertText(text)
        # contentsChanged is held back until the edit block ends
        self._text = old[:start] + text + old[end:]

    def begin_undo_group(self):
        if self._edit_cursor is None:
            self._edit_cursor = QTextCursor(self.editor.document())
            self._edit_cursor.beginEditBlock()

    def end_undo_group(self):
        if self._edit_cursor is not None:
            self._edit_cursor.endEditBlock()
            self._edit_cursor = None

    def dismiss_popup(self):
        if self.popup is not None and self.popup.isVisible():
            self.popup.hide()
