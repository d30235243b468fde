"""Minimal plain-text editor window hosting the completion plugin."""
import logging
from pathlib import Path

from PyQt5.QtWidgets import (
    QMainWindow, QPlainTextEdit, QAction, QFileDialog, QMessageBox,
)
from PyQt5.QtGui import QKeySequence, QFont

from cyclecomplete.qt_buffer import QtTextBuffer

logger = logging.getLogger(__name__)


class EditorWindow(QMainWindow):
    """Single-document editor; the plugin works on its text area."""

    def __init__(self, plugin=None, parent=None):
        super().__init__(parent)
        self.path = None

        self.setWindowTitle("CycleComplete")
        self.resize(800, 600)

        self.text_edit = QPlainTextEdit()
        self.text_edit.setFont(QFont("Monospace", 10))
        self.setCentralWidget(self.text_edit)
        self._buffer = QtTextBuffer(self.text_edit)

        self._build_menu()
        self.statusBar()

        self.plugin = plugin
        if plugin is not None:
            plugin.install(self)

    def _build_menu(self):
        file_menu = self.menuBar().addMenu("&File")

        open_action = QAction("&Open...", self)
        open_action.setShortcut(QKeySequence.Open)
        open_action.triggered.connect(self._open_dialog)
        file_menu.addAction(open_action)

        save_action = QAction("&Save", self)
        save_action.setShortcut(QKeySequence.Save)
        save_action.triggered.connect(self.save_file)
        file_menu.addAction(save_action)

        file_menu.addSeparator()

        quit_action = QAction("&Quit", self)
        quit_action.setShortcut(QKeySequence.Quit)
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

        self.tools_menu = self.menuBar().addMenu("&Tools")

    def current_buffer(self):
        return self._buffer

    def open_file(self, path):
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Cannot open %s: %s", path, e)
            QMessageBox.critical(self, "Open", "Cannot open %s:\n%s" % (path, e))
            return False
        self.text_edit.setPlainText(text)
        self.path = path
        self.setWindowTitle("%s - CycleComplete" % path.name)
        if self.plugin is not None:
            self.plugin.document_changed()
        return True

    def save_file(self):
        if self.path is None:
            name, _ = QFileDialog.getSaveFileName(self, "Save")
            if not name:
                return False
            self.path = Path(name)
        try:
            self.path.write_text(self.text_edit.toPlainText(), encoding="utf-8")
        except OSError as e:
            logger.error("Cannot save %s: %s", self.path, e)
            QMessageBox.critical(self, "Save", "Cannot save %s:\n%s" % (self.path, e))
            return False
        self.statusBar().showMessage("Saved %s" % self.path, 3000)
        return True

    def _open_dialog(self):
        name, _ = QFileDialog.getOpenFileName(self, "Open")
        if name:
            self.open_file(name)

    def closeEvent(self, event):
        if self.plugin is not None:
            self.plugin.cleanup()
        super().closeEvent(event)
