"""Plugin glue: registers the cycle actions with a host editor window."""
import logging
from PyQt5.QtWidgets import QAction
from PyQt5.QtGui import QKeySequence
from PyQt5.QtCore import Qt

from cyclecomplete.config import Config
from cyclecomplete.cycler import Direction
from cyclecomplete.session import SessionController

logger = logging.getLogger(__name__)

KEYBINDINGS = {
    # name: (label, default shortcut, direction)
    "cycle_autocomplete_forward": ("Cycle autocomplete forward", "Ctrl+Space", Direction.FORWARD),
    "cycle_autocomplete_backward": ("Cycle autocomplete backward", "Ctrl+Shift+Space", Direction.BACKWARD),
}

STATUS_TIMEOUT_MS = 5000


class CycleAutocompletePlugin:
    """Inline autocompletion based on words in the current document.

    The host window must provide `tools_menu` (a QMenu), `current_buffer()`
    returning the buffer of the active document, and a status bar.
    """

    def __init__(self, config=None):
        self.config = config if config is not None else Config()
        self.controller = SessionController(self.config, report=self._report)
        self._window = None
        self._actions = {}
        self._settings_dialog = None

    @property
    def actions(self):
        return dict(self._actions)

    def install(self, window):
        """Add the cycle and settings actions to the window."""
        self._window = window
        menu = window.tools_menu

        for name, (label, shortcut, direction) in KEYBINDINGS.items():
            action = QAction(label, window)
            action.setObjectName(name)
            action.setShortcut(QKeySequence(shortcut))
            action.setShortcutContext(Qt.WindowShortcut)
            action.triggered.connect(lambda checked=False, d=direction: self.cycle(d))
            menu.addAction(action)
            self._actions[name] = action

        settings_action = QAction("Cycle Autocomplete Settings...", window)
        settings_action.setObjectName("cycle_autocomplete_settings")
        settings_action.triggered.connect(self.configure)
        menu.addAction(settings_action)
        self._actions["cycle_autocomplete_settings"] = settings_action
        logger.info("Cycle autocomplete installed")

    def cycle(self, direction: Direction):
        if self._window is None:
            return None
        buffer = self._window.current_buffer()
        if buffer is None:
            return None
        return self.controller.cycle(buffer, direction)

    def document_changed(self):
        self.controller.reset()

    def configure(self):
        from cyclecomplete.settings_ui import SettingsDialog
        if self._settings_dialog is None:
            self._settings_dialog = SettingsDialog(self.config, self._window)
        self._settings_dialog.refresh()
        self._settings_dialog.show()
        self._settings_dialog.raise_()
        self._settings_dialog.activateWindow()

    def cleanup(self):
        """Remove the actions from the host and drop the session."""
        if self._window is not None:
            for action in self._actions.values():
                self._window.tools_menu.removeAction(action)
                action.deleteLater()
        self._actions.clear()
        self.controller.reset()
        self._window = None

    def _report(self, message: str):
        logger.info(message)
        if self._window is not None:
            self._window.statusBar().showMessage(message, STATUS_TIMEOUT_MS)
