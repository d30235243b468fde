"""Settings dialog (Qt) for CycleComplete."""
import logging
from PyQt5.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QCheckBox,
    QSpinBox, QComboBox, QDialogButtonBox, QMessageBox,
)

from cyclecomplete.candidates import SortOrder
from cyclecomplete.config import CANDIDATES_LIMIT_RANGE, DISTANCE_LIMIT_KB_RANGE

logger = logging.getLogger(__name__)


class SettingsDialog(QDialog):
    """Edits the completion settings; OK and Apply save them to disk."""

    def __init__(self, config, parent=None):
        super().__init__(parent)
        self.config = config

        self.setWindowTitle("Cycle Autocomplete Settings")
        self.setMinimumWidth(380)

        layout = QVBoxLayout(self)

        # === Sort order ===
        row = QHBoxLayout()
        row.addWidget(QLabel("Sort completions"))
        self._sort_combo = QComboBox()
        self._sort_combo.addItem("alphabetically", int(SortOrder.ALPHABETICAL))
        self._sort_combo.addItem("by distance", int(SortOrder.BY_DISTANCE))
        row.addWidget(self._sort_combo)
        layout.addLayout(row)

        # === Limits ===
        row = QHBoxLayout()
        row.addWidget(QLabel("Limit number of possible completions"))
        self._candidates_spin = QSpinBox()
        self._candidates_spin.setRange(*CANDIDATES_LIMIT_RANGE)
        row.addWidget(self._candidates_spin)
        layout.addLayout(row)

        row = QHBoxLayout()
        row.addWidget(QLabel("Limit completion search radius [kbyte]"))
        self._distance_spin = QSpinBox()
        self._distance_spin.setRange(*DISTANCE_LIMIT_KB_RANGE)
        self._distance_spin.setSpecialValueText("unlimited")
        row.addWidget(self._distance_spin)
        layout.addLayout(row)

        # === Behaviour ===
        self._skip_fuzzy_cb = QCheckBox("Skip fuzzy matching if there are exact matches")
        layout.addWidget(self._skip_fuzzy_cb)

        self._remove_trailing_cb = QCheckBox("Remove trailing word part on completion")
        layout.addWidget(self._remove_trailing_cb)

        # === Buttons ===
        self._buttons = QDialogButtonBox(
            QDialogButtonBox.Ok | QDialogButtonBox.Apply | QDialogButtonBox.Cancel)
        self._buttons.accepted.connect(self._on_ok)
        self._buttons.rejected.connect(self.reject)
        self._buttons.button(QDialogButtonBox.Apply).clicked.connect(self.apply)
        layout.addWidget(self._buttons)

        self.refresh()

    def refresh(self):
        """Show the values currently held by the config."""
        self._sort_combo.setCurrentIndex(self._sort_combo.findData(int(self.config.sort_order)))
        self._candidates_spin.setValue(self.config.candidates_limit)
        self._distance_spin.setValue(self.config.distance_limit_kb)
        self._skip_fuzzy_cb.setChecked(self.config.skip_fuzzy_if_exact)
        self._remove_trailing_cb.setChecked(self.config.remove_trailing_word_part)

    def apply(self) -> bool:
        """Copy the widget values into the config and save it."""
        self.config.sort_order = self._sort_combo.currentData()
        self.config.candidates_limit = self._candidates_spin.value()
        self.config.distance_limit_kb = self._distance_spin.value()
        self.config.skip_fuzzy_if_exact = self._skip_fuzzy_cb.isChecked()
        self.config.remove_trailing_word_part = self._remove_trailing_cb.isChecked()

        config_dir = self.config.path.parent
        try:
            self.config.save()
        except OSError as e:
            logger.error("Saving configuration failed: %s", e)
            if not config_dir.is_dir():
                message = "Plugin configuration directory could not be created."
            else:
                message = "Plugin configuration could not be saved:\n%s" % e
            QMessageBox.critical(self, "Cycle Autocomplete", message)
            return False
        return True

    def _on_ok(self):
        if self.apply():
            self.accept()
