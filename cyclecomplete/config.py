"""Configuration management: JSON-based, stored in ~/.config/cyclecomplete/."""
import json
import logging
from pathlib import Path

from cyclecomplete.candidates import SortOrder

logger = logging.getLogger(__name__)

CONFIG_GROUP = "cycle_autocomplete"

DEFAULT_CONFIG = {
    "sort_order": int(SortOrder.BY_DISTANCE),
    "candidates_limit": 12,
    "distance_limit": 0,  # bytes; 0 = whole document
    "skip_fuzzy_if_exact": False,
    "remove_trailing_word_part": False,
}

CANDIDATES_LIMIT_RANGE = (1, 100)
DISTANCE_LIMIT_KB_RANGE = (0, 100)

CONFIG_DIR = Path.home() / ".config" / "cyclecomplete"
CONFIG_FILE = CONFIG_DIR / "config.json"


def _coerce_int(key, value, low, high):
    if isinstance(value, bool) or not isinstance(value, int) or not low <= value <= high:
        logger.warning("Ignoring invalid %s=%r, using default", key, value)
        return DEFAULT_CONFIG[key]
    return value


class Config:
    """Completion settings, persisted as one group in a JSON file."""

    def __init__(self, path=None):
        self.path = Path(path) if path else CONFIG_FILE
        self._data = dict(DEFAULT_CONFIG)
        self.load()

    def load(self):
        """Read the settings group. Any problem leaves the defaults in place."""
        self._data = dict(DEFAULT_CONFIG)
        if not self.path.exists():
            return
        try:
            with open(self.path, "r") as f:
                stored = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning("Could not read %s: %s", self.path, e)
            return

        group = stored.get(CONFIG_GROUP, {}) if isinstance(stored, dict) else {}
        if not isinstance(group, dict):
            logger.warning("Malformed %r group in %s", CONFIG_GROUP, self.path)
            return
        for key in DEFAULT_CONFIG:
            if key in group:
                self.set(key, group[key])

    def save(self):
        """Write the settings group, keeping other groups in the file.

        Raises OSError if the directory or file cannot be written.
        """
        stored = {}
        if self.path.exists():
            try:
                with open(self.path, "r") as f:
                    stored = json.load(f)
            except (json.JSONDecodeError, IOError):
                stored = {}
            if not isinstance(stored, dict):
                stored = {}
        stored[CONFIG_GROUP] = dict(self._data)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(stored, f, indent=2, ensure_ascii=False)
        logger.info("Saved configuration to %s", self.path)

    def get(self, key, default=None):
        return self._data.get(key, default)

    def set(self, key, value):
        """Set a persisted key, validating it. Unknown keys raise KeyError."""
        if key not in DEFAULT_CONFIG:
            raise KeyError(key)
        if key == "sort_order":
            value = _coerce_int(key, value, int(SortOrder.ALPHABETICAL), int(SortOrder.BY_DISTANCE))
        elif key == "candidates_limit":
            value = _coerce_int(key, value, *CANDIDATES_LIMIT_RANGE)
        elif key == "distance_limit":
            low, high = DISTANCE_LIMIT_KB_RANGE
            value = _coerce_int(key, value, low * 1024, high * 1024)
        else:
            value = bool(value)
        self._data[key] = value

    @property
    def sort_order(self) -> SortOrder:
        return SortOrder(self._data["sort_order"])

    @sort_order.setter
    def sort_order(self, val):
        self.set("sort_order", int(val))

    @property
    def candidates_limit(self) -> int:
        return self._data["candidates_limit"]

    @candidates_limit.setter
    def candidates_limit(self, val):
        self.set("candidates_limit", val)

    @property
    def distance_limit_kb(self) -> int:
        return self._data["distance_limit"] // 1024

    @distance_limit_kb.setter
    def distance_limit_kb(self, val):
        self.set("distance_limit", int(val) * 1024)

    @property
    def skip_fuzzy_if_exact(self) -> bool:
        return self._data["skip_fuzzy_if_exact"]

    @skip_fuzzy_if_exact.setter
    def skip_fuzzy_if_exact(self, val):
        self.set("skip_fuzzy_if_exact", val)

    @property
    def remove_trailing_word_part(self) -> bool:
        return self._data["remove_trailing_word_part"]

    @remove_trailing_word_part.setter
    def remove_trailing_word_part(self, val):
        self.set("remove_trailing_word_part", val)
