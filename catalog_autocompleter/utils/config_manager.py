# config_manager.py - JSON config manager

import json
import os

from catalog_autocompleter.core.trie import Trie, DEFAULT_ROOT_VALUE, DEFAULT_TERMINATOR
from catalog_autocompleter.utils.logger_utils import LEVELS, get_logger

log = get_logger(__name__)

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


def _coerce(current, val):
    """Convert `val` to the type of the existing setting."""
    if not isinstance(val, str):
        return type(current)(val)
    if isinstance(current, bool):
        low = val.strip().lower()
        if low in _TRUE:
            return True
        if low in _FALSE:
            return False
        raise ValueError(f"expected a boolean, got {val!r}")
    return type(current)(val)


class Config:
    DEFAULTS = {
        "terminator": DEFAULT_TERMINATOR,
        "root_value": DEFAULT_ROOT_VALUE,
        "sort_completions": True,
        "max_suggestions": 20,  # cli display limit, 0 = show all
        "log_level": "INFO",
        "log_path": "",  # empty = console only
    }

    def __init__(self, path="config.json"):
        self.path = path
        self.data = dict(self.DEFAULTS)
        self._load()

    def _load(self):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    stored = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                log.warning(f"could not read {self.path}: {e}; using defaults")
                return
            if not isinstance(stored, dict):
                log.warning(f"{self.path} is not a JSON object; using defaults")
                return
            for k, v in stored.items():
                if k not in self.data:
                    log.warning(f"ignoring unknown config key {k!r}")
                    continue
                try:
                    self.data[k] = self._check(k, v)
                except (TypeError, ValueError) as e:
                    log.warning(f"bad value for {k!r} in {self.path}: {e}; keeping {self.data[k]!r}")
        else:
            self.save()

    def _check(self, key, val):
        """Coerce `val` to the setting's type and validate it; raises ValueError."""
        val = _coerce(self.DEFAULTS[key], val)
        if key in ("terminator", "root_value") and len(val) != 1:
            raise ValueError(f"{key} must be a single character, got {val!r}")
        if key == "log_level":
            val = val.upper()
            if val not in LEVELS:
                raise ValueError(f"unknown log level {val!r}")
        if key == "max_suggestions" and val < 0:
            raise ValueError("max_suggestions must be >= 0")
        return val

    def save(self):
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def items(self):
        return self.data.items()

    def set(self, key, val):
        if key not in self.data:
            raise KeyError(f"no such option: {key}")
        self.data[key] = self._check(key, val)
        self.save()

    def build_trie(self) -> Trie:
        """New empty Trie using the configured terminator/root/ordering."""
        return Trie(
            terminator=self.data["terminator"],
            root_value=self.data["root_value"],
            sort_completions=self.data["sort_completions"],
        )
