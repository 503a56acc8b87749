"""Settings service — load/save ~/.config/icu-encode/settings.json."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)

_SETTINGS_FILE = Path.home() / ".config" / "icu-encode" / "settings.json"

DEFAULTS: dict[str, Any] = {
    # Encoding
    "plural_argument": "PluralCount",

    # Output
    "indent": 2,
    "sort_keys": True,
    "ensure_ascii": False,
    "trailing_newline": True,

    # Diagnostics
    "log_level": "WARNING",
}

# Settings passed straight through to the file writer
OUTPUT_KEYS = ("indent", "sort_keys", "ensure_ascii", "trailing_newline")


class Settings:
    """Tool settings backed by a JSON file."""

    _instance: Settings | None = None

    def __init__(self):
        self._data: dict[str, Any] = dict(DEFAULTS)
        self._load()

    @classmethod
    def get(cls) -> Settings:
        if cls._instance is None:
            cls._instance = Settings()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        cls._instance = None

    # ── Public API ────────────────────────────────────────────────

    def __getitem__(self, key: str) -> Any:
        return self._data.get(key, DEFAULTS.get(key))

    def update(self, **overrides: Any):
        """Apply overrides for this run; ``None`` means keep the current value."""
        for key, value in overrides.items():
            if value is not None:
                self._data[key] = value

    @property
    def output_options(self) -> dict[str, Any]:
        return {key: self[key] for key in OUTPUT_KEYS}

    # ── Private ───────────────────────────────────────────────────

    def _load(self):
        if not _SETTINGS_FILE.exists():
            return
        try:
            stored = json.loads(_SETTINGS_FILE.read_text("utf-8"))
        except (OSError, ValueError) as exc:
            log.warning("Ignoring unreadable settings file %s: %s", _SETTINGS_FILE, exc)
            return
        if not isinstance(stored, dict):
            log.warning("Ignoring settings file %s: expected an object", _SETTINGS_FILE)
            return
        self._data.update(stored)
