"""User settings loaded from a JSON file."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from dirtally.core.aggregator import ErrorPolicy
from dirtally.utils import xdg_config_home

log = logging.getLogger(__name__)

_SETTINGS_DIR = "dirtally"
_SETTINGS_FILE = "settings.json"

DEFAULT_GLYPHS = {
    "directory": "📁",
    "file": "📄",
}


class Settings:
    """User settings read from a JSON file the user edits by hand.

    Uses dot-notation keys for nested access:
        settings.get("glyphs.directory")  # reads data["glyphs"]["directory"]

    Recognised keys are ``glyphs.directory``, ``glyphs.file`` and
    ``errors.policy`` (``"skip"`` or ``"raise"``).
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or (xdg_config_home() / _SETTINGS_DIR / _SETTINGS_FILE)
        self._data: dict[str, Any] = {}
        self._load()

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key."""
        parts = key.split(".")
        node: Any = self._data
        for part in parts:
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def glyphs(self) -> dict[str, str]:
        """Return the glyph map for regular rows, filled in with defaults."""
        glyphs = dict(DEFAULT_GLYPHS)
        for kind in DEFAULT_GLYPHS:
            value = self.get(f"glyphs.{kind}")
            if isinstance(value, str):
                glyphs[kind] = value
        return glyphs

    def error_policy(self) -> ErrorPolicy:
        """Return the configured traversal error policy."""
        raw = self.get("errors.policy", ErrorPolicy.SKIP.value)
        try:
            return ErrorPolicy(raw)
        except ValueError:
            log.warning("Unknown error policy %r in %s, using 'skip'", raw, self._path)
            return ErrorPolicy.SKIP

    def _load(self) -> None:
        """Load settings from disk, gracefully handling errors."""
        if not self._path.exists():
            return
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            log.warning("Could not load settings from %s: %s", self._path, e)
            return
        if not isinstance(data, dict):
            log.warning("Ignoring settings in %s: expected a JSON object", self._path)
            return
        self._data = data
