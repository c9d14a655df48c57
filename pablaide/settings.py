"""Persistent editor settings."""

from __future__ import annotations

import json
import os
from pathlib import Path

ORGANIZATION = "PablaIDE"
APPLICATION = "CodeEditor"
LAST_FOLDER_KEY = "lastFolderPath"


def default_settings_path() -> Path:
    """Return the per-user settings file location."""
    if os.name == "nt":
        base = Path(os.environ.get("APPDATA") or Path.home())
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
    return base / ORGANIZATION / f"{APPLICATION}.json"


class Settings:
    """A small JSON-backed key/value store."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = Path(path) if path is not None else default_settings_path()

    def _read(self) -> dict[str, object]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return {}
        return data if isinstance(data, dict) else {}

    def load_last_folder(self) -> str:
        """Return the last opened folder, or an empty string."""
        value = self._read().get(LAST_FOLDER_KEY, "")
        return value if isinstance(value, str) else ""

    def save_last_folder(self, folder: str | os.PathLike[str]) -> None:
        """Remember a folder as the last one opened."""
        data = self._read()
        data[LAST_FOLDER_KEY] = os.fspath(folder)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")