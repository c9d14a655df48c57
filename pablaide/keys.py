"""Editor keyboard shortcuts."""

from __future__ import annotations

import enum
from typing import Callable


class Modifier(enum.Flag):
    """Keyboard modifier keys held during a key press."""

    NONE = 0
    SHIFT = enum.auto()
    CONTROL = enum.auto()
    ALT = enum.auto()
    META = enum.auto()


class KeyPressHandler:
    """Turns Ctrl+S and Ctrl+Z into save and undo requests."""

    def __init__(self, on_save: Callable[[], object], on_undo: Callable[[], object]) -> None:
        self.on_save = on_save
        self.on_undo = on_undo

    def handle(self, key: str, modifiers: Modifier) -> bool:
        """Handle a key press; return True if it was consumed."""
        if modifiers != Modifier.CONTROL:
            return False
        key = key.upper()
        if key == "S":
            self.on_save()
            return True
        if key == "Z":
            self.on_undo()
            return True
        return False