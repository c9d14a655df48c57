"""Colour themes as widget style sheets."""

from __future__ import annotations

import enum


class Theme(enum.Enum):
    """Available colour themes."""

    DARK = "dark"
    LIGHT = "light"
    DARK_BLUE = "dark blue"
    DRACULA = "dracula"


_COLOURS: dict[Theme, tuple[str, str]] = {
    Theme.DARK: ("background-color: #2b2b2b;", "color: #ffffff;"),
    Theme.LIGHT: ("background-color: #ffffff;", "color: #000000;"),
    Theme.DARK_BLUE: ("background-color: #1e1e2f;", "color: #dcdcdc;"),
    Theme.DRACULA: ("background-color:rgb(14, 0, 86);", "color:rgb(255, 255, 255);"),
}

_WIDGETS = ("QTextEdit", "QTreeView", "QPlainTextEdit")


def stylesheet(theme: Theme) -> str:
    """Return the style sheet for a theme."""
    background, foreground = _COLOURS[theme]
    return "".join(f"{widget} {{ {background} {foreground} }}" for widget in _WIDGETS)