"""Keyword list for completing words in the editor."""

from __future__ import annotations

COMPLETION_KEYWORDS: tuple[str, ...] = (
    "int", "float", "if", "else", "while", "return", "class",
    "import", "start", "print", "function", "void", "break", "delete",
)


class AutoComplete:
    """Holds the editor it serves and the words it can offer."""

    def __init__(self, editor: object) -> None:
        self.editor = editor
        self.keywords: tuple[str, ...] = COMPLETION_KEYWORDS