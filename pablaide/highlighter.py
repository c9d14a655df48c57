"""Keyword, comment and string highlighting for a single block of text."""

from __future__ import annotations

import re
from dataclasses import dataclass

KEYWORDS: tuple[str, ...] = (
    "int", "float", "if", "else", "while", "return", "class",
    "import", "start", "Class", "print", "give", "function",
    "Method", "connect", "from", "Path", "OSS", "protocol", "ip",
    "port", "http", "https", "DNS", "ip-v4", "ip-v6", "break",
    "open", "close", "mkadir", "rmdir", "delete", "rename",
    "void", "stdout", "stderr", "list", "lib", "create",
    "std", "vg", "trs", "exit", "return", "else if",
)


@dataclass(frozen=True)
class TextFormat:
    """How a highlighted run of characters is drawn."""

    foreground: str
    bold: bool = False


KEYWORD_FORMAT = TextFormat(foreground="#0000ff", bold=True)
COMMENT_FORMAT = TextFormat(foreground="#008000")
STRING_FORMAT = TextFormat(foreground="#800000")


@dataclass(frozen=True)
class HighlightRule:
    """A pattern and the format applied to each of its matches."""

    pattern: re.Pattern[str]
    format: TextFormat


@dataclass(frozen=True)
class Span:
    """A formatted run of characters within a block."""

    start: int
    length: int
    format: TextFormat

    @property
    def end(self) -> int:
        return self.start + self.length


class SyntaxHighlighter:
    """Applies keyword, comment and string rules to lines of text."""

    def __init__(self) -> None:
        rules = [
            HighlightRule(re.compile(rf"\b{re.escape(word)}\b", re.ASCII), KEYWORD_FORMAT)
            for word in KEYWORDS
        ]
        rules.append(HighlightRule(re.compile(r"//[^\n]*"), COMMENT_FORMAT))
        rules.append(HighlightRule(re.compile(r'".*"'), STRING_FORMAT))
        self.rules: list[HighlightRule] = rules

    def highlight_block(self, text: str) -> list[Span]:
        """Return the spans to format, rule by rule, in match order.

        Later spans take precedence over earlier ones where they overlap.
        """
        return [
            Span(match.start(), match.end() - match.start(), rule.format)
            for rule in self.rules
            for match in rule.pattern.finditer(text)
        ]