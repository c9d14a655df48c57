"""The editor's built-in command terminal."""

from __future__ import annotations

from dataclasses import dataclass

from .themes import Theme

HELP_TEXT = (
    "Доступные команды:\n"
    "  help - показать список команд\n"
    "  start theme dark - включить тёмную тему\n"
    "  start theme light - включить светлую тему\n"
    "  start theme dark blue - включить синюю тёмную тему\n"
    "  start theme dracula - включить тему Dracula\n"
)
UNKNOWN_COMMAND = "Неизвестная команда. Введите 'help' для списка команд."

_THEME_COMMANDS: dict[str, tuple[Theme, str]] = {
    "start theme dark": (Theme.DARK, "Тёмная тема активирована."),
    "start theme light": (Theme.LIGHT, "Светлая тема активирована."),
    "start theme dark blue": (Theme.DARK_BLUE, "Синяя тёмная тема активирована."),
    "start theme dracula": (Theme.DRACULA, "Тема Dracula активирована."),
}


@dataclass(frozen=True)
class CommandResult:
    """Text to show in the terminal and the theme to apply, if any."""

    output: str
    theme: Theme | None = None


def process_command(command: str) -> CommandResult:
    """Interpret one terminal command."""
    if command == "help":
        return CommandResult(HELP_TEXT)
    if command in _THEME_COMMANDS:
        theme, message = _THEME_COMMANDS[command]
        return CommandResult(message, theme)
    return CommandResult(UNKNOWN_COMMAND)


class TerminalInput:
    """Collects typed text and runs it as a command once a newline arrives."""

    def __init__(self) -> None:
        self.text = ""

    def feed(self, text: str) -> CommandResult | None:
        """Append typed text; on a trailing newline, run and clear it."""
        self.text += text
        if not self.text.endswith("\n"):
            return None
        command = self.text.strip()
        self.text = ""
        return process_command(command)