import pytest

from pablaide.terminal import (
    HELP_TEXT,
    UNKNOWN_COMMAND,
    CommandResult,
    TerminalInput,
    process_command,
)
from pablaide.themes import Theme


def test_help():
    result = process_command("help")
    assert result == CommandResult(HELP_TEXT, None)
    assert "start theme dracula" in result.output


@pytest.mark.parametrize(
    "command, theme",
    [
        ("start theme dark", Theme.DARK),
        ("start theme light", Theme.LIGHT),
        ("start theme dark blue", Theme.DARK_BLUE),
        ("start theme dracula", Theme.DRACULA),
    ],
)
def test_theme_commands(command, theme):
    assert process_command(command).theme is theme


def test_dark_message():
    assert process_command("start theme dark").output == "Тёмная тема активирована."


@pytest.mark.parametrize("command", ["", "Help", "start theme", "start theme blue"])
def test_unknown(command):
    assert process_command(command) == CommandResult(UNKNOWN_COMMAND)


def test_feed_waits_for_newline():
    terminal = TerminalInput()
    assert terminal.feed("hel") is None
    assert terminal.text == "hel"
    result = terminal.feed("p\n")
    assert result.output == HELP_TEXT
    assert terminal.text == ""


def test_feed_trims_whitespace():
    terminal = TerminalInput()
    assert terminal.feed("  start theme dracula  \n").theme is Theme.DRACULA