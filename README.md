# pablaide

A small desktop code editor, "Pabla IDE", built on the Tk toolkit that ships
with Python. It has no dependencies outside the standard library. The
interface text is in Russian.

The window holds:

- a text editor that highlights keywords (bold blue), `//` comments (green)
  and double-quoted strings (dark red), line by line
- a "Файлы" file tree showing the last opened folder, remembered between runs
- a "Терминал" panel that takes commands for switching colour themes
- a "Файл" menu (new, open file, open folder, save) and a "Вид" menu
  (dark and light themes)
- Ctrl+S to save and Ctrl+Z to undo in the editor

## Installation

```
pip install .
```

Tk must be available to Python (the `tkinter` module).

## Running

```
pablaide
```

Options:

- `--settings PATH` — use PATH as the settings file instead of the default
  one.

By default, settings are kept as JSON in `PablaIDE/CodeEditor.json` under
`%APPDATA%` on Windows, and under `$XDG_CONFIG_HOME` (or `~/.config`)
elsewhere. The only setting stored is the last opened folder.

## Terminal commands

Type a command into the terminal panel and press Enter:

| Command                 | Effect                          |
|-------------------------|---------------------------------|
| `help`                  | list the available commands     |
| `start theme dark`      | switch to the dark theme        |
| `start theme light`     | switch to the light theme       |
| `start theme dark blue` | switch to the dark blue theme   |
| `start theme dracula`   | switch to the Dracula theme     |

Any other input prints a reminder to type `help`.

## Using the pieces from Python

The editor's logic works without a window:

```python
from pablaide.highlighter import SyntaxHighlighter
from pablaide.terminal import TerminalInput, process_command
from pablaide.themes import Theme, stylesheet

spans = SyntaxHighlighter().highlight_block('int x = 1; // "comment"')
# a list of Span(start, length, format); later spans win where they overlap

result = process_command("start theme dark")
# CommandResult(output="Тёмная тема активирована.", theme=Theme.DARK)

terminal = TerminalInput()
terminal.feed("he")        # None: no newline yet
terminal.feed("lp\n")      # CommandResult for "help"

sheet = stylesheet(Theme.DARK)   # widget style sheet text for the theme
```

- `pablaide.keys.KeyPressHandler(on_save, on_undo).handle(key, modifiers)`
  calls `on_save` for Control+S and `on_undo` for Control+Z, and returns
  whether the key press was consumed. Any other modifier combination is
  ignored.
- `pablaide.session.EditorSession` holds the editor text, the current file
  and the file-tree folder. `load_file` and `save_file` raise
  `EditorError` with a user-facing message when reading or writing fails.
- `pablaide.settings.Settings` stores the last opened folder;
  `default_settings_path()` gives the default file location.
- `pablaide.completion.AutoComplete` holds the list of words offered for
  completion.

## What it does not do

- The "Собрать" (build) and "Запустить" (run) toolbar buttons never start a
  process. Opening a folder only sets the file tree, not the session's
  project folder, so both buttons report that a project folder must be
  opened first. `EditorSession.build_project` and `run_project` only return
  an announcement, the command and the working folder.
- `AutoComplete` holds the keyword list only; there is no completion popup
  and no suggestion lookup.
- The "Вид" menu offers only the dark and light themes; the dark blue and
  Dracula themes are reached through the terminal.

## Tests

```
pip install .[test]
pytest
```