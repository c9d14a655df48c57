"""Desktop window: editor, file tree, terminal and toolbar."""

from __future__ import annotations

import argparse
import os
import re
import tkinter as tk
from tkinter import filedialog, font as tkfont, messagebox, ttk

from .completion import AutoComplete
from .highlighter import SyntaxHighlighter, TextFormat
from .keys import KeyPressHandler, Modifier
from .session import EditorError, EditorSession
from .settings import Settings
from .terminal import TerminalInput
from .themes import Theme, stylesheet

WINDOW_TITLE = "Pabla IDE"
WINDOW_GEOMETRY = "1000x600"
TERMINAL_PLACEHOLDER = "Введите команду и нажмите Enter..."
ERROR_TITLE = "Ошибка"

_BACKGROUND_RE = re.compile(r"background-color:\s*([^;]+);")
_FOREGROUND_RE = re.compile(r"(?<![-\w])color:\s*([^;]+);")
_RGB_RE = re.compile(r"rgb\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)")
_PLACEHOLDER_TREE_ITEM = "__placeholder__"
_SHIFT_MASK = 0x0001


def offset_to_index(text: str, offset: int) -> str:
    """Convert a character offset in text to a ``line.column`` text index."""
    if not 0 <= offset <= len(text):
        raise ValueError(f"offset {offset} is outside the text")
    before = text[:offset]
    line = before.count("\n") + 1
    column = offset - (before.rfind("\n") + 1)
    return f"{line}.{column}"


def _css_colour(value: str) -> str:
    value = value.strip()
    match = _RGB_RE.fullmatch(value)
    if match:
        red, green, blue = (int(part) for part in match.groups())
        return f"#{red:02x}{green:02x}{blue:02x}"
    return value


def _theme_colours(theme: Theme) -> tuple[str, str]:
    sheet = stylesheet(theme)
    background = _BACKGROUND_RE.search(sheet)
    foreground = _FOREGROUND_RE.search(sheet)
    if background is None or foreground is None:
        raise ValueError(f"theme {theme.value!r} has no colours")
    return _css_colour(background.group(1)), _css_colour(foreground.group(1))


class CodeEditorApp:
    """The main editor window built on a Tk root."""

    def __init__(self, root: tk.Tk, session: EditorSession) -> None:
        self.root = root
        self.session = session
        self.highlighter = SyntaxHighlighter()
        self.terminal_input = TerminalInput()
        self._tags: dict[TextFormat, str] = {}

        root.title(WINDOW_TITLE)
        root.geometry(WINDOW_GEOMETRY)

        self._build_menu()
        self._build_toolbar()

        body = ttk.PanedWindow(root, orient=tk.VERTICAL)
        body.pack(fill=tk.BOTH, expand=True)
        top = ttk.PanedWindow(body, orient=tk.HORIZONTAL)
        body.add(top, weight=4)

        tree_frame = ttk.LabelFrame(top, text="Файлы")
        self.file_tree = ttk.Treeview(tree_frame, show="tree")
        self.file_tree.pack(fill=tk.BOTH, expand=True)
        self.file_tree.bind("<<TreeviewOpen>>", self._on_tree_open)
        self.file_tree.bind("<Double-1>", self._on_tree_double_click)
        top.add(tree_frame, weight=1)

        self._editor_font = tkfont.nametofont("TkFixedFont")
        self._bold_font = self._editor_font.copy()
        self._bold_font.configure(weight="bold")
        self.editor = tk.Text(top, undo=True, wrap=tk.NONE, font=self._editor_font)
        top.add(self.editor, weight=4)
        self.editor.bind("<<Modified>>", self._on_editor_modified)

        self.key_handler = KeyPressHandler(self.save_file, self.undo)
        self.editor.bind("<Control-s>", self._on_shortcut)
        self.editor.bind("<Control-S>", self._on_shortcut)
        self.editor.bind("<Control-z>", self._on_shortcut)
        self.editor.bind("<Control-Z>", self._on_shortcut)

        self.auto_complete = AutoComplete(self.editor)

        terminal_frame = ttk.LabelFrame(body, text="Терминал")
        self.terminal = tk.Text(terminal_frame, height=8, wrap=tk.WORD)
        self.terminal.pack(fill=tk.BOTH, expand=True)
        self.terminal.bind("<Return>", self._on_terminal_return)
        body.add(terminal_frame, weight=1)
        self._show_placeholder()
        self.terminal.bind("<FocusIn>", self._hide_placeholder)

        folder = self.session.restore_last_folder()
        if folder:
            self._show_tree(folder)

    # -- construction -------------------------------------------------

    def _build_menu(self) -> None:
        menubar = tk.Menu(self.root)
        file_menu = tk.Menu(menubar, tearoff=False)
        file_menu.add_command(label="Новый файл", command=self.new_file)
        file_menu.add_command(label="Открыть файл", command=self.open_file)
        file_menu.add_command(label="Открыть папку", command=self.open_folder)
        file_menu.add_command(label="Сохранить файл", command=self.save_file)
        menubar.add_cascade(label="Файл", menu=file_menu)

        view_menu = tk.Menu(menubar, tearoff=False)
        view_menu.add_command(label="Тёмная тема", command=lambda: self.apply_theme(Theme.DARK))
        view_menu.add_command(label="Светлая тема", command=lambda: self.apply_theme(Theme.LIGHT))
        menubar.add_cascade(label="Вид", menu=view_menu)
        self.root.config(menu=menubar)

    def _build_toolbar(self) -> None:
        toolbar = ttk.Frame(self.root)
        toolbar.pack(side=tk.TOP, fill=tk.X)
        ttk.Button(toolbar, text="Собрать", command=self.build_project).pack(side=tk.LEFT)
        ttk.Button(toolbar, text="Запустить", command=self.run_project).pack(side=tk.LEFT)

    # -- file actions -------------------------------------------------

    def new_file(self) -> None:
        self.session.new_file()
        self.editor.delete("1.0", tk.END)
        self.editor.edit_reset()

    def open_file(self) -> None:
        file_name = filedialog.askopenfilename(
            parent=self.root, title="Открыть файл", filetypes=[("Все файлы", "*.*")]
        )
        if file_name:
            self.load_file(file_name)

    def load_file(self, file_name: str) -> None:
        try:
            text = self.session.load_file(file_name)
        except EditorError as exc:
            messagebox.showwarning(ERROR_TITLE, str(exc), parent=self.root)
            return
        self.editor.delete("1.0", tk.END)
        self.editor.insert("1.0", text)
        self.editor.edit_reset()
        self._highlight()

    def save_file(self) -> None:
        self.session.text = self.editor.get("1.0", "end-1c")
        file_name = None
        if not self.session.current_file:
            file_name = filedialog.asksaveasfilename(
                parent=self.root, title="Сохранить файл", filetypes=[("Все файлы", "*.*")]
            )
            if not file_name:
                return
        try:
            self.session.save_file(file_name)
        except EditorError as exc:
            messagebox.showwarning(ERROR_TITLE, str(exc), parent=self.root)

    def open_folder(self) -> None:
        directory = filedialog.askdirectory(parent=self.root, title="Открыть папку")
        folder = self.session.open_folder(directory)
        if folder:
            self._show_tree(folder)

    def undo(self) -> None:
        try:
            self.editor.edit_undo()
        except tk.TclError:
            pass

    # -- project actions ----------------------------------------------

    def build_project(self) -> None:
        self._announce_project(self.session.build_project)

    def run_project(self) -> None:
        self._announce_project(self.session.run_project)

    def _announce_project(self, action) -> None:
        try:
            announcement, _command, _folder = action()
        except EditorError as exc:
            messagebox.showwarning(ERROR_TITLE, str(exc), parent=self.root)
            return
        self._append_terminal(announcement)

    # -- themes -------------------------------------------------------

    def apply_theme(self, theme: Theme) -> None:
        background, foreground = _theme_colours(theme)
        for widget in (self.editor, self.terminal):
            widget.configure(background=background, foreground=foreground,
                             insertbackground=foreground)
        style = ttk.Style(self.root)
        style.configure("Treeview", background=background, foreground=foreground,
                        fieldbackground=background)

    # -- file tree ----------------------------------------------------

    def _show_tree(self, folder: str) -> None:
        self.file_tree.delete(*self.file_tree.get_children())
        self._populate_tree("", folder)

    def _populate_tree(self, parent: str, path: str) -> None:
        try:
            entries = sorted(os.scandir(path), key=lambda e: (not e.is_dir(), e.name.lower()))
        except OSError:
            return
        for entry in entries:
            item = self.file_tree.insert(parent, tk.END, text=entry.name, values=(entry.path,))
            if entry.is_dir():
                self.file_tree.insert(item, tk.END, iid=f"{item}{_PLACEHOLDER_TREE_ITEM}")

    def _on_tree_open(self, _event: tk.Event) -> None:
        item = self.file_tree.focus()
        placeholder = f"{item}{_PLACEHOLDER_TREE_ITEM}"
        if self.file_tree.exists(placeholder):
            self.file_tree.delete(placeholder)
            self._populate_tree(item, self.file_tree.item(item, "values")[0])

    def _on_tree_double_click(self, _event: tk.Event) -> None:
        item = self.file_tree.focus()
        values = self.file_tree.item(item, "values") if item else ()
        if values and os.path.isfile(values[0]):
            self.load_file(values[0])

    # -- editor -------------------------------------------------------

    def _on_shortcut(self, event: tk.Event) -> str | None:
        """Pass a Control shortcut to the key handler; stop it if handled."""
        state = event.state if isinstance(event.state, int) else 0
        if state & _SHIFT_MASK:
            # Only a plain Control chord counts as a shortcut.
            return None
        handled = self.key_handler.handle(event.keysym, Modifier.CONTROL)
        if handled:
            return "break"
        return None

    def _on_editor_modified(self, _event: tk.Event) -> None:
        if self.editor.edit_modified():
            self._highlight()
            self.editor.edit_modified(False)

    def _tag_for(self, text_format: TextFormat) -> str:
        tag = self._tags.get(text_format)
        if tag is None:
            tag = f"highlight{len(self._tags)}"
            options = {"foreground": text_format.foreground}
            if text_format.bold:
                options["font"] = self._bold_font
            self.editor.tag_configure(tag, **options)
            self._tags[text_format] = tag
        return tag

    def _highlight(self) -> None:
        for tag in self._tags.values():
            self.editor.tag_remove(tag, "1.0", tk.END)
        text = self.editor.get("1.0", "end-1c")
        for line_number, line in enumerate(text.split("\n"), start=1):
            for span in self.highlighter.highlight_block(line):
                start = f"{line_number}.{span.start}"
                end = f"{line_number}.{span.end}"
                for tag in self._tags.values():
                    self.editor.tag_remove(tag, start, end)
                self.editor.tag_add(self._tag_for(span.format), start, end)

    # -- terminal -----------------------------------------------------

    def _show_placeholder(self) -> None:
        self.terminal.insert("1.0", TERMINAL_PLACEHOLDER)
        self.terminal.tag_add("placeholder", "1.0", tk.END)
        self.terminal.tag_configure("placeholder", foreground="grey")
        self._placeholder_shown = True

    def _hide_placeholder(self, _event: tk.Event | None = None) -> None:
        if self._placeholder_shown:
            self.terminal.delete("1.0", tk.END)
            self._placeholder_shown = False

    def _append_terminal(self, message: str) -> None:
        self._hide_placeholder()
        current = self.terminal.get("1.0", "end-1c")
        if current:
            self.terminal.insert(tk.END, "\n")
        self.terminal.insert(tk.END, message)
        self.terminal.see(tk.END)

    def _on_terminal_return(self, _event: tk.Event) -> str:
        self._hide_placeholder()
        typed = self.terminal.get("1.0", "end-1c")
        self.terminal.delete("1.0", tk.END)
        self.terminal_input.text = ""
        result = self.terminal_input.feed(typed + "\n")
        if result is not None:
            if result.theme is not None:
                self.apply_theme(result.theme)
            self._append_terminal(result.output)
        return "break"


def main(argv: list[str] | None = None) -> int:
    """Start the editor window."""
    parser = argparse.ArgumentParser(prog="pablaide", description=WINDOW_TITLE)
    parser.add_argument("--settings", help="settings file to use")
    args = parser.parse_args(argv)
    root = tk.Tk()
    CodeEditorApp(root, EditorSession(Settings(args.settings)))
    root.mainloop()
    return 0