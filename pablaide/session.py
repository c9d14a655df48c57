"""Editor state: the open file, its text and the project folder."""

from __future__ import annotations

import os
from pathlib import Path

from .settings import Settings

NO_PROJECT = "Сначала откройте папку проекта."
OPEN_FAILED = "Не удалось открыть файл."
SAVE_FAILED = "Не удалось сохранить файл."

BUILD_COMMAND = ("cmake", "--build", ".")
RUN_COMMAND = ("./untitled20",)


class EditorError(Exception):
    """An editor operation failed; the message is meant for the user."""


class EditorSession:
    """Holds the document being edited and the folders in use."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.text = ""
        self.current_file = ""
        self.current_folder = ""
        self.tree_root: str | None = None

    def new_file(self) -> None:
        """Start an empty, unnamed document."""
        self.text = ""
        self.current_file = ""

    def load_file(self, file_name: str | os.PathLike[str]) -> str:
        """Read a file into the editor and make it current."""
        try:
            with open(file_name, encoding="utf-8") as handle:
                text = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise EditorError(OPEN_FAILED) from exc
        self.text = text
        self.current_file = os.fspath(file_name)
        return text

    def save_file(self, file_name: str | os.PathLike[str] | None = None) -> str | None:
        """Write the text to the current file, or to file_name if none is set.

        Returns the path written, or None when there is nowhere to write.
        """
        target = self.current_file or (os.fspath(file_name) if file_name else "")
        if not target:
            return None
        try:
            with open(target, "w", encoding="utf-8") as handle:
                handle.write(self.text)
        except OSError as exc:
            raise EditorError(SAVE_FAILED) from exc
        self.current_file = target
        return target

    def open_folder(self, directory: str | os.PathLike[str] | None) -> str | None:
        """Show a folder in the file tree and remember it."""
        if not directory:
            return None
        folder = os.fspath(directory)
        self.settings.save_last_folder(folder)
        self.tree_root = folder
        return folder

    def restore_last_folder(self) -> str | None:
        """Show the remembered folder again if it still exists."""
        last = self.settings.load_last_folder()
        if last and Path(last).is_dir():
            self.tree_root = last
            return last
        return None

    def _project_command(self, announcement: str, command: tuple[str, ...]) -> tuple[str, tuple[str, ...], str]:
        if not self.current_folder:
            raise EditorError(NO_PROJECT)
        return announcement, command, self.current_folder

    def build_project(self) -> tuple[str, tuple[str, ...], str]:
        """Return the announcement, command and working folder for a build."""
        return self._project_command("Сборка проекта...", BUILD_COMMAND)

    def run_project(self) -> tuple[str, tuple[str, ...], str]:
        """Return the announcement, command and working folder for a run."""
        return self._project_command("Запуск проекта...", RUN_COMMAND)