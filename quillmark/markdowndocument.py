"""A Markdown text document with file path, timestamp and read-only state."""

from __future__ import annotations

import os
from collections.abc import Callable
from datetime import datetime
from typing import Any

__all__ = ["MarkdownDocument", "UNTITLED"]

UNTITLED = "untitled"

Callback = Callable[[], Any]


class MarkdownDocument:
    """Holds the text of a document and whether it is new or saved."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.read_only = False
        self.modified = False
        self.timestamp = datetime.now()
        self.markdown_ast: Any = None
        self._file_path: str | None = None
        self._display_name = UNTITLED
        self._file_path_listeners: list[Callback] = []
        self._cleared_listeners: list[Callback] = []

    def file_path(self) -> str | None:
        """Return the absolute file path, or None for a new document."""
        return self._file_path

    def set_file_path(self, path: str | os.PathLike[str] | None) -> None:
        """Set the file path; an empty or missing path makes the document untitled."""
        path_str = os.fspath(path) if path is not None else ""
        if path_str:
            self._file_path = os.path.abspath(path_str)
            self._display_name = os.path.basename(self._file_path)
        else:
            self._file_path = None
            self.read_only = False
            self.modified = False
            self._display_name = UNTITLED

        for callback in list(self._file_path_listeners):
            callback()

    def display_name(self) -> str:
        """Return the name to show in a window title or tab."""
        return self._display_name

    def is_new(self) -> bool:
        """Return True if the document has no file path."""
        return not self._file_path

    def is_empty(self) -> bool:
        """Return True if the document holds no text."""
        return not self.text

    def clear(self) -> None:
        """Remove all text and notify listeners."""
        self.text = ""
        for callback in list(self._cleared_listeners):
            callback()

    def on_file_path_changed(self, callback: Callback) -> Callback:
        """Register a callback run whenever the file path is set."""
        self._file_path_listeners.append(callback)
        return callback

    def on_cleared(self, callback: Callback) -> Callback:
        """Register a callback run whenever the document is cleared."""
        self._cleared_listeners.append(callback)
        return callback