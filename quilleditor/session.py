"""Toolkit-independent state of the graphical editor window."""

from __future__ import annotations

import os
from dataclasses import dataclass

from quilleditor.document import DocumentError, NoFileOpenError

DEFAULT_TITLE = "Text Editor"
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def window_title(path: str) -> str:
    """Return the window title for a document stored at ``path``."""
    return os.path.basename(path) if path else DEFAULT_TITLE


@dataclass
class EditorSession:
    """The edited text and the path it belongs to, if any."""

    text: str = ""
    path: str = ""

    def title(self) -> str:
        """Return the title the window should show."""
        return window_title(self.path)

    def new(self) -> None:
        """Start over with an empty, unnamed document."""
        self.text = ""
        self.path = ""

    def open(self, path: str) -> None:
        """Load the file at ``path``; on failure the path is forgotten."""
        try:
            with open(path, encoding=_ENCODING, errors=_ERRORS, newline="") as handle:
                text = handle.read()
        except OSError as exc:
            self.path = ""
            raise DocumentError("Could not open file.") from exc
        self.text = text
        self.path = path

    def _write(self, path: str) -> None:
        try:
            with open(
                path, "w", encoding=_ENCODING, errors=_ERRORS, newline=""
            ) as handle:
                handle.write(self.text)
        except OSError as exc:
            raise DocumentError("Could not save file.") from exc

    def save(self) -> None:
        """Write the text to the current path.

        Raises NoFileOpenError when the document has no path yet.
        """
        if not self.path:
            raise NoFileOpenError("The document has no file name yet.")
        self._write(self.path)

    def save_as(self, path: str) -> None:
        """Write the text to ``path`` and make it the current path."""
        self._write(path)
        self.path = path

    def close(self) -> None:
        """Close the document, leaving an empty, unnamed one."""
        self.new()