"""An in-memory text document bound to a file name on disk."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"

_NO_FILE_TO_SAVE = "No file is currently open or created."
_NO_FILE_TO_EDIT = (
    "No file is currently open or created.  "
    "Create a new file or open an existing one."
)


class DocumentError(Exception):
    """A document could not be read from or written to disk."""


class FileAlreadyOpenError(DocumentError):
    """A file is open and must be closed before the requested action."""

    def __init__(self, action: str = "opening another one") -> None:
        super().__init__(f"Close the current file before {action}.")


class NoFileOpenError(DocumentError):
    """The action needs an open file and there is none."""

    def __init__(self, message: str = "No file is currently open.") -> None:
        super().__init__(message)


class NothingToSaveError(DocumentError):
    """The document holds no content to save."""

    def __init__(self, message: str = "No file content to save.") -> None:
        super().__init__(message)


def _read_file(path: str) -> str:
    with open(path, encoding=_ENCODING, errors=_ERRORS, newline="") as handle:
        return handle.read()


def _write_file(path: str, content: str) -> None:
    with open(path, "w", encoding=_ENCODING, errors=_ERRORS, newline="") as handle:
        handle.write(content)


@dataclass
class Document:
    """A file name and the text held for it in memory."""

    filename: str = ""
    content: str = ""

    def is_open(self) -> bool:
        """Return whether a file is currently created or opened."""
        return bool(self.filename)

    def create(self, filename: str) -> None:
        """Start a new, empty document called ``filename`` in memory."""
        if self.is_open():
            raise FileAlreadyOpenError("creating a new one")
        self.filename = filename
        self.content = ""

    def open(self, filename: str) -> None:
        """Load ``filename`` from disk into the document."""
        if self.is_open():
            raise FileAlreadyOpenError("opening another one")
        try:
            content = _read_file(filename)
        except OSError as exc:
            self.filename = ""
            self.content = ""
            raise DocumentError(
                f"Error opening file '{filename}'.  It may not exist."
            ) from exc
        self.filename = filename
        self.content = content

    def save(self) -> None:
        """Write the content to the current file name."""
        if not self.is_open():
            raise NoFileOpenError(_NO_FILE_TO_SAVE)
        try:
            _write_file(self.filename, self.content)
        except OSError as exc:
            raise DocumentError(f"Error saving file '{self.filename}'") from exc

    def save_as(self, filename: str) -> None:
        """Write the content to ``filename`` and adopt that name."""
        if not self.content:
            raise NothingToSaveError()
        try:
            _write_file(filename, self.content)
        except OSError as exc:
            raise DocumentError(f"Error saving file as '{filename}'") from exc
        self.filename = filename

    def close(self) -> None:
        """Forget the current file and its content."""
        if not self.is_open():
            raise NoFileOpenError()
        self.filename = ""
        self.content = ""

    def append_lines(self, lines: Iterable[str]) -> None:
        """Append each line, followed by a newline, to the content."""
        if not self.is_open():
            raise NoFileOpenError(_NO_FILE_TO_EDIT)
        self.content += "".join(f"{line}\n" for line in lines)

    def render(self) -> str:
        """Return the content framed for display."""
        if not self.is_open():
            raise NoFileOpenError()
        if not self.content:
            return "The file is empty.\n"
        return (
            f"--- File Contents of '{self.filename}' ---:\n"
            f"{self.content}"
            "--- End of File Contents --- \n"
        )