"""Menu-driven console front end for editing a single document."""

from __future__ import annotations

import argparse
import re
import sys
from enum import IntEnum
from typing import Callable, Iterator, TextIO

from quilleditor.document import (
    Document,
    DocumentError,
    FileAlreadyOpenError,
    NoFileOpenError,
    NothingToSaveError,
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_END_OF_EDIT = "DONE"


class MenuChoice(IntEnum):
    """The entries of the main menu."""

    EXIT = 0
    CREATE = 1
    OPEN = 2
    SAVE = 3
    SAVE_AS = 4
    CLOSE = 5
    EDIT = 6
    DISPLAY = 7


def menu_text() -> str:
    """Return the main menu followed by the choice prompt."""
    return (
        "\nText Editor Menu:\n"
        "1. Create New File\n"
        "2. Open File\n"
        "3. Save File\n"
        "4. Save File As\n"
        "5. Close File\n"
        "6. Edit File\n"
        "7. Display File Contents\n"
        "0. Exit\n"
        "Enter your choice: "
    )


def _read_line(stream: TextIO) -> str:
    line = stream.readline()
    if not line:
        raise EOFError("input ended")
    return line[:-1] if line.endswith("\n") else line


def read_choice(stream: TextIO, out: TextIO) -> int:
    """Read lines until one starts with an integer and return it.

    Blank lines are skipped; any other line is rejected with a prompt.
    Raises EOFError when the input ends first.
    """
    while line := stream.readline():
        if not line.strip():
            continue
        match = _LEADING_INT.match(line)
        if match:
            return int(match.group(1))
        out.write("Invalid input. Please enter a number: ")
    raise EOFError("input ended before a number was entered")


def read_edit_lines(stream: TextIO) -> Iterator[str]:
    """Yield lines from ``stream`` until a line reading DONE or end of input."""
    while line := stream.readline():
        line = line[:-1] if line.endswith("\n") else line
        if line == _END_OF_EDIT:
            return
        yield line


def _create(doc: Document, stream: TextIO, out: TextIO) -> None:
    if doc.is_open():
        raise FileAlreadyOpenError("creating a new one")
    out.write("Enter the name of the new file: ")
    name = _read_line(stream)
    doc.create(name)
    out.write(
        f"File '{name}' created in memory.  Use 'Edit File' to add content, "
        "and 'Save File' to save to disk.\n"
    )


def _open(doc: Document, stream: TextIO, out: TextIO) -> None:
    if doc.is_open():
        raise FileAlreadyOpenError("opening another one")
    out.write("Enter the name of the file to open: ")
    name = _read_line(stream)
    doc.open(name)
    out.write(f"File '{name}' opened.\n")


def _save(doc: Document, stream: TextIO, out: TextIO) -> None:
    doc.save()
    out.write(f"File '{doc.filename}' saved.\n")


def _save_as(doc: Document, stream: TextIO, out: TextIO) -> None:
    if not doc.content:
        raise NothingToSaveError()
    out.write("Enter the new name for the file: ")
    name = _read_line(stream)
    doc.save_as(name)
    out.write(f"File saved as '{name}'\n")


def _close(doc: Document, stream: TextIO, out: TextIO) -> None:
    doc.close()
    out.write("File closed.\n")


def _prompted_edit(stream: TextIO, out: TextIO) -> Iterator[str]:
    out.write(
        "Enter the text to add to the file "
        "(or type 'DONE' on a new line to finish):\n"
    )
    yield from read_edit_lines(stream)
    out.write("Finished editing.\n")


def _edit(doc: Document, stream: TextIO, out: TextIO) -> None:
    doc.append_lines(_prompted_edit(stream, out))


def _display(doc: Document, stream: TextIO, out: TextIO) -> None:
    out.write(doc.render())


_ACTIONS: dict[MenuChoice, Callable[[Document, TextIO, TextIO], None]] = {
    MenuChoice.CREATE: _create,
    MenuChoice.OPEN: _open,
    MenuChoice.SAVE: _save,
    MenuChoice.SAVE_AS: _save_as,
    MenuChoice.CLOSE: _close,
    MenuChoice.EDIT: _edit,
    MenuChoice.DISPLAY: _display,
}


def run(stream: TextIO, out: TextIO, err: TextIO) -> int:
    """Run the menu loop until Exit is chosen or input ends; return 0."""
    doc = Document()
    while True:
        out.write(menu_text())
        try:
            choice = read_choice(stream, out)
        except EOFError:
            return 0
        if choice == MenuChoice.EXIT:
            return 0
        action = _ACTIONS.get(choice)
        if action is None:
            out.write("Invalid choice. Please try again.\n")
            continue
        try:
            action(doc, stream, out)
        except (FileAlreadyOpenError, NoFileOpenError, NothingToSaveError) as exc:
            out.write(f"{exc}\n")
        except DocumentError as exc:
            err.write(f"{exc}\n")
        except EOFError:
            return 0


def main(argv: list[str] | None = None) -> int:
    """Start the console editor on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="quilleditor", description="Menu-driven console text editor."
    )
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout, sys.stderr)