"""Graphical editor window with a File menu."""

from __future__ import annotations

import argparse
from typing import Any, Optional, Protocol

from quilleditor.document import DocumentError, NoFileOpenError
from quilleditor.session import EditorSession


class EditorView(Protocol):
    """The text area and window title the controller drives."""

    def get_text(self) -> str: ...

    def set_text(self, text: str) -> None: ...

    def set_title(self, title: str) -> None: ...


class EditorDialogs(Protocol):
    """File choosers and error reporting shown to the user."""

    def ask_open_path(self) -> Optional[str]: ...

    def ask_save_path(self) -> Optional[str]: ...

    def show_error(self, message: str) -> None: ...


class EditorController:
    """Carries out the File menu commands against a view and a session."""

    def __init__(
        self,
        view: EditorView,
        dialogs: EditorDialogs,
        session: Optional[EditorSession] = None,
    ) -> None:
        self.view = view
        self.dialogs = dialogs
        self.session = session if session is not None else EditorSession()

    def _refresh(self) -> None:
        self.view.set_text(self.session.text)
        self.view.set_title(self.session.title())

    def new_file(self) -> None:
        """Clear the text and forget the file name."""
        self.session.new()
        self._refresh()

    def open_file(self) -> None:
        """Ask for a file and load it into the view."""
        path = self.dialogs.ask_open_path()
        if not path:
            return
        try:
            self.session.open(path)
        except DocumentError as exc:
            self.dialogs.show_error(str(exc))
            return
        self._refresh()

    def save_file(self) -> None:
        """Save to the current file, asking for a name if there is none."""
        self.session.text = self.view.get_text()
        try:
            self.session.save()
        except NoFileOpenError:
            self.save_file_as()
        except DocumentError as exc:
            self.dialogs.show_error(str(exc))

    def save_file_as(self) -> None:
        """Ask for a file name and save the text there."""
        path = self.dialogs.ask_save_path()
        if not path:
            return
        self.session.text = self.view.get_text()
        try:
            self.session.save_as(path)
        except DocumentError as exc:
            self.dialogs.show_error(str(exc))
            return
        self.view.set_title(self.session.title())

    def close_file(self) -> None:
        """Close the file, leaving an empty document."""
        self.new_file()


class _TkView:
    def __init__(self, root: Any, text_widget: Any) -> None:
        self._root = root
        self._text = text_widget

    def get_text(self) -> str:
        return self._text.get("1.0", "end-1c")

    def set_text(self, text: str) -> None:
        self._text.delete("1.0", "end")
        self._text.insert("1.0", text)

    def set_title(self, title: str) -> None:
        self._root.title(title)


class _TkDialogs:
    def __init__(self, root: Any) -> None:
        self._root = root

    def ask_open_path(self) -> Optional[str]:
        from tkinter import filedialog

        path = filedialog.askopenfilename(parent=self._root, title="Open File")
        return path or None

    def ask_save_path(self) -> Optional[str]:
        from tkinter import filedialog

        path = filedialog.asksaveasfilename(
            parent=self._root, title="Save As", confirmoverwrite=True
        )
        return path or None

    def show_error(self, message: str) -> None:
        from tkinter import messagebox

        messagebox.showerror("Error", message, parent=self._root)


def build_window(root: Any) -> EditorController:
    """Fill ``root`` with the menu bar and text area; return the controller."""
    import tkinter as tk

    session = EditorSession()
    root.title(session.title())
    root.geometry("800x600")

    frame = tk.Frame(root)
    frame.pack(fill="both", expand=True)
    text = tk.Text(frame, wrap="word", undo=True)
    scrollbar = tk.Scrollbar(frame, command=text.yview)
    text.configure(yscrollcommand=scrollbar.set)
    scrollbar.pack(side="right", fill="y")
    text.pack(side="left", fill="both", expand=True)

    controller = EditorController(_TkView(root, text), _TkDialogs(root), session)

    menubar = tk.Menu(root)
    file_menu = tk.Menu(menubar, tearoff=False)
    commands = (
        ("New", controller.new_file),
        ("Open...", controller.open_file),
        ("Save", controller.save_file),
        ("Save As...", controller.save_file_as),
        ("Close", controller.close_file),
        ("Exit", root.destroy),
    )
    for label, command in commands:
        file_menu.add_command(label=label, command=command)
    menubar.add_cascade(label="File", menu=file_menu)
    root.config(menu=menubar)
    return controller


def main(argv: list[str] | None = None) -> int:
    """Open the editor window and run until it is closed."""
    parser = argparse.ArgumentParser(
        prog="quilleditor-gui", description="Graphical text editor."
    )
    parser.parse_args(argv)
    import tkinter as tk

    root = tk.Tk()
    build_window(root)
    root.mainloop()
    return 0