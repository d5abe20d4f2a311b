# quilleditor

A small plain-text editor with two front ends:

- `quilleditor`, a menu-driven editor that runs in the terminal, and
- `quilleditor-gui`, a window with a text area and a File menu
  (New, Open..., Save, Save As..., Close, Exit), built on tkinter.

It has no dependencies outside the standard library. The windowed editor
needs a Python built with Tk support.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The console editor

```
quilleditor
```

You are shown a numbered menu:

```
1. Create New File
2. Open File
3. Save File
4. Save File As
5. Close File
6. Edit File
7. Display File Contents
0. Exit
```

- Only one file is held at a time. Close the current file before you create
  or open another one.
- A new file lives only in memory until you save it.
- "Edit File" appends the lines you type to the end of the file; type `DONE`
  on a line of its own to stop.
- "Save File As" writes the content under a new name and makes that name the
  current file. It refuses when the content is empty.
- "Display File Contents" prints the content between header and footer
  lines, or says that the file is empty.
- If a menu choice is not a number you are asked again; blank lines are
  ignored, and a number that is not on the menu is rejected.
- The editor exits on 0 or when the input ends.

Read and write failures are reported on standard error; the other messages
go to standard output.

## The windowed editor

```
quilleditor-gui
```

The window opens at 800x600 with word wrapping. Its title is "Text Editor"
for an unnamed document and the file's base name once it has been opened or
saved. Save on a document with no name asks for one, as Save As does; the
Save As dialog asks before overwriting. Close clears the document, as New
does. If a file cannot be read or written, an error dialog says so.

## Using it from Python

The document model works without any front end:

```python
from quilleditor.document import Document

doc = Document()
doc.create("notes.txt")
doc.append_lines(["first line", "second line"])
doc.save()
print(doc.render())
doc.close()
```

`Document` raises `FileAlreadyOpenError`, `NoFileOpenError` or
`NothingToSaveError` where an operation does not apply, and `DocumentError`
(the base class of all three) when a file cannot be read or written. A
failed `open` leaves the document closed.

`quilleditor.session.EditorSession` holds the state behind the window: the
text, the current path and the title (see `window_title`). Its `save`
raises `NoFileOpenError` while there is no path. `quilleditor.gui.EditorController`
carries out the File menu commands against any object providing
`get_text`, `set_text` and `set_title`, and another providing
`ask_open_path`, `ask_save_path` and `show_error`, so it can be driven
without a display.

Files are read and written as UTF-8, with line endings kept as they are.

## What it does not do

The console editor can only append lines; it cannot change or delete text
already in a file. Neither front end offers search, replace or a choice of
encoding, and neither asks before discarding unsaved changes.