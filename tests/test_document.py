import pytest

from quilleditor.document import (
    Document,
    DocumentError,
    FileAlreadyOpenError,
    NoFileOpenError,
    NothingToSaveError,
)


def test_create_opens_empty_document():
    doc = Document()
    doc.create("notes.txt")
    assert doc.is_open()
    assert doc.filename == "notes.txt"
    assert doc.content == ""


def test_create_when_open_raises():
    doc = Document()
    doc.create("a.txt")
    with pytest.raises(FileAlreadyOpenError) as info:
        doc.create("b.txt")
    assert str(info.value) == "Close the current file before creating a new one."
    assert doc.filename == "a.txt"


def test_open_when_open_raises(tmp_path):
    path = tmp_path / "x.txt"
    path.write_text("x")
    doc = Document()
    doc.create("a.txt")
    with pytest.raises(FileAlreadyOpenError) as info:
        doc.open(str(path))
    assert str(info.value) == "Close the current file before opening another one."


def test_open_reads_content(tmp_path):
    path = tmp_path / "in.txt"
    path.write_bytes(b"first\r\nsecond\n")
    doc = Document()
    doc.open(str(path))
    assert doc.filename == str(path)
    assert doc.content == "first\r\nsecond\n"


def test_open_missing_file_clears_state(tmp_path):
    missing = str(tmp_path / "missing.txt")
    doc = Document()
    with pytest.raises(DocumentError) as info:
        doc.open(missing)
    assert "It may not exist." in str(info.value)
    assert not doc.is_open()
    assert doc.content == ""


def test_save_without_file_raises():
    with pytest.raises(NoFileOpenError) as info:
        Document(content="text").save()
    assert str(info.value) == "No file is currently open or created."


def test_save_writes_content(tmp_path):
    path = tmp_path / "out.txt"
    doc = Document()
    doc.create(str(path))
    doc.append_lines(["alpha", "beta"])
    doc.save()
    assert path.read_text() == doc.content


def test_save_to_directory_raises_document_error(tmp_path):
    doc = Document()
    doc.create(str(tmp_path))
    doc.append_lines(["x"])
    with pytest.raises(DocumentError) as info:
        doc.save()
    assert not isinstance(info.value, NoFileOpenError)
    assert str(info.value).startswith("Error saving file")


def test_save_as_without_content_raises(tmp_path):
    doc = Document()
    doc.create("a.txt")
    with pytest.raises(NothingToSaveError) as info:
        doc.save_as(str(tmp_path / "b.txt"))
    assert str(info.value) == "No file content to save."


def test_save_as_writes_and_renames(tmp_path):
    target = tmp_path / "copy.txt"
    doc = Document()
    doc.create("original.txt")
    doc.append_lines(["line"])
    doc.save_as(str(target))
    assert doc.filename == str(target)
    assert target.read_text() == doc.content


def test_save_as_failure_keeps_name(tmp_path):
    doc = Document()
    doc.create("original.txt")
    doc.append_lines(["line"])
    with pytest.raises(DocumentError):
        doc.save_as(str(tmp_path / "no" / "such" / "dir.txt"))
    assert doc.filename == "original.txt"


def test_close_clears_document():
    doc = Document()
    doc.create("a.txt")
    doc.append_lines(["x"])
    doc.close()
    assert not doc.is_open()
    assert doc.content == ""


def test_close_without_file_raises():
    with pytest.raises(NoFileOpenError) as info:
        Document().close()
    assert str(info.value) == "No file is currently open."


def test_append_lines_adds_newlines():
    doc = Document()
    doc.create("a.txt")
    doc.append_lines(["one", "two"])
    doc.append_lines(["three"])
    assert doc.content == "one\ntwo\nthree\n"


def test_append_lines_without_file_leaves_input_unread():
    lines = iter(["kept"])
    with pytest.raises(NoFileOpenError):
        Document().append_lines(lines)
    assert next(lines) == "kept"


def test_render_empty_document():
    doc = Document()
    doc.create("a.txt")
    assert doc.render() == "The file is empty.\n"


def test_render_frames_content():
    doc = Document()
    doc.create("a.txt")
    doc.append_lines(["body"])
    text = doc.render()
    assert text.startswith("--- File Contents of 'a.txt' ---:\n")
    assert text.endswith("--- End of File Contents --- \n")
    assert "body\n" in text


def test_render_without_file_raises():
    with pytest.raises(NoFileOpenError):
        Document().render()