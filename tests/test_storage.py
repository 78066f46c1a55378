import pytest
from docx import Document as DocxDocument

from doceditor.storage import (
    DBStorage,
    DocxStorage,
    FileStorage,
    SaveResult,
    SaveStatus,
    create_storage,
)


def test_file_storage_writes_exact_text(tmp_path):
    target = tmp_path / "document.txt"
    data = "A\nB\n\tC [Image: p.jpg]"
    result = FileStorage(str(target)).save(data)
    assert result.ok
    assert result.status is SaveStatus.SAVED
    assert result.target == str(target)
    # newline elements must not be translated on write
    assert target.read_bytes() == data.encode()


def test_file_storage_overwrites_existing_content(tmp_path):
    target = tmp_path / "document.txt"
    target.write_text("old content that is longer")
    FileStorage(str(target)).save("new")
    assert target.read_text() == "new"


def test_file_storage_empty_document_writes_empty_file(tmp_path):
    target = tmp_path / "empty.txt"
    assert FileStorage(str(target)).save("").ok
    assert target.exists()
    assert target.read_bytes() == b""


def test_file_storage_reports_failure_instead_of_raising(tmp_path):
    target = tmp_path / "missing-dir" / "document.txt"
    result = FileStorage(str(target)).save("data")
    assert not result.ok
    assert result.status is SaveStatus.FAILED
    assert result.error
    assert result.message().startswith("Error: Unable to save file.")


def test_file_storage_reports_encoding_failure(tmp_path):
    target = tmp_path / "document.txt"
    result = FileStorage(str(target), encoding="ascii").save("café")
    assert result.status is SaveStatus.FAILED


def test_file_storage_default_path_is_document_txt():
    assert FileStorage().path == "document.txt"


def test_db_storage_is_a_noop(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = DBStorage().save("anything")
    assert result.status is SaveStatus.SKIPPED
    assert not result.ok
    assert list(tmp_path.iterdir()) == []


def test_docx_storage_writes_one_paragraph_per_line(tmp_path):
    target = tmp_path / "out.docx"
    result = DocxStorage(str(target)).save("Hello\n\tIndented\n[Image: p.jpg]")
    assert result.ok
    paragraphs = [p.text for p in DocxDocument(str(target)).paragraphs]
    assert paragraphs == ["Hello", "\tIndented", "[Image: p.jpg]"]


def test_docx_storage_reports_failure(tmp_path):
    target = tmp_path / "nope" / "out.docx"
    result = DocxStorage(str(target)).save("x")
    assert result.status is SaveStatus.FAILED


def test_save_result_messages():
    assert SaveResult(SaveStatus.SAVED, target="document.txt").message() == "Document saved to document.txt"
    assert SaveResult(SaveStatus.FAILED).message() == "Error: Unable to save file."
    assert "not stored" in SaveResult(SaveStatus.SKIPPED).message()


def test_create_storage_known_kinds(tmp_path):
    fs = create_storage("file", path=str(tmp_path / "a.txt"), encoding="utf-8")
    assert isinstance(fs, FileStorage)
    assert fs.encoding == "utf-8"
    assert isinstance(create_storage(" DB "), DBStorage)
    ds = create_storage("docx")
    assert isinstance(ds, DocxStorage)
    assert ds.path == "document.docx"


def test_create_storage_unknown_kind():
    with pytest.raises(ValueError):
        create_storage("s3")


def test_docx_storage_reports_control_characters_as_failure(tmp_path):
    target = tmp_path / "out.docx"
    result = DocxStorage(str(target)).save("a\x00b")
    assert result.status is SaveStatus.FAILED
    assert result.error
    assert not target.exists()
