from __future__ import annotations

from typing import Optional

from .base import Persistence
from .db import DBStorage
from .docx_io import DEFAULT_DOCX_PATH, DocxStorage
from .file import DEFAULT_OUTPUT_PATH, FileStorage

STORAGE_KINDS = ("file", "db", "docx")


def create_storage(kind: str = "file", path: Optional[str] = None, encoding: Optional[str] = None) -> Persistence:
    """Build a storage backend by name.

    Doxygen:
    - @param kind: One of {'file', 'db', 'docx'}.
    - @param path: Output path; backend default when None.
    - @param encoding: Text encoding for the 'file' backend (None = platform default).
    - @return: Configured `Persistence` instance.
    - @throws ValueError: If `kind` is not a known backend.
    """
    k = (kind or "").strip().lower()
    if k == "file":
        return FileStorage(path or DEFAULT_OUTPUT_PATH, encoding=encoding)
    if k == "db":
        return DBStorage()
    if k == "docx":
        return DocxStorage(path or DEFAULT_DOCX_PATH)
    raise ValueError(f"Unknown storage backend: {kind!r}. Expected one of: {', '.join(STORAGE_KINDS)}")
