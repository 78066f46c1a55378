"""Persistence backends for rendered documents.

Every backend returns a SaveResult instead of printing or raising on a
write failure; callers decide how to report it.
"""

from .base import Persistence, SaveResult, SaveStatus
from .file import FileStorage, DEFAULT_OUTPUT_PATH
from .db import DBStorage
from .docx_io import DocxStorage, DEFAULT_DOCX_PATH
from .factory import STORAGE_KINDS, create_storage

__all__ = [
    "Persistence",
    "SaveResult",
    "SaveStatus",
    "FileStorage",
    "DEFAULT_OUTPUT_PATH",
    "DBStorage",
    "DocxStorage",
    "DEFAULT_DOCX_PATH",
    "STORAGE_KINDS",
    "create_storage",
]
