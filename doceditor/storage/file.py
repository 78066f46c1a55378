from __future__ import annotations

from typing import Optional

from .base import Persistence, SaveResult, SaveStatus

DEFAULT_OUTPUT_PATH = "document.txt"


class FileStorage(Persistence):
    """Write the rendered document as raw text, overwriting the target file.

    ``encoding=None`` uses the platform default text encoding.
    """

    def __init__(self, path: str = DEFAULT_OUTPUT_PATH, encoding: Optional[str] = None) -> None:
        self.path = path
        self.encoding = encoding

    @property
    def name(self) -> str:
        return "file"

    def save(self, data: str) -> SaveResult:
        try:
            # newline="" keeps "\n" elements byte-for-byte on every platform
            with open(self.path, "w", encoding=self.encoding, newline="") as f:
                f.write(data)
        except (OSError, UnicodeEncodeError, LookupError) as e:
            return SaveResult(SaveStatus.FAILED, target=self.path, error=str(e))
        return SaveResult(SaveStatus.SAVED, target=self.path)
