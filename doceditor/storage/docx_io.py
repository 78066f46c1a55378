from __future__ import annotations

from typing import List

from docx import Document as DocxDocument

from .base import Persistence, SaveResult, SaveStatus

DEFAULT_DOCX_PATH = "document.docx"


def _split_lines(data: str) -> List[str]:
    """Return rendered lines; a trailing newline yields a final empty paragraph."""
    return (data or "").split("\n")


class DocxStorage(Persistence):
    """Export the rendered document to a Word file, one paragraph per line."""

    def __init__(self, path: str = DEFAULT_DOCX_PATH) -> None:
        self.path = path

    @property
    def name(self) -> str:
        return "docx"

    def save(self, data: str) -> SaveResult:
        try:
            d = DocxDocument()
            for line in _split_lines(data):
                p = d.add_paragraph()
                if line:
                    # python-docx turns "\t" inside run text into a <w:tab/>
                    p.add_run(line)
            d.save(self.path)
        except (OSError, ValueError) as e:
            # ValueError: lxml rejects NUL and other control characters
            return SaveResult(SaveStatus.FAILED, target=self.path, error=str(e))
        return SaveResult(SaveStatus.SAVED, target=self.path)
