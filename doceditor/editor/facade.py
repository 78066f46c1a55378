"""Editor facade over a Document and a storage backend.

Both collaborators are injected so alternate backends can be used
without touching this module.
"""

from __future__ import annotations

from typing import Optional

from doceditor.docs import (
    Document,
    DocumentElement,
    ImageElement,
    NewLineElement,
    TabSpaceElement,
    TextElement,
)
from doceditor.storage import Persistence, SaveResult


class DocumentEditor:
    def __init__(self, document: Document, storage: Persistence) -> None:
        if document is None or storage is None:
            raise ValueError("DocumentEditor requires both a document and a storage backend.")
        self._document = document
        self._storage = storage
        self._rendered: Optional[str] = None

    @property
    def document(self) -> Document:
        return self._document

    @property
    def storage(self) -> Persistence:
        return self._storage

    def _append(self, element: DocumentElement) -> None:
        self._document.add_element(element)
        self._rendered = None

    def add_text(self, text: str) -> None:
        self._append(TextElement(text))

    def add_image(self, path: str) -> None:
        self._append(ImageElement(path))

    def add_new_line(self) -> None:
        self._append(NewLineElement())

    def add_tab_space(self) -> None:
        self._append(TabSpaceElement())

    def render_document(self) -> str:
        """Return the rendered document, reusing the cached render until the next add."""
        if not self._rendered:
            self._rendered = self._document.render()
        return self._rendered

    def save_document(self) -> SaveResult:
        """Render and hand the text to the storage backend.

        Doxygen:
        - @return: The backend's `SaveResult`; write failures are not raised.
        """
        return self._storage.save(self.render_document())
