"""Document model layer.

Exposes:
- Elements: TextElement, ImageElement, NewLineElement, TabSpaceElement
- Document: ordered, append-only element container
"""

from .model import (
    DocumentElement,
    ELEMENT_TYPES,
    Document,
    ImageElement,
    NewLineElement,
    TabSpaceElement,
    TextElement,
    render_element,
)

__all__ = [
    "DocumentElement",
    "ELEMENT_TYPES",
    "Document",
    "TextElement",
    "ImageElement",
    "NewLineElement",
    "TabSpaceElement",
    "render_element",
]
