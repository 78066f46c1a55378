from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple, Union


@dataclass(frozen=True)
class TextElement:
    text: str

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class ImageElement:
    path: str

    def render(self) -> str:
        return f"[Image: {self.path}]"


@dataclass(frozen=True)
class NewLineElement:
    def render(self) -> str:
        return "\n"


@dataclass(frozen=True)
class TabSpaceElement:
    def render(self) -> str:
        return "\t"


DocumentElement = Union[TextElement, ImageElement, NewLineElement, TabSpaceElement]

# Keep in sync with DocumentElement and render_element.
ELEMENT_TYPES = (TextElement, ImageElement, NewLineElement, TabSpaceElement)


def render_element(element: DocumentElement) -> str:
    """Render a single element, rejecting anything outside the element set."""
    if isinstance(element, TextElement):
        return element.render()
    elif isinstance(element, ImageElement):
        return element.render()
    elif isinstance(element, NewLineElement):
        return element.render()
    elif isinstance(element, TabSpaceElement):
        return element.render()
    raise TypeError(f"Unsupported document element: {type(element).__name__}")


@dataclass
class Document:
    _elements: List[DocumentElement] = field(default_factory=list, init=False)

    @property
    def elements(self) -> Tuple[DocumentElement, ...]:
        """Read-only snapshot; the only way to grow a Document is add_element."""
        return tuple(self._elements)

    def add_element(self, element: DocumentElement) -> None:
        if not isinstance(element, ELEMENT_TYPES):
            raise TypeError(f"Unsupported document element: {type(element).__name__}")
        self._elements.append(element)

    def render(self) -> str:
        # insertion order is the output order
        return "".join(render_element(el) for el in self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[DocumentElement]:
        return iter(tuple(self._elements))
