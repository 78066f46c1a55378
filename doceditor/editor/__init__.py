"""Editor facade coordinating element insertion, rendering and storage."""

from .facade import DocumentEditor

__all__ = [
    "DocumentEditor",
]
