"""
Abstract base class for storage backends.

Provides a unified interface so the editor can swap between
different persistence targets without being modified.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SaveStatus(Enum):
    SAVED = "saved"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class SaveResult:
    """Outcome of a single save call."""

    status: SaveStatus
    target: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is SaveStatus.SAVED

    def message(self) -> str:
        """User-facing line describing the outcome."""
        if self.status is SaveStatus.SAVED:
            return f"Document saved to {self.target}"
        if self.status is SaveStatus.FAILED:
            if self.error:
                return f"Error: Unable to save file. ({self.error})"
            return "Error: Unable to save file."
        return "Document was not stored (storage backend is not implemented)."


class Persistence(ABC):
    """
    Common interface for all storage backends used by the editor.

    Subclasses must implement :meth:`save` and expose ``name``.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable backend identifier."""

    @abstractmethod
    def save(self, data: str) -> SaveResult:
        """
        Store the fully rendered document.

        Args:
            data: Complete rendered document text.

        Returns:
            SaveResult describing what happened. Write failures are
            reported here, never raised.
        """
