from __future__ import annotations

from .base import Persistence, SaveResult, SaveStatus


class DBStorage(Persistence):
    """Placeholder for a database backend; accepts data and stores nothing."""

    @property
    def name(self) -> str:
        return "db"

    def save(self, data: str) -> SaveResult:
        return SaveResult(SaveStatus.SKIPPED)
