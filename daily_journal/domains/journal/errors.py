"""Journal domain errors and their HTTP mapping."""

from __future__ import annotations

from typing import Iterable, Optional


class JournalError(Exception):
    """Base error; ``code`` is the wire error code, ``status`` the HTTP status."""

    code = "journal_error"
    status = 400

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.code)
        self.message = message or self.code


class Unauthenticated(JournalError):
    code = "unauthenticated"
    status = 401


class MissingID(JournalError):
    code = "missing_id"
    status = 400


class NotFound(JournalError):
    code = "not_found"
    status = 404


class UnknownCompetency(JournalError):
    code = "unknown_competency"
    status = 400

    def __init__(self, competency_ids: Iterable[int]):
        self.competency_ids = sorted(set(competency_ids))
        super().__init__(f"Unknown competency ids: {self.competency_ids}")


__all__ = [
    "JournalError",
    "MissingID",
    "NotFound",
    "Unauthenticated",
    "UnknownCompetency",
]
