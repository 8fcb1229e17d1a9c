"""Journal mappers for DTO responses."""

from __future__ import annotations

from datetime import datetime, timezone

from daily_journal.domains.journal.repository import EntryRecord
from daily_journal.domains.journal.schemas.journal_schemas import EntryResponse


def isoformat_utc(value: datetime) -> str:
    # Stored timestamps are naive UTC.
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def map_entry(entry: EntryRecord) -> dict:
    return EntryResponse(
        id=entry.id,
        text=entry.text,
        created_at=isoformat_utc(entry.created_at) if entry.created_at else "",
        competencies=list(entry.competencies),
    ).model_dump(by_alias=True)
