"""Entry persistence gateway.

Executes parameterized SQL (SQLAlchemy Core) against the ``Entry``,
``EntryCompetency`` and ``Competency`` tables and reports either rows or
mutation metadata. Callers group multi-statement work with ``transaction()``.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Iterator, List, Optional, Sequence, Set

from sqlalchemy import delete, insert, select, update
from sqlalchemy.orm import Session

from daily_journal.domains.competencies.models import Competency
from daily_journal.domains.journal.models import Entry, EntryCompetency

entry_table = Entry.__table__
tag_table = EntryCompetency.__table__
competency_table = Competency.__table__


@dataclass(frozen=True)
class MutationResult:
    affected_rows: int
    insert_id: Optional[int] = None


@dataclass
class EntryRecord:
    id: int
    text: str
    created_at: datetime
    competencies: List[int] = field(default_factory=list)


class EntryRepository:
    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def transaction(self) -> Iterator["EntryRepository"]:
        """Commit everything executed inside the block, or roll all of it back."""
        try:
            yield self
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

    def insert_entry(self, user: str, text: str) -> MutationResult:
        result = self.session.execute(insert(entry_table).values(user=user, text=text))
        return MutationResult(affected_rows=result.rowcount, insert_id=result.inserted_primary_key[0])

    def insert_tags(self, entry_id: int, competency_ids: Sequence[int]) -> MutationResult:
        if not competency_ids:
            return MutationResult(affected_rows=0)
        result = self.session.execute(
            insert(tag_table),
            [{"entryID": entry_id, "competencyID": comp_id} for comp_id in competency_ids],
        )
        return MutationResult(affected_rows=result.rowcount)

    def update_text(self, entry_id: int, user: str, text: str) -> MutationResult:
        result = self.session.execute(
            update(entry_table)
            .where(entry_table.c.id == entry_id, entry_table.c.user == user)
            .values(text=text)
        )
        return MutationResult(affected_rows=result.rowcount)

    def delete_tags(self, entry_id: int, owner: Optional[str] = None) -> MutationResult:
        """Remove every tag row of an entry; with ``owner``, only if that user owns it."""
        stmt = delete(tag_table).where(tag_table.c.entryID == entry_id)
        if owner is not None:
            owned = select(entry_table.c.id).where(
                entry_table.c.id == entry_id, entry_table.c.user == owner
            )
            stmt = stmt.where(tag_table.c.entryID.in_(owned))
        result = self.session.execute(stmt)
        return MutationResult(affected_rows=result.rowcount)

    def delete_entry(self, entry_id: int, user: str) -> MutationResult:
        result = self.session.execute(
            delete(entry_table).where(entry_table.c.id == entry_id, entry_table.c.user == user)
        )
        return MutationResult(affected_rows=result.rowcount)

    def existing_competency_ids(self, competency_ids: Iterable[int]) -> Set[int]:
        wanted = set(competency_ids)
        if not wanted:
            return set()
        rows = self.session.execute(
            select(competency_table.c.id).where(competency_table.c.id.in_(wanted))
        )
        return {row.id for row in rows}

    def list_for_user(self, user: str) -> List[EntryRecord]:
        """Entries owned by ``user``, newest id first, each with its competency ids."""
        stmt = (
            select(
                entry_table.c.id,
                entry_table.c.text,
                entry_table.c.createdAt,
                competency_table.c.id.label("competency_id"),
            )
            .select_from(
                entry_table.outerjoin(tag_table, entry_table.c.id == tag_table.c.entryID).outerjoin(
                    competency_table, tag_table.c.competencyID == competency_table.c.id
                )
            )
            .where(entry_table.c.user == user)
            .order_by(entry_table.c.id.desc(), competency_table.c.id)
        )
        records: dict[int, EntryRecord] = {}
        for row in self.session.execute(stmt):
            record = records.get(row.id)
            if record is None:
                record = records[row.id] = EntryRecord(id=row.id, text=row.text, created_at=row.createdAt)
            if row.competency_id is not None:
                record.competencies.append(row.competency_id)
        return list(records.values())
