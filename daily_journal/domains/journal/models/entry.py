"""Journal entry and its competency tags."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column

from daily_journal.extensions import db

# Largest value a signed 64-bit integer key column can hold.
MAX_ROW_ID = 2**63 - 1


class Entry(db.Model):
    __tablename__ = "Entry"
    __table_args__ = (db.Index("ix_entry_user_id", "user", "id"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    # Owner identity (email) as resolved from the session.
    user: Mapped[str] = mapped_column(db.String(255), nullable=False)
    text: Mapped[str] = mapped_column(db.Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column("createdAt", default=datetime.utcnow, nullable=False)


class EntryCompetency(db.Model):
    __tablename__ = "EntryCompetency"

    entry_id: Mapped[int] = mapped_column(
        "entryID", db.ForeignKey("Entry.id", ondelete="CASCADE"), primary_key=True
    )
    competency_id: Mapped[int] = mapped_column(
        "competencyID", db.ForeignKey("Competency.id"), primary_key=True, index=True
    )
