"""Competency reference catalog."""

from __future__ import annotations

from sqlalchemy.orm import Mapped, mapped_column

from daily_journal.extensions import db


class Competency(db.Model):
    __tablename__ = "Competency"

    id: Mapped[int] = mapped_column(primary_key=True)
    skill: Mapped[str] = mapped_column(db.String(255), nullable=False, unique=True)
    description: Mapped[str] = mapped_column(db.Text, nullable=False, default="")
