"""Entry, Competency and EntryCompetency tables.

Revision ID: 20261018_journal_initial
Revises:
Create Date: 2026-10-18
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20261018_journal_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "Competency",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("skill", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.UniqueConstraint("skill", name="uq_competency_skill"),
    )
    op.create_table(
        "Entry",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user", sa.String(length=255), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("createdAt", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_entry_user_id", "Entry", ["user", "id"])
    op.create_table(
        "EntryCompetency",
        sa.Column(
            "entryID",
            sa.Integer(),
            sa.ForeignKey("Entry.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("competencyID", sa.Integer(), sa.ForeignKey("Competency.id"), primary_key=True),
    )
    op.create_index("ix_EntryCompetency_competencyID", "EntryCompetency", ["competencyID"])


def downgrade():
    op.drop_index("ix_EntryCompetency_competencyID", table_name="EntryCompetency")
    op.drop_table("EntryCompetency")
    op.drop_index("ix_entry_user_id", table_name="Entry")
    op.drop_table("Entry")
    op.drop_table("Competency")
