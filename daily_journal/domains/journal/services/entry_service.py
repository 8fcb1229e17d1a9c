"""Entry service: owner-scoped CRUD over journal entries and their competency tags."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional, Sequence

from daily_journal.domains.journal.errors import NotFound, Unauthenticated, UnknownCompetency
from daily_journal.domains.journal.models import MAX_ROW_ID
from daily_journal.domains.journal.repository import EntryRecord, EntryRepository

logger = logging.getLogger(__name__)


class EntryService:
    def __init__(self, repository: EntryRepository):
        self.repository = repository

    def list_entries(self, user: Optional[str]) -> List[EntryRecord]:
        # Anonymous callers see an empty journal rather than an error.
        if not user:
            return []
        return self.repository.list_for_user(user)

    def create_entry(self, user: Optional[str], text: str, competency_ids: Sequence[int]) -> EntryRecord:
        owner = _require_user(user)
        tags = _dedupe(competency_ids)
        with self.repository.transaction() as repo:
            self._check_competencies(repo, tags)
            entry_id = repo.insert_entry(owner, text).insert_id
            repo.insert_tags(entry_id, tags)
        logger.info("Created entry %s for %s with %d competencies", entry_id, owner, len(tags))
        # createdAt reflects when the response is built, not the stored column.
        return EntryRecord(id=entry_id, text=text, created_at=datetime.utcnow(), competencies=tags)

    def update_entry(
        self, user: Optional[str], entry_id: int, text: str, competency_ids: Sequence[int]
    ) -> None:
        owner = _require_user(user)
        tags = _dedupe(competency_ids)
        if entry_id > MAX_ROW_ID:
            raise NotFound("Entry not found or not authorized to edit")
        with self.repository.transaction() as repo:
            if repo.update_text(entry_id, owner, text).affected_rows == 0:
                logger.warning("Update rejected: entry %s not found for %s", entry_id, owner)
                raise NotFound("Entry not found or not authorized to edit")
            self._check_competencies(repo, tags)
            repo.delete_tags(entry_id)
            repo.insert_tags(entry_id, tags)
        logger.info("Updated entry %s for %s", entry_id, owner)

    def delete_entry(self, user: Optional[str], entry_id: int) -> None:
        owner = _require_user(user)
        if entry_id > MAX_ROW_ID:
            raise NotFound("Entry not found or not authorized to delete")
        with self.repository.transaction() as repo:
            repo.delete_tags(entry_id, owner=owner)
            if repo.delete_entry(entry_id, owner).affected_rows == 0:
                logger.warning("Delete rejected: entry %s not found for %s", entry_id, owner)
                raise NotFound("Entry not found or not authorized to delete")
        logger.info("Deleted entry %s for %s", entry_id, owner)

    @staticmethod
    def _check_competencies(repo: EntryRepository, tags: List[int]) -> None:
        unknown = set(tags) - repo.existing_competency_ids(tags)
        if unknown:
            logger.warning("Rejected unknown competency ids %s", sorted(unknown))
            raise UnknownCompetency(unknown)


def _require_user(user: Optional[str]) -> str:
    if not user:
        raise Unauthenticated()
    return user


def _dedupe(competency_ids: Sequence[int]) -> List[int]:
    seen = set()
    ordered = []
    for comp_id in competency_ids:
        if comp_id not in seen:
            seen.add(comp_id)
            ordered.append(comp_id)
    return ordered
