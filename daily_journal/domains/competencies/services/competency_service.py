"""Competency catalog reads and seeding."""

from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from daily_journal.domains.competencies.models import Competency
from daily_journal.extensions import db

logger = logging.getLogger(__name__)

DEFAULT_CATALOG: Tuple[Tuple[str, str], ...] = (
    ("Communication", "Expressing ideas clearly in writing and conversation."),
    ("Teamwork", "Working with others toward a shared goal."),
    ("Problem Solving", "Breaking down problems and finding workable solutions."),
    ("Critical Thinking", "Evaluating information and arguments before acting on them."),
    ("Leadership", "Guiding and motivating people and taking ownership of outcomes."),
    ("Adaptability", "Adjusting to new situations, tools and feedback."),
    ("Time Management", "Planning work and prioritising under constraints."),
)


def list_competencies() -> List[Competency]:
    return Competency.query.order_by(Competency.id).all()


def seed_competencies(catalog: Iterable[Tuple[str, str]] = DEFAULT_CATALOG) -> int:
    """Insert catalog skills that are not present yet; return how many were added."""
    existing = {skill for (skill,) in db.session.query(Competency.skill).all()}
    added = 0
    for skill, description in catalog:
        if skill in existing:
            continue
        db.session.add(Competency(skill=skill, description=description))
        existing.add(skill)
        added += 1
    db.session.commit()
    logger.info("Seeded %d competencies", added)
    return added
