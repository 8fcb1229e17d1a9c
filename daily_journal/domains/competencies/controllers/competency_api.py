"""Competency catalog API."""

from __future__ import annotations

from flask import Blueprint, jsonify

from daily_journal.domains.competencies.schemas import CompetencyResponse
from daily_journal.domains.competencies.services import competency_service

competency_api_bp = Blueprint("competency_api", __name__)


@competency_api_bp.get("")
def list_competencies():
    items = competency_service.list_competencies()
    return jsonify([CompetencyResponse.model_validate(c).model_dump() for c in items])
