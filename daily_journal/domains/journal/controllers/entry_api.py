"""Journal entry JSON API mounted at /api/entry."""

from __future__ import annotations

from typing import Callable

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from daily_journal.core.auth.session import require_identity, resolve_identity
from daily_journal.domains.journal.errors import JournalError, MissingID
from daily_journal.domains.journal.mappers import map_entry
from daily_journal.domains.journal.repository import EntryRepository
from daily_journal.domains.journal.schemas.journal_schemas import EntryWrite
from daily_journal.domains.journal.services import EntryService
from daily_journal.extensions import db

# app.extensions key for a zero-argument callable returning an EntryService.
ENTRY_SERVICE_FACTORY = "journal.entry_service_factory"

entry_api_bp = Blueprint("entry_api", __name__)


def _entry_service() -> EntryService:
    factory: Callable[[], EntryService] | None = current_app.extensions.get(ENTRY_SERVICE_FACTORY)
    if factory is not None:
        return factory()
    return EntryService(EntryRepository(db.session))


def _validation_error(exc: ValidationError):
    return jsonify({"ok": False, "error": "validation_error", "details": exc.errors()}), 400


@entry_api_bp.errorhandler(JournalError)
def _journal_error(exc: JournalError):
    return jsonify({"ok": False, "error": exc.code}), exc.status


@entry_api_bp.get("")
def list_entries():
    entries = _entry_service().list_entries(resolve_identity())
    return jsonify([map_entry(e) for e in entries])


@entry_api_bp.post("")
def create_entry():
    user = require_identity()
    try:
        data = EntryWrite.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        return _validation_error(exc)
    entry = _entry_service().create_entry(user, data.text, data.competency_ids)
    return jsonify(map_entry(entry))


@entry_api_bp.put("/<int:entry_id>")
def update_entry(entry_id: int):
    user = require_identity()
    try:
        data = EntryWrite.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        return _validation_error(exc)
    _entry_service().update_entry(user, entry_id, data.text, data.competency_ids)
    return jsonify({"ok": True, "message": "Entry updated successfully"})


@entry_api_bp.delete("/<int:entry_id>")
def delete_entry(entry_id: int):
    user = require_identity()
    _entry_service().delete_entry(user, entry_id)
    return jsonify({"ok": True, "message": "Entry deleted successfully"})


@entry_api_bp.route("", methods=["PUT", "DELETE"])
@entry_api_bp.route("/", methods=["PUT", "DELETE"])
def missing_entry_id():
    require_identity()
    raise MissingID("Entry ID not provided")
