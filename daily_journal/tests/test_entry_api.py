"""Entry API tests.

Covers every verb on /api/entry:
- GET /api/entry - list_entries
- POST /api/entry - create_entry
- PUT /api/entry/<id> - update_entry
- DELETE /api/entry/<id> - delete_entry
"""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.integration

from daily_journal.domains.journal.models import Entry, EntryCompetency
from daily_journal.extensions import db

OWNER = "owner@example.com"
OTHER = "other@example.com"


def _create(client, headers, text="A thought", competency_ids=()):
    resp = client.post(
        "/api/entry",
        json={"text": text, "competencyIDs": list(competency_ids)},
        headers=headers,
    )
    assert resp.status_code == 200, resp.get_json()
    return resp.get_json()


def _list(client, headers=None):
    resp = client.get("/api/entry", headers=headers or {})
    assert resp.status_code == 200
    return resp.get_json()


# ==================== Create ====================


def test_create_returns_entry_shape(client, auth_headers, competencies):
    body = _create(client, auth_headers(OWNER), text="Led standup", competency_ids=[3, 1])
    assert isinstance(body["id"], int)
    assert body["text"] == "Led standup"
    assert body["competencies"] == [3, 1]
    assert body["createdAt"].endswith("Z")


def test_create_id_is_retrievable_via_get(client, auth_headers, competencies):
    headers = auth_headers(OWNER)
    created = _create(client, headers, text="Find me", competency_ids=[2])
    listed = _list(client, headers)
    assert [e["id"] for e in listed] == [created["id"]]
    assert listed[0]["text"] == "Find me"
    assert listed[0]["competencies"] == [2]


def test_create_requires_session(client, competencies):
    resp = client.post("/api/entry", json={"text": "nope", "competencyIDs": []})
    assert resp.status_code == 401
    assert resp.get_json() == {"ok": False, "error": "unauthenticated"}
    assert Entry.query.count() == 0


def test_create_rejects_invalid_token(client):
    resp = client.post(
        "/api/entry",
        json={"text": "nope", "competencyIDs": []},
        headers={"Authorization": "Bearer not-a-jwt"},
    )
    assert resp.status_code == 401


def test_create_checks_session_before_body(client):
    resp = client.post("/api/entry", json={"competencyIDs": "bad"})
    assert resp.status_code == 401


def test_create_validation_error(client, auth_headers):
    resp = client.post("/api/entry", json={"competencyIDs": [1]}, headers=auth_headers(OWNER))
    assert resp.status_code == 400
    body = resp.get_json()
    assert body["error"] == "validation_error"
    assert body["details"]


def test_create_accepts_empty_text(client, auth_headers):
    body = _create(client, auth_headers(OWNER), text="")
    assert body["text"] == ""
    assert _list(client, auth_headers(OWNER))[0]["text"] == ""


@pytest.mark.parametrize("bad_id", [0, -3, 2**63])
def test_create_rejects_out_of_range_competency_id(client, auth_headers, bad_id):
    resp = client.post(
        "/api/entry",
        json={"text": "Huge", "competencyIDs": [bad_id]},
        headers=auth_headers(OWNER),
    )
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "validation_error"
    assert Entry.query.count() == 0


def test_create_without_competencies_defaults_to_empty(client, auth_headers):
    resp = client.post("/api/entry", json={"text": "Untagged"}, headers=auth_headers(OWNER))
    assert resp.status_code == 200
    assert resp.get_json()["competencies"] == []


def test_create_drops_duplicate_competencies(client, auth_headers, competencies):
    body = _create(client, auth_headers(OWNER), competency_ids=[2, 2, 1, 2])
    assert body["competencies"] == [2, 1]
    assert EntryCompetency.query.filter_by(entry_id=body["id"]).count() == 2


def test_create_rejects_unknown_competency_without_writing(client, auth_headers, competencies):
    resp = client.post(
        "/api/entry",
        json={"text": "Dangling", "competencyIDs": [1, 999]},
        headers=auth_headers(OWNER),
    )
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "unknown_competency"
    assert Entry.query.count() == 0
    assert EntryCompetency.query.count() == 0


# ==================== List ====================


def test_list_unauthenticated_returns_empty_array(client, auth_headers, competencies):
    _create(client, auth_headers(OWNER), competency_ids=[1])
    resp = client.get("/api/entry")
    assert resp.status_code == 200
    assert resp.get_json() == []


def test_list_with_invalid_token_returns_empty_array(client, auth_headers):
    _create(client, auth_headers(OWNER))
    resp = client.get("/api/entry", headers={"Authorization": "Bearer garbage"})
    assert resp.status_code == 200
    assert resp.get_json() == []


def test_list_orders_by_descending_id(client, auth_headers, competencies):
    headers = auth_headers(OWNER)
    ids = [_create(client, headers, text=f"Entry {i}")["id"] for i in range(4)]
    # Editing an older entry must not move it.
    client.put(f"/api/entry/{ids[0]}", json={"text": "edited", "competencyIDs": []}, headers=headers)
    listed = _list(client, headers)
    assert [e["id"] for e in listed] == sorted(ids, reverse=True)


def test_list_includes_untagged_entries(client, auth_headers, competencies):
    headers = auth_headers(OWNER)
    tagged = _create(client, headers, competency_ids=[1, 4])
    untagged = _create(client, headers)
    listed = {e["id"]: e for e in _list(client, headers)}
    assert listed[untagged["id"]]["competencies"] == []
    assert sorted(listed[tagged["id"]]["competencies"]) == [1, 4]


def test_list_is_scoped_to_owner(client, auth_headers):
    _create(client, auth_headers(OWNER), text="Private")
    assert _list(client, auth_headers(OTHER)) == []


# ==================== Update ====================


def test_update_replaces_competency_set(client, auth_headers, competencies):
    headers = auth_headers(OWNER)
    created = _create(client, headers, text="Before", competency_ids=[1, 3])

    resp = client.put(
        f"/api/entry/{created['id']}",
        json={"text": "After", "competencyIDs": [2]},
        headers=headers,
    )
    assert resp.status_code == 200
    assert resp.get_json()["message"] == "Entry updated successfully"

    listed = _list(client, headers)
    assert listed[0]["text"] == "After"
    assert listed[0]["competencies"] == [2]


def test_update_to_empty_competency_set(client, auth_headers, competencies):
    headers = auth_headers(OWNER)
    created = _create(client, headers, competency_ids=[1, 2])
    client.put(f"/api/entry/{created['id']}", json={"text": "bare", "competencyIDs": []}, headers=headers)
    assert _list(client, headers)[0]["competencies"] == []


def test_update_nonexistent_returns_404_and_mutates_nothing(client, auth_headers, competencies):
    headers = auth_headers(OWNER)
    created = _create(client, headers, text="Keep", competency_ids=[1])

    resp = client.put(
        "/api/entry/99999",
        json={"text": "ghost", "competencyIDs": [2]},
        headers=headers,
    )
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "not_found"
    assert Entry.query.count() == 1
    assert [(t.entry_id, t.competency_id) for t in EntryCompetency.query.all()] == [(created["id"], 1)]


def test_update_nonexistent_with_unknown_competency_returns_404(client, auth_headers, competencies):
    resp = client.put(
        "/api/entry/4242",
        json={"text": "x", "competencyIDs": [77]},
        headers=auth_headers(OWNER),
    )
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "not_found"


def test_update_oversized_id_returns_404(client, auth_headers):
    resp = client.put(
        "/api/entry/99999999999999999999",
        json={"text": "x", "competencyIDs": []},
        headers=auth_headers(OWNER),
    )
    assert resp.status_code == 404
    assert resp.get_json() == {"ok": False, "error": "not_found"}


def test_update_oversized_competency_id_returns_400(client, auth_headers):
    created = _create(client, auth_headers(OWNER), text="Keep")
    resp = client.put(
        f"/api/entry/{created['id']}",
        json={"text": "x", "competencyIDs": [99999999999999999999]},
        headers=auth_headers(OWNER),
    )
    assert resp.status_code == 400
    assert _list(client, auth_headers(OWNER))[0]["text"] == "Keep"


def test_update_to_empty_text(client, auth_headers):
    headers = auth_headers(OWNER)
    created = _create(client, headers, text="Something")
    resp = client.put(f"/api/entry/{created['id']}", json={"text": "", "competencyIDs": []}, headers=headers)
    assert resp.status_code == 200
    assert _list(client, headers)[0]["text"] == ""


def test_update_other_users_entry_returns_404(client, auth_headers, competencies):
    created = _create(client, auth_headers(OWNER), text="Mine", competency_ids=[1])
    resp = client.put(
        f"/api/entry/{created['id']}",
        json={"text": "Hijacked", "competencyIDs": [2]},
        headers=auth_headers(OTHER),
    )
    assert resp.status_code == 404
    listed = _list(client, auth_headers(OWNER))
    assert listed[0]["text"] == "Mine"
    assert listed[0]["competencies"] == [1]


def test_update_requires_session(client, auth_headers):
    created = _create(client, auth_headers(OWNER))
    resp = client.put(f"/api/entry/{created['id']}", json={"text": "x", "competencyIDs": []})
    assert resp.status_code == 401


def test_update_without_id_returns_400(client, auth_headers):
    resp = client.put("/api/entry", json={"text": "x", "competencyIDs": []}, headers=auth_headers(OWNER))
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "missing_id"


def test_update_unknown_competency_keeps_previous_state(client, auth_headers, competencies):
    headers = auth_headers(OWNER)
    created = _create(client, headers, text="Stable", competency_ids=[3])
    resp = client.put(
        f"/api/entry/{created['id']}",
        json={"text": "Changed", "competencyIDs": [42]},
        headers=headers,
    )
    assert resp.status_code == 400
    listed = _list(client, headers)
    assert listed[0]["text"] == "Stable"
    assert listed[0]["competencies"] == [3]


# ==================== Delete ====================


def test_delete_removes_entry_and_tags(client, auth_headers, competencies):
    headers = auth_headers(OWNER)
    created = _create(client, headers, competency_ids=[1, 2])
    resp = client.delete(f"/api/entry/{created['id']}", headers=headers)
    assert resp.status_code == 200
    assert resp.get_json()["message"] == "Entry deleted successfully"
    assert _list(client, headers) == []
    assert EntryCompetency.query.count() == 0


def test_delete_twice_returns_200_then_404(client, auth_headers):
    headers = auth_headers(OWNER)
    created = _create(client, headers)
    assert client.delete(f"/api/entry/{created['id']}", headers=headers).status_code == 200
    assert client.delete(f"/api/entry/{created['id']}", headers=headers).status_code == 404


def test_delete_by_other_user_returns_404_and_keeps_entry(client, auth_headers, competencies):
    created = _create(client, auth_headers(OWNER), text="Survivor", competency_ids=[2, 3])
    resp = client.delete(f"/api/entry/{created['id']}", headers=auth_headers(OTHER))
    assert resp.status_code == 404

    listed = _list(client, auth_headers(OWNER))
    assert [e["id"] for e in listed] == [created["id"]]
    assert sorted(listed[0]["competencies"]) == [2, 3]


def test_delete_without_id_returns_400(client, auth_headers):
    assert client.delete("/api/entry", headers=auth_headers(OWNER)).status_code == 400
    assert client.delete("/api/entry/", headers=auth_headers(OWNER)).status_code == 400


def test_delete_without_id_checks_session_first(client):
    assert client.delete("/api/entry").status_code == 401


def test_delete_requires_session(client, auth_headers):
    created = _create(client, auth_headers(OWNER))
    assert client.delete(f"/api/entry/{created['id']}").status_code == 401
    assert db.session.get(Entry, created["id"]) is not None


def test_delete_oversized_id_returns_404(client, auth_headers):
    resp = client.delete("/api/entry/99999999999999999999", headers=auth_headers(OWNER))
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "not_found"
