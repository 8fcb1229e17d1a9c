"""HTTP client for the journal API."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import requests


class JournalApiError(Exception):
    """A request failed, either at the transport level or with a non-2xx status."""

    def __init__(self, message: str, status: Optional[int] = None, code: Optional[str] = None):
        super().__init__(message)
        self.status = status
        self.code = code


class JournalApiClient:
    def __init__(
        self,
        base_url: str,
        access_token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 10.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.access_token = access_token
        self.session = session or requests.Session()
        self.timeout = timeout

    def list_entries(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/entry")

    def list_competencies(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/competencies")

    def create_entry(self, text: str, competency_ids: Sequence[int]) -> Dict[str, Any]:
        return self._request("POST", "/api/entry", json={"text": text, "competencyIDs": list(competency_ids)})

    def update_entry(self, entry_id: int, text: str, competency_ids: Sequence[int]) -> Dict[str, Any]:
        return self._request(
            "PUT",
            f"/api/entry/{entry_id}",
            json={"text": text, "competencyIDs": list(competency_ids)},
        )

    def delete_entry(self, entry_id: int) -> Dict[str, Any]:
        return self._request("DELETE", f"/api/entry/{entry_id}")

    def _request(self, method: str, path: str, **kwargs) -> Any:
        headers = {"Accept": "application/json"}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        try:
            resp = self.session.request(
                method, self.base_url + path, headers=headers, timeout=self.timeout, **kwargs
            )
        except requests.exceptions.RequestException as exc:
            raise JournalApiError(f"{method} {path} failed: {exc}") from exc
        if not resp.ok:
            try:
                body = resp.json()
            except ValueError:
                body = None
            code = body.get("error") if isinstance(body, dict) else None
            raise JournalApiError(f"{method} {path} returned {resp.status_code}", status=resp.status_code, code=code)
        return resp.json()
