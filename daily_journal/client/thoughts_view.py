"""Client-side state for the "All My Thoughts" page.

Entries and the competency catalog are fetched once by ``load()``. After that
the local lists are what gets rendered: edits and deletes are applied to them
directly from the values the user submitted, without re-fetching.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone, tzinfo
from typing import Callable, Dict, List, Optional, Protocol, Sequence

from daily_journal.client.api_client import JournalApiError

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "No thoughts yet. Start typing!"
DELETE_FAILED = "Failed to delete thought."
UPDATE_FAILED = "Failed to update the thought."


class JournalApi(Protocol):
    def list_entries(self) -> List[dict]: ...

    def list_competencies(self) -> List[dict]: ...

    def update_entry(self, entry_id: int, text: str, competency_ids: Sequence[int]) -> dict: ...

    def delete_entry(self, entry_id: int) -> dict: ...


@dataclass
class Thought:
    id: int
    text: str
    time: str
    competencies: List[int] = field(default_factory=list)


@dataclass
class Competency:
    id: int
    skill: str
    description: str = ""


@dataclass
class ThoughtRow:
    id: int
    text: str
    time: str
    competencies: Optional[str]


def format_timestamp(value: str, tz: Optional[tzinfo] = None) -> str:
    """Render an ISO timestamp as e.g. ``Jan 05, 2026, 03:04 PM`` in ``tz`` (local by default)."""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(tz).strftime("%b %d, %Y, %I:%M %p")


class ThoughtsView:
    def __init__(
        self,
        api: JournalApi,
        alert: Optional[Callable[[str], None]] = None,
        tz: Optional[tzinfo] = None,
    ):
        self.api = api
        self.alert = alert or (lambda message: logger.warning(message))
        self.tz = tz
        self.thoughts: List[Thought] = []
        self.competencies: List[Competency] = []
        # Edit draft; ``editing`` is None when no edit is in progress.
        self.editing: Optional[Thought] = None
        self.new_text = ""
        self.new_competencies: List[int] = []

    def load(self) -> None:
        try:
            rows = self.api.list_entries()
        except JournalApiError as exc:
            logger.warning("Could not load thoughts: %s", exc)
        else:
            self.thoughts = [
                Thought(
                    id=row["id"],
                    text=row["text"],
                    time=format_timestamp(row["createdAt"], self.tz),
                    competencies=list(row.get("competencies") or []),
                )
                for row in rows
            ]
        try:
            catalog = self.api.list_competencies()
        except JournalApiError as exc:
            logger.warning("Could not load competencies: %s", exc)
        else:
            self.competencies = [
                Competency(id=c["id"], skill=c["skill"], description=c.get("description", ""))
                for c in catalog
            ]

    def delete(self, thought_id: int) -> bool:
        try:
            self.api.delete_entry(thought_id)
        except JournalApiError:
            self.alert(DELETE_FAILED)
            return False
        self.thoughts = [t for t in self.thoughts if t.id != thought_id]
        return True

    def start_edit(self, thought: Thought) -> None:
        self.editing = thought
        self.new_text = thought.text
        self.new_competencies = list(thought.competencies)

    def toggle_competency(self, competency_id: int) -> None:
        if competency_id in self.new_competencies:
            self.new_competencies = [c for c in self.new_competencies if c != competency_id]
        else:
            self.new_competencies = self.new_competencies + [competency_id]

    def save_edit(self) -> bool:
        if self.editing is None:
            return False
        target_id = self.editing.id
        try:
            self.api.update_entry(target_id, self.new_text, self.new_competencies)
        except JournalApiError:
            self.alert(UPDATE_FAILED)
            return False
        # PUT returns no entry body; the cached thought takes the draft values.
        self.thoughts = [
            replace(t, text=self.new_text, competencies=list(self.new_competencies)) if t.id == target_id else t
            for t in self.thoughts
        ]
        self._reset_draft()
        return True

    def cancel_edit(self) -> None:
        self._reset_draft()

    def _reset_draft(self) -> None:
        self.editing = None
        self.new_text = ""
        self.new_competencies = []

    def competency_label(self, competency_id: int) -> str:
        for comp in self.competencies:
            if comp.id == competency_id:
                return comp.skill
        return f"#{competency_id}"

    def render(self) -> List[ThoughtRow]:
        return [
            ThoughtRow(
                id=t.id,
                text=t.text,
                time=t.time,
                competencies=", ".join(self.competency_label(c) for c in t.competencies) or None,
            )
            for t in self.thoughts
        ]

    def render_text(self) -> str:
        if not self.thoughts:
            return EMPTY_MESSAGE
        blocks = []
        for row in self.render():
            lines = [row.text, row.time]
            if row.competencies:
                lines.append(f"Competencies: {row.competencies}")
            blocks.append("\n".join(lines))
        return "\n\n".join(blocks)

    def edit_choices(self) -> Dict[int, bool]:
        """Competency id -> whether it is checked in the current draft."""
        return {c.id: c.id in self.new_competencies for c in self.competencies}
