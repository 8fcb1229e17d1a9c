"""Journal entry request/response schemas."""

from __future__ import annotations

from typing import Annotated, List

from pydantic import BaseModel, ConfigDict, Field

from daily_journal.domains.journal.models.entry import MAX_ROW_ID

CompetencyID = Annotated[int, Field(gt=0, le=MAX_ROW_ID)]


class EntryWrite(BaseModel):
    """Body of POST /api/entry and PUT /api/entry/<id>."""

    model_config = ConfigDict(populate_by_name=True)

    text: str
    competency_ids: List[CompetencyID] = Field(default_factory=list, alias="competencyIDs")


class EntryResponse(BaseModel):
    id: int
    text: str
    created_at: str = Field(serialization_alias="createdAt")
    competencies: List[int]
