"""Competency response schema."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CompetencyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    skill: str
    description: str
