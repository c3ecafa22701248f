"""Pydantic schemas for career entry payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from career_analytics.constants import EntryCategory
from career_analytics.models import CareerEntry, CareerEntryRecord


class CareerEntryIn(CareerEntryRecord):
    """A career entry as submitted by a client."""


class EntriesRequest(BaseModel):
    """Request body carrying the entry collection to analyze."""

    entries: list[CareerEntryIn] = Field(default_factory=list)

    def to_entries(self) -> list[CareerEntry]:
        return [item.to_entry() for item in self.entries]


class CareerEntryResponse(BaseModel):
    """Response schema for a career entry."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    date: str
    description: str
    impact: str
    skills: list[str]
    tags: list[str]
    project: str
    category: EntryCategory
    created_at: str | None = None
    updated_at: str | None = None
