"""Validation model for raw career entry records.

Records come from JSON files and request bodies with either snake_case or
camelCase keys. Validation happens here, before anything reaches the engine.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from career_analytics.constants import EntryCategory
from career_analytics.models.entry import CareerEntry


class CareerEntryRecord(BaseModel):
    """A raw career entry record.

    Accepts both snake_case and camelCase keys (``createdAt``); unknown keys
    such as ``generatedContent`` are ignored.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    id: str = Field(..., min_length=1, description="Unique entry identifier")
    date: str = Field(..., min_length=1, description="Entry date (ISO format)")
    description: str = Field(..., description="What happened")
    impact: str = Field("", description="Outcome or result; empty when not recorded")
    skills: list[str] = Field(default_factory=list, description="Skill labels")
    tags: list[str] = Field(default_factory=list, description="Free-form labels")
    project: str = Field("", description="Related project name")
    category: EntryCategory = Field(..., description="Entry category")
    created_at: str | None = None
    updated_at: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("description")
    @classmethod
    def _require_description(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("description must not be empty")
        return value

    @field_validator("impact", "project", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return "" if value is None else value

    def to_entry(self) -> CareerEntry:
        return CareerEntry(
            id=self.id,
            date=self.date,
            description=self.description,
            impact=self.impact,
            skills=tuple(self.skills),
            tags=tuple(self.tags),
            project=self.project,
            category=self.category,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )
