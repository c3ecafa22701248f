"""Career log entry, the single input type of every analytics pass."""

from __future__ import annotations

from dataclasses import dataclass

from career_analytics.constants import EntryCategory


class EntryValidationError(ValueError):
    """Raised when raw records cannot be turned into career entries."""


@dataclass(frozen=True, slots=True)
class CareerEntry:
    """One logged career activity.

    Attributes:
        id: Opaque unique identifier.
        date: Effective date as an ISO string (``YYYY-MM-DD`` or full timestamp).
        description: What happened; never empty.
        impact: Outcome statement. Empty string means no impact was recorded.
        skills: Skill labels in the order they were entered. Duplicates count.
        tags: Free-form labels, only used for filtering.
        project: Optional project name.
        category: One of the fixed entry categories.
    """

    id: str
    date: str
    description: str
    impact: str = ""
    skills: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    project: str = ""
    category: EntryCategory = EntryCategory.ACHIEVEMENT
    created_at: str | None = None
    updated_at: str | None = None

    @property
    def has_impact(self) -> bool:
        return bool(self.impact and self.impact.strip())
