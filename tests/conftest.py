from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from itertools import count

import pytest

from career_analytics.constants import EntryCategory
from career_analytics.models import CareerEntry

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=UTC)

EntryFactory = Callable[..., CareerEntry]


def iso_days_ago(days: int) -> str:
    """ISO date ``days`` before NOW."""
    return (NOW - timedelta(days=days)).date().isoformat()


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def make_entry() -> EntryFactory:
    """Build CareerEntry objects with sensible defaults and unique ids."""
    ids = count(1)

    def _make(
        *,
        date: str | None = None,
        description: str = "Worked on something",
        impact: str = "",
        skills: list[str] | None = None,
        tags: list[str] | None = None,
        project: str = "",
        category: EntryCategory | str = EntryCategory.PROJECT,
        entry_id: str | None = None,
    ) -> CareerEntry:
        return CareerEntry(
            id=entry_id or f"e{next(ids)}",
            date=date or NOW.date().isoformat(),
            description=description,
            impact=impact,
            skills=tuple(skills or ()),
            tags=tuple(tags or ()),
            project=project,
            category=EntryCategory(category),
        )

    return _make
