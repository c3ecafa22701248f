"""Timeline filtering of career entries."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date

from career_analytics.models import CareerEntry
from career_analytics.utils.dates import parse_entry_date


@dataclass(slots=True)
class FilterOptions:
    """Criteria for narrowing the entry timeline. Empty criteria match everything.

    Attributes:
        start_date: Inclusive lower bound (ISO date or timestamp).
        end_date: Inclusive upper bound. A bare date covers that whole UTC day.
        tags: Entry matches when it carries any of these tags.
        categories: Entry category must be one of these.
        projects: Entry project must be one of these.
        search_query: Case-insensitive substring of description or impact.
    """

    start_date: str = ""
    end_date: str = ""
    tags: list[str] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)
    projects: list[str] = field(default_factory=list)
    search_query: str = ""


def _is_bare_date(value: str) -> bool:
    try:
        date.fromisoformat(value.strip())
    except ValueError:
        return False
    return True


def _within_dates(entry: CareerEntry, options: FilterOptions) -> bool:
    moment = parse_entry_date(entry.date)

    if options.start_date and moment < parse_entry_date(options.start_date):
        return False

    if options.end_date:
        end = parse_entry_date(options.end_date)
        if _is_bare_date(options.end_date):
            return moment.date() <= end.date()
        return moment <= end

    return True


def matches_filters(entry: CareerEntry, options: FilterOptions) -> bool:
    if options.search_query:
        query = options.search_query.lower()
        if query not in entry.description.lower() and query not in entry.impact.lower():
            return False

    if options.categories and entry.category not in options.categories:
        return False

    if options.tags and not any(tag in entry.tags for tag in options.tags):
        return False

    if options.projects and entry.project not in options.projects:
        return False

    return _within_dates(entry, options)


def filter_entries(entries: Sequence[CareerEntry], options: FilterOptions) -> list[CareerEntry]:
    """Return the entries that satisfy every filter, preserving order."""
    return [e for e in entries if matches_filters(e, options)]
