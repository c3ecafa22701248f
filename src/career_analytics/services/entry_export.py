"""Export career entries as CSV, JSON or plain text.

Entries are narrowed by date range and category, ordered newest first, and
rendered to a string. Writing the result somewhere is left to the caller.
"""

from __future__ import annotations

import csv
import io
import json
import logging
from collections import Counter
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import datetime

from career_analytics.constants import ExportFormat
from career_analytics.constants.export_constants import (
    CSV_COLUMNS,
    CSV_LIST_SEPARATOR,
    CSV_METADATA_COLUMNS,
    EXPORT_FILENAME_PREFIX,
    NO_MATCHING_ENTRIES,
    TEXT_ENTRY_RULE,
    TEXT_HEADER_RULE,
    TEXT_TITLE,
)
from career_analytics.models import CareerEntry
from career_analytics.services.entry_filters import FilterOptions, filter_entries
from career_analytics.utils.dates import parse_entry_date, resolve_now

logger = logging.getLogger(__name__)

__all__ = [
    "ExportOptions",
    "ExportStats",
    "NoEntriesToExportError",
    "default_export_filename",
    "export_entries",
    "export_stats",
    "render_csv",
    "render_json",
    "render_text",
    "select_entries",
]


class NoEntriesToExportError(ValueError):
    """Raised when the export criteria leave nothing to export."""


@dataclass(slots=True)
class ExportOptions:
    """What to export and how.

    Attributes:
        format: Output format.
        include_metadata: Add id and created/updated timestamps to each entry.
        start_date: Inclusive lower date bound; empty for no bound.
        end_date: Inclusive upper date bound; empty for no bound.
        categories: Only export these categories; empty exports all.
    """

    format: ExportFormat = ExportFormat.JSON
    include_metadata: bool = True
    start_date: str = ""
    end_date: str = ""
    categories: list[str] = field(default_factory=list)


@dataclass(slots=True)
class ExportStats:
    total_entries: int
    category_counts: dict[str, int]
    earliest: str | None
    latest: str | None
    total_skills: int
    total_projects: int


def select_entries(entries: Sequence[CareerEntry], options: ExportOptions) -> list[CareerEntry]:
    """Apply the date and category criteria and order newest first."""
    criteria = FilterOptions(
        start_date=options.start_date,
        end_date=options.end_date,
        categories=list(options.categories),
    )
    selected = filter_entries(entries, criteria)
    return sorted(selected, key=lambda e: parse_entry_date(e.date), reverse=True)


def default_export_filename(export_format: ExportFormat, now: datetime | None = None) -> str:
    """Return ``career-logs-<YYYY-MM-DD>.<ext>`` for the given day."""
    day = resolve_now(now).date().isoformat()
    return f"{EXPORT_FILENAME_PREFIX}-{day}.{export_format.value}"


def _entry_record(entry: CareerEntry, include_metadata: bool) -> dict[str, object]:
    record: dict[str, object] = {
        "date": entry.date,
        "description": entry.description,
        "impact": entry.impact,
        "skills": list(entry.skills),
        "tags": list(entry.tags),
        "project": entry.project,
        "category": entry.category.value,
    }
    if include_metadata:
        record = {
            "id": entry.id,
            **record,
            "createdAt": entry.created_at,
            "updatedAt": entry.updated_at,
        }
    return record


def render_csv(entries: Sequence[CareerEntry], include_metadata: bool, now: datetime) -> str:
    """Render entries as CSV with a header row. List fields are joined with ``; ``."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")

    header = list(CSV_COLUMNS)
    if include_metadata:
        header.extend(CSV_METADATA_COLUMNS)
    writer.writerow(header)

    for entry in entries:
        row = [
            entry.date,
            entry.category.value,
            entry.description,
            entry.impact,
            CSV_LIST_SEPARATOR.join(entry.skills),
            CSV_LIST_SEPARATOR.join(entry.tags),
            entry.project,
        ]
        if include_metadata:
            row.extend([entry.created_at or "", entry.updated_at or "", entry.id])
        writer.writerow(row)

    return buffer.getvalue()


def render_json(entries: Sequence[CareerEntry], include_metadata: bool, now: datetime) -> str:
    """Render entries as a JSON document with export date and entry count.

    The ``entries`` array uses the same keys the loader accepts, so an export
    with metadata can be read back with ``load_entries_from_file``.
    """
    payload = {
        "exportDate": now.isoformat(),
        "totalEntries": len(entries),
        "entries": [_entry_record(entry, include_metadata) for entry in entries],
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


def render_text(entries: Sequence[CareerEntry], include_metadata: bool, now: datetime) -> str:
    """Render entries as a readable plain-text log."""
    lines = [
        TEXT_TITLE,
        f"Generated: {now.date().isoformat()}",
        f"Total Entries: {len(entries)}",
        "",
        TEXT_HEADER_RULE,
        "",
    ]

    for index, entry in enumerate(entries, start=1):
        lines.extend(
            [
                f"Entry {index}",
                f"Date: {entry.date}",
                f"Category: {entry.category.value.capitalize()}",
                f"Project: {entry.project or 'N/A'}",
                "",
                "Description:",
                entry.description,
                "",
            ]
        )
        if entry.has_impact:
            lines.extend(["Impact:", entry.impact, ""])
        if entry.skills:
            lines.append(f"Skills: {', '.join(entry.skills)}")
        if entry.tags:
            lines.append(f"Tags: {', '.join(f'#{tag}' for tag in entry.tags)}")
        if include_metadata:
            lines.extend(
                [
                    "",
                    "Metadata:",
                    f"  ID: {entry.id}",
                    f"  Created: {entry.created_at or 'N/A'}",
                    f"  Updated: {entry.updated_at or 'N/A'}",
                ]
            )
        lines.extend(["", TEXT_ENTRY_RULE, ""])

    return "\n".join(lines)


Renderer = Callable[[Sequence[CareerEntry], bool, datetime], str]

_RENDERERS: dict[ExportFormat, Renderer] = {
    ExportFormat.CSV: render_csv,
    ExportFormat.JSON: render_json,
    ExportFormat.TXT: render_text,
}


def export_entries(
    entries: Sequence[CareerEntry],
    options: ExportOptions,
    now: datetime | None = None,
) -> str:
    """Select and render entries for export.

    Args:
        entries: Entries to export.
        options: Format, metadata flag and selection criteria.
        now: Export time stamped into the output; defaults to the current UTC time

    Returns:
        The rendered export document.

    Raises:
        NoEntriesToExportError: If no entry matches the criteria.
    """
    selected = select_entries(entries, options)
    if not selected:
        raise NoEntriesToExportError(NO_MATCHING_ENTRIES)

    export_format = ExportFormat(options.format)
    logger.info("Exporting %d of %d entries as %s", len(selected), len(entries), export_format)
    return _RENDERERS[export_format](selected, options.include_metadata, resolve_now(now))


def export_stats(entries: Sequence[CareerEntry]) -> ExportStats:
    """Summarize a set of entries: category counts, date span, distinct skills and projects."""
    if not entries:
        return ExportStats(
            total_entries=0,
            category_counts={},
            earliest=None,
            latest=None,
            total_skills=0,
            total_projects=0,
        )

    dates = sorted(entries, key=lambda e: parse_entry_date(e.date))
    return ExportStats(
        total_entries=len(entries),
        category_counts=dict(Counter(e.category.value for e in entries)),
        earliest=dates[0].date,
        latest=dates[-1].date,
        total_skills=len({skill for e in entries for skill in e.skills}),
        total_projects=len({e.project for e in entries if e.project}),
    )
