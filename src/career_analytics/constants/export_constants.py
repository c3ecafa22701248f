"""Formats and column layout for exporting career entries."""

from __future__ import annotations

from enum import StrEnum


class ExportFormat(StrEnum):
    CSV = "csv"
    JSON = "json"
    TXT = "txt"


EXPORT_FILENAME_PREFIX = "career-logs"

CSV_COLUMNS = ("Date", "Category", "Description", "Impact", "Skills", "Tags", "Project")
CSV_METADATA_COLUMNS = ("Created At", "Updated At", "ID")
CSV_LIST_SEPARATOR = "; "

TEXT_TITLE = "Career Activity Log Export"
TEXT_HEADER_RULE = "=" * 50
TEXT_ENTRY_RULE = "-" * 30

NO_MATCHING_ENTRIES = "No entries match the export criteria"
