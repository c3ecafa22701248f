"""Turn raw records (parsed JSON) into validated career entries."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from career_analytics.models import CareerEntry, CareerEntryRecord, EntryValidationError

logger = logging.getLogger(__name__)


def load_entries(records: Iterable[Mapping[str, Any]]) -> list[CareerEntry]:
    """Validate raw entry records.

    Args:
        records: Mappings with snake_case or camelCase entry keys.

    Returns:
        Career entries in input order.

    Raises:
        EntryValidationError: If any record is invalid. The message names the
            offending record index.
    """
    entries: list[CareerEntry] = []
    for index, record in enumerate(records):
        try:
            entries.append(CareerEntryRecord.model_validate(record).to_entry())
        except ValidationError as exc:
            logger.warning("Rejected entry record %d: %s", index, exc)
            raise EntryValidationError(f"Invalid entry at index {index}: {exc}") from exc
    return entries


def load_entries_from_file(path: Path | str) -> list[CareerEntry]:
    """Read entries from a JSON file.

    The file may hold a JSON array of entries or an object with an
    ``entries`` array.

    Raises:
        EntryValidationError: If the file is not valid JSON or has the wrong shape.
        OSError: If the file cannot be read.
    """
    text = Path(path).read_text(encoding="utf-8")
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise EntryValidationError(f"{path} is not valid JSON: {exc}") from exc

    if isinstance(payload, Mapping):
        payload = payload.get("entries")
    if not isinstance(payload, list):
        raise EntryValidationError(f"{path} must contain a list of entries")
    if not all(isinstance(item, Mapping) for item in payload):
        raise EntryValidationError(f"{path} entries must be JSON objects")

    return load_entries(payload)
