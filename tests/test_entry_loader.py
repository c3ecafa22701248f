from __future__ import annotations

import json
from pathlib import Path

import pytest

from career_analytics.constants import EntryCategory
from career_analytics.models import CareerEntryRecord, EntryValidationError
from career_analytics.services.entry_loader import load_entries, load_entries_from_file

RECORD = {
    "id": "abc",
    "date": "2024-05-01",
    "description": "Led migration to Postgres",
    "impact": "reduced query time 40%",
    "skills": ["PostgreSQL", "Python"],
    "tags": ["infra"],
    "project": "Atlas",
    "category": "leadership",
}


def test_load_snake_case_record() -> None:
    (entry,) = load_entries([RECORD])

    assert entry.id == "abc"
    assert entry.category == EntryCategory.LEADERSHIP
    assert entry.skills == ("PostgreSQL", "Python")
    assert entry.has_impact


def test_loaded_entries_are_hashable() -> None:
    first, second = load_entries([RECORD, RECORD])

    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_load_camel_case_keys_and_ignores_extras() -> None:
    record = {
        **RECORD,
        "createdAt": "2024-05-01T10:00:00Z",
        "updatedAt": "2024-05-02T10:00:00Z",
        "generatedContent": {"resumeBullet": "..."},
    }

    (entry,) = load_entries([record])

    assert entry.created_at == "2024-05-01T10:00:00Z"
    assert entry.updated_at == "2024-05-02T10:00:00Z"


def test_optional_fields_default() -> None:
    (entry,) = load_entries(
        [{"id": 7, "date": "2024-01-01", "description": "Read a book", "category": "learning"}]
    )

    assert entry.id == "7"
    assert entry.impact == ""
    assert entry.skills == ()
    assert entry.project == ""
    assert not entry.has_impact


def test_null_impact_is_treated_as_empty() -> None:
    (entry,) = load_entries([{**RECORD, "impact": None}])
    assert entry.impact == ""


@pytest.mark.parametrize(
    "bad",
    [
        {**RECORD, "category": "hobby"},
        {**RECORD, "description": "   "},
        {k: v for k, v in RECORD.items() if k != "date"},
    ],
)
def test_invalid_record_names_index(bad) -> None:
    with pytest.raises(EntryValidationError, match="index 1"):
        load_entries([RECORD, bad])


def test_load_from_file_list_and_wrapped(tmp_path: Path) -> None:
    plain = tmp_path / "plain.json"
    plain.write_text(json.dumps([RECORD]), encoding="utf-8")
    wrapped = tmp_path / "wrapped.json"
    wrapped.write_text(json.dumps({"entries": [RECORD, {**RECORD, "id": "def"}]}), encoding="utf-8")

    assert [e.id for e in load_entries_from_file(plain)] == ["abc"]
    assert [e.id for e in load_entries_from_file(wrapped)] == ["abc", "def"]


def test_load_from_file_rejects_bad_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(EntryValidationError, match="not valid JSON"):
        load_entries_from_file(path)


def test_load_from_file_rejects_wrong_shape(tmp_path: Path) -> None:
    path = tmp_path / "shape.json"
    path.write_text(json.dumps({"items": []}), encoding="utf-8")
    with pytest.raises(EntryValidationError, match="list of entries"):
        load_entries_from_file(path)


def test_record_model_builds_entry_without_the_api_layer() -> None:
    record = CareerEntryRecord.model_validate({**RECORD, "createdAt": "2024-05-01T10:00:00Z"})
    entry = record.to_entry()

    assert entry.tags == ("infra",)
    assert entry.created_at == "2024-05-01T10:00:00Z"
