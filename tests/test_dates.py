from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone

from career_analytics.utils.dates import (
    LATEST,
    OLDEST,
    days_between,
    month_key,
    parse_entry_date,
    resolve_now,
)


def test_parse_plain_iso_date_is_utc_midnight() -> None:
    assert parse_entry_date("2024-03-05") == datetime(2024, 3, 5, tzinfo=UTC)


def test_parse_timestamp_with_offset_is_converted_to_utc() -> None:
    parsed = parse_entry_date("2024-03-05T23:30:00-02:00")
    assert parsed == datetime(2024, 3, 6, 1, 30, tzinfo=UTC)


def test_parse_date_object() -> None:
    assert parse_entry_date(date(2024, 1, 2)) == datetime(2024, 1, 2, tzinfo=UTC)


def test_malformed_and_missing_dates_are_oldest() -> None:
    assert parse_entry_date("not a date") == OLDEST
    assert parse_entry_date("") == OLDEST
    assert parse_entry_date(None) == OLDEST
    assert parse_entry_date("2024-13-45") == OLDEST


def test_oldest_sorts_before_everything() -> None:
    dates = [parse_entry_date(v) for v in ["2024-01-01", "garbage", "1999-12-31"]]
    assert sorted(dates)[0] == OLDEST


def test_days_between_floors_partial_days() -> None:
    later = datetime(2024, 1, 10, 12, tzinfo=UTC)
    assert days_between(later, datetime(2024, 1, 10, tzinfo=UTC)) == 0
    assert days_between(later, datetime(2024, 1, 8, 13, tzinfo=UTC)) == 1
    assert days_between(later, later - timedelta(days=100)) == 100


def test_resolve_now_normalizes_timezones() -> None:
    naive = datetime(2024, 1, 1, 9)
    assert resolve_now(naive) == datetime(2024, 1, 1, 9, tzinfo=UTC)

    eastern = datetime(2024, 1, 1, 9, tzinfo=timezone(timedelta(hours=5)))
    assert resolve_now(eastern) == datetime(2024, 1, 1, 4, tzinfo=UTC)

    assert resolve_now().tzinfo is not None


def test_month_key() -> None:
    assert month_key(datetime(2024, 3, 1, tzinfo=UTC)) == "2024-03"
    assert month_key(OLDEST) == "0001-01"


def test_offset_below_minimum_is_oldest() -> None:
    assert parse_entry_date("0001-01-01T00:00:00+05:00") == OLDEST


def test_offset_above_maximum_clamps_to_latest() -> None:
    assert parse_entry_date("9999-12-31T23:00:00-05:00") == LATEST
