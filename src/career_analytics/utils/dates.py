"""Date helpers shared by the analytics passes.

Entry dates arrive as free-form ISO strings. Anything that cannot be parsed is
treated as the oldest possible instant so sorting and window checks stay total.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta

OLDEST = datetime.min.replace(tzinfo=UTC)
LATEST = datetime.max.replace(tzinfo=UTC)

_ONE_DAY = timedelta(days=1)


def parse_entry_date(value: str | date | None) -> datetime:
    """Parse an entry date into an aware UTC datetime.

    Args:
        value: ISO date (``2024-05-01``), ISO timestamp, or a date/datetime.

    Returns:
        Parsed datetime; naive values are taken as UTC. ``OLDEST`` when the
        value is missing or malformed. Offsets that push the instant past
        either end of the range clamp to ``OLDEST`` or ``LATEST``.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return OLDEST
    else:
        return OLDEST

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    try:
        return parsed.astimezone(UTC)
    except OverflowError:
        # The offset moved the instant outside the datetime range.
        return OLDEST if parsed.year == datetime.min.year else LATEST


def resolve_now(now: datetime | None = None) -> datetime:
    """Return the reference time for recency and window checks."""
    if now is None:
        return datetime.now(UTC)
    if now.tzinfo is None:
        return now.replace(tzinfo=UTC)
    return now.astimezone(UTC)


def days_between(later: datetime, earlier: datetime) -> int:
    """Whole days from ``earlier`` to ``later``, floored."""
    return (later - earlier) // _ONE_DAY


def days_ago(now: datetime, days: int) -> datetime:
    return now - timedelta(days=days)


def month_key(moment: datetime) -> str:
    return f"{moment.year:04d}-{moment.month:02d}"
