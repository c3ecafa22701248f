"""Monthly activity buckets and their momentum."""

from __future__ import annotations

from collections.abc import Sequence

from career_analytics.constants import Level
from career_analytics.constants.analytics_constants import (
    HIGH_MOMENTUM_RULE,
    MAX_TREND_PERIODS,
    MEDIUM_MOMENTUM_RULE,
)
from career_analytics.models import CareerEntry, CareerTrend
from career_analytics.utils.dates import month_key, parse_entry_date


def _dedupe(values: list[str]) -> list[str]:
    return list(dict.fromkeys(values))


def month_momentum(activity_count: int, impactful_entries: int) -> Level:
    """Classify a month by entry volume and the share of entries with impact."""
    if activity_count <= 0:
        return Level.LOW

    impact_ratio = impactful_entries / activity_count
    min_entries, min_ratio = HIGH_MOMENTUM_RULE
    if activity_count >= min_entries and impact_ratio >= min_ratio:
        return Level.HIGH
    min_entries, min_ratio = MEDIUM_MOMENTUM_RULE
    if activity_count >= min_entries and impact_ratio >= min_ratio:
        return Level.MEDIUM
    return Level.LOW


def build_trend(period: str, period_entries: Sequence[CareerEntry]) -> CareerTrend:
    skills = [s.strip() for e in period_entries for s in e.skills if s.strip()]
    categories = [str(e.category) for e in period_entries]
    impactful = sum(1 for e in period_entries if e.has_impact)

    return CareerTrend(
        period=period,
        activity_count=len(period_entries),
        skills_learned=_dedupe(skills),
        categories_active=_dedupe(categories),
        impactful_entries=impactful,
        momentum=month_momentum(len(period_entries), impactful),
    )


def analyze_career_trends(entries: Sequence[CareerEntry]) -> list[CareerTrend]:
    """Group entries by calendar month and summarize each month.

    Args:
        entries: All career entries, with or without impact.

    Returns:
        One trend per month present in the data, newest first, at most 12.
    """
    buckets: dict[str, list[CareerEntry]] = {}
    for entry in entries:
        period = month_key(parse_entry_date(entry.date))
        buckets.setdefault(period, []).append(entry)

    trends = [build_trend(period, period_entries) for period, period_entries in buckets.items()]
    trends.sort(key=lambda t: t.period, reverse=True)
    return trends[:MAX_TREND_PERIODS]
