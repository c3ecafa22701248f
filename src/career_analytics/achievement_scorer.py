"""Score entries by how concretely their impact is documented."""

from __future__ import annotations

from collections.abc import Sequence

from career_analytics.constants import IMPACT_KEYWORDS, EntryCategory, Level
from career_analytics.constants.analytics_constants import (
    ACHIEVEMENT_CATEGORY_BONUS,
    HIGH_IMPACT_THRESHOLD,
    KEYWORD_POINTS,
    MAX_IMPACT_SCORE,
    MEDIUM_IMPACT_THRESHOLD,
    METRIC_PATTERNS,
    PERCENTAGE_BONUS,
    QUANTIFIED_BONUS,
)
from career_analytics.models import AchievementInsight, CareerEntry, ImpactMetrics


def match_impact_keywords(entry: CareerEntry) -> list[str]:
    """Return the impact verbs found in the entry's impact or description."""
    impact = entry.impact.lower()
    description = entry.description.lower()
    return [kw for kw in IMPACT_KEYWORDS if kw in impact or kw in description]


def extract_metrics(text: str) -> ImpactMetrics:
    """Extract quantifiable results from free text.

    Patterns run in precedence order (percentage, timeframe, then the generic
    number patterns). Once a span of text has been claimed, overlapping matches
    from later patterns are ignored, so a substring is reported at most once.

    Args:
        text: Text to scan.

    Returns:
        ImpactMetrics with each match in exactly one bucket.
    """
    metrics = ImpactMetrics()
    claimed: list[tuple[int, int]] = []

    for pattern in METRIC_PATTERNS:
        for match in pattern.regex.finditer(text):
            start, end = match.span()
            if any(start < c_end and c_start < end for c_start, c_end in claimed):
                continue
            claimed.append((start, end))
            getattr(metrics, pattern.kind.value).append(match.group(0))

    return metrics


def impact_tier(score: int) -> Level:
    if score >= HIGH_IMPACT_THRESHOLD:
        return Level.HIGH
    if score >= MEDIUM_IMPACT_THRESHOLD:
        return Level.MEDIUM
    return Level.LOW


def score_entry(entry: CareerEntry) -> AchievementInsight:
    """Score a single entry that has an impact statement."""
    keywords = match_impact_keywords(entry)
    metrics = extract_metrics(f"{entry.impact} {entry.description}")
    has_quantifiable_results = not metrics.is_empty()

    score = len(keywords) * KEYWORD_POINTS
    if has_quantifiable_results:
        score += QUANTIFIED_BONUS
    if metrics.percentages:
        score += PERCENTAGE_BONUS
    if entry.category == EntryCategory.ACHIEVEMENT:
        score += ACHIEVEMENT_CATEGORY_BONUS
    score = max(0, min(MAX_IMPACT_SCORE, score))

    return AchievementInsight(
        entry=entry,
        impact_score=score,
        has_quantifiable_results=has_quantifiable_results,
        impact_keywords=keywords,
        category=impact_tier(score),
        metrics=metrics,
    )


def analyze_achievements(entries: Sequence[CareerEntry]) -> list[AchievementInsight]:
    """Score every entry with a non-blank impact statement.

    Args:
        entries: Career entries; those without impact are skipped.

    Returns:
        Achievement insights, highest score first. Equal scores keep input order.
    """
    scored = [score_entry(entry) for entry in entries if entry.has_impact]
    return sorted(scored, key=lambda a: -a.impact_score)
