"""Compose the analysis passes into the two insight bundles.

``generate_insights`` runs every pass and adds roll-up scores for the detailed
dashboard. ``generate_simplified_insights`` is a lighter, independent summary
that does not reuse the detailed passes.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from datetime import datetime

from career_analytics.achievement_scorer import analyze_achievements
from career_analytics.constants import (
    ActionType,
    EntryCategory,
    Level,
    OverallMomentum,
    SimplifiedMomentum,
)
from career_analytics.constants.analytics_constants import (
    ELLIPSIS,
    MAX_PRIORITY_ACTIONS,
    MOMENTUM_LOOKBACK_PERIODS,
    NETWORKING_SHARE_TARGET,
    RECENT_HIGHLIGHTS_LIMIT,
    RECENT_WINDOW_DAYS,
    RECENT_WINS_WINDOW_DAYS,
    SIMPLIFIED_RECENT_WINS,
    SIMPLIFIED_TOP_SKILLS,
    TOP_ACHIEVEMENTS_LIMIT,
    TOP_SKILLS_LIMIT,
    WIN_DESCRIPTION_MAX_CHARS,
)
from career_analytics.models import (
    CareerEntry,
    CareerInsights,
    CareerTrend,
    SimplifiedAction,
    SimplifiedInsights,
)
from career_analytics.services.quick_wins import generate_quick_wins
from career_analytics.skill_analyzer import analyze_skills
from career_analytics.trend_analyzer import analyze_career_trends
from career_analytics.utils.dates import days_ago, parse_entry_date, resolve_now

logger = logging.getLogger(__name__)

__all__ = [
    "generate_insights",
    "generate_simplified_insights",
    "impact_consistency",
    "overall_momentum",
    "simplified_momentum",
    "skill_diversity_score",
    "truncate_description",
]


def _entries_since(entries: Sequence[CareerEntry], cutoff: datetime) -> list[CareerEntry]:
    return [e for e in entries if parse_entry_date(e.date) >= cutoff]


def _newest_first(entries: Sequence[CareerEntry]) -> list[CareerEntry]:
    return sorted(entries, key=lambda e: parse_entry_date(e.date), reverse=True)


def skill_diversity_score(unique_skill_count: int) -> int:
    return min(100, unique_skill_count * 2)


def impact_consistency(entries: Sequence[CareerEntry]) -> float:
    """Percentage of entries that carry an impact statement (0 when empty)."""
    if not entries:
        return 0.0
    impactful = sum(1 for e in entries if e.has_impact)
    return impactful / len(entries) * 100


def overall_momentum(trends: Sequence[CareerTrend]) -> OverallMomentum:
    """Summarize the most recent monthly trends (expects newest first)."""
    recent = trends[:MOMENTUM_LOOKBACK_PERIODS]
    high_months = sum(1 for t in recent if t.momentum == Level.HIGH)

    if high_months >= 2:
        return OverallMomentum.ACCELERATING
    if all(t.momentum == Level.LOW for t in recent):
        return OverallMomentum.DECLINING
    return OverallMomentum.STEADY


def generate_insights(
    entries: Sequence[CareerEntry], now: datetime | None = None
) -> CareerInsights:
    """Build the detailed insight bundle.

    Args:
        entries: Career entries to analyze.
        now: Reference time for recency and the highlight window.

    Returns:
        CareerInsights with the top skills and achievements, all monthly
        trends, quick wins, recent highlights and roll-up scores.
    """
    reference = resolve_now(now)

    skills = analyze_skills(entries, reference)
    achievements = analyze_achievements(entries)
    trends = analyze_career_trends(entries)
    quick_wins = generate_quick_wins(entries, skills, achievements)

    recent = _entries_since(entries, days_ago(reference, RECENT_WINDOW_DAYS))
    highlights = _newest_first([e for e in recent if e.has_impact])[:RECENT_HIGHLIGHTS_LIMIT]

    logger.debug(
        "Analyzed %d entries: %d skills, %d achievements, %d trend periods, %d quick wins",
        len(entries),
        len(skills),
        len(achievements),
        len(trends),
        len(quick_wins),
    )

    return CareerInsights(
        unique_skills=skills[:TOP_SKILLS_LIMIT],
        key_achievements=achievements[:TOP_ACHIEVEMENTS_LIMIT],
        career_trends=trends,
        quick_wins=quick_wins,
        recent_highlights=highlights,
        overall_momentum=overall_momentum(trends),
        skill_diversity_score=skill_diversity_score(len(skills)),
        impact_consistency=impact_consistency(entries),
    )


def truncate_description(description: str, limit: int = WIN_DESCRIPTION_MAX_CHARS) -> str:
    if len(description) <= limit:
        return description
    return description[:limit] + ELLIPSIS


def simplified_momentum(
    entries: Sequence[CareerEntry], now: datetime | None = None
) -> SimplifiedMomentum:
    """Compare the last 30 days against the 30 days before them.

    Args:
        entries: Career entries.
        now: Reference time for both windows.

    Returns:
        ``growing`` when activity rose and enough of it documents impact,
        ``needs-attention`` for sparse or impact-free recent activity,
        otherwise ``steady``.
    """
    if len(entries) < 3:
        return SimplifiedMomentum.NEEDS_ATTENTION

    reference = resolve_now(now)
    recent_cutoff = days_ago(reference, RECENT_WINDOW_DAYS)
    previous_cutoff = days_ago(reference, RECENT_WINDOW_DAYS * 2)

    recent_count = 0
    previous_count = 0
    recent_impact_count = 0
    for entry in entries:
        moment = parse_entry_date(entry.date)
        if moment >= recent_cutoff:
            recent_count += 1
            if entry.has_impact:
                recent_impact_count += 1
        elif moment >= previous_cutoff:
            previous_count += 1

    if recent_count > previous_count and recent_impact_count >= max(1, recent_count * 0.3):
        return SimplifiedMomentum.GROWING
    if recent_count < 2 or recent_impact_count == 0:
        return SimplifiedMomentum.NEEDS_ATTENTION
    return SimplifiedMomentum.STEADY


def _priority_actions(
    entries: Sequence[CareerEntry], recent: Sequence[CareerEntry]
) -> list[SimplifiedAction]:
    actions: list[SimplifiedAction] = []

    without_impact = [e for e in entries if not e.has_impact]
    if without_impact:
        actions.append(
            SimplifiedAction(
                id="add-impact",
                title="Add impact statements",
                description=f"{len(without_impact)} entries could benefit from impact descriptions",
                type=ActionType.IMPACT,
                priority=Level.HIGH,
                estimated_time="10 minutes",
                related_entries=[e.id for e in without_impact[:3]],
            )
        )

    recent_skills = {s.strip() for e in recent for s in e.skills if s.strip()}
    if len(recent_skills) < 3:
        actions.append(
            SimplifiedAction(
                id="document-skills",
                title="Document more skills",
                description="Add specific technologies and tools you've been using",
                type=ActionType.SKILL,
                priority=Level.MEDIUM,
                estimated_time="5 minutes",
            )
        )

    if len(recent) < 3:
        actions.append(
            SimplifiedAction(
                id="log-activities",
                title="Log recent activities",
                description="Keep your career timeline up to date with recent work",
                type=ActionType.DOCUMENTATION,
                priority=Level.HIGH,
                estimated_time="15 minutes",
            )
        )

    networking = sum(1 for e in entries if e.category == EntryCategory.NETWORKING)
    if networking < max(1, len(entries) * NETWORKING_SHARE_TARGET):
        actions.append(
            SimplifiedAction(
                id="networking",
                title="Document networking activities",
                description="Track meetings, conferences, and professional connections",
                type=ActionType.NETWORKING,
                priority=Level.MEDIUM,
                estimated_time="5 minutes",
            )
        )

    return actions[:MAX_PRIORITY_ACTIONS]


def generate_simplified_insights(
    entries: Sequence[CareerEntry], now: datetime | None = None
) -> SimplifiedInsights:
    """Build the at-a-glance summary bundle.

    Args:
        entries: Career entries to summarize.
        now: Reference time for the 30 and 60 day windows.

    Returns:
        SimplifiedInsights; an empty entry list yields empty lists, zero
        counters and ``needs-attention`` momentum.
    """
    if not entries:
        return SimplifiedInsights(
            top_skills=[],
            recent_wins=[],
            momentum=SimplifiedMomentum.NEEDS_ATTENTION,
            priority_actions=[],
            total_entries=0,
            entries_this_month=0,
            unique_skills_count=0,
        )

    reference = resolve_now(now)
    recent = _entries_since(entries, days_ago(reference, RECENT_WINDOW_DAYS))

    # Counter.most_common keeps first-seen order for equal counts
    skill_counts = Counter(s.strip() for e in entries for s in e.skills if s.strip())
    top_skills = [skill for skill, _ in skill_counts.most_common(SIMPLIFIED_TOP_SKILLS)]

    wins_window = _entries_since(entries, days_ago(reference, RECENT_WINS_WINDOW_DAYS))
    recent_wins = [
        truncate_description(e.description)
        for e in _newest_first([e for e in wins_window if e.has_impact])[:SIMPLIFIED_RECENT_WINS]
    ]

    return SimplifiedInsights(
        top_skills=top_skills,
        recent_wins=recent_wins,
        momentum=simplified_momentum(entries, reference),
        priority_actions=_priority_actions(entries, recent),
        total_entries=len(entries),
        entries_this_month=len(recent),
        unique_skills_count=len(skill_counts),
    )
