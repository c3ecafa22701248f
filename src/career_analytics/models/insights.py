"""Result types produced by the analytics passes.

All of these are freshly built on every call; nothing here is persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from career_analytics.constants import (
    ActionType,
    GrowthTrend,
    Level,
    OverallMomentum,
    QuickWinType,
    Rarity,
    SimplifiedMomentum,
)
from career_analytics.models.entry import CareerEntry


@dataclass(slots=True)
class SkillInsight:
    """Usage statistics for one skill label.

    Attributes:
        skill: Trimmed skill label.
        frequency: Occurrences across all entries.
        recency: 0-100, decays by one point per day since last use.
        rarity: Tier derived from the share of entries using the skill.
        trending: Whether the label matches the trending-skill list.
        first_used: Earliest entry date using the skill.
        last_used: Latest entry date using the skill.
        related_entries: IDs of entries using the skill, one per occurrence.
        growth_trend: Whether usage is concentrated late, early or evenly.
    """

    skill: str
    frequency: int
    recency: int
    rarity: Rarity
    trending: bool
    first_used: str
    last_used: str
    related_entries: list[str] = field(default_factory=list)
    growth_trend: GrowthTrend = GrowthTrend.STABLE


@dataclass(slots=True)
class ImpactMetrics:
    """Quantifiable results extracted from an entry's text."""

    numbers: list[str] = field(default_factory=list)
    percentages: list[str] = field(default_factory=list)
    timeframes: list[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.numbers or self.percentages or self.timeframes)


@dataclass(slots=True)
class AchievementInsight:
    entry: CareerEntry
    impact_score: int
    has_quantifiable_results: bool
    impact_keywords: list[str]
    category: Level
    metrics: ImpactMetrics


@dataclass(slots=True)
class CareerTrend:
    """Activity statistics for one calendar month (``YYYY-MM``)."""

    period: str
    activity_count: int
    skills_learned: list[str]
    categories_active: list[str]
    impactful_entries: int
    momentum: Level


@dataclass(slots=True)
class QuickWin:
    type: QuickWinType
    title: str
    description: str
    priority: Level
    actionable: bool = True
    related_entries: list[str] | None = None
    suggested_action: str | None = None


@dataclass(slots=True)
class CareerInsights:
    """Detailed insight bundle."""

    unique_skills: list[SkillInsight]
    key_achievements: list[AchievementInsight]
    career_trends: list[CareerTrend]
    quick_wins: list[QuickWin]
    recent_highlights: list[CareerEntry]
    overall_momentum: OverallMomentum
    skill_diversity_score: int
    impact_consistency: float


@dataclass(slots=True)
class SimplifiedAction:
    id: str
    title: str
    description: str
    type: ActionType
    priority: Level
    estimated_time: str
    related_entries: list[str] | None = None


@dataclass(slots=True)
class SimplifiedInsights:
    """At-a-glance summary bundle."""

    top_skills: list[str]
    recent_wins: list[str]
    momentum: SimplifiedMomentum
    priority_actions: list[SimplifiedAction]
    total_entries: int
    entries_this_month: int
    unique_skills_count: int
