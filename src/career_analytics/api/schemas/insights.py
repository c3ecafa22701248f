"""Pydantic schemas for insight API responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from career_analytics.api.schemas.entries import CareerEntryResponse
from career_analytics.constants import (
    ActionType,
    GrowthTrend,
    Level,
    OverallMomentum,
    QuickWinType,
    Rarity,
    SimplifiedMomentum,
)


class SkillInsightResponse(BaseModel):
    """Usage statistics for one skill."""

    model_config = ConfigDict(from_attributes=True)

    skill: str
    frequency: int
    recency: int = Field(description="0-100, higher means used more recently")
    rarity: Rarity
    trending: bool
    first_used: str
    last_used: str
    related_entries: list[str]
    growth_trend: GrowthTrend


class ImpactMetricsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    numbers: list[str]
    percentages: list[str]
    timeframes: list[str]


class AchievementInsightResponse(BaseModel):
    """Impact scoring for one entry."""

    model_config = ConfigDict(from_attributes=True)

    entry: CareerEntryResponse
    impact_score: int = Field(description="0-100")
    has_quantifiable_results: bool
    impact_keywords: list[str]
    category: Level = Field(description="Impact tier")
    metrics: ImpactMetricsResponse


class CareerTrendResponse(BaseModel):
    """Activity summary for one month."""

    model_config = ConfigDict(from_attributes=True)

    period: str = Field(description="Calendar month, YYYY-MM")
    activity_count: int
    skills_learned: list[str]
    categories_active: list[str]
    impactful_entries: int
    momentum: Level


class QuickWinResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    type: QuickWinType
    title: str
    description: str
    priority: Level
    actionable: bool
    related_entries: list[str] | None = None
    suggested_action: str | None = None


class CareerInsightsResponse(BaseModel):
    """Detailed insight bundle."""

    model_config = ConfigDict(from_attributes=True)

    unique_skills: list[SkillInsightResponse]
    key_achievements: list[AchievementInsightResponse]
    career_trends: list[CareerTrendResponse]
    quick_wins: list[QuickWinResponse]
    recent_highlights: list[CareerEntryResponse]
    overall_momentum: OverallMomentum
    skill_diversity_score: int = Field(description="0-100")
    impact_consistency: float = Field(description="Percentage of entries with impact")


class SimplifiedActionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str
    type: ActionType
    priority: Level
    estimated_time: str
    related_entries: list[str] | None = None


class SimplifiedInsightsResponse(BaseModel):
    """Summary bundle for the at-a-glance view."""

    model_config = ConfigDict(from_attributes=True)

    top_skills: list[str]
    recent_wins: list[str]
    momentum: SimplifiedMomentum
    priority_actions: list[SimplifiedActionResponse]
    total_entries: int
    entries_this_month: int = Field(description="Entries in the last 30 days")
    unique_skills_count: int
