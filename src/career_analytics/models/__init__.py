"""Data models and type definitions"""

from career_analytics.models.entry import CareerEntry, EntryValidationError
from career_analytics.models.entry_record import CareerEntryRecord
from career_analytics.models.insights import (
    AchievementInsight,
    CareerInsights,
    CareerTrend,
    ImpactMetrics,
    QuickWin,
    SimplifiedAction,
    SimplifiedInsights,
    SkillInsight,
)

__all__ = [
    "AchievementInsight",
    "CareerEntry",
    "CareerEntryRecord",
    "CareerInsights",
    "CareerTrend",
    "EntryValidationError",
    "ImpactMetrics",
    "QuickWin",
    "SimplifiedAction",
    "SimplifiedInsights",
    "SkillInsight",
]
