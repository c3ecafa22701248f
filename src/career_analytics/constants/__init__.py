from __future__ import annotations

from career_analytics.constants.analytics_constants import (
    IMPACT_KEYWORDS,
    SKILL_GAP_CANDIDATES,
    TRENDING_SKILLS,
    ActionType,
    EntryCategory,
    GrowthTrend,
    Level,
    MetricKind,
    OverallMomentum,
    QuickWinType,
    Rarity,
    SimplifiedMomentum,
)
from career_analytics.constants.export_constants import ExportFormat

__all__ = [
    "ActionType",
    "EntryCategory",
    "ExportFormat",
    "GrowthTrend",
    "IMPACT_KEYWORDS",
    "Level",
    "MetricKind",
    "OverallMomentum",
    "QuickWinType",
    "Rarity",
    "SKILL_GAP_CANDIDATES",
    "SimplifiedMomentum",
    "TRENDING_SKILLS",
]
