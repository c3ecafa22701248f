"""Label taxonomies, keyword lists and thresholds used by the analytics passes.

The keyword and trending-skill lists are plain data so they can be extended
(see ``career_analytics.config``) without touching the analysis code.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum


class EntryCategory(StrEnum):
    """Fixed set of categories a career entry can belong to."""

    ACHIEVEMENT = "achievement"
    SKILL = "skill"
    PROJECT = "project"
    LEADERSHIP = "leadership"
    LEARNING = "learning"
    NETWORKING = "networking"


class Rarity(StrEnum):
    UNIQUE = "unique"
    RARE = "rare"
    COMMON = "common"


class GrowthTrend(StrEnum):
    INCREASING = "increasing"
    STABLE = "stable"
    DECREASING = "decreasing"


class Level(StrEnum):
    """Three-step scale shared by impact tiers, trend momentum and priorities."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class QuickWinType(StrEnum):
    UNDERUTILIZED_SKILL = "underutilized_skill"
    MISSING_DOCUMENTATION = "missing_documentation"
    SKILL_GAP = "skill_gap"


class OverallMomentum(StrEnum):
    ACCELERATING = "accelerating"
    STEADY = "steady"
    DECLINING = "declining"


class SimplifiedMomentum(StrEnum):
    GROWING = "growing"
    STEADY = "steady"
    NEEDS_ATTENTION = "needs-attention"


class ActionType(StrEnum):
    SKILL = "skill"
    DOCUMENTATION = "documentation"
    IMPACT = "impact"
    NETWORKING = "networking"


class MetricKind(StrEnum):
    """Bucket an extracted metric lands in."""

    PERCENTAGE = "percentages"
    TIMEFRAME = "timeframes"
    NUMBER = "numbers"


# Display order for skills: unique first
RARITY_ORDER: dict[Rarity, int] = {
    Rarity.UNIQUE: 3,
    Rarity.RARE: 2,
    Rarity.COMMON: 1,
}

# Usage ratio (occurrences / total entries) upper bounds, inclusive
UNIQUE_USAGE_RATIO = 0.1
RARE_USAGE_RATIO = 0.3

# Matched in both directions against a skill label (case-insensitive)
TRENDING_SKILLS: tuple[str, ...] = (
    "AI",
    "Machine Learning",
    "React",
    "TypeScript",
    "Python",
    "Cloud",
    "DevOps",
    "Kubernetes",
    "GraphQL",
    "Next.js",
    "Rust",
    "Go",
)

# Recommended when no current skill label contains them
SKILL_GAP_CANDIDATES: tuple[str, ...] = (
    "AI",
    "Machine Learning",
    "Cloud Computing",
    "DevOps",
    "TypeScript",
)

IMPACT_KEYWORDS: tuple[str, ...] = (
    "increased",
    "decreased",
    "improved",
    "reduced",
    "achieved",
    "delivered",
    "saved",
    "generated",
    "optimized",
    "streamlined",
    "accelerated",
    "enhanced",
)


@dataclass(frozen=True)
class MetricPattern:
    """A quantifiable-result pattern and the bucket its matches belong to."""

    name: str
    regex: re.Pattern[str]
    kind: MetricKind


# Ordered by precedence: a text span claimed by an earlier pattern is never
# reported again by a later one.
METRIC_PATTERNS: tuple[MetricPattern, ...] = (
    MetricPattern("percentage", re.compile(r"\d+%"), MetricKind.PERCENTAGE),
    MetricPattern(
        "timeframe",
        re.compile(r"\d+\s*(?:hours?|days?|weeks?|months?|years?)", re.IGNORECASE),
        MetricKind.TIMEFRAME,
    ),
    MetricPattern("currency", re.compile(r"\$[\d,]+"), MetricKind.NUMBER),
    MetricPattern("magnitude", re.compile(r"\d+[kKmMbB]"), MetricKind.NUMBER),
    MetricPattern(
        "people",
        re.compile(r"\d+\s*(?:users?|customers?|clients?)", re.IGNORECASE),
        MetricKind.NUMBER,
    ),
)

# Impact score weights
KEYWORD_POINTS = 10
QUANTIFIED_BONUS = 30
PERCENTAGE_BONUS = 20
ACHIEVEMENT_CATEGORY_BONUS = 15
MAX_IMPACT_SCORE = 100
HIGH_IMPACT_THRESHOLD = 70
MEDIUM_IMPACT_THRESHOLD = 40

# Monthly trend momentum thresholds: (minimum entries, minimum impactful ratio)
HIGH_MOMENTUM_RULE = (5, 0.6)
MEDIUM_MOMENTUM_RULE = (3, 0.4)
MAX_TREND_PERIODS = 12

# Composer limits
TOP_SKILLS_LIMIT = 10
TOP_ACHIEVEMENTS_LIMIT = 8
RECENT_HIGHLIGHTS_LIMIT = 5
RECENT_WINDOW_DAYS = 30
RECENT_WINS_WINDOW_DAYS = 60
MOMENTUM_LOOKBACK_PERIODS = 3
MAX_QUICK_WINS = 5

# Simplified bundle limits
SIMPLIFIED_TOP_SKILLS = 5
SIMPLIFIED_RECENT_WINS = 3
WIN_DESCRIPTION_MAX_CHARS = 80
ELLIPSIS = "..."
MAX_PRIORITY_ACTIONS = 4
NETWORKING_SHARE_TARGET = 0.1
