from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime

from career_analytics.config import get_trending_skills
from career_analytics.constants import GrowthTrend, Rarity
from career_analytics.constants.analytics_constants import (
    RARE_USAGE_RATIO,
    RARITY_ORDER,
    UNIQUE_USAGE_RATIO,
)
from career_analytics.models import CareerEntry, SkillInsight
from career_analytics.utils.dates import days_between, parse_entry_date, resolve_now


@dataclass(slots=True)
class _SkillUsage:
    """Running tally for one skill label while scanning entries."""

    count: int = 0
    dates: list[datetime] = field(default_factory=list)
    entry_ids: list[str] = field(default_factory=list)
    first_used: str = ""
    last_used: str = ""
    first_used_at: datetime | None = None
    last_used_at: datetime | None = None

    def record(self, entry: CareerEntry, moment: datetime) -> None:
        self.count += 1
        self.dates.append(moment)
        self.entry_ids.append(entry.id)

        if self.first_used_at is None or moment < self.first_used_at:
            self.first_used_at = moment
            self.first_used = entry.date
        if self.last_used_at is None or moment > self.last_used_at:
            self.last_used_at = moment
            self.last_used = entry.date


class SkillAnalyzer:
    @staticmethod
    def _collect_usage(entries: Sequence[CareerEntry]) -> dict[str, _SkillUsage]:
        """
        Tally every skill occurrence across entries.

        Args:
            entries: Entries to scan

        Returns:
            Usage per trimmed skill label, in first-encountered order
        """
        usage: dict[str, _SkillUsage] = {}
        for entry in entries:
            moment = parse_entry_date(entry.date)
            for raw_skill in entry.skills:
                skill = raw_skill.strip()
                if not skill:
                    continue
                usage.setdefault(skill, _SkillUsage()).record(entry, moment)
        return usage

    @staticmethod
    def recency_score(last_used_at: datetime, now: datetime) -> int:
        """One point lost per whole day since last use, bounded to 0-100."""
        return max(0, min(100, 100 - days_between(now, last_used_at)))

    @staticmethod
    def classify_rarity(count: int, total_entries: int) -> Rarity:
        if total_entries <= 0:
            return Rarity.COMMON

        usage_ratio = count / total_entries
        if usage_ratio <= UNIQUE_USAGE_RATIO:
            return Rarity.UNIQUE
        if usage_ratio <= RARE_USAGE_RATIO:
            return Rarity.RARE
        return Rarity.COMMON

    @staticmethod
    def is_trending(skill: str, trending_skills: Iterable[str]) -> bool:
        """
        Check a skill label against the trending list in both directions.

        Args:
            skill: Skill label
            trending_skills: Labels considered trending

        Returns:
            True if the label contains, or is contained by, a trending label
        """
        skill_lower = skill.lower()
        for trending in trending_skills:
            trending_lower = trending.lower()
            if trending_lower in skill_lower or skill_lower in trending_lower:
                return True
        return False

    @staticmethod
    def growth_trend(dates: Sequence[datetime]) -> GrowthTrend:
        """
        Compare usage in the earlier and later halves of a skill's history.

        The split point is ``len // 2``, so an odd count puts the extra
        occurrence in the later half.
        """
        if len(dates) <= 1:
            return GrowthTrend.STABLE

        ordered = sorted(dates)
        mid_point = len(ordered) // 2
        first_half = len(ordered[:mid_point])
        second_half = len(ordered[mid_point:])

        if second_half > first_half:
            return GrowthTrend.INCREASING
        if first_half > second_half and len(ordered) > 2:
            return GrowthTrend.DECREASING
        return GrowthTrend.STABLE

    @staticmethod
    def analyze(
        entries: Sequence[CareerEntry], now: datetime | None = None
    ) -> list[SkillInsight]:
        """
        Build a SkillInsight for every skill label found in the entries.

        Args:
            entries: Career entries to analyze
            now: Reference time for recency; defaults to the current UTC time

        Returns:
            Insights ordered by rarity (unique first), then frequency descending
        """
        if not entries:
            return []

        reference = resolve_now(now)
        trending_skills = get_trending_skills()
        total_entries = len(entries)

        insights = [
            SkillInsight(
                skill=skill,
                frequency=usage.count,
                recency=SkillAnalyzer.recency_score(usage.last_used_at, reference),
                rarity=SkillAnalyzer.classify_rarity(usage.count, total_entries),
                trending=SkillAnalyzer.is_trending(skill, trending_skills),
                first_used=usage.first_used,
                last_used=usage.last_used,
                related_entries=list(usage.entry_ids),
                growth_trend=SkillAnalyzer.growth_trend(usage.dates),
            )
            for skill, usage in SkillAnalyzer._collect_usage(entries).items()
        ]

        # sorted() is stable, so ties keep first-encountered order
        return sorted(insights, key=lambda s: (-RARITY_ORDER[s.rarity], -s.frequency))


def analyze_skills(
    entries: Sequence[CareerEntry], now: datetime | None = None
) -> list[SkillInsight]:
    """
    Rank the skills used across career entries.

    Args:
        entries: Career entries to analyze
        now: Reference time for recency scoring

    Returns:
        List of SkillInsight, rarest and most used first
    """
    return SkillAnalyzer.analyze(entries, now)
