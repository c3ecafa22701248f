"""Rule-based quick-win recommendations.

Each rule inspects the analysis results independently and contributes at most
one QuickWin. Rules run in display order.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from career_analytics.constants import SKILL_GAP_CANDIDATES, Level, QuickWinType, Rarity
from career_analytics.constants.analytics_constants import MAX_QUICK_WINS
from career_analytics.models import AchievementInsight, CareerEntry, QuickWin, SkillInsight

__all__ = [
    "generate_quick_wins",
    "missing_documentation_win",
    "skill_gap_win",
    "underutilized_skill_win",
]

_MAX_NAMED_SKILLS = 3
_MAX_RELATED_ENTRIES = 5
_UNDERUTILIZED_MAX_FREQUENCY = 2


def underutilized_skill_win(
    entries: Sequence[CareerEntry],
    skills: Sequence[SkillInsight],
    achievements: Sequence[AchievementInsight],
) -> QuickWin | None:
    underutilized = [
        s
        for s in skills
        if s.frequency <= _UNDERUTILIZED_MAX_FREQUENCY and s.rarity == Rarity.UNIQUE
    ]
    if not underutilized:
        return None

    names = ", ".join(s.skill for s in underutilized[:_MAX_NAMED_SKILLS])
    return QuickWin(
        type=QuickWinType.UNDERUTILIZED_SKILL,
        title=f"Showcase {len(underutilized)} Unique Skills",
        description=(
            f"You have {len(underutilized)} unique skills that could be highlighted more: {names}"
        ),
        priority=Level.MEDIUM,
        suggested_action=(
            "Create more entries showcasing these skills or add them to existing projects"
        ),
    )


def missing_documentation_win(
    entries: Sequence[CareerEntry],
    skills: Sequence[SkillInsight],
    achievements: Sequence[AchievementInsight],
) -> QuickWin | None:
    without_impact = [e for e in entries if not e.has_impact]
    if not without_impact:
        return None

    return QuickWin(
        type=QuickWinType.MISSING_DOCUMENTATION,
        title=f"Document Impact for {len(without_impact)} Entries",
        description=(
            f"{len(without_impact)} entries are missing impact statements. "
            "Adding these could significantly boost your profile."
        ),
        priority=Level.HIGH,
        related_entries=[e.id for e in without_impact[:_MAX_RELATED_ENTRIES]],
        suggested_action="Add quantifiable impact statements to these entries",
    )


def skill_gap_win(
    entries: Sequence[CareerEntry],
    skills: Sequence[SkillInsight],
    achievements: Sequence[AchievementInsight],
) -> QuickWin | None:
    current = [s.skill.lower() for s in skills]
    missing = [
        candidate
        for candidate in SKILL_GAP_CANDIDATES
        if not any(candidate.lower() in skill for skill in current)
    ]
    if not missing:
        return None

    return QuickWin(
        type=QuickWinType.SKILL_GAP,
        title="Consider Learning Trending Skills",
        description=(
            "Industry-trending skills you might want to explore: "
            f"{', '.join(missing[:_MAX_NAMED_SKILLS])}"
        ),
        priority=Level.LOW,
        suggested_action="Consider projects or learning opportunities in these areas",
    )


QuickWinRule = Callable[
    [Sequence[CareerEntry], Sequence[SkillInsight], Sequence[AchievementInsight]],
    QuickWin | None,
]

QUICK_WIN_RULES: tuple[QuickWinRule, ...] = (
    underutilized_skill_win,
    missing_documentation_win,
    skill_gap_win,
)


def generate_quick_wins(
    entries: Sequence[CareerEntry],
    skills: Sequence[SkillInsight],
    achievements: Sequence[AchievementInsight],
) -> list[QuickWin]:
    """Run every quick-win rule and collect the ones that fire.

    Args:
        entries: Raw career entries.
        skills: Output of the skill analyzer for the same entries.
        achievements: Output of the achievement scorer for the same entries.

    Returns:
        Up to five quick wins in rule order.
    """
    wins: list[QuickWin] = []
    for rule in QUICK_WIN_RULES:
        win = rule(entries, skills, achievements)
        if win is not None:
            wins.append(win)
    return wins[:MAX_QUICK_WINS]
