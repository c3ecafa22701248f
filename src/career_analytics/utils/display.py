"""Display and formatting utilities"""

from __future__ import annotations

from career_analytics.models import CareerInsights, SimplifiedInsights

_RULE = "=" * 60
_SUBRULE = "-" * 60


def _bullets(items: list[str], empty: str = "(none)") -> list[str]:
    if not items:
        return [f"  {empty}"]
    return [f"  • {item}" for item in items]


def format_simplified_insights(summary: SimplifiedInsights) -> str:
    """Render the summary bundle as plain text.

    Args:
        summary: Simplified insights to render.

    Returns:
        Multi-line string suitable for a terminal.
    """
    lines = [
        _RULE,
        "Career Snapshot",
        _RULE,
        f"Entries: {summary.total_entries}  |  "
        f"Last 30 days: {summary.entries_this_month}  |  "
        f"Skills: {summary.unique_skills_count}",
        f"Momentum: {summary.momentum}",
        "",
        "Top skills:",
        *_bullets(summary.top_skills),
        "",
        "Recent wins:",
        *_bullets(summary.recent_wins),
        "",
        "Next steps:",
    ]
    if not summary.priority_actions:
        lines.append("  (nothing pressing)")
    for action in summary.priority_actions:
        lines.append(f"  [{action.priority}] {action.title} ({action.estimated_time})")
        lines.append(f"      {action.description}")
    return "\n".join(lines)


def format_career_insights(insights: CareerInsights) -> str:
    """Render the detailed bundle as plain text."""
    lines = [
        _RULE,
        "Career Insights",
        _RULE,
        f"Overall momentum: {insights.overall_momentum}",
        f"Skill diversity: {insights.skill_diversity_score}/100",
        f"Impact consistency: {insights.impact_consistency:.0f}%",
        "",
        "Skills",
        _SUBRULE,
    ]
    if not insights.unique_skills:
        lines.append("  (none)")
    for skill in insights.unique_skills:
        flag = " 🔥" if skill.trending else ""
        lines.append(
            f"  {skill.skill}{flag}: {skill.rarity}, used {skill.frequency}x, "
            f"recency {skill.recency}, {skill.growth_trend}"
        )

    lines += ["", "Achievements", _SUBRULE]
    if not insights.key_achievements:
        lines.append("  (none)")
    for achievement in insights.key_achievements:
        lines.append(
            f"  [{achievement.category} {achievement.impact_score}] "
            f"{achievement.entry.description}"
        )

    lines += ["", "Monthly trends", _SUBRULE]
    if not insights.career_trends:
        lines.append("  (none)")
    for trend in insights.career_trends:
        lines.append(
            f"  {trend.period}: {trend.activity_count} entries, "
            f"{trend.impactful_entries} with impact, momentum {trend.momentum}"
        )

    lines += ["", "Quick wins", _SUBRULE]
    if not insights.quick_wins:
        lines.append("  (none)")
    for win in insights.quick_wins:
        lines.append(f"  [{win.priority}] {win.title}")
        lines.append(f"      {win.description}")

    return "\n".join(lines)
