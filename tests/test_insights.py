from __future__ import annotations

import logging

import pytest
from conftest import NOW, iso_days_ago

from career_analytics.constants import EntryCategory, Level, OverallMomentum, QuickWinType, Rarity
from career_analytics.models import CareerTrend
from career_analytics.services.insights import (
    generate_insights,
    impact_consistency,
    overall_momentum,
    skill_diversity_score,
)


def _trend(momentum: Level) -> CareerTrend:
    return CareerTrend(
        period="2024-01",
        activity_count=1,
        skills_learned=[],
        categories_active=[],
        impactful_entries=0,
        momentum=momentum,
    )


def test_empty_input() -> None:
    insights = generate_insights([], NOW)

    assert insights.skill_diversity_score == 0
    assert insights.impact_consistency == 0
    assert insights.unique_skills == []
    assert insights.key_achievements == []
    assert insights.career_trends == []
    assert [w.type for w in insights.quick_wins] == [QuickWinType.SKILL_GAP]
    assert insights.recent_highlights == []


def test_end_to_end_two_entries(make_entry) -> None:
    today = NOW.date().isoformat()
    shipped = make_entry(
        date=today,
        skills=["React"],
        impact="increased conversion 20%",
        category=EntryCategory.ACHIEVEMENT,
        entry_id="one",
    )
    studied = make_entry(
        date=today, skills=["React"], impact="", category=EntryCategory.LEARNING, entry_id="two"
    )

    insights = generate_insights([shipped, studied], NOW)

    (react,) = insights.unique_skills
    assert react.skill == "React"
    assert react.frequency == 2
    assert react.rarity == Rarity.COMMON

    (achievement,) = insights.key_achievements
    assert achievement.category == Level.HIGH
    assert achievement.impact_score >= 70

    wins = {w.type: w for w in insights.quick_wins}
    assert wins[QuickWinType.MISSING_DOCUMENTATION].related_entries == ["two"]

    assert insights.impact_consistency == 50
    assert insights.recent_highlights == [shipped]


def test_top_lists_are_truncated(make_entry) -> None:
    entries = [
        make_entry(skills=[f"Skill{i}"], impact=f"improved thing {i}") for i in range(15)
    ]

    insights = generate_insights(entries, NOW)

    assert len(insights.unique_skills) == 10
    assert len(insights.key_achievements) == 8
    # Diversity counts every skill, not just the ten returned
    assert insights.skill_diversity_score == 30


def test_recent_highlights_window_order_and_cap(make_entry) -> None:
    entries = [
        make_entry(date=iso_days_ago(d), impact="shipped", entry_id=f"d{d}")
        for d in (3, 1, 40, 10, 31, 2, 5, 20)
    ]
    entries.append(make_entry(date=iso_days_ago(0), entry_id="no-impact"))

    insights = generate_insights(entries, NOW)

    assert [e.id for e in insights.recent_highlights] == ["d1", "d2", "d3", "d5", "d10"]


def test_skill_diversity_score_caps_at_100() -> None:
    assert skill_diversity_score(0) == 0
    assert skill_diversity_score(12) == 24
    assert skill_diversity_score(75) == 100


def test_impact_consistency(make_entry) -> None:
    entries = [make_entry(impact="x"), make_entry(), make_entry(impact=" "), make_entry(impact="y")]
    assert impact_consistency(entries) == 50
    assert impact_consistency([]) == 0


class TestOverallMomentum:
    def test_two_high_of_last_three_is_accelerating(self) -> None:
        trends = [_trend(Level.HIGH), _trend(Level.LOW), _trend(Level.HIGH)]
        assert overall_momentum(trends) == OverallMomentum.ACCELERATING

    def test_all_low_is_declining(self) -> None:
        trends = [_trend(Level.LOW), _trend(Level.LOW), _trend(Level.LOW), _trend(Level.HIGH)]
        assert overall_momentum(trends) == OverallMomentum.DECLINING

    def test_only_three_most_recent_count(self) -> None:
        trends = [_trend(Level.HIGH), _trend(Level.MEDIUM), _trend(Level.LOW), _trend(Level.HIGH)]
        assert overall_momentum(trends) == OverallMomentum.STEADY

    def test_no_trends_is_declining(self) -> None:
        assert overall_momentum([]) == OverallMomentum.DECLINING


def test_generate_insights_is_deterministic(make_entry) -> None:
    entries = [
        make_entry(
            date=iso_days_ago(d * 7),
            skills=["Python", f"Lib{d % 4}"],
            impact="reduced costs 10%" if d % 2 else "",
        )
        for d in range(20)
    ]
    assert generate_insights(entries, NOW) == generate_insights(entries, NOW)


def test_does_not_mutate_entries(make_entry) -> None:
    entry = make_entry(skills=[" Python ", "Go"], impact="saved 3 hours")
    before = (list(entry.skills), entry.impact)
    generate_insights([entry], NOW)
    assert (list(entry.skills), entry.impact) == before


def test_offsets_at_the_datetime_limits_are_analyzed(make_entry) -> None:
    entries = [
        make_entry(date="0001-01-01T00:00:00+05:00", skills=["Go"], impact="saved 3 hours"),
        make_entry(date="9999-12-31T23:00:00-05:00", skills=["Go"], impact="grew revenue 5%"),
    ]

    insights = generate_insights(entries, NOW)

    (go,) = insights.unique_skills
    assert go.frequency == 2
    assert go.recency == 100
    assert {t.period for t in insights.career_trends} == {"0001-01", "9999-12"}


def test_logs_pass_sizes(make_entry, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="career_analytics.services.insights"):
        generate_insights([make_entry(skills=["Go"])], NOW)
    assert "Analyzed 1 entries" in caplog.text
