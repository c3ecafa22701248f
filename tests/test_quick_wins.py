from __future__ import annotations

from conftest import NOW

from career_analytics.achievement_scorer import analyze_achievements
from career_analytics.constants import Level, QuickWinType
from career_analytics.services.quick_wins import generate_quick_wins
from career_analytics.skill_analyzer import analyze_skills

FULL_SKILL_SET = ["AI", "Machine Learning", "Cloud Computing", "DevOps", "TypeScript"]


def _wins(entries):
    skills = analyze_skills(entries, NOW)
    return generate_quick_wins(entries, skills, analyze_achievements(entries))


def _by_type(wins):
    return {w.type: w for w in wins}


def test_no_entries_only_suggests_skill_gaps() -> None:
    wins = _wins([])
    assert [w.type for w in wins] == [QuickWinType.SKILL_GAP]
    assert "AI, Machine Learning, Cloud Computing" in wins[0].description


def test_underutilized_unique_skills(make_entry) -> None:
    entries = [make_entry(impact="done", skills=FULL_SKILL_SET) for _ in range(10)]
    entries.append(make_entry(impact="done", skills=["Elm"]))
    entries.append(make_entry(impact="done", skills=["Haskell"]))
    entries.append(make_entry(impact="done", skills=["OCaml"]))
    entries.append(make_entry(impact="done", skills=["Lisp"]))

    win = _by_type(_wins(entries))[QuickWinType.UNDERUTILIZED_SKILL]

    assert win.priority == Level.MEDIUM
    assert win.actionable is True
    assert win.title == "Showcase 4 Unique Skills"
    assert win.description.endswith("Elm, Haskell, OCaml")


def test_missing_documentation_references_first_five(make_entry) -> None:
    entries = [make_entry(entry_id=f"n{i}", skills=FULL_SKILL_SET) for i in range(7)]
    entries.append(make_entry(entry_id="ok", impact="shipped", skills=FULL_SKILL_SET))

    win = _by_type(_wins(entries))[QuickWinType.MISSING_DOCUMENTATION]

    assert win.priority == Level.HIGH
    assert win.title == "Document Impact for 7 Entries"
    assert win.related_entries == ["n0", "n1", "n2", "n3", "n4"]


def test_whitespace_impact_counts_as_missing(make_entry) -> None:
    entries = [make_entry(entry_id="blank", impact="  ", skills=FULL_SKILL_SET)]
    win = _by_type(_wins(entries))[QuickWinType.MISSING_DOCUMENTATION]
    assert win.related_entries == ["blank"]


def test_skill_gap_uses_substring_of_current_skills(make_entry) -> None:
    entries = [
        make_entry(impact="done", skills=["Generative AI", "AWS Cloud Computing", "TypeScript"])
    ]

    win = _by_type(_wins(entries))[QuickWinType.SKILL_GAP]

    assert win.priority == Level.LOW
    assert win.description.endswith("Machine Learning, DevOps")


def test_no_rules_fire_for_well_documented_broad_profile(make_entry) -> None:
    entries = [make_entry(impact="done", skills=FULL_SKILL_SET) for _ in range(3)]
    assert _wins(entries) == []


def test_rule_order_is_priority_order(make_entry) -> None:
    entries = [make_entry(impact="done", skills=["Common"]) for _ in range(10)]
    entries.append(make_entry(skills=["Solo"]))

    assert [w.type for w in _wins(entries)] == [
        QuickWinType.UNDERUTILIZED_SKILL,
        QuickWinType.MISSING_DOCUMENTATION,
        QuickWinType.SKILL_GAP,
    ]


def test_every_quick_win_type_is_produced_by_a_rule(make_entry) -> None:
    entries = [make_entry(impact="done", skills=["Common"]) for _ in range(10)]
    entries.append(make_entry(skills=["Solo"]))

    assert {w.type for w in _wins(entries)} == set(QuickWinType)
