"""Insight routes for the API.

Every endpoint analyzes the entries sent in the request body; nothing is
stored between requests.
"""

from __future__ import annotations

import logging
from datetime import datetime

from fastapi import APIRouter, HTTPException, Query, status

from career_analytics.achievement_scorer import analyze_achievements
from career_analytics.api.schemas.entries import EntriesRequest
from career_analytics.api.schemas.insights import (
    AchievementInsightResponse,
    CareerInsightsResponse,
    CareerTrendResponse,
    SimplifiedInsightsResponse,
    SkillInsightResponse,
)
from career_analytics.services.insights import generate_insights, generate_simplified_insights
from career_analytics.skill_analyzer import analyze_skills
from career_analytics.trend_analyzer import analyze_career_trends

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/insights", tags=["insights"])

_NOW_QUERY = Query(
    None,
    description="Reference time (ISO datetime) for recency and windows; defaults to now",
)


def _analysis_failed(exc: Exception) -> HTTPException:
    logger.exception("Insight analysis failed: %s", exc)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Failed to analyze entries.",
    )


@router.post(
    "",
    response_model=CareerInsightsResponse,
    summary="Detailed insights",
    description="Return skills, achievements, monthly trends, quick wins and roll-up scores.",
)
def post_insights(
    payload: EntriesRequest, now: datetime | None = _NOW_QUERY
) -> CareerInsightsResponse:
    try:
        insights = generate_insights(payload.to_entries(), now)
    except Exception as exc:
        raise _analysis_failed(exc) from exc
    return CareerInsightsResponse.model_validate(insights, from_attributes=True)


@router.post(
    "/simplified",
    response_model=SimplifiedInsightsResponse,
    summary="Simplified insights",
    description="Return the at-a-glance summary with prioritized actions.",
)
def post_simplified_insights(
    payload: EntriesRequest, now: datetime | None = _NOW_QUERY
) -> SimplifiedInsightsResponse:
    try:
        summary = generate_simplified_insights(payload.to_entries(), now)
    except Exception as exc:
        raise _analysis_failed(exc) from exc
    return SimplifiedInsightsResponse.model_validate(summary, from_attributes=True)


@router.post("/skills", response_model=list[SkillInsightResponse], summary="Skill insights")
def post_skill_insights(
    payload: EntriesRequest, now: datetime | None = _NOW_QUERY
) -> list[SkillInsightResponse]:
    try:
        skills = analyze_skills(payload.to_entries(), now)
    except Exception as exc:
        raise _analysis_failed(exc) from exc
    return [SkillInsightResponse.model_validate(s, from_attributes=True) for s in skills]


@router.post(
    "/achievements",
    response_model=list[AchievementInsightResponse],
    summary="Achievement insights",
)
def post_achievement_insights(payload: EntriesRequest) -> list[AchievementInsightResponse]:
    try:
        achievements = analyze_achievements(payload.to_entries())
    except Exception as exc:
        raise _analysis_failed(exc) from exc
    return [
        AchievementInsightResponse.model_validate(a, from_attributes=True) for a in achievements
    ]


@router.post("/trends", response_model=list[CareerTrendResponse], summary="Monthly trends")
def post_career_trends(payload: EntriesRequest) -> list[CareerTrendResponse]:
    try:
        trends = analyze_career_trends(payload.to_entries())
    except Exception as exc:
        raise _analysis_failed(exc) from exc
    return [CareerTrendResponse.model_validate(t, from_attributes=True) for t in trends]
