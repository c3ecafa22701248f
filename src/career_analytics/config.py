"""Runtime configuration read from environment variables.

CAREER_ANALYTICS_EXTRA_TRENDING_SKILLS
    Comma-separated skill labels appended to the built-in trending list.
CAREER_ANALYTICS_LOG_LEVEL
    Log level used by the command line entry point (default ``WARNING``).
"""

from __future__ import annotations

import logging
import os

from career_analytics.constants import TRENDING_SKILLS

EXTRA_TRENDING_SKILLS_ENV = "CAREER_ANALYTICS_EXTRA_TRENDING_SKILLS"
LOG_LEVEL_ENV = "CAREER_ANALYTICS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def get_trending_skills() -> tuple[str, ...]:
    """Return the built-in trending skills followed by any configured extras.

    Extras that repeat an existing label (ignoring case) are dropped.
    """
    skills = list(TRENDING_SKILLS)
    seen = {skill.lower() for skill in skills}

    for raw in os.getenv(EXTRA_TRENDING_SKILLS_ENV, "").split(","):
        label = raw.strip()
        if label and label.lower() not in seen:
            skills.append(label)
            seen.add(label.lower())

    return tuple(skills)


def get_log_level() -> int:
    """Return the configured log level, falling back to WARNING for unknown names."""
    name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING
