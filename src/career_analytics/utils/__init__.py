"""Utility functions and helpers"""

from career_analytics.utils.dates import (
    LATEST,
    OLDEST,
    days_ago,
    days_between,
    month_key,
    parse_entry_date,
    resolve_now,
)
from career_analytics.utils.display import format_career_insights, format_simplified_insights

__all__ = [
    "LATEST",
    "OLDEST",
    "days_ago",
    "days_between",
    "format_career_insights",
    "format_simplified_insights",
    "month_key",
    "parse_entry_date",
    "resolve_now",
]
