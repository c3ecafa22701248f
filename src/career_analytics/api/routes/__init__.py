"""Route handlers for the API."""

from career_analytics.api.routes import entries, health, insights

__all__ = [
    "entries",
    "health",
    "insights",
]
