"""Services"""

from career_analytics.services.entry_export import (
    ExportOptions,
    NoEntriesToExportError,
    export_entries,
    export_stats,
)
from career_analytics.services.entry_filters import FilterOptions, filter_entries
from career_analytics.services.entry_loader import load_entries, load_entries_from_file
from career_analytics.services.insights import (
    generate_insights,
    generate_simplified_insights,
)
from career_analytics.services.quick_wins import generate_quick_wins

__all__ = [
    "ExportOptions",
    "FilterOptions",
    "NoEntriesToExportError",
    "export_entries",
    "export_stats",
    "filter_entries",
    "generate_insights",
    "generate_quick_wins",
    "generate_simplified_insights",
    "load_entries",
    "load_entries_from_file",
]
