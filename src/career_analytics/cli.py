"""Command line interface for running career analytics over a JSON export.

Usage:
    career-analytics summary entries.json
    career-analytics report entries.json --now 2024-06-30 --json
    career-analytics export entries.json --format csv --output exports/
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path

import typer

from career_analytics.api.schemas.insights import (
    CareerInsightsResponse,
    SimplifiedInsightsResponse,
)
from career_analytics.config import get_log_level
from career_analytics.constants import EntryCategory, ExportFormat
from career_analytics.models import CareerEntry, EntryValidationError
from career_analytics.services import (
    ExportOptions,
    NoEntriesToExportError,
    export_entries,
    export_stats,
    generate_insights,
    generate_simplified_insights,
    load_entries_from_file,
)
from career_analytics.services.entry_export import default_export_filename, select_entries
from career_analytics.utils import format_career_insights, format_simplified_insights

app = typer.Typer(help="Derive career insights from logged entries.", no_args_is_help=True)

_ENTRIES_ARG = typer.Argument(..., help="JSON file with a list of career entries")
_NOW_OPT = typer.Option(None, "--now", help="Reference time (ISO date or datetime)")
_JSON_OPT = typer.Option(False, "--json", help="Print JSON instead of text")
_FORMAT_OPT = typer.Option(
    ExportFormat.JSON, "--format", "-f", case_sensitive=False, help="Output format"
)
_OUTPUT_OPT = typer.Option(
    None,
    "--output",
    "-o",
    help="File to write, or a directory for a dated file name. Prints to stdout if omitted",
)
_FROM_OPT = typer.Option("", "--from", help="Only entries on or after this date")
_TO_OPT = typer.Option("", "--to", help="Only entries on or before this date")
_CATEGORY_OPT = typer.Option(None, "--category", "-c", help="Only these categories (repeatable)")
_METADATA_OPT = typer.Option(
    True, "--metadata/--no-metadata", help="Include ids and created/updated timestamps"
)


@app.callback()
def configure() -> None:
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")


def _parse_now(value: str | None) -> datetime | None:
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise typer.BadParameter(
            f"Not an ISO date or datetime: {value}", param_hint="--now"
        ) from exc


def _read_entries(path: Path) -> list[CareerEntry]:
    try:
        return load_entries_from_file(path)
    except (OSError, EntryValidationError) as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(1) from exc


@app.command()
def summary(
    entries_file: Path = _ENTRIES_ARG,
    now: str | None = _NOW_OPT,
    as_json: bool = _JSON_OPT,
) -> None:
    """Show the at-a-glance summary and next steps."""
    reference = _parse_now(now)
    result = generate_simplified_insights(_read_entries(entries_file), reference)

    if as_json:
        typer.echo(
            SimplifiedInsightsResponse.model_validate(result, from_attributes=True).model_dump_json(
                indent=2
            )
        )
    else:
        typer.echo(format_simplified_insights(result))


@app.command()
def report(
    entries_file: Path = _ENTRIES_ARG,
    now: str | None = _NOW_OPT,
    as_json: bool = _JSON_OPT,
) -> None:
    """Show the detailed report: skills, achievements, trends and quick wins."""
    reference = _parse_now(now)
    result = generate_insights(_read_entries(entries_file), reference)

    if as_json:
        typer.echo(
            CareerInsightsResponse.model_validate(result, from_attributes=True).model_dump_json(
                indent=2
            )
        )
    else:
        typer.echo(format_career_insights(result))


@app.command()
def export(
    entries_file: Path = _ENTRIES_ARG,
    export_format: ExportFormat = _FORMAT_OPT,
    output: Path | None = _OUTPUT_OPT,
    start_date: str = _FROM_OPT,
    end_date: str = _TO_OPT,
    categories: list[EntryCategory] | None = _CATEGORY_OPT,
    include_metadata: bool = _METADATA_OPT,
    now: str | None = _NOW_OPT,
) -> None:
    """Export entries as CSV, JSON or plain text."""
    reference = _parse_now(now)
    entries = _read_entries(entries_file)
    options = ExportOptions(
        format=export_format,
        include_metadata=include_metadata,
        start_date=start_date,
        end_date=end_date,
        categories=[c.value for c in categories or []],
    )

    try:
        content = export_entries(entries, options, reference)
    except NoEntriesToExportError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(1) from exc

    if output is None:
        typer.echo(content)
        return

    target = output
    if output.is_dir():
        target = output / default_export_filename(export_format, reference)
    try:
        target.write_text(content, encoding="utf-8")
    except OSError as exc:
        typer.echo(f"ERROR: Could not write {target}: {exc}", err=True)
        raise typer.Exit(1) from exc

    stats = export_stats(select_entries(entries, options))
    span = f"{stats.earliest} to {stats.latest}"
    typer.echo(f"Exported {stats.total_entries} entries ({span}) to {target}")


def main() -> int:
    """Entry point for the CLI application."""
    try:
        app()
    except SystemExit as exc:
        if exc.code is None:
            return 0
        return exc.code if isinstance(exc.code, int) else 1
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user. Exiting.")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
