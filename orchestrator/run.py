# -*- coding: utf-8 -*-
import json
import typing as t
from dataclasses import asdict
from datetime import date
from zoneinfo import ZoneInfoNotFoundError

import click
from loguru import logger
from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from orchestrator.utils import load_extracted_syllabus
from productivity_server.server import save_plan, get_tasks
from semester_planner.config import (
    DEFAULT_DAYS_PER_WEEK,
    DEFAULT_FOCUS_DURATION,
    LOG_FILE,
    LOG_LEVEL,
    MAX_WINDOW_DAYS,
)
from semester_planner.dates import resolve_event_date, today_in_timezone
from semester_planner.distributor import plan_semester, validate_window_length
from semester_planner.errors import MalformedEventError, PlanningWindowTooLongError
from semester_planner.logger import setup_logger
from semester_planner.models import DistributionResult


console = Console()

EVENT_STYLES: dict[str, str] = {
    "class": "cyan",
    "tutorial": "cyan",
    "lab": "cyan",
    "study": "green",
    "final": "bold red",
    "midterm": "red",
}


def truncate_title(title: str, max_length: int = 45) -> str:
    """Truncate title to max_length characters, adding ellipsis if needed."""
    if len(title) <= max_length:
        return title
    return title[:max_length-3] + "..."


def create_plan_table(result: DistributionResult) -> Table:
    """Create a table with one row per scheduled occurrence."""
    window = result.window
    table = Table(
        title=f"📅 Semester Plan {window.start_date.isoformat()} → {window.end_date.isoformat()}",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("Date", style="yellow")
    table.add_column("Day", style="dim")
    table.add_column("Type")
    table.add_column("Title", style="white")
    table.add_column("Min", justify="right")

    for occurrence in result.occurrences:
        table.add_row(
            occurrence.date.isoformat(),
            occurrence.date.strftime("%a"),
            Text(occurrence.event_type, style=EVENT_STYLES.get(occurrence.event_type, "magenta")),
            truncate_title(occurrence.label),
            str(occurrence.estimated_minutes),
        )
    return table


def create_diagnostics_panel(result: DistributionResult) -> Panel:
    """Create a panel listing skipped and corrected inputs."""
    text = Text()
    for idx, diagnostic in enumerate(result.diagnostics):
        if idx:
            text.append("\n")
        text.append(f"[{diagnostic.code}] ", style="bold yellow")
        text.append(diagnostic.message, style="white")
    return Panel(text, title="⚠️ Diagnostics", border_style="yellow")


def _resolve_semester_end(end: t.Optional[date], written_end: str, today: date) -> t.Optional[date]:
    """Pick the semester end: command line first, then the syllabus text."""
    if end is not None:
        return end
    if not written_end:
        return None
    try:
        resolved, _ = resolve_event_date(written_end, today)
    except MalformedEventError as e:
        logger.warning(f"Ignoring semester end date from syllabus: {e.reason}")
        return None
    return resolved


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument(
    "events_json",
    type=click.Path(exists=True, dir_okay=False),
)
@click.option("--start", "start", type=click.DateTime(formats=["%Y-%m-%d"]), help="Planning start date (defaults to today).")
@click.option("--end", "end", type=click.DateTime(formats=["%Y-%m-%d"]), help="Semester end date (overrides the syllabus).")
@click.option("--timezone", "timezone", default="UTC", show_default=True, help="Timezone used to resolve today.")
@click.option("--days-per-week", type=int, default=DEFAULT_DAYS_PER_WEEK, show_default=True, help="Study days per week (1-7).")
@click.option("--focus-duration", type=click.IntRange(min=1), default=DEFAULT_FOCUS_DURATION, show_default=True, help="Minutes per work block.")
@click.option("--course", "course", default="", help="Course label used in titles (defaults to the syllabus course code).")
@click.option("--max-window-days", type=int, default=MAX_WINDOW_DAYS, show_default=True, help="Reject planning windows longer than this.")
@click.option("--no-save", is_flag=True, help="Print the plan without saving tasks.")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
def main(
        events_json: str,
        start: t.Optional[t.Any],
        end: t.Optional[t.Any],
        timezone: str,
        days_per_week: int,
        focus_duration: int,
        course: str,
        max_window_days: int,
        no_save: bool,
        verbose: bool,
) -> None:
    """Distribute extracted syllabus events from EVENTS_JSON over the semester."""
    setup_logger(level="DEBUG" if verbose else LOG_LEVEL, log_file=LOG_FILE)

    syllabus = load_extracted_syllabus(events_json)

    if start is not None:
        today = start.date()
    else:
        try:
            today = today_in_timezone(timezone)
        except (ZoneInfoNotFoundError, ValueError):
            raise click.BadParameter(f"unknown timezone {timezone!r}", param_hint="--timezone")

    semester_end = _resolve_semester_end(end.date() if end is not None else None, syllabus.semester_end_date, today)
    course_label = course or syllabus.course_label

    console.print(f"\n[bold blue]📚 Planning {course_label}[/bold blue] ({len(syllabus.events)} extracted events)")

    result = plan_semester(
        syllabus.events,
        start_date=today,
        end_date=semester_end,
        days_per_week=days_per_week,
        focus_duration=focus_duration,
        course_label=course_label,
    )

    try:
        validate_window_length(result.window, max_window_days)
    except PlanningWindowTooLongError as e:
        console.print(f"[red]Error:[/red] {e.reason}")
        raise SystemExit(1)

    if verbose:
        console.print(Panel(JSON(json.dumps(asdict(result), default=str)), title="📄 Plan - Details", border_style="blue"))

    console.print(create_plan_table(result))
    if result.diagnostics:
        console.print(create_diagnostics_panel(result))

    stats_text = Text()
    stats_text.append("Total occurrences: ", style="white")
    stats_text.append(f"{len(result.occurrences)}", style="bold green")
    stats_text.append("\n")
    stats_text.append("Study days: ", style="white")
    stats_text.append(f"{sum(len(week.allocated_dates) for week in result.allocations)}", style="bold green")

    if not no_save:
        goal = save_plan(result, syllabus.course_code or course_label, syllabus.course_name, focus_duration)
        stats_text.append("\n")
        stats_text.append("Saved tasks: ", style="white")
        stats_text.append(f"{len(get_tasks(goal.id))}", style="bold green")
        stats_text.append(f" under goal '{goal.summary}'", style="dim")

    console.print(Panel(stats_text, title="📊 Statistics", border_style="green"))
    console.print("\n[bold green]✅ Processing complete![/bold green]")


if __name__ == "__main__":
    main()
