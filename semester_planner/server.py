# -*- coding: utf-8 -*-
import typing as t
from datetime import date

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from semester_planner.dates import today_in_timezone
from semester_planner.distributor import plan_semester, validate_window_length
from semester_planner.errors import PlanningWindowTooLongError
from semester_planner.models import DistributionResult
from semester_planner.summary import format_plan_summary

mcp = FastMCP("SemesterPlanner")


def create_semester_plan(
        events: list[dict[str, t.Any]],
        start_date: t.Optional[date] = None,
        end_date: t.Optional[date] = None,
        timezone: str = "UTC",
        days_per_week: int = 3,
        focus_duration: int = 45,
        course_label: str = "",
) -> DistributionResult:
    """Internal function to distribute extracted syllabus events over a semester.

    :param events: Event dicts from the syllabus extractor.
    :param start_date: Planning "today"; resolved from ``timezone`` when omitted.
    :param end_date: Semester end date (optional, corrected when stale).
    :param timezone: IANA timezone used to resolve today.
    :param days_per_week: Preferred study days per week (1-7).
    :param focus_duration: Minutes per work block.
    :param course_label: Course code or name used in titles.
    :return: A DistributionResult with occurrences, allocations and diagnostics.
    :raises PlanningWindowTooLongError: If the corrected window is longer than allowed.
    """
    today = start_date or today_in_timezone(timezone)
    result = plan_semester(
        events,
        start_date=today,
        end_date=end_date,
        days_per_week=days_per_week,
        focus_duration=focus_duration,
        course_label=course_label,
    )
    validate_window_length(result.window)
    return result


@mcp.tool()
def distribute_semester_plan(
        events: list[dict[str, t.Any]],
        start_date: t.Optional[date] = None,
        end_date: t.Optional[date] = None,
        timezone: str = "UTC",
        days_per_week: int = 3,
        focus_duration: int = 45,
        course_label: str = "",
) -> DistributionResult:
    """Places syllabus events on the semester calendar.

    Weekly classes, tutorials and labs are expanded to every matching weekday,
    deadlines get their year corrected, and work blocks fill the preferred
    number of non-class days per week.

    :param events: Event dicts with type, title, dayOfWeek or date.
    :param start_date: Planning start date (defaults to today in ``timezone``).
    :param end_date: Semester end date.
    :param timezone: IANA timezone used to resolve today.
    :param days_per_week: Preferred study days per week (1-7).
    :param focus_duration: Minutes per work block.
    :param course_label: Course code or name used in titles.
    :return: A DistributionResult object.
    """
    try:
        return create_semester_plan(
            events, start_date, end_date, timezone, days_per_week, focus_duration, course_label
        )
    except PlanningWindowTooLongError as e:
        raise ToolError(str(e))


@mcp.tool()
def show_semester_plan(plan: DistributionResult) -> str:
    """Displays a distributed semester plan as a table with per-type totals.

    :param plan: The DistributionResult returned by distribute_semester_plan.
    :return: Formatted string showing the plan.
    """
    return format_plan_summary(plan)


if __name__ == "__main__":
    mcp.run()
