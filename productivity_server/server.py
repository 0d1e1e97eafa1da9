# -*- coding: utf-8 -*-
import typing as t
import uuid
from datetime import date

from fastmcp import FastMCP
from loguru import logger

from productivity_server.models import StudyGoal, TaskRecord
from productivity_server.store import add_goal, add_tasks, tasks
from semester_planner.config import DEFAULT_FOCUS_DURATION
from semester_planner.models import DistributionResult, ScheduledOccurrence

mcp = FastMCP("ProductivityServer")


def build_study_goal(
        plan: DistributionResult,
        course_code: str = "",
        course_name: str = "",
        focus_duration: int = 45,
) -> StudyGoal:
    """Internal function to build the goal a semester plan is saved under.

    :param plan: The distributed plan.
    :param course_code: Course code, e.g. "CMPT 310".
    :param course_name: Course name, e.g. "Artificial Intelligence".
    :param focus_duration: Minutes per work block, the default when below 1.
    :return: A StudyGoal object (not yet stored).
    """
    if focus_duration < 1:
        focus_duration = DEFAULT_FOCUS_DURATION
    if course_code and course_name:
        summary = f"{course_code}: {course_name}"
    else:
        summary = course_code or course_name or "Semester Plan"
    return StudyGoal(
        id=str(uuid.uuid4()),
        summary=summary,
        total_days=plan.window.total_days,
        daily_minutes_budget=focus_duration * 2,
    )


def to_task_records(occurrences: t.Sequence[ScheduledOccurrence], goal_id: str) -> list[TaskRecord]:
    """Internal function to map ordered occurrences to task records.

    :param occurrences: Date-sorted occurrences from the distributor.
    :param goal_id: The goal the tasks belong to.
    :return: One TaskRecord per occurrence, numbered from 1.
    """
    return [
        TaskRecord(
            id=str(uuid.uuid4()),
            goal_id=goal_id,
            title=occurrence.label,
            notes=occurrence.description,
            estimated_minutes=occurrence.estimated_minutes,
            scheduled_date_key=occurrence.date.isoformat(),
            day_number=index,
        )
        for index, occurrence in enumerate(occurrences, 1)
    ]


def save_plan(
        plan: DistributionResult,
        course_code: str = "",
        course_name: str = "",
        focus_duration: int = 45,
) -> StudyGoal:
    """Internal function to store a plan as a goal and its tasks.

    :return: The stored StudyGoal.
    """
    goal = build_study_goal(plan, course_code, course_name, focus_duration)
    add_goal(goal)
    inserted = add_tasks(to_task_records(plan.occurrences, goal.id))
    logger.info(f"Goal {goal.id} created with {inserted} tasks")
    return goal


def get_tasks(goal_id: str = "") -> list[TaskRecord]:
    """Internal function to get stored tasks, optionally for one goal.

    :return: A list of TaskRecord objects.
    """
    if not goal_id:
        return tasks
    return [task for task in tasks if task.goal_id == goal_id]


def _format_date_key(date_key: str) -> str:
    """Formats a "YYYY-MM-DD" key as 'Mon 1/15'.

    If parsing fails, returns the original string.
    """
    try:
        day = date.fromisoformat(date_key)
        return f"{day.strftime('%a')} {day.month}/{day.day}"
    except (ValueError, TypeError):
        return date_key


def format_tasks(goal_id: str = "") -> str:
    """Internal function to format stored tasks as a clean table.

    :param goal_id: Only show tasks of this goal (optional).
    :return: Formatted table string of the tasks.
    """
    selected = get_tasks(goal_id)
    if not selected:
        return "📋 No tasks found."

    lines = []
    lines.append("📋 TASKS")
    lines.append("=" * 100)
    lines.append(f"{'#':<5} {'Date':<12} {'Title':<50} {'Min':>6} {'Status':<12}")
    lines.append("-" * 100)

    for task in selected:
        title = task.title[:49] if len(task.title) > 49 else task.title
        lines.append(
            f"{task.day_number:<5} {_format_date_key(task.scheduled_date_key):<12} "
            f"{title:<50} {task.estimated_minutes:>6} {task.status:<12}"
        )

    lines.append("=" * 100)
    lines.append(f"Total: {len(selected)} task(s)")
    return "\n".join(lines)


@mcp.tool()
def save_plan_tasks(
        plan: DistributionResult,
        course_code: str = "",
        course_name: str = "",
        focus_duration: int = 45,
) -> StudyGoal:
    """Saves a distributed semester plan as a study goal with one task per occurrence.

    :param plan: The DistributionResult to save.
    :param course_code: Course code (optional).
    :param course_name: Course name (optional).
    :param focus_duration: Minutes per work block, used for the daily budget.
    :return: The created StudyGoal.
    """
    return save_plan(plan, course_code, course_name, focus_duration)


@mcp.tool()
def list_tasks(goal_id: str = "") -> list[TaskRecord]:
    """Lists stored tasks.

    :param goal_id: Only list tasks of this goal (optional).
    :return: A list of task dictionaries.
    """
    return get_tasks(goal_id)


@mcp.tool()
def show_tasks(goal_id: str = "") -> str:
    """Displays stored tasks in a formatted table.

    :param goal_id: Only show tasks of this goal (optional).
    :return: Formatted string of tasks, or a message if there are none.
    """
    return format_tasks(goal_id)


if __name__ == "__main__":
    mcp.run()
