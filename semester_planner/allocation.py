"""Study-day allocation.

Work blocks go on days without a scheduled class. The planning window is cut
into 7-day blocks starting at ``start_date``; inside each block the user's
preferred number of study days is spread across the free days instead of
clustering at the start of the week.
"""
from __future__ import annotations

import typing as t
from datetime import date, timedelta

from semester_planner.models import PlanningWindow, ScheduledOccurrence, StudyDayAllocation

MIN_DAYS_PER_WEEK = 1
MAX_DAYS_PER_WEEK = 7

WORK_BLOCK_DESCRIPTION = (
    "Use this time to work on assignments, review material, "
    "or prepare for upcoming quizzes/exams."
)


def clamp_days_per_week(days_per_week: int) -> int:
    """Clamp a study-days-per-week preference to 1-7."""
    return max(MIN_DAYS_PER_WEEK, min(MAX_DAYS_PER_WEEK, int(days_per_week)))


def partition_weeks(window: PlanningWindow, class_days: t.Collection[date]) -> list[StudyDayAllocation]:
    """Group the free days of ``window`` into 7-day blocks.

    Every block of the window is returned, including blocks where every day
    is a class day; those simply have no candidates.
    """
    total_weeks = window.total_days // 7 + 1
    weeks = [StudyDayAllocation(week_index=i) for i in range(total_weeks)]

    current = window.start_date
    while current <= window.end_date:
        if current not in class_days:
            week_index = (current - window.start_date).days // 7
            weeks[week_index].candidate_dates.append(current)
        current += timedelta(days=1)
    return weeks


def spread_evenly(candidates: t.Sequence[date], count: int) -> list[date]:
    """Pick ``count`` dates spread across ``candidates``.

    Index ``i`` takes ``floor(i * len(candidates) / count)``.
    """
    if count >= len(candidates):
        return list(candidates)
    return [candidates[i * len(candidates) // count] for i in range(count)]


def allocate_study_days(
        window: PlanningWindow,
        class_days: t.Collection[date],
        days_per_week: int,
) -> list[StudyDayAllocation]:
    """Choose up to ``days_per_week`` study dates in each week of ``window``.

    :param window: The corrected planning window.
    :param class_days: Dates already claimed by recurring events.
    :param days_per_week: Preferred study days per week, clamped to 1-7.
    :return: One allocation per week, in week order.
    """
    count = clamp_days_per_week(days_per_week)
    weeks = partition_weeks(window, set(class_days))
    for week in weeks:
        week.allocated_dates = spread_evenly(week.candidate_dates, count)
    return weeks


def work_block_occurrences(
        allocations: t.Iterable[StudyDayAllocation],
        focus_duration: int,
        course_label: str,
) -> list[ScheduledOccurrence]:
    """Turn allocated study dates into work block occurrences."""
    return [
        ScheduledOccurrence(
            date=day,
            label=f"Work Block: {course_label} ({focus_duration} min)",
            description=WORK_BLOCK_DESCRIPTION,
            estimated_minutes=focus_duration,
            event_type="study",
            is_prep=True,
        )
        for week in allocations
        for day in week.allocated_dates
    ]
