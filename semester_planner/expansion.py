# -*- coding: utf-8 -*-
"""Weekly occurrence expansion for recurring class events."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
import typing as t

from semester_planner.dates import sunday_weekday
from semester_planner.models import PlanningWindow, RecurringEventSpec, ScheduledOccurrence

ONE_WEEK = timedelta(days=7)

# Estimated minutes per recurring session
SESSION_MINUTES: dict[str, int] = {
    "class": 80,
    "tutorial": 50,
    "lab": 50,
}


def first_occurrence(weekday: int, start_date: date) -> date:
    """Find the first date on or after ``start_date`` falling on ``weekday``.

    :param weekday: Target weekday, 0 = Sunday.
    :param start_date: The earliest possible date.
    :return: Date of the first occurrence.
    """
    days_ahead = weekday - sunday_weekday(start_date)
    if days_ahead < 0:
        days_ahead += 7
    return start_date + timedelta(days=days_ahead)


@dataclass(frozen=True)
class WeekdayOccurrences:
    """Every date in ``window`` that falls on ``weekday``.

    Iterating yields the dates in ascending order; each iteration starts over,
    so the same instance can be consumed any number of times.
    """
    weekday: int
    window: PlanningWindow

    def __iter__(self) -> t.Iterator[date]:
        current = first_occurrence(self.weekday, self.window.start_date)
        while current <= self.window.end_date:
            yield current
            current += ONE_WEEK

    def __len__(self) -> int:
        first = first_occurrence(self.weekday, self.window.start_date)
        if first > self.window.end_date:
            return 0
        return (self.window.end_date - first).days // 7 + 1


def expand_recurring_event(spec: RecurringEventSpec, window: PlanningWindow) -> WeekdayOccurrences:
    """Expand a recurring spec into its weekly dates within ``window``."""
    return WeekdayOccurrences(weekday=spec.weekday, window=window)


def session_occurrences(
        spec: RecurringEventSpec,
        window: PlanningWindow,
        course_label: str,
) -> list[ScheduledOccurrence]:
    """Build one class/tutorial/lab occurrence for every weekly date of ``spec``."""
    kind_label = spec.kind.capitalize()
    label = spec.label or f"{kind_label}: {course_label}"
    details = spec.description or f"{spec.kind} session"
    description = f"{spec.time_of_day} - {details}" if spec.time_of_day else details

    return [
        ScheduledOccurrence(
            date=day,
            label=label,
            description=description,
            estimated_minutes=SESSION_MINUTES[spec.kind],
            event_type=spec.kind,
            is_prep=False,
        )
        for day in expand_recurring_event(spec, window)
    ]
