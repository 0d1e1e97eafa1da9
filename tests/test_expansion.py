"""Tests for weekly occurrence expansion."""
from datetime import date, timedelta

import pytest

from semester_planner.dates import sunday_weekday
from semester_planner.expansion import (
    WeekdayOccurrences,
    expand_recurring_event,
    first_occurrence,
    session_occurrences,
)
from semester_planner.models import PlanningWindow, RecurringEventSpec

WINDOW = PlanningWindow(start_date=date(2025, 1, 6), end_date=date(2025, 1, 27))  # Monday to Monday


def test_first_occurrence_moves_forward_to_weekday() -> None:
    assert first_occurrence(3, date(2025, 1, 6)) == date(2025, 1, 8)    # Mon -> Wed
    assert first_occurrence(1, date(2025, 1, 6)) == date(2025, 1, 6)    # same day
    assert first_occurrence(0, date(2025, 1, 6)) == date(2025, 1, 12)   # Mon -> next Sun


def test_wednesday_occurrences_in_window() -> None:
    occurrences = WeekdayOccurrences(weekday=3, window=WINDOW)

    assert list(occurrences) == [date(2025, 1, 8), date(2025, 1, 15), date(2025, 1, 22)]
    assert len(occurrences) == 3


def test_window_end_is_inclusive() -> None:
    occurrences = WeekdayOccurrences(weekday=1, window=WINDOW)
    assert list(occurrences)[-1] == date(2025, 1, 27)
    assert len(occurrences) == 4


@pytest.mark.parametrize("weekday", range(7))
def test_every_date_matches_weekday_and_window(weekday: int) -> None:
    """Every expanded date falls on the weekday, inside the window, one week apart."""
    window = PlanningWindow(start_date=date(2025, 8, 27), end_date=date(2025, 12, 19))
    dates = list(WeekdayOccurrences(weekday=weekday, window=window))

    assert dates
    for day in dates:
        assert sunday_weekday(day) == weekday
        assert window.start_date <= day <= window.end_date
    for earlier, later in zip(dates, dates[1:]):
        assert later - earlier == timedelta(days=7)
    assert len(dates) == len(WeekdayOccurrences(weekday=weekday, window=window))


def test_expansion_is_restartable_and_deterministic() -> None:
    spec = RecurringEventSpec(kind="lab", weekday=4, label="Lab")
    occurrences = expand_recurring_event(spec, WINDOW)

    first_pass = list(occurrences)
    second_pass = list(occurrences)

    assert first_pass == second_pass
    assert first_pass == list(expand_recurring_event(spec, WINDOW))


def test_weekday_outside_short_window_yields_nothing() -> None:
    window = PlanningWindow(start_date=date(2025, 1, 6), end_date=date(2025, 1, 7))  # Mon-Tue
    occurrences = WeekdayOccurrences(weekday=5, window=window)

    assert list(occurrences) == []
    assert len(occurrences) == 0


def test_recurring_spec_rejects_invalid_weekday() -> None:
    with pytest.raises(ValueError):
        RecurringEventSpec(kind="class", weekday=7, label="Lecture")
    with pytest.raises(ValueError):
        RecurringEventSpec(kind="seminar", weekday=1, label="Seminar")


def test_session_occurrences_titles_and_durations() -> None:
    lecture = RecurringEventSpec(kind="class", weekday=3, label="", time_of_day="10:00 AM")
    tutorial = RecurringEventSpec(kind="tutorial", weekday=5, label="Tutorial T02", description="Problem set review")

    lectures = session_occurrences(lecture, WINDOW, "CMPT 310")
    tutorials = session_occurrences(tutorial, WINDOW, "CMPT 310")

    assert [o.date for o in lectures] == [date(2025, 1, 8), date(2025, 1, 15), date(2025, 1, 22)]
    assert lectures[0].label == "Class: CMPT 310"
    assert lectures[0].description == "10:00 AM - class session"
    assert lectures[0].estimated_minutes == 80
    assert lectures[0].event_type == "class"
    assert not lectures[0].is_prep

    assert tutorials[0].label == "Tutorial T02"
    assert tutorials[0].description == "Problem set review"
    assert tutorials[0].estimated_minutes == 50
