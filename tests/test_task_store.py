"""Tests for saving a semester plan as a study goal with tasks."""
from datetime import date

import pytest

from productivity_server import store
from productivity_server.models import TaskRecord
from productivity_server.server import (
    build_study_goal,
    format_tasks,
    get_tasks,
    save_plan,
    to_task_records,
)
from semester_planner.distributor import plan_semester

EVENTS = [{"type": "class", "title": "Lecture", "dayOfWeek": "Wednesday", "time": "10:00 AM"}]


@pytest.fixture(autouse=True)
def empty_store():
    """Start every test with an empty task store."""
    store.clear()
    yield
    store.clear()


@pytest.fixture
def plan():
    return plan_semester(EVENTS, start_date=date(2025, 1, 6), end_date=date(2025, 1, 27), days_per_week=2)


@pytest.mark.parametrize("code, name, expected", [
    ("CMPT 310", "AI", "CMPT 310: AI"),
    ("CMPT 310", "", "CMPT 310"),
    ("", "AI", "AI"),
    ("", "", "Semester Plan"),
])
def test_goal_summary(plan, code: str, name: str, expected: str) -> None:
    assert build_study_goal(plan, code, name).summary == expected


def test_goal_budget_and_length(plan) -> None:
    goal = build_study_goal(plan, focus_duration=50)

    assert goal.total_days == plan.window.total_days
    assert goal.daily_minutes_budget == 100
    assert goal.domain == "academic"


def test_task_records_follow_plan_order(plan) -> None:
    records = to_task_records(plan.occurrences, "goal-1")

    assert [r.day_number for r in records] == list(range(1, len(plan.occurrences) + 1))
    assert records[0].scheduled_date_key == "2025-01-06"
    assert records[0].status == "notStarted"
    assert not records[0].is_completed
    assert {r.goal_id for r in records} == {"goal-1"}


def test_add_tasks_in_batches() -> None:
    records = [
        TaskRecord(id=str(i), goal_id="g", title="t", notes="", estimated_minutes=45,
                   scheduled_date_key="2025-01-06", day_number=i + 1)
        for i in range(store.BATCH_SIZE * 2 + 3)
    ]

    assert store.add_tasks(records) == 1003
    assert store.tasks == records


def test_save_plan_stores_goal_and_tasks(plan) -> None:
    goal = save_plan(plan, "CMPT 310", "Artificial Intelligence")
    other = save_plan(plan, "CMPT 225")

    assert store.goals == [goal, other]
    assert len(get_tasks(goal.id)) == 10
    assert len(get_tasks()) == 20


def test_format_tasks(plan) -> None:
    assert format_tasks() == "📋 No tasks found."

    goal = save_plan(plan, "CMPT 310")
    table = format_tasks(goal.id)

    assert "Mon 1/6" in table
    assert "Lecture" in table
    assert table.endswith("Total: 10 task(s)")


def test_goal_budget_ignores_non_positive_focus(plan) -> None:
    assert build_study_goal(plan, focus_duration=-30).daily_minutes_budget == 90
