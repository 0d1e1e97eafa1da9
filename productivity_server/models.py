"""
Data models for the productivity server's study goals and tasks.

This module contains the dataclasses used to represent a semester plan once it
has been saved: one study goal per course plan, and one task per scheduled
occurrence.
"""
from __future__ import annotations

from dataclasses import dataclass
import typing as t

TaskStatus = t.Literal["notStarted", "inProgress", "completed"]


@dataclass
class StudyGoal:
    """Represents the goal a saved semester plan belongs to."""
    id: str
    summary: str
    total_days: int
    daily_minutes_budget: int
    domain: str = "academic"


@dataclass
class TaskRecord:
    """Represents one saved task, keyed by its calendar day."""
    id: str
    goal_id: str
    title: str
    notes: str
    estimated_minutes: int
    scheduled_date_key: str     # "YYYY-MM-DD"
    day_number: int             # 1-based position in the plan
    status: TaskStatus = "notStarted"
    is_completed: bool = False
