"""
Data models for distributing a syllabus across a semester calendar.

This module contains the dataclasses passed between the date normalization,
weekday expansion, study-day allocation and orchestration steps.
All dates are naive ``datetime.date`` values: calendar days with no time
or timezone component.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import datetime as dt
import typing as t


# Type literals for commonly used values
RecurringKind = t.Literal["class", "tutorial", "lab"]
OneTimeKind = t.Literal["assignment", "quiz", "midterm", "final", "project"]
EventType = t.Literal[
    "class",
    "tutorial",
    "lab",
    "assignment",
    "quiz",
    "midterm",
    "final",
    "project",
    "study",
]

RECURRING_KINDS: tuple[str, ...] = t.get_args(RecurringKind)
ONE_TIME_KINDS: tuple[str, ...] = t.get_args(OneTimeKind)


@dataclass
class RecurringEventSpec:
    """
    A weekly session tied to a weekday, like:
    - "Lecture, Wednesdays 10:00 AM"
    """
    kind: RecurringKind
    weekday: int            # 0 = Sunday ... 6 = Saturday
    label: str
    time_of_day: str = ""   # display only, e.g. "10:00 AM"
    description: str = ""

    def __post_init__(self) -> None:
        if self.kind not in RECURRING_KINDS:
            raise ValueError(f"Recurring kind must be one of {RECURRING_KINDS}, got {self.kind!r}")
        if isinstance(self.weekday, bool) or not isinstance(self.weekday, int) or not 0 <= self.weekday <= 6:
            raise ValueError(f"Weekday must be 0-6 (Sun-Sat), got {self.weekday!r}")


@dataclass
class OneTimeEventSpec:
    """
    A deliverable or exam due on a single calendar date.
    """
    kind: OneTimeKind
    date: dt.date
    label: str
    description: str = ""
    due_time: str = ""      # display only, e.g. "11:59 PM"
    year_known: bool = True # False when the syllabus gave only month and day

    def __post_init__(self) -> None:
        if self.kind not in ONE_TIME_KINDS:
            raise ValueError(f"One-time kind must be one of {ONE_TIME_KINDS}, got {self.kind!r}")


@dataclass
class PlanningWindow:
    """Date range, inclusive on both ends, over which occurrences are generated."""
    start_date: dt.date
    end_date: dt.date

    @property
    def total_days(self) -> int:
        return (self.end_date - self.start_date).days


@dataclass
class PlanPreferences:
    """User preferences that shape the generated work blocks."""
    days_per_week: int = 3
    focus_duration: int = 45    # minutes per work block
    course_label: str = "Course"


@dataclass
class ScheduledOccurrence:
    """One dated item of the generated plan, ready to be persisted as a task."""
    date: dt.date
    label: str
    description: str
    estimated_minutes: int
    event_type: EventType
    is_prep: bool = False


@dataclass
class StudyDayAllocation:
    """
    Study days chosen for one 7-day block of the planning window.
    """
    week_index: int                                         # zero-based, relative to start_date
    candidate_dates: list[dt.date] = field(default_factory=list)
    allocated_dates: list[dt.date] = field(default_factory=list)


@dataclass
class Diagnostic:
    """A skipped or corrected input, reported back to the caller."""
    code: str
    message: str
    source: t.Optional[dict[str, t.Any]] = None


@dataclass
class DistributionResult:
    """Complete output of one planning request."""
    window: PlanningWindow
    occurrences: list[ScheduledOccurrence] = field(default_factory=list)
    allocations: list[StudyDayAllocation] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def class_days(self) -> set[dt.date]:
        return {o.date for o in self.occurrences if o.event_type in RECURRING_KINDS}
