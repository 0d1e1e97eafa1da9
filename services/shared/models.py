"""
Shared Pydantic models for REST API serialization.

This module contains Pydantic equivalents of the dataclass models used throughout
the system, ensuring consistent JSON serialization across all services.
"""
from __future__ import annotations

import typing as t
import datetime as dt

from pydantic import BaseModel, Field

from semester_planner import models as semester_models


# Type literals for commonly used values
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


# Semester Planner Models
class PlanningWindow(BaseModel):
    """Date range, inclusive on both ends, over which occurrences are generated."""
    start_date: dt.date
    end_date: dt.date


class ScheduledOccurrence(BaseModel):
    """One dated item of the generated plan."""
    date: dt.date
    label: str
    description: str = ""
    estimated_minutes: int
    event_type: EventType
    is_prep: bool = False


class StudyDayAllocation(BaseModel):
    """Study days chosen for one 7-day block of the planning window."""
    week_index: int
    candidate_dates: list[dt.date] = Field(default_factory=list)
    allocated_dates: list[dt.date] = Field(default_factory=list)


class Diagnostic(BaseModel):
    """A skipped or corrected input."""
    code: str
    message: str
    source: t.Optional[dict[str, t.Any]] = None


class DistributionResult(BaseModel):
    """Complete output of one planning request."""
    window: PlanningWindow
    occurrences: list[ScheduledOccurrence] = Field(default_factory=list)
    allocations: list[StudyDayAllocation] = Field(default_factory=list)
    diagnostics: list[Diagnostic] = Field(default_factory=list)


# Request/Response Models for API endpoints
class CreateSemesterPlanRequest(BaseModel):
    """
    Request model for distributing extracted syllabus events.

    ``events`` is kept loosely typed: records come straight from the syllabus
    extractor and are validated one by one by the distributor.
    """
    events: list[dict[str, t.Any]] = Field(default_factory=list)
    start_date: t.Optional[dt.date] = None     # defaults to today in ``timezone``
    end_date: t.Optional[dt.date] = None
    timezone: str = "UTC"
    days_per_week: int = 3
    focus_duration: int = Field(default=45, ge=1)
    course_label: str = ""


class ShowSemesterPlanRequest(BaseModel):
    """Request model for formatting a semester plan."""
    plan: DistributionResult


class ShowSemesterPlanResponse(BaseModel):
    """Response model for a formatted semester plan."""
    summary: str


def to_dataclass_result(plan: DistributionResult) -> semester_models.DistributionResult:
    """
    Convert a Pydantic plan back to the dataclass model used by semester_planner.

    This handles the conversion from REST API payloads to the dataclass format
    expected by the distributor, the formatter and the MCP interface.
    """
    data = plan.model_dump()
    return semester_models.DistributionResult(
        window=semester_models.PlanningWindow(**data["window"]),
        occurrences=[semester_models.ScheduledOccurrence(**o) for o in data["occurrences"]],
        allocations=[semester_models.StudyDayAllocation(**a) for a in data["allocations"]],
        diagnostics=[semester_models.Diagnostic(**d) for d in data["diagnostics"]],
    )
