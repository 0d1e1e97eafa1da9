"""
MCP wrapper for the semester planner service.

This module mirrors the MCP tool signatures of semester_planner/server.py
but makes HTTP calls to the distributed semester planner service. It handles
serialization/deserialization between dataclass and Pydantic models.
"""
from __future__ import annotations

import os
import typing as t
from dataclasses import asdict
from datetime import date

import httpx
from fastmcp import FastMCP

# Import dataclass models for MCP interface compatibility
from semester_planner.models import DistributionResult
# Import Pydantic models for HTTP serialization
from services.shared.models import (
    DistributionResult as PydanticDistributionResult,
    CreateSemesterPlanRequest,
    ShowSemesterPlanRequest,
    ShowSemesterPlanResponse,
    to_dataclass_result,
)


mcp = FastMCP("SemesterPlannerMCPWrapper")

# Service URL - configurable via environment variable
SEMESTER_PLANNER_SERVICE_URL = os.getenv("SEMESTER_PLANNER_SERVICE_URL", "http://localhost:8003")

# Timeout settings (in seconds)
PLAN_TIMEOUT = 30.0
SUMMARY_TIMEOUT = 30.0


def _distribute_semester_plan(
        events: list[dict[str, t.Any]],
        start_date: t.Optional[date] = None,
        end_date: t.Optional[date] = None,
        timezone: str = "UTC",
        days_per_week: int = 3,
        focus_duration: int = 45,
        course_label: str = "",
) -> DistributionResult:
    """
    Distribute syllabus events over the semester via the REST service.

    This maintains the same signature as the local MCP tool but makes an HTTP
    call to the distributed semester planner service.
    """
    request = CreateSemesterPlanRequest(
        events=events,
        start_date=start_date,
        end_date=end_date,
        timezone=timezone,
        days_per_week=days_per_week,
        focus_duration=focus_duration,
        course_label=course_label,
    )

    try:
        with httpx.Client(timeout=PLAN_TIMEOUT) as client:
            response = client.post(
                f"{SEMESTER_PLANNER_SERVICE_URL}/semester/plan",
                json=request.model_dump(mode="json"),
            )
            response.raise_for_status()
    except httpx.TimeoutException:
        raise RuntimeError(f"Semester planning timed out after {PLAN_TIMEOUT} seconds")
    except httpx.HTTPStatusError as e:
        raise RuntimeError(f"HTTP error from semester planner service: {e.response.status_code} {e.response.text}")
    except httpx.HTTPError as e:
        raise RuntimeError(f"Error calling semester planner service: {str(e)}")

    # Convert response back to the dataclass format
    return to_dataclass_result(PydanticDistributionResult(**response.json()))


def _show_semester_plan(plan: DistributionResult) -> str:
    """
    Format a semester plan via the REST service.

    Args:
        plan: The DistributionResult to display.

    Returns:
        Formatted string showing the plan.
    """
    request = ShowSemesterPlanRequest(plan=PydanticDistributionResult(**asdict(plan)))

    try:
        with httpx.Client(timeout=SUMMARY_TIMEOUT) as client:
            response = client.post(
                f"{SEMESTER_PLANNER_SERVICE_URL}/semester/summary",
                json=request.model_dump(mode="json"),
            )
            response.raise_for_status()
    except httpx.TimeoutException:
        raise RuntimeError(f"Plan summary generation timed out after {SUMMARY_TIMEOUT} seconds")
    except httpx.HTTPStatusError as e:
        raise RuntimeError(f"HTTP error from semester planner service: {e.response.status_code} {e.response.text}")
    except httpx.HTTPError as e:
        raise RuntimeError(f"Error calling semester planner service: {str(e)}")

    return ShowSemesterPlanResponse(**response.json()).summary


# MCP tool wrappers that call the raw functions
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
    """Places syllabus events on the semester calendar."""
    return _distribute_semester_plan(
        events, start_date, end_date, timezone, days_per_week, focus_duration, course_label
    )


@mcp.tool()
def show_semester_plan(plan: DistributionResult) -> str:
    """Displays a distributed semester plan as a table."""
    return _show_semester_plan(plan)
