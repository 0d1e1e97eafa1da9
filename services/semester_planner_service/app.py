"""
FastAPI service for semester planning operations.

This service exposes the distributor from semester_planner as REST API
endpoints. Planning is a pure in-memory computation, so both endpoints are
fast and make no outbound calls.
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import asdict
from zoneinfo import ZoneInfoNotFoundError

from fastapi import FastAPI, HTTPException
from loguru import logger

from semester_planner.config import LOG_FILE, LOG_LEVEL
from semester_planner.dates import today_in_timezone
from semester_planner.distributor import plan_semester, validate_window_length
from semester_planner.errors import PlanningWindowTooLongError
from semester_planner.logger import setup_logger
from semester_planner.summary import format_plan_summary
from services.shared.models import (
    DistributionResult as PydanticDistributionResult,
    CreateSemesterPlanRequest,
    ShowSemesterPlanRequest,
    ShowSemesterPlanResponse,
    to_dataclass_result,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize resources on startup and cleanup on shutdown."""
    setup_logger(level=LOG_LEVEL, log_file=LOG_FILE)
    yield


app = FastAPI(
    title="Semester Planner Service",
    description="REST API for placing syllabus events, deadlines and study blocks on a semester calendar",
    version="1.0.0",
    lifespan=lifespan,
)


@app.get("/health")
async def health_check():
    """Health check endpoint for container orchestration."""
    return {"status": "healthy", "service": "semester-planner-service"}


@app.post("/semester/plan", response_model=PydanticDistributionResult)
async def create_plan(request: CreateSemesterPlanRequest) -> PydanticDistributionResult:
    """
    Distribute extracted syllabus events over the semester.

    Malformed events are skipped and reported in ``diagnostics``; a window
    longer than the configured maximum is rejected with 422.
    """
    try:
        today = request.start_date or today_in_timezone(request.timezone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise HTTPException(status_code=422, detail=f"Unknown timezone {request.timezone!r}: {e}")

    try:
        result = plan_semester(
            request.events,
            start_date=today,
            end_date=request.end_date,
            days_per_week=request.days_per_week,
            focus_duration=request.focus_duration,
            course_label=request.course_label,
        )
        validate_window_length(result.window)
    except PlanningWindowTooLongError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.exception("Semester planning failed")
        raise HTTPException(status_code=500, detail=f"Error creating semester plan: {str(e)}")

    return PydanticDistributionResult(**asdict(result))


@app.post("/semester/summary", response_model=ShowSemesterPlanResponse)
async def show_plan_summary(request: ShowSemesterPlanRequest) -> ShowSemesterPlanResponse:
    """
    Generate a formatted table from a semester plan.
    """
    try:
        summary_text = format_plan_summary(to_dataclass_result(request.plan))
        return ShowSemesterPlanResponse(summary=summary_text)

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error generating plan summary: {str(e)}")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8003)
