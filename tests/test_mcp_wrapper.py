"""Tests for the semester planner MCP wrapper.

The wrapper's HTTP client is pointed at the FastAPI app in-process, so these
tests exercise serialization in both directions without a running server.
"""
from datetime import date

import pytest
from fastapi.testclient import TestClient

from mcp_wrappers.semester_planner import mcp_service
from semester_planner.models import DistributionResult
from services.semester_planner_service.app import app


@pytest.fixture(autouse=True)
def in_process_service(monkeypatch):
    """Route the wrapper's httpx client to the FastAPI app."""
    monkeypatch.setattr(mcp_service, "SEMESTER_PLANNER_SERVICE_URL", "http://testserver")
    monkeypatch.setattr(mcp_service.httpx, "Client", lambda timeout: TestClient(app))


def test_distribute_round_trips_to_dataclasses() -> None:
    plan = mcp_service._distribute_semester_plan(
        events=[{"type": "lab", "title": "Lab", "dayOfWeek": "Thursday"}],
        start_date=date(2025, 1, 6),
        end_date=date(2025, 1, 27),
        days_per_week=2,
    )

    assert isinstance(plan, DistributionResult)
    assert plan.window.end_date == date(2025, 1, 27)
    labs = [o for o in plan.occurrences if o.event_type == "lab"]
    assert [o.date for o in labs] == [date(2025, 1, 9), date(2025, 1, 16), date(2025, 1, 23)]
    assert all(isinstance(o.date, date) for o in plan.occurrences)


def test_show_semester_plan_through_service() -> None:
    plan = mcp_service._distribute_semester_plan(
        events=[], start_date=date(2025, 1, 6), end_date=date(2025, 1, 12), days_per_week=1
    )

    summary = mcp_service._show_semester_plan(plan)

    assert "Total: 1 occurrence(s)" in summary


def test_http_errors_become_runtime_errors() -> None:
    with pytest.raises(RuntimeError, match="422"):
        mcp_service._distribute_semester_plan(
            events=[], start_date=date(2025, 1, 6), end_date=date(2026, 6, 1)
        )
