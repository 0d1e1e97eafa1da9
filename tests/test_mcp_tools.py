"""Tests for the MCP tool servers and the gateway.

Tools are looked up through FastMCP the same way the gateway registers them,
then invoked through their underlying functions.
"""
from datetime import date

import pytest
from fastmcp.exceptions import ToolError

from mcp_gateway.server import mcp as gateway_mcp
from productivity_server import store
from productivity_server.server import mcp as productivity_mcp
from semester_planner.models import DistributionResult
from semester_planner.server import create_semester_plan, mcp as planner_mcp

EVENTS = [
    {"type": "class", "title": "", "dayOfWeek": "Wed"},
    {"type": "assignment", "title": "A1", "date": "2025-01-17"},
]


@pytest.fixture(autouse=True)
def empty_store():
    """Start every test with an empty task store."""
    store.clear()
    yield
    store.clear()


@pytest.mark.asyncio
async def test_planner_tools_are_registered() -> None:
    tools = await planner_mcp.get_tools()
    assert {"distribute_semester_plan", "show_semester_plan"} <= set(tools)


@pytest.mark.asyncio
async def test_distribute_and_show_plan_tools() -> None:
    tools = await planner_mcp.get_tools()

    plan = tools["distribute_semester_plan"].fn(
        events=EVENTS,
        start_date=date(2025, 1, 6),
        end_date=date(2025, 1, 27),
        days_per_week=2,
        course_label="CMPT 310",
    )
    summary = tools["show_semester_plan"].fn(plan=plan)

    assert isinstance(plan, DistributionResult)
    assert len(plan.occurrences) == 11
    assert "A1" in summary
    assert "Total: 11 occurrence(s)" in summary


@pytest.mark.asyncio
async def test_distribute_tool_rejects_long_window() -> None:
    tools = await planner_mcp.get_tools()

    with pytest.raises(ToolError):
        tools["distribute_semester_plan"].fn(
            events=[], start_date=date(2025, 1, 6), end_date=date(2026, 6, 1)
        )


@pytest.mark.asyncio
async def test_productivity_tools_save_and_list_tasks() -> None:
    plan = create_semester_plan(
        EVENTS, start_date=date(2025, 1, 6), end_date=date(2025, 1, 27), days_per_week=2
    )
    tools = await productivity_mcp.get_tools()

    goal = tools["save_plan_tasks"].fn(plan=plan, course_code="CMPT 310", course_name="Artificial Intelligence")
    saved = tools["list_tasks"].fn(goal_id=goal.id)
    table = tools["show_tasks"].fn(goal_id=goal.id)

    assert goal.summary == "CMPT 310: Artificial Intelligence"
    assert [t.day_number for t in saved] == list(range(1, 12))
    assert "Total: 11 task(s)" in table


@pytest.mark.asyncio
async def test_gateway_registers_all_tools() -> None:
    tools = await gateway_mcp.get_tools()

    assert set(tools) == {
        "distribute_semester_plan",
        "show_semester_plan",
        "save_plan_tasks",
        "list_tasks",
        "show_tasks",
        "get_gateway_info",
        "list_available_tools",
    }
    assert tools["get_gateway_info"].fn()["gateway_status"] == "running"


def test_create_plan_replaces_negative_focus_duration() -> None:
    plan = create_semester_plan(
        [], start_date=date(2025, 1, 6), end_date=date(2025, 1, 12), focus_duration=-30
    )

    assert {o.estimated_minutes for o in plan.occurrences} == {45}
    assert [d.code for d in plan.diagnostics] == ["FOCUS_DURATION_RESET"]
