"""
MCP Gateway Server - Unified entry point for semester planning.

This server imports the raw functions of the semester planner MCP wrapper and
the productivity server and provides a single interface for agents: planning
goes over HTTP to the distributed semester planner service, saved tasks live
in the productivity server's store.
"""
from __future__ import annotations

import typing as t
from datetime import date

from fastmcp import FastMCP

# Import the raw functions (not the decorated versions)
# This allows us to register them with our own unified FastMCP instance
from mcp_wrappers.semester_planner.mcp_service import (
    _distribute_semester_plan, _show_semester_plan,
    SEMESTER_PLANNER_SERVICE_URL
)
from productivity_server.server import format_tasks, get_tasks, save_plan

# Import models for type hints
from productivity_server.models import StudyGoal, TaskRecord
from semester_planner.models import DistributionResult

# Create the unified MCP server
mcp = FastMCP("SemesterPlannerGateway")

AVAILABLE_TOOLS: dict[str, list[str]] = {
    "semester_planner_service": [
        "distribute_semester_plan - Place syllabus events, deadlines and work blocks on the calendar",
        "show_semester_plan - Display a formatted semester plan",
    ],
    "productivity_server": [
        "save_plan_tasks - Save a plan as a study goal with one task per occurrence",
        "list_tasks - List saved tasks",
        "show_tasks - Display saved tasks",
    ],
    "gateway_tools": [
        "get_gateway_info - Get gateway and service status information",
        "list_available_tools - List all available tools by service",
    ],
}


def get_service_status() -> dict[str, str]:
    """
    Get the status of the gateway and the services it routes to.
    """
    return {
        "semester_planner_service": SEMESTER_PLANNER_SERVICE_URL,
        "productivity_server": "in-process",
        "gateway_status": "running",
    }


# Semester Planner Service Tools
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


# Productivity Server Tools
@mcp.tool()
def save_plan_tasks(
        plan: DistributionResult,
        course_code: str = "",
        course_name: str = "",
        focus_duration: int = 45,
) -> StudyGoal:
    """Saves a plan as a study goal with one task per occurrence."""
    return save_plan(plan, course_code, course_name, focus_duration)


@mcp.tool()
def list_tasks(goal_id: str = "") -> list[TaskRecord]:
    """Lists saved tasks."""
    return get_tasks(goal_id)


@mcp.tool()
def show_tasks(goal_id: str = "") -> str:
    """Displays saved tasks in a formatted table."""
    return format_tasks(goal_id)


@mcp.tool()
def get_gateway_info() -> dict[str, str]:
    """
    Get information about the MCP Gateway and connected services.
    """
    return get_service_status()


@mcp.tool()
def list_available_tools() -> dict[str, list[str]]:
    """
    List all available tools organized by service.
    """
    return AVAILABLE_TOOLS


if __name__ == "__main__":
    print("🌟 Starting MCP Gateway Server")
    print("📋 Available Services:")

    status = get_service_status()
    for service_name, service_url in status.items():
        if service_name != "gateway_status":
            print(f"  • {service_name}: {service_url}")

    print(f"\n🚀 Gateway Status: {status['gateway_status']}")
    print("\nTools available:")
    for service_name, tool_list in AVAILABLE_TOOLS.items():
        print(f"\n📦 {service_name}:")
        for tool in tool_list:
            print(f"    - {tool}")

    print(f"\n🌐 Starting MCP server...")
    mcp.run()
