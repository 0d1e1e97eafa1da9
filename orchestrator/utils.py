"""Utility functions for the orchestrator."""
import json
from pathlib import Path

from rich.console import Console

from orchestrator.models import ExtractedSyllabus

err_console = Console(stderr=True)


def load_extracted_syllabus(path_str: str) -> ExtractedSyllabus:
    """Load syllabus extractor output from a JSON file.

    The file holds either a bare list of events or an object with
    ``courseCode``, ``courseName``, ``semesterEndDate`` and ``events``.

    Args:
        path_str: Path to the JSON file

    Returns:
        The parsed ExtractedSyllabus

    Raises:
        SystemExit: If the file is not valid JSON or has the wrong shape
    """
    path = Path(path_str)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        err_console.print(f"[red]Error:[/red] '{path_str}' is not valid JSON: {e}")
        raise SystemExit(1)

    if isinstance(data, list):
        return ExtractedSyllabus(events=data)

    if not isinstance(data, dict) or not isinstance(data.get("events", []), list):
        err_console.print(
            f"[red]Error:[/red] '{path_str}' must hold a list of events or an object with an 'events' list."
        )
        raise SystemExit(1)

    return ExtractedSyllabus(
        course_code=data.get("courseCode") or data.get("course_code") or "",
        course_name=data.get("courseName") or data.get("course_name") or "",
        semester_end_date=data.get("semesterEndDate") or data.get("semester_end_date") or "",
        events=data.get("events", []),
    )
