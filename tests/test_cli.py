"""Tests for the semester-plan command line."""
import json

import pytest
from click.testing import CliRunner
from loguru import logger

from orchestrator.run import main
from productivity_server import store

SYLLABUS = {
    "courseCode": "CMPT 310",
    "courseName": "Artificial Intelligence",
    "semesterEndDate": "",
    "events": [
        {"type": "class", "title": "Lecture", "dayOfWeek": "Wednesday", "time": "10:00 AM"},
    ],
}


@pytest.fixture(autouse=True)
def isolated_run():
    """Reset the task store and detach loguru from the runner's streams."""
    store.clear()
    yield
    store.clear()
    logger.remove()


@pytest.fixture
def syllabus_file(tmp_path):
    path = tmp_path / "events.json"
    path.write_text(json.dumps(SYLLABUS), encoding="utf-8")
    return str(path)


def test_plan_and_save(syllabus_file: str) -> None:
    runner = CliRunner()

    result = runner.invoke(main, [
        syllabus_file, "--start", "2025-01-06", "--end", "2025-01-27", "--days-per-week", "2",
    ])

    assert result.exit_code == 0, result.output
    assert "Processing complete" in result.output
    assert len(store.tasks) == 10
    assert store.goals[0].summary == "CMPT 310: Artificial Intelligence"


def test_no_save_leaves_store_empty(syllabus_file: str) -> None:
    result = CliRunner().invoke(main, [
        syllabus_file, "--start", "2025-01-06", "--end", "2025-01-27", "--no-save",
    ])

    assert result.exit_code == 0, result.output
    assert store.tasks == []


def test_window_too_long_exits_with_error(syllabus_file: str) -> None:
    result = CliRunner().invoke(main, [syllabus_file, "--start", "2025-01-06", "--end", "2026-06-01"])

    assert result.exit_code == 1
    assert store.tasks == []


def test_invalid_json_exits_with_error(tmp_path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    result = CliRunner().invoke(main, [str(path), "--start", "2025-01-06"])

    assert result.exit_code == 1


def test_unknown_timezone_is_a_usage_error(syllabus_file: str) -> None:
    result = CliRunner().invoke(main, [syllabus_file, "--timezone", "Mars/Olympus_Mons"])

    assert result.exit_code == 2
