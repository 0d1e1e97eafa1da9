"""
Data models for the semester planning command line.

This module contains the dataclass used to represent the syllabus extractor's
output as read from disk.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import typing as t


@dataclass
class ExtractedSyllabus:
    """Syllabus extractor output: course identity, semester end and raw events."""
    course_code: str = ""
    course_name: str = ""
    semester_end_date: str = ""     # as written in the syllabus, may lack a year
    events: list[dict[str, t.Any]] = field(default_factory=list)

    @property
    def course_label(self) -> str:
        return self.course_code or self.course_name or "Course"
