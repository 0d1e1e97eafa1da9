"""
Semester calendar distribution.

Merges weekly class sessions, one-time deadlines and study work blocks into
one date-sorted plan. This is the single entry point every caller uses:
the MCP tools, the REST service and the CLI.
"""
from __future__ import annotations

import typing as t
from datetime import date

from loguru import logger

from semester_planner.allocation import (
    allocate_study_days,
    clamp_days_per_week,
    work_block_occurrences,
)
from semester_planner.config import DEFAULT_DAYS_PER_WEEK, DEFAULT_FOCUS_DURATION, MAX_WINDOW_DAYS
from semester_planner.dates import (
    correct_end_date,
    normalize_event_date,
    normalize_month_day,
    parse_weekday,
    resolve_event_date,
)
from semester_planner.errors import (
    DAYS_PER_WEEK_CLAMPED,
    DROPPED_EVENT,
    FOCUS_DURATION_RESET,
    PAST_DATE_KEPT,
    MalformedEventError,
    PlanningWindowTooLongError,
)
from semester_planner.expansion import session_occurrences
from semester_planner.models import (
    ONE_TIME_KINDS,
    RECURRING_KINDS,
    Diagnostic,
    DistributionResult,
    OneTimeEventSpec,
    PlanningWindow,
    PlanPreferences,
    RecurringEventSpec,
    ScheduledOccurrence,
)

# Estimated minutes per one-time event, anything else gets the default
DEADLINE_MINUTES: dict[str, int] = {
    "final": 180,
    "midterm": 120,
}
DEFAULT_DEADLINE_MINUTES = 60


def _first_present(record: dict[str, t.Any], *keys: str) -> t.Any:
    for key in keys:
        value = record.get(key)
        if value not in (None, ""):
            return value
    return None


def _text(value: t.Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _coerce_event(
        record: dict[str, t.Any],
        today: date,
) -> t.Union[RecurringEventSpec, OneTimeEventSpec]:
    """Validate one upstream record and build its typed spec.

    :raises MalformedEventError: If the record cannot be used.
    """
    if not isinstance(record, dict):
        raise MalformedEventError(f"event is not an object: {record!r}")

    kind = _text(record.get("type")).lower()
    title = _text(record.get("title"))
    description = _text(record.get("description"))

    if kind in RECURRING_KINDS:
        weekday_token = _first_present(record, "dayOfWeek", "day_of_week", "weekday")
        if weekday_token is None:
            raise MalformedEventError(f"{kind} {title!r} has no day of week")
        return RecurringEventSpec(
            kind=kind,
            weekday=parse_weekday(weekday_token),
            label=title,
            time_of_day=_text(record.get("time")),
            description=description,
        )

    if kind in ONE_TIME_KINDS:
        raw_date = _first_present(record, "date", "due", "due_date")
        if raw_date is None:
            raise MalformedEventError(f"{kind} {title!r} has no date")
        resolved, year_known = resolve_event_date(raw_date, today)
        return OneTimeEventSpec(
            kind=kind,
            date=resolved,
            label=title or kind.capitalize(),
            description=description,
            due_time=_text(_first_present(record, "dueTime", "due_time")),
            year_known=year_known,
        )

    raise MalformedEventError(f"unknown event type {record.get('type')!r}")


def coerce_events(
        records: t.Iterable[dict[str, t.Any]],
        today: date,
) -> tuple[list[RecurringEventSpec], list[OneTimeEventSpec], list[Diagnostic]]:
    """Turn loosely-typed extractor output into typed event specs.

    Malformed records are dropped with a diagnostic; one bad syllabus line
    never aborts the whole request.

    :param records: Event dicts as produced by the syllabus extractor.
    :param today: Reference date for yearless dates.
    :return: Recurring specs, one-time specs and diagnostics, input order kept.
    """
    recurring: list[RecurringEventSpec] = []
    one_time: list[OneTimeEventSpec] = []
    diagnostics: list[Diagnostic] = []

    for record in records:
        try:
            spec = _coerce_event(record, today)
        except MalformedEventError as e:
            logger.warning(f"Dropping event: {e.reason}")
            diagnostics.append(Diagnostic(
                code=DROPPED_EVENT,
                message=e.reason,
                source=record if isinstance(record, dict) else None,
            ))
            continue

        if isinstance(spec, RecurringEventSpec):
            recurring.append(spec)
        else:
            one_time.append(spec)

    return recurring, one_time, diagnostics


def correct_window(
        start_date: date,
        end_date: t.Optional[date],
) -> tuple[PlanningWindow, list[Diagnostic]]:
    """Build a planning window whose end lies strictly after its start."""
    corrected, diagnostic = correct_end_date(start_date, end_date)
    if diagnostic is None:
        return PlanningWindow(start_date=start_date, end_date=corrected), []
    logger.info(f"Adjusted semester end date: {diagnostic.message}")
    return PlanningWindow(start_date=start_date, end_date=corrected), [diagnostic]


def validate_window_length(window: PlanningWindow, max_days: int = MAX_WINDOW_DAYS) -> PlanningWindow:
    """Reject windows longer than ``max_days``.

    :raises PlanningWindowTooLongError: If the window is too long.
    """
    if window.total_days > max_days:
        raise PlanningWindowTooLongError(window.total_days, max_days)
    return window


def _deadline_date(spec: OneTimeEventSpec, start_date: date) -> date:
    """Place a one-time event relative to the planning start.

    Dates written without a year get the month/day rule against
    ``start_date``; full dates only when they are stale.
    """
    if not spec.year_known:
        return normalize_month_day(spec.date.month, spec.date.day, start_date)
    return normalize_event_date(spec.date, start_date)


def deadline_occurrence(spec: OneTimeEventSpec, day: date) -> ScheduledOccurrence:
    """Build the occurrence for a one-time event on its normalized date."""
    if spec.due_time:
        description = f"Due: {spec.due_time}. {spec.description}".strip()
    else:
        description = spec.description
    return ScheduledOccurrence(
        date=day,
        label=spec.label,
        description=description,
        estimated_minutes=DEADLINE_MINUTES.get(spec.kind, DEFAULT_DEADLINE_MINUTES),
        event_type=spec.kind,
        is_prep=False,
    )


def distribute(
        recurring: t.Sequence[RecurringEventSpec],
        one_time: t.Sequence[OneTimeEventSpec],
        start_date: date,
        end_date: t.Optional[date],
        preferences: t.Optional[PlanPreferences] = None,
) -> DistributionResult:
    """Distribute typed event specs across the planning window.

    Steps, in order:
    1. Correct the window end date.
    2. Expand recurring specs and collect the class days.
    3. Normalize one-time dates.
    4. Allocate study days on the remaining days.
    5. Merge everything and stable-sort by date.

    Never raises for bad input; every skip or correction is reported in
    ``DistributionResult.diagnostics``.
    """
    preferences = preferences or PlanPreferences()
    window, diagnostics = correct_window(start_date, end_date)
    logger.info(f"Semester: {window.start_date.isoformat()} to {window.end_date.isoformat()}")

    class_occurrences: list[ScheduledOccurrence] = []
    for spec in recurring:
        class_occurrences.extend(session_occurrences(spec, window, preferences.course_label))
    class_days = {o.date for o in class_occurrences}

    deadline_occurrences: list[ScheduledOccurrence] = []
    for spec in one_time:
        try:
            day = _deadline_date(spec, window.start_date)
        except MalformedEventError as e:
            logger.warning(f"Dropping {spec.kind} {spec.label!r}: {e.reason}")
            diagnostics.append(Diagnostic(code=DROPPED_EVENT, message=e.reason, source={"label": spec.label}))
            continue
        if day <= window.start_date:
            diagnostics.append(Diagnostic(
                code=PAST_DATE_KEPT,
                message=f"{spec.kind} {spec.label!r} on {day.isoformat()} is not after {window.start_date.isoformat()}",
                source={"label": spec.label},
            ))
        deadline_occurrences.append(deadline_occurrence(spec, day))

    days_per_week = clamp_days_per_week(preferences.days_per_week)
    if days_per_week != preferences.days_per_week:
        diagnostics.append(Diagnostic(
            code=DAYS_PER_WEEK_CLAMPED,
            message=f"days per week {preferences.days_per_week} clamped to {days_per_week}",
        ))
    focus_duration = preferences.focus_duration
    if focus_duration < 1:
        focus_duration = DEFAULT_FOCUS_DURATION
        diagnostics.append(Diagnostic(
            code=FOCUS_DURATION_RESET,
            message=f"focus duration {preferences.focus_duration} min replaced by {focus_duration} min",
        ))

    allocations = allocate_study_days(window, class_days, days_per_week)
    study_occurrences = work_block_occurrences(allocations, focus_duration, preferences.course_label)

    logger.info(
        f"{len(study_occurrences)} study dates ({days_per_week} days/week, "
        f"excluding {len(class_days)} class days)"
    )

    occurrences = sorted(
        class_occurrences + deadline_occurrences + study_occurrences,
        key=lambda o: o.date,
    )
    logger.info(f"Generated {len(occurrences)} total occurrences")

    return DistributionResult(
        window=window,
        occurrences=occurrences,
        allocations=allocations,
        diagnostics=diagnostics,
    )


def plan_semester(
        events: t.Iterable[dict[str, t.Any]],
        start_date: date,
        end_date: t.Optional[date] = None,
        days_per_week: t.Any = DEFAULT_DAYS_PER_WEEK,
        focus_duration: t.Any = DEFAULT_FOCUS_DURATION,
        course_label: str = "",
) -> DistributionResult:
    """Plan a semester straight from extractor output.

    :param events: Loosely-typed event dicts from the syllabus extractor.
    :param start_date: The planning "today", already resolved to the user's timezone.
    :param end_date: Semester end date, corrected if stale or missing.
    :param days_per_week: Preferred study days per week.
    :param focus_duration: Minutes per work block.
    :param course_label: Course code or name used in titles.
    :return: The merged plan with diagnostics from every step.
    """
    recurring, one_time, diagnostics = coerce_events(events, start_date)
    preferences = PlanPreferences(
        days_per_week=_int_or_default(days_per_week, DEFAULT_DAYS_PER_WEEK),
        focus_duration=_int_or_default(focus_duration, DEFAULT_FOCUS_DURATION),
        course_label=course_label or "Course",
    )
    result = distribute(recurring, one_time, start_date, end_date, preferences)
    result.diagnostics[:0] = diagnostics
    return result


def _int_or_default(value: t.Any, default: int) -> int:
    """Read a numeric preference, falling back only when missing or not a number."""
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default
