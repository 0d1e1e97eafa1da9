"""Error types for semester planning.

Standard error codes carried by diagnostics and errors:
- DROPPED_EVENT: an upstream event was malformed and skipped
- PAST_DATE_KEPT: a normalized deadline still falls on or before the planning start
- END_DATE_ROLLED: a stale semester end date was moved forward by whole years
- END_DATE_FALLBACK: the semester end date was replaced by start + 4 months
- DAYS_PER_WEEK_CLAMPED: the study-day preference was outside 1-7
- FOCUS_DURATION_RESET: a work block length below 1 minute was replaced by the default
- WINDOW_TOO_LONG: the planning window exceeds the configured maximum
"""

DROPPED_EVENT = "DROPPED_EVENT"
PAST_DATE_KEPT = "PAST_DATE_KEPT"
END_DATE_ROLLED = "END_DATE_ROLLED"
END_DATE_FALLBACK = "END_DATE_FALLBACK"
DAYS_PER_WEEK_CLAMPED = "DAYS_PER_WEEK_CLAMPED"
FOCUS_DURATION_RESET = "FOCUS_DURATION_RESET"
WINDOW_TOO_LONG = "WINDOW_TOO_LONG"


class SemesterPlannerError(ValueError):
    """Base class for semester planning errors.

    Attributes:
        code: Error code (e.g., "DROPPED_EVENT", "WINDOW_TOO_LONG")
        reason: Human readable explanation
    """

    def __init__(self, code: str, reason: str):
        self.code = code
        self.reason = reason
        super().__init__(f"{code}: {reason}")


class MalformedEventError(SemesterPlannerError):
    """Raised when an upstream event cannot be turned into a dated spec."""

    def __init__(self, reason: str):
        super().__init__(DROPPED_EVENT, reason)


class PlanningWindowTooLongError(SemesterPlannerError):
    """Raised by callers that refuse windows longer than the configured maximum."""

    def __init__(self, total_days: int, max_days: int):
        self.total_days = total_days
        self.max_days = max_days
        super().__init__(
            WINDOW_TOO_LONG,
            f"planning window spans {total_days} days, maximum is {max_days}",
        )
