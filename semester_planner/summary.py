# -*- coding: utf-8 -*-
from semester_planner.models import DistributionResult


def format_plan_summary(result: DistributionResult) -> str:
    """Format a distributed plan as a clean table.

    :param result: The DistributionResult to display.
    :return: Formatted table string with per-type totals and diagnostics.
    """
    window = result.window
    if not result.occurrences:
        lines = [f"🗓️ No occurrences between {window.start_date.isoformat()} and {window.end_date.isoformat()}."]
    else:
        lines = []
        lines.append(f"🗓️ SEMESTER PLAN {window.start_date.isoformat()} to {window.end_date.isoformat()}")
        lines.append("=" * 100)
        lines.append(f"{'#':<5} {'Date':<12} {'Day':<5} {'Type':<11} {'Title':<50} {'Min':>6}")
        lines.append("-" * 100)

        for idx, occurrence in enumerate(result.occurrences, 1):
            title = occurrence.label[:49] if len(occurrence.label) > 49 else occurrence.label
            lines.append(
                f"{idx:<5} {occurrence.date.isoformat():<12} {occurrence.date.strftime('%a'):<5} "
                f"{occurrence.event_type:<11} {title:<50} {occurrence.estimated_minutes:>6}"
            )

        lines.append("=" * 100)
        lines.append(f"Total: {len(result.occurrences)} occurrence(s)")

        # Summary by type
        by_type: dict[str, dict[str, int]] = {}
        for occurrence in result.occurrences:
            info = by_type.setdefault(occurrence.event_type, {"count": 0, "minutes": 0})
            info["count"] += 1
            info["minutes"] += occurrence.estimated_minutes

        lines.append("")
        lines.append("By Type:")
        for event_type in sorted(by_type):
            info = by_type[event_type]
            lines.append(f"  {event_type}: {info['count']} occurrence(s), {info['minutes']} min total")

    if result.diagnostics:
        lines.append("")
        lines.append("⚠️ Diagnostics:")
        for diagnostic in result.diagnostics:
            lines.append(f"  [{diagnostic.code}] {diagnostic.message}")

    return "\n".join(lines)
