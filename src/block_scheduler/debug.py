"""ASCII visualisation for development-time verification.

This module is dev-only and not imported by production code.
"""

from __future__ import annotations

from block_scheduler.clock import MINUTES_PER_DAY, parse_time
from block_scheduler.types import EventType, PlanResult

_CHARS_PER_DAY = 48
_MINUTES_PER_CHAR = 30
_LABEL_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def show_plan(result: PlanResult) -> str:
    """Print an ASCII day view of a plan.

    Legend: '.' = free or unknown, '#' = fixed class, 'A'-'Z' = scheduled
    task (by placement order). Each char = 30 minutes. Conflicts are listed
    beneath the timeline. Returns the string and also prints to stdout.
    """
    lines: list[str] = []

    header_hours = "".join(f"{h:02d}" if h % 3 == 0 else "  " for h in range(24))
    lines.append(header_hours)

    row = list("." * _CHARS_PER_DAY)

    def paint(start_label: str, end_label: str, char: str) -> None:
        start = parse_time(start_label)
        end = min(parse_time(end_label), MINUTES_PER_DAY)
        # A cell is painted if any of its minutes are covered
        first = start // _MINUTES_PER_CHAR
        last = -(-end // _MINUTES_PER_CHAR)
        for i in range(first, min(last, _CHARS_PER_DAY)):
            row[i] = char

    for event in result.events:
        if event.type is EventType.CLASS:
            paint(event.start_time, event.end_time, "#")

    task_labels: dict[str, str] = {}
    for placement in result.scheduled_tasks:
        label = _LABEL_CHARS[len(task_labels) % len(_LABEL_CHARS)]
        task_labels[placement.task_id] = label
        paint(placement.start_time, placement.end_time, label)

    lines.append("".join(row))

    if task_labels:
        legend_parts = [f"{v}={k}" for k, v in task_labels.items()]
        lines.append(f"\nLegend: . = free, # = fixed, {', '.join(legend_parts)}")

    if result.conflicts:
        lines.append("\nRejected:")
        for task in result.conflicts:
            lines.append(f"  {task.id} [{task.status.value}] {task.conflict_message}")

    output = "\n".join(lines)
    print(output)
    return output
