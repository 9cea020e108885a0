"""Input validation for raw task and block records."""

from __future__ import annotations

from datetime import datetime

from block_scheduler.clock import parse_time
from block_scheduler.types import TaskPriority, TaskStatus

_PRIORITIES = {p.value for p in TaskPriority}
_STATUSES = {s.value for s in TaskStatus}


def validate_blocks(blocks: list[dict]) -> list[str]:
    """Validate raw block dicts. Returns list of error messages (empty = valid).

    Checks:
    - Each block has a unique id
    - day_of_week is an int in 0-6
    - start_time / end_time parse as 'HH:MM' and start < end
    - Blocks of the same kind (fixed or flexible) on one day do not overlap
    """
    errors: list[str] = []
    seen: set[str] = set()
    parsed: dict[tuple[int, bool], list[tuple[int, int, str]]] = {}

    for i, block in enumerate(blocks):
        block_id = block.get("id")
        if not isinstance(block_id, str) or not block_id:
            errors.append(f"Block {i}: missing 'id'")
            continue
        if block_id in seen:
            errors.append(f"Block {block_id}: duplicate id")
            continue
        seen.add(block_id)

        weekday = block.get("day_of_week")
        if not isinstance(weekday, int) or isinstance(weekday, bool) or not 0 <= weekday <= 6:
            errors.append(f"Block {block_id}: invalid day_of_week {weekday!r} (must be 0-6)")
            continue

        try:
            start = parse_time(block["start_time"])
            end = parse_time(block["end_time"])
        except KeyError as e:
            errors.append(f"Block {block_id}: missing {e.args[0]!r}")
            continue
        except (ValueError, TypeError, AttributeError) as e:
            errors.append(f"Block {block_id}: invalid time - {e}")
            continue

        if start >= end:
            errors.append(
                f"Block {block_id}: start {block['start_time']} "
                f"is not before end {block['end_time']}"
            )
            continue

        is_fixed = block.get("is_fixed", False)
        if not isinstance(is_fixed, bool):
            errors.append(f"Block {block_id}: 'is_fixed' must be boolean")
            continue

        parsed.setdefault((weekday, is_fixed), []).append((start, end, block_id))

    for (weekday, is_fixed), periods in sorted(parsed.items()):
        periods.sort()
        kind = "fixed" if is_fixed else "flexible"
        for j in range(1, len(periods)):
            prev_end, prev_id = periods[j - 1][1], periods[j - 1][2]
            curr_start, curr_id = periods[j][0], periods[j][2]
            if curr_start < prev_end:
                errors.append(
                    f"Weekday {weekday}: overlapping {kind} blocks "
                    f"{prev_id} and {curr_id}"
                )

    return errors


def validate_tasks(tasks: list[dict]) -> list[str]:
    """Validate raw task dicts. Returns list of error messages.

    Checks:
    - Each task has a unique id and a title
    - deadline parses as an ISO datetime without tzinfo
    - duration_minutes is a positive int
    - priority and status are known values
    - fixed_slot, when present, parses as 'HH:MM'
    """
    errors: list[str] = []
    seen: set[str] = set()

    for i, task in enumerate(tasks):
        task_id = task.get("id")
        if not isinstance(task_id, str) or not task_id:
            errors.append(f"Task {i}: missing 'id'")
            continue
        if task_id in seen:
            errors.append(f"Task {task_id}: duplicate id")
            continue
        seen.add(task_id)

        if not isinstance(task.get("title"), str):
            errors.append(f"Task {task_id}: missing 'title'")

        try:
            deadline = datetime.fromisoformat(task["deadline"])
        except KeyError:
            errors.append(f"Task {task_id}: missing 'deadline'")
        except (ValueError, TypeError):
            errors.append(f"Task {task_id}: invalid deadline {task['deadline']!r}")
        else:
            if deadline.tzinfo is not None:
                errors.append(
                    f"Task {task_id}: deadline must be a naive local datetime"
                )

        duration = task.get("duration_minutes")
        if not isinstance(duration, int) or isinstance(duration, bool) or duration <= 0:
            errors.append(
                f"Task {task_id}: duration_minutes must be a positive integer, "
                f"got {duration!r}"
            )

        priority = task.get("priority", TaskPriority.MEDIUM.value)
        if priority not in _PRIORITIES:
            errors.append(f"Task {task_id}: unknown priority {priority!r}")

        status = task.get("status", TaskStatus.PENDING.value)
        if status not in _STATUSES:
            errors.append(f"Task {task_id}: unknown status {status!r}")

        fixed_slot = task.get("fixed_slot")
        if fixed_slot is not None:
            try:
                parse_time(fixed_slot)
            except (ValueError, TypeError, AttributeError) as e:
                errors.append(f"Task {task_id}: invalid fixed_slot - {e}")

    return errors
