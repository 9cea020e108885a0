"""Allocation engine: place one day's tasks into its time blocks.

generate_plan composes the primitives in this package into a single pass:

    A. fixed blocks become occupied ranges
    B. pinned tasks are placed at their requested start, in input order
    C. flexible blocks, clipped to now and minus everything occupied, become capacity
    D. remaining pending tasks are placed first-fit in urgency order
    E. fixed blocks and placements are projected into display events

Every task ends up scheduled, in conflict, or expired. Nothing is raised for
a task that cannot be placed; the reason is attached to the returned record.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Iterable

from block_scheduler.blocks import BlockList
from block_scheduler.clock import (
    as_date,
    day_of_week,
    day_start,
    format_minutes,
    minute_of_day,
    parse_time,
)
from block_scheduler.config import (
    DEADLINE_PASSED,
    DEFAULT_CONFIG,
    INVALID_DEADLINE,
    INVALID_SLOT,
    SLOT_PAST,
    PlannerConfig,
)
from block_scheduler.events import project_events
from block_scheduler.occupancy import (
    allocate,
    flexible_capacity,
    occupied_ranges,
    reserve,
    subtract,
)
from block_scheduler.types import (
    InfeasibleError,
    PlanResult,
    ScheduledTask,
    Task,
    TaskStatus,
    TimeBlock,
)
from block_scheduler.urgency import UrgencyQueue, urgency_score

logger = logging.getLogger(__name__)

_SKIPPED_PINNED = (TaskStatus.COMPLETED, TaskStatus.EXPIRED)


def _placement(task: Task, block_id: str, start: int, finish: int) -> ScheduledTask:
    return ScheduledTask(
        task_id=task.id,
        block_id=block_id,
        start_time=format_minutes(start),
        end_time=format_minutes(finish),
        task=replace(
            task,
            status=TaskStatus.SCHEDULED,
            assigned_block_id=block_id,
            conflict_message=None,
        ),
    )


def _readable_blocks(blocks: Iterable[TimeBlock]) -> Iterable[TimeBlock]:
    """Yield blocks whose times parse; log and drop the rest."""
    for block in blocks:
        try:
            parse_time(block.start_time)
            parse_time(block.end_time)
        except (ValueError, AttributeError) as exc:
            logger.warning(f"Skipping block {block.id}: {exc}")
            continue
        yield block


def _rejection(task: Task, exc: InfeasibleError, config: PlannerConfig) -> Task:
    status = (
        TaskStatus.EXPIRED
        if exc.reason in (SLOT_PAST, DEADLINE_PASSED)
        else TaskStatus.CONFLICT
    )
    logger.debug(f"Task {task.id} rejected: {exc.reason}")
    return replace(
        task,
        status=status,
        conflict_message=config.reason_text(exc.reason),
    )


def generate_plan(
    tasks: Iterable[Task],
    blocks: Iterable[TimeBlock],
    target_date: date | datetime | None = None,
    now: datetime | None = None,
    config: PlannerConfig = DEFAULT_CONFIG,
) -> PlanResult:
    """Build the schedule for ``target_date``.

    Args:
        tasks: Task records in any order. Never mutated.
        blocks: Weekly time blocks; only those on the target weekday are used.
        target_date: Day to plan. Defaults to the date of ``now``.
        now: Evaluation instant (naive local time). Defaults to the clock.
        config: Weights, labels and reason texts.

    Returns:
        PlanResult with placements, rejected tasks and display events.
    """
    if now is None:
        now = datetime.now()
    day = as_date(target_date) if target_date is not None else now.date()
    is_today = day == now.date()
    now_minute = minute_of_day(now)
    tasks = list(tasks)

    day_list = BlockList.for_day(_readable_blocks(blocks), day_of_week(day))

    # Phase A
    occupied = occupied_ranges(day_list.fixed(), config.fixed_event_title)

    scheduled: list[ScheduledTask] = []
    conflicts: list[Task] = []
    handled: set[str] = set()

    # Phase B
    for task in tasks:
        if task.fixed_slot is None or task.status in _SKIPPED_PINNED:
            continue
        handled.add(task.id)
        try:
            start = parse_time(task.fixed_slot)
        except (ValueError, AttributeError):
            conflicts.append(
                _rejection(task, InfeasibleError(task.id, INVALID_SLOT), config)
            )
            continue
        finish = start + task.duration_minutes
        try:
            if is_today and finish <= now_minute:
                raise InfeasibleError(task.id, SLOT_PAST)
            reserve(occupied, task.id, start, finish)
        except InfeasibleError as exc:
            conflicts.append(_rejection(task, exc, config))
            continue
        placement = _placement(task, config.pinned_block_id(task.id), start, finish)
        logger.debug(
            f"Pinned task {task.id} at {placement.start_time}-{placement.end_time}"
        )
        scheduled.append(placement)

    # Phase C
    capacity = flexible_capacity(
        day_list.flexible(), not_before=now_minute if is_today else None
    )
    for rng in occupied:
        capacity = subtract(capacity, rng.start, rng.end)
    capacity.sort(key=lambda iv: iv.start)

    # Phase D
    queue = UrgencyQueue()
    for task in tasks:
        if task.status != TaskStatus.PENDING or task.id in handled:
            continue
        try:
            expired = task.deadline <= now
        except TypeError:
            # aware deadline against naive now, or the reverse
            conflicts.append(
                _rejection(task, InfeasibleError(task.id, INVALID_DEADLINE), config)
            )
            continue
        if expired:
            conflicts.append(
                _rejection(task, InfeasibleError(task.id, DEADLINE_PASSED), config)
            )
            continue
        queue.enqueue(task, urgency_score(task, now, config))

    midnight = day_start(day)
    while not queue.is_empty():
        task = queue.dequeue()
        latest_finish = (task.deadline - midnight).total_seconds() / 60
        try:
            block_id, start, finish = allocate(
                capacity, task.id, task.duration_minutes, latest_finish
            )
        except InfeasibleError as exc:
            conflicts.append(_rejection(task, exc, config))
            continue
        placement = _placement(task, block_id, start, finish)
        logger.debug(
            f"Placed task {task.id} in block {block_id} "
            f"at {placement.start_time}-{placement.end_time}"
        )
        scheduled.append(placement)

    # Phase E
    events = project_events(day_list, scheduled, config.fixed_event_title)

    logger.info(
        f"Plan for {day.isoformat()}: {len(scheduled)} scheduled, "
        f"{len(conflicts)} rejected, {len(capacity)} capacity intervals left"
    )
    return PlanResult(
        scheduled_tasks=tuple(scheduled),
        conflicts=tuple(conflicts),
        events=tuple(events),
    )


def apply_scheduling_results(tasks: Iterable[Task], result: PlanResult) -> list[Task]:
    """Merge a plan back into task records, preserving input order.

    Completed tasks are returned untouched. Scheduled tasks get their block id
    and lose any previous conflict message; rejected tasks take the status and
    message from the plan. Tasks absent from the plan are returned unchanged.
    """
    scheduled = {st.task_id: st for st in result.scheduled_tasks}
    rejected = {t.id: t for t in result.conflicts}

    merged: list[Task] = []
    for task in tasks:
        if task.status == TaskStatus.COMPLETED:
            merged.append(task)
        elif task.id in scheduled:
            merged.append(
                replace(
                    task,
                    status=TaskStatus.SCHEDULED,
                    assigned_block_id=scheduled[task.id].block_id,
                    conflict_message=None,
                )
            )
        elif task.id in rejected:
            conflict = rejected[task.id]
            merged.append(
                replace(
                    task,
                    status=conflict.status,
                    conflict_message=conflict.conflict_message,
                )
            )
        else:
            merged.append(task)
    return merged
