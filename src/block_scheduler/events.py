"""Event projection: flatten fixed blocks and placements for display."""

from __future__ import annotations

from typing import Iterable

from block_scheduler.types import CalendarEvent, EventType, ScheduledTask, TimeBlock


def project_events(
    blocks: Iterable[TimeBlock],
    scheduled: Iterable[ScheduledTask],
    fixed_event_title: str,
) -> list[CalendarEvent]:
    """One CLASS event per fixed block, then one STUDY event per placement."""
    events = [
        CalendarEvent(
            id=f"fixed-{block.id}",
            title=block.title or fixed_event_title,
            type=EventType.CLASS,
            start_time=block.start_time,
            end_time=block.end_time,
        )
        for block in blocks
        if block.is_fixed
    ]
    for placement in scheduled:
        events.append(
            CalendarEvent(
                id=f"task-{placement.task_id}",
                title=placement.task.title,
                type=EventType.STUDY,
                start_time=placement.start_time,
                end_time=placement.end_time,
                priority=placement.task.priority,
                task_id=placement.task_id,
            )
        )
    return events
