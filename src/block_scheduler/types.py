"""Shared types: tasks, blocks, placements, plan results and InfeasibleError."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from block_scheduler.clock import parse_time


class TaskPriority(str, Enum):
    """Urgency weight by default: HIGH 100, MEDIUM 50, LOW 25 (see config)."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TaskStatus(str, Enum):
    """Task lifecycle. ``COMPLETED`` is set externally and never produced."""

    PENDING = "pending"
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CONFLICT = "conflict"
    EXPIRED = "expired"


class EventType(str, Enum):
    CLASS = "class"
    STUDY = "study"


@dataclass(frozen=True)
class Task:
    """A deadline-bound unit of work.

    ``fixed_slot`` is an optional "HH:MM" start requested by the user. Tasks
    carrying one are pinned: placed at exactly that time or rejected.
    """

    id: str
    title: str
    deadline: datetime
    duration_minutes: int
    priority: TaskPriority = TaskPriority.MEDIUM
    status: TaskStatus = TaskStatus.PENDING
    conflict_message: str | None = None
    assigned_block_id: str | None = None
    fixed_slot: str | None = None

    @property
    def is_pinned(self) -> bool:
        return self.fixed_slot is not None


@dataclass(frozen=True)
class TimeBlock:
    """A weekly time window. Fixed blocks are commitments, others are capacity.

    Half-open: [start_time, end_time). ``day_of_week`` is 0 = Sunday.
    """

    id: str
    day_of_week: int
    start_time: str
    end_time: str
    is_fixed: bool = False
    title: str | None = None

    @property
    def start_minutes(self) -> int:
        return parse_time(self.start_time)

    @property
    def end_minutes(self) -> int:
        return parse_time(self.end_time)


@dataclass(frozen=True)
class ScheduledTask:
    """A committed placement of one task on the target day."""

    task_id: str
    block_id: str
    start_time: str
    end_time: str
    task: Task

    @property
    def start_minutes(self) -> int:
        return parse_time(self.start_time)

    @property
    def end_minutes(self) -> int:
        return parse_time(self.end_time)


@dataclass(frozen=True)
class CalendarEvent:
    """Read-only display item. Never fed back into allocation."""

    id: str
    title: str
    type: EventType
    start_time: str
    end_time: str
    priority: TaskPriority | None = None
    task_id: str | None = None


@dataclass(frozen=True)
class PlanResult:
    """Output of one engine run.

    Invariants:
        - A task id appears in at most one of scheduled_tasks / conflicts
        - Every conflict has status CONFLICT or EXPIRED and a message
    """

    scheduled_tasks: tuple[ScheduledTask, ...] = ()
    conflicts: tuple[Task, ...] = ()
    events: tuple[CalendarEvent, ...] = ()

    def placement_for(self, task_id: str) -> ScheduledTask | None:
        """Return the placement for ``task_id``, if it was scheduled."""
        for placement in self.scheduled_tasks:
            if placement.task_id == task_id:
                return placement
        return None

    def conflict_for(self, task_id: str) -> Task | None:
        for task in self.conflicts:
            if task.id == task_id:
                return task
        return None


class InfeasibleError(Exception):
    """Raised when a task cannot be placed on the target day.

    ``reason`` is one of the codes in ``block_scheduler.config``:
    ``slot_past``, ``collision``, ``deadline_passed`` or ``no_capacity``.
    """

    def __init__(self, task_id: str, reason: str) -> None:
        self.task_id = task_id
        self.reason = reason
        super().__init__(
            f"Infeasible: task {task_id!r} cannot be placed (reason: {reason})"
        )
