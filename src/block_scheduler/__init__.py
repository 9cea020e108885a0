"""block-scheduler: place one day's deadline-bound tasks into time blocks."""

from block_scheduler.blocks import BlockList
from block_scheduler.config import DEFAULT_CONFIG, PlannerConfig
from block_scheduler.engine import apply_scheduling_results, generate_plan
from block_scheduler.loaders import load_plan_json
from block_scheduler.types import (
    CalendarEvent,
    EventType,
    InfeasibleError,
    PlanResult,
    ScheduledTask,
    Task,
    TaskPriority,
    TaskStatus,
    TimeBlock,
)
from block_scheduler.urgency import UrgencyQueue, urgency_score

__all__ = [
    "BlockList",
    "CalendarEvent",
    "DEFAULT_CONFIG",
    "EventType",
    "InfeasibleError",
    "PlanResult",
    "PlannerConfig",
    "ScheduledTask",
    "Task",
    "TaskPriority",
    "TaskStatus",
    "TimeBlock",
    "UrgencyQueue",
    "apply_scheduling_results",
    "generate_plan",
    "load_plan_json",
    "urgency_score",
]
