"""Planner configuration: priority weights, labels and reason texts."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from block_scheduler.types import TaskPriority

# Reason codes carried by InfeasibleError
SLOT_PAST = "slot_past"
COLLISION = "collision"
DEADLINE_PASSED = "deadline_passed"
NO_CAPACITY = "no_capacity"
INVALID_SLOT = "invalid_slot"
INVALID_DEADLINE = "invalid_deadline"

_DEFAULT_WEIGHTS = MappingProxyType({
    TaskPriority.HIGH: 100,
    TaskPriority.MEDIUM: 50,
    TaskPriority.LOW: 25,
})

_DEFAULT_REASONS = MappingProxyType({
    SLOT_PAST: "fixed slot already past",
    COLLISION: "conflicts with another event or class",
    DEADLINE_PASSED: "deadline already passed",
    NO_CAPACITY: "does not fit available schedule",
    INVALID_SLOT: "fixed slot is not a valid time",
    INVALID_DEADLINE: "deadline cannot be compared with local time",
})


@dataclass(frozen=True)
class PlannerConfig:
    """Immutable planner settings. Set once at the boundary."""

    priority_weights: Mapping[TaskPriority, int] = field(
        default_factory=lambda: _DEFAULT_WEIGHTS
    )
    reasons: Mapping[str, str] = field(default_factory=lambda: _DEFAULT_REASONS)
    fixed_event_title: str = "fixed event"
    pinned_block_prefix: str = "fixed-slot-"

    def weight_for(self, priority: TaskPriority) -> int:
        return self.priority_weights[priority]

    def reason_text(self, code: str) -> str:
        """Human-readable text for a reason code; unknown codes pass through."""
        return self.reasons.get(code, code)

    def pinned_block_id(self, task_id: str) -> str:
        return self.pinned_block_prefix + task_id


DEFAULT_CONFIG = PlannerConfig()
