"""Data loading utilities for task and block definitions."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

from block_scheduler.schema import validate_blocks, validate_tasks
from block_scheduler.types import Task, TaskPriority, TaskStatus, TimeBlock

logger = logging.getLogger(__name__)


def task_from_dict(data: dict) -> Task:
    """Build a Task from an already validated dict."""
    return Task(
        id=data["id"],
        title=data["title"],
        deadline=datetime.fromisoformat(data["deadline"]),
        duration_minutes=data["duration_minutes"],
        priority=TaskPriority(data.get("priority", TaskPriority.MEDIUM.value)),
        status=TaskStatus(data.get("status", TaskStatus.PENDING.value)),
        conflict_message=data.get("conflict_message"),
        assigned_block_id=data.get("assigned_block_id"),
        fixed_slot=data.get("fixed_slot"),
    )


def block_from_dict(data: dict) -> TimeBlock:
    """Build a TimeBlock from an already validated dict."""
    return TimeBlock(
        id=data["id"],
        day_of_week=data["day_of_week"],
        start_time=data["start_time"],
        end_time=data["end_time"],
        is_fixed=data.get("is_fixed", False),
        title=data.get("title"),
    )


def load_plan_json(path: str | Path) -> tuple[list[Task], list[TimeBlock]]:
    """Load tasks and blocks from a JSON file.

    The JSON file must have the format:
    {
        "tasks": [
            {"id": "t1", "title": "...", "deadline": "2025-01-06T18:00",
             "duration_minutes": 30, "priority": "high", "fixed_slot": "08:00"},
            ...
        ],
        "blocks": [
            {"id": "b1", "day_of_week": 1, "start_time": "08:00",
             "end_time": "10:00", "is_fixed": false},
            ...
        ]
    }

    Raises ValueError if validation fails.
    """
    path = Path(path)
    with open(path) as f:
        data = json.load(f)

    tasks_raw = data.get("tasks", [])
    blocks_raw = data.get("blocks", [])

    errors = validate_tasks(tasks_raw)
    errors.extend(validate_blocks(blocks_raw))
    if errors:
        raise ValueError(
            f"Validation errors in {path.name}:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )

    tasks = [task_from_dict(t) for t in tasks_raw]
    blocks = [block_from_dict(b) for b in blocks_raw]
    logger.info(f"Loaded {len(tasks)} tasks and {len(blocks)} blocks from {path.name}")
    return tasks, blocks
