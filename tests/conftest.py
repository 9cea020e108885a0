"""Shared test fixtures and data loading for block-scheduler.

All scenario data lives in data/fixtures/ as JSON files.  This module loads
that data and exposes helper functions + pytest fixtures for the tests.

Reference day: Mon 2025-01-06 (day_of_week 1, counting Sunday as 0).
Times in scenarios are "HH:MM" labels on the reference day.
"""

from __future__ import annotations

import json
from datetime import date, datetime, timedelta
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


_reference = _load_json(FIXTURES_DIR / "reference.json")


# ---------------------------------------------------------------------------
# Reference constants derived from reference.json
# ---------------------------------------------------------------------------
TARGET_DATE = date.fromisoformat(_reference["target_date"])
WEEKDAY = _reference["day_of_week"]
OTHER_WEEKDAY = _reference["other_day_of_week"]
MINUTES_PER_DAY = _reference["minutes_per_day"]


# ---------------------------------------------------------------------------
# Convenience helpers (importable by test modules)
# ---------------------------------------------------------------------------
def at(time_label: str, day_offset: int = 0) -> datetime:
    """Datetime on the reference day (shifted by ``day_offset`` days).

    >>> at("09:30")
    datetime(2025, 1, 6, 9, 30)
    """
    hours, minutes = (int(p) for p in time_label.split(":"))
    return datetime.combine(
        TARGET_DATE + timedelta(days=day_offset), datetime.min.time()
    ) + timedelta(hours=hours, minutes=minutes)


def make_task(
    task_id: str,
    duration: int = 30,
    priority: str = "medium",
    deadline: str = "18:00",
    deadline_day_offset: int = 0,
    status: str = "pending",
    fixed_slot: str | None = None,
):
    """Build a Task whose deadline is a time label on the reference day."""
    from block_scheduler.types import Task, TaskPriority, TaskStatus

    return Task(
        id=task_id,
        title=f"Task {task_id}",
        deadline=at(deadline, deadline_day_offset),
        duration_minutes=duration,
        priority=TaskPriority(priority),
        status=TaskStatus(status),
        fixed_slot=fixed_slot,
    )


def make_block(
    block_id: str,
    start: str,
    end: str,
    is_fixed: bool = False,
    title: str | None = None,
    weekday: int = WEEKDAY,
):
    """Build a TimeBlock on the reference weekday by default."""
    from block_scheduler.types import TimeBlock

    return TimeBlock(
        id=block_id,
        day_of_week=weekday,
        start_time=start,
        end_time=end,
        is_fixed=is_fixed,
        title=title,
    )


def tasks_from_spec(specs: list[dict]):
    return [
        make_task(
            s["id"],
            duration=s["duration_minutes"],
            priority=s.get("priority", "medium"),
            deadline=s["deadline"],
            deadline_day_offset=s.get("deadline_day_offset", 0),
            status=s.get("status", "pending"),
            fixed_slot=s.get("fixed_slot"),
        )
        for s in specs
    ]


def blocks_from_spec(specs: list[dict]):
    return [
        make_block(
            s["id"],
            s["start_time"],
            s["end_time"],
            is_fixed=s.get("is_fixed", False),
            title=s.get("title"),
            weekday=s.get("day_of_week", WEEKDAY),
        )
        for s in specs
    ]


# ---------------------------------------------------------------------------
# Scenario loader
# ---------------------------------------------------------------------------
def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def target_date() -> date:
    return TARGET_DATE


@pytest.fixture
def lecture_day_blocks():
    """Morning flexible block, late-morning lecture, afternoon flexible block."""
    return [
        make_block("b1", "08:00", "10:00"),
        make_block("b2", "10:00", "12:00", is_fixed=True, title="Lecture"),
        make_block("b3", "14:00", "18:00"),
    ]
