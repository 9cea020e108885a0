"""Interval arithmetic over minutes of day.

Occupied ranges (fixed blocks and pinned placements) are checked for
collisions. Flexible capacity is a list of mutable intervals that shrink from
the front as tasks are allocated. All intervals are half-open [start, end).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from block_scheduler.config import COLLISION, NO_CAPACITY
from block_scheduler.types import InfeasibleError, TimeBlock


@dataclass(frozen=True)
class OccupiedRange:
    """Time that no task may share: a fixed block or a pinned placement."""

    start: int
    end: int
    label: str


@dataclass
class CapacityInterval:
    """Remaining free time inside one flexible block. Mutable working state."""

    start: int
    end: int
    block_id: str

    @property
    def width(self) -> int:
        return self.end - self.start


def overlaps(a_start: int, a_end: int, b_start: int, b_end: int) -> bool:
    """[a_start, a_end) and [b_start, b_end) share at least one minute."""
    return a_start < b_end and a_end > b_start


def occupied_ranges(
    blocks: Iterable[TimeBlock], default_label: str
) -> list[OccupiedRange]:
    """One occupied range per fixed block, labelled with its title."""
    return [
        OccupiedRange(b.start_minutes, b.end_minutes, b.title or default_label)
        for b in blocks
        if b.is_fixed
    ]


def reserve(
    occupied: list[OccupiedRange],
    task_id: str,
    start: int,
    end: int,
) -> OccupiedRange:
    """Claim [start, end) for a pinned task. Mutates ``occupied``.

    Raises InfeasibleError(reason="collision") if any occupied range overlaps.
    """
    for rng in occupied:
        if overlaps(start, end, rng.start, rng.end):
            raise InfeasibleError(task_id, COLLISION)
    claimed = OccupiedRange(start, end, task_id)
    occupied.append(claimed)
    return claimed


def flexible_capacity(
    blocks: Iterable[TimeBlock], not_before: int | None = None
) -> list[CapacityInterval]:
    """Capacity intervals from the non-fixed blocks.

    With ``not_before`` set (planning for today), blocks that end at or before
    it are dropped and blocks that started earlier are clipped forward.
    """
    capacity: list[CapacityInterval] = []
    for block in blocks:
        if block.is_fixed:
            continue
        start = block.start_minutes
        end = block.end_minutes
        if not_before is not None:
            if end <= not_before:
                continue
            start = max(start, not_before)
        if start < end:
            capacity.append(CapacityInterval(start, end, block.id))
    return capacity


def subtract(
    capacity: list[CapacityInterval], start: int, end: int
) -> list[CapacityInterval]:
    """Remove [start, end) from every interval, splitting where needed.

    Returns a new list. Untouched intervals are carried over as-is; a covered
    interval leaves at most two non-empty pieces.
    """
    result: list[CapacityInterval] = []
    for iv in capacity:
        if not overlaps(start, end, iv.start, iv.end):
            result.append(iv)
            continue
        if start > iv.start:
            result.append(CapacityInterval(iv.start, start, iv.block_id))
        if end < iv.end:
            result.append(CapacityInterval(end, iv.end, iv.block_id))
    return result


def walk(
    capacity: list[CapacityInterval],
    task_id: str,
    duration: int,
    latest_finish: float | None = None,
) -> int:
    """Read-only: index of the first interval that can hold the task.

    The interval must be at least ``duration`` wide and, if ``latest_finish``
    is given, placing the task at the interval's start must finish at or
    before it. Does NOT mutate ``capacity``.

    Raises InfeasibleError(reason="no_capacity") when nothing fits.
    """
    for idx, iv in enumerate(capacity):
        if iv.width < duration:
            continue
        if latest_finish is not None and iv.start + duration > latest_finish:
            continue
        return idx
    raise InfeasibleError(task_id, NO_CAPACITY)


def allocate(
    capacity: list[CapacityInterval],
    task_id: str,
    duration: int,
    latest_finish: float | None = None,
) -> tuple[str, int, int]:
    """Walk + commit. Returns (block_id, start, finish).

    Consumes the front of the chosen interval so the remainder stays
    available. Raises InfeasibleError.
    """
    idx = walk(capacity, task_id, duration, latest_finish)
    iv = capacity[idx]
    start = iv.start
    iv.start += duration
    return iv.block_id, start, start + duration
