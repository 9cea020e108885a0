"""Urgency ordering: array-backed binary max-heap of pending tasks."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime

from block_scheduler.config import DEFAULT_CONFIG, PlannerConfig
from block_scheduler.types import Task

_SECONDS_PER_HOUR = 3600


def urgency_score(
    task: Task,
    now: datetime,
    config: PlannerConfig = DEFAULT_CONFIG,
) -> float:
    """weight(priority) / hours until deadline. Higher = placed first.

    A deadline at or before ``now`` scores -inf so the task sorts last.
    """
    hours = (task.deadline - now).total_seconds() / _SECONDS_PER_HOUR
    if hours <= 0:
        return -math.inf
    return config.weight_for(task.priority) / hours


@dataclass
class _HeapEntry:
    score: float
    task: Task


class UrgencyQueue:
    """Max-heap keyed by urgency score.

    Layout: parent of i is (i - 1) // 2, children are 2i + 1 and 2i + 2.
    Order among equal scores is unspecified.
    """

    def __init__(self) -> None:
        self._heap: list[_HeapEntry] = []

    def __len__(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def enqueue(self, task: Task, score: float) -> None:
        self._heap.append(_HeapEntry(score, task))
        self._sift_up(len(self._heap) - 1)

    def dequeue(self) -> Task | None:
        """Remove and return the highest-scoring task, or None when empty."""
        if not self._heap:
            return None
        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return top.task

    def peek(self) -> Task | None:
        return self._heap[0].task if self._heap else None

    def _sift_up(self, idx: int) -> None:
        heap = self._heap
        entry = heap[idx]
        while idx > 0:
            parent_idx = (idx - 1) // 2
            parent = heap[parent_idx]
            if entry.score <= parent.score:
                break
            heap[idx] = parent
            idx = parent_idx
        heap[idx] = entry

    def _sift_down(self, idx: int) -> None:
        heap = self._heap
        length = len(heap)
        entry = heap[idx]
        while True:
            left = 2 * idx + 1
            right = left + 1
            largest = idx
            largest_score = entry.score
            if left < length and heap[left].score > largest_score:
                largest = left
                largest_score = heap[left].score
            if right < length and heap[right].score > largest_score:
                largest = right
            if largest == idx:
                break
            heap[idx] = heap[largest]
            idx = largest
        heap[idx] = entry
