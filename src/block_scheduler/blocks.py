"""Chronological block list: one day's windows kept sorted by start time."""

from __future__ import annotations

import bisect
from typing import Iterable, Iterator

from block_scheduler.types import TimeBlock


class BlockList:
    """Blocks in ascending start order. Insert is O(n), reads are in order.

    Equal start times keep no particular order. Overlaps are not validated;
    schema.validate_blocks covers that at the boundary.
    """

    def __init__(self, blocks: Iterable[TimeBlock] = ()) -> None:
        self._blocks: list[TimeBlock] = []
        self._starts: list[int] = []
        for block in blocks:
            self.insert(block)

    def insert(self, block: TimeBlock) -> None:
        start = block.start_minutes
        idx = bisect.bisect_right(self._starts, start)
        self._starts.insert(idx, start)
        self._blocks.insert(idx, block)

    def to_sequence(self) -> list[TimeBlock]:
        """Ordered copy of the blocks."""
        return list(self._blocks)

    def fixed(self) -> list[TimeBlock]:
        return [b for b in self._blocks if b.is_fixed]

    def flexible(self) -> list[TimeBlock]:
        return [b for b in self._blocks if not b.is_fixed]

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[TimeBlock]:
        return iter(self._blocks)

    @classmethod
    def for_day(cls, blocks: Iterable[TimeBlock], weekday: int) -> BlockList:
        """Collect only the blocks that fall on ``weekday`` (0 = Sunday)."""
        return cls(b for b in blocks if b.day_of_week == weekday)
