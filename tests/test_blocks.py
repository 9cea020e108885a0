"""Tests for the chronological BlockList."""

from __future__ import annotations

from conftest import OTHER_WEEKDAY, WEEKDAY, make_block


class TestBlockList:

    def test_insert_keeps_start_order(self):
        from block_scheduler.blocks import BlockList

        blocks = BlockList()
        for block in [
            make_block("late", "14:00", "18:00"),
            make_block("early", "08:00", "10:00"),
            make_block("mid", "10:00", "12:00", is_fixed=True),
        ]:
            blocks.insert(block)

        assert [b.id for b in blocks.to_sequence()] == ["early", "mid", "late"]
        assert len(blocks) == 3

    def test_to_sequence_is_a_copy(self):
        from block_scheduler.blocks import BlockList

        blocks = BlockList([make_block("a", "08:00", "09:00")])
        seq = blocks.to_sequence()
        seq.clear()
        assert len(blocks) == 1

    def test_equal_starts_are_all_kept(self):
        from block_scheduler.blocks import BlockList

        blocks = BlockList([
            make_block("x", "09:00", "10:00"),
            make_block("y", "09:00", "11:00", is_fixed=True),
            make_block("z", "07:00", "08:00"),
        ])
        ids = [b.id for b in blocks]
        assert ids[0] == "z"
        assert set(ids[1:]) == {"x", "y"}

    def test_fixed_and_flexible_partition(self):
        from block_scheduler.blocks import BlockList

        blocks = BlockList([
            make_block("f", "14:00", "15:00"),
            make_block("c", "10:00", "12:00", is_fixed=True),
            make_block("e", "08:00", "09:00"),
        ])
        assert [b.id for b in blocks.fixed()] == ["c"]
        assert [b.id for b in blocks.flexible()] == ["e", "f"]

    def test_for_day_filters_weekday(self):
        from block_scheduler.blocks import BlockList

        blocks = BlockList.for_day(
            [
                make_block("today", "08:00", "09:00", weekday=WEEKDAY),
                make_block("other", "07:00", "08:00", weekday=OTHER_WEEKDAY),
            ],
            WEEKDAY,
        )
        assert [b.id for b in blocks] == ["today"]
