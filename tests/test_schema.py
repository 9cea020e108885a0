"""Tests for input validation (validate_tasks / validate_blocks).

Test data loaded from: data/fixtures/scenarios/schema.json
"""

from __future__ import annotations

import pytest

from conftest import load_scenarios

_data = load_scenarios("schema")


class TestValidInput:

    def test_valid_tasks(self):
        from block_scheduler.schema import validate_tasks

        assert validate_tasks(_data["valid"]["tasks"]) == []

    def test_valid_blocks(self):
        """A fixed block may overlap a flexible one; only same-kind overlaps fail."""
        from block_scheduler.schema import validate_blocks

        assert validate_blocks(_data["valid"]["blocks"]) == []


class TestInvalidTasks:

    @pytest.mark.parametrize("spec", _data["invalid_tasks"], ids=lambda s: s["id"])
    def test_error_reported(self, spec):
        from block_scheduler.schema import validate_tasks

        errors = validate_tasks([spec["task"]])
        assert len(errors) == 1, errors
        assert spec["error_contains"] in errors[0]

    def test_duplicate_ids(self):
        from block_scheduler.schema import validate_tasks

        task = _data["valid"]["tasks"][0]
        errors = validate_tasks([task, dict(task)])
        assert errors == [f"Task {task['id']}: duplicate id"]

    def test_all_errors_collected(self):
        from block_scheduler.schema import validate_tasks

        tasks = [
            dict(spec["task"], id=f"t{i}")
            for i, spec in enumerate(_data["invalid_tasks"])
            if "id" in spec["task"]
        ]
        errors = validate_tasks(tasks)
        assert len(errors) == len(tasks)


class TestInvalidBlocks:

    @pytest.mark.parametrize("spec", _data["invalid_blocks"], ids=lambda s: s["id"])
    def test_error_reported(self, spec):
        from block_scheduler.schema import validate_blocks

        errors = validate_blocks([spec["block"]])
        assert len(errors) == 1, errors
        assert spec["error_contains"] in errors[0]

    def test_same_kind_overlap(self):
        from block_scheduler.schema import validate_blocks

        errors = validate_blocks(_data["overlapping_blocks"])
        assert errors == ["Weekday 3: overlapping flexible blocks f1 and f2"]
