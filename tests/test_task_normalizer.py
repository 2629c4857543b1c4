"""Tests for taskboard/normalization/task_normalizer.py."""
from __future__ import annotations

import copy
from datetime import datetime, timezone

import pytest

from taskboard.normalization import (
    CanonicalTask,
    TaskPriority,
    TaskStatus,
    normalize_task,
    normalize_tasks,
)
from taskboard.normalization.task_schema import UNASSIGNED_SENTINEL, UNTITLED_PLACEHOLDER


def _fixed_clock() -> datetime:
    return datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Single record
# ---------------------------------------------------------------------------


class TestNormalizeTaskDefaults:
    def test_empty_record(self) -> None:
        task = normalize_task({}, now=_fixed_clock)

        assert task == CanonicalTask(
            id="",
            title=UNTITLED_PLACEHOLDER,
            description="",
            status=TaskStatus.BACKLOG,
            priority=TaskPriority.MEDIUM,
            assignee=UNASSIGNED_SENTINEL,
            due_date=None,
            tags=[],
            normalized_at="2026-01-01T12:00:00+00:00",
        )

    def test_normalized_at_defaults_to_current_utc(self) -> None:
        before = datetime.now(timezone.utc)
        task = normalize_task({})
        after = datetime.now(timezone.utc)

        stamped = datetime.fromisoformat(task.normalized_at)
        assert before <= stamped <= after


class TestNormalizeTaskFields:
    def test_messy_legacy_record(self) -> None:
        raw = {
            "_id": "65f0c0ffee",
            "task_name": "Schema Design Review",
            "desc": "Review the new schema",
            "status": "2",
            "priority": 4,
            "owner": "Priya Sharma",
            "deadline": "2024-04-20",
            "tags": "design, review",
            "sys_id": "SYS-A042",
        }
        task = normalize_task(raw, now=_fixed_clock)

        assert task.id == "65f0c0ffee"
        assert task.title == "Schema Design Review"
        assert task.description == "Review the new schema"
        assert task.status is TaskStatus.IN_REVIEW
        assert task.priority is TaskPriority.CRITICAL
        assert task.assignee == "Priya Sharma"
        assert task.due_date == "2024-04-20T00:00:00+00:00"
        assert task.tags == ["design", "review"]

    def test_explicit_record_id_wins(self) -> None:
        task = normalize_task({"_id": "from-raw", "id": "other"}, record_id="upstream-7")
        assert task.id == "upstream-7"

    def test_id_key_used_when_no_underscore_id(self) -> None:
        assert normalize_task({"id": 12}).id == "12"

    def test_raw_record_not_mutated(self) -> None:
        raw = {"title": "T", "tags": ["a", "b"], "status": "wip"}
        snapshot = copy.deepcopy(raw)

        task = normalize_task(raw)

        assert raw == snapshot
        assert task.tags is not raw["tags"]

    @pytest.mark.parametrize(
        "raw",
        [
            {"status": object(), "priority": float("nan")},
            {"title": {"nested": True}, "tags": 7, "due": ["2024-01-01"]},
            {"due_date": "9999-12-31T23:59:59-05:00"},
            {"tags": [None, None], "assignee": 0},
            {"priority": float("inf"), "status": -1},
        ],
    )
    def test_never_raises_and_enums_stay_closed(self, raw) -> None:
        task = normalize_task(raw)

        assert task.status in set(TaskStatus)
        assert task.priority in set(TaskPriority)
        assert task.title
        assert task.assignee
        assert isinstance(task.tags, list)


class TestCanonicalTaskToDict:
    def test_wire_shape(self) -> None:
        task = normalize_task(
            {"_id": "1", "title": "T", "status": "done", "priority": "high", "due": "2024-04-15"},
            now=_fixed_clock,
        )
        assert task.to_dict() == {
            "id": "1",
            "title": "T",
            "description": "",
            "status": "DONE",
            "priority": "HIGH",
            "assignee": UNASSIGNED_SENTINEL,
            "dueDate": "2024-04-15T00:00:00+00:00",
            "tags": [],
            "normalizedAt": "2026-01-01T12:00:00+00:00",
        }


# ---------------------------------------------------------------------------
# Batch
# ---------------------------------------------------------------------------


class TestNormalizeTasks:
    def test_order_preserved_one_to_one(self) -> None:
        raws = [
            {"_id": "r1", "title": "first"},
            {"_id": "r2", "name": "second"},
            {"_id": "r3", "task_name": "third"},
        ]
        tasks = normalize_tasks(raws)

        assert [t.id for t in tasks] == ["r1", "r2", "r3"]
        assert [t.title for t in tasks] == ["first", "second", "third"]

    def test_empty_batch(self) -> None:
        assert normalize_tasks([]) == []

    def test_accepts_generator(self) -> None:
        tasks = normalize_tasks({"_id": str(i)} for i in range(3))
        assert [t.id for t in tasks] == ["0", "1", "2"]

    def test_shared_clock_stamp(self) -> None:
        tasks = normalize_tasks([{}, {}], now=_fixed_clock)
        assert {t.normalized_at for t in tasks} == {"2026-01-01T12:00:00+00:00"}

    def test_read_failure_propagates_unchanged(self) -> None:
        def _broken_cursor():
            yield {"_id": "ok"}
            raise ConnectionError("cursor lost")

        with pytest.raises(ConnectionError, match="cursor lost"):
            normalize_tasks(_broken_cursor())
