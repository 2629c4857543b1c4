"""Audit action and target-type constants."""
from __future__ import annotations

ACTION_TASK_CREATED = "TASK_CREATED"
ACTION_TASK_STATUS_UPDATED = "TASK_STATUS_UPDATED"
ACTION_TASK_DELETED = "TASK_DELETED"
ACTION_TASKS_SEEDED = "TASKS_SEEDED"

VALID_ACTIONS: frozenset[str] = frozenset({
    ACTION_TASK_CREATED,
    ACTION_TASK_STATUS_UPDATED,
    ACTION_TASK_DELETED,
    ACTION_TASKS_SEEDED,
})

TARGET_USER = "User"
TARGET_TASK = "Task"
TARGET_LEAVE = "Leave"
TARGET_ATTENDANCE = "Attendance"
TARGET_AGENT_QUERY = "AgentQuery"

VALID_TARGET_TYPES: frozenset[str] = frozenset({
    TARGET_USER,
    TARGET_TASK,
    TARGET_LEAVE,
    TARGET_ATTENDANCE,
    TARGET_AGENT_QUERY,
})
