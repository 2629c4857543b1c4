"""Task board routes.

GET    /api/tasks               — newest legacy tasks, normalized
GET    /api/tasks/{id}          — one normalized task
POST   /api/tasks               — create task (stored in the legacy shape)
PATCH  /api/tasks/{id}          — update status (board drag & drop)
DELETE /api/tasks/{id}          — delete task
POST   /api/tasks/seed/legacy   — replace the store with sample legacy data

Rows are stored exactly as legacy writers would have stored them and are
reconciled by ``taskboard.normalization`` on the way out.
"""
from __future__ import annotations

import logging
from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.orm import Session

from taskboard.api.deps import get_actor, get_db
from taskboard.audit.audit_log import Actor, record_event
from taskboard.audit.events import (
    ACTION_TASK_CREATED,
    ACTION_TASK_DELETED,
    ACTION_TASK_STATUS_UPDATED,
    ACTION_TASKS_SEEDED,
    TARGET_TASK,
)
from taskboard.core.settings import get_settings
from taskboard.db.models import LegacyTask
from taskboard.db.repositories import LegacyTaskRepository
from taskboard.db.seed_data import LEGACY_TASK_SEED
from taskboard.normalization import TaskPriority, TaskStatus, normalize_task, normalize_tasks
from taskboard.normalization.task_schema import UNASSIGNED_SENTINEL

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


# ---------------------------------------------------------------------------
# Request bodies
# ---------------------------------------------------------------------------

class CreateTaskBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1, max_length=200)
    description: str = Field(default="", max_length=2000)
    status: TaskStatus = TaskStatus.BACKLOG
    priority: TaskPriority = TaskPriority.MEDIUM
    assignee: str = Field(default=UNASSIGNED_SENTINEL, max_length=100)
    due_date: datetime | None = Field(default=None, alias="dueDate")
    tags: list[str] = Field(default_factory=list)


class UpdateTaskStatusBody(BaseModel):
    status: TaskStatus


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _get_task_or_404(repo: LegacyTaskRepository, task_id: UUID) -> LegacyTask:
    task = repo.get(task_id)
    if task is None:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


def _serialize(task: LegacyTask) -> dict:
    return normalize_task(task.as_raw()).to_dict()


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@router.get("", summary="List normalized tasks")
def list_tasks(db: Session = Depends(get_db), _actor: Actor = Depends(get_actor)):
    repo = LegacyTaskRepository(db)
    rows = repo.list_recent(limit=get_settings().task_list_limit)
    tasks = [t.to_dict() for t in normalize_tasks(row.as_raw() for row in rows)]
    return {"success": True, "data": tasks, "meta": {"total": len(tasks)}}


@router.get("/{task_id}", summary="Get a single normalized task")
def get_task(task_id: UUID, db: Session = Depends(get_db), _actor: Actor = Depends(get_actor)):
    task = _get_task_or_404(LegacyTaskRepository(db), task_id)
    return {"success": True, "data": _serialize(task)}


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create a task")
def create_task(
    body: CreateTaskBody,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_actor),
):
    task = LegacyTaskRepository(db).create(
        payload={
            "title": body.title,
            "desc": body.description,
            "status": body.status.value.lower(),
            "priority": body.priority.value.lower(),
            "assignee": body.assignee,
            "due_date": body.due_date.isoformat() if body.due_date else None,
            "tags": list(body.tags),
        }
    )
    record_event(
        db,
        action=ACTION_TASK_CREATED,
        actor=actor,
        target_type=TARGET_TASK,
        target_id=str(task.id),
        details={"title": body.title},
    )
    logger.info("Task created: id=%s", task.id)
    return {"success": True, "data": _serialize(task)}


@router.patch("/{task_id}", summary="Update task status")
def update_task_status(
    task_id: UUID,
    body: UpdateTaskStatusBody,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_actor),
):
    repo = LegacyTaskRepository(db)
    task = _get_task_or_404(repo, task_id)

    previous = (task.payload or {}).get("status")
    repo.update_payload(task, status=body.status.value.lower())

    record_event(
        db,
        action=ACTION_TASK_STATUS_UPDATED,
        actor=actor,
        target_type=TARGET_TASK,
        target_id=str(task.id),
        details={"from": previous, "to": body.status.value},
    )
    return {"success": True, "data": _serialize(task)}


@router.delete("/{task_id}", summary="Delete a task")
def delete_task(task_id: UUID, db: Session = Depends(get_db), actor: Actor = Depends(get_actor)):
    repo = LegacyTaskRepository(db)
    task = _get_task_or_404(repo, task_id)
    repo.delete(task)

    record_event(
        db,
        action=ACTION_TASK_DELETED,
        actor=actor,
        target_type=TARGET_TASK,
        target_id=str(task_id),
    )
    logger.info("Task deleted: id=%s", task_id)
    return {"success": True, "data": {"id": str(task_id)}}


@router.post("/seed/legacy", summary="Seed sample legacy tasks (dev only)")
def seed_legacy_tasks(db: Session = Depends(get_db), actor: Actor = Depends(get_actor)):
    if not get_settings().is_development:
        raise HTTPException(status_code=403, detail="Seeding is only available in development")

    rows = LegacyTaskRepository(db).replace_all(LEGACY_TASK_SEED)
    record_event(
        db,
        action=ACTION_TASKS_SEEDED,
        actor=actor,
        target_type=TARGET_TASK,
        target_id="*",
        details={"count": len(rows)},
    )
    return {"success": True, "data": {"message": f"Seeded {len(rows)} legacy tasks"}}
