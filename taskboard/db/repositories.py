from __future__ import annotations

from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from taskboard.db import models

ModelT = TypeVar("ModelT")


class BaseRepository(Generic[ModelT]):
    model: type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def create(self, **kwargs) -> ModelT:
        entity = self.model(**kwargs)
        self.db.add(entity)
        self.db.flush()
        return entity

    def get(self, entity_id: UUID) -> ModelT | None:
        return self.db.get(self.model, entity_id)

    def update(self, entity: ModelT, **kwargs) -> ModelT:
        for key, value in kwargs.items():
            setattr(entity, key, value)
        self.db.flush()
        return entity

    def delete(self, entity: ModelT) -> None:
        self.db.delete(entity)
        self.db.flush()


class LegacyTaskRepository(BaseRepository[models.LegacyTask]):
    model = models.LegacyTask

    def list_recent(self, limit: int = 50) -> list[models.LegacyTask]:
        stmt = (
            select(models.LegacyTask)
            .order_by(models.LegacyTask.created_at.desc())
            .limit(limit)
        )
        return list(self.db.execute(stmt).scalars().all())

    def update_payload(self, entity: models.LegacyTask, **fields: Any) -> models.LegacyTask:
        # Reassign so the JSON column is flagged dirty
        return self.update(entity, payload={**(entity.payload or {}), **fields})

    def replace_all(self, payloads: list[dict[str, Any]]) -> list[models.LegacyTask]:
        self.db.execute(delete(models.LegacyTask))
        return [self.create(payload=dict(payload)) for payload in payloads]


class AuditLogRepository(BaseRepository[models.AuditLog]):
    model = models.AuditLog

    def page(
        self,
        page: int = 1,
        page_size: int = 20,
        target_type: str | None = None,
    ) -> tuple[list[models.AuditLog], int]:
        stmt = select(models.AuditLog)
        count_stmt = select(func.count()).select_from(models.AuditLog)
        if target_type:
            stmt = stmt.where(models.AuditLog.target_type == target_type)
            count_stmt = count_stmt.where(models.AuditLog.target_type == target_type)

        stmt = (
            stmt.order_by(models.AuditLog.timestamp.desc())
            .offset((page - 1) * page_size)
            .limit(page_size)
        )
        events = list(self.db.execute(stmt).scalars().all())
        total = self.db.execute(count_stmt).scalar_one()
        return events, total
