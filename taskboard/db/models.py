from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Integer, JSON, String, func
from sqlalchemy.orm import Mapped, mapped_column

from taskboard.db.base import Base


class LegacyTask(Base):
    """Task document from the legacy board.

    ``payload`` is schema-free: writers over the years used different key
    names (``title`` / ``name`` / ``task_name`` …) and encodings.  Rows are
    read through ``taskboard.normalization`` before leaving the API.
    """

    __tablename__ = "legacy_tasks"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    payload: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now()
    )

    def as_raw(self) -> dict[str, Any]:
        """Return a copy of the payload stamped with this row's identity."""
        return {**(self.payload or {}), "_id": str(self.id)}


class AuditLog(Base):
    """Append-only record of every write made through the API."""

    __tablename__ = "audit_logs"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    action: Mapped[str] = mapped_column(String(64), nullable=False)
    actor_id: Mapped[int] = mapped_column(Integer, nullable=False)
    actor_email: Mapped[str] = mapped_column(String(255), nullable=False)
    target_type: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    target_id: Mapped[str] = mapped_column(String(128), nullable=False)
    details: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), index=True,
    )
