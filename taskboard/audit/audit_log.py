"""Append-only audit logger.

Provides ``record_event()`` to persist ``AuditLog`` rows and
``list_events()`` for the paginated audit trail.

Safety: ``details`` and the actor e-mail are never logged, only the
action, target type and actor id.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Session

from taskboard.audit.events import VALID_ACTIONS, VALID_TARGET_TYPES
from taskboard.db.models import AuditLog
from taskboard.db.repositories import AuditLogRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Actor:
    """The user on whose behalf an API write is made."""

    id: int
    email: str


def record_event(
    db_session: Session,
    action: str,
    actor: Actor,
    target_type: str,
    target_id: str,
    details: dict[str, Any] | None = None,
) -> AuditLog:
    """Create and persist an ``AuditLog`` row.

    Raises ``ValueError`` for invalid inputs.  Flushes but does **not**
    commit; the caller controls the transaction boundary.
    """
    if action not in VALID_ACTIONS:
        raise ValueError(
            f"Invalid action {action!r}; must be one of {sorted(VALID_ACTIONS)}"
        )

    if target_type not in VALID_TARGET_TYPES:
        raise ValueError(
            f"Invalid target_type {target_type!r}; "
            f"must be one of {sorted(VALID_TARGET_TYPES)}"
        )

    if not actor.email or not actor.email.strip():
        raise ValueError("actor email must be a non-empty string")

    event = AuditLogRepository(db_session).create(
        action=action,
        actor_id=actor.id,
        actor_email=actor.email,
        target_type=target_type,
        target_id=str(target_id),
        details=dict(details or {}),
    )

    logger.info("Audit event recorded: action=%s target=%s actor_id=%d", action, target_type, actor.id)
    return event


def list_events(
    db_session: Session,
    page: int = 1,
    page_size: int = 20,
    target_type: str | None = None,
) -> tuple[list[AuditLog], int]:
    """Return one page of ``AuditLog`` rows (newest first) and the total count."""
    if page < 1:
        raise ValueError("page must be >= 1")
    if page_size < 1:
        raise ValueError("page_size must be >= 1")
    if target_type is not None and target_type not in VALID_TARGET_TYPES:
        raise ValueError(
            f"Invalid target_type {target_type!r}; "
            f"must be one of {sorted(VALID_TARGET_TYPES)}"
        )
    return AuditLogRepository(db_session).page(page=page, page_size=page_size, target_type=target_type)
