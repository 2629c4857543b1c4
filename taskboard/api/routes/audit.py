"""Audit trail route — GET /api/audit-logs."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from taskboard.api.deps import get_actor, get_db
from taskboard.audit.audit_log import Actor, list_events
from taskboard.db.models import AuditLog

router = APIRouter(prefix="/api/audit-logs", tags=["audit"])


def _serialize_event(ev: AuditLog) -> dict:
    return {
        "id": str(ev.id),
        "action": ev.action,
        "actorId": ev.actor_id,
        "actorEmail": ev.actor_email,
        "targetType": ev.target_type,
        "targetId": ev.target_id,
        "details": ev.details,
        "timestamp": ev.timestamp.isoformat() if ev.timestamp else None,
    }


@router.get("", summary="Get paginated audit logs")
def get_audit_logs(
    page: int = Query(default=1, ge=1),
    page_size: int = Query(default=20, ge=1, le=100, alias="pageSize"),
    target_type: str | None = Query(default=None, alias="targetType"),
    db: Session = Depends(get_db),
    _actor: Actor = Depends(get_actor),
):
    try:
        events, total = list_events(db, page=page, page_size=page_size, target_type=target_type)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return {
        "success": True,
        "data": [_serialize_event(ev) for ev in events],
        "meta": {"total": total, "page": page, "pageSize": page_size},
    }
