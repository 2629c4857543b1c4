"""Task normalizer — legacy document to ``CanonicalTask``.

``normalize_task`` runs every field resolver exactly once over one raw
record and stamps ``normalized_at``.  ``normalize_tasks`` is the batch
form used by the list endpoint: it preserves input order one-to-one and
lets any error raised while *reading* the input iterable propagate
unchanged, because that is a storage failure rather than a normalization
failure.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import datetime, timezone

from taskboard.normalization.field_resolvers import (
    RawRecord,
    resolve_assignee,
    resolve_description,
    resolve_due_date,
    resolve_priority,
    resolve_status,
    resolve_tags,
    resolve_title,
)
from taskboard.normalization.task_schema import CanonicalTask

Clock = Callable[[], datetime]

_IDENTITY_KEYS: tuple[str, ...] = ("_id", "id")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _resolve_id(raw: RawRecord, record_id: object | None) -> str:
    if record_id is not None:
        return str(record_id)
    for key in _IDENTITY_KEYS:
        value = raw.get(key)
        if value is not None:
            return str(value)
    return ""


def normalize_task(
    raw: RawRecord,
    record_id: object | None = None,
    *,
    now: Clock = _utc_now,
) -> CanonicalTask:
    """Return the canonical form of one legacy task document.

    Parameters
    ----------
    raw:
        Schema-free mapping as stored upstream.  Never mutated.
    record_id:
        Upstream identifier.  When omitted, ``raw["_id"]`` or ``raw["id"]``
        is used; a record with neither gets ``""``.
    now:
        Clock for the ``normalized_at`` stamp.
    """
    return CanonicalTask(
        id=_resolve_id(raw, record_id),
        title=resolve_title(raw),
        description=resolve_description(raw),
        status=resolve_status(raw),
        priority=resolve_priority(raw),
        assignee=resolve_assignee(raw),
        due_date=resolve_due_date(raw),
        tags=resolve_tags(raw),
        normalized_at=now().isoformat(),
    )


def normalize_tasks(raws: Iterable[RawRecord], *, now: Clock = _utc_now) -> list[CanonicalTask]:
    """Normalize every record in *raws*, preserving order."""
    return [normalize_task(raw, now=now) for raw in raws]
