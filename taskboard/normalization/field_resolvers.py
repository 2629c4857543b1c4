"""Field resolvers for legacy task documents.

Each resolver reads one logical field out of a schema-free raw record and
returns its canonical form.  Legacy writers used several key names for the
same concept and encoded status / priority either as an English label or as
a small integer code, so every resolver consults a fixed alias order and,
where relevant, a static lookup table.

Rules shared by all resolvers
-----------------------------
1. Unknown keys in the raw record are ignored.
2. A value counts as present when it is not ``None`` and its string form is
   not blank.  Non-string scalars are stringified.
3. Nothing here raises.  Missing or unrecognised data degrades to the
   defaults declared in ``task_schema``.

Safety rule: raw field values are never logged.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any

from taskboard.normalization.task_schema import (
    DEFAULT_PRIORITY,
    DEFAULT_STATUS,
    UNASSIGNED_SENTINEL,
    UNTITLED_PLACEHOLDER,
    TaskPriority,
    TaskStatus,
)

logger = logging.getLogger(__name__)

RawRecord = Mapping[str, Any]

# ---------------------------------------------------------------------------
# Alias tables, highest priority first
# ---------------------------------------------------------------------------

TITLE_ALIASES: tuple[str, ...] = ("title", "name", "task_name")
DESCRIPTION_ALIASES: tuple[str, ...] = ("desc", "description")
ASSIGNEE_ALIASES: tuple[str, ...] = ("assignee", "owner", "member")
DUE_DATE_ALIASES: tuple[str, ...] = ("due", "due_date", "deadline")

# ---------------------------------------------------------------------------
# Status / priority tables
#
# Keys are lower-cased, trimmed.  A text label and its numeric code are
# interchangeable addresses for the same state.
# ---------------------------------------------------------------------------

STATUS_MAP: dict[str, TaskStatus] = {
    # BACKLOG
    "todo": TaskStatus.BACKLOG,
    "backlog": TaskStatus.BACKLOG,
    "open": TaskStatus.BACKLOG,
    "0": TaskStatus.BACKLOG,
    # IN_PROGRESS
    "in_progress": TaskStatus.IN_PROGRESS,
    "in progress": TaskStatus.IN_PROGRESS,
    "in-progress": TaskStatus.IN_PROGRESS,
    "active": TaskStatus.IN_PROGRESS,
    "wip": TaskStatus.IN_PROGRESS,
    "doing": TaskStatus.IN_PROGRESS,
    "1": TaskStatus.IN_PROGRESS,
    # IN_REVIEW
    "review": TaskStatus.IN_REVIEW,
    "pending": TaskStatus.IN_REVIEW,
    "in_review": TaskStatus.IN_REVIEW,
    "in-review": TaskStatus.IN_REVIEW,
    "2": TaskStatus.IN_REVIEW,
    # DONE
    "done": TaskStatus.DONE,
    "completed": TaskStatus.DONE,
    "closed": TaskStatus.DONE,
    "finished": TaskStatus.DONE,
    "3": TaskStatus.DONE,
}

PRIORITY_MAP: dict[str, TaskPriority] = {
    # LOW
    "low": TaskPriority.LOW,
    "minor": TaskPriority.LOW,
    "1": TaskPriority.LOW,
    # MEDIUM
    "medium": TaskPriority.MEDIUM,
    "mid": TaskPriority.MEDIUM,
    "normal": TaskPriority.MEDIUM,
    "2": TaskPriority.MEDIUM,
    # HIGH
    "high": TaskPriority.HIGH,
    "major": TaskPriority.HIGH,
    "3": TaskPriority.HIGH,
    # CRITICAL
    "critical": TaskPriority.CRITICAL,
    "blocker": TaskPriority.CRITICAL,
    "urgent": TaskPriority.CRITICAL,
    "4": TaskPriority.CRITICAL,
}

# Layouts tried after ISO-8601.  Slash dates are month-first.
_DATE_FORMATS: tuple[str, ...] = (
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M",
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%a, %d %b %Y %H:%M:%S %Z",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _as_text(value: Any) -> str:
    """Stringify *value*, rendering integral floats without a fraction."""
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _is_present(value: Any) -> bool:
    return value is not None and bool(_as_text(value).strip())


def first_present(raw: RawRecord, aliases: tuple[str, ...]) -> Any | None:
    """Return the first present value among *aliases*, or ``None``."""
    for key in aliases:
        value = raw.get(key)
        if _is_present(value):
            return value
    return None


def _lookup_key(value: Any) -> str:
    if value is None:
        return ""
    return _as_text(value).strip().lower()


def _to_utc_iso(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


def parse_date(text: str) -> datetime | None:
    """Parse *text* as ISO-8601 or one of the known layouts; ``None`` on failure."""
    candidate = text.strip()
    try:
        return datetime.fromisoformat(candidate)
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(candidate, fmt)
        except ValueError:
            continue
    return None


# ---------------------------------------------------------------------------
# Resolvers
# ---------------------------------------------------------------------------

def resolve_title(raw: RawRecord) -> str:
    value = first_present(raw, TITLE_ALIASES)
    return _as_text(value) if value is not None else UNTITLED_PLACEHOLDER


def resolve_description(raw: RawRecord) -> str:
    value = first_present(raw, DESCRIPTION_ALIASES)
    return _as_text(value) if value is not None else ""


def resolve_status(raw: RawRecord) -> TaskStatus:
    """Map a label (``"wip"``) or numeric code (``1``, ``"1"``) to ``TaskStatus``.

    Unknown or absent values fall back to ``BACKLOG``.
    """
    return STATUS_MAP.get(_lookup_key(raw.get("status")), DEFAULT_STATUS)


def resolve_priority(raw: RawRecord) -> TaskPriority:
    """Map a label (``"blocker"``) or numeric code (``4``) to ``TaskPriority``.

    Unknown or absent values fall back to ``MEDIUM``.
    """
    return PRIORITY_MAP.get(_lookup_key(raw.get("priority")), DEFAULT_PRIORITY)


def resolve_assignee(raw: RawRecord) -> str:
    value = first_present(raw, ASSIGNEE_ALIASES)
    return _as_text(value) if value is not None else UNASSIGNED_SENTINEL


def resolve_due_date(raw: RawRecord) -> str | None:
    """Return the due date as a UTC ISO-8601 string.

    Returns
    -------
    str | None
        ``None`` when no due-date alias is present.  When the value cannot
        be parsed, the raw value is passed through unchanged (stringified
        if it was not a string).  Never raises.
    """
    value = first_present(raw, DUE_DATE_ALIASES)
    if value is None:
        return None

    if isinstance(value, datetime):
        parsed: datetime | None = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    else:
        parsed = parse_date(_as_text(value))

    if parsed is not None:
        try:
            return _to_utc_iso(parsed)
        except (OverflowError, ValueError):
            # UTC shift pushed the value outside datetime's range
            pass

    text = _as_text(value)
    # SAFETY: do not log raw value
    logger.debug("field_resolvers: unparseable due date passed through (length=%d)", len(text))
    return text


def resolve_tags(raw: RawRecord) -> list[str]:
    """Return tags as a fresh ordered list of trimmed, non-empty strings.

    A list or tuple keeps its order.  A set or frozenset has none, so its
    items are sorted.  A mapping carries no tags.  Any other value is split
    on commas.  Items are stringified and trimmed, and ``None`` or blank
    items are dropped.
    """
    value = raw.get("tags")
    if isinstance(value, Mapping):
        return []
    if isinstance(value, (set, frozenset)):
        items: list[Any] = sorted(value, key=_as_text)
    elif isinstance(value, (list, tuple)):
        items = list(value)
    elif _is_present(value):
        items = _as_text(value).split(",")
    else:
        return []
    return [text for text in (_as_text(item).strip() for item in items if item is not None) if text]
