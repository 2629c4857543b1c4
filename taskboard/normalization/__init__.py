"""Normalization package.

Reconciles schema-free legacy task documents into ``CanonicalTask`` values.
One resolver per logical field lives in ``field_resolvers``; the
orchestrator in ``task_normalizer`` runs all of them over a raw record.

All resolvers follow the same contract::

    def resolve_<field>(raw: Mapping[str, Any]) -> <canonical type>:
        ...

and never raise: missing or unrecognised values degrade to a fixed default.
"""
from taskboard.normalization.task_normalizer import normalize_task, normalize_tasks
from taskboard.normalization.task_schema import CanonicalTask, TaskPriority, TaskStatus

__all__ = [
    "CanonicalTask",
    "TaskPriority",
    "TaskStatus",
    "normalize_task",
    "normalize_tasks",
]
