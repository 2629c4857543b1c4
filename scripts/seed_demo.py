#!/usr/bin/env python3
"""Seed demo data: messy legacy tasks plus one audit event.

Usage:
    python scripts/seed_demo.py          # uses DATABASE_URL from env / .env
    DATABASE_URL=... python scripts/seed_demo.py
"""
from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from taskboard.audit.audit_log import Actor, record_event
from taskboard.audit.events import ACTION_TASKS_SEEDED, TARGET_TASK
from taskboard.core.settings import get_settings
from taskboard.db.base import Base
from taskboard.db.repositories import LegacyTaskRepository
from taskboard.db.seed_data import LEGACY_TASK_SEED
from taskboard.normalization import normalize_tasks


def seed(session: Session) -> None:
    """Replace all legacy tasks with the sample set and audit the reseed."""
    settings = get_settings()
    rows = LegacyTaskRepository(session).replace_all(LEGACY_TASK_SEED)

    record_event(
        session,
        action=ACTION_TASKS_SEEDED,
        actor=Actor(id=settings.dev_actor_id, email=settings.dev_actor_email),
        target_type=TARGET_TASK,
        target_id="*",
        details={"count": len(rows), "source": "seed_demo"},
    )
    session.commit()

    print(f"Seeded {len(rows)} legacy tasks.")
    for task in normalize_tasks(row.as_raw() for row in rows):
        print(f"  {task.status:<12} {task.priority:<9} {task.title}")


def main() -> None:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    Base.metadata.create_all(engine)

    with Session(engine) as session:
        seed(session)


if __name__ == "__main__":
    main()
