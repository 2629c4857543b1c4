"""FastAPI dependency injection — database sessions and the acting user."""
from __future__ import annotations

from collections.abc import Generator

from fastapi import Header, HTTPException
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from taskboard.audit.audit_log import Actor
from taskboard.core.settings import get_settings

_engine = None
_SessionLocal = None


def _get_session_factory() -> sessionmaker:
    global _engine, _SessionLocal
    if _SessionLocal is None:
        _engine = create_engine(get_settings().database_url, pool_pre_ping=True)
        _SessionLocal = sessionmaker(bind=_engine, autocommit=False, autoflush=False)
    return _SessionLocal


def get_db() -> Generator[Session, None, None]:
    """Yield a SQLAlchemy session; commit on success, rollback on error."""
    factory = _get_session_factory()
    db = factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def get_actor(
    x_actor_id: int | None = Header(default=None),
    x_actor_email: str | None = Header(default=None),
) -> Actor:
    """Resolve the acting user from ``X-Actor-Id`` / ``X-Actor-Email``.

    Outside local/development environments both headers are required.
    In development a missing identity falls back to the configured admin.
    """
    settings = get_settings()
    if x_actor_id is not None and x_actor_email:
        return Actor(id=x_actor_id, email=x_actor_email)
    if settings.is_development:
        return Actor(id=settings.dev_actor_id, email=settings.dev_actor_email)
    raise HTTPException(status_code=401, detail="Unauthorized")
