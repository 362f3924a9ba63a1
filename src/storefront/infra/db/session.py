from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from storefront.infra.db.config import database_url

# Lazy initialization - only create engine/session when needed
_engine: Engine | None = None
_session_local: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    """
    Get or create the database engine (lazy initialization).

    SQLite (the on-device default) is opened with check_same_thread=False
    because storage work runs in worker threads. Server databases get a
    small pool with pre-ping; one device never needs more.
    """
    global _engine
    if _engine is None:
        url = database_url()
        options: dict[str, Any]
        if url.startswith("sqlite"):
            options = {"connect_args": {"check_same_thread": False}}
        else:
            options = {
                "pool_size": 2,
                "max_overflow": 2,
                "pool_pre_ping": True,
                "pool_recycle": 3600,
            }
        _engine = create_engine(url, future=True, **options)
    return _engine


def get_session_local() -> sessionmaker[Session]:
    """Get or create the session factory (lazy initialization)."""
    global _session_local
    if _session_local is None:
        _session_local = sessionmaker(
            bind=get_engine(),
            class_=Session,
            expire_on_commit=False,
        )
    return _session_local


@contextmanager
def get_session() -> Iterator[Session]:
    """Get a database session with automatic commit/rollback."""
    session = get_session_local()()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
