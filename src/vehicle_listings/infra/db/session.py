from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker

from vehicle_listings.infra.db.config import database_url


def build_engine(url: str | None = None) -> Engine:
    """
    Create the database engine.

    Called once at process start; the caller owns the engine and passes it
    (or a session factory built from it) to whatever needs the store.

    Connection Pool Configuration:
    - pool_size: Number of connections to keep open (base pool)
    - max_overflow: Additional connections allowed beyond pool_size
    - pool_pre_ping: Verify connection health before use
    - pool_recycle: Recycle connections after N seconds (prevent stale connections)

    SQLite URLs skip the pool sizing, which SQLite's pools do not accept.
    """
    url = url or database_url()

    if make_url(url).get_backend_name() == "sqlite":
        return create_engine(url, future=True)

    return create_engine(
        url,
        pool_size=10,           # Keep 10 connections in pool
        max_overflow=20,        # Allow 20 additional connections if needed (30 total max)
        pool_pre_ping=True,     # Verify connection health before checkout
        pool_recycle=3600,      # Recycle connections every hour
        future=True,
    )


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create the session factory bound to ``engine``."""
    return sessionmaker(
        bind=engine,
        class_=Session,
        expire_on_commit=False,
    )


@contextmanager
def session_scope(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    """Get a database session with automatic commit/rollback."""
    session = session_factory()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
