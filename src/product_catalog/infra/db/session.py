"""
SQLAlchemy engine and unit-of-work sessions.

The engine and session factory are built on first use, so importing the
package never requires DATABASE_URL. A unit of work commits when its block
exits cleanly and rolls back otherwise. The HTTP layer opens one per request
with function scope, which makes the commit part of handling the request:
a failed commit surfaces as an error response instead of after a success
response has already been sent.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from product_catalog.infra.db.config import database_url

logger = logging.getLogger(__name__)

_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def engine() -> Engine:
    """Shared engine with a bounded, health-checked connection pool."""
    global _engine
    if _engine is None:
        _engine = create_engine(
            database_url(),
            pool_size=10,
            max_overflow=20,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
    return _engine


def session_factory() -> sessionmaker[Session]:
    global _session_factory
    if _session_factory is None:
        # Returned records are read after commit; keep loaded attributes.
        _session_factory = sessionmaker(bind=engine(), expire_on_commit=False)
    return _session_factory


@contextmanager
def unit_of_work() -> Iterator[Session]:
    """
    Yield a session whose changes are committed when the block exits cleanly.

    An exception raised inside the block, or by the commit itself, rolls the
    session back and propagates unchanged.

    Yields:
        Session: SQLAlchemy session owned by this unit of work
    """
    session = session_factory()()

    try:
        yield session
        session.commit()
    except Exception:
        logger.debug("Rolling back unit of work")
        session.rollback()
        raise
    finally:
        session.close()
