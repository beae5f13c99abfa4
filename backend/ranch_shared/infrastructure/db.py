"""
Request-scoped database sessions.

Sessions come from whichever adapter DatabaseProvider was initialized with,
so the same dependency works on PostgreSQL, MySQL and SQLite.
"""

from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from ranch_shared.infrastructure.providers import DatabaseProvider
from ranch_shared.utils.exceptions import DatabaseError


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency for database sessions.

    Usage:
        @router.get("/animals")
        def list_animals(db: Session = Depends(get_db)):
            ...

    The session is automatically closed after the request completes.
    """
    db = DatabaseProvider.get_db().session()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_db_context() -> Generator[Session, None, None]:
    """
    Context manager for database sessions outside of FastAPI.

    Usage:
        with get_db_context() as db:
            db.scalars(select(Animal)).all()
    """
    db = DatabaseProvider.get_db().session()
    try:
        yield db
    finally:
        db.close()


def safe_commit(db: Session) -> None:
    """
    Commit with automatic rollback on failure.

    A lost or locked database surfaces as DatabaseError (500); every other
    failure, IntegrityError included, is re-raised unchanged after rolling back.
    """
    try:
        db.commit()
    except OperationalError as e:
        db.rollback()
        raise DatabaseError("commit", error=str(e.orig)) from e
    except Exception:
        db.rollback()
        raise
