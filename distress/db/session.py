# distress/db/session.py
import logging
from contextlib import contextmanager
from datetime import datetime, timezone

from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from distress.core.config import settings
from distress.core.errors import Conflict, StoreError

logger = logging.getLogger(__name__)


def make_engine(url: str):
    connect_args = {}
    if url.startswith("sqlite"):
        # one session per request thread
        connect_args = {"check_same_thread": False, "timeout": 30}
    return create_engine(url, pool_pre_ping=True, connect_args=connect_args)


engine = make_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


def utcnow() -> datetime:
    # naive UTC, comparable with what DateTime columns load back
    return datetime.now(timezone.utc).replace(tzinfo=None)


@contextmanager
def atomic(db: Session, action: str):
    """
    Run a unit of work and commit it.

    Integrity violations become ``Conflict``, any other database failure
    becomes ``StoreError``; the session is rolled back in both cases.
    """
    try:
        yield db
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning("Integrity error while trying to %s: %s", action, e.orig)
        raise Conflict(f"Could not {action}: conflicting record") from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Database error while trying to %s", action)
        raise StoreError(f"Could not {action}: database error") from e
