# distress/db/init_db.py
import logging

from distress.db.base import Base
from distress.db.session import engine


def init_db(bind=None):
    # Create all tables if not exist
    from distress import models  # noqa: F401  register mappers
    Base.metadata.create_all(bind=bind or engine)
    logging.info("Database tables ensured.")
