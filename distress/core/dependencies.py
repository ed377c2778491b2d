# distress/core/dependencies.py
from functools import lru_cache

from distress.db.session import SessionLocal
from distress.utils.storage import BlobStorage, build_storage


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@lru_cache
def get_storage() -> BlobStorage:
    return build_storage()
