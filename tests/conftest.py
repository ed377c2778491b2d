import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from distress.core.dependencies import get_db, get_storage
from distress.core.errors import StorageError
from distress.db.init_db import init_db
from distress.db.session import make_engine
from distress.schemas.case import CaseCreate
from distress.schemas.user import UserCreate
from distress.services.case_service import CaseService
from distress.services.user_service import UserService
from distress.utils.storage import BlobStorage


class InMemoryStorage(BlobStorage):
    def __init__(self):
        self.blobs = {}
        self.fail_deletes = False

    def put(self, key, data, content_type=None):
        self.blobs[key] = bytes(data)

    def get(self, key):
        try:
            return self.blobs[key]
        except KeyError:
            raise StorageError(f"No blob {key}")

    def delete(self, key):
        if self.fail_deletes:
            raise StorageError(f"Failed to delete {key}")
        self.blobs.pop(key, None)

    def exists(self, key):
        return key in self.blobs


@pytest.fixture
def engine(tmp_path):
    # file-backed so worker threads share one database
    engine = make_engine(f"sqlite:///{tmp_path / 'distress-test.db'}")
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def client(session_factory, storage):
    from distress.main import app

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storage] = lambda: storage
    yield TestClient(app)
    app.dependency_overrides.clear()


def case_payload(**overrides):
    fields = {
        "sender_name": "John Doe",
        "subject": "Emergency Medical Assistance",
        "country_of_origin": "Kenya",
        "distressed_person_name": "Alice Smith",
        "nature_of_case": "Emergency",
        "case_details": "Needs immediate medical assistance",
    }
    fields.update(overrides)
    return CaseCreate(**fields)


@pytest.fixture
def make_case(db):
    def _make(**overrides):
        return CaseService(db).create_case(case_payload(**overrides))

    return _make


@pytest.fixture
def officer(db):
    return UserService(db).create_user(
        UserCreate(
            name="Grace Wanjiru",
            email="grace@example.org",
            password="s3cret-pass",
            role="officer",
            department="Consular",
        )
    )
