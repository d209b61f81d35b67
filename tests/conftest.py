"""
Shared fixtures.

The app reads its settings at import time, so the environment is pointed at
a throwaway SQLite file before anything from ``app`` is imported.
"""

import os
import tempfile

_TEST_DIR = tempfile.mkdtemp(prefix="devconnect_test_")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TEST_DIR, 'test.db')}"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"  # bcrypt minimum, keeps hashing fast
os.environ["ENVIRONMENT"] = "test"

import pytest
from fastapi.testclient import TestClient

from app.core.security import create_access_token
from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.main import app
from app.modules.user_management.schemas.user import UserCreate
from app.modules.user_management.services.user import register_user


@pytest.fixture(autouse=True)
def fresh_schema():
    """Every test starts from empty tables"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_user(db):
    """Register a user through the service and return it"""
    counter = {"n": 0}

    def _make_user(name=None, email=None, password="secret1"):
        counter["n"] += 1
        n = counter["n"]
        user_in = UserCreate(
            name=name or f"User {n}",
            email=email or f"user{n}@devconnect.io",
            password=password,
        )
        return register_user(db, user_in)

    return _make_user


def auth_headers(user_id: str) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


@pytest.fixture
def headers_for():
    return auth_headers
