"""
Test configuration and fixtures.

Configuration is pointed at a throwaway file-backed SQLite database before the
application is imported; the schema is created and dropped around every test.
"""
import os
import shutil
import tempfile
import uuid
from datetime import datetime, timedelta

import pytest
from faker import Faker
from loguru import logger

_TMP_DIR = tempfile.mkdtemp(prefix="dept_events_tests_")
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_DIR}/test.db"
os.environ["JWT_SECRET"] = "test-jwt-secret-for-testing-only"
os.environ["LOG_DIR"] = os.path.join(_TMP_DIR, "logs")

from fastapi.testclient import TestClient

from dept_events.main import app
from dept_events.db.base import Base
from dept_events.db.session import SessionLocal, engine
from dept_events.core.dependencies import get_db
from dept_events.core.jwt import create_user_token
from dept_events.core.security import hash_password
from dept_events.models.enums import Department, EventStatus, UserRole
from dept_events.models.event import Event
from dept_events.models.user import User

fake = Faker()

PASSWORD = "password123"
# Hashed once; argon2 is slow
_PASSWORD_HASH = hash_password(PASSWORD)


@pytest.fixture(scope="session", autouse=True)
def _cleanup_tmp_dir():
    """Remove the throwaway database and log files after the run"""
    yield
    # Close the file sinks and pooled connections before deleting their files
    logger.remove()
    engine.dispose()
    shutil.rmtree(_TMP_DIR, ignore_errors=True)


@pytest.fixture
def db():
    """Fresh schema and a session for each test"""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    """Test client; every request gets its own session, as in production"""

    def override_get_db():
        session = SessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    def _make_user(role=UserRole.STUDENT, department=Department.CSE, email=None):
        user = User(
            name=fake.name(),
            email=email or f"{uuid.uuid4().hex[:12]}@msrit.edu",
            password_hash=_PASSWORD_HASH,
            role=role,
            department=department,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_event(db):
    def _make_event(organizer, capacity=None, status=EventStatus.APPROVED,
                    department=Department.CSE, date=None):
        event = Event(
            title=fake.catch_phrase(),
            description=fake.sentence(),
            organizer_id=organizer.id,
            department=department,
            date=date or datetime(2026, 12, 1, 10, 0) + timedelta(days=fake.random_int(0, 30)),
            venue=f"Seminar Hall {fake.random_int(1, 9)}",
            status=status,
            capacity=capacity,
            registrations_count=0,
        )
        db.add(event)
        db.commit()
        db.refresh(event)
        return event

    return _make_event


def auth_headers(user) -> dict:
    return {"Authorization": f"Bearer {create_user_token(user)}"}


@pytest.fixture
def headers():
    return auth_headers
