"""
Pytest fixtures for the Interview Prep Tracker API tests.
Uses in-memory SQLite, mocks Redis, provides two signed-in users.
"""
import os
from datetime import datetime

import pytest
from unittest.mock import AsyncMock, patch
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Use in-memory SQLite for tests - set before config/session load
# Must override any .env DATABASE_URL
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["REDIS_URL"] = ""
os.environ["AI_API_KEY"] = ""

from prep_tracker.app.db.base import Base
from prep_tracker.app.db.session import enable_sqlite_foreign_keys
from prep_tracker.main import app
from prep_tracker.app.core.dependencies import get_db
from prep_tracker.app.core.security import get_password_hash
from prep_tracker.app.models.user import User
from prep_tracker.app.models.profile import Profile
from prep_tracker.app.services.auth_service import AuthService

# In-memory SQLite for tests - StaticPool ensures all sessions share same DB
engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Patch the session module so app uses our test engine
import prep_tracker.app.db.session as session_module
session_module.engine = engine
session_module.SessionLocal = TestingSessionLocal
# main.py imports engine directly; patch so startup uses our engine
import prep_tracker.main as main_module
main_module.engine = engine


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


def _make_user(db, email: str, full_name: str) -> User:
    user = User(
        email=email,
        full_name=full_name,
        hashed_password=get_password_hash("testpass123"),
        is_active=True,
        email_confirmed_at=datetime.utcnow(),
    )
    db.add(user)
    db.flush()
    db.add(Profile(user_id=user.id, full_name=full_name))
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture(scope="function")
def db_session():
    """Create tables and a fresh DB session per test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def test_user(db_session):
    """Confirmed user with a profile."""
    return _make_user(db_session, "test@example.com", "Test User")


@pytest.fixture
def other_user(db_session):
    """A second account, for ownership checks."""
    return _make_user(db_session, "other@example.com", "Other User")


@pytest.fixture
def auth_headers(db_session, test_user):
    """Bearer token bound to an open session for test_user."""
    token = AuthService.open_session(db_session, test_user)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_headers(db_session, other_user):
    token = AuthService.open_session(db_session, other_user)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def client(db_session, test_user):
    """TestClient with DB and test user pre-seeded."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def mock_redis():
    """Mock Redis cache: get returns None (cache miss), set/delete no-op. Skip connect."""
    with patch("prep_tracker.app.utils.cache.get", new_callable=AsyncMock, return_value=None), \
         patch("prep_tracker.app.utils.cache.set", new_callable=AsyncMock), \
         patch("prep_tracker.app.utils.cache.delete", new_callable=AsyncMock), \
         patch("prep_tracker.app.utils.cache.connect", new_callable=AsyncMock), \
         patch("prep_tracker.app.utils.cache.close", new_callable=AsyncMock):
        yield
