# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os
from collections.abc import Callable

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app
os.environ["DATABASE_URL"] = "sqlite:///./test.db"

from timewise.database import get_db
from timewise.main import app
from timewise.models import User, UserRole
from timewise.models.base import Base

# Test database setup
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session) -> Callable[..., User]:
    """Factory creating users with a given role."""

    def _make_user(name: str, role: UserRole = UserRole.USER) -> User:
        user = User(
            name=name,
            email=f"{name.lower()}@example.com",
            role=role,
            is_active=True,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def test_user(make_user) -> User:
    """Create a regular test user."""
    return make_user("testuser")


@pytest.fixture
def other_user(make_user) -> User:
    """Create a second regular user."""
    return make_user("otheruser")


@pytest.fixture
def admin_user(make_user) -> User:
    """Create an admin user."""
    return make_user("admin", UserRole.ADMIN)


@pytest.fixture
def inspection_user(make_user) -> User:
    """Create an inspection user."""
    return make_user("inspector", UserRole.INSPECTION)


@pytest.fixture
def auth_headers() -> Callable[[User], dict[str, str]]:
    """Headers identifying a user to the API."""

    def _headers(user: User) -> dict[str, str]:
        return {"X-User-Id": str(user.id)}

    return _headers
