import os

# Point the application at a throwaway database and keep the notifier out of API tests
os.environ.setdefault("APP_DATABASE__DATABASE_URL", "sqlite://")
os.environ.setdefault("APP_DATABASE__CREATE_TABLES", "false")
os.environ.setdefault("APP_NOTIFIER__ENABLED", "false")
os.environ.setdefault("APP_RATE_LIMIT", "10000/minute")

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.db.base import Base
from app.db.session import get_db
from app.main import app as fastapi_app
from app.models.user_model import User


engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(
    autocommit=False, autoflush=False, bind=engine, expire_on_commit=False
)


@pytest.fixture(scope="function")
def session_factory() -> Generator[sessionmaker, None, None]:
    """Fresh schema for each test; yields the session factory bound to it."""
    Base.metadata.create_all(bind=engine)
    yield TestingSessionLocal
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(session_factory) -> Generator[Session, None, None]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """Create a test client with database session override."""

    def override_get_db():
        yield db_session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    with TestClient(fastapi_app) as c:
        yield c
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def owner(db_session: Session) -> User:
    user = User(email="owner@example.com", username="owner")
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def auth_headers(owner: User) -> dict:
    return {"X-User-Email": owner.email}


@pytest.fixture
def other_headers(db_session: Session) -> dict:
    user = User(email="someone.else@example.com", username="other")
    db_session.add(user)
    db_session.commit()
    return {"X-User-Email": user.email}
