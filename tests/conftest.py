# tests/conftest.py

from __future__ import annotations

import os

# Settings are read at import time; keep hashing cheap and the key fixed.
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from pathlib import Path
from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.database import Base, get_db
from app.models.user import User
from app.schemas.user import UserCreate
from app.services.auth_service import AuthService
from app.services.task_service import TaskService
from main import app

PASSWORD = "Abcd1234"


@pytest.fixture()
def engine(tmp_path: Path) -> Iterator[Engine]:
    """File-backed SQLite database, fresh per test."""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'tasks.sqlite3'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db(session_factory: sessionmaker) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def auth_service(db: Session) -> AuthService:
    return AuthService(db)


@pytest.fixture()
def task_service(db: Session) -> TaskService:
    return TaskService(db)


@pytest.fixture()
def make_user(auth_service: AuthService) -> Callable[..., User]:
    """Register a user through the service and return the stored row."""

    def _make(email: str, full_name: str = "Test User") -> User:
        auth_service.register(UserCreate(full_name=full_name, email=email, password=PASSWORD))
        return auth_service.find_by_email(email)

    return _make


@pytest.fixture()
def alice(make_user) -> User:
    return make_user("alice@example.com", "Alice Martin")


@pytest.fixture()
def bob(make_user) -> User:
    return make_user("bob@example.com", "Bob Stone")


@pytest.fixture()
def client(session_factory: sessionmaker) -> Iterator[TestClient]:
    """API client whose requests run against the per-test database."""

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
