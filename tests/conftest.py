# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")

from lodge_chat.core.security import hash_password
from lodge_chat.db.session import Base
from lodge_chat.db.session import get_db as app_get_session
from lodge_chat.main import app as fastapi_app
from lodge_chat.models import Cabin, Lodge, User
from lodge_chat.services import CabinService, LodgeService, TokenService

TEST_DB_URL = "sqlite://"

# Random enough to clear the entropy threshold regardless of display name.
STRONG_PASSWORD = "Vq7#pL2!xR9@mZ4w"


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


def make_user(db: Session, display_name: str, password: str = STRONG_PASSWORD) -> User:
    """Persist a user directly, skipping the strength estimator."""
    user = User(display_name=display_name, password=hash_password(password))
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture()
def test_user(db_session: Session) -> User:
    """Create and return a persisted test user."""
    return make_user(db_session, "Ada")


@pytest.fixture()
def other_user(db_session: Session) -> User:
    """Create and return a second persisted user."""
    return make_user(db_session, "Grace")


@pytest.fixture()
def auth_token(db_session: Session, test_user: User) -> dict[str, str]:
    """Return authorization headers for the primary test user."""
    token = TokenService(db_session).issue(test_user)
    return {"Authorization": token.token}


@pytest.fixture()
def other_auth_token(db_session: Session, other_user: User) -> dict[str, str]:
    """Return authorization headers for the secondary test user."""
    token = TokenService(db_session).issue(other_user)
    return {"Authorization": token.token}


@pytest.fixture()
def private_lodge(db_session: Session, test_user: User) -> Lodge:
    """A private lodge founded by the primary test user."""
    return LodgeService(db_session).create_lodge(test_user, "Math", public=False)


@pytest.fixture()
def public_lodge(db_session: Session, test_user: User) -> Lodge:
    """A public lodge founded by the primary test user."""
    return LodgeService(db_session).create_lodge(
        test_user, "Open Lodge", description="Everyone welcome"
    )


@pytest.fixture()
def cabin(db_session: Session, test_user: User, public_lodge: Lodge) -> Cabin:
    """A regular cabin in the public lodge."""
    return CabinService(db_session).create_cabin(public_lodge, test_user, "general", topic="chat")


@pytest.fixture()
def admin_cabin(db_session: Session, test_user: User, public_lodge: Lodge) -> Cabin:
    """An admin-only cabin in the public lodge."""
    return CabinService(db_session).create_cabin(
        public_lodge, test_user, "staff", require_admin=True
    )
