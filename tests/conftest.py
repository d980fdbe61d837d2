"""Shared fixtures: a temporary SQLite database and an application client."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "place_discovery_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["PASSWORD_HASH_ROUNDS"] = "1000"
os.environ["APP_TIMEZONE"] = "UTC"

from discovery.config import get_settings  # noqa: E402

get_settings.cache_clear()

from fastapi.testclient import TestClient  # noqa: E402

from discovery.application.use_cases.users import (  # noqa: E402
    create_user,
    ensure_default_roles,
)
from discovery.domain.entities import ADMIN_ROLE_ALIAS  # noqa: E402
from discovery.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from main import create_app  # noqa: E402

DEFAULT_PASSWORD = "Secret123"


@pytest.fixture(autouse=True)
def reset_database():
    """Start every test from empty tables with the built-in roles."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    with SessionLocal() as session:
        ensure_default_roles(session)
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def db_session():
    with SessionLocal() as session:
        yield session


@pytest.fixture()
def client():
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture()
def make_user(db_session):
    """Return a factory creating visitors or, with ``admin=True``, administrators."""

    def _make_user(
        *,
        email: str,
        name: str = "Test User",
        password: str = DEFAULT_PASSWORD,
        admin: bool = False,
        is_active: bool = True,
        avatar: str | None = None,
    ):
        roles = {role.alias: role for role in ensure_default_roles(db_session)}
        return create_user(
            db_session,
            name=name,
            email=email,
            password=password,
            role_id=roles[ADMIN_ROLE_ALIAS].id if admin else None,
            avatar=avatar,
            is_active=is_active,
        )

    return _make_user


@pytest.fixture()
def login(client):
    """Return a helper that logs in and returns bearer headers.

    The session cookie is dropped so that each request only carries the
    headers a test passes explicitly.
    """

    def _login(email: str, password: str = DEFAULT_PASSWORD) -> dict[str, str]:
        response = client.post(
            "/api/auth/login", json={"email": email, "password": password}
        )
        assert response.status_code == 200, response.text
        client.cookies.clear()
        return {"Authorization": f"Bearer {response.json()['accessToken']}"}

    return _login


@pytest.fixture()
def admin_headers(make_user, login) -> dict[str, str]:
    make_user(email="admin@example.com", name="Admin", admin=True)
    return login("admin@example.com")
