"""
Shared fixtures for the Care Circle API tests.

The app runs against a throwaway SQLite database and verifies access tokens locally
with the test JWT secret, so no Supabase project or PostgreSQL server is needed.
"""
import os

os.environ["ENVIRONMENT"] = "test"
os.environ["SUPABASE_URL"] = "https://test-project.supabase.co"
os.environ["SUPABASE_ANON_KEY"] = "test-anon-key"
os.environ["SUPABASE_JWT_SECRET"] = "test-jwt-secret-for-care-circle"
os.environ["DEVICE_SYNC_DELAY_SECONDS"] = "0"
os.environ["LOG_FORMAT"] = "text"
os.environ["LOG_LEVEL"] = "WARNING"

import httpx  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

from app.main import create_application  # noqa: E402
from app.modules.identity.infrastructure.external import supabase_auth  # noqa: E402
from app.shared.infrastructure.database import (  # noqa: E402
    Base,
    db_manager,
    init_database,
    initialize_sessions,
    session_manager,
)
from tests.support import FakeGoTrueClient, auth_headers, create_user  # noqa: E402


@pytest.fixture
async def database(tmp_path):
    """Fresh SQLite database wired into the global engine and session factory."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'care_circle.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    await init_database(engine)
    await initialize_sessions(engine)

    yield engine

    session_manager.reset()
    await db_manager.close()


@pytest.fixture
def fake_auth(monkeypatch):
    """Local auth client behind the real Supabase adapter."""
    fake = FakeGoTrueClient()
    monkeypatch.setattr(supabase_auth, "get_supabase_auth", lambda: fake)
    monkeypatch.setattr(supabase_auth, "create_auth_client", fake.spawn)
    return fake


@pytest.fixture
def application(database, fake_auth):
    return create_application()


@pytest.fixture
async def client(application):
    transport = httpx.ASGITransport(app=application)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client


@pytest.fixture
async def user(database):
    """A provisioned user and the headers that authenticate as them."""
    user_id = await create_user("supabase-owner", "owner@example.com")
    return {"id": user_id, "headers": auth_headers("supabase-owner", "owner@example.com")}


@pytest.fixture
async def other_user(database):
    user_id = await create_user("supabase-other", "other@example.com", first_name="Sam")
    return {"id": user_id, "headers": auth_headers("supabase-other", "other@example.com")}


@pytest.fixture
async def recipient(client, user):
    """A recipient owned by ``user``."""
    response = await client.post(
        "/api/v1/recipients",
        json={
            "name": "Grandma Rose",
            "phoneNumber": "5551234567",
            "countryCode": "+1",
            "timezone": "America/Chicago",
        },
        headers=user["headers"],
    )
    assert response.status_code == 200
    return response.json()["data"]
