"""API test fixtures.

The application runs against the per-test SQLite session, a mocked identity
provider and, unless a test installs one, no object storage.
"""

from typing import AsyncGenerator, Dict, Optional
from unittest.mock import patch

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from wallpaper_hub.core.auth_client import AuthClient
from wallpaper_hub.core.database.entities.profiles import PLAN_PREMIUM, ROLE_ADMIN, ROLE_SUPER_ADMIN

# Access tokens understood by the mocked identity provider
AUTH_USERS: Dict[str, dict] = {
    "free-token": {"id": "user-free", "email": "free@example.com"},
    "premium-token": {"id": "user-premium", "email": "premium@example.com"},
    "admin-token": {"id": "user-admin", "email": "admin@example.com"},
    "super-token": {"id": "user-super", "email": "super@example.com"},
    "newcomer-token": {"id": "user-newcomer", "email": "newcomer@example.com"},
}


@pytest.fixture
def auth_headers():
    """Build the Authorization header for one of the mocked access tokens."""

    def _headers(token: str) -> Dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    return _headers


def _identity_provider(request: httpx.Request) -> httpx.Response:
    token = request.headers.get("authorization", "").removeprefix("Bearer ")
    user = AUTH_USERS.get(token)
    if user is None:
        return httpx.Response(401, json={"msg": "invalid JWT"})
    return httpx.Response(200, json=user)


@pytest.fixture
def auth_client() -> AuthClient:
    return AuthClient(base_url="http://mock-auth", api_key="anon-key", transport=httpx.MockTransport(_identity_provider))


@pytest_asyncio.fixture(name="profiles")
async def profiles_fixture(make_profile):
    """Profiles behind the mocked access tokens ("newcomer" has none)."""
    return {
        "free": await make_profile("user-free"),
        "premium": await make_profile("user-premium", plan_type=PLAN_PREMIUM),
        "admin": await make_profile("user-admin", is_admin=True, admin_role=ROLE_ADMIN),
        "super": await make_profile("user-super", is_admin=True, admin_role=ROLE_SUPER_ADMIN),
    }


@pytest.fixture
def storage_holder() -> Dict[str, Optional[object]]:
    """Tests may put an ``ObjectStorage`` under ``"storage"`` before calling the API."""
    return {"storage": None}


@pytest_asyncio.fixture(name="client")
async def client_fixture(
    session: AsyncSession, profiles, auth_client: AuthClient, storage_holder
) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client with mocked lifespan and overridden dependencies."""
    from wallpaper_hub.core.database import get_session
    from wallpaper_hub.server.main import app
    from wallpaper_hub.server.services.deps import get_auth_client, get_storage

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_auth_client] = lambda: auth_client
    app.dependency_overrides[get_storage] = lambda: storage_holder["storage"]

    # Mock the lifespan to prevent database initialization during tests
    async def mock_lifespan(app):
        yield

    with patch("wallpaper_hub.server.main.lifespan", mock_lifespan):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
            yield client

    app.dependency_overrides.clear()


@pytest.fixture
def fake_storage():
    """Object storage backed by a real boto3 client with dummy credentials.

    Presigning happens locally, so no request ever leaves the process.
    """
    import boto3
    from botocore.config import Config

    from wallpaper_hub.core.storage import ObjectStorage

    s3 = boto3.client(
        "s3",
        endpoint_url="https://storage.example",
        aws_access_key_id="test-access-key",
        aws_secret_access_key="test-secret-key",
        region_name="us-east-1",
        config=Config(signature_version="s3v4", s3={"addressing_style": "path"}),
    )
    return ObjectStorage(s3, bucket="wallpapers", public_base_url="https://files.example/")
