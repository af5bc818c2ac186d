import uuid

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from postboard.config import Settings
from postboard.core.db import tortoise_config
from postboard.core.security import hash_password
from postboard.main import create_app
from postboard.models import Account


TEST_DB_URL = "sqlite://:memory:"
TEST_SECRET = "test-secret-key-for-the-postboard-suite-0123456789"


def make_settings(**overrides) -> Settings:
    values = {
        "database_url": TEST_DB_URL,
        "jwt_secret": TEST_SECRET,
        "rate_limit_enabled": False,
    }
    values.update(overrides)
    return Settings(**values)


async def _init_test_db(db_url: str = TEST_DB_URL) -> None:
    """
    Initialize a clean in-memory SQLite database for every test.
    Ensures tables are recreated from scratch.
    """
    if Tortoise._inited:
        await Tortoise.close_connections()
    await Tortoise.init(config=tortoise_config(db_url))
    await Tortoise.generate_schemas()


@pytest.fixture
def settings_factory():
    """Build Settings with test defaults; keyword arguments override them."""
    return make_settings


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest_asyncio.fixture
async def client(app):
    """
    Provide an HTTPX AsyncClient bound to the app with a fresh DB.
    The app lifespan (bootstrap) is not run; the fixture owns the schema.
    """
    await _init_test_db()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def create_account(client):
    """
    Factory fixture to create accounts directly via ORM.
    """

    async def _create_account(password: str = "UserPass!23") -> tuple[Account, str]:
        tag = uuid.uuid4().hex[:6]
        account = await Account.create(
            username=f"user_{tag}",
            email=f"{tag}@example.com",
            password_hash=hash_password(password),
        )
        return account, password

    return _create_account


@pytest_asyncio.fixture
async def auth_header_factory(client):
    """
    Helper fixture to obtain Authorization headers via the login endpoint.
    """

    async def _get_headers(email: str, password: str) -> dict[str, str]:
        resp = await client.post(
            "/accounts/login",
            json={"email": email, "password": password},
        )
        assert resp.status_code == 200, resp.text
        token = resp.json()["data"]["accessToken"]
        return {"Authorization": f"Bearer {token}"}

    return _get_headers
