"""Shared test fixtures."""

import os
from collections.abc import AsyncGenerator

import httpx
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SHOPIFY_API_KEY", "test-api-key")
os.environ.setdefault("SHOPIFY_API_SECRET", "test-api-secret")
os.environ.setdefault("ENVIRONMENT", "development")

import app.core.dependencies as deps_mod  # noqa: E402
from app.core.api_keys import ApiKeyRecord, ApiKeyStore  # noqa: E402
from app.db.base import Base  # noqa: E402
from app.main import app  # noqa: E402
from app.services.storefront import StorefrontClient  # noqa: E402
from tests.helpers import (  # noqa: E402
    ACTIVE_API_KEY,
    INACTIVE_API_KEY,
    STOREFRONT_DOMAIN,
    STOREFRONT_TOKEN,
)


@pytest.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Fresh in-memory SQLite database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
async def db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Session for calling services directly."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def api_key_store() -> ApiKeyStore:
    return ApiKeyStore(
        {
            ACTIVE_API_KEY: ApiKeyRecord(name="Default API Key", active=True),
            INACTIVE_API_KEY: ApiKeyRecord(name="Revoked key", active=False),
        }
    )


@pytest.fixture
def storefront_requests() -> list[httpx.Request]:
    """Requests the fake storefront received, in order."""
    return []


@pytest.fixture
def storefront_handler(storefront_requests):
    """Default fake storefront: echoes a collections payload.

    Override this fixture in a test module to change upstream behaviour.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        storefront_requests.append(request)
        return httpx.Response(
            200,
            json={
                "data": {
                    "collections": {
                        "edges": [
                            {"node": {"id": "gid://shopify/Collection/1", "title": "Summer"}},
                            {"node": {"id": "gid://shopify/Collection/2", "title": "Winter"}},
                        ]
                    }
                }
            },
        )

    return handler


@pytest.fixture
def storefront_client(storefront_handler) -> StorefrontClient:
    return StorefrontClient(
        shop_domain=STOREFRONT_DOMAIN,
        access_token=STOREFRONT_TOKEN,
        api_version="2024-10",
        transport=httpx.MockTransport(storefront_handler),
    )


@pytest.fixture
async def client(
    session_factory, api_key_store, storefront_client
) -> AsyncGenerator[AsyncClient, None]:
    """HTTP test client wired to the in-memory database and fakes."""

    async def _get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[deps_mod.get_db] = _get_db
    app.dependency_overrides[deps_mod.get_api_key_store] = lambda: api_key_store
    app.dependency_overrides[deps_mod.get_storefront_client] = lambda: storefront_client
    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            yield c
    finally:
        app.dependency_overrides.clear()
