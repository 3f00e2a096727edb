"""Common test fixtures and configuration."""

import os
from typing import Any, AsyncGenerator, Dict, Optional

# Settings are read from the environment; set them before the app is imported.
os.environ["BLOGAPI_JWT_SECRET_KEY"] = "test_secret_key_123456789"
os.environ.setdefault("BLOGAPI_ENVIRONMENT", "testing")
os.environ.setdefault("BLOGAPI_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
import pytest_asyncio
from faker import Faker
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from blogapi.core.database import Base, create_session_maker
from blogapi.core.security import TokenManager
from blogapi.main import create_app

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_SECRET_KEY = os.environ["BLOGAPI_JWT_SECRET_KEY"]

fake = Faker()


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: tests that go through the HTTP API")


@pytest_asyncio.fixture
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def session_maker(test_engine):
    return create_session_maker(test_engine)


@pytest_asyncio.fixture
async def test_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async with session_maker() as session:
        yield session


@pytest.fixture
def token_manager() -> TokenManager:
    return TokenManager(TEST_SECRET_KEY)


@pytest.fixture
def app(session_maker, token_manager):
    return create_app(session_maker=session_maker, token_manager=token_manager)


@pytest_asyncio.fixture
async def async_client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as test_client:
        yield test_client


@pytest.fixture
def graphql(async_client):
    """POST a GraphQL document, optionally with a bearer token."""

    async def execute(
        query: str,
        variables: Optional[Dict[str, Any]] = None,
        token: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        request_headers = dict(headers or {})
        if token:
            request_headers["Authorization"] = f"Bearer {token}"
        response = await async_client.post(
            "/graphql",
            json={"query": query, "variables": variables or {}},
            headers=request_headers,
        )
        assert response.status_code == 200, response.text
        return response.json()

    return execute


@pytest.fixture
def test_data_factory():
    """Factory for generating test data dicts for users, posts and comments."""

    class TestDataFactory:
        def __init__(self, fake):
            self.fake = fake

        def user_data(self, name=None, email=None, password=None, **kwargs):
            return {
                "name": name or self.fake.name(),
                "email": email or self.fake.unique.email(),
                "password": password or self.fake.password(),
                **kwargs,
            }

        def post_data(self, title=None, content=None, **kwargs):
            return {
                "title": title or self.fake.sentence(nb_words=4),
                "content": content or self.fake.text(max_nb_chars=200),
                **kwargs,
            }

        def comment_text(self):
            return self.fake.sentence(nb_words=8)

    return TestDataFactory(fake)
