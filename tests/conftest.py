import os

# must be set before app.core.config builds its Settings
os.environ.setdefault("OTEL_ENABLED", "false")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SESSION_SECRET_KEY", "test-session-secret")
os.environ["ENV"] = "dev"  # plain-http session cookie for the test client

import pytest
import pytest_asyncio
import httpx

from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

# Import Base + all models so metadata is complete
from app.models.base import Base
from app.models.city import City  # noqa: F401
from app.models.person import Person  # noqa: F401

from app.main import app
from app.core.db import get_db

from tests.fixtures_seed import seed_cities, seed_inhabitants  # noqa: F401


def _test_db_url() -> str:
    # in-memory SQLite unless a real database is provided
    return os.getenv("DATABASE_URL_TEST", "sqlite+aiosqlite://")


@pytest_asyncio.fixture
async def async_engine():
    url = _test_db_url()
    if url.startswith("sqlite"):
        engine = create_async_engine(url, poolclass=StaticPool, connect_args={"check_same_thread": False})
    else:
        engine = create_async_engine(url, pool_pre_ping=True)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield engine
    finally:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        await engine.dispose()


@pytest.fixture
def session_factory(async_engine):
    return async_sessionmaker(bind=async_engine, expire_on_commit=False, class_=AsyncSession)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    """
    HTTP client whose requests each get a fresh session on the test engine.
    """
    async def _override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _override_get_db

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
