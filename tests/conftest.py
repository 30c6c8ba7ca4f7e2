"""Pytest configuration and fixtures."""

from typing import AsyncGenerator

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

import harbor.models  # noqa: F401
from harbor.services.database import Base, get_db
from harbor.main import app


# Create in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """A fresh in-memory database engine per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    await engine.dispose()


@pytest.fixture(autouse=True)
async def setup_database(engine: AsyncEngine):
    """Create tables before each test."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Get a test database session."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def override_get_db(db_session: AsyncSession):
    """Override the get_db dependency."""
    async def _override_get_db():
        yield db_session
    return _override_get_db


@pytest.fixture
async def client(override_get_db) -> AsyncGenerator[AsyncClient, None]:
    """Get async test client."""
    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def prototype_html():
    """A prototype page carrying one record per category."""
    return """<!doctype html>
<html>
<head><title>CRM prototype</title></head>
<body>
<script>
  // Seed data, edited by hand
  var SEED = {
    accounts: [
      {
        name: 'Acme',
        contact: 'Jo',
        email: 'jo@acme.com',
        status: 'active',
        lastContact: '2023-05',
        notes: 'vip',
        billingSchedule: 'Quarterly',
        nextStep: 'Renewal call',
        followUpRequired: true,
      },
    ],
    deals: [
      {
        name: "Globex",
        contact: "Hank",
        stage: " Closed Won ",
        lastContact: "2024-02-10",
        product: "Platform",
        source: "Referral",
        nextStep: "Kickoff",
      },
    ],
    leads: [
      { name: 'Initech', contact: 'Peter', product: 'Add-on', source: 'Website', stage: 'demo', lastContact: '2024' },
    ],
  };
  function render() { return SEED.accounts.length; }
</script>
</body>
</html>
"""
