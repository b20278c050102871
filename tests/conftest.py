"""
Pytest configuration and fixtures for CardTree tests.
"""

import os

# Set test environment variables before importing config
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import app.db.models  # noqa: F401
from app.api.http.cards import get_card_tree_service
from app.core.db import Base, get_db
from app.db.repositories.block_repository import DatabaseBlockSource
from app.domains.cards.services import CardTreeService
from app.main import app as fastapi_app
from tests.helpers import make_block


@pytest.fixture
def scenario_a_blocks():
    return [
        make_block("root", "card", title="Card"),
        make_block("c1", "comment", create_at=200),
        make_block("c2", "comment", create_at=100),
        make_block("t1", "text", order=2),
        make_block("t2", "text", order=1),
    ]


@pytest_asyncio.fixture
async def session_factory():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def card_tree_service(session_factory):
    return CardTreeService(DatabaseBlockSource(session_factory, levels=2))


@pytest_asyncio.fixture
async def async_client(session_factory, card_tree_service):
    """Async HTTP client against the ASGI app, wired to the test database."""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    fastapi_app.dependency_overrides[get_card_tree_service] = lambda: card_tree_service

    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=fastapi_app),
        base_url="http://test",
    ) as client:
        yield client

    fastapi_app.dependency_overrides.clear()
