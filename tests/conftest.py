"""Test fixtures for the short URL service."""

import os
import socket

# Settings are read at import time, so the environment goes first
os.environ["ENVIRONMENT"] = "testing"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_TO_FILE"] = "false"

import pytest
import pytest_asyncio
from typing import AsyncGenerator, List
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from shorturl.api.dependencies import get_hostname_validator
from shorturl.db.session import get_db
from shorturl.main import create_app
from shorturl.repositories.url_repository import URLRepository
from shorturl.services.shortener import ShortenedURLService
from shorturl.services.validator import HostnameValidator
# Import models to ensure they're registered with SQLModel metadata
from shorturl.models.url import ShortURL  # noqa: F401


# Test database URL - using SQLite in-memory
TEST_SQLALCHEMY_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Hosts the fake resolver knows about
RESOLVABLE_HOSTS = {"example.com", "www.example.com", "python.org", "localhost"}


class FakeResolver:
    """Stands in for DNS: resolves a fixed set of hosts and records lookups."""

    def __init__(self, hosts=RESOLVABLE_HOSTS):
        self.hosts = set(hosts)
        self.calls: List[str] = []

    async def __call__(self, host: str):
        self.calls.append(host)
        if host not in self.hosts:
            raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")
        return [(socket.AF_INET, socket.SOCK_STREAM, 6, "", ("93.184.216.34", 0))]


@pytest_asyncio.fixture
async def test_engine():
    """Create test database engine with in-memory SQLite."""
    engine = create_async_engine(
        TEST_SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_db(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session on a fresh in-memory database."""
    session_factory = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False
    )

    async with session_factory() as session:
        yield session


@pytest.fixture
def fake_resolver() -> FakeResolver:
    return FakeResolver()


@pytest.fixture
def validator(fake_resolver) -> HostnameValidator:
    return HostnameValidator(resolver=fake_resolver)


@pytest.fixture
def url_repository() -> URLRepository:
    return URLRepository()


@pytest.fixture
def shortener_service(url_repository, validator) -> ShortenedURLService:
    return ShortenedURLService(url_repository=url_repository, validator=validator)


@pytest.fixture
def test_app(test_db, validator) -> FastAPI:
    """Create FastAPI test app with overridden dependencies."""
    app = create_app()

    async def _override_get_db():
        yield test_db

    async def _override_get_hostname_validator():
        return validator

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_hostname_validator] = _override_get_hostname_validator
    return app


@pytest_asyncio.fixture
async def client(test_app) -> AsyncGenerator[AsyncClient, None]:
    """Return an HTTP client bound to the test app."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client
