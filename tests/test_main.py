"""Tests for application startup and configuration."""

import pytest
from httpx import ASGITransport, AsyncClient
from loguru import logger

from shorturl.api.dependencies import get_hostname_validator
from shorturl.core.config import Settings
from shorturl.db.session import get_db
from shorturl.main import create_app, lifespan


def _with_test_dependencies(app, test_db, validator):
    async def _override_get_db():
        yield test_db

    async def _override_get_hostname_validator():
        return validator

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_hostname_validator] = _override_get_hostname_validator
    return app


@pytest.mark.asyncio
async def test_lifespan_opens_shared_store():
    app = create_app(Settings(DATABASE_URL="sqlite+aiosqlite:///:memory:"))

    async with lifespan(app):
        assert app.state.engine is not None
        async with app.state.session_factory() as session:
            assert session.bind is app.state.engine


@pytest.mark.asyncio
async def test_lifespan_survives_unreachable_store():
    """Startup continues when the store cannot be reached."""
    app = create_app(Settings(DATABASE_URL="sqlite+aiosqlite:////nonexistent-dir/sub/db.sqlite"))

    async with lifespan(app):
        assert app.state.session_factory is not None


def test_cors_origins_from_comma_separated_string():
    settings = Settings(CORS_ORIGINS="https://a.example, https://b.example")

    assert settings.CORS_ORIGINS == ["https://a.example", "https://b.example"]


def test_bare_postgres_url_uses_asyncpg():
    settings = Settings(DATABASE_URL="postgres://user:pw@db:5432/shorturl")

    assert settings.DATABASE_URL == "postgresql+asyncpg://user:pw@db:5432/shorturl"


def test_docs_only_in_debug():
    assert create_app(Settings(DEBUG=False)).docs_url is None
    assert create_app(Settings(DEBUG=True)).docs_url == "/docs"


@pytest.mark.asyncio
async def test_routes_follow_configured_prefix(test_db, validator):
    app = _with_test_dependencies(create_app(Settings(API_PREFIX="/x")), test_db, validator)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        created = await client.post("/x/new", json={"url": "https://example.com"})
        redirect = await client.get("/x/1")
        default_prefix = await client.get("/api/shorturl/1")

    assert created.json() == {"original_url": "https://example.com", "short_url": 1}
    assert redirect.status_code == 302
    assert default_prefix.status_code == 404


@pytest.mark.asyncio
async def test_landing_page_from_configured_views_dir(tmp_path, test_db, validator):
    (tmp_path / "index.html").write_text("<h1>custom landing</h1>")
    app = _with_test_dependencies(create_app(Settings(VIEWS_DIR=tmp_path)), test_db, validator)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/")

    assert response.status_code == 200
    assert response.text == "<h1>custom landing</h1>"


def test_log_level_from_passed_settings(capsys):
    create_app(Settings(LOG_LEVEL="WARNING", LOG_TO_FILE=False))

    logger.info("quiet startup detail")
    logger.warning("loud startup detail")

    err = capsys.readouterr().err
    assert "quiet startup detail" not in err
    assert "loud startup detail" in err
