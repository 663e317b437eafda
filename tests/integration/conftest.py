"""Integration test fixtures for the ASGI application."""

from __future__ import annotations

from typing import AsyncIterator

import pytest
from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from httpx import ASGITransport, AsyncClient

from redirecthandler.api.app import create_app
from redirecthandler.config import RedirectHandlerSettings

RESOLVER_1 = "https://redirectprocessor1.local/redirecthandler/"
RESOLVER_2 = "http://redirectprocessor2.local/redirecthandler"
FALLBACK_BODY = "<h1>Sorry, this page does not exist</h1>"


def _settings(**overrides) -> RedirectHandlerSettings:
    values = {
        "x_gbi_key": "38e34544bf26e1b5cf91f3b1d4589a18",
        "redirect_processor_urls": f"{RESOLVER_1},{RESOLVER_2}",
        "timeout": 2000,
        "default_404_page": "/DefaultErrorHandler",
    }
    values.update(overrides)
    return RedirectHandlerSettings(_env_file=None, **values)


def _add_site_routes(app: FastAPI) -> None:
    """Routes of the hosting site, including its error page."""

    @app.get("/exists")
    async def exists() -> dict[str, str]:
        return {"page": "exists"}

    @app.get("/DefaultErrorHandler", response_class=HTMLResponse)
    async def default_error_handler() -> HTMLResponse:
        return HTMLResponse(FALLBACK_BODY)

    @app.get("/BrokenErrorHandler")
    async def broken_error_handler() -> None:
        raise RuntimeError("error page crashed")


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
def app_settings() -> RedirectHandlerSettings:
    return _settings()


@pytest.fixture
def settings_factory():
    """Factory fixture for settings with overrides."""
    return _settings


@pytest.fixture
def app_factory():
    """Factory fixture creating an app with the site routes mounted."""
    def _build(settings: RedirectHandlerSettings) -> FastAPI:
        app = create_app(settings)
        _add_site_routes(app)
        return app
    return _build


async def _serve(app: FastAPI) -> AsyncIterator[AsyncClient]:
    async with app.router.lifespan_context(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client


@pytest.fixture
async def test_client(app_factory, app_settings) -> AsyncIterator[AsyncClient]:
    """Create async HTTP test client with the lifespan running."""
    async for client in _serve(app_factory(app_settings)):
        yield client


@pytest.fixture
async def test_client_no_fallback(app_factory, settings_factory) -> AsyncIterator[AsyncClient]:
    """Test client for an app without a default 404 page."""
    async for client in _serve(app_factory(settings_factory(default_404_page=None))):
        yield client


@pytest.fixture
async def test_client_missing_fallback(app_factory, settings_factory) -> AsyncIterator[AsyncClient]:
    """Test client whose default 404 page is not routed."""
    async for client in _serve(app_factory(settings_factory(default_404_page="/nowhere"))):
        yield client


@pytest.fixture
async def test_client_broken_fallback(app_factory, settings_factory) -> AsyncIterator[AsyncClient]:
    """Test client whose default 404 page crashes."""
    async for client in _serve(
        app_factory(settings_factory(default_404_page="/BrokenErrorHandler"))
    ):
        yield client
