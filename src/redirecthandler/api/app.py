"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import AsyncIterator, Callable

import httpx
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from redirecthandler import __version__
from redirecthandler.api.routes import health_router
from redirecthandler.api.sink import StarletteResponseSink
from redirecthandler.client import RedirectHandlerClient
from redirecthandler.config import RedirectHandlerSettings
from redirecthandler.core.models import DispatchRequest
from redirecthandler.core.types import HeaderName
from redirecthandler.resolution.base import LookupTransport

logger = logging.getLogger(__name__)


def _build_lifespan(
    settings: RedirectHandlerSettings | None,
    transport: LookupTransport | None,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """
        Application lifespan manager.

        Configuration errors propagate so the server refuses to start.
        """
        app_settings = settings or RedirectHandlerSettings()
        logging.getLogger("redirecthandler").setLevel(app_settings.log_level.upper())

        logger.info("Initializing redirect dispatcher...")
        async with RedirectHandlerClient(app_settings, transport=transport) as client:
            app.state.redirect_client = client
            logger.info("Application startup complete")

            yield

            logger.info("Shutting down application...")
            app.state.redirect_client = None

        logger.info("Application shutdown complete")

    return lifespan


def original_path(request: Request) -> str:
    """
    Path as the client sent it, still percent-encoded and without the query.

    Falls back to the decoded path when the server gives no ``raw_path``.
    """
    raw_path = request.scope.get("raw_path")
    if not raw_path:
        return request.url.path

    path = raw_path.decode("latin-1").split("?", 1)[0]
    root_path = request.scope.get("root_path", "")
    if root_path and not path.startswith(root_path):
        path = root_path + path
    return path


def to_dispatch_request(request: Request) -> DispatchRequest:
    """Describe the not-found request for the dispatcher."""
    return DispatchRequest(
        scheme=request.url.scheme,
        host=request.headers.get("host", request.url.netloc),
        path=original_path(request),
        headers=httpx.Headers(request.headers.raw),
    )


async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Ask the redirect resolvers before answering 404."""
    client: RedirectHandlerClient | None = getattr(request.app.state, "redirect_client", None)

    # Internal fallback forwards that miss again get a plain 404
    if client is None or HeaderName.FORWARDED in request.headers:
        return await http_exception_handler(request, exc)

    sink = StarletteResponseSink(request)
    await client.handle(to_dispatch_request(request), sink)
    return sink.response


def create_app(
    settings: RedirectHandlerSettings | None = None,
    *,
    transport: LookupTransport | None = None,
    title: str = "Redirect Handler",
    description: str = "Not-found fallback dispatcher backed by redirect resolvers",
    version: str = __version__,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Application settings, loaded from the environment at startup if omitted
        transport: Lookup transport, defaults to a pooled httpx client
        title: API title for OpenAPI docs
        description: API description for OpenAPI docs
        version: API version

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=title,
        description=description,
        version=version,
        lifespan=_build_lifespan(settings, transport),
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_exception_handler(404, not_found_handler)

    # Register routes
    app.include_router(health_router, prefix="/api/v1")

    return app


# For uvicorn direct execution
app = create_app()
