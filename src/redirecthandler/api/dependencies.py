"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from redirecthandler.client import RedirectHandlerClient
from redirecthandler.resolution.dispatcher import FallbackDispatcher


async def get_redirect_client(request: Request) -> RedirectHandlerClient | None:
    """Get redirect handler client from app state."""
    return getattr(request.app.state, "redirect_client", None)


async def get_dispatcher(
    client: RedirectHandlerClient | None = Depends(get_redirect_client),
) -> FallbackDispatcher | None:
    """Get the fallback dispatcher if the client is running."""
    if client is None:
        return None
    return client.dispatcher


# Type aliases for cleaner dependency injection
Dispatcher = Annotated[FallbackDispatcher | None, Depends(get_dispatcher)]
