"""Main library client for standalone usage."""

from __future__ import annotations

import logging

import httpx

from redirecthandler.config import RedirectHandlerSettings
from redirecthandler.core.models import DispatchOutcome, DispatchRequest, DispatcherConfig
from redirecthandler.resolution.base import LookupTransport, ResponseSink
from redirecthandler.resolution.dispatcher import FallbackDispatcher
from redirecthandler.resolution.pool import ResolverPool
from redirecthandler.resolution.transport import HttpxLookupTransport

logger = logging.getLogger(__name__)


def build_dispatcher(
    settings: RedirectHandlerSettings,
    transport: LookupTransport,
) -> FallbackDispatcher:
    """
    Create a dispatcher from settings.

    Raises:
        ConfigurationError: If the access key or the resolver list is missing
    """
    config = DispatcherConfig.create(
        access_key=settings.x_gbi_key,
        lookup_timeout_ms=settings.timeout,
        default_fallback_page=settings.default_404_page,
    )
    pool = ResolverPool.build(
        settings.redirect_processor_urls,
        settings.url_separator,
        allow_local_urls=settings.allow_local_urls,
    )
    return FallbackDispatcher(pool, config, transport)


class RedirectHandlerClient:
    """
    Owns a dispatcher and the HTTP transport behind it.

    Usage:
        async with RedirectHandlerClient() as client:
            outcome = await client.dispatch("https", "example.com", "/old-page", headers)
            if outcome.is_redirect:
                print(outcome.location)

    Settings are loaded from environment variables or can be passed explicitly.
    """

    def __init__(
        self,
        settings: RedirectHandlerSettings | None = None,
        *,
        transport: LookupTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            settings: Application settings. If not provided, loaded from environment.
            transport: Lookup transport. Defaults to a pooled httpx client,
                which is then closed together with this client.
        """
        self._settings = settings or RedirectHandlerSettings()
        self._transport = transport
        self._owns_transport = transport is None
        self._dispatcher: FallbackDispatcher | None = None

    async def __aenter__(self) -> RedirectHandlerClient:
        """Initialize resources on context entry."""
        self._initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Clean up resources on context exit."""
        await self.close()

    def _initialize(self) -> None:
        """Validate configuration and build the dispatcher."""
        # HttpxLookupTransport opens its client lazily, nothing leaks on failure
        transport = self._transport or HttpxLookupTransport()
        self._dispatcher = build_dispatcher(self._settings, transport)
        self._transport = transport
        logger.info("Redirect dispatcher initialized")

    async def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport and self._transport is not None:
            await self._transport.close()
            self._transport = None
        self._dispatcher = None

    @property
    def dispatcher(self) -> FallbackDispatcher:
        self._ensure_initialized()
        return self._dispatcher

    def _ensure_initialized(self) -> None:
        """Ensure client is initialized."""
        if self._dispatcher is None:
            raise RuntimeError(
                "Client not initialized. Use 'async with RedirectHandlerClient() as client:'"
            )

    async def dispatch(
        self,
        scheme: str,
        host: str,
        path: str,
        headers: httpx.Headers | dict[str, str] | list[tuple[str, str]] | None = None,
    ) -> DispatchOutcome:
        """
        Look up a redirect for a missing path.

        Args:
            scheme: Scheme of the original request
            host: Host header of the original request
            path: Original path
            headers: Original request headers

        Returns:
            Redirected or NotFound outcome
        """
        self._ensure_initialized()
        request = DispatchRequest(
            scheme=scheme,
            host=host,
            path=path,
            headers=httpx.Headers(headers),
        )
        return await self._dispatcher.dispatch(request)

    async def handle(self, request: DispatchRequest, sink: ResponseSink) -> DispatchOutcome:
        """Dispatch and apply the outcome to the hosting server's response."""
        self._ensure_initialized()
        return await self._dispatcher.handle(request, sink)


# Convenience function for one-off lookups
async def lookup_redirect(
    url: str,
    headers: httpx.Headers | dict[str, str] | list[tuple[str, str]] | None = None,
    *,
    settings: RedirectHandlerSettings | None = None,
) -> DispatchOutcome:
    """
    Look up a redirect for an absolute URL (convenience function).

    For repeated lookups, use RedirectHandlerClient to reuse connections.
    """
    request = DispatchRequest.from_url(url, headers)
    async with RedirectHandlerClient(settings) as client:
        return await client.dispatcher.dispatch(request)
