"""httpx-backed lookup transport."""

from __future__ import annotations

import logging

import httpx

from redirecthandler.core.exceptions import ResolverUnavailableError
from redirecthandler.resolution.base import LookupResponse, LookupTransport

logger = logging.getLogger(__name__)


class HttpxLookupTransport(LookupTransport):
    """
    Lookup transport on a shared, pooled ``httpx.AsyncClient``.

    The client is created lazily on first use. A client passed in by the caller
    stays owned by the caller and is not closed here.
    """

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(follow_redirects=False)
            self._owns_client = True
        return self._client

    async def lookup(
        self,
        url: str,
        headers: list[tuple[bytes, bytes]],
        timeout_ms: int,
    ) -> LookupResponse:
        client = self._get_client()
        try:
            response = await client.get(
                url,
                headers=headers,
                timeout=httpx.Timeout(timeout_ms / 1000),
                follow_redirects=False,
            )
        except httpx.TimeoutException as e:
            raise ResolverUnavailableError(
                message=f"Timed out after {timeout_ms}ms: {e}",
                source=url,
            ) from e
        except httpx.HTTPError as e:
            raise ResolverUnavailableError(
                message=f"HTTP error: {e}",
                source=url,
            ) from e

        return LookupResponse(
            status_code=response.status_code,
            headers=response.headers,
        )

    async def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client and self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
