"""Response sink on top of Starlette requests and responses."""

from __future__ import annotations

import logging

import httpx
from starlette.requests import Request
from starlette.responses import PlainTextResponse, RedirectResponse, Response

from redirecthandler.core.exceptions import FallbackForwardError
from redirecthandler.core.types import HeaderName
from redirecthandler.resolution.base import ResponseSink

logger = logging.getLogger(__name__)

# Describe the original body, which the internal GET does not carry
_DROPPED_FORWARD_HEADERS = frozenset({"content-length", "transfer-encoding"})


class StarletteResponseSink(ResponseSink):
    """
    Collects the final response for one not-found request.

    ``forward`` runs an internal GET against the same ASGI app, the way a
    servlet container forwards to an error page.
    """

    def __init__(self, request: Request) -> None:
        self._request = request
        self._response: Response | None = None

    @property
    def response(self) -> Response:
        """The collected response, or a bare 404 when nothing was sent."""
        if self._response is None:
            return PlainTextResponse("Not Found", status_code=404)
        return self._response

    async def send_redirect(self, location: str) -> None:
        self._response = RedirectResponse(location, status_code=302)

    async def forward(self, page: str) -> None:
        """Serve ``page`` with the 404 status kept, whatever the page itself answers."""
        headers = [
            (name, value)
            for name, value in self._request.headers.raw
            if name.decode("latin-1").lower() not in _DROPPED_FORWARD_HEADERS
        ]
        headers.append((HeaderName.FORWARDED.value.encode("ascii"), b"1"))

        base_url = f"{self._request.url.scheme}://{self._request.url.netloc}"
        transport = httpx.ASGITransport(app=self._request.app)
        try:
            async with httpx.AsyncClient(transport=transport, base_url=base_url) as client:
                forwarded = await client.get(page, headers=headers)
        except Exception as e:
            raise FallbackForwardError(
                message=f"Forward failed: {e}",
                page=page,
            ) from e

        logger.debug(f"Forwarded to {page}: {forwarded.status_code}")
        response_headers = {}
        if content_type := forwarded.headers.get("content-type"):
            response_headers["content-type"] = content_type
        self._response = Response(
            content=forwarded.content,
            status_code=404,
            headers=response_headers,
        )
