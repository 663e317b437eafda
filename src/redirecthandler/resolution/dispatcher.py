"""Not-found fallback dispatcher."""

from __future__ import annotations

import logging
from urllib.parse import quote_plus

from redirecthandler.core.models import DispatchOutcome, DispatchRequest, DispatcherConfig
from redirecthandler.core.types import HeaderName
from redirecthandler.resolution.base import LookupTransport, ResponseSink
from redirecthandler.resolution.pool import ResolverPool

logger = logging.getLogger(__name__)

# Host would target the wrong origin. The lookup GET has no body to frame.
_EXCLUDED_HEADERS = frozenset(
    {HeaderName.HOST.lower(), HeaderName.GBI_KEY.lower(), "content-length", "transfer-encoding"}
)


class FallbackDispatcher:
    """
    Asks redirect resolvers whether a missing path has a new home.

    Resolvers are tried one after another in a fresh random order until one
    answers with a 3xx. A resolver that is down, slow or answers anything else
    counts as a miss. When every resolver misses, the configured fallback page
    is served, if there is one.

    Usage:
        dispatcher = FallbackDispatcher(pool, config, HttpxLookupTransport())
        outcome = await dispatcher.dispatch(request)
        await dispatcher.apply_outcome(outcome, sink)
    """

    def __init__(
        self,
        pool: ResolverPool,
        config: DispatcherConfig,
        transport: LookupTransport,
    ) -> None:
        self._pool = pool
        self.config = config
        self._transport = transport

    @property
    def pool(self) -> ResolverPool:
        return self._pool

    @property
    def transport(self) -> LookupTransport:
        return self._transport

    @staticmethod
    def encode_original_url(request: DispatchRequest) -> str:
        """Encode the absolute original URL as one query parameter value."""
        return quote_plus(request.original_url, safe="", encoding="utf-8")

    def build_lookup_url(self, endpoint: str, request: DispatchRequest) -> str:
        return f"{endpoint}?r={self.encode_original_url(request)}"

    def build_lookup_headers(self, request: DispatchRequest) -> list[tuple[bytes, bytes]]:
        """
        Copy the original headers, minus Host, and add the access key.

        Values stay the bytes the client sent, so non-ASCII values pass through.
        """
        headers = [
            (name, value)
            for name, value in request.headers.raw
            if name.decode("latin-1").lower() not in _EXCLUDED_HEADERS
        ]
        headers.append(
            (HeaderName.GBI_KEY.value.encode("ascii"), self.config.access_key.encode("utf-8"))
        )
        return headers

    async def _try_endpoint(
        self,
        endpoint: str,
        request: DispatchRequest,
        headers: list[tuple[bytes, bytes]],
    ) -> str | None:
        """Query one resolver. Returns the redirect location or None on a miss."""
        url = self.build_lookup_url(endpoint, request)
        try:
            response = await self._transport.lookup(
                url, headers, self.config.lookup_timeout_ms
            )
        except Exception as e:
            logger.error(f"error while trying to request redirect:[{e}]", exc_info=True)
            return None

        logger.info(f"status code :{response.status_code}")
        if not response.is_redirect:
            return None

        location = response.location
        if location is None:
            logger.error(
                f"error while trying to request redirect:[{endpoint} answered "
                f"{response.status_code} without a Location header]"
            )
        return location

    async def dispatch(self, request: DispatchRequest) -> DispatchOutcome:
        """
        Find a redirect for ``request``.

        Args:
            request: The request that produced the not-found condition

        Returns:
            ``Redirected(location)`` from the first resolver that knows one,
            otherwise ``NotFound``
        """
        headers = self.build_lookup_headers(request)

        for endpoint in self._pool.pick_order():
            location = await self._try_endpoint(endpoint, request, headers)
            if location is not None:
                logger.info("redirected")
                return DispatchOutcome.redirected(location)

        return DispatchOutcome.not_found()

    async def apply_outcome(self, outcome: DispatchOutcome, sink: ResponseSink) -> None:
        """
        Act on a dispatch outcome. Never raises on the not-found path.

        Args:
            outcome: Result of :meth:`dispatch`
            sink: Response actions of the hosting server
        """
        if outcome.is_redirect:
            await sink.send_redirect(outcome.location)
            return

        page = self.config.default_fallback_page
        if page is None:
            # The hosting server produces the bare not-found response
            return

        try:
            await sink.forward(page)
        except Exception as e:
            logger.debug(f"Forward to default 404 page {page} failed: {e}")

    async def handle(self, request: DispatchRequest, sink: ResponseSink) -> DispatchOutcome:
        """Dispatch ``request`` and apply the result to ``sink``."""
        outcome = await self.dispatch(request)
        await self.apply_outcome(outcome, sink)
        return outcome
