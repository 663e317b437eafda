"""Capability interfaces the dispatcher talks to."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

import httpx

from redirecthandler.core.types import HeaderName


@dataclass(frozen=True)
class LookupResponse:
    """What a resolver answered."""

    status_code: int
    headers: httpx.Headers = field(default_factory=httpx.Headers)

    @property
    def is_redirect(self) -> bool:
        return 300 <= self.status_code < 400

    @property
    def location(self) -> str | None:
        """First Location value, if any."""
        values = self.headers.get_list(HeaderName.LOCATION)
        return values[0] if values else None


class LookupTransport(ABC):
    """
    Sends one lookup request to one resolver.

    Implementations must not follow redirects and must give up after
    ``timeout_ms``. Transport failures are raised, not returned.
    """

    @abstractmethod
    async def lookup(
        self,
        url: str,
        headers: list[tuple[bytes, bytes]],
        timeout_ms: int,
    ) -> LookupResponse:
        """
        Issue ``GET url`` with the given headers.

        Raises:
            ResolverUnavailableError: On connection errors, timeouts or malformed responses
        """
        ...

    async def close(self) -> None:
        """Release transport resources."""
        return None

    async def __aenter__(self) -> LookupTransport:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


class ResponseSink(ABC):
    """Terminal actions provided by the hosting server."""

    @abstractmethod
    async def send_redirect(self, location: str) -> None:
        """Answer the client with a redirect to ``location``."""
        ...

    @abstractmethod
    async def forward(self, page: str) -> None:
        """Serve ``page`` internally in place of the missing resource."""
        ...
