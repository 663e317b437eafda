"""Domain models for dispatch requests, outcomes and configuration."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field

from .exceptions import ConfigurationError
from .types import OutcomeKind

logger = logging.getLogger(__name__)

# Lookups shorter than this are clamped up, never rejected
MIN_LOOKUP_TIMEOUT_MS = 1000


class DispatchRequest(BaseModel):
    """The request that produced the not-found condition."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    scheme: str = Field(..., description="Scheme of the original request")
    host: str = Field(..., description="Value of the original Host header")
    path: str = Field(..., description="Original path, before error routing")
    headers: httpx.Headers = Field(
        default_factory=httpx.Headers,
        description="All original request headers",
    )

    @property
    def original_url(self) -> str:
        """Absolute URL the client asked for."""
        return f"{self.scheme}://{self.host}{self.path}"

    @classmethod
    def from_url(
        cls,
        url: str,
        headers: httpx.Headers | dict[str, str] | list[tuple[str, str]] | None = None,
    ) -> DispatchRequest:
        """Build a request from an absolute URL, keeping only its encoded path."""
        parsed = httpx.URL(url)
        request_headers = httpx.Headers(headers)
        host = request_headers.get("host") or parsed.netloc.decode("ascii")
        return cls(
            scheme=parsed.scheme,
            host=host,
            path=parsed.raw_path.decode("ascii").split("?", 1)[0],
            headers=request_headers,
        )


class DispatchOutcome(BaseModel):
    """Either a redirect target or nothing."""

    model_config = ConfigDict(frozen=True)

    kind: OutcomeKind
    location: str | None = None

    @classmethod
    def redirected(cls, location: str) -> DispatchOutcome:
        return cls(kind=OutcomeKind.REDIRECTED, location=location)

    @classmethod
    def not_found(cls) -> DispatchOutcome:
        return cls(kind=OutcomeKind.NOT_FOUND)

    @property
    def is_redirect(self) -> bool:
        return self.kind == OutcomeKind.REDIRECTED


class DispatcherConfig(BaseModel):
    """Immutable dispatcher configuration. Build it with :meth:`create`."""

    model_config = ConfigDict(frozen=True)

    access_key: str = Field(..., min_length=1, description="Credential sent as X-gbi-key")
    lookup_timeout_ms: int = Field(
        default=MIN_LOOKUP_TIMEOUT_MS,
        ge=MIN_LOOKUP_TIMEOUT_MS,
        description="Per-resolver lookup timeout in milliseconds",
    )
    default_fallback_page: str | None = Field(
        default=None,
        description="Internal page used when no resolver knows a redirect",
    )

    @property
    def lookup_timeout(self) -> float:
        """Lookup timeout in seconds."""
        return self.lookup_timeout_ms / 1000

    @classmethod
    def create(
        cls,
        access_key: str | None,
        lookup_timeout_ms: Any = None,
        default_fallback_page: str | None = None,
    ) -> DispatcherConfig:
        """
        Validate raw configuration values.

        A missing or blank access key is fatal. A timeout below the floor, or one
        that is not an integer, falls back to the floor with a warning.

        Raises:
            ConfigurationError: If the access key is absent or blank
        """
        if access_key is None or not access_key.strip():
            raise ConfigurationError("xGbiKey must be set")

        timeout_ms = MIN_LOOKUP_TIMEOUT_MS
        try:
            configured = int(lookup_timeout_ms)
        except (TypeError, ValueError):
            logger.warning(
                f"invalid parameter timeout ({lookup_timeout_ms!r}). "
                f"Used minimum timeout of {MIN_LOOKUP_TIMEOUT_MS}ms"
            )
        else:
            if configured < MIN_LOOKUP_TIMEOUT_MS:
                logger.warning(
                    f"configured timeout ({configured}) must be more than "
                    f"minimum of {MIN_LOOKUP_TIMEOUT_MS}"
                )
            else:
                timeout_ms = configured

        page = default_fallback_page.strip() if default_fallback_page else None
        if not page:
            logger.warning("no default 404 page set")
            page = None

        return cls(
            access_key=access_key,
            lookup_timeout_ms=timeout_ms,
            default_fallback_page=page,
        )
