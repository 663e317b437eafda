"""Validated pool of redirect resolver endpoints."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator

from redirecthandler.core.exceptions import ConfigurationError
from redirecthandler.core.urls import is_valid_url

logger = logging.getLogger(__name__)


class ResolverPool:
    """
    Immutable set of resolver endpoint URLs.

    Built once at startup and shared read-only by every dispatch. Each call to
    :meth:`pick_order` returns a fresh random permutation, so load spreads over
    all resolvers and a single dispatch tries each endpoint at most once.
    """

    def __init__(
        self,
        endpoints: tuple[str, ...],
        *,
        rng: random.Random | None = None,
    ) -> None:
        if not endpoints:
            raise ConfigurationError("Resolver pool must not be empty")
        self._endpoints = endpoints
        self._rng = rng or random.Random()

    @classmethod
    def build(
        cls,
        raw: str | None,
        separator: str = ",",
        *,
        allow_local_urls: bool = True,
        rng: random.Random | None = None,
    ) -> ResolverPool:
        """
        Parse a separated list of endpoint URLs.

        Invalid tokens are dropped, duplicates keep their first position, and
        URLs are compared exactly as written.

        Raises:
            ConfigurationError: If no valid endpoint remains
        """
        if raw is None or not raw.strip():
            raise ConfigurationError("redirectProcessorUrls must be set")

        endpoints: list[str] = []
        for token in raw.split(separator):
            candidate = token.strip()
            if not is_valid_url(candidate, allow_local=allow_local_urls):
                logger.debug(f"Ignoring invalid resolver url: {candidate!r}")
                continue
            if candidate not in endpoints:
                endpoints.append(candidate)

        if not endpoints:
            raise ConfigurationError(
                "redirectProcessorUrls must be set",
                details={"raw": raw},
            )

        logger.info(f"Configured {len(endpoints)} redirect resolver(s)")
        return cls(tuple(endpoints), rng=rng)

    @property
    def endpoints(self) -> tuple[str, ...]:
        return self._endpoints

    def pick_order(self) -> list[str]:
        """Return every endpoint exactly once, in uniformly random order."""
        order = list(self._endpoints)
        # random.shuffle is Fisher-Yates
        self._rng.shuffle(order)
        return order

    def __len__(self) -> int:
        return len(self._endpoints)

    def __iter__(self) -> Iterator[str]:
        return iter(self._endpoints)

    def __contains__(self, endpoint: object) -> bool:
        return endpoint in self._endpoints

    def __repr__(self) -> str:
        return f"ResolverPool({list(self._endpoints)!r})"
