"""Custom exception hierarchy for redirecthandler."""

from typing import Any


class RedirectHandlerError(Exception):
    """Base exception for all redirecthandler errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(RedirectHandlerError):
    """Startup configuration is missing or invalid."""

    pass


class ResolverUnavailableError(RedirectHandlerError):
    """A redirect resolver could not be reached or answered garbage."""

    def __init__(
        self,
        message: str,
        source: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.source = source
        self.status_code = status_code


class FallbackForwardError(RedirectHandlerError):
    """Forwarding to the default fallback page failed."""

    def __init__(
        self,
        message: str,
        page: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.page = page
