"""Core types, models, and utilities."""

from .exceptions import (
    ConfigurationError,
    FallbackForwardError,
    RedirectHandlerError,
    ResolverUnavailableError,
)
from .models import (
    MIN_LOOKUP_TIMEOUT_MS,
    DispatchOutcome,
    DispatchRequest,
    DispatcherConfig,
)
from .types import HeaderName, OutcomeKind
from .urls import is_local_host, is_valid_url

__all__ = [
    # Types
    "HeaderName",
    "OutcomeKind",
    # Models
    "MIN_LOOKUP_TIMEOUT_MS",
    "DispatchOutcome",
    "DispatchRequest",
    "DispatcherConfig",
    # URLs
    "is_local_host",
    "is_valid_url",
    # Exceptions
    "ConfigurationError",
    "FallbackForwardError",
    "RedirectHandlerError",
    "ResolverUnavailableError",
]
