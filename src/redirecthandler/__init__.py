"""Redirecthandler - not-found fallback dispatcher backed by redirect resolvers."""

__version__ = "0.1.0"

from redirecthandler.client import RedirectHandlerClient, build_dispatcher, lookup_redirect
from redirecthandler.config import RedirectHandlerSettings
from redirecthandler.core.exceptions import (
    ConfigurationError,
    FallbackForwardError,
    RedirectHandlerError,
    ResolverUnavailableError,
)
from redirecthandler.core.models import DispatchOutcome, DispatchRequest, DispatcherConfig
from redirecthandler.core.types import OutcomeKind
from redirecthandler.resolution import (
    FallbackDispatcher,
    HttpxLookupTransport,
    LookupTransport,
    ResolverPool,
    ResponseSink,
)

__all__ = [
    # Client
    "RedirectHandlerClient",
    "build_dispatcher",
    "lookup_redirect",
    "RedirectHandlerSettings",
    # Models
    "DispatchOutcome",
    "DispatchRequest",
    "DispatcherConfig",
    "OutcomeKind",
    # Resolution
    "FallbackDispatcher",
    "HttpxLookupTransport",
    "LookupTransport",
    "ResolverPool",
    "ResponseSink",
    # Errors
    "ConfigurationError",
    "FallbackForwardError",
    "RedirectHandlerError",
    "ResolverUnavailableError",
    # Version
    "__version__",
]
