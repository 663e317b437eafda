"""Resolver pool, lookup transport and fallback dispatch."""

from redirecthandler.resolution.base import LookupResponse, LookupTransport, ResponseSink
from redirecthandler.resolution.dispatcher import FallbackDispatcher
from redirecthandler.resolution.pool import ResolverPool
from redirecthandler.resolution.transport import HttpxLookupTransport

__all__ = [
    # Base
    "LookupResponse",
    "LookupTransport",
    "ResponseSink",
    # Pool
    "ResolverPool",
    # Transport
    "HttpxLookupTransport",
    # Dispatcher
    "FallbackDispatcher",
]
