"""Core enums and type definitions."""

from enum import StrEnum


class OutcomeKind(StrEnum):
    """Result of one dispatch attempt."""

    REDIRECTED = "redirected"
    NOT_FOUND = "not_found"


class HeaderName(StrEnum):
    """Header names with special meaning to the dispatcher."""

    # Credential sent to every resolver
    GBI_KEY = "X-gbi-key"

    # Never forwarded, it names the wrong origin
    HOST = "Host"

    LOCATION = "Location"

    # Marks internal fallback sub-requests so they are not dispatched again
    FORWARDED = "X-Redirecthandler-Forwarded"
