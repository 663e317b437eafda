"""URL validation for resolver endpoints."""

from __future__ import annotations

import ipaddress

from pydantic import HttpUrl, TypeAdapter, ValidationError

_http_url_adapter = TypeAdapter(HttpUrl)

_LOCAL_SUFFIXES = (".local", ".localhost", ".localdomain", ".internal")


def is_local_host(host: str) -> bool:
    """
    Check whether ``host`` points at the local machine or network.

    Covers ``localhost``, single-label names, ``*.local`` and friends, and
    loopback, private and link-local addresses.
    """
    host = host.strip("[]").rstrip(".").lower()
    try:
        ip = ipaddress.ip_address(host)
    except ValueError:
        return "." not in host or host == "localhost" or host.endswith(_LOCAL_SUFFIXES)
    return ip.is_loopback or ip.is_private or ip.is_link_local


def is_valid_url(url: str, *, allow_local: bool = True) -> bool:
    """
    Check that ``url`` is a well-formed absolute http(s) URL.

    Args:
        url: Candidate URL
        allow_local: Accept loopback and local-network hosts

    Returns:
        True if pydantic accepts it as an ``HttpUrl`` and the host is allowed
    """
    try:
        parsed = _http_url_adapter.validate_python(url)
    except ValidationError:
        return False

    if parsed.host is None:
        return False
    return allow_local or not is_local_host(parsed.host)
