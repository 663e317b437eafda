"""Shared test fixtures for all tests."""

from __future__ import annotations

import httpx
import pytest

from redirecthandler.config import RedirectHandlerSettings
from redirecthandler.core.models import DispatchRequest, DispatcherConfig

# ============================================================================
# Test Data Constants
# ============================================================================


ACCESS_KEY = "38e34544bf26e1b5cf91f3b1d4589a18"
RESOLVER_1 = "https://redirectprocessor1.local/redirecthandler/"
RESOLVER_2 = "http://redirectprocessor2.local/redirecthandler"
RESOLVER_3 = "https://resolver.example.com/lookup"


# ============================================================================
# Request Fixtures
# ============================================================================


@pytest.fixture
def dispatch_request() -> DispatchRequest:
    """A not-found request with a Host header and a repeated header."""
    return DispatchRequest(
        scheme="https",
        host="www.example.com",
        path="/old/page",
        headers=httpx.Headers(
            [
                ("Host", "www.example.com"),
                ("User-Agent", "Mozilla/5.0"),
                ("Accept-Language", "de-CH"),
                ("Accept-Language", "en"),
                ("Cookie", "session=abc"),
            ]
        ),
    )


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def dispatcher_config() -> DispatcherConfig:
    """Dispatcher config with a fallback page."""
    return DispatcherConfig.create(
        access_key=ACCESS_KEY,
        lookup_timeout_ms=2000,
        default_fallback_page="/DefaultErrorHandler",
    )


@pytest.fixture
def dispatcher_config_no_fallback() -> DispatcherConfig:
    """Dispatcher config without a fallback page."""
    return DispatcherConfig.create(access_key=ACCESS_KEY, lookup_timeout_ms=2000)


@pytest.fixture
def mock_settings() -> RedirectHandlerSettings:
    """Create complete settings for testing."""
    return RedirectHandlerSettings(
        _env_file=None,
        x_gbi_key=ACCESS_KEY,
        redirect_processor_urls=f"{RESOLVER_1},{RESOLVER_2}",
        timeout=2000,
        default_404_page="/DefaultErrorHandler",
        log_level="DEBUG",
    )


@pytest.fixture
def mock_settings_minimal() -> RedirectHandlerSettings:
    """Create settings with only the required values."""
    return RedirectHandlerSettings(
        _env_file=None,
        x_gbi_key=ACCESS_KEY,
        redirect_processor_urls=RESOLVER_3,
    )
