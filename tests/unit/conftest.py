"""Unit test fixtures with HTTP mocking and in-memory collaborators."""

from __future__ import annotations

import httpx
import pytest
import respx

from redirecthandler.core.exceptions import ResolverUnavailableError
from redirecthandler.resolution.base import LookupResponse, LookupTransport, ResponseSink

# ============================================================================
# HTTP Mocking Fixtures
# ============================================================================


@pytest.fixture
def respx_mock():
    """Provide a respx mock router for HTTP mocking.

    Use this when you need fine-grained control over mocked responses.
    The mock is automatically started and stopped by respx.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


# ============================================================================
# In-memory Collaborators
# ============================================================================


class FakeLookupTransport(LookupTransport):
    """Answers lookups from a table keyed by endpoint prefix."""

    def __init__(self, answers: dict[str, LookupResponse | Exception]) -> None:
        self.answers = answers
        self.calls: list[tuple[str, list[tuple[bytes, bytes]], int]] = []
        self.closed = False

    async def lookup(
        self,
        url: str,
        headers: list[tuple[bytes, bytes]],
        timeout_ms: int,
    ) -> LookupResponse:
        self.calls.append((url, headers, timeout_ms))
        endpoint = url.split("?r=", 1)[0]
        answer = self.answers.get(endpoint, LookupResponse(status_code=404))
        if isinstance(answer, Exception):
            raise answer
        return answer

    async def close(self) -> None:
        self.closed = True

    @property
    def queried_endpoints(self) -> list[str]:
        return [url.split("?r=", 1)[0] for url, _, _ in self.calls]


class RecordingSink(ResponseSink):
    """Remembers which terminal action was taken."""

    def __init__(self, forward_error: Exception | None = None) -> None:
        self.redirects: list[str] = []
        self.forwards: list[str] = []
        self._forward_error = forward_error

    async def send_redirect(self, location: str) -> None:
        self.redirects.append(location)

    async def forward(self, page: str) -> None:
        self.forwards.append(page)
        if self._forward_error is not None:
            raise self._forward_error


@pytest.fixture
def fake_transport_factory():
    """Factory fixture building a FakeLookupTransport from an answer table."""
    def _build(answers: dict[str, LookupResponse | Exception] | None = None) -> FakeLookupTransport:
        return FakeLookupTransport(answers or {})
    return _build


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def failing_sink() -> RecordingSink:
    """Sink whose forward always blows up."""
    return RecordingSink(forward_error=RuntimeError("dispatcher gone"))


# ============================================================================
# Response Helpers
# ============================================================================


def redirect_answer(location: str, status_code: int = 301) -> LookupResponse:
    return LookupResponse(
        status_code=status_code,
        headers=httpx.Headers({"Location": location}),
    )


@pytest.fixture
def make_redirect():
    """Factory fixture for 3xx resolver answers."""
    return redirect_answer


@pytest.fixture
def unavailable():
    """Factory fixture for resolver failures."""
    def _build(source: str) -> ResolverUnavailableError:
        return ResolverUnavailableError(message="Connection refused", source=source)
    return _build
