"""Shared test fixtures.

Provides:
- ``recorder`` - an ``httpx.MockTransport`` that records every request
  and answers with a canned response
- ``api_client`` - an ``OsintApiClient`` wired to ``recorder``
- ``make_client`` - factory for clients with custom config / responses
"""

from collections.abc import Callable

import httpx
import pytest

from osint_mcp.client import ApiClientConfig, OsintApiClient

BASE_URL = "http://osint.test"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response] | None = None):
        self.requests: list[httpx.Request] = []
        self._responder = responder or (lambda request: httpx.Response(200, json={"ok": True}))
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


@pytest.fixture
def recorder() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def make_client():
    """Build a client against ``BASE_URL`` with the given transport and config."""

    def _make(transport: httpx.MockTransport | None = None, **config) -> OsintApiClient:
        config.setdefault("base_url", BASE_URL)
        return OsintApiClient(ApiClientConfig(**config), transport=transport or RecordingTransport())

    return _make


@pytest.fixture
def api_client(recorder, make_client) -> OsintApiClient:
    return make_client(recorder)
