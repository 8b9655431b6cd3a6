"""Test configuration and fixtures.

Vendor endpoints are stubbed with ``httpx.MockTransport``; nothing here talks
to the network. Live checks live in ``test_live_aggregators.py`` and run only
when DEXAGG_LIVE_TESTS=1.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

# Keep test logs out of the working tree; must happen before dexagg is imported
os.environ.setdefault("LOG_FILE", str(Path(tempfile.gettempdir()) / "dexagg_tests" / "dexagg.log"))

from dexagg.logging import setup_logging  # noqa: E402

setup_logging()


def pytest_configure(config):
    config.addinivalue_line("markers", "live: talks to the real vendor APIs (needs DEXAGG_LIVE_TESTS=1)")


class StubVendor:
    """Records every request and answers with a canned response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: Any = {}
        self.error: Exception | None = None

    def respond(self, status_code: int = 200, body: Any = None) -> "StubVendor":
        self.status_code = status_code
        self.body = {} if body is None else body
        return self

    def fail(self, error: Exception) -> "StubVendor":
        self.error = error
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request reached the stub"
        return self.requests[-1]

    def last_json(self) -> dict[str, Any]:
        return json.loads(self.last_request.content)


@pytest.fixture
def stub_vendor() -> StubVendor:
    return StubVendor()


@pytest.fixture
def connect_error() -> Callable[[str], httpx.ConnectError]:
    def _make(message: str = "connection refused") -> httpx.ConnectError:
        return httpx.ConnectError(message)

    return _make
