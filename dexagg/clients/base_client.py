"""
Base Client Classes

Shared HTTP plumbing for the aggregator clients: client lifecycle, timeout
management, and the error taxonomy every vendor call reports through.
No retries are attempted; every failure is raised to the caller.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from dexagg.logging import log
from dexagg.settings.config import settings

ModelT = TypeVar("ModelT", bound=BaseModel)


class AggregatorClientError(Exception):
    """Base exception for aggregator client failures."""


class TransportError(AggregatorClientError):
    """Connection, DNS or timeout failure."""


class SerializationError(AggregatorClientError):
    """Request record could not be encoded."""


class DecodeError(AggregatorClientError):
    """Response body did not match the expected schema."""


class UnexpectedStatusError(AggregatorClientError):
    """Vendor answered with a non-200 status."""

    def __init__(self, status_code: int, body: Optional[str] = None, separator: str = ", response: "):
        self.status_code = status_code
        self.body = body
        message = f"unexpected status code: {status_code}"
        if body is not None:
            message = f"{message}{separator}{body}"
        super().__init__(message)


class BaseHTTPClient:
    """
    Base class for synchronous HTTP API clients.

    Provides common functionality:
    - HTTP client management
    - Request timeout management
    - Error wrapping with the original cause chained
    """

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize base HTTP client.

        Args:
            base_url: Base URL for the vendor API
            timeout: Request timeout in seconds (default: settings.http_timeout_seconds)
            headers: Headers sent with every request
            transport: Optional httpx transport (used to stub the vendor in tests)
        """
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            timeout=httpx.Timeout(timeout if timeout is not None else settings.http_timeout_seconds),
            headers=headers,
            transport=transport,
        )

    @property
    def timeout(self) -> httpx.Timeout:
        return self._client.timeout

    def _set_timeout(self, timeout: float) -> None:
        self._client.timeout = httpx.Timeout(timeout)

    def _send(self, method: str, url: str, *, action: str, **kwargs: Any) -> httpx.Response:
        """
        Perform a single request.

        Args:
            method: HTTP method (GET, POST)
            url: Absolute request URL
            action: Short description used in the error message ("get quote")
            **kwargs: Additional arguments for httpx request

        Raises:
            TransportError: If the request could not be completed
        """
        try:
            return self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise TransportError(f"failed to {action}: {exc}") from exc

    @staticmethod
    def _encode(model: BaseModel) -> bytes:
        try:
            return model.model_dump_json(by_alias=True).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"failed to marshal request: {exc}") from exc

    @staticmethod
    def _decode(model_cls: Type[ModelT], payload: bytes) -> ModelT:
        try:
            return model_cls.model_validate(json.loads(payload))
        except (ValueError, ValidationError) as exc:
            raise DecodeError(f"failed to decode response: {exc}") from exc

    @staticmethod
    def _check_status(
        response: httpx.Response,
        include_body: bool = True,
        separator: str = ", response: ",
    ) -> None:
        if response.status_code == httpx.codes.OK:
            return
        body = response.text if include_body else None
        log.bind(status_code=response.status_code, response_body=body).error(
            f"Request to {response.request.url} failed with status {response.status_code}"
        )
        raise UnexpectedStatusError(response.status_code, body, separator)

    def close(self) -> None:
        """Close HTTP client."""
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
