"""Odos smart order router client.

Wraps the token pricing, quote and assemble endpoints of ``api.odos.xyz``.
"""

from __future__ import annotations

from typing import Optional

import httpx

from dexagg.clients.base_client import BaseHTTPClient
from dexagg.logging import log
from dexagg.models.odos import (
    AssembleRequest,
    AssembleResponse,
    PriceResponse,
    QuoteRequest,
    QuoteResponse,
)
from dexagg.settings.config import ODOS_BASE_URL, settings

ODOS_APP_ORIGIN = "https://app.odos.xyz"

ODOS_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "*/*",
    "Origin": ODOS_APP_ORIGIN,
    "Referer": f"{ODOS_APP_ORIGIN}/",
}


class OdosClient(BaseHTTPClient):
    """Typed access to the Odos pricing, quote and assemble endpoints."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        super().__init__(
            base_url or settings.odos_base_url or ODOS_BASE_URL,
            timeout=timeout,
            transport=transport,
        )

    def get_token_price(self, chain_id: str | int, token_address: str) -> PriceResponse:
        """Return the USD price Odos reports for ``token_address`` on ``chain_id``."""
        url = f"{self.base_url}/pricing/token/{chain_id}/{token_address}"
        log.info(f"url: {url}")

        response = self._send("GET", url, action="get token price")
        # Status is not checked here: the body is decoded whatever the code
        return self._decode(PriceResponse, response.content)

    def quote(self, request: QuoteRequest) -> QuoteResponse:
        """Generate a swap quote (``POST /sor/quote/v2``)."""
        url = f"{self.base_url}/sor/quote/v2"
        body = self._encode(request)

        response = self._send("POST", url, action="get quote", content=body, headers=ODOS_HEADERS)
        return self._decode(QuoteResponse, response.content)

    def assemble(self, user_addr: str, path_id: str, simulate: bool = False) -> AssembleResponse:
        """
        Assemble a previously quoted path into a transaction.

        Args:
            user_addr: Address that will sign and send the transaction
            path_id: ``pathId`` from a quote response
            simulate: Ask Odos to simulate the transaction

        Raises:
            UnexpectedStatusError: On any non-200 answer; message carries the raw body
        """
        url = f"{self.base_url}/sor/assemble"
        body = self._encode(AssembleRequest(user_addr=user_addr, path_id=path_id, simulate=simulate))

        response = self._send("POST", url, action="assemble transaction", content=body, headers=ODOS_HEADERS)
        # Body is buffered by httpx; keep it for the error path
        payload = response.content
        log.info(f"response body: {response.text}")

        self._check_status(response)
        return self._decode(AssembleResponse, payload)
