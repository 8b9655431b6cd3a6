"""KyberSwap aggregator client, scoped to one chain."""

from __future__ import annotations

import time
from typing import Optional

import httpx

from dexagg.clients.base_client import BaseHTTPClient
from dexagg.logging import log
from dexagg.models.kyberswap import (
    BuildRouteRequest,
    BuildRouteResponse,
    RouteResponse,
    RouteSummary,
)
from dexagg.settings.config import KYBERSWAP_BASE_URL, KYBERSWAP_DEFAULT_CHAIN, settings

SLIPPAGE_TOLERANCE_BPS = 10  # 0.1%
DEADLINE_OFFSET_SECONDS = 20 * 3600


class KyberSwapClient(BaseHTTPClient):
    """Route discovery and route building against ``aggregator-api.kyberswap.com``."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        chain: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        root = (base_url or settings.kyberswap_base_url or KYBERSWAP_BASE_URL).rstrip("/")
        self.chain = chain or settings.kyberswap_chain or KYBERSWAP_DEFAULT_CHAIN
        super().__init__(f"{root}/{self.chain}", timeout=timeout, transport=transport)

    def get_routes(self, token_in: str, token_out: str, amount_in: str) -> RouteResponse:
        """Fetch the best route for swapping ``amount_in`` of ``token_in`` into ``token_out``."""
        params = {"tokenIn": token_in, "tokenOut": token_out, "amountIn": amount_in}
        url = str(httpx.URL(f"{self.base_url}/api/v1/routes", params=params))
        log.info(f"url: {url}")

        response = self._send("GET", url, action="send request")
        self._check_status(response, include_body=False)
        return self._decode(RouteResponse, response.content)

    def build_route(self, route_summary: RouteSummary, sender: str, recipient: str) -> BuildRouteResponse:
        """
        Turn a route summary into executable calldata.

        Slippage tolerance is fixed at ``SLIPPAGE_TOLERANCE_BPS`` and the
        deadline is the current time plus ``DEADLINE_OFFSET_SECONDS``.
        """
        request = BuildRouteRequest(
            route_summary=route_summary,
            sender=sender,
            recipient=recipient,
            deadline=int(time.time()) + DEADLINE_OFFSET_SECONDS,
            slippage_tolerance=SLIPPAGE_TOLERANCE_BPS,
        )
        body = self._encode(request)
        log.debug(f"jsonBody: {body.decode('utf-8')}")

        url = f"{self.base_url}/api/v1/route/build"
        response = self._send(
            "POST",
            url,
            action="send request",
            content=body,
            headers={"Content-Type": "application/json"},
        )
        self._check_status(response, separator=": ")
        return self._decode(BuildRouteResponse, response.content)

    def with_timeout(self, timeout: float) -> "KyberSwapClient":
        """Set a custom timeout (seconds) and return the client for chaining."""
        self._set_timeout(timeout)
        return self
