"""Pydantic models for the KyberSwap aggregator API."""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field

from dexagg.models.base import WireModel


class KyberModel(WireModel):
    pass


class ExtraFee(KyberModel):
    model_config = ConfigDict(extra="allow")

    fee_amount: str = ""
    charge_fee_by: str = ""
    is_in_bps: bool = False
    fee_receiver: str = ""


class PoolExtra(KyberModel):
    model_config = ConfigDict(extra="allow")

    block_number: int = 0
    token_in_index: int = 0
    token_out_index: int = 0
    underlying: bool = False
    token_in_is_native: bool = Field(default=False, alias="TokenInIsNative")
    token_out_is_native: bool = Field(default=False, alias="TokenOutIsNative")


class Route(KyberModel):
    """A single pool hop inside a route."""

    model_config = ConfigDict(extra="allow")

    pool: str = ""
    token_in: str = ""
    token_out: str = ""
    limit_return_amount: str = ""
    swap_amount: str = ""
    amount_out: str = ""
    exchange: str = ""
    pool_length: int = 0
    pool_type: str = ""
    pool_extra: PoolExtra | None = None
    extra: Any = None


class RouteSummary(KyberModel):
    """Route summary as returned by ``GET /api/v1/routes``.

    Keys the models do not declare (``routeID``, ``checksum``, ``timestamp``,
    pool-specific extras) are kept all the way down, since the build endpoint
    expects the summary back unchanged.
    """

    model_config = ConfigDict(extra="allow")

    token_in: str = ""
    amount_in: str = ""
    amount_in_usd: str = ""
    token_in_market_price_available: bool = False
    token_out: str = ""
    amount_out: str = ""
    amount_out_usd: str = ""
    token_out_market_price_available: bool = False
    gas: str = ""
    gas_price: str = ""
    gas_usd: str = ""
    extra_fee: ExtraFee = Field(default_factory=ExtraFee)
    route: list[list[Route]] = Field(default_factory=list)


class RouteData(KyberModel):
    route_summary: RouteSummary = Field(default_factory=RouteSummary)
    router_address: str = ""


class RouteResponse(KyberModel):
    code: int = 0
    message: str = ""
    data: RouteData = Field(default_factory=RouteData)
    request_id: str = ""


class BuildRouteRequest(KyberModel):
    """Body of ``POST /api/v1/route/build``."""

    route_summary: RouteSummary
    sender: str
    recipient: str
    deadline: int
    # Basis points: 10 means 0.1%
    slippage_tolerance: int


class OutputChange(KyberModel):
    amount: str = ""
    percent: float = 0.0
    level: int = 0


class BuildRouteData(KyberModel):
    amount_in: str = ""
    amount_in_usd: str = ""
    amount_out: str = ""
    amount_out_usd: str = ""
    gas: str = ""
    gas_usd: str = ""
    output_change: OutputChange = Field(default_factory=OutputChange)
    data: str = ""
    router_address: str = ""
    transaction_value: str = ""


class BuildRouteResponse(KyberModel):
    code: int = 0
    message: str = ""
    data: BuildRouteData = Field(default_factory=BuildRouteData)
    request_id: str = ""
