"""Pydantic models for the Odos smart order router API.

Attribute names are snake_case; the wire names used by Odos are carried as
aliases, so requests must be dumped with ``by_alias=True``.
"""

from __future__ import annotations

from pydantic import Field

from dexagg.models.base import WireModel


class OdosModel(WireModel):
    pass


class PriceResponse(OdosModel):
    currency_id: str = ""
    price: float = 0.0


class InputToken(OdosModel):
    token_address: str
    amount: str


class OutputToken(OdosModel):
    token_address: str
    proportion: float


class QuoteRequest(OdosModel):
    """Body of ``POST /sor/quote/v2``."""

    chain_id: int
    input_tokens: list[InputToken]
    output_tokens: list[OutputToken]
    gas_price: float = 0.0
    user_addr: str = ""
    # Percent, not bps: 0.5 means 0.5%
    slippage_limit_percent: float = 0.3
    source_blacklist: list[str] = Field(default_factory=list)
    source_whitelist: list[str] = Field(default_factory=list)
    pool_blacklist: list[str] = Field(default_factory=list)
    path_viz: bool = False
    referral_code: int = 0
    compact: bool = True
    like_asset: bool = False
    disable_rfqs: bool = Field(default=False, alias="disableRFQs")
    # Faster, less thorough quote when set
    simple: bool = False


class PathVizNode(OdosModel):
    """Token node in the path visualization."""

    name: str = ""
    symbol: str = ""
    decimals: int = 0
    visible: bool = False
    width: int = 0


class PathVizTokenInfo(OdosModel):
    """Token details attached to a path link."""

    name: str = ""
    symbol: str = ""
    decimals: int = 0
    asset_id: str = Field(default="", alias="asset_id")
    asset_type: str = Field(default="", alias="asset_type")
    is_rebasing: bool = Field(default=False, alias="is_rebasing")
    cgid: str = ""


class PathLink(OdosModel):
    source: int = 0
    target: int = 0
    source_extend: bool = False
    target_extend: bool = False
    label: str = ""
    value: float = 0.0
    next_value: float = 0.0
    step_value: float = 0.0
    in_value: float = Field(default=0.0, alias="in_value")
    out_value: float = Field(default=0.0, alias="out_value")
    edge_len: int = Field(default=0, alias="edge_len")
    source_token: PathVizTokenInfo = Field(default_factory=PathVizTokenInfo)
    target_token: PathVizTokenInfo = Field(default_factory=PathVizTokenInfo)


class PathViz(OdosModel):
    nodes: list[PathVizNode] = Field(default_factory=list)
    links: list[PathLink] = Field(default_factory=list)


class QuoteResponse(OdosModel):
    in_tokens: list[str] = Field(default_factory=list)
    out_tokens: list[str] = Field(default_factory=list)
    in_amounts: list[str] = Field(default_factory=list)
    out_amounts: list[str] = Field(default_factory=list)
    gas_estimate: float = 0.0
    data_gas_estimate: int = 0
    gwei_per_gas: float = 0.0
    gas_estimate_value: float = 0.0
    in_values: list[float] = Field(default_factory=list)
    out_values: list[float] = Field(default_factory=list)
    net_out_value: float = 0.0
    price_impact: float | None = None
    percent_diff: float = 0.0
    partner_fee_percent: float = 0.0
    path_id: str = ""
    # Null unless the quote was requested with pathViz
    path_viz: PathViz | None = None
    block_number: int = 0


class AssembleRequest(OdosModel):
    """Body of ``POST /sor/assemble``."""

    user_addr: str
    path_id: str
    simulate: bool = False


class Transaction(OdosModel):
    gas: int = 0
    gas_price: int = 0
    value: str = ""
    to: str = ""
    from_address: str = Field(default="", alias="from")
    data: str = ""
    nonce: int = 0
    chain_id: int = 0


class Simulation(OdosModel):
    is_success: bool = False
    amounts_out: list[int] = Field(default_factory=list)
    gas_estimate: int = 0
    simulation_error: str | dict | None = None


class AssembledToken(OdosModel):
    """Token amount as echoed back by assemble; partial entries default to empty."""

    token_address: str = ""
    amount: str = ""


class AssembleResponse(OdosModel):
    deprecated: str | None = None
    block_number: int = 0
    gas_estimate: int = 0
    gas_estimate_value: float = 0.0
    input_tokens: list[AssembledToken] = Field(default_factory=list)
    output_tokens: list[AssembledToken] = Field(default_factory=list)
    net_out_value: float = 0.0
    out_values: list[str] = Field(default_factory=list)
    transaction: Transaction = Field(default_factory=Transaction)
    simulation: Simulation | None = None
