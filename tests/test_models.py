from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from dexagg.models.kyberswap import BuildRouteRequest, RouteResponse, RouteSummary
from dexagg.models.odos import AssembleRequest, InputToken, OutputToken, QuoteRequest, QuoteResponse

DAI = "0x6B175474E89094C44Da98b954EedeAC495271d0F"
WSTETH = "0x7f39C581F595B53c5cb19bD0b3f8dA6c935E2Ca0"


def test_quote_request_emits_every_vendor_field():
    request = QuoteRequest(
        chain_id=1,
        input_tokens=[InputToken(token_address=DAI, amount="1")],
        output_tokens=[OutputToken(token_address=WSTETH, proportion=1)],
    )

    assert set(request.model_dump(by_alias=True)) == {
        "chainId",
        "inputTokens",
        "outputTokens",
        "gasPrice",
        "userAddr",
        "slippageLimitPercent",
        "sourceBlacklist",
        "sourceWhitelist",
        "poolBlacklist",
        "pathViz",
        "referralCode",
        "compact",
        "likeAsset",
        "disableRFQs",
        "simple",
    }


def test_quote_request_requires_tokens():
    with pytest.raises(ValidationError):
        QuoteRequest(chain_id=1)


def test_request_records_survive_json_round_trip():
    quote = QuoteRequest(
        chain_id=8453,
        input_tokens=[InputToken(token_address=DAI, amount="250000000000000000000")],
        output_tokens=[OutputToken(token_address=WSTETH, proportion=0.5), OutputToken(token_address=DAI, proportion=0.5)],
        gas_price=0.05,
        user_addr="0x1111111111111111111111111111111111111111",
        source_blacklist=["Uniswap V2"],
        disable_rfqs=True,
        simple=True,
    )
    assemble = AssembleRequest(user_addr="0x1111111111111111111111111111111111111111", path_id="abc", simulate=True)
    build = BuildRouteRequest(
        route_summary=RouteSummary(token_in=DAI, amount_in="1", route=[[{"pool": "0xpool", "poolLength": 2}]]),
        sender="0x1111111111111111111111111111111111111111",
        recipient="0x2222222222222222222222222222222222222222",
        deadline=1_700_072_000,
        slippage_tolerance=10,
    )

    for record in (quote, assemble, build):
        wire = json.loads(record.model_dump_json(by_alias=True))
        assert type(record).model_validate(wire) == record


def test_snake_case_wire_names_are_kept():
    response = QuoteResponse.model_validate(
        {
            "pathViz": {
                "links": [
                    {
                        "in_value": 1.5,
                        "out_value": 1.4,
                        "edge_len": 3,
                        "sourceToken": {"asset_id": "dai", "asset_type": "token", "is_rebasing": True, "cgid": "dai"},
                    }
                ]
            }
        }
    )

    link = response.path_viz.links[0]
    assert (link.in_value, link.out_value, link.edge_len) == (1.5, 1.4, 3)
    assert link.source_token.is_rebasing is True
    assert link.model_dump(by_alias=True)["sourceToken"]["asset_type"] == "token"


def test_route_response_defaults_missing_fields():
    response = RouteResponse.model_validate({"code": 4008, "message": "route not found"})

    assert response.code == 4008
    assert response.data.route_summary.amount_out == ""
    assert response.request_id == ""


def test_route_summary_keeps_pool_specific_extras():
    summary = RouteSummary.model_validate(
        {"route": [[{"pool": "0xpool", "poolExtra": {"fee": 500, "TokenInIsNative": True}, "extra": {"a": 1}}]]}
    )

    dumped = summary.model_dump(by_alias=True)["route"][0][0]
    assert dumped["poolExtra"]["fee"] == 500
    assert dumped["poolExtra"]["TokenInIsNative"] is True
    assert dumped["extra"] == {"a": 1}


def test_null_on_undeclared_summary_keys_is_echoed_back():
    summary = RouteSummary.model_validate({"gas": None, "routeID": None, "checksum": "42"})

    dumped = summary.model_dump(by_alias=True)
    assert dumped["gas"] == ""
    assert dumped["routeID"] is None
    assert dumped["checksum"] == "42"
