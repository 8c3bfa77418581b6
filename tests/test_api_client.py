"""Tests for the chain API client and result pagination."""

import asyncio
import logging

import aiohttp
import pytest

from conftest import MockResponse, MockSession

from transeos import InvalidArgumentError, UpstreamError, ValidationError
from transeos.api import ChainApiClient, ErrorResponse, OrderFilters, asset_symbol, paginate

CODE = "transledger"
EXCHANGE = "gizmoexchnge"


def make_client(network, payload=None, status=200, text=None, error=None, body=None):
    session = MockSession(MockResponse(payload, status, text, body), error=error)
    return ChainApiClient(network, session=session), session


def order_row(user, sender, base, counter, key="1"):
    return {"key": key, "user": user, "sender": sender, "base": base, "counter": counter}


class TestPaginate:
    def test_last_partial_page(self):
        rows = list(range(25))
        result = paginate(rows, page=3, limit=10)
        assert result.docs == [20, 21, 22, 23, 24]
        assert result.total == 25
        assert result.limit == 10
        assert result.page == 3
        assert result.pages == 3

    def test_no_limit_returns_everything(self):
        rows = list(range(7))
        result = paginate(rows)
        assert result.docs == rows
        assert result.total == 7
        assert result.limit == 7
        assert result.page == 1
        assert result.pages == 1

    def test_limit_without_page_starts_at_first_page(self):
        result = paginate(list(range(5)), limit=2)
        assert result.docs == [0, 1]
        assert result.pages == 3

    def test_page_past_the_end_is_empty(self):
        result = paginate(list(range(5)), page=4, limit=2)
        assert result.docs == []
        assert result.total == 5

    def test_empty_rows(self):
        result = paginate([], page=1, limit=10)
        assert result.docs == []
        assert result.pages == 0

    def test_negative_page(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            paginate([1], page=-1, limit=1)
        assert exc_info.value.field == "page"

    def test_negative_limit(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            paginate([1], page=1, limit=-5)
        assert exc_info.value.field == "limit"

    def test_zero_page_rejected(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            paginate([1], page=0, limit=1)
        assert exc_info.value.field == "page"

    def test_zero_limit_returns_everything(self):
        result = paginate([1, 2, 3], limit=0)
        assert result.docs == [1, 2, 3]
        assert result.pages == 1

    def test_numeric_strings(self):
        result = paginate(list(range(5)), page="2", limit="2")
        assert result.docs == [2, 3]

    @pytest.mark.parametrize("field,kwargs", [("limit", {"limit": "abc"}), ("page", {"page": "x"}), ("page", {"page": True})])
    def test_non_integer_arguments(self, field, kwargs):
        with pytest.raises(InvalidArgumentError) as exc_info:
            paginate([1], **kwargs)
        assert exc_info.value.field == field

    def test_to_dict(self):
        assert paginate(["a"]).to_dict() == {
            "docs": ["a"],
            "total": 1,
            "limit": 1,
            "page": 1,
            "pages": 1,
        }


class TestAssetSymbol:
    def test_symbol(self):
        assert asset_symbol("1.0000 TBTC") == "TBTC"

    def test_malformed(self):
        assert asset_symbol("1.0000") is None
        assert asset_symbol(None) is None


class TestOrderFilters:
    def test_filters_are_anded(self):
        rows = [
            order_row("alice", "relayer", "1.0000 TBTC", "10.00 TUSD"),
            order_row("alice", "other", "1.0000 TBTC", "10.00 TUSD"),
            order_row("bob", "relayer", "1.0000 TBTC", "10.00 TUSD"),
        ]
        filters = OrderFilters(user="alice", sender="relayer")
        assert filters.apply(rows) == [rows[0]]

    def test_from_dict_accepts_camel_case(self):
        filters = OrderFilters.from_dict({"baseSymbol": "TBTC", "counter_symbol": "TUSD", "limit": 5})
        assert filters.base_symbol == "TBTC"
        assert filters.counter_symbol == "TUSD"
        assert filters.limit == 5
        assert filters.page is None


class TestErrorResponse:
    def test_prefers_what(self):
        body = {"code": 500, "message": "Internal Service Error", "error": {"what": "unknown key"}}
        assert ErrorResponse.from_dict(body).get_message() == "unknown key"

    def test_falls_back_to_message(self):
        assert ErrorResponse.from_dict({"message": "Not Found"}).get_message() == "Not Found"

    def test_unknown(self):
        assert ErrorResponse.from_dict({}).get_message() == "Unknown error"


class TestChainApiClientRequests:
    def test_base_url(self, network):
        client = ChainApiClient(network)
        assert client.base_url == "http://127.0.0.1:8888"

    @pytest.mark.asyncio
    async def test_currency_balance_request(self, network):
        client, session = make_client(network, ["1.0000 TBTC"])
        result = await client.get_currency_balance(CODE, "alice", "TBTC")

        assert result == ["1.0000 TBTC"]
        request = session.requests[0]
        assert request["url"] == "http://127.0.0.1:8888/v1/chain/get_currency_balance"
        assert request["body"] == {"code": CODE, "account": "alice", "symbol": "TBTC"}
        assert request["headers"]["Content-Type"].startswith("application/x-www-form-urlencoded")

    @pytest.mark.asyncio
    async def test_currency_balance_omits_missing_symbol(self, network):
        client, session = make_client(network, [])
        await client.get_currency_balance(CODE, "alice")
        assert session.requests[0]["body"] == {"code": CODE, "account": "alice"}

    @pytest.mark.asyncio
    async def test_table_rows_request(self, network):
        client, session = make_client(network, {"rows": [{"a": 1}], "more": False})
        rows = await client.get_table_rows(CODE, "alice", "allowed")

        assert rows == [{"a": 1}]
        assert session.requests[0]["url"].endswith("/v1/chain/get_table_rows")
        assert session.requests[0]["body"] == {
            "code": CODE,
            "scope": "alice",
            "table": "allowed",
            "json": True,
            "limit": 1000,
        }

    @pytest.mark.asyncio
    async def test_table_rows_follows_next_key(self, network):
        session = MockSession(
            [
                MockResponse({"rows": [{"id": 1}, {"id": 2}], "more": True, "next_key": "3"}),
                MockResponse({"rows": [{"id": 3}], "more": False, "next_key": ""}),
            ]
        )
        client = ChainApiClient(network, session=session)
        rows = await client.get_table_rows(EXCHANGE, EXCHANGE, "orders", limit=2)

        assert rows == [{"id": 1}, {"id": 2}, {"id": 3}]
        assert len(session.requests) == 2
        assert session.requests[0]["body"]["limit"] == 2
        assert "lower_bound" not in session.requests[0]["body"]
        assert session.requests[1]["body"]["lower_bound"] == "3"

    @pytest.mark.asyncio
    async def test_table_rows_more_without_next_key(self, network, caplog):
        client, session = make_client(network, {"rows": [{"id": 1}], "more": True})
        with caplog.at_level(logging.WARNING, logger="transeos.api.client"):
            rows = await client.get_table_rows(CODE, "alice", "allowed")
        assert rows == [{"id": 1}]
        assert len(session.requests) == 1
        assert "no next_key" in caplog.text

    @pytest.mark.asyncio
    async def test_orders_span_several_table_calls(self, network):
        first = [order_row("alice", "relayer", "1.0000 TBTC", "10.00 TUSD", key=str(i)) for i in range(3)]
        second = [order_row("alice", "relayer", "1.0000 TBTC", "10.00 TUSD", key=str(i)) for i in range(3, 5)]
        session = MockSession(
            [
                MockResponse({"rows": first, "more": True, "next_key": "3"}),
                MockResponse({"rows": second, "more": False}),
            ]
        )
        client = ChainApiClient(network, session=session)
        result = await client.get_orders(EXCHANGE, {"limit": 2})
        assert result.total == 5
        assert result.pages == 3

    @pytest.mark.asyncio
    async def test_extra_headers(self, network):
        session = MockSession(MockResponse([]))
        client = ChainApiClient(network, headers={"X-Api-Key": "k"}, session=session)
        await client.get_currency_balance(CODE, "alice")
        assert session.requests[0]["headers"]["X-Api-Key"] == "k"


class TestChainApiClientQueries:
    @pytest.mark.asyncio
    async def test_balance_filters_by_symbol(self, network):
        client, _ = make_client(network, ["1.0000 TBTC", "2.00 TUSD"])
        result = await client.get_balance(CODE, "alice", symbol="TUSD")
        assert result.docs == ["2.00 TUSD"]
        assert result.total == 1

    @pytest.mark.asyncio
    async def test_balance_pagination(self, network):
        balances = [f"{i}.0000 TBTC" for i in range(25)]
        client, _ = make_client(network, balances)
        result = await client.get_balance(CODE, "alice", page=3, limit=10)
        assert result.docs == balances[20:25]
        assert result.pages == 3
        assert result.total == 25

    @pytest.mark.asyncio
    async def test_balance_missing_account_makes_no_request(self, network):
        client, session = make_client(network, [])
        with pytest.raises(ValidationError) as exc_info:
            await client.get_balance(CODE, "")
        assert exc_info.value.to_dict() == {
            "name": "Missing arguments",
            "statusCode": 400,
            "message": "Account name is not provided!",
        }
        assert session.requests == []

    @pytest.mark.asyncio
    async def test_allowance_filters(self, network):
        rows = [
            {"spender": "carol", "quantity": "5.00 TUSD"},
            {"spender": "carol", "quantity": "1.0000 TBTC"},
            {"spender": "dave", "quantity": "5.00 TUSD"},
        ]
        client, session = make_client(network, {"rows": rows})
        result = await client.get_allowance(CODE, "alice", spender="carol", symbol="TUSD")

        assert result.docs == [rows[0]]
        assert session.requests[0]["body"]["scope"] == "alice"
        assert session.requests[0]["body"]["table"] == "allowed"

    @pytest.mark.asyncio
    async def test_allowance_missing_account(self, network):
        client, _ = make_client(network, {"rows": []})
        with pytest.raises(ValidationError):
            await client.get_allowance(CODE, None)

    @pytest.mark.asyncio
    async def test_orders_by_symbols(self, network):
        rows = [
            order_row("alice", "relayer", "1.0000 TBTC", "10.00 TUSD", key="1"),
            order_row("bob", "relayer", "2.00 TUSD", "0.2000 TBTC", key="2"),
            order_row("carol", "relayer", "3.0000 TBTC", "30.00 TUSD", key="3"),
        ]
        client, session = make_client(network, {"rows": rows})
        result = await client.get_orders(EXCHANGE, {"baseSymbol": "TBTC", "counterSymbol": "TUSD"})

        assert [row["key"] for row in result.docs] == ["1", "3"]
        assert session.requests[0]["body"]["scope"] == EXCHANGE
        assert session.requests[0]["body"]["table"] == "orders"

    @pytest.mark.asyncio
    async def test_orders_without_filters(self, network):
        rows = [order_row("alice", "relayer", "1.0000 TBTC", "10.00 TUSD")]
        client, _ = make_client(network, {"rows": rows})
        result = await client.get_orders(EXCHANGE)
        assert result.docs == rows
        assert result.pages == 1

    @pytest.mark.asyncio
    async def test_orders_paginated(self, network):
        rows = [order_row("alice", "relayer", "1.0000 TBTC", "10.00 TUSD", key=str(i)) for i in range(5)]
        client, _ = make_client(network, {"rows": rows})
        result = await client.get_orders(EXCHANGE, OrderFilters(user="alice", page=2, limit=2))
        assert [row["key"] for row in result.docs] == ["2", "3"]
        assert result.pages == 3


class TestChainApiClientErrors:
    @pytest.mark.asyncio
    async def test_http_error_uses_node_message(self, network):
        body = '{"code": 500, "message": "Internal Service Error", "error": {"what": "Table not found"}}'
        client, _ = make_client(network, status=500, text=body)
        with pytest.raises(UpstreamError) as exc_info:
            await client.get_table_rows(CODE, "alice", "allowed")
        err = exc_info.value
        assert err.status_code == 500
        assert err.name == "HttpError"
        assert "Table not found" in err.message

    @pytest.mark.asyncio
    async def test_http_error_with_plain_text(self, network):
        client, _ = make_client(network, status=502, text="Bad Gateway")
        with pytest.raises(UpstreamError) as exc_info:
            await client.get_currency_balance(CODE, "alice")
        assert "Bad Gateway" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_http_error_with_non_utf8_body(self, network):
        client, _ = make_client(network, status=500, body=b"\xff\xfe bad")
        with pytest.raises(UpstreamError) as exc_info:
            await client.get_table_rows(CODE, "alice", "allowed")
        err = exc_info.value
        assert err.status_code == 500
        assert err.name == "HttpError"
        assert "bad" in err.message

    @pytest.mark.asyncio
    async def test_non_utf8_success_body(self, network):
        client, _ = make_client(network, body=b"\xff\xfe")
        with pytest.raises(UpstreamError) as exc_info:
            await client.get_currency_balance(CODE, "alice")
        assert exc_info.value.name == "DeserializeError"

    @pytest.mark.asyncio
    async def test_transport_error(self, network):
        client, _ = make_client(network, error=aiohttp.ClientConnectionError("refused"))
        with pytest.raises(UpstreamError) as exc_info:
            await client.get_balance(CODE, "alice")
        assert exc_info.value.status_code == 500
        assert exc_info.value.name == "ClientConnectionError"

    @pytest.mark.asyncio
    async def test_timeout(self, network):
        client, _ = make_client(network, error=asyncio.TimeoutError())
        with pytest.raises(UpstreamError) as exc_info:
            await client.get_balance(CODE, "alice")
        assert exc_info.value.message == "Request failed"

    @pytest.mark.asyncio
    async def test_undecodable_body(self, network):
        client, _ = make_client(network, text="<html>")
        with pytest.raises(UpstreamError) as exc_info:
            await client.get_currency_balance(CODE, "alice")
        assert exc_info.value.name == "DeserializeError"

    @pytest.mark.asyncio
    async def test_unexpected_shape(self, network):
        client, _ = make_client(network, {"rows": "nope"})
        with pytest.raises(UpstreamError):
            await client.get_table_rows(CODE, "alice", "allowed")


class TestChainApiClientSession:
    @pytest.mark.asyncio
    async def test_injected_session_is_not_closed(self, network):
        client, session = make_client(network, [])
        async with client:
            await client.get_currency_balance(CODE, "alice")
        assert session.closed is False

    @pytest.mark.asyncio
    async def test_owned_session_is_closed(self, network):
        client = ChainApiClient(network)
        async with client:
            session = client._session
            assert session is not None
        assert session.closed
        assert client._session is None
