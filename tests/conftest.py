# -*- coding: utf-8 -*-
"""
Shared fixtures and utilities for testing the GMO Coin client.
"""

import json
import pytest
import aiohttp
import requests
from typing import Any, Dict
from unittest.mock import AsyncMock, MagicMock, Mock

from gmo_coin.auth import ApiCredentials
from gmo_coin.models.config import ConnectionConfig

RESPONSETIME = "2021-01-01T00:00:00.000Z"


def envelope(data: Any = None, status: int = 0) -> Dict[str, Any]:
    """Wrap ``data`` in the exchange's response envelope."""
    payload: Dict[str, Any] = {"status": status, "responsetime": RESPONSETIME}
    if data is not None:
        payload["data"] = data
    return payload


def response_body(payload: Any = None, text: str = None, content: bytes = None) -> bytes:
    """Raw response bytes: ``content`` as is, else ``text`` or ``payload`` as UTF-8 JSON."""
    if content is not None:
        return content
    return (text if text is not None else json.dumps(payload)).encode("utf-8")


def make_requests_session(
    payload: Any = None, status_code: int = 200, text: str = None, content: bytes = None
) -> Mock:
    """Mock requests.Session answering every request with one response."""
    response = Mock()
    response.status_code = status_code
    response.content = response_body(payload, text, content)
    session = Mock(spec=requests.Session)
    session.request.return_value = response
    return session


def make_aiohttp_session(
    payload: Any = None, status: int = 200, text: str = None, content: bytes = None
) -> Mock:
    """Mock aiohttp.ClientSession whose request() works as an async context manager."""
    response = Mock()
    response.status = status
    response.read = AsyncMock(return_value=response_body(payload, text, content))

    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=response)
    context.__aexit__ = AsyncMock(return_value=False)

    session = Mock(spec=aiohttp.ClientSession)
    session.request = Mock(return_value=context)
    session.closed = False
    session.close = AsyncMock()
    return session


# Configuration fixtures
@pytest.fixture
def connection_config() -> ConnectionConfig:
    return ConnectionConfig()


@pytest.fixture
def credentials() -> ApiCredentials:
    return ApiCredentials(api_key="test-key", api_secret="test-secret")


# Mock data fixtures
@pytest.fixture
def status_payload() -> Dict[str, Any]:
    return envelope({"status": "OPEN"})


@pytest.fixture
def ticker_payload() -> Dict[str, Any]:
    return envelope([
        {
            "ask": "750760",
            "bid": "750600",
            "high": "762302",
            "last": "756662",
            "low": "704874",
            "symbol": "BTC",
            "timestamp": "2018-03-30T12:34:56.789Z",
            "volume": "194785.8484",
        }
    ])


@pytest.fixture
def orderbooks_payload() -> Dict[str, Any]:
    return envelope({
        "asks": [
            {"price": "455659", "size": "0.1"},
            {"price": "455660", "size": "0.2"},
        ],
        "bids": [
            {"price": "455665", "size": "0.1"},
        ],
        "symbol": "BTC",
    })


@pytest.fixture
def trades_payload() -> Dict[str, Any]:
    return envelope({
        "pagination": {"currentPage": 1, "count": 30},
        "list": [
            {
                "price": "750760",
                "side": "BUY",
                "size": "0.1",
                "timestamp": "2018-03-30T12:34:56.789Z",
            }
        ],
    })


@pytest.fixture
def klines_payload() -> Dict[str, Any]:
    return envelope([
        {
            "openTime": "1618588800000",
            "open": "6418255",
            "high": "6518250",
            "low": "6318250",
            "close": "6418253",
            "volume": "0.0001",
        }
    ])


@pytest.fixture
def symbols_payload() -> Dict[str, Any]:
    return envelope([
        {
            "symbol": "BTC",
            "minOrderSize": "0.0001",
            "maxOrderSize": "5",
            "sizeStep": "0.0001",
            "tickSize": "1",
            "takerFee": "0.0005",
            "makerFee": "-0.0001",
        },
        {
            "symbol": "BTC_JPY",
            "minOrderSize": "0.01",
            "maxOrderSize": "5",
            "sizeStep": "0.01",
            "tickSize": "1",
            "takerFee": "0",
            "makerFee": "0",
        },
    ])


@pytest.fixture
def margin_payload() -> Dict[str, Any]:
    return envelope({
        "actualProfitLoss": "68286188",
        "availableAmount": "57262506",
        "margin": "1021682",
        "profitLoss": "0",
    })


@pytest.fixture
def active_orders_payload() -> Dict[str, Any]:
    return envelope({
        "pagination": {"currentPage": 1, "count": 1},
        "list": [
            {
                "rootOrderId": 123456789,
                "orderId": 123456789,
                "symbol": "BTC",
                "side": "BUY",
                "orderType": "NORMAL",
                "executionType": "LIMIT",
                "settleType": "OPEN",
                "size": "1",
                "executedSize": "0",
                "price": "840000",
                "losscutPrice": "0",
                "status": "ORDERED",
                "timeInForce": "FAS",
                "timestamp": "2019-03-19T01:07:24.217Z",
            }
        ],
    })


@pytest.fixture
def error_payload() -> Dict[str, Any]:
    return {
        "status": 5,
        "messages": [
            {"message_code": "ERR-5201", "message_string": "MAINTENANCE. Please wait for a while"}
        ],
        "responsetime": RESPONSETIME,
    }
