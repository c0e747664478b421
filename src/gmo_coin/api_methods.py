"""
API method implementations for the GMO Coin client.

Contains every endpoint as a pure description of the request to send and
the envelope type its answer decodes into. Nothing here performs I/O: the
blocking and asyncio transports in http_client.py both execute the same
ApiCall objects, so signing, payload shape and decoding are written once.
"""

import json
import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Type, Union

from .auth import ApiCredentials, GmoSigner, current_timestamp_ms
from .constants import DEFAULT_COUNT, DEFAULT_PAGE, SUCCESS_STATUS
from .enums import ExecutionType, KlineInterval, LeverageSymbol, Side, Symbol
from .errors import DeserializationError, ExchangeApiError, TransportError
from .models.account import Asset, Margin, TradingVolume
from .models.config import ConnectionConfig
from .models.envelope import Response, ResponseList, ResponsePage
from .models.market import ExchangeStatus, Kline, LatestRate, Snapshot, SymbolRule, Trade
from .models.orders import (
    ActiveOrder,
    CancelOrdersResult,
    Execution,
    ExecutionsParam,
    LatestExecution,
    OpenPosition,
    OrderInfo,
    PositionSummary,
    SettlePosition,
)
from .utils import build_url, format_date, join_ids, serialize_body

logger = logging.getLogger(__name__)

SymbolLike = Union[Symbol, LeverageSymbol, str]
Amount = Union[Decimal, str, int]


@dataclass(frozen=True)
class ApiCall:
    """
    Description of one endpoint call.

    ``data_type`` is the type of ``data`` for a plain Response, or the item
    type for ResponsePage/ResponseList envelopes.
    """
    method: str
    path: str
    data_type: Any
    envelope: Type[Response] = Response
    params: Dict[str, Any] = field(default_factory=dict)
    payload: Optional[Dict[str, Any]] = None
    private: bool = False

    def decode(self, payload: Any) -> Response:
        return self.envelope.from_dict(payload, self.data_type)


@dataclass(frozen=True)
class PreparedRequest:
    """Exact request to put on the wire."""
    method: str
    url: str
    headers: Dict[str, str]
    body: str = ""


def prepare_request(
    call: ApiCall,
    config: ConnectionConfig,
    credentials: Optional[ApiCredentials] = None,
) -> PreparedRequest:
    """
    Build the wire request for ``call``.

    For private calls the timestamp is captured once and used for both the
    signature and ``API-TIMESTAMP``; credentials fall back to the
    environment when not given. The signed body and the transmitted body are
    the same string.
    """
    base_url = config.private_base_url if call.private else config.public_base_url
    url = build_url(base_url, call.path, call.params)
    body = serialize_body(call.payload) if call.method == "POST" else ""

    headers = {"User-Agent": config.user_agent, "Accept": "application/json"}
    if call.method == "POST":
        headers["Content-Type"] = "application/json"

    if call.private:
        timestamp = current_timestamp_ms()
        signer = GmoSigner(credentials or ApiCredentials.from_env())
        headers.update(signer.auth_headers(timestamp, call.method, call.path, body))

    logger.debug(f"Prepared {call.method} {url}")
    return PreparedRequest(method=call.method, url=url, headers=headers, body=body)


def decode_response(call: ApiCall, status_code: int, body: Union[bytes, str]) -> Response:
    """
    Turn an HTTP status and raw body into a typed envelope.

    Both transports hand over the undecoded bytes; they are decoded here as
    strict UTF-8.

    Raises:
        TransportError: non-2xx HTTP status
        DeserializationError: body is not UTF-8 JSON or does not match the schema
        ExchangeApiError: the envelope carries a nonzero status
    """
    if not 200 <= status_code < 300:
        text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
        raise TransportError(
            f"HTTP {status_code} for {call.method} {call.path}: {text[:200]}",
            status_code=status_code,
            body=text,
        )

    try:
        text = body.decode("utf-8") if isinstance(body, bytes) else body
    except UnicodeDecodeError as e:
        raise DeserializationError(
            f"Response body for {call.path} is not valid UTF-8: {e}", body=body
        ) from e

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise DeserializationError(
            f"Invalid JSON response for {call.path}: {text[:200]}", body=text
        ) from e

    if isinstance(payload, dict):
        status = _envelope_status(payload.get("status"))
        if status is not None and status != SUCCESS_STATUS:
            raise ExchangeApiError(
                status,
                messages=payload.get("messages") if isinstance(payload.get("messages"), list) else None,
                responsetime=payload.get("responsetime"),
            )

    return call.decode(payload)


def _envelope_status(value: Any) -> Optional[int]:
    """Envelope status as an int (numeric strings accepted), None if unusable."""
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _token(value: Any, enum_cls: Type[Enum]) -> str:
    """Render an enum member or free text as the canonical token of ``enum_cls``."""
    if isinstance(value, Enum):
        value = value.value
    return enum_cls.parse(value).value


def _execution_type(value: Union[ExecutionType, str]) -> str:
    if isinstance(value, str):
        value = value.upper()
    return ExecutionType(value).value


def _amount(value: Amount) -> str:
    # Plain positional notation; the exchange rejects "5E+6"
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def _page_params(page: Optional[int], count: Optional[int]) -> Dict[str, int]:
    return {
        "page": DEFAULT_PAGE if page is None else page,
        "count": DEFAULT_COUNT if count is None else count,
    }


class PublicApi:
    """Request builders for the unauthenticated market-data endpoints."""

    def status(self) -> ApiCall:
        return ApiCall("GET", "/v1/status", ExchangeStatus)

    def ticker(self, symbol: Optional[SymbolLike] = None) -> ApiCall:
        """All symbols when ``symbol`` is None."""
        params = {} if symbol is None else {"symbol": _token(symbol, Symbol)}
        return ApiCall("GET", "/v1/ticker", List[LatestRate], params=params)

    def orderbooks(self, symbol: SymbolLike) -> ApiCall:
        return ApiCall(
            "GET", "/v1/orderbooks", Snapshot, params={"symbol": _token(symbol, Symbol)}
        )

    def trades(
        self,
        symbol: SymbolLike,
        page: Optional[int] = None,
        count: Optional[int] = None,
    ) -> ApiCall:
        """``page``/``count`` are only sent when given; the server defaults otherwise."""
        params: Dict[str, Any] = {"symbol": _token(symbol, Symbol)}
        if page is not None:
            params["page"] = page
        if count is not None:
            params["count"] = count
        return ApiCall("GET", "/v1/trades", Trade, envelope=ResponsePage, params=params)

    def klines(
        self,
        symbol: SymbolLike,
        interval: Union[KlineInterval, str],
        date: Union[date, str],
    ) -> ApiCall:
        """
        Candlesticks for one day (``YYYYMMDD`` or a date).

        Which interval/date combinations have data is decided by the
        exchange; the client does not check it.
        """
        params = {
            "symbol": _token(symbol, Symbol),
            "interval": _token(interval, KlineInterval),
            "date": format_date(date),
        }
        return ApiCall("GET", "/v1/klines", List[Kline], params=params)

    def symbols(self) -> ApiCall:
        return ApiCall("GET", "/v1/symbols", List[SymbolRule])


class PrivateApi:
    """Request builders for the signed account and trading endpoints."""

    # Account

    def margin(self) -> ApiCall:
        return ApiCall("GET", "/v1/account/margin", Margin, private=True)

    def assets(self) -> ApiCall:
        return ApiCall("GET", "/v1/account/assets", List[Asset], private=True)

    def trading_volume(self) -> ApiCall:
        return ApiCall("GET", "/v1/account/tradingVolume", TradingVolume, private=True)

    # Orders and executions

    def orders(self, order_id: Union[int, str, Iterable[int]]) -> ApiCall:
        """One order id, or several (sent comma-separated)."""
        return ApiCall(
            "GET",
            "/v1/orders",
            OrderInfo,
            envelope=ResponseList,
            params={"orderId": join_ids(order_id)},
            private=True,
        )

    def active_orders(
        self,
        symbol: SymbolLike,
        page: Optional[int] = None,
        count: Optional[int] = None,
    ) -> ApiCall:
        params = {"symbol": _token(symbol, Symbol), **_page_params(page, count)}
        return ApiCall(
            "GET", "/v1/activeOrders", ActiveOrder,
            envelope=ResponsePage, params=params, private=True,
        )

    def executions(self, param: ExecutionsParam) -> ApiCall:
        return ApiCall(
            "GET", "/v1/executions", Execution,
            envelope=ResponseList, params=param.to_query(), private=True,
        )

    def latest_executions(
        self,
        symbol: SymbolLike,
        page: Optional[int] = None,
        count: Optional[int] = None,
    ) -> ApiCall:
        params = {"symbol": _token(symbol, Symbol), **_page_params(page, count)}
        return ApiCall(
            "GET", "/v1/latestExecutions", LatestExecution,
            envelope=ResponsePage, params=params, private=True,
        )

    # Positions

    def open_positions(
        self,
        symbol: SymbolLike,
        page: Optional[int] = None,
        count: Optional[int] = None,
    ) -> ApiCall:
        params = {"symbol": _token(symbol, Symbol), **_page_params(page, count)}
        return ApiCall(
            "GET", "/v1/openPositions", OpenPosition,
            envelope=ResponsePage, params=params, private=True,
        )

    def position_summary(self, symbol: SymbolLike) -> ApiCall:
        return ApiCall(
            "GET", "/v1/positionSummary", PositionSummary,
            envelope=ResponseList, params={"symbol": _token(symbol, Symbol)}, private=True,
        )

    # Order lifecycle

    def order(
        self,
        symbol: SymbolLike,
        side: Union[Side, str],
        execution_type: Union[ExecutionType, str],
        size: Amount,
        price: Optional[Amount] = None,
    ) -> ApiCall:
        """
        New order. ``price`` must be given for LIMIT/STOP and omitted for
        MARKET; when None the key is left out of the payload entirely.
        """
        payload: Dict[str, Any] = {
            "symbol": _token(symbol, Symbol),
            "side": _token(side, Side),
            "executionType": _execution_type(execution_type),
            "size": _amount(size),
        }
        if price is not None:
            payload["price"] = _amount(price)
        return ApiCall("POST", "/v1/order", str, payload=payload, private=True)

    def change_order(
        self,
        order_id: int,
        price: Amount,
        losscut_price: Optional[Amount] = None,
    ) -> ApiCall:
        payload: Dict[str, Any] = {"orderId": int(order_id), "price": _amount(price)}
        if losscut_price is not None:
            payload["losscutPrice"] = _amount(losscut_price)
        return ApiCall("POST", "/v1/changeOrder", None, payload=payload, private=True)

    def cancel_order(self, order_id: int) -> ApiCall:
        return ApiCall(
            "POST", "/v1/cancelOrder", None, payload={"orderId": int(order_id)}, private=True
        )

    def cancel_orders(self, order_ids: Iterable[int]) -> ApiCall:
        payload = {"orderIds": [int(order_id) for order_id in order_ids]}
        return ApiCall("POST", "/v1/cancelOrders", CancelOrdersResult, payload=payload, private=True)

    def cancel_bulk_order(self, symbols: Iterable[SymbolLike]) -> ApiCall:
        """Cancel every open order on the given symbols; answers the cancelled ids."""
        payload = {"symbols": [_token(symbol, Symbol) for symbol in symbols]}
        return ApiCall("POST", "/v1/cancelBulkOrder", List[int], payload=payload, private=True)

    def close_order(
        self,
        symbol: Union[LeverageSymbol, str],
        side: Union[Side, str],
        execution_type: Union[ExecutionType, str],
        settle_position: SettlePosition,
        price: Optional[Amount] = None,
    ) -> ApiCall:
        """Close one leveraged position (sent as a one-element settlePosition list)."""
        payload: Dict[str, Any] = {
            "symbol": _token(symbol, LeverageSymbol),
            "side": _token(side, Side),
            "executionType": _execution_type(execution_type),
            "settlePosition": [settle_position.to_dict()],
        }
        if price is not None:
            payload["price"] = _amount(price)
        return ApiCall("POST", "/v1/closeOrder", str, payload=payload, private=True)

    def close_bulk_order(
        self,
        symbol: Union[LeverageSymbol, str],
        side: Union[Side, str],
        execution_type: Union[ExecutionType, str],
        size: Amount,
        price: Optional[Amount] = None,
    ) -> ApiCall:
        payload: Dict[str, Any] = {
            "symbol": _token(symbol, LeverageSymbol),
            "side": _token(side, Side),
            "executionType": _execution_type(execution_type),
            "size": _amount(size),
        }
        if price is not None:
            payload["price"] = _amount(price)
        return ApiCall("POST", "/v1/closeBulkOrder", str, payload=payload, private=True)

    def change_losscut_price(self, position_id: int, losscut_price: Amount) -> ApiCall:
        payload = {"positionId": int(position_id), "losscutPrice": _amount(losscut_price)}
        return ApiCall("POST", "/v1/changeLosscutPrice", None, payload=payload, private=True)
