"""
GMO Coin private API clients.

GmoPrivateClient (blocking) and AsyncGmoPrivateClient (asyncio) expose the
signed account and trading endpoints with identical methods. Request
construction lives in api_methods.py; the clients only choose a transport.

Credentials are either passed in explicitly or, when omitted, read from
GMO_COIN_API_KEY / GMO_COIN_SECRET_KEY on every request.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

import aiohttp
import requests
from dotenv import load_dotenv

from .api_methods import Amount, PrivateApi, SymbolLike
from .auth import ApiCredentials
from .enums import ExecutionType, LeverageSymbol, Side
from .http_client import AsyncHttpClient, HttpClient
from .models.account import Asset, Margin
from .models.config import ConnectionConfig
from .models.envelope import Response, ResponseList, ResponsePage
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

load_dotenv()
logger = logging.getLogger(__name__)

OrderIds = Union[int, str, Iterable[int]]


class GmoPrivateClient:
    """
    Blocking client for the private (signed) API.

    Example:
        with GmoPrivateClient.from_env() as client:
            margin = client.margin().data
    """

    def __init__(
        self,
        credentials: Optional[ApiCredentials] = None,
        config: Optional[ConnectionConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the private client.

        Args:
            credentials: API key and secret; read from the environment per
                request when omitted
            config: Connection settings; production endpoints by default
            session: Optional requests.Session to reuse (not closed by the client)
        """
        self._config = config or ConnectionConfig()
        self._api = PrivateApi()
        self._http_client = HttpClient(self._config, credentials, session)

    @classmethod
    def from_env(cls, config: Optional[ConnectionConfig] = None) -> "GmoPrivateClient":
        """Create a client with credentials read once from the environment."""
        return cls(ApiCredentials.from_env(), config)

    # Account methods
    def margin(self) -> Response[Margin]:
        """Available margin."""
        return self._http_client.execute(self._api.margin())

    def assets(self) -> Response[List[Asset]]:
        """Balances per asset."""
        return self._http_client.execute(self._api.assets())

    def trading_volume(self) -> Response[Dict[str, Any]]:
        """Trading volume and fee tier information, as returned."""
        return self._http_client.execute(self._api.trading_volume())

    # Order and execution queries
    def orders(self, order_id: OrderIds) -> ResponseList[OrderInfo]:
        """Look up one or several orders by id."""
        return self._http_client.execute(self._api.orders(order_id))

    def active_orders(
        self,
        symbol: SymbolLike,
        page: Optional[int] = None,
        count: Optional[int] = None,
    ) -> ResponsePage[ActiveOrder]:
        """Open orders for ``symbol`` (page 1 / 100 per page by default)."""
        return self._http_client.execute(self._api.active_orders(symbol, page, count))

    def executions(self, param: ExecutionsParam) -> ResponseList[Execution]:
        """Fills selected by order id or execution id."""
        return self._http_client.execute(self._api.executions(param))

    def latest_executions(
        self,
        symbol: SymbolLike,
        page: Optional[int] = None,
        count: Optional[int] = None,
    ) -> ResponsePage[LatestExecution]:
        """Most recent fills for ``symbol``."""
        return self._http_client.execute(self._api.latest_executions(symbol, page, count))

    # Position queries
    def open_positions(
        self,
        symbol: SymbolLike,
        page: Optional[int] = None,
        count: Optional[int] = None,
    ) -> ResponsePage[OpenPosition]:
        """Open leveraged positions for ``symbol``."""
        return self._http_client.execute(self._api.open_positions(symbol, page, count))

    def position_summary(self, symbol: SymbolLike) -> ResponseList[PositionSummary]:
        """Position totals per side for ``symbol``."""
        return self._http_client.execute(self._api.position_summary(symbol))

    # Order lifecycle
    def order(
        self,
        symbol: SymbolLike,
        side: Union[Side, str],
        execution_type: Union[ExecutionType, str],
        size: Amount,
        price: Optional[Amount] = None,
    ) -> Response[str]:
        """
        Place a new order; ``data`` is the new order id.

        ``price`` is required for LIMIT and STOP and must be omitted for MARKET.
        """
        return self._http_client.execute(
            self._api.order(symbol, side, execution_type, size, price)
        )

    def change_order(
        self,
        order_id: int,
        price: Amount,
        losscut_price: Optional[Amount] = None,
    ) -> Response[None]:
        """Change the price (and optionally losscut price) of an open order."""
        return self._http_client.execute(self._api.change_order(order_id, price, losscut_price))

    def cancel_order(self, order_id: int) -> Response[None]:
        """Cancel one order."""
        return self._http_client.execute(self._api.cancel_order(order_id))

    def cancel_orders(self, order_ids: Iterable[int]) -> Response[CancelOrdersResult]:
        """Cancel several orders by id."""
        return self._http_client.execute(self._api.cancel_orders(order_ids))

    def cancel_bulk_order(self, symbols: Iterable[SymbolLike]) -> Response[List[int]]:
        """Cancel every open order on ``symbols``."""
        return self._http_client.execute(self._api.cancel_bulk_order(symbols))

    def close_order(
        self,
        symbol: Union[LeverageSymbol, str],
        side: Union[Side, str],
        execution_type: Union[ExecutionType, str],
        settle_position: SettlePosition,
        price: Optional[Amount] = None,
    ) -> Response[str]:
        """Close (part of) one leveraged position."""
        return self._http_client.execute(
            self._api.close_order(symbol, side, execution_type, settle_position, price)
        )

    def close_bulk_order(
        self,
        symbol: Union[LeverageSymbol, str],
        side: Union[Side, str],
        execution_type: Union[ExecutionType, str],
        size: Amount,
        price: Optional[Amount] = None,
    ) -> Response[str]:
        """Close ``size`` across all positions of ``symbol`` on the opposite side."""
        return self._http_client.execute(
            self._api.close_bulk_order(symbol, side, execution_type, size, price)
        )

    def change_losscut_price(self, position_id: int, losscut_price: Amount) -> Response[None]:
        """Move the losscut price of an open position."""
        return self._http_client.execute(self._api.change_losscut_price(position_id, losscut_price))

    def close(self) -> None:
        """Close client and cleanup resources."""
        self._http_client.close()
        logger.info("GMO Coin private client closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class AsyncGmoPrivateClient:
    """
    asyncio client for the private (signed) API.

    Same methods as GmoPrivateClient, as coroutines.
    """

    def __init__(
        self,
        credentials: Optional[ApiCredentials] = None,
        config: Optional[ConnectionConfig] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """Initialize the private client (see GmoPrivateClient)."""
        self._config = config or ConnectionConfig()
        self._api = PrivateApi()
        self._http_client = AsyncHttpClient(self._config, credentials, session)

    @classmethod
    def from_env(cls, config: Optional[ConnectionConfig] = None) -> "AsyncGmoPrivateClient":
        """Create a client with credentials read once from the environment."""
        return cls(ApiCredentials.from_env(), config)

    # Account methods
    async def margin(self) -> Response[Margin]:
        return await self._http_client.execute(self._api.margin())

    async def assets(self) -> Response[List[Asset]]:
        return await self._http_client.execute(self._api.assets())

    async def trading_volume(self) -> Response[Dict[str, Any]]:
        return await self._http_client.execute(self._api.trading_volume())

    # Order and execution queries
    async def orders(self, order_id: OrderIds) -> ResponseList[OrderInfo]:
        return await self._http_client.execute(self._api.orders(order_id))

    async def active_orders(
        self,
        symbol: SymbolLike,
        page: Optional[int] = None,
        count: Optional[int] = None,
    ) -> ResponsePage[ActiveOrder]:
        return await self._http_client.execute(self._api.active_orders(symbol, page, count))

    async def executions(self, param: ExecutionsParam) -> ResponseList[Execution]:
        return await self._http_client.execute(self._api.executions(param))

    async def latest_executions(
        self,
        symbol: SymbolLike,
        page: Optional[int] = None,
        count: Optional[int] = None,
    ) -> ResponsePage[LatestExecution]:
        return await self._http_client.execute(self._api.latest_executions(symbol, page, count))

    # Position queries
    async def open_positions(
        self,
        symbol: SymbolLike,
        page: Optional[int] = None,
        count: Optional[int] = None,
    ) -> ResponsePage[OpenPosition]:
        return await self._http_client.execute(self._api.open_positions(symbol, page, count))

    async def position_summary(self, symbol: SymbolLike) -> ResponseList[PositionSummary]:
        return await self._http_client.execute(self._api.position_summary(symbol))

    # Order lifecycle
    async def order(
        self,
        symbol: SymbolLike,
        side: Union[Side, str],
        execution_type: Union[ExecutionType, str],
        size: Amount,
        price: Optional[Amount] = None,
    ) -> Response[str]:
        return await self._http_client.execute(
            self._api.order(symbol, side, execution_type, size, price)
        )

    async def change_order(
        self,
        order_id: int,
        price: Amount,
        losscut_price: Optional[Amount] = None,
    ) -> Response[None]:
        return await self._http_client.execute(
            self._api.change_order(order_id, price, losscut_price)
        )

    async def cancel_order(self, order_id: int) -> Response[None]:
        return await self._http_client.execute(self._api.cancel_order(order_id))

    async def cancel_orders(self, order_ids: Iterable[int]) -> Response[CancelOrdersResult]:
        return await self._http_client.execute(self._api.cancel_orders(order_ids))

    async def cancel_bulk_order(self, symbols: Iterable[SymbolLike]) -> Response[List[int]]:
        return await self._http_client.execute(self._api.cancel_bulk_order(symbols))

    async def close_order(
        self,
        symbol: Union[LeverageSymbol, str],
        side: Union[Side, str],
        execution_type: Union[ExecutionType, str],
        settle_position: SettlePosition,
        price: Optional[Amount] = None,
    ) -> Response[str]:
        return await self._http_client.execute(
            self._api.close_order(symbol, side, execution_type, settle_position, price)
        )

    async def close_bulk_order(
        self,
        symbol: Union[LeverageSymbol, str],
        side: Union[Side, str],
        execution_type: Union[ExecutionType, str],
        size: Amount,
        price: Optional[Amount] = None,
    ) -> Response[str]:
        return await self._http_client.execute(
            self._api.close_bulk_order(symbol, side, execution_type, size, price)
        )

    async def change_losscut_price(self, position_id: int, losscut_price: Amount) -> Response[None]:
        return await self._http_client.execute(
            self._api.change_losscut_price(position_id, losscut_price)
        )

    async def close(self) -> None:
        """Close client and cleanup resources."""
        await self._http_client.close()
        logger.info("GMO Coin async private client closed")

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
