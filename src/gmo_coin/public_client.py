# -*- coding: utf-8 -*-
"""
GMO Coin Public Market Data Client

This module provides clients for the exchange's public market data
endpoints, which require no authentication. GmoPublicClient blocks the
calling thread; AsyncGmoPublicClient is its asyncio counterpart with the
same methods.
"""

import asyncio
import logging
from datetime import date
from typing import List, Optional, Union

import aiohttp
import requests

from .api_methods import PublicApi, SymbolLike
from .enums import KlineInterval, Symbol
from .http_client import AsyncHttpClient, HttpClient
from .models.config import ConnectionConfig
from .models.envelope import Response, ResponsePage
from .models.market import ExchangeStatus, Kline, LatestRate, Snapshot, SymbolRule, Trade

logger = logging.getLogger(__name__)


class GmoPublicClient:
    """
    Blocking client for public market data.

    Example:
        with GmoPublicClient() as client:
            rates = client.ticker(Symbol.BTC).data
    """

    def __init__(
        self,
        config: Optional[ConnectionConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the public client.

        Args:
            config: Connection settings; production endpoints by default
            session: Optional requests.Session to reuse (not closed by the client)
        """
        self._config = config or ConnectionConfig()
        self._api = PublicApi()
        self._http_client = HttpClient(self._config, session=session)
        logger.info("GmoPublicClient initialized for public market data access")

    @property
    def base_url(self) -> str:
        return self._config.public_base_url

    def status(self) -> Response[ExchangeStatus]:
        """Exchange operating state."""
        return self._http_client.execute(self._api.status())

    def ticker(self, symbol: Optional[SymbolLike] = None) -> Response[List[LatestRate]]:
        """
        Latest rates.

        Args:
            symbol: Symbol to query; all symbols when omitted
        """
        return self._http_client.execute(self._api.ticker(symbol))

    def orderbooks(self, symbol: SymbolLike) -> Response[Snapshot]:
        """Order book snapshot for ``symbol``."""
        return self._http_client.execute(self._api.orderbooks(symbol))

    def trades(
        self,
        symbol: SymbolLike,
        page: Optional[int] = None,
        count: Optional[int] = None,
    ) -> ResponsePage[Trade]:
        """Trade history, one page at a time."""
        return self._http_client.execute(self._api.trades(symbol, page, count))

    def klines(
        self,
        symbol: SymbolLike,
        interval: Union[KlineInterval, str],
        date: Union[date, str],
    ) -> Response[List[Kline]]:
        """
        Candlesticks for one day.

        Args:
            symbol: Symbol to query
            interval: Candle interval
            date: ``datetime.date`` or ``YYYYMMDD`` string
        """
        return self._http_client.execute(self._api.klines(symbol, interval, date))

    def symbols(self) -> Response[List[SymbolRule]]:
        """Trading rules for every symbol."""
        return self._http_client.execute(self._api.symbols())

    def close(self) -> None:
        """Close the HTTP session."""
        self._http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class AsyncGmoPublicClient:
    """
    asyncio client for public market data.

    Example:
        async with AsyncGmoPublicClient() as client:
            book = (await client.orderbooks(Symbol.BTC)).data
    """

    def __init__(
        self,
        config: Optional[ConnectionConfig] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """
        Initialize the public client.

        Args:
            config: Connection settings; production endpoints by default
            session: Optional aiohttp session to reuse (not closed by the client)
        """
        self._config = config or ConnectionConfig()
        self._api = PublicApi()
        self._http_client = AsyncHttpClient(self._config, session=session)
        logger.info("AsyncGmoPublicClient initialized for public market data access")

    @property
    def base_url(self) -> str:
        return self._config.public_base_url

    async def status(self) -> Response[ExchangeStatus]:
        """Exchange operating state."""
        return await self._http_client.execute(self._api.status())

    async def ticker(self, symbol: Optional[SymbolLike] = None) -> Response[List[LatestRate]]:
        """Latest rates; all symbols when ``symbol`` is omitted."""
        return await self._http_client.execute(self._api.ticker(symbol))

    async def orderbooks(self, symbol: SymbolLike) -> Response[Snapshot]:
        """Order book snapshot for ``symbol``."""
        return await self._http_client.execute(self._api.orderbooks(symbol))

    async def trades(
        self,
        symbol: SymbolLike,
        page: Optional[int] = None,
        count: Optional[int] = None,
    ) -> ResponsePage[Trade]:
        """Trade history, one page at a time."""
        return await self._http_client.execute(self._api.trades(symbol, page, count))

    async def klines(
        self,
        symbol: SymbolLike,
        interval: Union[KlineInterval, str],
        date: Union[date, str],
    ) -> Response[List[Kline]]:
        """Candlesticks for one day (``datetime.date`` or ``YYYYMMDD``)."""
        return await self._http_client.execute(self._api.klines(symbol, interval, date))

    async def symbols(self) -> Response[List[SymbolRule]]:
        """Trading rules for every symbol."""
        return await self._http_client.execute(self._api.symbols())

    async def close(self) -> None:
        """Close the aiohttp session."""
        await self._http_client.close()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()


if __name__ == "__main__":
    # Example usage
    async def main():
        async with AsyncGmoPublicClient() as client:
            print(await client.status())
            print(await client.ticker(Symbol.BTC))
            print(await client.orderbooks(Symbol.BTC_JPY))

    asyncio.run(main())
