"""
Data models for the GMO Coin client.

This package contains all data structures used throughout the client,
following the state-first principle with immutable data structures.
"""

from .config import ConnectionConfig
from .envelope import Listing, Page, Pagination, Response, ResponseList, ResponsePage
from .market import Ask, Bid, ExchangeStatus, Kline, LatestRate, Snapshot, SymbolRule, Trade
from .account import Asset, Margin, TradingVolume
from .orders import (
    ActiveOrder,
    CancelFailure,
    CancelOrdersResult,
    Execution,
    ExecutionsParam,
    LatestExecution,
    OpenPosition,
    OrderInfo,
    PositionSummary,
    SettlePosition,
)

__all__ = [
    # Configuration
    "ConnectionConfig",
    # Envelope
    "Pagination",
    "Page",
    "Listing",
    "Response",
    "ResponsePage",
    "ResponseList",
    # Market
    "ExchangeStatus",
    "LatestRate",
    "Ask",
    "Bid",
    "Snapshot",
    "Trade",
    "Kline",
    "SymbolRule",
    # Account
    "Margin",
    "Asset",
    "TradingVolume",
    # Orders
    "OrderInfo",
    "ActiveOrder",
    "Execution",
    "LatestExecution",
    "OpenPosition",
    "PositionSummary",
    "SettlePosition",
    "ExecutionsParam",
    "CancelFailure",
    "CancelOrdersResult",
]
