"""
Market-related models for the GMO Coin client.

Immutable records returned by the public endpoints.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from .base import WireModel


@dataclass(frozen=True)
class ExchangeStatus(WireModel):
    """Exchange operating state: ``MAINTENANCE``, ``PREOPEN`` or ``OPEN``."""
    status: str


@dataclass(frozen=True)
class LatestRate(WireModel):
    """Latest ticker rate for one symbol."""
    ask: Decimal
    bid: Decimal
    high: Decimal
    last: Decimal
    low: Decimal
    symbol: str
    timestamp: str
    volume: Decimal


@dataclass(frozen=True)
class Ask(WireModel):
    """Sell side order book level."""
    price: Decimal
    size: Decimal


@dataclass(frozen=True)
class Bid(WireModel):
    """Buy side order book level."""
    price: Decimal
    size: Decimal


@dataclass(frozen=True)
class Snapshot(WireModel):
    """Order book snapshot."""
    symbol: str
    asks: List[Ask] = field(default_factory=list)
    bids: List[Bid] = field(default_factory=list)

    @property
    def best_ask(self) -> Optional[Ask]:
        return self.asks[0] if self.asks else None

    @property
    def best_bid(self) -> Optional[Bid]:
        return self.bids[0] if self.bids else None


@dataclass(frozen=True)
class Trade(WireModel):
    """One executed trade from the public trade history."""
    price: Decimal
    side: str
    size: Decimal
    timestamp: str


@dataclass(frozen=True)
class Kline(WireModel):
    """Candlestick (OHLCV). ``open_time`` is epoch milliseconds as text."""
    open_time: str
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: Decimal


@dataclass(frozen=True)
class SymbolRule(WireModel):
    """Trading rules for one symbol."""
    symbol: str
    min_order_size: Decimal
    max_order_size: Decimal
    size_step: Decimal
    tick_size: Decimal
    taker_fee: Decimal
    maker_fee: Decimal
