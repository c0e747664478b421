"""
Account-related models for the GMO Coin client.

Immutable data structures for margin and asset balances.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict

from .base import WireModel


@dataclass(frozen=True)
class Margin(WireModel):
    """Available margin for the account."""
    actual_profit_loss: Decimal
    available_amount: Decimal
    margin: Decimal
    profit_loss: Decimal


@dataclass(frozen=True)
class Asset(WireModel):
    """Balance of one asset."""
    amount: Decimal
    available: Decimal
    conversion_rate: Decimal
    symbol: str


# Trading volume is returned as the decoded JSON object; its shape varies
# with the account's fee tier.
TradingVolume = Dict[str, Any]
