"""
Order-related models for the GMO Coin client.

Immutable data structures for orders, executions and leveraged positions,
plus the small request-side descriptors used when placing them.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Union

from ..utils import join_ids
from .base import WireModel


@dataclass(frozen=True)
class OrderInfo(WireModel):
    """Order as returned by the order lookup endpoint."""
    root_order_id: int
    order_id: int
    symbol: str
    side: str
    order_type: str
    execution_type: str
    settle_type: str
    size: Decimal
    executed_size: Decimal
    price: Decimal
    status: str
    timestamp: str
    losscut_price: Optional[Decimal] = None
    time_in_force: Optional[str] = None


@dataclass(frozen=True)
class ActiveOrder(OrderInfo):
    """Order that is still open (``WAITING``/``ORDERED``/``MODIFYING``)."""


@dataclass(frozen=True)
class Execution(WireModel):
    """Fill of an order."""
    execution_id: int
    order_id: int
    symbol: str
    side: str
    settle_type: str
    size: Decimal
    price: Decimal
    loss_gain: Decimal
    fee: Decimal
    timestamp: str
    position_id: Optional[int] = None


@dataclass(frozen=True)
class LatestExecution(Execution):
    """Entry of the latest-executions listing."""


@dataclass(frozen=True)
class OpenPosition(WireModel):
    """Open leveraged position."""
    position_id: int
    symbol: str
    side: str
    size: Decimal
    order_size: Decimal
    price: Decimal
    loss_gain: Decimal
    leverage: Decimal
    losscut_price: Decimal
    timestamp: str


@dataclass(frozen=True)
class PositionSummary(WireModel):
    """Aggregate of open positions per symbol and side."""
    average_position_rate: Decimal
    position_loss_gain: Decimal
    side: str
    sum_order_quantity: Decimal
    sum_position_quantity: Decimal
    symbol: str


@dataclass(frozen=True)
class SettlePosition(WireModel):
    """Which open position a close order settles, and how much of it."""
    position_id: int
    size: Decimal


@dataclass(frozen=True)
class CancelFailure(WireModel):
    """Order that could not be cancelled by a bulk cancel."""
    order_id: int
    message_code: str = field(default="", metadata={"key": "message_code"})
    message_string: str = field(default="", metadata={"key": "message_string"})


@dataclass(frozen=True)
class CancelOrdersResult(WireModel):
    """Outcome of cancelling several orders by id."""
    success: List[int] = field(default_factory=list)
    failed: List[CancelFailure] = field(default_factory=list)


@dataclass(frozen=True)
class ExecutionsParam:
    """
    Selector for the executions endpoint: by order id or by execution id.

    Build with ``ExecutionsParam.order_id(...)`` or
    ``ExecutionsParam.execution_id(...)``. Several ids may be given as an
    iterable; they are sent comma-separated.
    """
    key: str
    value: str

    @classmethod
    def order_id(cls, value: Union[int, str, Iterable[int]]) -> "ExecutionsParam":
        return cls("orderId", join_ids(value))

    @classmethod
    def execution_id(cls, value: Union[int, str, Iterable[int]]) -> "ExecutionsParam":
        return cls("executionId", join_ids(value))

    def to_query(self) -> Dict[str, str]:
        return {self.key: self.value}
