"""
GMO Coin - Python client for the GMO Coin exchange REST API.

This package provides blocking and asyncio clients for the public market
data endpoints and the HMAC-signed private account and trading endpoints.
"""

from .account_client import AsyncGmoPrivateClient, GmoPrivateClient
from .auth import ApiCredentials, GmoSigner, sign_request
from .enums import ExecutionType, KlineInterval, LeverageSymbol, Side, Symbol
from .errors import (
    ClockError,
    ConfigurationError,
    DeserializationError,
    DomainParseError,
    ExchangeApiError,
    GmoCoinError,
    HeaderValueError,
    SideParseError,
    SymbolParseError,
    TransportError,
)
from .models import (
    ConnectionConfig,
    Pagination,
    Response,
    ResponseList,
    ResponsePage,
    ExecutionsParam,
    SettlePosition,
)
from .public_client import AsyncGmoPublicClient, GmoPublicClient

__version__ = "0.3.0"

__all__ = [
    # Main Clients
    "GmoPublicClient",
    "AsyncGmoPublicClient",
    "GmoPrivateClient",
    "AsyncGmoPrivateClient",
    "ConnectionConfig",
    "ApiCredentials",
    "GmoSigner",
    "sign_request",
    # Enumerations
    "Symbol",
    "LeverageSymbol",
    "Side",
    "ExecutionType",
    "KlineInterval",
    # Envelopes and request descriptors
    "Pagination",
    "Response",
    "ResponsePage",
    "ResponseList",
    "ExecutionsParam",
    "SettlePosition",
    # Errors
    "GmoCoinError",
    "ConfigurationError",
    "TransportError",
    "HeaderValueError",
    "DeserializationError",
    "ClockError",
    "ExchangeApiError",
    "DomainParseError",
    "SymbolParseError",
    "SideParseError",
]
