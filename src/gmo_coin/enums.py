"""
Domain enumerations for GMO Coin.

Each enumeration renders to the exact token used on the wire (``str(member)``
or ``member.value``). Symbols and sides also parse from free text.
"""

from enum import Enum
from typing import Type

from .errors import DomainParseError, SideParseError, SymbolParseError


class _WireEnum(Enum):
    """Enumeration whose value is its wire token."""

    def __str__(self) -> str:
        return self.value


class _ParsableEnum(_WireEnum):
    """Wire enumeration that can be parsed case-insensitively."""

    @classmethod
    def _parse_error(cls) -> Type[DomainParseError]:
        return DomainParseError

    @classmethod
    def _normalize(cls, text: str) -> str:
        return text.strip().upper()

    @classmethod
    def parse(cls, text: str):
        """Parse a token, ignoring case and surrounding whitespace."""
        if not isinstance(text, str):
            raise cls._parse_error()(f"Invalid {cls.__name__}: {text!r}")
        try:
            return cls(cls._normalize(text))
        except ValueError:
            raise cls._parse_error()(f"Unknown {cls.__name__}: {text!r}") from None


class Symbol(_ParsableEnum):
    """Spot assets and JPY pairs tradable on the exchange."""
    BTC = "BTC"
    ETH = "ETH"
    BCH = "BCH"
    LTC = "LTC"
    XRP = "XRP"
    XEM = "XEM"
    XLM = "XLM"
    BAT = "BAT"
    XTZ = "XTZ"
    QTUM = "QTUM"
    ENJ = "ENJ"
    DOT = "DOT"
    ATOM = "ATOM"
    ADA = "ADA"
    LINK = "LINK"
    DOGE = "DOGE"
    SOL = "SOL"
    BTC_JPY = "BTC_JPY"
    ETH_JPY = "ETH_JPY"
    BCH_JPY = "BCH_JPY"
    LTC_JPY = "LTC_JPY"
    XRP_JPY = "XRP_JPY"
    DOT_JPY = "DOT_JPY"
    ATOM_JPY = "ATOM_JPY"
    ADA_JPY = "ADA_JPY"
    LINK_JPY = "LINK_JPY"
    DOGE_JPY = "DOGE_JPY"
    SOL_JPY = "SOL_JPY"

    @classmethod
    def _parse_error(cls) -> Type[DomainParseError]:
        return SymbolParseError


class LeverageSymbol(_ParsableEnum):
    """JPY pairs eligible for leverage (margin) trading."""
    BTC_JPY = "BTC_JPY"
    ETH_JPY = "ETH_JPY"
    BCH_JPY = "BCH_JPY"
    LTC_JPY = "LTC_JPY"
    XRP_JPY = "XRP_JPY"
    DOT_JPY = "DOT_JPY"
    ATOM_JPY = "ATOM_JPY"
    ADA_JPY = "ADA_JPY"
    LINK_JPY = "LINK_JPY"
    DOGE_JPY = "DOGE_JPY"
    SOL_JPY = "SOL_JPY"

    @classmethod
    def _parse_error(cls) -> Type[DomainParseError]:
        return SymbolParseError


class Side(_ParsableEnum):
    """Order side."""
    BUY = "BUY"
    SELL = "SELL"

    @classmethod
    def _parse_error(cls) -> Type[DomainParseError]:
        return SideParseError


class ExecutionType(_WireEnum):
    """
    Order execution type.

    LIMIT and STOP orders must be sent with a price; MARKET orders must not.
    This is not checked by the client.
    """
    MARKET = "MARKET"
    LIMIT = "LIMIT"
    STOP = "STOP"


class KlineInterval(_ParsableEnum):
    """Candlestick interval."""
    ONE_MIN = "1min"
    FIVE_MIN = "5min"
    TEN_MIN = "10min"
    FIFTEEN_MIN = "15min"
    THIRTY_MIN = "30min"
    ONE_HOUR = "1hour"
    FOUR_HOUR = "4hour"
    EIGHT_HOUR = "8hour"
    TWELVE_HOUR = "12hour"
    ONE_DAY = "1day"
    ONE_WEEK = "1week"
    ONE_MONTH = "1month"

    @classmethod
    def _normalize(cls, text: str) -> str:
        return text.strip().lower()
