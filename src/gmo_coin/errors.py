"""
Exception hierarchy for the GMO Coin client.

Every failure a client call can produce is a subclass of GmoCoinError, so
callers can catch broadly or branch on the specific kind.
"""

from typing import Any, Dict, List, Optional


class GmoCoinError(Exception):
    """Base exception for all client errors."""


class ConfigurationError(GmoCoinError):
    """A required environment variable is missing or empty."""

    def __init__(self, message: str, variable: Optional[str] = None):
        super().__init__(message)
        self.variable = variable


class TransportError(GmoCoinError):
    """Network failure or non-2xx HTTP status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class HeaderValueError(GmoCoinError):
    """A value cannot be sent as an HTTP header."""

    def __init__(self, message: str, header: Optional[str] = None):
        super().__init__(message)
        self.header = header


class DeserializationError(GmoCoinError):
    """Response body is not JSON or does not match the expected schema."""

    def __init__(self, message: str, body: Any = None):
        super().__init__(message)
        self.body = body


class ClockError(GmoCoinError):
    """The system clock reports a time before the Unix epoch."""


class ExchangeApiError(GmoCoinError):
    """The exchange answered with a nonzero envelope status."""

    def __init__(
        self,
        status: int,
        messages: Optional[List[Dict[str, Any]]] = None,
        responsetime: Optional[str] = None,
    ):
        self.status = status
        self.messages = messages or []
        self.responsetime = responsetime
        super().__init__(self._describe())

    @property
    def message_codes(self) -> List[str]:
        """Exchange message codes, e.g. ``ERR-5201``."""
        return [str(m.get("message_code", "")) for m in self.messages]

    def _describe(self) -> str:
        if not self.messages:
            return f"Exchange returned status {self.status}"
        details = "; ".join(
            f"{m.get('message_code', '?')}: {m.get('message_string', '')}"
            for m in self.messages
        )
        return f"Exchange returned status {self.status}: {details}"


class DomainParseError(GmoCoinError, ValueError):
    """Free text could not be converted into a domain enumeration."""


class SymbolParseError(DomainParseError):
    """Unknown symbol token."""


class SideParseError(DomainParseError):
    """Unknown order side token."""
