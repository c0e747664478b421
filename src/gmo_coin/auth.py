"""
Authentication and signing utilities for the GMO Coin private API.
"""

from dataclasses import dataclass
from typing import Dict
import hashlib
import hmac
import os
import time

from .constants import API_KEY_ENV, SECRET_KEY_ENV
from .errors import ClockError, ConfigurationError, HeaderValueError
from .utils import is_valid_header_value


@dataclass(frozen=True)
class ApiCredentials:
    """Container for API credentials"""
    api_key: str
    api_secret: str

    @classmethod
    def from_env(cls) -> "ApiCredentials":
        """
        Read credentials from ``GMO_COIN_API_KEY`` and ``GMO_COIN_SECRET_KEY``.

        The environment is read on every call, so rotated credentials are
        picked up by the next request.

        Raises:
            ConfigurationError: if either variable is missing or empty
        """
        return cls(api_key=_require_env(API_KEY_ENV), api_secret=_require_env(SECRET_KEY_ENV))

    def __repr__(self) -> str:
        return f"ApiCredentials(api_key={self.api_key[:4]!r}..., api_secret=***)"


def _require_env(name: str) -> str:
    value = os.environ.get(name)
    if not value:
        raise ConfigurationError(f"Environment variable {name} is not set", variable=name)
    return value


def current_timestamp_ms() -> int:
    """
    Current wall-clock time in integer milliseconds since the Unix epoch.

    Raises:
        ClockError: if the clock reports a time before the epoch
    """
    now = time.time()
    if now < 0:
        raise ClockError(f"System clock is before the Unix epoch ({now})")
    return int(now * 1000)


def sign_request(timestamp: int, method: str, path: str, body: str, secret: str) -> str:
    """
    Compute the request signature.

    HMAC-SHA256 keyed by ``secret`` over ``timestamp + method + path + body``
    with no separators, as lowercase hex. ``path`` never includes the query
    string and ``body`` is ``""`` for GET requests.
    """
    text = f"{timestamp}{method}{path}{body}"
    return hmac.new(
        secret.encode("utf-8"),
        text.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


class GmoSigner:
    """
    Handles request signing for GMO Coin private API authentication.
    """

    def __init__(self, credentials: ApiCredentials):
        """
        Initialize the signer with API credentials.

        Args:
            credentials: API credentials containing key and secret
        """
        self.credentials = credentials

    def sign(self, timestamp: int, method: str, path: str, body: str = "") -> str:
        """Sign one request with the configured secret."""
        return sign_request(timestamp, method.upper(), path, body, self.credentials.api_secret)

    def auth_headers(self, timestamp: int, method: str, path: str, body: str = "") -> Dict[str, str]:
        """
        Build the authentication headers for one request.

        The same ``timestamp`` is used for the signature and for
        ``API-TIMESTAMP``.

        Raises:
            HeaderValueError: if the key or signature is not a legal header value
        """
        headers = {
            "API-KEY": self.credentials.api_key,
            "API-TIMESTAMP": str(timestamp),
            "API-SIGN": self.sign(timestamp, method, path, body),
        }
        for name, value in headers.items():
            if not is_valid_header_value(value):
                raise HeaderValueError(f"Invalid value for header {name}", header=name)
        return headers
