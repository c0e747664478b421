"""
Configuration models for the GMO Coin client.

Immutable configuration structures following state-first design.
"""

from dataclasses import dataclass
from typing import Optional

from ..constants import DEFAULT_USER_AGENT, PRIVATE_API, PUBLIC_API
from ..utils import validate_url


@dataclass(frozen=True)
class ConnectionConfig:
    """
    Configuration for GMO Coin client connections.

    ``timeout`` is handed to the HTTP library unchanged; ``None`` means the
    client imposes no timeout of its own.
    """
    public_base_url: str = PUBLIC_API
    private_base_url: str = PRIVATE_API
    timeout: Optional[float] = None
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_base_url("public_base_url")
        self._validate_base_url("private_base_url")
        self._validate_timeout()

    def _validate_base_url(self, name: str):
        url = getattr(self, name)
        if not validate_url(url):
            raise ValueError(f"{name} must be a valid HTTP/HTTPS URL, got {url!r}")
        # Normalize in place; the dataclass is frozen
        object.__setattr__(self, name, url.rstrip("/"))

    def _validate_timeout(self):
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
