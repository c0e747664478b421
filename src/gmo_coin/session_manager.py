"""
Session management for the GMO Coin client.

Handles connection lifecycle, session creation, and resource cleanup for
both transports: a requests.Session for blocking calls and an
aiohttp.ClientSession for asyncio calls.
"""

import logging
from contextlib import asynccontextmanager, contextmanager
from typing import Optional

import aiohttp
import requests

from .models.config import ConnectionConfig

logger = logging.getLogger(__name__)


class SessionManager:
    """Manages the requests.Session used by the blocking transport."""

    def __init__(self, config: ConnectionConfig, session: Optional[requests.Session] = None):
        """
        Initialize session manager with configuration.

        A caller-supplied session is used as is and never closed here.
        """
        self._config = config
        self._session = session
        self._owns_session = session is None

    def create_session(self) -> requests.Session:
        """Return the current session, creating one if needed."""
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update({"User-Agent": self._config.user_agent})
            self._owns_session = True
            logger.debug("Created requests session")
        return self._session

    def close_session(self) -> None:
        """Close HTTP session and cleanup resources."""
        if self._session is not None and self._owns_session:
            self._session.close()
            self._session = None

    @property
    def session(self) -> Optional[requests.Session]:
        """Get current session without creating one."""
        return self._session

    @contextmanager
    def managed_session(self):
        """Context manager for automatic session lifecycle management."""
        session = self.create_session()
        try:
            yield session
        finally:
            self.close_session()


class AsyncSessionManager:
    """Manages the aiohttp.ClientSession used by the asyncio transport."""

    def __init__(self, config: ConnectionConfig, session: Optional[aiohttp.ClientSession] = None):
        """Initialize session manager with configuration."""
        self._config = config
        self._session = session
        self._owns_session = session is None

    async def create_session(self) -> aiohttp.ClientSession:
        """Create and configure HTTP session."""
        if self._session is not None and not self._session.closed:
            return self._session

        connector = aiohttp.TCPConnector(
            limit=100,
            limit_per_host=20,
            ttl_dns_cache=300,
            use_dns_cache=True,
        )

        timeout = aiohttp.ClientTimeout(total=self._config.timeout)

        self._session = aiohttp.ClientSession(
            connector=connector,
            timeout=timeout,
            headers={"User-Agent": self._config.user_agent},
        )
        self._owns_session = True
        logger.debug("Created aiohttp session")

        return self._session

    async def close_session(self) -> None:
        """Close HTTP session and cleanup resources."""
        if self._session is not None and self._owns_session and not self._session.closed:
            await self._session.close()
        if self._owns_session:
            self._session = None

    @property
    def session(self) -> Optional[aiohttp.ClientSession]:
        """Get current session without creating one."""
        return self._session

    @asynccontextmanager
    async def managed_session(self):
        """Context manager for automatic session lifecycle management."""
        session = await self.create_session()
        try:
            yield session
        finally:
            await self.close_session()
