"""
HTTP transports for the GMO Coin API.

Two interchangeable transports execute the ApiCall descriptions built in
api_methods.py: HttpClient blocks the calling thread (requests) and
AsyncHttpClient suspends the calling task (aiohttp). Both share request
preparation and response decoding, raise the same errors, and never retry.
"""

import asyncio
import logging
from typing import Optional

import aiohttp
import requests

from .api_methods import ApiCall, decode_response, prepare_request
from .auth import ApiCredentials
from .errors import TransportError
from .models.config import ConnectionConfig
from .models.envelope import Response
from .session_manager import AsyncSessionManager, SessionManager

logger = logging.getLogger(__name__)


class HttpClient:
    """Blocking transport backed by a requests.Session."""

    def __init__(
        self,
        config: ConnectionConfig,
        credentials: Optional[ApiCredentials] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize HTTP client with configuration.

        Without ``credentials``, private calls resolve them from the
        environment on every request.
        """
        self._config = config
        self._credentials = credentials
        self._session_manager = SessionManager(config, session)

    def execute(self, call: ApiCall) -> Response:
        """Send ``call`` and return its decoded envelope."""
        request = prepare_request(call, self._config, self._credentials)
        session = self._session_manager.create_session()

        logger.debug(f"{request.method} {request.url}")
        try:
            response = session.request(
                method=request.method,
                url=request.url,
                headers=request.headers,
                data=request.body.encode("utf-8") if request.body else None,
                timeout=self._config.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Request failed: {call.method} {call.path}: {e}")
            raise TransportError(f"Request failed for {call.method} {call.path}: {e}") from e

        return decode_response(call, response.status_code, response.content)

    def close(self) -> None:
        """Close the underlying session."""
        self._session_manager.close_session()


class AsyncHttpClient:
    """Non-blocking transport backed by an aiohttp.ClientSession."""

    def __init__(
        self,
        config: ConnectionConfig,
        credentials: Optional[ApiCredentials] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """Initialize HTTP client with configuration."""
        self._config = config
        self._credentials = credentials
        self._session_manager = AsyncSessionManager(config, session)

    async def execute(self, call: ApiCall) -> Response:
        """Send ``call`` and return its decoded envelope."""
        request = prepare_request(call, self._config, self._credentials)
        session = await self._session_manager.create_session()

        # Also applies to caller-supplied sessions
        options = {}
        if self._config.timeout is not None:
            options["timeout"] = aiohttp.ClientTimeout(total=self._config.timeout)

        logger.debug(f"{request.method} {request.url}")
        try:
            async with session.request(
                method=request.method,
                url=request.url,
                headers=request.headers,
                data=request.body.encode("utf-8") if request.body else None,
                **options,
            ) as response:
                body = await response.read()
                status_code = response.status
        except asyncio.TimeoutError as e:
            logger.error(f"Request timeout: {call.method} {call.path}")
            raise TransportError(f"Request timeout for {call.method} {call.path}") from e
        except aiohttp.ClientError as e:
            logger.error(f"Request failed: {call.method} {call.path}: {e}")
            raise TransportError(f"Request failed for {call.method} {call.path}: {e}") from e

        return decode_response(call, status_code, body)

    async def close(self) -> None:
        """Close the underlying session."""
        await self._session_manager.close_session()
