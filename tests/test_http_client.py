"""
Tests for the blocking and asyncio HTTP transports.
"""

import asyncio
import json
import pytest
import aiohttp
import requests
from unittest.mock import Mock, patch

from gmo_coin.api_methods import PrivateApi, PublicApi
from gmo_coin.enums import ExecutionType, Side, Symbol
from gmo_coin.errors import DeserializationError, ExchangeApiError, TransportError
from gmo_coin.http_client import AsyncHttpClient, HttpClient
from gmo_coin.models.config import ConnectionConfig
from gmo_coin.models.market import ExchangeStatus
from gmo_coin.session_manager import AsyncSessionManager, SessionManager

from conftest import make_aiohttp_session, make_requests_session


class TestHttpClient:
    """Test cases for the requests-based transport."""

    def test_public_get(self, connection_config, status_payload):
        session = make_requests_session(status_payload)
        client = HttpClient(connection_config, session=session)

        response = client.execute(PublicApi().status())

        assert response.data == ExchangeStatus(status="OPEN")
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["url"] == "https://api.coin.z.com/public/v1/status"
        assert kwargs["data"] is None
        assert kwargs["timeout"] is None

    def test_post_sends_signed_body(self, connection_config, credentials):
        session = make_requests_session({"status": 0, "data": "637000", "responsetime": "t"})
        client = HttpClient(connection_config, credentials, session)

        response = client.execute(PrivateApi().order(Symbol.BTC, Side.BUY, ExecutionType.MARKET, "0.01"))

        assert response.data == "637000"
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert json.loads(kwargs["data"]) == {
            "symbol": "BTC", "side": "BUY", "executionType": "MARKET", "size": "0.01",
        }
        assert kwargs["headers"]["API-KEY"] == "test-key"

    def test_timeout_is_passed_through(self):
        session = make_requests_session({"status": 0, "data": {"status": "OPEN"}, "responsetime": "t"})
        client = HttpClient(ConnectionConfig(timeout=2.5), session=session)

        client.execute(PublicApi().status())

        assert session.request.call_args.kwargs["timeout"] == 2.5

    def test_http_error(self, connection_config):
        session = make_requests_session(status_code=502, text="Bad Gateway")
        client = HttpClient(connection_config, session=session)

        with pytest.raises(TransportError) as exc_info:
            client.execute(PublicApi().status())
        assert exc_info.value.status_code == 502

    def test_network_error(self, connection_config):
        session = make_requests_session()
        session.request.side_effect = requests.ConnectionError("connection refused")
        client = HttpClient(connection_config, session=session)

        with pytest.raises(TransportError) as exc_info:
            client.execute(PublicApi().status())
        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

    def test_exchange_error(self, connection_config, error_payload):
        client = HttpClient(connection_config, session=make_requests_session(error_payload))

        with pytest.raises(ExchangeApiError):
            client.execute(PublicApi().status())

    def test_invalid_json(self, connection_config):
        client = HttpClient(connection_config, session=make_requests_session(text="not json"))

        with pytest.raises(DeserializationError):
            client.execute(PublicApi().status())

    def test_invalid_utf8_body(self, connection_config):
        body = b'{"status":0,"data":{"status":"\xff"},"responsetime":"t"}'
        client = HttpClient(connection_config, session=make_requests_session(content=body))

        with pytest.raises(DeserializationError):
            client.execute(PublicApi().status())

    def test_supplied_session_not_closed(self, connection_config):
        session = make_requests_session()
        client = HttpClient(connection_config, session=session)

        client.close()

        session.close.assert_not_called()


class TestSessionManager:
    """Test cases for requests session lifecycle."""

    def test_creates_and_closes_own_session(self, connection_config):
        with patch("gmo_coin.session_manager.requests.Session") as session_cls:
            manager = SessionManager(connection_config)
            session = manager.create_session()

            assert manager.create_session() is session
            session_cls.assert_called_once()
            session.headers.update.assert_called_once_with({"User-Agent": connection_config.user_agent})

            manager.close_session()

        session.close.assert_called_once()
        assert manager.session is None

    def test_managed_session(self, connection_config):
        with patch("gmo_coin.session_manager.requests.Session") as session_cls:
            manager = SessionManager(connection_config)
            with manager.managed_session() as session:
                assert session is session_cls.return_value

        session.close.assert_called_once()


class TestAsyncHttpClient:
    """Test cases for the aiohttp-based transport."""

    @pytest.mark.asyncio
    async def test_public_get(self, connection_config, status_payload):
        session = make_aiohttp_session(status_payload)
        client = AsyncHttpClient(connection_config, session=session)

        response = await client.execute(PublicApi().status())

        assert response.data.status == "OPEN"
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["url"] == "https://api.coin.z.com/public/v1/status"
        assert kwargs["data"] is None

    @pytest.mark.asyncio
    async def test_private_headers(self, connection_config, credentials, margin_payload):
        session = make_aiohttp_session(margin_payload)
        client = AsyncHttpClient(connection_config, credentials, session)

        await client.execute(PrivateApi().margin())

        headers = session.request.call_args.kwargs["headers"]
        assert headers["API-KEY"] == "test-key"
        assert set(headers) >= {"API-TIMESTAMP", "API-SIGN"}

    @pytest.mark.asyncio
    async def test_http_error(self, connection_config):
        client = AsyncHttpClient(connection_config, session=make_aiohttp_session(status=500, text="oops"))

        with pytest.raises(TransportError) as exc_info:
            await client.execute(PublicApi().status())
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_client_error(self, connection_config):
        session = make_aiohttp_session()
        session.request = Mock(side_effect=aiohttp.ClientConnectionError("connection reset"))
        client = AsyncHttpClient(connection_config, session=session)

        with pytest.raises(TransportError):
            await client.execute(PublicApi().status())

    @pytest.mark.asyncio
    async def test_timeout(self, connection_config):
        session = make_aiohttp_session()
        session.request = Mock(side_effect=asyncio.TimeoutError())
        client = AsyncHttpClient(connection_config, session=session)

        with pytest.raises(TransportError) as exc_info:
            await client.execute(PublicApi().status())
        assert "timeout" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_exchange_error(self, connection_config, error_payload):
        client = AsyncHttpClient(connection_config, session=make_aiohttp_session(error_payload))

        with pytest.raises(ExchangeApiError) as exc_info:
            await client.execute(PublicApi().status())
        assert exc_info.value.message_codes == ["ERR-5201"]

    @pytest.mark.asyncio
    async def test_invalid_utf8_body(self, connection_config):
        body = b'{"status":0,"data":{"status":"\xff"},"responsetime":"t"}'
        client = AsyncHttpClient(connection_config, session=make_aiohttp_session(content=body))

        with pytest.raises(DeserializationError):
            await client.execute(PublicApi().status())

    @pytest.mark.asyncio
    async def test_timeout_applies_to_supplied_session(self, status_payload):
        session = make_aiohttp_session(status_payload)
        client = AsyncHttpClient(ConnectionConfig(timeout=0.3), session=session)

        await client.execute(PublicApi().status())

        timeout = session.request.call_args.kwargs["timeout"]
        assert isinstance(timeout, aiohttp.ClientTimeout)
        assert timeout.total == 0.3

    @pytest.mark.asyncio
    async def test_no_timeout_by_default(self, connection_config, status_payload):
        session = make_aiohttp_session(status_payload)
        client = AsyncHttpClient(connection_config, session=session)

        await client.execute(PublicApi().status())

        assert "timeout" not in session.request.call_args.kwargs

    @pytest.mark.asyncio
    async def test_supplied_session_not_closed(self, connection_config):
        session = make_aiohttp_session()
        client = AsyncHttpClient(connection_config, session=session)

        await client.close()

        session.close.assert_not_called()


class TestAsyncSessionManager:
    """Test cases for aiohttp session lifecycle."""

    @pytest.mark.asyncio
    async def test_creates_and_closes_own_session(self, connection_config):
        manager = AsyncSessionManager(connection_config)

        session = await manager.create_session()
        assert isinstance(session, aiohttp.ClientSession)
        assert await manager.create_session() is session

        await manager.close_session()
        assert session.closed
        assert manager.session is None

    @pytest.mark.asyncio
    async def test_managed_session(self, connection_config):
        manager = AsyncSessionManager(connection_config)

        async with manager.managed_session() as session:
            assert not session.closed

        assert session.closed
