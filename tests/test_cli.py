"""
Tests for the command line demo.
"""

import json
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from gmo_coin.cli import build_parser, main, resolve_call
from gmo_coin.errors import TransportError
from gmo_coin.models.envelope import Response
from gmo_coin.models.market import ExchangeStatus

STATUS = Response(status=0, data=ExchangeStatus(status="OPEN"), responsetime="2021-01-01T00:00:00.000Z")


def sync_client_class(**methods) -> MagicMock:
    client = MagicMock()
    client.__enter__.return_value = client
    client.__exit__.return_value = False
    for name, value in methods.items():
        setattr(client, name, value)
    return MagicMock(return_value=client)


def async_client_class(**methods) -> MagicMock:
    client = MagicMock()
    client.__aenter__.return_value = client
    client.__aexit__.return_value = False
    for name, value in methods.items():
        setattr(client, name, value)
    return MagicMock(return_value=client)


class TestResolveCall:
    """Test cases for mapping arguments to client methods."""

    @pytest.mark.parametrize("argv, expected", [
        (["status"], ("status", [])),
        (["ticker"], ("ticker", [None])),
        (["ticker", "BTC"], ("ticker", ["BTC"])),
        (["klines", "BTC", "1min", "20210417"], ("klines", ["BTC", "1min", "20210417"])),
        (["trades", "BTC", "--count", "5"], ("trades", ["BTC", None, 5])),
        (["active-orders", "BTC_JPY", "--page", "2"], ("active_orders", ["BTC_JPY", 2, None])),
        (["margin"], ("margin", [])),
    ])
    def test_resolve(self, argv, expected):
        assert resolve_call(build_parser().parse_args(argv)) == expected


class TestMain:
    """Test cases for the entry point."""

    def test_sync_status(self, capsys):
        client_cls = sync_client_class(status=MagicMock(return_value=STATUS))

        with patch("gmo_coin.cli.GmoPublicClient", client_cls):
            assert main(["status"]) == 0

        output = json.loads(capsys.readouterr().out)
        assert output["data"] == {"status": "OPEN"}

    def test_async_status(self, capsys):
        client_cls = async_client_class(status=AsyncMock(return_value=STATUS))

        with patch("gmo_coin.cli.AsyncGmoPublicClient", client_cls):
            assert main(["--async", "status"]) == 0

        assert json.loads(capsys.readouterr().out)["status"] == 0

    def test_private_command_uses_private_client(self, capsys):
        margin = MagicMock(return_value=Response(status=0, data={"margin": "1"}, responsetime="t"))
        client_cls = sync_client_class(margin=margin)

        with patch("gmo_coin.cli.GmoPrivateClient", client_cls):
            assert main(["margin"]) == 0

        margin.assert_called_once_with()

    def test_error_exit_code(self, capsys):
        failing = MagicMock(side_effect=TransportError("Request failed for GET /v1/status"))
        client_cls = sync_client_class(status=failing)

        with patch("gmo_coin.cli.GmoPublicClient", client_cls):
            assert main(["status"]) == 1

        assert capsys.readouterr().err.startswith("error: Request failed")

    def test_unknown_symbol(self, capsys):
        assert main(["orderbooks", "DOGECOIN"]) == 1
        assert "DOGECOIN" in capsys.readouterr().err
