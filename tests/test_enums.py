"""
Tests for the domain enumerations.
"""

import pytest

from gmo_coin.enums import ExecutionType, KlineInterval, LeverageSymbol, Side, Symbol
from gmo_coin.errors import DomainParseError, GmoCoinError, SideParseError, SymbolParseError


class TestSymbol:
    """Test cases for Symbol parsing and rendering."""

    @pytest.mark.parametrize("member", list(Symbol))
    def test_token_round_trip(self, member):
        assert Symbol.parse(str(member)) is member

    def test_parse_ignores_case_and_whitespace(self):
        assert Symbol.parse("btc") is Symbol.BTC
        assert Symbol.parse("  btc_jpy ") is Symbol.BTC_JPY

    def test_renders_wire_token(self):
        assert str(Symbol.DOGE_JPY) == "DOGE_JPY"
        assert Symbol.SOL.value == "SOL"

    def test_unknown_symbol(self):
        with pytest.raises(SymbolParseError) as exc_info:
            Symbol.parse("DOGECOIN")
        assert "DOGECOIN" in str(exc_info.value)

    def test_parse_error_hierarchy(self):
        with pytest.raises(ValueError):
            Symbol.parse("")
        assert issubclass(SymbolParseError, DomainParseError)
        assert issubclass(DomainParseError, GmoCoinError)

    def test_non_string_input(self):
        with pytest.raises(SymbolParseError):
            Symbol.parse(None)

    def test_member_count(self):
        assert len(Symbol) == 28


class TestLeverageSymbol:
    """Test cases for the leverage symbol subset."""

    def test_all_are_jpy_pairs(self):
        assert all(member.value.endswith("_JPY") for member in LeverageSymbol)

    def test_subset_of_symbols(self):
        symbols = {member.value for member in Symbol}
        assert {member.value for member in LeverageSymbol} <= symbols

    def test_rejects_spot_asset(self):
        with pytest.raises(SymbolParseError):
            LeverageSymbol.parse("BTC")

    def test_parse(self):
        assert LeverageSymbol.parse("eth_jpy") is LeverageSymbol.ETH_JPY


class TestSide:
    """Test cases for Side."""

    def test_parse(self):
        assert Side.parse("buy") is Side.BUY
        assert Side.parse("SELL") is Side.SELL

    def test_unknown_side(self):
        with pytest.raises(SideParseError):
            Side.parse("HOLD")

    def test_str(self):
        assert str(Side.BUY) == "BUY"


class TestExecutionType:
    """ExecutionType renders but has no free-text parser."""

    def test_values(self):
        assert [str(member) for member in ExecutionType] == ["MARKET", "LIMIT", "STOP"]

    def test_no_parse(self):
        assert not hasattr(ExecutionType, "parse")


class TestKlineInterval:
    """Test cases for KlineInterval."""

    def test_tokens(self):
        assert [member.value for member in KlineInterval] == [
            "1min", "5min", "10min", "15min", "30min",
            "1hour", "4hour", "8hour", "12hour",
            "1day", "1week", "1month",
        ]

    def test_parse_is_case_insensitive(self):
        assert KlineInterval.parse("1MIN") is KlineInterval.ONE_MIN
        assert KlineInterval.parse("1Hour") is KlineInterval.ONE_HOUR

    def test_unknown_interval(self):
        with pytest.raises(DomainParseError):
            KlineInterval.parse("2min")
