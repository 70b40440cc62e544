"""Тесты для валидаторов сообщений.

Coverage:
- MsgBuyName: адрес, имя, положительная ставка
- MsgSetName: адрес, имя, значение
- MsgFaucet: адрес, сумма
- validate_basic маршрутизация
"""

import pytest

from src.app import validate_basic
from src.core.domain import Coins, MsgBuyName, MsgFaucet, MsgSetName, ResultCode, parse_coins
from src.faucet import validate_faucet
from src.nameservice import validate_buy_name, validate_set_name


def buy(**overrides) -> MsgBuyName:
    fields = dict(name="alice.id", value="1.2.3.4", bid=parse_coins("5steak"), buyer="bob")
    fields.update(overrides)
    return MsgBuyName(**fields)


class TestValidateBuyName:
    """Тесты validate_buy_name."""

    def test_valid(self):
        assert validate_buy_name(buy()).is_ok

    def test_empty_value_allowed(self):
        assert validate_buy_name(buy(value="")).is_ok

    def test_empty_buyer(self):
        result = validate_buy_name(buy(buyer=""))
        assert result.code == ResultCode.INVALID_ADDRESS

    def test_empty_name(self):
        result = validate_buy_name(buy(name=""))
        assert result.code == ResultCode.INVALID_REQUEST

    def test_empty_bid(self):
        result = validate_buy_name(buy(bid=Coins.empty()))
        assert result.code == ResultCode.INVALID_COINS

    def test_negative_denom_in_bid(self):
        result = validate_buy_name(buy(bid=Coins.of({"atom": 5, "steak": -1})))
        assert result.code == ResultCode.INVALID_COINS

    def test_address_checked_first(self):
        result = validate_buy_name(buy(buyer="", name="", bid=Coins.empty()))
        assert result.code == ResultCode.INVALID_ADDRESS


class TestValidateSetName:
    """Тесты validate_set_name."""

    def test_valid(self):
        assert validate_set_name(MsgSetName(name="alice.id", value="v", owner="bob")).is_ok

    def test_empty_owner(self):
        result = validate_set_name(MsgSetName(name="alice.id", value="v", owner=""))
        assert result.code == ResultCode.INVALID_ADDRESS

    @pytest.mark.parametrize("name,value", [("", "v"), ("alice.id", ""), ("", "")])
    def test_empty_fields(self, name, value):
        result = validate_set_name(MsgSetName(name=name, value=value, owner="bob"))
        assert result.code == ResultCode.INVALID_REQUEST


class TestValidateFaucet:
    """Тесты validate_faucet."""

    def test_valid(self):
        assert validate_faucet(MsgFaucet(requester="bob", coins=parse_coins("10steak"))).is_ok

    def test_empty_requester(self):
        result = validate_faucet(MsgFaucet(requester="", coins=parse_coins("10steak")))
        assert result.code == ResultCode.INVALID_ADDRESS

    def test_zero_coins(self):
        result = validate_faucet(MsgFaucet(requester="bob", coins=Coins.empty()))
        assert result.code == ResultCode.INVALID_COINS


class TestValidateBasic:
    """Тесты маршрутизации validate_basic."""

    def test_dispatches_by_message_kind(self):
        assert validate_basic(buy(bid=Coins.empty())).code == ResultCode.INVALID_COINS
        assert validate_basic(MsgSetName(name="a.id", value="", owner="b")).code == ResultCode.INVALID_REQUEST
        assert validate_basic(MsgFaucet(requester="", coins=parse_coins("1steak"))).code == ResultCode.INVALID_ADDRESS

    def test_unknown_message(self):
        assert validate_basic(object()).code == ResultCode.UNKNOWN_REQUEST


class TestUtf8Strings:
    """Строки, которые нельзя закодировать в UTF-8."""

    def test_buy_name_surrogate_name(self):
        assert validate_buy_name(buy(name="\ud800")).code == ResultCode.INVALID_REQUEST

    def test_buy_name_surrogate_value(self):
        assert validate_buy_name(buy(value="\udfff")).code == ResultCode.INVALID_REQUEST

    def test_buy_name_surrogate_buyer(self):
        assert validate_buy_name(buy(buyer="\ud800")).code == ResultCode.INVALID_ADDRESS

    def test_set_name_surrogate_fields(self):
        assert validate_set_name(MsgSetName(name="\ud800", value="v", owner="bob")).code == ResultCode.INVALID_REQUEST
        assert validate_set_name(MsgSetName(name="a.id", value="v", owner="\ud800")).code == ResultCode.INVALID_ADDRESS

    def test_non_ascii_names_accepted(self):
        assert validate_buy_name(buy(name="имя.id")).is_ok
