"""Тесты для FaucetHandler.

Coverage:
- Начисление монет
- Лимит начисления
- Чужие сообщения
"""

import pytest

from src.bank import BankKeeper
from src.core.domain import MsgFaucet, MsgSetName, ResultCode, parse_coins
from src.faucet import FaucetHandler
from src.store import Context, MultiStore, StoreKey

ACC = StoreKey("acc")


@pytest.fixture
def ctx():
    ms = MultiStore()
    ms.mount(ACC)
    return Context(multi_store=ms)


@pytest.fixture
def bank():
    return BankKeeper(ACC)


class TestFaucetHandler:
    """Тесты faucet."""

    def test_grant_adds_to_balance(self, bank, ctx):
        handler = FaucetHandler(bank)
        handler(ctx, MsgFaucet(requester="bob", coins=parse_coins("10steak")))
        result = handler(ctx, MsgFaucet(requester="bob", coins=parse_coins("5steak,1atom")))

        assert result.is_ok
        assert bank.get_coins(ctx, "bob") == parse_coins("1atom,15steak")

    def test_grant_over_limit_rejected(self, bank, ctx):
        handler = FaucetHandler(bank, max_grant=parse_coins("10steak"))

        result = handler(ctx, MsgFaucet(requester="bob", coins=parse_coins("11steak")))

        assert result.code == ResultCode.INVALID_COINS
        assert bank.get_coins(ctx, "bob").is_zero()

    def test_grant_in_unlimited_denom_rejected(self, bank, ctx):
        handler = FaucetHandler(bank, max_grant=parse_coins("10steak"))
        result = handler(ctx, MsgFaucet(requester="bob", coins=parse_coins("1atom")))
        assert result.code == ResultCode.INVALID_COINS

    def test_grant_at_limit_accepted(self, bank, ctx):
        handler = FaucetHandler(bank, max_grant=parse_coins("10steak"))
        assert handler(ctx, MsgFaucet(requester="bob", coins=parse_coins("10steak"))).is_ok

    def test_foreign_message_rejected(self, bank, ctx):
        result = FaucetHandler(bank)(ctx, MsgSetName(name="a.id", value="v", owner="bob"))
        assert result.code == ResultCode.UNKNOWN_REQUEST
