"""Тесты для BankKeeper.

Coverage:
- Начисление и списание
- Перевод между аккаунтами
- Нехватка средств без частичной записи
- Перевод самому себе
"""

import pytest

from src.bank import BankKeeper, InsufficientFundsError
from src.core.domain.coins import Coins, parse_coins
from src.store import Context, MultiStore, StoreKey

ACC = StoreKey("acc")


@pytest.fixture
def ctx():
    ms = MultiStore()
    ms.mount(ACC)
    return Context(multi_store=ms)


@pytest.fixture
def bank(ctx):
    keeper = BankKeeper(ACC)
    keeper.set_coins(ctx, "alice", parse_coins("10steak,3atom"))
    return keeper


class TestBankKeeper:
    """Тесты ledger балансов."""

    def test_unknown_account_has_empty_balance(self, bank, ctx):
        assert bank.get_coins(ctx, "nobody").is_zero()

    def test_add_coins(self, bank, ctx):
        balance = bank.add_coins(ctx, "alice", parse_coins("5steak"))
        assert balance == parse_coins("3atom,15steak")
        assert bank.get_coins(ctx, "alice") == balance

    def test_add_negative_rejected(self, bank, ctx):
        with pytest.raises(ValueError):
            bank.add_coins(ctx, "alice", Coins.of({"steak": -1}))

    def test_subtract_coins(self, bank, ctx):
        bank.subtract_coins(ctx, "alice", parse_coins("4steak"))
        assert bank.get_coins(ctx, "alice") == parse_coins("3atom,6steak")

    def test_subtract_insufficient(self, bank, ctx):
        with pytest.raises(InsufficientFundsError) as exc_info:
            bank.subtract_coins(ctx, "alice", parse_coins("11steak"))
        assert exc_info.value.address == "alice"
        assert bank.get_coins(ctx, "alice") == parse_coins("10steak,3atom")

    def test_subtract_missing_denom(self, bank, ctx):
        with pytest.raises(InsufficientFundsError):
            bank.subtract_coins(ctx, "alice", parse_coins("1photon"))

    def test_subtract_all_clears_entry(self, bank, ctx):
        bank.subtract_coins(ctx, "alice", parse_coins("10steak,3atom"))
        assert bank.get_coins(ctx, "alice").is_zero()
        assert not bank.has_coins(ctx, "alice", parse_coins("1steak"))

    def test_send_coins(self, bank, ctx):
        bank.send_coins(ctx, "alice", "bob", parse_coins("7steak"))
        assert bank.get_coins(ctx, "alice") == parse_coins("3atom,3steak")
        assert bank.get_coins(ctx, "bob") == parse_coins("7steak")

    def test_send_insufficient_leaves_both_balances(self, bank, ctx):
        with pytest.raises(InsufficientFundsError):
            bank.send_coins(ctx, "alice", "bob", parse_coins("20steak"))
        assert bank.get_coins(ctx, "alice") == parse_coins("10steak,3atom")
        assert bank.get_coins(ctx, "bob").is_zero()

    def test_send_to_self_is_net_zero(self, bank, ctx):
        bank.send_coins(ctx, "alice", "alice", parse_coins("10steak"))
        assert bank.get_coins(ctx, "alice") == parse_coins("10steak,3atom")

    def test_send_to_self_still_requires_funds(self, bank, ctx):
        with pytest.raises(InsufficientFundsError):
            bank.send_coins(ctx, "alice", "alice", parse_coins("11steak"))
