"""Bank Keeper — ledger балансов аккаунтов.

Балансы хранятся в собственном разделе хранилища под ключом
b"balance:" + address в канонической JSON-форме Coins.

Операции:
- add_coins: начисление (credit)
- subtract_coins: списание без получателя (debit)
- send_coins: перевод между аккаунтами (transfer)

Нехватка средств → InsufficientFundsError, без частичной записи.
"""

import logging

from src.core.domain.coins import Coins
from src.core.domain.messages import AccountAddress
from src.store.context import Context
from src.store.kvstore import StoreKey

logger = logging.getLogger(__name__)

BALANCE_PREFIX = b"balance:"


class InsufficientFundsError(Exception):
    """Баланс аккаунта меньше запрошенной суммы хотя бы в одной деноминации."""

    def __init__(self, address: AccountAddress, balance: Coins, requested: Coins):
        self.address = address
        self.balance = balance
        self.requested = requested
        super().__init__(
            f"insufficient funds: account {address!r} has [{balance}], needs [{requested}]"
        )


def balance_key(address: AccountAddress) -> bytes:
    return BALANCE_PREFIX + address.encode("utf-8")


class BankKeeper:
    """Keeper балансов.

    Args:
        key: раздел хранилища, в котором лежат балансы
    """

    def __init__(self, key: StoreKey):
        self._key = key

    # -------------------------------------------------------------------------
    # Чтение
    # -------------------------------------------------------------------------

    def get_coins(self, ctx: Context, address: AccountAddress) -> Coins:
        bz = ctx.kv_store(self._key).get(balance_key(address))
        if bz is None:
            return Coins.empty()
        return Coins.from_bytes(bz)

    def has_coins(self, ctx: Context, address: AccountAddress, amount: Coins) -> bool:
        return self.get_coins(ctx, address).is_gte(amount)

    # -------------------------------------------------------------------------
    # Запись
    # -------------------------------------------------------------------------

    def set_coins(self, ctx: Context, address: AccountAddress, amount: Coins) -> None:
        if amount.is_any_negative():
            raise ValueError(f"balance cannot be negative: {amount}")
        store = ctx.kv_store(self._key)
        if amount.is_zero():
            store.delete(balance_key(address))
        else:
            store.set(balance_key(address), amount.to_bytes())

    def add_coins(self, ctx: Context, address: AccountAddress, amount: Coins) -> Coins:
        """Начисление монет.

        Returns:
            Новый баланс

        Raises:
            ValueError: если amount содержит отрицательные суммы
        """
        if amount.is_any_negative():
            raise ValueError(f"cannot add negative coins: {amount}")
        new_balance = self.get_coins(ctx, address).plus(amount)
        self.set_coins(ctx, address, new_balance)
        return new_balance

    def subtract_coins(self, ctx: Context, address: AccountAddress, amount: Coins) -> Coins:
        """Списание монет без получателя.

        Returns:
            Новый баланс

        Raises:
            InsufficientFundsError: если баланс меньше amount
        """
        balance = self.get_coins(ctx, address)
        new_balance = balance.minus(amount)
        if new_balance.is_any_negative():
            raise InsufficientFundsError(address, balance, amount)
        self.set_coins(ctx, address, new_balance)
        return new_balance

    def send_coins(
        self,
        ctx: Context,
        from_address: AccountAddress,
        to_address: AccountAddress,
        amount: Coins,
    ) -> None:
        """Перевод монет.

        Перевод самому себе не меняет баланс, но достаточность средств
        всё равно проверяется.

        Raises:
            InsufficientFundsError: если у отправителя не хватает средств
        """
        self.subtract_coins(ctx, from_address, amount)
        self.add_coins(ctx, to_address, amount)
        logger.debug("transfer %s: %s -> %s", amount, from_address, to_address)
