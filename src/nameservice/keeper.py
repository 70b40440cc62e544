"""Registry Keeper — типизированный доступ к фактам записей.

Единственный компонент, который читает и пишет value/owner/price.
Keeper не валидирует и не двигает балансы: все бизнес-правила живут
в handler'е.
"""

from typing import Iterator, Optional

from src.core.domain.coins import Coins, default_price
from src.core.domain.messages import AccountAddress
from src.core.domain.record import WhoIs
from src.store.context import Context
from src.store.kvstore import StoreKey

from .keys import OWNER_PREFIX, name_from_key, owner_key, price_key, value_key


class RegistryKeeper:
    """Keeper реестра имён.

    Args:
        key: раздел хранилища с фактами записей
    """

    def __init__(self, key: StoreKey):
        self._key = key

    @property
    def store_key(self) -> StoreKey:
        return self._key

    # -------------------------------------------------------------------------
    # Value
    # -------------------------------------------------------------------------

    def get_value(self, ctx: Context, name: str) -> str:
        """Значение записи (пустая строка если не задано)"""
        bz = ctx.kv_store(self._key).get(value_key(name))
        if bz is None:
            return ""
        return bz.decode("utf-8")

    def set_value(self, ctx: Context, name: str, value: str) -> None:
        ctx.kv_store(self._key).set(value_key(name), value.encode("utf-8"))

    # -------------------------------------------------------------------------
    # Owner
    # -------------------------------------------------------------------------

    def has_owner(self, ctx: Context, name: str) -> bool:
        return ctx.kv_store(self._key).has(owner_key(name))

    def get_owner(self, ctx: Context, name: str) -> Optional[AccountAddress]:
        bz = ctx.kv_store(self._key).get(owner_key(name))
        if bz is None:
            return None
        return bz.decode("utf-8")

    def set_owner(self, ctx: Context, name: str, owner: AccountAddress) -> None:
        ctx.kv_store(self._key).set(owner_key(name), owner.encode("utf-8"))

    # -------------------------------------------------------------------------
    # Price
    # -------------------------------------------------------------------------

    def get_price(self, ctx: Context, name: str) -> Coins:
        """Цена последней покупки.

        Для записи без истории покупок возвращает default_price() (1steak),
        чтобы у первой ставки была определённая нижняя граница.
        """
        bz = ctx.kv_store(self._key).get(price_key(name))
        if bz is None:
            return default_price()
        return Coins.from_bytes(bz)

    def set_price(self, ctx: Context, name: str, price: Coins) -> None:
        ctx.kv_store(self._key).set(price_key(name), price.to_bytes())

    # -------------------------------------------------------------------------
    # Сводные чтения
    # -------------------------------------------------------------------------

    def get_whois(self, ctx: Context, name: str) -> WhoIs:
        return WhoIs(
            value=self.get_value(ctx, name),
            owner=self.get_owner(ctx, name),
            price=self.get_price(ctx, name),
        )

    def iterate_names(self, ctx: Context) -> Iterator[str]:
        """Имена всех занятых записей в порядке ключей"""
        for key, _ in ctx.kv_store(self._key).iterate(OWNER_PREFIX):
            yield name_from_key(key)
