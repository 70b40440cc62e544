"""
WhoIs — Сводное представление записи реестра

Read-only снапшот трёх фактов записи (value, owner, price) для query-пути.
Незанятая запись представлена пустым value, owner=None и ценой по умолчанию.
"""

from typing import Optional

from pydantic import BaseModel, Field

from .coins import Coins
from .messages import AccountAddress


class WhoIs(BaseModel):
    """Снапшот записи по имени."""

    value: str = Field("", description="Привязанное значение (пусто если не задано)")
    owner: Optional[AccountAddress] = Field(None, description="Владелец (None если запись свободна)")
    price: Coins = Field(default_factory=Coins.empty, description="Цена последней покупки")

    model_config = {"frozen": True}

    @property
    def is_claimed(self) -> bool:
        return self.owner is not None
