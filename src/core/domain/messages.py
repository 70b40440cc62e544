"""
Messages — Типизированные транзакционные сообщения

Закрытое множество операций, которые принимает приложение:
- MsgBuyName: покупка (или перекупка) записи по ставке
- MsgSetName: изменение value владельцем записи
- MsgFaucet: начисление монет на счёт (модуль faucet)

Модели проверяют только ТИПЫ полей. Семантические проверки (непустые
адреса, положительная ставка) выполняют валидаторы модулей, чтобы ошибки
возвращались как результат транзакции, а не как исключение.
"""

from typing import ClassVar, Union

from pydantic import BaseModel, Field

from .coins import Coins


# Адрес аккаунта (bech32-строка или любой непрозрачный идентификатор)
AccountAddress = str


def is_utf8_encodable(text: str) -> bool:
    """Строка кодируется в UTF-8 (нет одиночных суррогатов)"""
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


# =============================================================================
# NAMESERVICE
# =============================================================================


class MsgBuyName(BaseModel):
    """Покупка записи: перебить текущую цену ставкой bid."""

    ROUTE: ClassVar[str] = "nameservice"
    TYPE: ClassVar[str] = "buy_name"

    name: str = Field(..., description="Имя записи (регистрозависимое)")
    value: str = Field(..., description="Значение, которое будет привязано к записи")
    bid: Coins = Field(..., description="Предлагаемая сумма")
    buyer: AccountAddress = Field(..., description="Адрес покупателя")

    model_config = {"frozen": True}

    def get_signers(self) -> list[AccountAddress]:
        return [self.buyer]


class MsgSetName(BaseModel):
    """Изменение value записи её текущим владельцем."""

    ROUTE: ClassVar[str] = "nameservice"
    TYPE: ClassVar[str] = "set_name"

    name: str = Field(..., description="Имя записи")
    value: str = Field(..., description="Новое значение")
    owner: AccountAddress = Field(..., description="Адрес подписанта (должен быть владельцем)")

    model_config = {"frozen": True}

    def get_signers(self) -> list[AccountAddress]:
        return [self.owner]


# =============================================================================
# FAUCET
# =============================================================================


class MsgFaucet(BaseModel):
    """Начисление монет на счёт запросившего."""

    ROUTE: ClassVar[str] = "faucet"
    TYPE: ClassVar[str] = "faucet"

    requester: AccountAddress = Field(..., description="Адрес получателя")
    coins: Coins = Field(..., description="Сумма начисления")

    model_config = {"frozen": True}

    def get_signers(self) -> list[AccountAddress]:
        return [self.requester]


Msg = Union[MsgBuyName, MsgSetName, MsgFaucet]
