"""
Coins — Мульти-деноминационные суммы

Immutable Pydantic модели для сумм в одной или нескольких деноминациях.
Используются для ставок (bid), цены записи (price) и балансов ledger.

Правила сравнения (единые для всей системы):
- is_gte(other): для КАЖДОЙ деноминации из other своя сумма >= суммы other
- is_positive(): хотя бы одна деноминация и все суммы > 0

Каноническая форма: монеты отсортированы по denom, без дубликатов, без нулей.
"""

import json
import re
from typing import Final

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Допустимый формат деноминации
DENOM_PATTERN: Final[str] = r"^[a-z][a-z0-9]{2,15}$"

# Формат одной монеты в строке: "<amount><denom>"
_COIN_STR_RE: Final = re.compile(r"^([0-9]+)([a-z][a-z0-9]{2,15})$")

# Политика цены по умолчанию: запись без истории покупок стоит 1steak
DEFAULT_PRICE_DENOM: Final[str] = "steak"
DEFAULT_PRICE_AMOUNT: Final[int] = 1


# =============================================================================
# COIN
# =============================================================================


class Coin(BaseModel):
    """Сумма в одной деноминации."""

    denom: str = Field(..., pattern=DENOM_PATTERN, description="Деноминация")
    amount: int = Field(..., description="Сумма (целое, может быть < 0 только в промежуточных расчётах)")

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"{self.amount}{self.denom}"


# =============================================================================
# COINS
# =============================================================================


class Coins(BaseModel):
    """
    Набор монет в разных деноминациях.

    Immutable модель (frozen=True). Все арифметические операции возвращают
    новый экземпляр в канонической форме.
    """

    coins: tuple[Coin, ...] = Field(default=(), description="Монеты, отсортированные по denom")

    model_config = {"frozen": True}

    @field_validator("coins")
    @classmethod
    def validate_canonical(cls, v: tuple[Coin, ...]) -> tuple[Coin, ...]:
        """Проверка сортировки и уникальности деноминаций"""
        denoms = [c.denom for c in v]
        if len(set(denoms)) != len(denoms):
            raise ValueError(f"duplicate denomination in {denoms}")
        if denoms != sorted(denoms):
            raise ValueError(f"coins must be sorted by denom, got {denoms}")
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, amounts: dict[str, int]) -> "Coins":
        """
        Построение Coins из словаря denom → amount.

        Нулевые суммы отбрасываются, результат сортируется.
        """
        return cls(
            coins=tuple(
                Coin(denom=denom, amount=amount)
                for denom, amount in sorted(amounts.items())
                if amount != 0
            )
        )

    @classmethod
    def empty(cls) -> "Coins":
        return cls()

    # -------------------------------------------------------------------------
    # Запросы
    # -------------------------------------------------------------------------

    def as_dict(self) -> dict[str, int]:
        return {c.denom: c.amount for c in self.coins}

    def amount_of(self, denom: str) -> int:
        """Сумма в деноминации denom (0 если отсутствует)"""
        for c in self.coins:
            if c.denom == denom:
                return c.amount
        return 0

    def is_zero(self) -> bool:
        return len(self.coins) == 0

    def is_positive(self) -> bool:
        """
        Строго положительная сумма.

        Returns:
            True если есть хотя бы одна деноминация и все суммы > 0
        """
        if not self.coins:
            return False
        return all(c.amount > 0 for c in self.coins)

    def is_any_negative(self) -> bool:
        return any(c.amount < 0 for c in self.coins)

    def is_gte(self, other: "Coins") -> bool:
        """
        self >= other по каждой деноминации из other.

        Пустой other всегда покрыт. Деноминации, которых нет в other,
        не влияют на результат.
        """
        return not self.minus(other).is_any_negative()

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def plus(self, other: "Coins") -> "Coins":
        result = self.as_dict()
        for c in other.coins:
            result[c.denom] = result.get(c.denom, 0) + c.amount
        return Coins.of(result)

    def minus(self, other: "Coins") -> "Coins":
        result = self.as_dict()
        for c in other.coins:
            result[c.denom] = result.get(c.denom, 0) - c.amount
        return Coins.of(result)

    # -------------------------------------------------------------------------
    # Сериализация
    # -------------------------------------------------------------------------

    def to_bytes(self) -> bytes:
        """Каноническое JSON-представление для хранения в store"""
        payload = [{"denom": c.denom, "amount": str(c.amount)} for c in self.coins]
        return json.dumps(payload, separators=(",", ":"), sort_keys=True).encode("utf-8")

    @classmethod
    def from_bytes(cls, bz: bytes) -> "Coins":
        payload = json.loads(bz.decode("utf-8"))
        return cls.of({item["denom"]: int(item["amount"]) for item in payload})

    def __str__(self) -> str:
        return ",".join(str(c) for c in self.coins)


# =============================================================================
# ПАРСИНГ
# =============================================================================


def parse_coins(text: str) -> Coins:
    """
    Парсинг строки вида "10steak,5atom".

    Args:
        text: Строка монет через запятую (пустая строка → пустой набор)

    Returns:
        Coins в канонической форме

    Raises:
        ValueError: Если формат некорректен или деноминация повторяется
    """
    text = text.strip()
    if not text:
        return Coins.empty()

    amounts: dict[str, int] = {}
    for part in text.split(","):
        match = _COIN_STR_RE.match(part.strip())
        if match is None:
            raise ValueError(f"Invalid coin expression: {part!r}")
        amount, denom = int(match.group(1)), match.group(2)
        if denom in amounts:
            raise ValueError(f"Duplicate denomination {denom!r} in {text!r}")
        amounts[denom] = amount

    return Coins.of(amounts)


def default_price() -> Coins:
    """Цена записи, которая ещё ни разу не покупалась"""
    return Coins.of({DEFAULT_PRICE_DENOM: DEFAULT_PRICE_AMOUNT})
