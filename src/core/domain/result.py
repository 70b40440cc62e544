"""
Result — Результат обработки транзакции или запроса

Ошибки бизнес-правил не выбрасываются через границу handler'а: каждая
операция возвращает Result с кодом и текстовым логом.
"""

from dataclasses import dataclass
from enum import Enum


class ResultCode(str, Enum):
    """Код результата транзакции"""

    OK = "ok"

    # Ошибки декодирования и маршрутизации
    TX_DECODE = "tx_decode"
    UNKNOWN_REQUEST = "unknown_request"

    # Ошибки валидации сообщений
    INVALID_ADDRESS = "invalid_address"
    INVALID_REQUEST = "invalid_request"
    INVALID_COINS = "invalid_coins"

    # Отказы бизнес-правил
    INSUFFICIENT_BID = "insufficient_bid"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    UNAUTHORIZED = "unauthorized"


@dataclass(frozen=True)
class Result:
    """Результат операции."""

    code: ResultCode
    log: str = ""
    data: bytes = b""

    @property
    def is_ok(self) -> bool:
        return self.code == ResultCode.OK

    @classmethod
    def ok(cls, data: bytes = b"", log: str = "") -> "Result":
        return cls(code=ResultCode.OK, log=log, data=data)

    @classmethod
    def error(cls, code: ResultCode, log: str) -> "Result":
        if code == ResultCode.OK:
            raise ValueError("error result requires a non-OK code")
        return cls(code=code, log=log)
