"""Message Validators — структурные проверки сообщений nameservice.

Чистые функции: работают только с полями сообщения, не трогают store
и ledger. Запускаются до handler'а; отказ возвращается как Result.

Порядок проверок:
1. Адрес подписанта непустой и кодируется в UTF-8 → INVALID_ADDRESS
2. Обязательные строковые поля непустые, все строки кодируются в UTF-8 → INVALID_REQUEST
3. Ставка строго положительна → INVALID_COINS
"""

from src.core.domain.messages import MsgBuyName, MsgSetName, is_utf8_encodable
from src.core.domain.result import Result, ResultCode


def validate_buy_name(msg: MsgBuyName) -> Result:
    """Проверка MsgBuyName.

    value может быть пустым: покупка без привязки значения допустима.
    """
    if not msg.buyer or not is_utf8_encodable(msg.buyer):
        return Result.error(ResultCode.INVALID_ADDRESS, "buyer address must be a non-empty UTF-8 string")
    if not msg.name:
        return Result.error(ResultCode.INVALID_REQUEST, "name cannot be empty")
    if not is_utf8_encodable(msg.name) or not is_utf8_encodable(msg.value):
        return Result.error(ResultCode.INVALID_REQUEST, "name and value must be valid UTF-8")
    if not msg.bid.is_positive():
        return Result.error(ResultCode.INVALID_COINS, f"bid must be positive, got [{msg.bid}]")
    return Result.ok()


def validate_set_name(msg: MsgSetName) -> Result:
    """Проверка MsgSetName."""
    if not msg.owner or not is_utf8_encodable(msg.owner):
        return Result.error(ResultCode.INVALID_ADDRESS, "owner address must be a non-empty UTF-8 string")
    if not msg.name or not msg.value:
        return Result.error(ResultCode.INVALID_REQUEST, "name and value cannot be empty")
    if not is_utf8_encodable(msg.name) or not is_utf8_encodable(msg.value):
        return Result.error(ResultCode.INVALID_REQUEST, "name and value must be valid UTF-8")
    return Result.ok()
