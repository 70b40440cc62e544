"""
Codec — wire-кодирование сообщений

Формат конверта (amino-JSON стиль):
    {"type": "nameservice/BuyName", "value": {...}}

Coins на wire передаются списком {"denom", "amount"}, amount как десятичная строка.
Кодирование каноническое (sort_keys, без пробелов), поэтому результат
encode_msg пригоден как sign bytes.
"""

import json
from typing import Any, Dict, Type

from jsonschema import ValidationError
from pydantic import BaseModel
from pydantic import ValidationError as ModelValidationError

from src.core.domain.coins import Coin, Coins
from src.core.domain.messages import Msg, MsgBuyName, MsgFaucet, MsgSetName

from .validators import (
    BuyNameValidator,
    ContractValidator,
    FaucetValidator,
    SetNameValidator,
    validate_tx_envelope,
)


class TxDecodeError(Exception):
    """Байты транзакции не соответствуют wire-контракту."""


# =============================================================================
# РЕЕСТР ТИПОВ
# =============================================================================

# wire type → (модель, валидатор payload)
_REGISTERED: Dict[str, tuple[Type[BaseModel], Type[ContractValidator]]] = {
    "nameservice/BuyName": (MsgBuyName, BuyNameValidator),
    "nameservice/SetName": (MsgSetName, SetNameValidator),
    "faucet/Faucet": (MsgFaucet, FaucetValidator),
}

_WIRE_NAMES: Dict[Type[BaseModel], str] = {model: name for name, (model, _) in _REGISTERED.items()}

# Поля типа Coins в payload
_COIN_FIELDS = ("bid", "coins")


def coins_to_wire(coins: Coins) -> list[dict[str, str]]:
    return [{"denom": c.denom, "amount": str(c.amount)} for c in coins.coins]


def coins_from_wire(items: list[dict[str, str]]) -> Coins:
    amounts: dict[str, int] = {}
    for item in items:
        if item["denom"] in amounts:
            raise ValueError(f"duplicate denomination {item['denom']!r}")
        amounts[item["denom"]] = int(item["amount"])
    return Coins.of(amounts)


def wire_type(msg: Msg) -> str:
    try:
        return _WIRE_NAMES[type(msg)]
    except KeyError:
        raise TxDecodeError(f"unregistered message type: {type(msg).__name__}") from None


# =============================================================================
# ENCODE / DECODE
# =============================================================================


def msg_to_wire(msg: Msg) -> Dict[str, Any]:
    value = msg.model_dump()
    for field_name in _COIN_FIELDS:
        if field_name in value:
            value[field_name] = coins_to_wire(getattr(msg, field_name))
    return {"type": wire_type(msg), "value": value}


def encode_msg(msg: Msg) -> bytes:
    """Каноническое JSON-представление сообщения"""
    return json.dumps(msg_to_wire(msg), separators=(",", ":"), sort_keys=True).encode("utf-8")


def decode_msg(tx_bytes: bytes) -> Msg:
    """
    Декодирование транзакции в типизированное сообщение.

    Raises:
        TxDecodeError: Невалидный JSON, нарушение схемы или незарегистрированный тип
    """
    try:
        data = json.loads(tx_bytes)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise TxDecodeError(f"malformed tx bytes: {e}") from e

    try:
        validate_tx_envelope(data)
        model, payload_validator = _REGISTERED[data["type"]]
        payload_validator().validate(data["value"])
    except ValidationError as e:
        raise TxDecodeError(f"contract violation: {e.message}") from e

    value = dict(data["value"])
    try:
        for field_name in _COIN_FIELDS:
            if field_name in value:
                value[field_name] = coins_from_wire(value[field_name])
    except ValueError as e:
        raise TxDecodeError(f"invalid coins: {e}") from e

    try:
        return model(**value)
    except ModelValidationError as e:
        raise TxDecodeError(f"invalid message payload: {e}") from e
