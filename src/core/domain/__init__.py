"""
Domain models and value objects.

Contains fundamental domain entities: Coins, typed messages, WhoIs, Result.
"""

from src.core.domain.coins import (
    DEFAULT_PRICE_AMOUNT,
    DEFAULT_PRICE_DENOM,
    Coin,
    Coins,
    default_price,
    parse_coins,
)
from src.core.domain.messages import (
    AccountAddress,
    Msg,
    MsgBuyName,
    MsgFaucet,
    MsgSetName,
)
from src.core.domain.record import WhoIs
from src.core.domain.result import Result, ResultCode

__all__ = [
    # Coins module
    "DEFAULT_PRICE_DENOM",
    "DEFAULT_PRICE_AMOUNT",
    "Coin",
    "Coins",
    "default_price",
    "parse_coins",
    # Messages
    "AccountAddress",
    "Msg",
    "MsgBuyName",
    "MsgSetName",
    "MsgFaucet",
    # Query views
    "WhoIs",
    # Results
    "Result",
    "ResultCode",
]
