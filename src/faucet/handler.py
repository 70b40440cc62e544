"""Faucet — начисление монет на счёт по запросу.

Используется для наполнения аккаунтов в демо- и тестовых сетях.
Если задан max_grant, запрос больше лимита отклоняется целиком.
"""

import logging
from typing import Optional

from src.bank.keeper import BankKeeper
from src.core.domain.coins import Coins
from src.core.domain.messages import Msg, MsgFaucet, is_utf8_encodable
from src.core.domain.result import Result, ResultCode
from src.store.context import Context

logger = logging.getLogger(__name__)


def validate_faucet(msg: MsgFaucet) -> Result:
    if not msg.requester or not is_utf8_encodable(msg.requester):
        return Result.error(ResultCode.INVALID_ADDRESS, "requester address must be a non-empty UTF-8 string")
    if not msg.coins.is_positive():
        return Result.error(ResultCode.INVALID_COINS, f"faucet amount must be positive, got [{msg.coins}]")
    return Result.ok()


class FaucetHandler:
    """Handler сообщений faucet.

    Args:
        bank: ledger балансов
        max_grant: лимит одного начисления (None = без лимита)
    """

    ROUTE = "faucet"

    def __init__(self, bank: BankKeeper, max_grant: Optional[Coins] = None):
        self.bank = bank
        self.max_grant = max_grant

    def __call__(self, ctx: Context, msg: Msg) -> Result:
        match msg:
            case MsgFaucet():
                return self.handle_faucet(ctx, msg)
            case _:
                return Result.error(
                    ResultCode.UNKNOWN_REQUEST,
                    f"unrecognized faucet message: {type(msg).__name__}",
                )

    def handle_faucet(self, ctx: Context, msg: MsgFaucet) -> Result:
        if self.max_grant is not None and not self.max_grant.is_gte(msg.coins):
            return Result.error(
                ResultCode.INVALID_COINS,
                f"faucet grant [{msg.coins}] exceeds limit [{self.max_grant}]",
            )

        balance = self.bank.add_coins(ctx, msg.requester, msg.coins)
        logger.info("faucet: granted [%s] to %r, balance [%s]", msg.coins, msg.requester, balance)
        return Result.ok()
