"""Transition Handler — бизнес-правила реестра имён.

Обрабатывает MsgBuyName и MsgSetName:
- читает текущее состояние через RegistryKeeper
- двигает балансы через BankKeeper
- пишет факты записи только после успешного движения средств

Handler не откатывает записи сам: атомарность транзакции обеспечивает
кэшированный Context хоста (commit только при OK).
"""

import logging

from src.bank.keeper import BankKeeper, InsufficientFundsError
from src.core.domain.messages import Msg, MsgBuyName, MsgSetName
from src.core.domain.result import Result, ResultCode
from src.store.context import Context

from .keeper import RegistryKeeper

logger = logging.getLogger(__name__)


class NameserviceHandler:
    """Handler сообщений nameservice.

    Args:
        keeper: keeper фактов записей
        bank: ledger балансов
    """

    ROUTE = "nameservice"

    def __init__(self, keeper: RegistryKeeper, bank: BankKeeper):
        self.keeper = keeper
        self.bank = bank

    def __call__(self, ctx: Context, msg: Msg) -> Result:
        match msg:
            case MsgBuyName():
                return self.handle_buy_name(ctx, msg)
            case MsgSetName():
                return self.handle_set_name(ctx, msg)
            case _:
                return Result.error(
                    ResultCode.UNKNOWN_REQUEST,
                    f"unrecognized nameservice message: {type(msg).__name__}",
                )

    def handle_buy_name(self, ctx: Context, msg: MsgBuyName) -> Result:
        """Покупка записи.

        1. Ставка должна строго перебить текущую цену
        2. Занятая запись → перевод ставки владельцу
        3. Свободная запись → списание ставки с покупателя
        4. Запись owner, price, value
        """
        price = self.keeper.get_price(ctx, msg.name)
        if price.is_gte(msg.bid):
            logger.info(
                "buy_name rejected: name=%r bid=[%s] does not exceed price=[%s]",
                msg.name, msg.bid, price,
            )
            return Result.error(
                ResultCode.INSUFFICIENT_BID,
                f"bid [{msg.bid}] not high enough, current price [{price}]",
            )

        owner = self.keeper.get_owner(ctx, msg.name)
        try:
            if owner is not None:
                self.bank.send_coins(ctx, msg.buyer, owner, msg.bid)
            else:
                self.bank.subtract_coins(ctx, msg.buyer, msg.bid)
        except InsufficientFundsError as e:
            logger.info("buy_name rejected: name=%r %s", msg.name, e)
            return Result.error(ResultCode.INSUFFICIENT_FUNDS, "buyer does not have enough coins")

        self.keeper.set_owner(ctx, msg.name, msg.buyer)
        self.keeper.set_price(ctx, msg.name, msg.bid)
        self.keeper.set_value(ctx, msg.name, msg.value)

        logger.info(
            "buy_name accepted: name=%r buyer=%r previous_owner=%r bid=[%s]",
            msg.name, msg.buyer, owner, msg.bid,
        )
        return Result.ok()

    def handle_set_name(self, ctx: Context, msg: MsgSetName) -> Result:
        """Изменение value владельцем. Свободную запись изменить нельзя."""
        owner = self.keeper.get_owner(ctx, msg.name)
        if owner is None or owner != msg.owner:
            logger.info("set_name rejected: name=%r signer=%r owner=%r", msg.name, msg.owner, owner)
            return Result.error(ResultCode.UNAUTHORIZED, f"{msg.owner!r} is not the owner of {msg.name!r}")

        self.keeper.set_value(ctx, msg.name, msg.value)
        logger.debug("set_name accepted: name=%r", msg.name)
        return Result.ok()
