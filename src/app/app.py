"""NameshakeApp — сборка модулей в одно приложение.

Пайплайн транзакции:
1. decode_msg: wire-байты → типизированное сообщение (JSON Schema контракт)
2. validate_basic: структурная проверка сообщения
3. маршрутизация по msg.ROUTE → handler модуля
4. handler выполняется на кэшированном Context; изменения фиксируются
   только при Result.OK, иначе кэш отбрасывается целиком

Транзакции применяются строго последовательно; хост гарантирует порядок.
"""

import json
import logging
from typing import Callable, Dict, Optional

from src.bank.keeper import BankKeeper
from src.core.contracts.codec import TxDecodeError, coins_to_wire, decode_msg
from src.core.domain.messages import Msg, MsgBuyName, MsgFaucet, MsgSetName, is_utf8_encodable
from src.core.domain.result import Result, ResultCode
from src.faucet.handler import FaucetHandler, validate_faucet
from src.nameservice.handler import NameserviceHandler
from src.nameservice.keeper import RegistryKeeper
from src.nameservice.querier import NameserviceQuerier
from src.nameservice.validators import validate_buy_name, validate_set_name
from src.store.context import Context
from src.store.kvstore import MultiStore, StoreKey

from .config import AppConfig
from .genesis import GenesisState

logger = logging.getLogger(__name__)

Handler = Callable[[Context, Msg], Result]

# Разделы хранилища
ACCOUNT_STORE_KEY = StoreKey("acc")
NAMESERVICE_STORE_KEY = StoreKey("ns")


def validate_basic(msg: Msg) -> Result:
    """Структурная проверка сообщения до обращения к состоянию."""
    match msg:
        case MsgBuyName():
            return validate_buy_name(msg)
        case MsgSetName():
            return validate_set_name(msg)
        case MsgFaucet():
            return validate_faucet(msg)
        case _:
            return Result.error(ResultCode.UNKNOWN_REQUEST, f"unknown message: {type(msg).__name__}")


class NameshakeApp:
    """Приложение реестра имён.

    Args:
        config: конфигурация приложения (по умолчанию AppConfig())
    """

    def __init__(self, config: Optional[AppConfig] = None):
        self.config = config or AppConfig()

        self.multi_store = MultiStore()
        self.multi_store.mount(ACCOUNT_STORE_KEY)
        self.multi_store.mount(NAMESERVICE_STORE_KEY)

        self.bank = BankKeeper(ACCOUNT_STORE_KEY)
        self.registry = RegistryKeeper(NAMESERVICE_STORE_KEY)
        self.querier = NameserviceQuerier(self.registry)

        self._routes: Dict[str, Handler] = {
            NameserviceHandler.ROUTE: NameserviceHandler(self.registry, self.bank),
        }
        if self.config.faucet_enabled:
            self._routes[FaucetHandler.ROUTE] = FaucetHandler(
                self.bank, max_grant=self.config.faucet_max_grant
            )

        self.height = 0

    # -------------------------------------------------------------------------
    # Контекст
    # -------------------------------------------------------------------------

    def context(self) -> Context:
        """Context над зафиксированным состоянием."""
        return Context(multi_store=self.multi_store, height=self.height, chain_id=self.config.chain_id)

    # -------------------------------------------------------------------------
    # Genesis
    # -------------------------------------------------------------------------

    def init_chain(self, genesis: GenesisState) -> None:
        ctx, commit = self.context().cache()
        for account in genesis.accounts:
            self.bank.set_coins(ctx, account.address, account.coins)
        commit()
        logger.info("%s: genesis loaded, %d accounts", self.config.app_name, len(genesis.accounts))

    # -------------------------------------------------------------------------
    # Транзакции
    # -------------------------------------------------------------------------

    def deliver_tx(self, tx_bytes: bytes) -> Result:
        """Декодирование и применение wire-транзакции."""
        try:
            msg = decode_msg(tx_bytes)
        except TxDecodeError as e:
            logger.info("tx rejected at decode: %s", e)
            return Result.error(ResultCode.TX_DECODE, str(e))
        return self.deliver_msg(msg)

    def deliver_msg(self, msg: Msg) -> Result:
        """Применение типизированного сообщения как одной атомарной транзакции."""
        check = validate_basic(msg)
        if not check.is_ok:
            logger.info("tx rejected by validation: %s %s", check.code.value, check.log)
            return check

        handler = self._routes.get(msg.ROUTE)
        if handler is None:
            return Result.error(ResultCode.UNKNOWN_REQUEST, f"no route for {msg.ROUTE!r}")

        ctx, commit = self.context().cache()
        try:
            result = handler(ctx, msg)
        except Exception:
            logger.exception("tx %s aborted, state rolled back", msg.TYPE)
            raise

        if result.is_ok:
            commit()
            self.height += 1
            logger.debug("tx %s committed at height %d", msg.TYPE, self.height)
        else:
            logger.debug("tx %s rolled back: %s", msg.TYPE, result.code.value)
        return result

    # -------------------------------------------------------------------------
    # Запросы
    # -------------------------------------------------------------------------

    def query(self, path: str) -> Result:
        """Read-only запрос по пути.

        Пути:
        - custom/nameservice/resolve/<name>
        - custom/nameservice/whois/<name>
        - custom/nameservice/names
        - custom/bank/balance/<address>

        Имя записи берётся целиком после третьего "/", поэтому может содержать "/".
        Путь, который не кодируется в UTF-8, не адресует ни один ключ.
        """
        if not is_utf8_encodable(path):
            return Result.error(ResultCode.UNKNOWN_REQUEST, "query path must be valid UTF-8")

        parts = path.split("/", 3)
        ctx = self.context()

        match parts:
            case ["custom", "nameservice", *rest]:
                return self.querier(ctx, rest)
            case ["custom", "bank", "balance", address]:
                coins = self.bank.get_coins(ctx, address)
                data = json.dumps(coins_to_wire(coins), separators=(",", ":"), sort_keys=True)
                return Result.ok(data=data.encode("utf-8"))
            case _:
                return Result.error(ResultCode.UNKNOWN_REQUEST, f"unknown query path: {path!r}")
