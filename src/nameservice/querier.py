"""Querier — read-only запросы к реестру.

Пути запросов:
- resolve/<name> → {"value": "..."}
- whois/<name>   → {"value": "...", "owner": ..., "price": [...]}

Отсутствующая запись даёт нормальный пустой ответ, а не ошибка.
"""

import json
from typing import Sequence

from src.core.domain.record import WhoIs
from src.core.domain.result import Result, ResultCode
from src.store.context import Context

from .keeper import RegistryKeeper


def _encode(payload) -> bytes:
    return json.dumps(payload, separators=(",", ":"), sort_keys=True).encode("utf-8")


def whois_to_json(whois: WhoIs) -> dict:
    return {
        "value": whois.value,
        "owner": whois.owner,
        "price": [{"denom": c.denom, "amount": str(c.amount)} for c in whois.price.coins],
    }


class NameserviceQuerier:
    """Маршрутизатор read-only запросов nameservice."""

    def __init__(self, keeper: RegistryKeeper):
        self.keeper = keeper

    def resolve(self, ctx: Context, name: str) -> str:
        return self.keeper.get_value(ctx, name)

    def whois(self, ctx: Context, name: str) -> WhoIs:
        return self.keeper.get_whois(ctx, name)

    def __call__(self, ctx: Context, path: Sequence[str]) -> Result:
        if not path:
            return Result.error(ResultCode.UNKNOWN_REQUEST, "empty nameservice query path")

        match list(path):
            case ["resolve", name]:
                return Result.ok(data=_encode({"value": self.resolve(ctx, name)}))
            case ["whois", name]:
                return Result.ok(data=_encode(whois_to_json(self.whois(ctx, name))))
            case ["names"]:
                return Result.ok(data=_encode(list(self.keeper.iterate_names(ctx))))
            case _:
                return Result.error(
                    ResultCode.UNKNOWN_REQUEST,
                    f"unknown nameservice query endpoint: {'/'.join(path)}",
                )
