"""Конфигурация приложения."""

from dataclasses import dataclass, field
from typing import Optional

from src.core.domain.coins import Coins


@dataclass(frozen=True)
class AppConfig:
    """Конфигурация NameshakeApp.

    - app_name: имя приложения (для логов)
    - chain_id: идентификатор сети, попадает в Context
    - faucet_enabled: монтировать ли маршрут faucet
    - faucet_max_grant: лимит одного начисления faucet (None = без лимита)
    """
    app_name: str = "Nameshake"
    chain_id: str = "nameshake-local"
    faucet_enabled: bool = True
    faucet_max_grant: Optional[Coins] = field(default=None)
