"""App — сборка модулей nameservice, bank и faucet в одно приложение."""

from .app import ACCOUNT_STORE_KEY, NAMESERVICE_STORE_KEY, NameshakeApp, validate_basic
from .config import AppConfig
from .genesis import GenesisAccount, GenesisState

__all__ = [
    "NameshakeApp",
    "AppConfig",
    "GenesisState",
    "GenesisAccount",
    "validate_basic",
    "ACCOUNT_STORE_KEY",
    "NAMESERVICE_STORE_KEY",
]
