"""Bank — ledger балансов аккаунтов."""

from .keeper import BankKeeper, InsufficientFundsError, balance_key

__all__ = [
    "BankKeeper",
    "InsufficientFundsError",
    "balance_key",
]
