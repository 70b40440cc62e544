"""Faucet — начисление монет на счёт."""

from .handler import FaucetHandler, validate_faucet

__all__ = [
    "FaucetHandler",
    "validate_faucet",
]
