"""
Contract Validation Module

Валидация wire-контрактов (JSON Schema) и кодек сообщений.
"""

from .codec import (
    TxDecodeError,
    coins_from_wire,
    coins_to_wire,
    decode_msg,
    encode_msg,
    msg_to_wire,
)
from .validators import (
    BuyNameValidator,
    ContractValidator,
    FaucetValidator,
    GenesisValidator,
    SchemaLoader,
    SetNameValidator,
    TxEnvelopeValidator,
    validate_genesis,
    validate_tx_envelope,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "TxEnvelopeValidator",
    "BuyNameValidator",
    "SetNameValidator",
    "FaucetValidator",
    "GenesisValidator",
    # Functions
    "validate_tx_envelope",
    "validate_genesis",
    # Codec
    "TxDecodeError",
    "encode_msg",
    "decode_msg",
    "msg_to_wire",
    "coins_to_wire",
    "coins_from_wire",
]
