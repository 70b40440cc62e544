"""Store — разделённое key-value хранилище и транзакционный контекст."""

from .context import Context
from .kvstore import (
    CacheKVStore,
    CacheMultiStore,
    KVStore,
    MemKVStore,
    MultiStore,
    StoreKey,
)

__all__ = [
    "Context",
    "KVStore",
    "MemKVStore",
    "CacheKVStore",
    "MultiStore",
    "CacheMultiStore",
    "StoreKey",
]
