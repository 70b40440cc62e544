"""KV Store — Key-value хранилища с транзакционным кэшем.

Хост-сторона реестра:
- MemKVStore: зафиксированное (committed) состояние в памяти
- CacheKVStore: overlay поверх родителя с read-your-writes, write() фиксирует
  изменения в родителе, отброшенный кэш = rollback
- StoreKey / MultiStore: именованные разделы хранилища
"""

from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Protocol, Tuple


class KVStore(Protocol):
    """Минимальный контракт key-value хранилища."""

    def get(self, key: bytes) -> Optional[bytes]: ...

    def set(self, key: bytes, value: bytes) -> None: ...

    def has(self, key: bytes) -> bool: ...

    def delete(self, key: bytes) -> None: ...

    def iterate(self, prefix: bytes = b"") -> Iterator[Tuple[bytes, bytes]]: ...


def _check_key(key: bytes) -> None:
    if not isinstance(key, bytes) or not key:
        raise ValueError(f"store key must be non-empty bytes, got {key!r}")


class MemKVStore:
    """Хранилище в памяти (dict)."""

    def __init__(self):
        self._data: Dict[bytes, bytes] = {}

    def get(self, key: bytes) -> Optional[bytes]:
        return self._data.get(key)

    def set(self, key: bytes, value: bytes) -> None:
        _check_key(key)
        if not isinstance(value, bytes):
            raise ValueError(f"store value must be bytes, got {type(value).__name__}")
        self._data[key] = value

    def has(self, key: bytes) -> bool:
        return key in self._data

    def delete(self, key: bytes) -> None:
        self._data.pop(key, None)

    def iterate(self, prefix: bytes = b"") -> Iterator[Tuple[bytes, bytes]]:
        for key in sorted(self._data):
            if key.startswith(prefix):
                yield key, self._data[key]

    def __len__(self) -> int:
        return len(self._data)


# Маркер удалённого ключа в кэше
_DELETED = None


class CacheKVStore:
    """Транзакционный overlay над родительским хранилищем.

    Записи видны через этот кэш сразу (read-your-writes), но попадают в
    родителя только после write(). Если кэш просто отбросить, родитель
    остаётся нетронутым.
    """

    def __init__(self, parent: KVStore):
        self._parent = parent
        self._dirty: Dict[bytes, Optional[bytes]] = {}

    def get(self, key: bytes) -> Optional[bytes]:
        if key in self._dirty:
            return self._dirty[key]
        return self._parent.get(key)

    def set(self, key: bytes, value: bytes) -> None:
        _check_key(key)
        if not isinstance(value, bytes):
            raise ValueError(f"store value must be bytes, got {type(value).__name__}")
        self._dirty[key] = value

    def has(self, key: bytes) -> bool:
        return self.get(key) is not None

    def delete(self, key: bytes) -> None:
        self._dirty[key] = _DELETED

    def iterate(self, prefix: bytes = b"") -> Iterator[Tuple[bytes, bytes]]:
        merged: Dict[bytes, Optional[bytes]] = dict(self._parent.iterate(prefix))
        for key, value in self._dirty.items():
            if key.startswith(prefix):
                merged[key] = value
        for key in sorted(merged):
            value = merged[key]
            if value is not None:
                yield key, value

    def write(self) -> None:
        """Фиксация изменений в родителе."""
        for key, value in sorted(self._dirty.items()):
            if value is None:
                self._parent.delete(key)
            else:
                self._parent.set(key, value)
        self._dirty.clear()

    @property
    def is_dirty(self) -> bool:
        return bool(self._dirty)


@dataclass(frozen=True)
class StoreKey:
    """Именованный handle раздела хранилища."""

    name: str

    def __post_init__(self):
        if not self.name:
            raise ValueError("StoreKey name cannot be empty")


class MultiStore:
    """Набор смонтированных разделов, по одному KV store на StoreKey."""

    def __init__(self):
        self._stores: Dict[StoreKey, KVStore] = {}

    def mount(self, key: StoreKey, store: Optional[KVStore] = None) -> None:
        if key in self._stores:
            raise ValueError(f"store {key.name!r} already mounted")
        self._stores[key] = store if store is not None else MemKVStore()

    def get_store(self, key: StoreKey) -> KVStore:
        try:
            return self._stores[key]
        except KeyError:
            raise KeyError(f"store {key.name!r} is not mounted") from None

    def keys(self) -> Tuple[StoreKey, ...]:
        return tuple(self._stores)

    def cache(self) -> "CacheMultiStore":
        return CacheMultiStore({key: CacheKVStore(store) for key, store in self._stores.items()})


class CacheMultiStore(MultiStore):
    """Кэш над MultiStore: write() фиксирует все разделы разом."""

    def __init__(self, stores: Dict[StoreKey, CacheKVStore]):
        super().__init__()
        self._stores = dict(stores)

    def write(self) -> None:
        for store in self._stores.values():
            store.write()
