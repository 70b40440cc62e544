"""Ключи хранилища nameservice.

Каждый факт записи лежит под ключом <prefix> + utf-8(name).
Префиксы стабильны: итерация или бэкап раздела однозначно различают
тип факта по первому байту.
"""

from typing import Final

VALUE_PREFIX: Final[bytes] = b"\x00"
OWNER_PREFIX: Final[bytes] = b"\x01"
PRICE_PREFIX: Final[bytes] = b"\x02"


def value_key(name: str) -> bytes:
    return VALUE_PREFIX + name.encode("utf-8")


def owner_key(name: str) -> bytes:
    return OWNER_PREFIX + name.encode("utf-8")


def price_key(name: str) -> bytes:
    return PRICE_PREFIX + name.encode("utf-8")


def name_from_key(key: bytes) -> str:
    """Имя записи из ключа любого факта"""
    if len(key) < 1 or key[:1] not in (VALUE_PREFIX, OWNER_PREFIX, PRICE_PREFIX):
        raise ValueError(f"not a nameservice key: {key!r}")
    return key[1:].decode("utf-8")
