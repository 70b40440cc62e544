"""Nameservice — реестр имён с покупкой через перебитие ставки.

- RegistryKeeper: доступ к фактам value/owner/price
- NameserviceHandler: правила покупки и изменения value
- NameserviceQuerier: read-only запросы resolve/whois
- validate_*: структурные проверки сообщений
"""

from .handler import NameserviceHandler
from .keeper import RegistryKeeper
from .keys import OWNER_PREFIX, PRICE_PREFIX, VALUE_PREFIX, owner_key, price_key, value_key
from .querier import NameserviceQuerier
from .validators import validate_buy_name, validate_set_name

__all__ = [
    "NameserviceHandler",
    "RegistryKeeper",
    "NameserviceQuerier",
    "validate_buy_name",
    "validate_set_name",
    "VALUE_PREFIX",
    "OWNER_PREFIX",
    "PRICE_PREFIX",
    "value_key",
    "owner_key",
    "price_key",
]
