"""Genesis — начальное состояние балансов."""

import json
from typing import Any, Dict, Union

from pydantic import BaseModel, Field, field_validator

from src.core.contracts.codec import coins_from_wire, coins_to_wire
from src.core.contracts.validators import validate_genesis
from src.core.domain.coins import Coins
from src.core.domain.messages import AccountAddress


class GenesisAccount(BaseModel):
    """Аккаунт с начальным балансом."""

    address: AccountAddress = Field(..., min_length=1, description="Адрес аккаунта")
    coins: Coins = Field(default_factory=Coins.empty, description="Начальный баланс")

    model_config = {"frozen": True}


class GenesisState(BaseModel):
    """Начальное состояние приложения."""

    accounts: list[GenesisAccount] = Field(default_factory=list, description="Аккаунты")

    model_config = {"frozen": True}

    @field_validator("accounts")
    @classmethod
    def validate_unique_addresses(cls, v: list[GenesisAccount]) -> list[GenesisAccount]:
        addresses = [a.address for a in v]
        if len(set(addresses)) != len(addresses):
            raise ValueError("duplicate account address in genesis")
        return v

    @classmethod
    def from_json(cls, raw: Union[str, bytes, Dict[str, Any]]) -> "GenesisState":
        """
        Загрузка genesis из wire-JSON (coins как список {"denom", "amount"}).

        Raises:
            jsonschema.ValidationError: Если документ не соответствует genesis.json
            pydantic.ValidationError: Если аккаунты некорректны
            ValueError: Если деноминация в coins аккаунта повторяется
        """
        data = json.loads(raw) if isinstance(raw, (str, bytes)) else raw
        validate_genesis(data)
        return cls(
            accounts=[
                GenesisAccount(address=a["address"], coins=coins_from_wire(a["coins"]))
                for a in data["accounts"]
            ]
        )

    def to_json(self) -> Dict[str, Any]:
        return {
            "accounts": [
                {"address": a.address, "coins": coins_to_wire(a.coins)} for a in self.accounts
            ]
        }
