"""
JSON Schema Contract Validators

Модуль для валидации wire-представления сообщений и genesis согласно
формальным JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы (contracts/schema/):
- tx_envelope.json (конверт {"type", "value"})
- buy_name.json, set_name.json, faucet.json (payload сообщений)
- genesis.json (начальное состояние)
- coins.json (общий фрагмент, подключается через $ref)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator
from referencing import Registry, Resource


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Автоматически находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self):
        # Корень проекта (4 уровня вверх от этого файла)
        self._schema_dir = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'buy_name')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема сама по себе невалидна
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema

    def registry(self) -> Registry:
        """Registry со всеми схемами каталога для разрешения $ref."""
        resources = []
        for path in sorted(self._schema_dir.glob("*.json")):
            schema = self.load_schema(path.stem)
            resources.append((path.name, Resource.from_contents(schema)))
        return Registry().with_resources(resources)


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()
_REGISTRY = _SCHEMA_LOADER.registry()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema, registry=_REGISTRY)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any):
        return self.validator.iter_errors(data)


class TxEnvelopeValidator(ContractValidator):
    def __init__(self):
        super().__init__("tx_envelope")


class BuyNameValidator(ContractValidator):
    def __init__(self):
        super().__init__("buy_name")


class SetNameValidator(ContractValidator):
    def __init__(self):
        super().__init__("set_name")


class FaucetValidator(ContractValidator):
    def __init__(self):
        super().__init__("faucet")


class GenesisValidator(ContractValidator):
    def __init__(self):
        super().__init__("genesis")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_tx_envelope(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если конверт не соответствует схеме
    """
    TxEnvelopeValidator().validate(data)


def validate_genesis(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если genesis не соответствует схеме
    """
    GenesisValidator().validate(data)
