"""
JSON Validation Helpers

Модуль для проверки JSON-текстов, приходящих от внешних сервисов кошелька.
Использует библиотеку jsonschema для проверки структуры payload.

Схемы:
- swap_error.json (ошибка swap quote API)
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

logger = logging.getLogger(__name__)

# Причина ошибки swap API, означающая нехватку ликвидности
INSUFFICIENT_ASSET_LIQUIDITY = "INSUFFICIENT_ASSET_LIQUIDITY"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Находит схемы в schema/ рядом с этим модулем (ставятся как package data).
    """

    def __init__(self):
        self._schema_dir = Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'swap_error')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов JSON payload.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class SwapErrorValidator(ContractValidator):
    """Валидатор для ошибки swap quote API."""

    def __init__(self):
        super().__init__("swap_error")


# Глобальный экземпляр валидатора (Draft202012Validator строится один раз)
_SWAP_ERROR_VALIDATOR = SwapErrorValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def is_json_valid(text: str) -> bool:
    """
    Проверка, что текст является JSON-объектом или JSON-массивом.

    Скаляры ("1", "\"a\"", "null") не считаются валидным документом.

    Examples:
        >>> is_json_valid('{"a": 1}')
        True
        >>> is_json_valid('[1, 2]')
        True
        >>> is_json_valid('42')
        False
    """
    try:
        document = json.loads(text)
    except (TypeError, ValueError):
        return False
    return isinstance(document, (dict, list))


def validate_swap_error(data: Dict[str, Any]) -> None:
    """
    Валидация payload ошибки swap API.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _SWAP_ERROR_VALIDATOR.validate(data)


def is_swap_liquidity_error_reason(error: str) -> bool:
    """
    Является ли текст ошибки swap API ошибкой нехватки ликвидности.

    Args:
        error: JSON-текст ошибки

    Returns:
        True если validationErrors содержит reason INSUFFICIENT_ASSET_LIQUIDITY.
        False для нечитаемого JSON и payload, не прошедшего схему
        (в том числе если хотя бы у одного элемента нет строки reason).
    """
    try:
        payload = json.loads(error)
    except (TypeError, ValueError):
        logger.debug("Swap error is not JSON")
        return False

    if not _SWAP_ERROR_VALIDATOR.is_valid(payload):
        logger.debug(
            f"Swap error payload rejected by schema {_SWAP_ERROR_VALIDATOR.schema_name!r}"
        )
        return False

    return any(
        item["reason"] == INSUFFICIENT_ASSET_LIQUIDITY
        for item in payload["validationErrors"]
    )
