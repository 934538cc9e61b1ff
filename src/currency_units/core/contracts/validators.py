"""
JSON Schema Contract Validators

Валидация внешних JSON данных по формальным JSON Schema контрактам
(библиотека jsonschema, Draft 2020-12).

Схемы (core/contracts/schema/):
- currency_table.json (статическая таблица валют)
- fixer.json (payload fixer.io: base + rates)
- currencylayer.json (payload currencylayer: source + quotes)
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from currency_units.core.config import SCHEMA_DIR


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию читает схемы из каталога пакета core/contracts/schema/.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = Path(schema_dir) if schema_dir is not None else SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'fixer')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-валидацию
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
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception"""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации"""
        return self.validator.iter_errors(data)


class CurrencyTableValidator(ContractValidator):
    """Валидатор статической таблицы валют"""

    def __init__(self):
        super().__init__("currency_table")


class FixerPayloadValidator(ContractValidator):
    """Валидатор payload fixer.io"""

    def __init__(self):
        super().__init__("fixer")


class CurrencyLayerPayloadValidator(ContractValidator):
    """Валидатор payload currencylayer"""

    def __init__(self):
        super().__init__("currencylayer")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_currency_table(data: Dict[str, Any]) -> None:
    """
    Валидация таблицы валют.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CurrencyTableValidator().validate(data)


def validate_fixer_payload(data: Dict[str, Any]) -> None:
    """
    Валидация payload fixer.io.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    FixerPayloadValidator().validate(data)


def validate_currencylayer_payload(data: Dict[str, Any]) -> None:
    """
    Валидация payload currencylayer.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CurrencyLayerPayloadValidator().validate(data)
