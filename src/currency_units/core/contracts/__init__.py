"""
Contract Validation Module

Валидация внешних JSON данных: таблица валют и payload провайдеров курсов.
"""

from .validators import (
    ContractValidator,
    CurrencyLayerPayloadValidator,
    CurrencyTableValidator,
    FixerPayloadValidator,
    SchemaLoader,
    validate_currency_table,
    validate_currencylayer_payload,
    validate_fixer_payload,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CurrencyTableValidator",
    "FixerPayloadValidator",
    "CurrencyLayerPayloadValidator",
    # Functions
    "validate_currency_table",
    "validate_fixer_payload",
    "validate_currencylayer_payload",
]
