"""
Числовые примитивы: представления курса и правила продвижения типов.
"""

from currency_units.core.math.numeric import (
    NumericKind,
    RateValue,
    divide,
    invert,
    is_valid_rate,
    multiply,
    numeric_kind,
    promote,
    validate_rate,
)

__all__ = [
    "RateValue",
    "NumericKind",
    "numeric_kind",
    "is_valid_rate",
    "validate_rate",
    "promote",
    "multiply",
    "divide",
    "invert",
]
