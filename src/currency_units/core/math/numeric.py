"""
Numeric — Представления значений курса и правила продвижения типов

Значение курса хранится в исходном представлении:
- float (двоичная плавающая точка)
- Fraction / int (точные рациональные)
- Decimal (десятичная произвольной точности)

ПРАВИЛА ПРОДВИЖЕНИЯ (явные, без неявной потери точности):
1. float + любой тип → float
2. Decimal + Fraction → Decimal (Fraction переводится через числитель/знаменатель)
3. int сочетается с любым типом нативно
4. Обращение int даёт Fraction (точный результат)

bool не считается числом курса.
"""

import math
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Tuple, Union

RateValue = Union[int, float, Fraction, Decimal]


class NumericKind(str, Enum):
    """Класс представления числа"""

    FLOAT = "float"
    RATIONAL = "rational"
    DECIMAL = "decimal"


# =============================================================================
# КЛАССИФИКАЦИЯ
# =============================================================================


def numeric_kind(value: RateValue) -> NumericKind:
    """
    Определение представления числа.

    Args:
        value: Число (int, float, Fraction, Decimal)

    Returns:
        NumericKind (int относится к RATIONAL)

    Raises:
        TypeError: Если тип не входит в закрытый набор
    """
    if isinstance(value, bool):
        raise TypeError("bool is not a numeric rate value")
    if isinstance(value, Decimal):
        return NumericKind.DECIMAL
    if isinstance(value, float):
        return NumericKind.FLOAT
    if isinstance(value, (int, Fraction)):
        return NumericKind.RATIONAL
    raise TypeError(f"Unsupported numeric type: {type(value).__name__}")


def is_valid_rate(value: object) -> bool:
    """
    Проверка, что значение пригодно как курс: int, float, Fraction или Decimal,
    конечное, > 0.

    Examples:
        >>> is_valid_rate(1.19536)
        True
        >>> is_valid_rate(Fraction(119536, 100000))
        True
        >>> is_valid_rate(float("nan"))
        False
        >>> is_valid_rate(0)
        False
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Fraction, Decimal)):
        return False
    if isinstance(value, Decimal):
        return value.is_finite() and value > 0
    if isinstance(value, float) and not math.isfinite(value):
        return False
    return value > 0


def validate_rate(value: object, name: str = "rate") -> RateValue:
    """
    Валидация значения курса.

    Raises:
        ValueError: Если значение не число, не конечное или не положительное
    """
    if not is_valid_rate(value):
        raise ValueError(f"{name} must be a finite positive number, got {value!r}")
    return value  # type: ignore[return-value]


# =============================================================================
# ПРОДВИЖЕНИЕ ТИПОВ
# =============================================================================


def _fraction_to_decimal(value: Fraction) -> Decimal:
    return Decimal(value.numerator) / Decimal(value.denominator)


def promote(a: RateValue, b: RateValue) -> Tuple[RateValue, RateValue]:
    """
    Приведение пары чисел к общему представлению.

    Args:
        a: Левый операнд
        b: Правый операнд

    Returns:
        (a', b') в общем представлении

    Examples:
        >>> promote(Decimal("1.5"), 2.0)
        (1.5, 2.0)
        >>> promote(Fraction(1, 4), Decimal("2"))
        (Decimal('0.25'), Decimal('2'))
    """
    kind_a = numeric_kind(a)
    kind_b = numeric_kind(b)

    if kind_a == kind_b:
        return a, b

    if NumericKind.FLOAT in (kind_a, kind_b):
        return float(a), float(b)

    # DECIMAL + RATIONAL
    if isinstance(a, Fraction):
        a = _fraction_to_decimal(a)
    if isinstance(b, Fraction):
        b = _fraction_to_decimal(b)
    return a, b


def multiply(a: RateValue, b: RateValue) -> RateValue:
    """Произведение с явным продвижением. Множитель 1 не меняет тип."""
    if _is_unit(b):
        return a
    if _is_unit(a):
        return b
    a, b = promote(a, b)
    return a * b  # type: ignore[operator]


def divide(a: RateValue, b: RateValue) -> RateValue:
    """Частное с явным продвижением. int / int даёт Fraction."""
    if _is_unit(b):
        return a
    return multiply(a, invert(b))


def invert(value: RateValue) -> RateValue:
    """
    Обратное значение в том же представлении.

    Raises:
        ZeroDivisionError: Если value == 0

    Examples:
        >>> invert(4)
        Fraction(1, 4)
        >>> invert(Decimal("0.5"))
        Decimal('2')
    """
    kind = numeric_kind(value)
    if value == 0:
        raise ZeroDivisionError("cannot invert zero rate")
    if kind == NumericKind.DECIMAL:
        return Decimal(1) / value  # type: ignore[operator]
    if kind == NumericKind.FLOAT:
        return 1.0 / value  # type: ignore[operator]
    return Fraction(1) / Fraction(value)  # type: ignore[arg-type]


def _is_unit(value: RateValue) -> bool:
    # точная единица int/Fraction: нейтральный множитель
    return isinstance(value, (int, Fraction)) and not isinstance(value, bool) and value == 1
