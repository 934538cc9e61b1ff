"""
Conversion Engine — Конверсия величины между валютами по рынку курсов

Режимы разрешения курса (Q — исходная валюта, B — целевая):

    mode =  1  прямой:          rate = market[(Q,B)]
    mode = -1  обратный:        rate = 1 / market[(B,Q)]
    mode =  2  кросс (прямые):  rate = market[(Q,V)] * market[(V,B)]
    mode = -2  кросс (обратные): rate = 1 / (market[(V,Q)] * market[(B,V)])

V — pivot-валюта, найденная в рынке (ровно один промежуточный шаг).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Q == B → величина возвращается без изменений, рынок не читается
2. Отсутствие ключей → RateNotFound; переключения на другой режим нет
3. Представление чисел сохраняется (Fraction → Fraction, Decimal → Decimal)
4. Рынок только читается; состояние между вызовами не хранится
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Tuple

from currency_units.core.config import DEFAULT_MODE, SUPPORTED_MODES
from currency_units.core.domain.market import CurrencyPair, ExchangeMarket
from currency_units.core.domain.units import Quantity, Unit
from currency_units.core.errors import RateNotFound, UnsupportedDimension
from currency_units.core.math.numeric import RateValue, divide, invert, multiply

logger = logging.getLogger(__name__)


class ResolutionMode(IntEnum):
    """Стратегия разрешения курса"""

    DIRECT = 1
    DIRECT_INVERSE = -1
    CROSS = 2
    CROSS_INVERSE = -2


@dataclass(frozen=True)
class RateResolution:
    """
    Результат разрешения курса.

    Attributes:
        source: Исходная валюта Q
        target: Целевая валюта B
        mode: Использованный режим
        rate: Итоговый курс (единиц B за одну единицу Q)
        legs: Ключи рынка, использованные для расчёта
        pivot: Pivot-валюта для режимов ±2 (иначе None)
    """

    source: str
    target: str
    mode: ResolutionMode
    rate: RateValue
    legs: Tuple[CurrencyPair, ...]
    pivot: Optional[str] = None


def as_mode(mode: int) -> ResolutionMode:
    """
    Приведение целого к ResolutionMode.

    Raises:
        ValueError: Если режим не из {1, -1, 2, -2}
    """
    if isinstance(mode, bool) or mode not in SUPPORTED_MODES:
        raise ValueError(f"mode must be one of 1, -1, 2, -2, got {mode!r}")
    return ResolutionMode(mode)


# =============================================================================
# RATE RESOLUTION
# =============================================================================


def resolve_rate(
    market: ExchangeMarket, source: str, target: str, mode: int = DEFAULT_MODE
) -> RateResolution:
    """
    Разрешение скалярного курса source → target по рынку.

    Args:
        market: Таблица курсов
        source: Код исходной валюты Q
        target: Код целевой валюты B
        mode: Режим разрешения (1, -1, 2, -2)

    Returns:
        RateResolution

    Raises:
        RateNotFound: Если в рынке нет ключей, нужных режиму
        ValueError: Если режим не поддерживается
    """
    resolved = as_mode(mode)
    source = source.upper()
    target = target.upper()
    requested = (source, target)

    if resolved == ResolutionMode.DIRECT:
        leg = CurrencyPair(source, target)
        value = _leg_value(market, leg, requested, resolved)
        return RateResolution(source, target, resolved, value, (leg,))

    if resolved == ResolutionMode.DIRECT_INVERSE:
        leg = CurrencyPair(target, source)
        value = _leg_value(market, leg, requested, resolved)
        return RateResolution(source, target, resolved, invert(value), (leg,))

    inverse = resolved == ResolutionMode.CROSS_INVERSE
    pivot = find_pivot(market, source, target, inverse=inverse)
    if pivot is None:
        raise RateNotFound(
            requested,
            int(resolved),
            missing_pivot_legs(market, source, target, inverse),
            detail="no pivot currency",
        )
    first, second = _pivot_legs(source, target, pivot, inverse)

    if resolved == ResolutionMode.CROSS:
        rate = multiply(market[first].value, market[second].value)
        return RateResolution(source, target, resolved, rate, (first, second), pivot)

    # 1 / (r1 * r2): одно обращение вместо двух
    rate = invert(multiply(market[first].value, market[second].value))
    return RateResolution(source, target, resolved, rate, (first, second), pivot)


def find_pivot(
    market: ExchangeMarket, source: str, target: str, inverse: bool = False
) -> Optional[str]:
    """
    Поиск pivot-валюты V для кросс-курса.

    inverse=False: нужны ключи (source,V) и (V,target).
    inverse=True:  нужны ключи (V,source) и (target,V).

    Кандидаты проверяются в отсортированном порядке кодов, побеждает первый.
    Ровно один промежуточный шаг, многошаговый поиск не выполняется.
    """
    candidates = pivot_candidates(market, source, target, inverse)
    return candidates[0] if candidates else None


def pivot_candidates(
    market: ExchangeMarket, source: str, target: str, inverse: bool = False
) -> List[str]:
    """Все pivot-валюты, для которых в рынке есть обе ноги"""
    return [
        code
        for code in sorted(market.currencies - {source, target})
        if all(leg in market for leg in _pivot_legs(source, target, code, inverse))
    ]


def missing_pivot_legs(
    market: ExchangeMarket, source: str, target: str, inverse: bool = False
) -> Tuple[Tuple[str, str], ...]:
    """
    Отсутствующие в рынке ноги по всем кандидатам в pivot.

    Кандидаты: все коды рынка, кроме source и target, в отсортированном порядке.
    """
    missing = []
    for code in sorted(market.currencies - {source, target}):
        for leg in _pivot_legs(source, target, code, inverse):
            if leg not in market:
                missing.append(leg.as_tuple())
    return tuple(missing)


def _pivot_legs(
    source: str, target: str, pivot: str, inverse: bool
) -> Tuple[CurrencyPair, CurrencyPair]:
    if inverse:
        return CurrencyPair(pivot, source), CurrencyPair(target, pivot)
    return CurrencyPair(source, pivot), CurrencyPair(pivot, target)


def _leg_value(
    market: ExchangeMarket,
    leg: CurrencyPair,
    requested: Tuple[str, str],
    mode: ResolutionMode,
) -> RateValue:
    rate = market.get(leg)
    if rate is None:
        raise RateNotFound(requested, int(mode), (leg.as_tuple(),))
    return rate.value


# =============================================================================
# CONVERSION
# =============================================================================


def convert(
    quantity: Quantity,
    target: Unit,
    market: ExchangeMarket,
    mode: int = DEFAULT_MODE,
) -> Quantity:
    """
    Конверсия валютной величины в целевую валюту.

    Args:
        quantity: Величина в валюте Q (возможно с SI-префиксом)
        target: Единица целевой валюты B (возможно с SI-префиксом)
        market: Таблица курсов
        mode: Режим разрешения курса

    Returns:
        Величина в единицах target

    Raises:
        UnsupportedDimension: Если одна из единиц не валютная
        RateNotFound: Если курс не разрешается выбранным режимом
        ValueError: Если режим не поддерживается
    """
    if not quantity.unit.is_currency or not target.is_currency:
        raise UnsupportedDimension(
            f"Exchange conversion needs currency units, got "
            f"{quantity.unit.symbol} -> {target.symbol}"
        )

    source_code = quantity.unit.currency_code
    target_code = target.currency_code

    if source_code == target_code:
        as_mode(mode)
        return quantity.to(target)

    resolution = resolve_rate(market, source_code, target_code, mode)
    logger.debug(
        "resolved %s -> %s mode=%d rate=%r legs=%s",
        source_code,
        target_code,
        resolution.mode,
        resolution.rate,
        ",".join(str(leg) for leg in resolution.legs),
    )

    amount = multiply(quantity.magnitude, quantity.unit.scale)
    amount = multiply(amount, resolution.rate)
    return Quantity(divide(amount, target.scale), target)
