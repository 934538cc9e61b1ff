"""
uconvert — единая точка конверсии величин

Явная диспетчеризация по валютности единиц:
- обе единицы валютные → Conversion Engine (нужен рынок, если валюты разные)
- ровно одна валютная → UnsupportedDimension
- обе невалютные + рынок → UnsupportedDimension
- обе невалютные без рынка → стандартная размерная конверсия (Quantity.to)
"""

from typing import Optional, Union

from currency_units.conversion.engine import convert
from currency_units.core.config import DEFAULT_MODE
from currency_units.core.domain.currency import parse_unit
from currency_units.core.domain.market import ExchangeMarket
from currency_units.core.domain.units import Quantity, Unit
from currency_units.core.errors import MissingArgument, UnsupportedDimension


def uconvert(
    target: Union[Unit, str],
    quantity: Quantity,
    market: Optional[ExchangeMarket] = None,
    mode: int = DEFAULT_MODE,
) -> Quantity:
    """
    Конверсия величины в целевую единицу.

    Args:
        target: Целевая единица или её строка ('BRL', 'kBRL', 'm')
        quantity: Исходная величина
        market: Таблица курсов (обязательна для разных валют)
        mode: Режим разрешения курса (1, -1, 2, -2)

    Returns:
        Величина в единицах target

    Raises:
        MissingArgument: Разные валюты без рынка
        UnsupportedDimension: Валюта смешана с невалютной единицей,
            либо рынок передан для невалютных единиц
        DimensionMismatch: Невалютные единицы разных размерностей
        RateNotFound: Курс не разрешается выбранным режимом
    """
    if isinstance(target, str):
        target = parse_unit(target)

    source_is_currency = quantity.unit.is_currency
    target_is_currency = target.is_currency

    if source_is_currency and target_is_currency:
        if market is None:
            if quantity.unit.currency_code == target.currency_code:
                return quantity.to(target)
            raise MissingArgument(
                f"Converting {quantity.unit.currency_code} to {target.currency_code} "
                f"requires an exchange market"
            )
        return convert(quantity, target, market, mode)

    if source_is_currency or target_is_currency:
        raise UnsupportedDimension(
            f"Cannot convert between currency and non-currency units: "
            f"{quantity.unit.symbol} -> {target.symbol}"
        )

    if market is not None:
        raise UnsupportedDimension(
            f"Exchange market given for non-currency units: "
            f"{quantity.unit.symbol} -> {target.symbol}"
        )

    return quantity.to(target)
