"""
Broadcast — Поэлементная конверсия по последовательности рынков и/или величин

Каждый элемент разрешается независимо от остальных (без общего аккумулятора),
результаты возвращаются в исходном позиционном порядке.

Формы входа:
- одна величина × последовательность рынков (например, годовые курсы)
- последовательность величин × один рынок
- последовательность величин × последовательность рынков (попарно, равной длины)
- величина × отображение {ключ: рынок} → отображение {ключ: результат}
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Hashable, Iterable, List, Optional, Sequence, Tuple, Union

from currency_units.conversion.engine import as_mode, convert
from currency_units.core.config import DEFAULT_MODE, BroadcastConfig
from currency_units.core.domain.market import ExchangeMarket
from currency_units.core.domain.units import Quantity, Unit
from currency_units.core.errors import CurrencyUnitsError

QuantityArg = Union[Quantity, Iterable[Quantity]]
MarketArg = Union[ExchangeMarket, Iterable[ExchangeMarket], Mapping]


@dataclass(frozen=True)
class BroadcastResult:
    """
    Результат конверсии одного элемента.

    Attributes:
        key: Позиция (int) или ключ отображения рынков
        quantity: Результат (None при ошибке)
        error: Ошибка элемента (None при успехе)
    """

    key: Hashable
    quantity: Optional[Quantity] = None
    error: Optional[CurrencyUnitsError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Quantity:
        """Результат или проброс ошибки элемента"""
        if self.error is not None:
            raise self.error
        return self.quantity  # type: ignore[return-value]


def broadcast_convert(
    quantities: QuantityArg,
    target: Unit,
    markets: MarketArg,
    mode: int = DEFAULT_MODE,
    config: Optional[BroadcastConfig] = None,
) -> Union[List[Any], Dict[Hashable, Any]]:
    """
    Поэлементная конверсия.

    Args:
        quantities: Величина или последовательность величин
        target: Целевая единица (общая для всех элементов)
        markets: Рынок, последовательность рынков или отображение {ключ: рынок}
        mode: Режим разрешения курса
        config: BroadcastConfig (strict по умолчанию)

    Returns:
        strict: список Quantity (или dict для отображения рынков)
        non-strict: список BroadcastResult (или dict)

    Raises:
        CurrencyUnitsError: strict — первая ошибка по порядку элементов,
            после вычисления всех элементов
        ValueError: Несовпадение длин последовательностей или неверный режим
    """
    config = config or BroadcastConfig()
    as_mode(mode)

    keyed = isinstance(markets, Mapping) and not isinstance(markets, ExchangeMarket)
    jobs = _pair_up(quantities, markets)

    results = [_convert_one(key, quantity, target, market, mode) for key, quantity, market in jobs]

    if config.strict:
        for result in results:
            if result.error is not None:
                raise result.error
        values: List[Any] = [result.quantity for result in results]
    else:
        values = list(results)

    if keyed:
        return {result.key: value for result, value in zip(results, values)}
    return values


def convert_each(
    quantities: QuantityArg,
    target: Unit,
    markets: MarketArg,
    mode: int = DEFAULT_MODE,
) -> Union[List[Quantity], Dict[Hashable, Quantity]]:
    """Строгая поэлементная конверсия: первая ошибка пробрасывается"""
    return broadcast_convert(quantities, target, markets, mode, BroadcastConfig(strict=True))


def _convert_one(
    key: Hashable, quantity: Quantity, target: Unit, market: ExchangeMarket, mode: int
) -> BroadcastResult:
    try:
        return BroadcastResult(key, quantity=convert(quantity, target, market, mode))
    except CurrencyUnitsError as e:
        return BroadcastResult(key, error=e)


def _pair_up(
    quantities: QuantityArg, markets: MarketArg
) -> List[Tuple[Hashable, Quantity, ExchangeMarket]]:
    if isinstance(markets, ExchangeMarket):
        market_items: Sequence[Tuple[Hashable, ExchangeMarket]] = []
        single_market: Optional[ExchangeMarket] = markets
    elif isinstance(markets, Mapping):
        market_items = list(markets.items())
        single_market = None
    else:
        market_items = list(enumerate(markets))
        single_market = None

    if isinstance(quantities, Quantity):
        if single_market is not None:
            return [(0, quantities, single_market)]
        return [(key, quantities, market) for key, market in market_items]

    quantity_list = list(quantities)
    if single_market is not None:
        return [(index, q, single_market) for index, q in enumerate(quantity_list)]

    if len(quantity_list) != len(market_items):
        raise ValueError(
            f"Cannot broadcast {len(quantity_list)} quantities over {len(market_items)} markets"
        )
    return [(key, q, market) for q, (key, market) in zip(quantity_list, market_items)]
