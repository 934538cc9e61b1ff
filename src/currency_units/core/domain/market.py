"""
ExchangeMarket — Таблица курсов обмена

CurrencyPair(quote, base): сколько единиц base покупает одна единица quote.
Пары (A,B) и (B,A) — РАЗНЫЕ ключи; обратный курс таблица не вычисляет.

ExchangeMarket неизменяем после построения: конверсия только читает его.
Значение курса хранится в исходном представлении (float, Fraction, Decimal)
без приведения типов.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Iterator, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator

from currency_units.core.math.numeric import NumericKind, RateValue, numeric_kind, validate_rate

logger = logging.getLogger(__name__)


# =============================================================================
# CURRENCY PAIR
# =============================================================================


class CurrencyPair(BaseModel):
    """
    Направленная валютная пара.

    Коды нормализуются к верхнему регистру: CurrencyPair("eur", "usd")
    равна CurrencyPair("EUR", "USD").
    """

    quote: str = Field(..., min_length=1, description="Валюта, которую продают")
    base: str = Field(..., min_length=1, description="Валюта, которую получают")

    model_config = {"frozen": True}

    def __init__(self, quote: str, base: str, **data: Any) -> None:
        super().__init__(quote=quote, base=base, **data)

    @field_validator("quote", "base")
    @classmethod
    def normalize_code(cls, v: str) -> str:
        """Нормализация кода: strip + upper, только буквы"""
        code = v.strip().upper()
        if not code.isalpha():
            raise ValueError(f"currency code must be alphabetic, got {v!r}")
        return code

    @property
    def inverse(self) -> "CurrencyPair":
        return CurrencyPair(self.base, self.quote)

    def as_tuple(self) -> Tuple[str, str]:
        return (self.quote, self.base)

    def __str__(self) -> str:
        return f"{self.quote}/{self.base}"


PairLike = Union[CurrencyPair, Tuple[str, str]]


def as_pair(key: PairLike) -> CurrencyPair:
    """
    Приведение ключа к CurrencyPair.

    Raises:
        TypeError: Если ключ не CurrencyPair и не кортеж из двух кодов
    """
    if isinstance(key, CurrencyPair):
        return key
    if isinstance(key, tuple) and len(key) == 2:
        return CurrencyPair(key[0], key[1])
    raise TypeError(f"Expected CurrencyPair or (quote, base) tuple, got {key!r}")


# =============================================================================
# EXCHANGE RATE
# =============================================================================


class ExchangeRate(BaseModel):
    """
    Значение курса в исходном представлении.

    value не приводится pydantic'ом: Fraction остаётся Fraction,
    Decimal остаётся Decimal.
    """

    value: Any = Field(..., description="Курс: float, int, Fraction или Decimal")

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: Any) -> Any:
        """Курс: конечное положительное число"""
        return validate_rate(v)

    @property
    def kind(self) -> NumericKind:
        return numeric_kind(self.value)


# =============================================================================
# EXCHANGE MARKET
# =============================================================================


class ExchangeMarket(Mapping):
    """
    Неизменяемая таблица CurrencyPair → ExchangeRate.

    Итерация по ключам в отсортированном порядке (quote, base).
    """

    __slots__ = ("_rates",)

    def __init__(self, rates: Optional[Dict[CurrencyPair, ExchangeRate]] = None):
        ordered = sorted((rates or {}).items(), key=lambda item: item[0].as_tuple())
        self._rates = MappingProxyType(dict(ordered))

    # -------------------------------------------------------------------------
    # Построение
    # -------------------------------------------------------------------------

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[PairLike, RateValue]]) -> "ExchangeMarket":
        """
        Построение из последовательности (пара, курс).

        При повторе ключа побеждает последнее значение.

        Args:
            pairs: Итерируемое (CurrencyPair | (quote, base), rate)

        Returns:
            ExchangeMarket

        Raises:
            ValueError: Если курс не конечное положительное число
            TypeError: Если ключ некорректен
        """
        rates: Dict[CurrencyPair, ExchangeRate] = {}
        for key, value in pairs:
            rates[as_pair(key)] = value if isinstance(value, ExchangeRate) else ExchangeRate(value=value)
        logger.debug("exchange market built with %d pairs", len(rates))
        return cls(rates)

    @classmethod
    def from_mapping(cls, mapping: Mapping) -> "ExchangeMarket":
        """Построение из произвольного отображения (например, разобранный JSON)"""
        return cls.from_pairs(mapping.items())

    @classmethod
    def merge(cls, *markets: "ExchangeMarket") -> "ExchangeMarket":
        """Объединение рынков; при совпадении ключей побеждает более поздний"""
        rates: Dict[CurrencyPair, ExchangeRate] = {}
        for market in markets:
            rates.update(market._rates)
        return cls(rates)

    # -------------------------------------------------------------------------
    # Mapping interface
    # -------------------------------------------------------------------------

    def __getitem__(self, key: PairLike) -> ExchangeRate:
        return self._rates[as_pair(key)]

    def __iter__(self) -> Iterator[CurrencyPair]:
        return iter(self._rates)

    def __len__(self) -> int:
        return len(self._rates)

    def __contains__(self, key: object) -> bool:
        try:
            return as_pair(key) in self._rates  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False

    def get(self, key: PairLike, default: Optional[ExchangeRate] = None) -> Optional[ExchangeRate]:  # type: ignore[override]
        """Поиск строго по ключу: без обращения и без кросс-курсов"""
        return self._rates.get(as_pair(key), default)

    def rate(self, quote: str, base: str) -> Optional[RateValue]:
        """Значение курса (quote, base) или None"""
        found = self._rates.get(CurrencyPair(quote, base))
        return None if found is None else found.value

    @property
    def currencies(self) -> FrozenSet[str]:
        """Все коды, встречающиеся в ключах"""
        codes = set()
        for pair in self._rates:
            codes.add(pair.quote)
            codes.add(pair.base)
        return frozenset(codes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExchangeMarket):
            return NotImplemented
        return dict(self._rates) == dict(other._rates)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        items = ", ".join(f"{pair}: {rate.value!r}" for pair, rate in self._rates.items())
        return f"ExchangeMarket({{{items}}})"


def generate_market(data: Any) -> ExchangeMarket:
    """
    Удобный конструктор рынка.

    Принимает:
    - одну пару: (("BRL", "GBP"), 0.38585)
    - последовательность пар: [(("EUR", "USD"), 1.19536), ...]
    - отображение: {("EUR", "USD"): 1.19536, ...}

    Returns:
        ExchangeMarket
    """
    if isinstance(data, ExchangeMarket):
        return data
    if isinstance(data, Mapping):
        return ExchangeMarket.from_mapping(data)
    if isinstance(data, tuple) and len(data) == 2 and not isinstance(data[1], tuple):
        return ExchangeMarket.from_pairs([data])
    return ExchangeMarket.from_pairs(data)
