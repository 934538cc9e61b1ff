"""
Units — Размерности, единицы и величины

Минимальный слой размерного анализа, на который опирается валютная конверсия:
- Dimension: номинальная размерность (длина, масса, время, валюта XXX)
- Unit: единица размерности с масштабом и SI-префиксом
- Quantity: величина = (magnitude, unit)

Каждая валюта имеет СОБСТВЕННУЮ размерность. Обычная конверсия
(Quantity.to) связывает только единицы одной размерности; связь между
валютами задаётся исключительно рынком курсов (см. conversion).
"""

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Dict, Final, Iterable, Iterator, Optional, Tuple, Union

from currency_units.core.config import CURRENCY_DIMENSION_KIND
from currency_units.core.errors import DimensionMismatch, UnknownUnit
from currency_units.core.math.numeric import (
    RateValue,
    divide,
    multiply,
    numeric_kind,
    promote,
)


# =============================================================================
# SI-ПРЕФИКСЫ
# =============================================================================
# Масштабы точные: int для >= 1, Fraction для < 1

SI_PREFIXES: Final[Dict[str, Union[int, Fraction]]] = {
    "Y": 10**24,
    "Z": 10**21,
    "E": 10**18,
    "P": 10**15,
    "T": 10**12,
    "G": 10**9,
    "M": 10**6,
    "k": 10**3,
    "h": 10**2,
    "da": 10,
    "d": Fraction(1, 10),
    "c": Fraction(1, 10**2),
    "m": Fraction(1, 10**3),
    "μ": Fraction(1, 10**6),
    "u": Fraction(1, 10**6),
    "n": Fraction(1, 10**9),
    "p": Fraction(1, 10**12),
    "f": Fraction(1, 10**15),
    "a": Fraction(1, 10**18),
    "z": Fraction(1, 10**21),
    "y": Fraction(1, 10**24),
}

# Двухсимвольные префиксы проверяются первыми
_PREFIX_ORDER: Final[Tuple[str, ...]] = tuple(sorted(SI_PREFIXES, key=len, reverse=True))


# =============================================================================
# DIMENSION / UNIT
# =============================================================================


@dataclass(frozen=True)
class Dimension:
    """
    Номинальная размерность.

    Две размерности равны только при совпадении kind и name.
    Для валют: kind='currency', name=<код ISO>.
    """

    kind: str
    name: str

    @property
    def is_currency(self) -> bool:
        return self.kind == CURRENCY_DIMENSION_KIND

    def __str__(self) -> str:
        return f"{self.kind}:{self.name}"


LENGTH: Final[Dimension] = Dimension("physical", "length")
MASS: Final[Dimension] = Dimension("physical", "mass")
TIME: Final[Dimension] = Dimension("physical", "time")


def currency_dimension(code: str) -> Dimension:
    """Размерность валюты по коду"""
    return Dimension(CURRENCY_DIMENSION_KIND, code)


@dataclass(frozen=True)
class Unit:
    """
    Единица измерения.

    Attributes:
        name: Символ базовой единицы ('m', 'EUR')
        dimension: Размерность
        scale: Масштаб относительно опорной единицы размерности
        prefix: SI-префикс ('' если нет)
    """

    name: str
    dimension: Dimension
    scale: Union[int, Fraction] = 1
    prefix: str = ""

    @property
    def symbol(self) -> str:
        return f"{self.prefix}{self.name}"

    @property
    def is_currency(self) -> bool:
        return self.dimension.is_currency

    @property
    def currency_code(self) -> Optional[str]:
        """Код валюты, если единица валютная"""
        return self.dimension.name if self.is_currency else None

    def with_prefix(self, prefix: str) -> "Unit":
        """Единица с SI-префиксом (применяется к базовой единице)"""
        if prefix not in SI_PREFIXES:
            raise UnknownUnit(f"{prefix}{self.name}")
        if prefix == "u":
            prefix = "μ"
        return Unit(
            name=self.name,
            dimension=self.dimension,
            scale=SI_PREFIXES[prefix],
            prefix=prefix,
        )

    def __rmul__(self, magnitude: RateValue) -> "Quantity":
        numeric_kind(magnitude)
        return Quantity(magnitude, self)

    def __str__(self) -> str:
        return self.symbol


# =============================================================================
# QUANTITY
# =============================================================================


@dataclass(frozen=True, eq=False)
class Quantity:
    """
    Величина: magnitude в единицах unit.

    Представление magnitude (int/float/Fraction/Decimal) сохраняется
    при арифметике согласно правилам numeric.promote.
    """

    magnitude: RateValue
    unit: Unit

    @property
    def dimension(self) -> Dimension:
        return self.unit.dimension

    def to(self, unit: Unit) -> "Quantity":
        """
        Конверсия в единицу той же размерности.

        Raises:
            DimensionMismatch: Если размерности различаются
        """
        if unit == self.unit:
            return self
        if unit.dimension != self.dimension:
            raise DimensionMismatch(
                f"Cannot convert {self.unit.symbol} ({self.dimension}) "
                f"to {unit.symbol} ({unit.dimension})"
            )
        magnitude = divide(multiply(self.magnitude, self.unit.scale), unit.scale)
        return Quantity(magnitude, unit)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        if other.dimension != self.dimension:
            return False
        return self.to(other.unit).magnitude == other.magnitude

    __hash__ = None  # type: ignore[assignment]

    def __mul__(self, factor: RateValue) -> "Quantity":
        if isinstance(factor, Quantity):
            return NotImplemented
        return Quantity(multiply(self.magnitude, factor), self.unit)

    __rmul__ = __mul__

    def __truediv__(self, factor: RateValue) -> "Quantity":
        if isinstance(factor, Quantity):
            return NotImplemented
        return Quantity(divide(self.magnitude, factor), self.unit)

    def __add__(self, other: "Quantity") -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        converted = other.to(self.unit)
        return Quantity(_add(self.magnitude, converted.magnitude), self.unit)

    def __sub__(self, other: "Quantity") -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        return self + (-other)

    def __neg__(self) -> "Quantity":
        return Quantity(-self.magnitude, self.unit)

    def __repr__(self) -> str:
        return f"Quantity({self.magnitude!r}, {self.unit.symbol!r})"

    def __str__(self) -> str:
        return f"{self.magnitude} {self.unit.symbol}"


def _add(a: RateValue, b: RateValue) -> RateValue:
    a, b = promote(a, b)
    return a + b  # type: ignore[operator]


# =============================================================================
# UNIT REGISTRY
# =============================================================================


@dataclass
class UnitRegistry:
    """
    Реестр базовых единиц с разбором SI-префиксов.

    Разбор имени: сначала точное совпадение (включая алиасы),
    затем префикс + базовая единица ('kBRL', 'MEUR', 'hUSD', 'km').
    """

    _units: Dict[str, Unit] = field(default_factory=dict)
    _aliases: Dict[str, str] = field(default_factory=dict)

    def define(self, unit: Unit) -> Unit:
        """Регистрация базовой единицы. Повторная регистрация того же имени заменяет её."""
        self._units[unit.name] = unit
        return unit

    def alias(self, alias: str, name: str) -> None:
        """Алиас для базовой единицы (например, '€' → 'EUR')"""
        if name not in self._units:
            raise UnknownUnit(name)
        self._aliases[alias] = name

    def parse(self, name: str) -> Unit:
        """
        Разбор строки единицы.

        Raises:
            UnknownUnit: Если строка не распознана
        """
        base = self._lookup(name)
        if base is not None:
            return base

        for prefix in _PREFIX_ORDER:
            if name.startswith(prefix) and len(name) > len(prefix):
                base = self._lookup(name[len(prefix):])
                if base is not None:
                    return base.with_prefix(prefix)

        raise UnknownUnit(name)

    def _lookup(self, name: str) -> Optional[Unit]:
        if name in self._units:
            return self._units[name]
        if name in self._aliases:
            return self._units[self._aliases[name]]
        return None

    def __getitem__(self, name: str) -> Unit:
        return self.parse(name)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        try:
            self.parse(name)
        except UnknownUnit:
            return False
        return True

    def __iter__(self) -> Iterator[Unit]:
        return iter(self._units.values())

    def __len__(self) -> int:
        return len(self._units)


def physical_units() -> Iterable[Unit]:
    """Базовые невалютные единицы"""
    return (
        Unit("m", LENGTH),
        Unit("g", MASS),
        Unit("s", TIME),
    )
