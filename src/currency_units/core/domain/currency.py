"""
Currency — Реестр валют

Каждой валюте сопоставляется:
- CurrencyInfo (код ISO, имя единицы, отображаемое имя, числовой код, символ)
- собственная размерность Dimension('currency', <код>)
- опорная единица масштаба 1 в этой размерности

Реестр заполняется один раз из статической таблицы (data/currencies.json)
при первом обращении. Далее допускается только добавление новых кодов.

Разные валюты НИКОГДА не делят размерность, даже при фиксированном курсе.
"""

import json
import logging
from collections import Counter
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

from pydantic import BaseModel, Field

from currency_units.core.config import (
    CURRENCY_CODE_PATTERN,
    CURRENCY_DATA_PATH,
    UNIT_NAME_PATTERN,
)
from currency_units.core.contracts import validate_currency_table
from currency_units.core.domain.units import (
    Unit,
    UnitRegistry,
    currency_dimension,
    physical_units,
)
from currency_units.core.errors import InvalidIdentifier, UnknownUnit

logger = logging.getLogger(__name__)


# =============================================================================
# CURRENCY INFO
# =============================================================================


class CurrencyInfo(BaseModel):
    """
    Метаданные валюты.

    Immutable модель, запись статической таблицы валют.
    """

    code: str = Field(..., pattern=r"^[A-Z]+$", description="Код валюты (ISO 4217)")
    unit_name: str = Field(
        ..., pattern=r"^[A-Z][A-Za-z0-9]*$", description="Имя единицы (PascalCase)"
    )
    display_name: str = Field(..., min_length=1, description="Отображаемое имя")
    numeric_code: Optional[int] = Field(
        None, ge=0, le=999, description="Числовой код ISO 4217 (nullable)"
    )
    symbol: Optional[str] = Field(None, min_length=1, description="Символ валюты (nullable)")

    model_config = {"frozen": True}


# =============================================================================
# REGISTRY
# =============================================================================


class CurrencyRegistry:
    """
    Реестр валют поверх реестра единиц.

    Регистрирует для каждой валюты базовую единицу (имя = код),
    алиас по имени единицы и алиас по символу (если символ не занят).
    """

    def __init__(self, units: Optional[UnitRegistry] = None):
        self.units = units if units is not None else UnitRegistry()
        if units is None:
            for unit in physical_units():
                self.units.define(unit)
        self._currencies: Dict[str, CurrencyInfo] = {}

    # -------------------------------------------------------------------------
    # Загрузка
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path = CURRENCY_DATA_PATH) -> "CurrencyRegistry":
        """
        Построение реестра из JSON таблицы валют.

        Символы, встречающиеся у нескольких валют, алиасами не становятся.

        Raises:
            FileNotFoundError: Если файл таблицы не найден
            ValidationError: Если таблица не соответствует схеме
        """
        with open(path, "r", encoding="utf-8") as f:
            table = json.load(f)
        return cls.from_table(table)

    @classmethod
    def from_table(cls, table: Dict[str, Any]) -> "CurrencyRegistry":
        """Построение реестра из разобранной таблицы валют"""
        validate_currency_table(table)

        records = [CurrencyInfo(**record) for record in table["currencies"]]
        symbol_counts = Counter(r.symbol for r in records if r.symbol)

        registry = cls()
        for info in records:
            unique_symbol = info.symbol if info.symbol and symbol_counts[info.symbol] == 1 else None
            registry._register(info, alias_symbol=unique_symbol)

        logger.debug("currency registry loaded: %d currencies", len(registry))
        return registry

    # -------------------------------------------------------------------------
    # Регистрация
    # -------------------------------------------------------------------------

    def register(
        self,
        code: str,
        unit_name: str,
        display_name: Optional[str] = None,
        numeric_code: Optional[int] = None,
        symbol: Optional[str] = None,
    ) -> Unit:
        """
        Регистрация валюты: новая размерность + опорная единица.

        Args:
            code: Код валюты (заглавные буквы, например 'AAA')
            unit_name: Имя единицы (PascalCase, например 'TripleAs')
            display_name: Отображаемое имя (по умолчанию unit_name)
            numeric_code: Числовой код ISO (nullable)
            symbol: Символ валюты (nullable)

        Returns:
            Опорная единица валюты

        Raises:
            InvalidIdentifier: Если code/unit_name некорректны или код уже
                зарегистрирован с другим именем единицы
        """
        if not isinstance(code, str) or not CURRENCY_CODE_PATTERN.match(code):
            raise InvalidIdentifier(
                f"Currency code must be upper-case letters only, got {code!r}", str(code)
            )
        if not isinstance(unit_name, str) or not UNIT_NAME_PATTERN.match(unit_name):
            raise InvalidIdentifier(
                f"Currency unit name must be a PascalCase identifier, got {unit_name!r}",
                str(unit_name),
            )

        existing = self._currencies.get(code)
        if existing is not None:
            if existing.unit_name != unit_name:
                raise InvalidIdentifier(
                    f"Currency {code} already registered as {existing.unit_name}", code
                )
            return self.units.parse(code)

        if unit_name in self.units:
            raise InvalidIdentifier(f"Unit name {unit_name!r} is already in use", unit_name)

        info = CurrencyInfo(
            code=code,
            unit_name=unit_name,
            display_name=display_name or unit_name,
            numeric_code=numeric_code,
            symbol=symbol,
        )
        alias_symbol = symbol if symbol and symbol not in self.units else None
        return self._register(info, alias_symbol=alias_symbol)

    def _register(self, info: CurrencyInfo, alias_symbol: Optional[str]) -> Unit:
        unit = self.units.define(Unit(info.code, currency_dimension(info.code)))
        self.units.alias(info.unit_name, info.code)
        if alias_symbol:
            self.units.alias(alias_symbol, info.code)
        self._currencies[info.code] = info
        logger.debug("registered currency %s (%s)", info.code, info.unit_name)
        return unit

    # -------------------------------------------------------------------------
    # Доступ
    # -------------------------------------------------------------------------

    def info(self, code: str) -> CurrencyInfo:
        """
        Метаданные валюты по коду.

        Raises:
            UnknownUnit: Если валюта не зарегистрирована
        """
        try:
            return self._currencies[code.upper()]
        except KeyError:
            raise UnknownUnit(code) from None

    def unit(self, code: str) -> Unit:
        """Опорная единица валюты по коду"""
        return self.units.parse(self.info(code).code)

    def parse(self, name: str) -> Unit:
        """Разбор строки единицы ('EUR', 'kBRL', '€', 'Euro', 'km')"""
        return self.units.parse(name)

    def __getitem__(self, name: str) -> Unit:
        return self.parse(name)

    def __contains__(self, code: object) -> bool:
        return code in self._currencies

    def __iter__(self) -> Iterator[CurrencyInfo]:
        return iter(self._currencies.values())

    def __len__(self) -> int:
        return len(self._currencies)


# =============================================================================
# DEFAULT REGISTRY
# =============================================================================


@lru_cache(maxsize=None)
def get_registry() -> CurrencyRegistry:
    """Реестр по умолчанию, загружается из data/currencies.json при первом вызове"""
    return CurrencyRegistry.load()


def register_currency(code: str, unit_name: str, **metadata: Any) -> Unit:
    """Регистрация валюты в реестре по умолчанию"""
    return get_registry().register(code, unit_name, **metadata)


def parse_unit(name: str) -> Unit:
    """Разбор строки единицы в реестре по умолчанию"""
    return get_registry().parse(name)


def currency_info(code: str) -> CurrencyInfo:
    """Метаданные валюты из реестра по умолчанию"""
    return get_registry().info(code)


def currency_unit(code: str) -> Unit:
    """Опорная единица валюты из реестра по умолчанию"""
    return get_registry().unit(code)


def is_currency_unit(unit: Unit) -> bool:
    return unit.is_currency
