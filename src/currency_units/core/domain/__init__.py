"""
Domain models and value objects.

Contains units and quantities, the currency registry and the exchange market.
"""

from currency_units.core.domain.currency import (
    CurrencyInfo,
    CurrencyRegistry,
    currency_info,
    currency_unit,
    get_registry,
    is_currency_unit,
    parse_unit,
    register_currency,
)
from currency_units.core.domain.market import (
    CurrencyPair,
    ExchangeMarket,
    ExchangeRate,
    as_pair,
    generate_market,
)
from currency_units.core.domain.units import (
    LENGTH,
    MASS,
    SI_PREFIXES,
    TIME,
    Dimension,
    Quantity,
    Unit,
    UnitRegistry,
    currency_dimension,
)

__all__ = [
    # Units module
    "Dimension",
    "Unit",
    "Quantity",
    "UnitRegistry",
    "SI_PREFIXES",
    "LENGTH",
    "MASS",
    "TIME",
    "currency_dimension",
    # Currency registry
    "CurrencyInfo",
    "CurrencyRegistry",
    "get_registry",
    "register_currency",
    "currency_unit",
    "parse_unit",
    "currency_info",
    "is_currency_unit",
    # Exchange market
    "CurrencyPair",
    "ExchangeRate",
    "ExchangeMarket",
    "as_pair",
    "generate_market",
]
