"""
currency_units — валюты как единицы измерения

Собственная размерность для каждой валюты, таблица курсов (ExchangeMarket)
и конверсия величин между валютами с выбором режима разрешения курса.

    >>> from currency_units import generate_market, parse_unit, uconvert
    >>> market = generate_market({("EUR", "USD"): 1.19536})
    >>> uconvert("USD", 1 * parse_unit("EUR"), market)
    Quantity(1.19536, 'USD')
"""

import logging

from currency_units.conversion import (
    BroadcastResult,
    RateResolution,
    ResolutionMode,
    broadcast_convert,
    convert,
    convert_each,
    resolve_rate,
    uconvert,
)
from currency_units.core.domain import (
    CurrencyInfo,
    CurrencyPair,
    CurrencyRegistry,
    Dimension,
    ExchangeMarket,
    ExchangeRate,
    Quantity,
    Unit,
    currency_info,
    currency_unit,
    generate_market,
    get_registry,
    parse_unit,
    register_currency,
)
from currency_units.core.errors import (
    CurrencyUnitsError,
    DimensionMismatch,
    InvalidIdentifier,
    MissingArgument,
    RateFeedError,
    RateNotFound,
    UnknownUnit,
    UnsupportedDimension,
)
from currency_units.feeds import (
    load_currencylayer_market,
    load_fixer_market,
    parse_currencylayer_payload,
    parse_fixer_payload,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.3.0"

__all__ = [
    # Units / currencies
    "Dimension",
    "Unit",
    "Quantity",
    "CurrencyInfo",
    "CurrencyRegistry",
    "get_registry",
    "register_currency",
    "parse_unit",
    "currency_info",
    "currency_unit",
    # Market
    "CurrencyPair",
    "ExchangeRate",
    "ExchangeMarket",
    "generate_market",
    # Conversion
    "ResolutionMode",
    "RateResolution",
    "resolve_rate",
    "convert",
    "uconvert",
    "broadcast_convert",
    "convert_each",
    "BroadcastResult",
    # Feeds
    "parse_fixer_payload",
    "load_fixer_market",
    "parse_currencylayer_payload",
    "load_currencylayer_market",
    # Errors
    "CurrencyUnitsError",
    "InvalidIdentifier",
    "UnknownUnit",
    "RateNotFound",
    "UnsupportedDimension",
    "MissingArgument",
    "DimensionMismatch",
    "RateFeedError",
]
