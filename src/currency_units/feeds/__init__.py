"""
Адаптеры провайдеров курсов: JSON payload → ExchangeMarket.
"""

from currency_units.feeds.currencylayer import (
    load_currencylayer_market,
    parse_currencylayer_payload,
)
from currency_units.feeds.fixer import load_fixer_market, parse_fixer_payload

__all__ = [
    "parse_fixer_payload",
    "load_fixer_market",
    "parse_currencylayer_payload",
    "load_currencylayer_market",
]
