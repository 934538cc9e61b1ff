"""
currencylayer — адаптер payload в ExchangeMarket

Формат:
    {"success": true, "source": "USD",
     "quotes": {"USDBRL": 5.32409, "USDCAD": 1.30045, ...}}

Ключ quotes = source + код; запись даёт пару (source, код) → курс.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Union

from currency_units.core.contracts import validate_currencylayer_payload
from currency_units.core.domain.market import CurrencyPair, ExchangeMarket
from currency_units.core.errors import RateFeedError
from currency_units.feeds.base import check_success, read_payload

logger = logging.getLogger(__name__)

PROVIDER = "currencylayer"


def parse_currencylayer_payload(payload: Dict[str, Any]) -> ExchangeMarket:
    """
    Построение рынка из разобранного payload currencylayer.

    Raises:
        ValidationError: Если payload не соответствует схеме
        RateFeedError: Если payload сообщает об ошибке или ключ quotes
            не начинается с кода source
    """
    validate_currencylayer_payload(payload)
    check_success(payload, PROVIDER)

    source = payload["source"].upper()
    pairs = []
    for key, rate in payload["quotes"].items():
        key = key.upper()
        if not key.startswith(source):
            raise RateFeedError(f"Quote key {key!r} does not start with source {source!r}")
        code = key[len(source):]
        if code == source:
            continue
        pairs.append((CurrencyPair(source, code), rate))

    market = ExchangeMarket.from_pairs(pairs)
    logger.debug("currencylayer market source=%s pairs=%d", source, len(market))
    return market


def load_currencylayer_market(path: Union[str, Path], decimal: bool = False) -> ExchangeMarket:
    """
    Построение рынка из JSON файла currencylayer.

    Args:
        path: Путь к файлу
        decimal: Хранить курсы как Decimal
    """
    return parse_currencylayer_payload(read_payload(path, decimal=decimal))
