"""
fixer.io — адаптер payload в ExchangeMarket

Формат:
    {"success": true, "base": "EUR", "date": "2020-11-01",
     "rates": {"BRL": 6.685598, "USD": 1.16472, ...}}

Каждая запись rates[X] = r даёт пару (base, X) → r.
Запись base → base пропускается.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Union

from currency_units.core.contracts import validate_fixer_payload
from currency_units.core.domain.market import CurrencyPair, ExchangeMarket
from currency_units.feeds.base import check_success, read_payload

logger = logging.getLogger(__name__)

PROVIDER = "fixer"


def parse_fixer_payload(payload: Dict[str, Any]) -> ExchangeMarket:
    """
    Построение рынка из разобранного payload fixer.io.

    Raises:
        ValidationError: Если payload не соответствует схеме
        RateFeedError: Если payload сообщает об ошибке
    """
    validate_fixer_payload(payload)
    check_success(payload, PROVIDER)

    base = payload["base"].upper()
    pairs = [
        (CurrencyPair(base, code), rate)
        for code, rate in payload["rates"].items()
        if code.upper() != base
    ]
    market = ExchangeMarket.from_pairs(pairs)
    logger.debug("fixer market base=%s date=%s pairs=%d", base, payload.get("date"), len(market))
    return market


def load_fixer_market(path: Union[str, Path], decimal: bool = False) -> ExchangeMarket:
    """
    Построение рынка из JSON файла fixer.io.

    Args:
        path: Путь к файлу
        decimal: Хранить курсы как Decimal
    """
    return parse_fixer_payload(read_payload(path, decimal=decimal))
