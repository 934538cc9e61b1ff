"""Общие функции адаптеров провайдеров курсов"""

import json
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, Union

from currency_units.core.errors import RateFeedError


def read_payload(path: Union[str, Path], decimal: bool = False) -> Dict[str, Any]:
    """
    Чтение JSON payload провайдера.

    Args:
        path: Путь к JSON файлу
        decimal: Разбирать дробные числа как Decimal (без потери точности)

    Returns:
        Разобранный payload
    """
    with open(path, "r", encoding="utf-8") as f:
        if decimal:
            return json.load(f, parse_float=Decimal)
        return json.load(f)


def check_success(payload: Dict[str, Any], provider: str) -> None:
    """
    Raises:
        RateFeedError: Если провайдер вернул success=false
    """
    if payload.get("success") is True:
        return
    error = payload.get("error") or {}
    raise RateFeedError(
        f"{provider} payload reports failure: "
        f"code={error.get('code')} type={error.get('type')} info={error.get('info')}"
    )
