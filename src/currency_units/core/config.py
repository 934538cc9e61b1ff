"""
Config — Константы и параметры по умолчанию

Режимы разрешения курса, форматы идентификаторов валют,
расположение статической таблицы валют.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Final, FrozenSet, Pattern


# =============================================================================
# РЕЖИМЫ КОНВЕРСИИ
# =============================================================================

# Прямой курс (Q,B) по умолчанию
DEFAULT_MODE: Final[int] = 1

# 1: прямой, -1: обратный, 2: кросс через прямые ноги, -2: кросс через обратные
SUPPORTED_MODES: Final[FrozenSet[int]] = frozenset({1, -1, 2, -2})


# =============================================================================
# ИДЕНТИФИКАТОРЫ ВАЛЮТ
# =============================================================================

# Код валюты: заглавные латинские буквы (ISO 4217 использует ровно 3)
CURRENCY_CODE_PATTERN: Final[Pattern[str]] = re.compile(r"^[A-Z]+$")

# Имя единицы: PascalCase идентификатор
UNIT_NAME_PATTERN: Final[Pattern[str]] = re.compile(r"^[A-Z][A-Za-z0-9]*$")

# Вид размерности, которым помечаются валюты
CURRENCY_DIMENSION_KIND: Final[str] = "currency"


# =============================================================================
# ДАННЫЕ
# =============================================================================

PACKAGE_ROOT: Final[Path] = Path(__file__).resolve().parent.parent

# Статическая таблица активных валют ISO 4217
CURRENCY_DATA_PATH: Final[Path] = PACKAGE_ROOT / "data" / "currencies.json"

# JSON Schema контракты (payload провайдеров, таблица валют)
SCHEMA_DIR: Final[Path] = PACKAGE_ROOT / "core" / "contracts" / "schema"


@dataclass(frozen=True)
class BroadcastConfig:
    """
    Параметры поэлементной конверсии.

    strict=True: первая ошибка пробрасывается вызывающему.
    strict=False: ошибки возвращаются в BroadcastResult по позициям.
    """

    strict: bool = True
