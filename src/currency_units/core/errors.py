"""
Errors — Иерархия исключений currency_units

Все исключения наследуют ValueError: неверные аргументы вызова
(неизвестная пара, неверный код валюты, несовместимые единицы).

Ошибки синхронные и детерминированные, внутренних повторов нет.
"""

from typing import Iterable, Optional, Tuple


class CurrencyUnitsError(ValueError):
    """Базовое исключение пакета"""

    pass


# =============================================================================
# REGISTRATION
# =============================================================================


class InvalidIdentifier(CurrencyUnitsError):
    """
    Некорректный код валюты или имя единицы при регистрации.

    Код: только заглавные латинские буквы (например, 'EUR', 'AAA').
    Имя единицы: PascalCase идентификатор (например, 'Euro', 'TripleAs').
    """

    def __init__(self, message: str, identifier: str):
        super().__init__(message)
        self.identifier = identifier


class UnknownUnit(CurrencyUnitsError):
    """Строка единицы не распознана реестром"""

    def __init__(self, name: str):
        super().__init__(f"Unknown unit: {name!r}")
        self.name = name


# =============================================================================
# CONVERSION
# =============================================================================


class RateNotFound(CurrencyUnitsError):
    """
    В рынке нет ключей, необходимых выбранному режиму.

    Attributes:
        pair: Запрошенная пара (source, target)
        mode: Режим разрешения курса
        missing: Отсутствующие ключи (quote, base)
    """

    def __init__(
        self,
        pair: Tuple[str, str],
        mode: int,
        missing: Iterable[Tuple[str, str]],
        detail: Optional[str] = None,
    ):
        self.pair = pair
        self.mode = mode
        self.missing = tuple(missing)
        keys = ", ".join(f"({q},{b})" for q, b in self.missing)
        message = (
            f"No exchange rate for {pair[0]} -> {pair[1]} with mode={mode}: "
            f"missing {keys or 'pivot legs'}"
        )
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class UnsupportedDimension(CurrencyUnitsError):
    """
    Смешение валютной и невалютной единиц, либо рынок передан
    для конверсии невалютных единиц.
    """

    pass


class MissingArgument(CurrencyUnitsError):
    """Конверсия между разными валютами без рынка курсов"""

    pass


class DimensionMismatch(CurrencyUnitsError):
    """Стандартная конверсия между разными размерностями"""

    pass


# =============================================================================
# RATE FEEDS
# =============================================================================


class RateFeedError(CurrencyUnitsError):
    """Payload провайдера курсов сообщает об ошибке или несогласован"""

    pass
