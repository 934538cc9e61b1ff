"""
Logging — настройка логирования для приложений

Библиотека пишет только в модульные логгеры (logging.getLogger(__name__))
и по умолчанию молчит (NullHandler на логгере пакета).
init_logging подключает вывод в stdout, опционально в JSON.
"""

import json
import logging
import sys
import time
from typing import Any, Dict

PACKAGE_LOGGER = "currency_units"


class JsonFormatter(logging.Formatter):
    """Плоский JSON на запись"""

    def format(self, record: logging.LogRecord) -> str:
        base: Dict[str, Any] = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "time": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created)),
        }
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False)


def init_logging(debug: bool = False, json_format: bool = False) -> logging.Logger:
    """
    Подключение stdout-обработчика к логгеру пакета.

    Повторный вызов заменяет ранее установленные обработчики.

    Args:
        debug: Уровень DEBUG (иначе INFO)
        json_format: JSON вместо текстового формата

    Returns:
        Логгер пакета
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()
    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
    logger.addHandler(handler)
    return logger
