"""
Логирование сервиса.

Один конфиг на всё приложение: консольный формат по умолчанию и JSON для
сбора логов в пайплайнах.

    from phone_inventory.common.logger import configure_logging, logger

    configure_logging(level="DEBUG")
    logger.info("phone created id=%s", 1)
"""
from __future__ import annotations

import json
import logging
import logging.config
from typing import Any, Dict

LOGGER_NAME = "phone_inventory"

# Атрибуты, которые есть у любого LogRecord; всё остальное пришло через extra=
_STANDARD_ATTRS = set(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime"}


def _json_formatter(record: logging.LogRecord) -> str:
    payload: Dict[str, Any] = {
        "level": record.levelname,
        "logger": record.name,
        "message": record.getMessage(),
    }
    for key, value in record.__dict__.items():
        if key not in _STANDARD_ATTRS and not key.startswith("_"):
            payload[key] = value
    if record.exc_info:
        payload["exc_info"] = logging.Formatter().formatException(record.exc_info)
    return json.dumps(payload, default=str)


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        return _json_formatter(record)


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    formatter_name = "json" if json_logs else "console"

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
                "json": {"()": JsonFormatter},
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": formatter_name,
                    "level": level,
                }
            },
            "loggers": {
                LOGGER_NAME: {
                    "handlers": ["default"],
                    "level": level,
                    "propagate": False,
                }
            },
        }
    )


logger = logging.getLogger(LOGGER_NAME)
