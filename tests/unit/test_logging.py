from __future__ import annotations

import json
import logging

from phone_inventory.common.logger import LOGGER_NAME, _json_formatter, configure_logging, logger
from phone_inventory.settings.db_settings import Settings


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="phone_inventory.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="phone %s",
        args=(1,),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_renders_message_and_extra():
    payload = json.loads(_json_formatter(_record(phone_id=1)))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "phone_inventory.test"
    assert payload["message"] == "phone 1"
    assert payload["phone_id"] == 1
    assert "pathname" not in payload


def test_configure_logging_sets_package_level():
    configure_logging(level="DEBUG")
    assert logger.name == LOGGER_NAME
    assert logger.level == logging.DEBUG
    configure_logging(level="INFO")
    assert logger.level == logging.INFO


def test_settings_defaults(monkeypatch):
    for name in ("SYNC_DATABASE_URL", "LOG_LEVEL", "JSON_LOGS", "VALIDATION_STATUS_CODE", "DELETE_STATUS_CODE"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.SYNC_DATABASE_URL.startswith("sqlite")
    assert settings.VALIDATION_STATUS_CODE == 401
    assert settings.DELETE_STATUS_CODE == 204
    assert settings.JSON_LOGS is False
