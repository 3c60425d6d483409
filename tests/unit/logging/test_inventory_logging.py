"""Tests for the inventory logging setup."""

import json
import logging
import uuid
from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from ivms_inventory.logging import (
    ROOT_LOGGER_NAME,
    LoggingSettings,
    LogLevel,
    StructuredFormatter,
    configure_logging,
    get_logger,
)


def make_record(message: str = "Handling %s", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="ivms_inventory.handlers",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=("fetch_inventory",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_format_includes_extra_values() -> None:
    formatter = StructuredFormatter(json_format=True, include_timestamp=False)
    record_id = uuid.UUID("00000000-0000-0000-0000-000000000001")

    data = json.loads(
        formatter.format(
            make_record(
                operation="fetch_inventory",
                vessel=record_id,
                at=datetime(2020, 1, 1, tzinfo=UTC),
                level_enum=LogLevel.INFO,
            )
        )
    )

    assert data == {
        "message": "Handling fetch_inventory",
        "logger": "ivms_inventory.handlers",
        "level": "INFO",
        "operation": "fetch_inventory",
        "vessel": str(record_id),
        "at": "2020-01-01T00:00:00+00:00",
        "level_enum": "INFO",
    }


def test_json_format_includes_exception() -> None:
    formatter = StructuredFormatter(json_format=True)
    try:
        raise RuntimeError("throttled")
    except RuntimeError as e:
        record = make_record()
        record.exc_info = (type(e), e, e.__traceback__)

    data = json.loads(formatter.format(record))

    assert data["error"] == "throttled"
    assert "RuntimeError" in data["exception"]
    assert "timestamp" in data


def test_text_format_appends_key_value_pairs() -> None:
    formatter = StructuredFormatter(include_timestamp=False)

    line = formatter.format(make_record(table="Inventory", note="two words"))

    assert line == 'Handling fetch_inventory [INFO] table=Inventory note="two words"'


def test_text_format_without_extra_is_plain_message() -> None:
    formatter = StructuredFormatter(include_timestamp=False, include_level=False)

    assert formatter.format(make_record()) == "Handling fetch_inventory"


def test_get_logger_prefixes_package_namespace() -> None:
    assert get_logger("handlers").name == "ivms_inventory.handlers"
    assert get_logger("ivms_inventory.inventory").name == "ivms_inventory.inventory"
    assert get_logger(ROOT_LOGGER_NAME).name == ROOT_LOGGER_NAME


def test_configure_logging_replaces_handler() -> None:
    settings = LoggingSettings(level="warning", json_format=True)

    configure_logging(settings)
    logger = configure_logging(settings)

    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
    formatter = logger.handlers[0].formatter
    assert isinstance(formatter, StructuredFormatter)
    assert formatter.json_format is True


def test_logging_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INVENTORY_LOGGING_LEVEL", "error")
    monkeypatch.setenv("INVENTORY_LOGGING_JSON_FORMAT", "true")

    settings = LoggingSettings.load()

    assert settings.level == "ERROR"
    assert settings.json_format is True


def test_logging_settings_reject_unknown_level() -> None:
    with pytest.raises(ValidationError):
        LoggingSettings(level="chatty")


def test_log_level_conversion() -> None:
    assert LogLevel.from_string("debug") is LogLevel.DEBUG
    assert LogLevel.CRITICAL.to_stdlib_level() == logging.CRITICAL
