# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ivms inventory
"""
Configuration for the inventory logging system.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict

from ivms_inventory.config.base import Config
from ivms_inventory.logging.level import LogLevel


class LoggingSettings(Config):
    """
    Logging settings, loaded from ``INVENTORY_LOGGING_*`` environment variables.
    """

    model_config = SettingsConfigDict(
        env_prefix="INVENTORY_LOGGING_",
        extra="ignore",
        case_sensitive=False,
    )

    level: str = Field(default=LogLevel.INFO.value, description="Log level")
    json_format: bool = Field(
        default=False, description="Emit one JSON object per log line"
    )
    include_timestamp: bool = Field(
        default=True, description="Include timestamp in logs"
    )
    include_level: bool = Field(default=True, description="Include log level in logs")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: Any) -> str:
        """Validate that the level is a valid log level."""
        if not isinstance(v, str):
            raise ValueError(f"Log level must be a string, got {type(v).__name__}")
        return LogLevel.from_string(v).value

    @classmethod
    def load(cls) -> LoggingSettings:
        """Load logging settings from environment variables or defaults."""
        return cls()
