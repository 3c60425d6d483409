"""Configuration management for the inventory service.

Settings are loaded from environment variables; any failure surfaces as a
``ConfigurationError`` before a request is handled.
"""

from ivms_inventory.config.base import Config
from ivms_inventory.config.errors import (
    CONFIG,
    CONFIG_CLIENT_ERROR,
    CONFIG_ERROR,
    CONFIG_MISSING_KEY,
    CONFIG_VALIDATION_ERROR,
    ConfigurationError,
)
from ivms_inventory.config.settings import InventorySettings, load_settings

__all__ = [
    "CONFIG",
    "CONFIG_CLIENT_ERROR",
    "CONFIG_ERROR",
    "CONFIG_MISSING_KEY",
    "CONFIG_VALIDATION_ERROR",
    "Config",
    "ConfigurationError",
    "InventorySettings",
    "load_settings",
]
