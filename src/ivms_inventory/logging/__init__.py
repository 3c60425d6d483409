# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ivms inventory

"""
Public API for the inventory logging setup.
"""

from ivms_inventory.logging.config import LoggingSettings
from ivms_inventory.logging.level import LogLevel
from ivms_inventory.logging.logger import (
    ROOT_LOGGER_NAME,
    StructuredFormatter,
    configure_logging,
    get_logger,
)

__all__ = [
    "LogLevel",
    "LoggingSettings",
    "ROOT_LOGGER_NAME",
    "StructuredFormatter",
    "configure_logging",
    "get_logger",
]
