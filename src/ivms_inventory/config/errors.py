# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ivms inventory
"""
Configuration-specific error classes.

Configuration errors are fatal: they are raised while the process context is
being built and no request may be handled once one has occurred.
"""

from __future__ import annotations

from typing import Any, Final

from ivms_inventory.errors.base import (
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    InventoryError,
)

CONFIG = ErrorCategory.get_or_create("CONFIG")
CONFIG_ERROR: Final = ErrorCode.get_or_create("CONFIG_ERROR", CONFIG)
CONFIG_MISSING_KEY: Final = ErrorCode.get_or_create("CONFIG_MISSING_KEY", CONFIG)
CONFIG_VALIDATION_ERROR: Final = ErrorCode.get_or_create(
    "CONFIG_VALIDATION_ERROR", CONFIG
)
CONFIG_CLIENT_ERROR: Final = ErrorCode.get_or_create("CONFIG_CLIENT_ERROR", CONFIG)


class ConfigurationError(InventoryError):
    """Environment or bootstrap misconfiguration."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = CONFIG_ERROR,
        severity: ErrorSeverity = ErrorSeverity.FATAL,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a configuration error.

        Args:
            message: Human-readable error message
            code: Error code (defaults to CONFIG_ERROR)
            severity: How severe this error is (fatal by default)
            context: Additional context information
            **kwargs: Additional context keys (will be merged with context)
        """
        super().__init__(
            message,
            code=code,
            severity=severity,
            context=context,
            **kwargs,
        )
