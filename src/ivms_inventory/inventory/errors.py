# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ivms inventory
"""
inventory.errors
Store and domain errors of the inventory data-access layer
"""

from __future__ import annotations

from typing import Any, Final

from ivms_inventory.errors.base import (
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    InventoryError,
)

STORE = ErrorCategory.get_or_create("STORE")
STORE_ERROR: Final = ErrorCode.get_or_create("STORE_ERROR", STORE)
STORE_DECODE_ERROR: Final = ErrorCode.get_or_create("STORE_DECODE_ERROR", STORE)

DOMAIN = ErrorCategory.get_or_create("DOMAIN")
INVENTORY_NOT_FOUND: Final = ErrorCode.get_or_create("INVENTORY_NOT_FOUND", DOMAIN)


class StoreError(InventoryError):
    """Failure of the backing store: transport, throttling, timeout or a
    persisted item that can not be decoded."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = STORE_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a store error.

        Args:
            message: Human-readable error message
            code: Error code (defaults to STORE_ERROR)
            severity: How severe this error is
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


class InventoryNotFoundError(InventoryError):
    """Requested inventory item does not exist."""

    def __init__(self, inventory_type: str, inventory_id: str) -> None:
        super().__init__(
            f"Inventory {inventory_type}:{inventory_id} not found.",
            code=INVENTORY_NOT_FOUND,
            severity=ErrorSeverity.WARNING,
            inventory_type=inventory_type,
            inventory_id=inventory_id,
        )
        self.inventory_type = inventory_type
        self.inventory_id = inventory_id
