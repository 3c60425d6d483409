"""Error taxonomy base classes."""

from ivms_inventory.errors.base import (
    INTERNAL,
    INTERNAL_ERROR,
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    InventoryError,
)

__all__ = [
    "INTERNAL",
    "INTERNAL_ERROR",
    "ErrorCategory",
    "ErrorCode",
    "ErrorSeverity",
    "InventoryError",
]
