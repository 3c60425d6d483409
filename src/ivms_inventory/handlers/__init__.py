"""Invocation adapter and Lambda entrypoints of the inventory functions."""

from ivms_inventory.handlers.adapter import (
    CREATE_INVENTORY,
    DELETE_INVENTORY,
    FETCH_INVENTORY,
    INTERNAL_ERROR_MESSAGE,
    LIST_INVENTORY,
    OPERATIONS,
    ApiError,
    InternalError,
    InvalidRequest,
    InventoryNotFound,
    Operation,
    invoke,
    to_api_error,
)
from ivms_inventory.handlers.lambdas import bootstrap, build_lambda_handler

__all__ = [
    "CREATE_INVENTORY",
    "DELETE_INVENTORY",
    "FETCH_INVENTORY",
    "INTERNAL_ERROR_MESSAGE",
    "LIST_INVENTORY",
    "OPERATIONS",
    "ApiError",
    "InternalError",
    "InvalidRequest",
    "InventoryNotFound",
    "Operation",
    "bootstrap",
    "build_lambda_handler",
    "invoke",
    "to_api_error",
]
