# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ivms inventory
"""
Invocation adapter of the inventory functions.

Every function follows the same pipeline, implemented once by ``invoke``:

1. decode the event into the operation's request model,
2. run exactly one store operation,
3. encode the response model, or map the failure to an ``ApiError``.

Only domain errors reach the caller with a descriptive message; store and
configuration failures are logged and reported as an opaque internal error.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Final, Generic, TypeVar

from pydantic import ValidationError

from ivms_inventory.config.errors import ConfigurationError
from ivms_inventory.errors.base import InventoryError
from ivms_inventory.handlers.schemas import (
    CreateInventoryRequest,
    CreateInventoryResponse,
    DeleteInventoryRequest,
    DeleteInventoryResponse,
    FetchInventoryRequest,
    InventoryResponse,
    ListInventoryRequest,
    ListInventoryResponse,
    Payload,
)
from ivms_inventory.inventory.errors import InventoryNotFoundError, StoreError
from ivms_inventory.inventory.model import InventoryRecord
from ivms_inventory.inventory.protocols import InventoryStoreProtocol
from ivms_inventory.logging import get_logger

logger = get_logger(__name__)

INTERNAL_ERROR_MESSAGE: Final = "Internal server error."

RequestT = TypeVar("RequestT", bound=Payload)
ResponseT = TypeVar("ResponseT", bound=Payload)


class ApiError(Exception):
    """Caller-facing error; the class name is the reported error type."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InventoryNotFound(ApiError):
    pass


class InvalidRequest(ApiError):
    pass


class InternalError(ApiError):
    def __init__(self, message: str = INTERNAL_ERROR_MESSAGE) -> None:
        super().__init__(message)


def to_api_error(error: InventoryError) -> ApiError:
    """Map an inventory error onto the error reported to the caller."""
    match error:
        case InventoryNotFoundError():
            return InventoryNotFound(error.message)
        case StoreError() | ConfigurationError():
            return InternalError()
        case _:
            # subclasses outside the taxonomy
            return InternalError()


@dataclass(frozen=True)
class Operation(Generic[RequestT, ResponseT]):
    """One inventory function: its request model and the store call it makes."""

    name: str
    request_model: type[RequestT]
    execute: Callable[[InventoryStoreProtocol, RequestT], Awaitable[ResponseT]]


async def invoke(
    operation: Operation[Any, Any],
    store: InventoryStoreProtocol,
    event: Mapping[str, Any],
) -> dict[str, Any]:
    """Run one invocation of an operation.

    Args:
        operation: The operation to run
        store: Inventory store to run it against
        event: Raw invocation payload

    Returns:
        The encoded response payload

    Raises:
        ApiError: If the request is invalid or the operation fails
    """
    try:
        request = operation.request_model.model_validate(event)
    except ValidationError as e:
        logger.warning(
            "Rejected %s request",
            operation.name,
            extra={"operation": operation.name, "errors": e.error_count()},
        )
        raise InvalidRequest(_describe(e)) from None

    logger.info("Handling %s", operation.name, extra={"operation": operation.name})

    try:
        response = await operation.execute(store, request)
    except InventoryError as e:
        api_error = to_api_error(e)
        if isinstance(api_error, InternalError):
            logger.error(
                "%s failed: %s",
                operation.name,
                e,
                exc_info=e,
                extra={"operation": operation.name, "error": e.to_dict()},
            )
        else:
            logger.warning(
                "%s: %s",
                operation.name,
                e.message,
                extra={"operation": operation.name, "error_code": e.code.code},
            )
        raise api_error from None

    return response.to_payload()


def _describe(error: ValidationError) -> str:
    details = "; ".join(
        f"{'.'.join(str(part) for part in detail['loc']) or 'request'}: {detail['msg']}"
        for detail in error.errors()
    )
    return f"Invalid request: {details}"


async def create_inventory(
    store: InventoryStoreProtocol, request: CreateInventoryRequest
) -> CreateInventoryResponse:
    record = InventoryRecord(
        customer_id=request.customer_id,
        vessel_id=request.vessel_id,
        inventory_type=request.inventory_type,
        inventory_id=request.inventory_id,
        serial_number=request.serial_number,
        aws_instance_id=request.aws_instance_id,
        created_at=datetime.now(UTC),
    )
    await store.create(record)
    return CreateInventoryResponse(
        inventory_type=record.inventory_type, inventory_id=record.inventory_id
    )


async def fetch_inventory(
    store: InventoryStoreProtocol, request: FetchInventoryRequest
) -> InventoryResponse:
    record = await store.get(
        request.customer_id,
        request.vessel_id,
        request.inventory_type,
        request.inventory_id,
    )
    if record is None:
        raise InventoryNotFoundError(request.inventory_type, request.inventory_id)
    return InventoryResponse.from_record(record)


async def list_inventory(
    store: InventoryStoreProtocol, request: ListInventoryRequest
) -> ListInventoryResponse:
    page = await store.list(request.customer_id, request.vessel_id, request.page_token)
    return ListInventoryResponse.from_page(page)


async def delete_inventory(
    store: InventoryStoreProtocol, request: DeleteInventoryRequest
) -> DeleteInventoryResponse:
    await store.delete(
        request.customer_id,
        request.vessel_id,
        request.inventory_type,
        request.inventory_id,
    )
    return DeleteInventoryResponse()


CREATE_INVENTORY: Final = Operation(
    "create_inventory", CreateInventoryRequest, create_inventory
)
FETCH_INVENTORY: Final = Operation("fetch_inventory", FetchInventoryRequest, fetch_inventory)
LIST_INVENTORY: Final = Operation("list_inventory", ListInventoryRequest, list_inventory)
DELETE_INVENTORY: Final = Operation(
    "delete_inventory", DeleteInventoryRequest, delete_inventory
)

OPERATIONS: Final = {
    operation.name: operation
    for operation in (CREATE_INVENTORY, FETCH_INVENTORY, LIST_INVENTORY, DELETE_INVENTORY)
}
