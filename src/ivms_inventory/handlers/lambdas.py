"""Building blocks of the AWS Lambda entrypoints.

``bootstrap`` builds the process context and ``build_lambda_handler`` wraps an
operation into a ``handler(event, context)`` callable bound to that context.
The deployed entrypoints live in ``ivms_inventory.handlers.entrypoints``.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Mapping
from typing import Any

from ivms_inventory.config.errors import ConfigurationError
from ivms_inventory.handlers.adapter import Operation, invoke
from ivms_inventory.inventory.context import InventoryContext
from ivms_inventory.logging import get_logger

logger = get_logger(__name__)

LambdaHandler = Callable[[Mapping[str, Any], Any], dict[str, Any]]


def bootstrap() -> InventoryContext:
    """Build the process context from the environment.

    Raises:
        ConfigurationError: If the functions can not be configured; the
            error is logged before it propagates
    """
    try:
        return InventoryContext.load_from_env()
    except ConfigurationError as e:
        logger.critical(
            "Inventory functions cannot start: %s", e.message, extra={"error": e.to_dict()}
        )
        raise


def build_lambda_handler(
    operation: Operation[Any, Any], context: InventoryContext
) -> LambdaHandler:
    """Wrap an operation into a Lambda handler function.

    Args:
        operation: Operation served by the handler
        context: Process context whose store the handler uses

    Returns:
        A ``handler(event, context)`` callable
    """

    def handler(event: Mapping[str, Any], lambda_context: Any = None) -> dict[str, Any]:
        return asyncio.run(invoke(operation, context.store, event))

    handler.__name__ = operation.name
    handler.__qualname__ = operation.name
    return handler
