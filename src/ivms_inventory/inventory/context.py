"""Process-wide inventory context.

The DynamoDB client and the table name are built exactly once per process by
``InventoryContext.load_from_env`` and then shared, read-only, by every
invocation. Any configuration problem is raised as ``ConfigurationError``
from there, before a single request is handled.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import boto3
from botocore.config import Config as BotoConfig
from botocore.exceptions import BotoCoreError
from pydantic import ValidationError

from ivms_inventory.config import (
    CONFIG_CLIENT_ERROR,
    CONFIG_VALIDATION_ERROR,
    ConfigurationError,
    InventorySettings,
    load_settings,
)
from ivms_inventory.inventory.dynamodb import DynamoDBInventoryStore
from ivms_inventory.inventory.protocols import InventoryStoreProtocol
from ivms_inventory.logging import LoggingSettings, configure_logging, get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class InventoryContext:
    """Immutable handle on the settings and the store of one process."""

    settings: InventorySettings
    store: InventoryStoreProtocol

    @classmethod
    def load_from_env(cls, **overrides: Any) -> InventoryContext:
        """Build the context from environment variables.

        Required environment variables:

        - ``INVENTORY_TABLE``: name of the DynamoDB inventory table.

        Args:
            **overrides: Explicit settings taking precedence over the environment

        Raises:
            ConfigurationError: If settings are missing or invalid, or the
                DynamoDB client can not be created
        """
        try:
            logging_settings = LoggingSettings.load()
        except ValidationError as e:
            raise ConfigurationError(
                "Invalid logging settings", code=CONFIG_VALIDATION_ERROR
            ) from e
        configure_logging(logging_settings)

        settings = load_settings(**overrides)
        store = DynamoDBInventoryStore(
            create_dynamodb_client(settings),
            settings.table_name,
            query_limit=settings.query_limit,
        )

        logger.info(
            "Inventory context ready",
            extra={"table": settings.table_name, "region": store.region},
        )
        return cls(settings=settings, store=store)


def create_dynamodb_client(settings: InventorySettings) -> Any:
    """Create the low-level DynamoDB client described by the settings.

    Raises:
        ConfigurationError: If the client can not be constructed
    """
    client_config = BotoConfig(
        connect_timeout=settings.connect_timeout,
        read_timeout=settings.read_timeout,
        retries={"max_attempts": settings.max_attempts, "mode": "standard"},
    )

    try:
        session = boto3.Session(region_name=settings.region)
        return session.client(
            "dynamodb",
            endpoint_url=settings.endpoint_url,
            config=client_config,
        )
    except (BotoCoreError, ValueError) as e:
        raise ConfigurationError(
            f"Failed to create DynamoDB client: {e}",
            code=CONFIG_CLIENT_ERROR,
            region=settings.region,
            endpoint_url=settings.endpoint_url,
        ) from e
