"""
Inventory data-access layer: entity, composite keys, stores and errors.
"""

from ivms_inventory.inventory.context import InventoryContext, create_dynamodb_client
from ivms_inventory.inventory.dynamodb import DynamoDBInventoryStore
from ivms_inventory.inventory.errors import (
    DOMAIN,
    INVENTORY_NOT_FOUND,
    STORE,
    STORE_DECODE_ERROR,
    STORE_ERROR,
    InventoryNotFoundError,
    StoreError,
)
from ivms_inventory.inventory.keys import (
    HASH_KEY_ATTRIBUTE,
    KEY_DELIMITER,
    SORT_KEY_ATTRIBUTE,
    hash_key,
    primary_key,
    sort_key,
    validate_key_component,
)
from ivms_inventory.inventory.memory import InMemoryInventoryStore
from ivms_inventory.inventory.model import InventoryRecord, ResultPage
from ivms_inventory.inventory.protocols import InventoryStoreProtocol

__all__ = [
    "DOMAIN",
    "HASH_KEY_ATTRIBUTE",
    "INVENTORY_NOT_FOUND",
    "KEY_DELIMITER",
    "SORT_KEY_ATTRIBUTE",
    "STORE",
    "STORE_DECODE_ERROR",
    "STORE_ERROR",
    "DynamoDBInventoryStore",
    "InMemoryInventoryStore",
    "InventoryContext",
    "InventoryNotFoundError",
    "InventoryRecord",
    "InventoryStoreProtocol",
    "ResultPage",
    "StoreError",
    "create_dynamodb_client",
    "hash_key",
    "primary_key",
    "sort_key",
    "validate_key_component",
]
