"""
Composite primary key of the inventory table.

Each record lives under a partition identified by the customer and vessel
(hash key) and is ordered inside it by its type and id (sort key). Both halves
are plain ``a:b`` concatenations, so components must never contain the
delimiter themselves; requests are checked with ``validate_key_component``
before a key is ever built.
"""

from __future__ import annotations

from typing import Final
from uuid import UUID

KEY_DELIMITER: Final = ":"
HASH_KEY_ATTRIBUTE: Final = "customerAndVesselId"
SORT_KEY_ATTRIBUTE: Final = "inventoryKey"


def hash_key(customer_id: UUID, vessel_id: UUID) -> str:
    """Build the partition key of a customer's vessel."""
    return f"{customer_id}{KEY_DELIMITER}{vessel_id}"


def sort_key(inventory_type: str, inventory_id: str) -> str:
    """Build the in-partition key of an inventory item.

    The same value is handed out as the list page token.
    """
    return f"{inventory_type}{KEY_DELIMITER}{inventory_id}"


def key_of(hash_value: str, sort_value: str) -> dict[str, str]:
    """Map already encoded key halves onto the table key attributes."""
    return {HASH_KEY_ATTRIBUTE: hash_value, SORT_KEY_ATTRIBUTE: sort_value}


def primary_key(
    customer_id: UUID, vessel_id: UUID, inventory_type: str, inventory_id: str
) -> dict[str, str]:
    """Full primary key of a single inventory item."""
    return key_of(
        hash_key(customer_id, vessel_id), sort_key(inventory_type, inventory_id)
    )


def validate_key_component(value: str) -> str:
    """Ensure a value can be embedded into a composite key.

    Raises:
        ValueError: If the value is empty or contains the key delimiter
    """
    if not value:
        raise ValueError("must not be empty")
    if KEY_DELIMITER in value:
        raise ValueError(f"must not contain '{KEY_DELIMITER}'")
    return value
