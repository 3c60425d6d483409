"""Fixtures for the invocation adapter tests."""

from datetime import UTC, datetime
from uuid import UUID

import pytest_asyncio

from ivms_inventory.inventory.memory import InMemoryInventoryStore
from ivms_inventory.inventory.model import InventoryRecord

CUSTOMER_ID = "00000000-0000-0000-0000-000000000000"
VESSEL_ID = "00000000-0000-0000-0000-000000000001"


def identity(inventory_type: str = "pc", inventory_id: str = "012") -> dict[str, str]:
    return {
        "customerId": CUSTOMER_ID,
        "vesselId": VESSEL_ID,
        "inventoryType": inventory_type,
        "inventoryId": inventory_id,
    }


@pytest_asyncio.fixture
async def store() -> InMemoryInventoryStore:
    """Store holding three records of one vessel, paged two at a time."""
    store = InMemoryInventoryStore(page_size=2)
    for inventory_type, inventory_id, serial_number in [
        ("pc", "012", "q1w2e3"),
        ("pc", "345", None),
        ("radar", "012", "r@nd0m"),
    ]:
        await store.create(
            InventoryRecord(
                customer_id=UUID(CUSTOMER_ID),
                vessel_id=UUID(VESSEL_ID),
                inventory_type=inventory_type,
                inventory_id=inventory_id,
                serial_number=serial_number,
                created_at=datetime(2011, 1, 30, 13, 58, tzinfo=UTC),
            )
        )
    return store
