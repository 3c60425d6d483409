"""
inventory.protocols
Inventory store protocol
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from ivms_inventory.inventory.model import InventoryRecord, ResultPage


class InventoryStoreProtocol(Protocol):
    """Protocol for inventory store implementations."""

    async def create(self, record: InventoryRecord) -> None:
        """Write a record, replacing any record with the same identity.

        Raises:
            StoreError: If the write fails
        """
        ...

    async def get(
        self,
        customer_id: UUID,
        vessel_id: UUID,
        inventory_type: str,
        inventory_id: str,
    ) -> InventoryRecord | None:
        """Read a single record.

        Returns:
            The record, or None if no record exists under the given identity

        Raises:
            StoreError: If the read fails
        """
        ...

    async def delete(
        self,
        customer_id: UUID,
        vessel_id: UUID,
        inventory_type: str,
        inventory_id: str,
    ) -> None:
        """Delete a single record; deleting an absent record is not an error.

        Raises:
            StoreError: If the delete fails
        """
        ...

    async def list(
        self,
        customer_id: UUID,
        vessel_id: UUID,
        page_token: str | None = None,
    ) -> ResultPage[InventoryRecord]:
        """List records of a vessel in ascending sort key order.

        Args:
            customer_id: Owner ID
            vessel_id: Vessel ID
            page_token: Sort key of the last item of the previous page

        Returns:
            A page of records, carrying the next page token if more data exists

        Raises:
            StoreError: If the query fails
        """
        ...
