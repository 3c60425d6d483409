# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ivms inventory
"""
inventory.memory
In-memory inventory store implementation
"""

from __future__ import annotations

from uuid import UUID

from ivms_inventory.inventory.keys import hash_key, sort_key
from ivms_inventory.inventory.model import InventoryRecord, ResultPage


class InMemoryInventoryStore:
    """In-memory implementation of the inventory store.

    Follows the same ordering and paging rules as the DynamoDB store, with
    ``page_size`` standing in for the table's query limit.
    """

    def __init__(self, page_size: int | None = None) -> None:
        if page_size is not None and page_size < 1:
            raise ValueError("page_size must be a positive integer")
        self._page_size = page_size
        self._records: dict[tuple[str, str], InventoryRecord] = {}

    async def create(self, record: InventoryRecord) -> None:
        key = (
            hash_key(record.customer_id, record.vessel_id),
            sort_key(record.inventory_type, record.inventory_id),
        )
        self._records[key] = record

    async def get(
        self,
        customer_id: UUID,
        vessel_id: UUID,
        inventory_type: str,
        inventory_id: str,
    ) -> InventoryRecord | None:
        return self._records.get(
            (hash_key(customer_id, vessel_id), sort_key(inventory_type, inventory_id))
        )

    async def delete(
        self,
        customer_id: UUID,
        vessel_id: UUID,
        inventory_type: str,
        inventory_id: str,
    ) -> None:
        self._records.pop(
            (hash_key(customer_id, vessel_id), sort_key(inventory_type, inventory_id)),
            None,
        )

    async def list(
        self,
        customer_id: UUID,
        vessel_id: UUID,
        page_token: str | None = None,
    ) -> ResultPage[InventoryRecord]:
        partition = hash_key(customer_id, vessel_id)

        keys = sorted(key for key in self._records if key[0] == partition)
        if page_token is not None:
            keys = [key for key in keys if key[1] > page_token]

        if self._page_size is None or len(keys) <= self._page_size:
            return ResultPage(items=[self._records[key] for key in keys])

        page = keys[: self._page_size]
        return ResultPage(
            items=[self._records[key] for key in page],
            last_evaluated_key=page[-1][1],
        )
