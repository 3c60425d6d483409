# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ivms inventory
"""
inventory.dynamodb
DynamoDB implementation of the inventory store
"""

from __future__ import annotations

import asyncio
import functools
import logging
from collections.abc import Mapping
from typing import Any
from uuid import UUID

from boto3.dynamodb.types import TypeDeserializer, TypeSerializer
from botocore.exceptions import BotoCoreError, ClientError

from ivms_inventory.inventory.errors import STORE_DECODE_ERROR, StoreError
from ivms_inventory.inventory.keys import (
    HASH_KEY_ATTRIBUTE,
    SORT_KEY_ATTRIBUTE,
    hash_key,
    key_of,
    primary_key,
)
from ivms_inventory.inventory.model import InventoryRecord, ResultPage
from ivms_inventory.logging import get_logger


class DynamoDBInventoryStore:
    """Inventory store backed by a DynamoDB table.

    The table has a string hash key ``customerAndVesselId`` and a string sort
    key ``inventoryKey``; every other attribute is a plain string.

    The boto3 client is blocking, so each call runs in the default executor.
    Every operation is exactly one round trip and nothing is retried here,
    beyond what the client itself is configured to do.
    """

    def __init__(
        self,
        client: Any,
        table_name: str,
        *,
        query_limit: int | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            client: boto3 low-level DynamoDB client
            table_name: Name of the inventory table
            query_limit: Optional ``Limit`` for list queries; the store default
                page size applies when not set
            logger: Optional logger instance
        """
        self._client = client
        self._table_name = table_name
        self._query_limit = query_limit
        self._logger = logger or get_logger(__name__)
        self._serializer = TypeSerializer()
        self._deserializer = TypeDeserializer()

    @property
    def table_name(self) -> str:
        return self._table_name

    @property
    def region(self) -> str | None:
        return getattr(self._client.meta, "region_name", None)

    async def create(self, record: InventoryRecord) -> None:
        item = {
            **record.to_item(),
            **primary_key(
                record.customer_id,
                record.vessel_id,
                record.inventory_type,
                record.inventory_id,
            ),
        }

        await self._call("put_item", TableName=self._table_name, Item=self._encode(item))

    async def get(
        self,
        customer_id: UUID,
        vessel_id: UUID,
        inventory_type: str,
        inventory_id: str,
    ) -> InventoryRecord | None:
        response = await self._call(
            "get_item",
            TableName=self._table_name,
            Key=self._encode(
                primary_key(customer_id, vessel_id, inventory_type, inventory_id)
            ),
        )

        item = response.get("Item")
        if not item:
            return None
        return self._decode(item)

    async def delete(
        self,
        customer_id: UUID,
        vessel_id: UUID,
        inventory_type: str,
        inventory_id: str,
    ) -> None:
        await self._call(
            "delete_item",
            TableName=self._table_name,
            Key=self._encode(
                primary_key(customer_id, vessel_id, inventory_type, inventory_id)
            ),
        )

    async def list(
        self,
        customer_id: UUID,
        vessel_id: UUID,
        page_token: str | None = None,
    ) -> ResultPage[InventoryRecord]:
        partition = hash_key(customer_id, vessel_id)

        params: dict[str, Any] = {
            "TableName": self._table_name,
            "KeyConditionExpression": f"{HASH_KEY_ATTRIBUTE} = :{HASH_KEY_ATTRIBUTE}",
            "ExpressionAttributeValues": {
                f":{HASH_KEY_ATTRIBUTE}": self._serializer.serialize(partition)
            },
        }
        if self._query_limit is not None:
            params["Limit"] = self._query_limit
        if page_token is not None:
            # Only the sort key travels in the token, the partition is ours
            params["ExclusiveStartKey"] = self._encode(key_of(partition, page_token))

        response = await self._call("query", **params)

        last_evaluated_key = response.get("LastEvaluatedKey")
        return ResultPage(
            items=[self._decode(item) for item in response.get("Items", [])],
            last_evaluated_key=(
                self._deserializer.deserialize(last_evaluated_key[SORT_KEY_ATTRIBUTE])
                if last_evaluated_key
                else None
            ),
        )

    async def _call(self, operation: str, **params: Any) -> dict[str, Any]:
        """Run one client operation in the executor.

        Raises:
            StoreError: If the client reports any failure
        """
        self._logger.debug(
            "DynamoDB %s",
            operation,
            extra={"table": self._table_name, "region": self.region},
        )

        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(
                None, functools.partial(getattr(self._client, operation), **params)
            )
        except ClientError as e:
            raise StoreError(
                f"DynamoDB {operation} failed on table {self._table_name}",
                operation=operation,
                table=self._table_name,
                aws_error_code=e.response.get("Error", {}).get("Code"),
            ) from e
        except BotoCoreError as e:
            raise StoreError(
                f"DynamoDB {operation} failed on table {self._table_name}",
                operation=operation,
                table=self._table_name,
                error=type(e).__name__,
            ) from e

    def _encode(self, values: Mapping[str, Any]) -> dict[str, Any]:
        return {key: self._serializer.serialize(value) for key, value in values.items()}

    def _decode(self, item: Mapping[str, Any]) -> InventoryRecord:
        try:
            return InventoryRecord.from_item(
                {key: self._deserializer.deserialize(value) for key, value in item.items()}
            )
        except (TypeError, ValueError) as e:
            raise StoreError(
                f"Malformed inventory item in table {self._table_name}",
                code=STORE_DECODE_ERROR,
                table=self._table_name,
                item_key=item.get(SORT_KEY_ATTRIBUTE),
            ) from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}(table_name={self._table_name!r})"
