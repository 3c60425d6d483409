"""In-process stand-ins for AWS clients used by the inventory tests."""

from __future__ import annotations

import copy
from collections import defaultdict
from types import SimpleNamespace
from typing import Any
from uuid import UUID

from ivms_inventory.inventory.keys import (
    HASH_KEY_ATTRIBUTE,
    SORT_KEY_ATTRIBUTE,
    hash_key,
    sort_key,
)

TABLE_NAME = "Inventory"

# customers
ID_0 = UUID("00000000-0000-0000-0000-000000000000")
# vessels
ID_1 = UUID("00000000-0000-0000-0000-000000000001")
ID_2 = UUID("00000000-0000-0000-0000-000000000002")
ID_3 = UUID("00000000-0000-0000-0000-000000000003")
# inventory
INVENTORY_TYPE_0 = "pc"
INVENTORY_TYPE_1 = "radar"
INVENTORY_ID_0 = "012"
INVENTORY_ID_1 = "345"


class FakeDynamoDBClient:
    """Dict-backed stand-in for the boto3 low-level DynamoDB client.

    Supports the calls made by the store, including ``Limit`` and
    ``ExclusiveStartKey`` on queries. Like DynamoDB, a query returns a
    ``LastEvaluatedKey`` whenever it stopped because of the limit.
    """

    def __init__(self, region_name: str = "eu-central-1") -> None:
        self.meta = SimpleNamespace(region_name=region_name)
        self.tables: dict[str, dict[tuple[str, str], dict[str, Any]]] = defaultdict(dict)
        self.requests: list[tuple[str, dict[str, Any]]] = []

    @staticmethod
    def _key(attributes: dict[str, Any]) -> tuple[str, str]:
        return attributes[HASH_KEY_ATTRIBUTE]["S"], attributes[SORT_KEY_ATTRIBUTE]["S"]

    def put_item(self, **params: Any) -> dict[str, Any]:
        self.requests.append(("put_item", params))
        table = self.tables[params["TableName"]]
        table[self._key(params["Item"])] = copy.deepcopy(params["Item"])
        return {}

    def get_item(self, **params: Any) -> dict[str, Any]:
        self.requests.append(("get_item", params))
        item = self.tables[params["TableName"]].get(self._key(params["Key"]))
        return {} if item is None else {"Item": copy.deepcopy(item)}

    def delete_item(self, **params: Any) -> dict[str, Any]:
        self.requests.append(("delete_item", params))
        self.tables[params["TableName"]].pop(self._key(params["Key"]), None)
        return {}

    def query(self, **params: Any) -> dict[str, Any]:
        self.requests.append(("query", params))
        table = self.tables[params["TableName"]]
        (partition_value,) = params["ExpressionAttributeValues"].values()
        partition = partition_value["S"]

        keys = sorted(key for key in table if key[0] == partition)
        start = params.get("ExclusiveStartKey")
        if start is not None:
            start_partition, start_sort = self._key(start)
            assert start_partition == partition
            keys = [key for key in keys if key[1] > start_sort]

        limit = params.get("Limit")
        page = keys[:limit] if limit else keys

        response: dict[str, Any] = {
            "Items": [copy.deepcopy(table[key]) for key in page],
            "Count": len(page),
        }
        if limit and len(page) == limit:
            response["LastEvaluatedKey"] = {
                HASH_KEY_ATTRIBUTE: {"S": partition},
                SORT_KEY_ATTRIBUTE: {"S": page[-1][1]},
            }
        return response

    def put_raw(
        self,
        customer_id: UUID,
        vessel_id: UUID,
        inventory_type: str,
        inventory_id: str,
        serial_number: str | None,
        aws_instance_id: str | None,
        created_at: str,
        table_name: str = TABLE_NAME,
    ) -> None:
        """Store an item the way another writer of the table would."""
        item = {
            HASH_KEY_ATTRIBUTE: {"S": hash_key(customer_id, vessel_id)},
            SORT_KEY_ATTRIBUTE: {"S": sort_key(inventory_type, inventory_id)},
            "customerId": {"S": str(customer_id)},
            "vesselId": {"S": str(vessel_id)},
            "inventoryType": {"S": inventory_type},
            "inventoryId": {"S": inventory_id},
            "createdAt": {"S": created_at},
        }
        if serial_number is not None:
            item["serialNumber"] = {"S": serial_number}
        if aws_instance_id is not None:
            item["awsInstanceId"] = {"S": aws_instance_id}

        self.tables[table_name][self._key(item)] = item

    def raw_item(
        self,
        customer_id: UUID,
        vessel_id: UUID,
        inventory_type: str,
        inventory_id: str,
        table_name: str = TABLE_NAME,
    ) -> dict[str, Any] | None:
        return self.tables[table_name].get(
            (hash_key(customer_id, vessel_id), sort_key(inventory_type, inventory_id))
        )
