"""Pytest configuration and fixtures for inventory store tests."""

import pytest

from ivms_inventory.inventory.dynamodb import DynamoDBInventoryStore
from tests.unit.inventory.fakes import (
    ID_0,
    ID_1,
    ID_2,
    INVENTORY_ID_0,
    INVENTORY_ID_1,
    INVENTORY_TYPE_0,
    INVENTORY_TYPE_1,
    TABLE_NAME,
    FakeDynamoDBClient,
)


@pytest.fixture
def dynamodb_client() -> FakeDynamoDBClient:
    """Client pre-loaded with three records over two vessels."""
    client = FakeDynamoDBClient()
    client.put_raw(
        ID_0,
        ID_1,
        INVENTORY_TYPE_0,
        INVENTORY_ID_0,
        "q1w2e3",
        None,
        "2011-01-30T14:58:00+01:00",
    )
    client.put_raw(
        ID_0,
        ID_1,
        INVENTORY_TYPE_0,
        INVENTORY_ID_1,
        None,
        "im-12345",
        "2015-07-02T03:20:00+02:00",
    )
    client.put_raw(
        ID_0,
        ID_2,
        INVENTORY_TYPE_1,
        INVENTORY_ID_0,
        "r@nd0m",
        None,
        "2017-11-11T16:00:00+02:00",
    )
    return client


@pytest.fixture
def dynamodb_store(dynamodb_client: FakeDynamoDBClient) -> DynamoDBInventoryStore:
    return DynamoDBInventoryStore(dynamodb_client, TABLE_NAME)
