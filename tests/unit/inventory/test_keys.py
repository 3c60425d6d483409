"""Tests for the composite key encoding of the inventory table."""

import pytest

from ivms_inventory.inventory.keys import (
    HASH_KEY_ATTRIBUTE,
    SORT_KEY_ATTRIBUTE,
    hash_key,
    key_of,
    primary_key,
    sort_key,
    validate_key_component,
)
from tests.unit.inventory.fakes import ID_0, ID_1


def test_hash_key_joins_customer_and_vessel() -> None:
    assert hash_key(ID_0, ID_1) == (
        "00000000-0000-0000-0000-000000000000:00000000-0000-0000-0000-000000000001"
    )


def test_sort_key_joins_type_and_id() -> None:
    assert sort_key("pc", "012") == "pc:012"


def test_sort_keys_order_by_type_then_id() -> None:
    keys = [sort_key("radar", "012"), sort_key("pc", "345"), sort_key("pc", "012")]

    assert sorted(keys) == ["pc:012", "pc:345", "radar:012"]


def test_primary_key_maps_table_attributes() -> None:
    assert primary_key(ID_0, ID_1, "pc", "012") == {
        HASH_KEY_ATTRIBUTE: hash_key(ID_0, ID_1),
        SORT_KEY_ATTRIBUTE: "pc:012",
    }


def test_key_of_uses_encoded_halves_verbatim() -> None:
    assert key_of("a:b", "c:d") == {
        "customerAndVesselId": "a:b",
        "inventoryKey": "c:d",
    }


@pytest.mark.parametrize("value", ["pc", "radar", "012", "r@nd0m", "a-b_c"])
def test_validate_key_component_accepts_plain_values(value: str) -> None:
    assert validate_key_component(value) == value


def test_validate_key_component_rejects_delimiter() -> None:
    with pytest.raises(ValueError, match="must not contain ':'"):
        validate_key_component("pc:012")


def test_validate_key_component_rejects_empty_value() -> None:
    with pytest.raises(ValueError, match="must not be empty"):
        validate_key_component("")
