"""Inventory entity and query result page."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Generic, TypeVar
from uuid import UUID

from pydantic import AwareDatetime, BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class InventoryRecord(BaseModel):
    """Inventory entity.

    Attributes use lower camel case names both in the table and on the wire.
    ``created_at`` keeps the UTC offset it was written with.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    customer_id: UUID
    vessel_id: UUID
    inventory_type: str
    inventory_id: str
    serial_number: str | None = None
    # AWS Systems Manager identifier
    aws_instance_id: str | None = None
    created_at: AwareDatetime

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime) -> str:
        # isoformat() keeps a numeric offset ("+00:00") where pydantic would emit "Z"
        return value.isoformat()

    def to_item(self) -> dict[str, Any]:
        """Persisted attributes of the record, without the key attributes.

        Unset optional fields are left out instead of being stored as nulls.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_item(cls, item: Mapping[str, Any]) -> InventoryRecord:
        """Build a record from a persisted item; key attributes are ignored."""
        return cls.model_validate(item)


@dataclass(frozen=True)
class ResultPage(Generic[T]):
    """One page of query results.

    ``last_evaluated_key`` is set only when the store reports more data.
    """

    items: list[T] = field(default_factory=list)
    last_evaluated_key: str | None = None
