"""Request and response payloads of the inventory functions.

Field names travel in lower camel case. Optional fields that are not set are
left out of encoded responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import (
    AfterValidator,
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
)
from pydantic.alias_generators import to_camel

from ivms_inventory.inventory.keys import validate_key_component
from ivms_inventory.inventory.model import InventoryRecord, ResultPage

KeyComponent = Annotated[str, AfterValidator(validate_key_component)]


class Payload(BaseModel):
    """Base class of every invocation payload."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_payload(self) -> dict[str, object]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class InventoryIdentityRequest(Payload):
    customer_id: UUID
    vessel_id: UUID
    inventory_type: KeyComponent
    inventory_id: KeyComponent


class CreateInventoryRequest(InventoryIdentityRequest):
    serial_number: str | None = None
    aws_instance_id: str | None = None


class FetchInventoryRequest(InventoryIdentityRequest):
    pass


class DeleteInventoryRequest(InventoryIdentityRequest):
    pass


class ListInventoryRequest(Payload):
    customer_id: UUID
    vessel_id: UUID
    page_token: str | None = Field(default=None, min_length=1)


class CreateInventoryResponse(Payload):
    inventory_type: str
    inventory_id: str


class InventoryResponse(Payload):
    inventory_type: str
    inventory_id: str
    serial_number: str | None = None
    aws_instance_id: str | None = None
    created_at: AwareDatetime

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime) -> str:
        return value.isoformat()

    @classmethod
    def from_record(cls, record: InventoryRecord) -> InventoryResponse:
        return cls(
            inventory_type=record.inventory_type,
            inventory_id=record.inventory_id,
            serial_number=record.serial_number,
            aws_instance_id=record.aws_instance_id,
            created_at=record.created_at,
        )


class ListInventoryResponse(Payload):
    inventory: list[InventoryResponse]
    page_token: str | None = None

    @classmethod
    def from_page(cls, page: ResultPage[InventoryRecord]) -> ListInventoryResponse:
        return cls(
            inventory=[InventoryResponse.from_record(record) for record in page.items],
            page_token=page.last_evaluated_key,
        )


class DeleteInventoryResponse(Payload):
    pass
