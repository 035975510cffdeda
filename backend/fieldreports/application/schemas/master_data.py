"""Pydantic DTOs for master data lists."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SerialNumberMasterResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    serial_number: str
    customer_name: str
    description: str | None


class PartNumberMasterResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    part_number: str
    part_name: str
    description: str | None
