"""Pydantic DTOs (Data Transfer Objects) for the Report feature.

All JSON keys are camelCase on the wire.
"""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from fieldreports.domain.duration import format_duration
from fieldreports.domain.entities import WorkType
from fieldreports.domain.validation import ErrorCode, ReportInput

_CAMEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    from_attributes=True,
)


class ReportSubmission(BaseModel):
    """Request body for creating or replacing a report.

    Every field is accepted as-is; the domain validator decides what is
    acceptable so that all problems are reported together.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    work_date: Any = Field(None, examples=["2024-04-01"])
    worker_name: Any = Field(None, examples=["山田太郎"])
    customer_name: Any = Field(None, examples=["株式会社ABC"])
    site_address: Any = Field(None, examples=["東京都千代田区1-1-1"])
    serial_number: Any = Field(None, examples=["TM-012345"])
    work_type: Any = Field(None, examples=["adjustment"])
    work_type_other: Any = None
    has_fault_code: Any = Field(None, examples=[False])
    fault_code_content: Any = None
    part_number: Any = Field(None, examples=["NF-A1B2C3D4"])
    part_quantity: Any = Field(None, examples=[1])
    start_time: Any = Field(None, examples=["09:00"])
    end_time: Any = Field(None, examples=["17:00"])
    break_minutes: Any = Field(None, examples=[60])

    def to_input(self) -> ReportInput:
        return ReportInput(**self.model_dump())


class ReportResponse(BaseModel):
    """Schema returned to the client."""

    model_config = _CAMEL_CONFIG

    id: int
    work_date: date
    worker_name: str
    customer_name: str
    site_address: str
    serial_number: str
    work_type: WorkType
    work_type_other: str | None
    has_fault_code: bool
    fault_code_content: str | None
    part_number: str | None
    part_quantity: int | None
    start_time: str
    end_time: str
    break_minutes: int
    created_at: datetime
    updated_at: datetime


class ReportDetailResponse(ReportResponse):
    """Single report with its computed net working time."""

    work_duration_minutes: int

    @computed_field(alias="workDuration")
    @property
    def work_duration(self) -> str:
        return format_duration(self.work_duration_minutes)


class PaginationSchema(BaseModel):
    model_config = _CAMEL_CONFIG

    page: int
    per_page: int
    total: int
    total_pages: int


class ReportListResponse(BaseModel):
    """A page of reports plus pagination metadata."""

    model_config = _CAMEL_CONFIG

    reports: list[ReportResponse]
    pagination: PaginationSchema


class FieldErrorSchema(BaseModel):
    field: str
    code: ErrorCode
    message: str

    model_config = {"from_attributes": True}


class ValidationErrorResponse(BaseModel):
    """Returned with HTTP 400 when a submission is rejected."""

    errors: list[FieldErrorSchema]


class ErrorResponse(BaseModel):
    detail: str
