"""Domain entity — a field-service work report covering one site visit."""

from dataclasses import dataclass, field, fields
from datetime import date, datetime, timezone
from enum import Enum

from fieldreports.domain.duration import compute_minutes


class WorkType(str, Enum):
    """Kind of work performed on site."""

    ADJUSTMENT = "adjustment"
    REPLACEMENT = "replacement"
    INSPECTION = "inspection"
    OTHER = "other"

    @property
    def label(self) -> str:
        return _WORK_TYPE_LABELS[self]


_WORK_TYPE_LABELS = {
    WorkType.ADJUSTMENT: "調整",
    WorkType.REPLACEMENT: "部品交換",
    WorkType.INSPECTION: "点検",
    WorkType.OTHER: "その他",
}


@dataclass(frozen=True)
class FaultCode:
    """Presence of a fault code on the equipment; content may be blank."""

    content: str | None = None


@dataclass(frozen=True)
class PartReplacement:
    """A replaced part — the quantity only exists together with a part number."""

    part_number: str
    quantity: int

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError("part quantity must be at least 1")


@dataclass
class ReportFields:
    """The editable field set of a report, already validated and normalized.

    ``work_type_other`` is populated only for ``WorkType.OTHER``; fault code and
    part replacement are modelled as present/absent facts.
    """

    work_date: date
    worker_name: str
    customer_name: str
    site_address: str
    serial_number: str
    work_type: WorkType
    start_time: str
    end_time: str
    break_minutes: int
    work_type_other: str | None = None
    fault_code: FaultCode | None = None
    part_replacement: PartReplacement | None = None

    def __post_init__(self) -> None:
        if self.work_type is WorkType.OTHER and not self.work_type_other:
            raise ValueError("work_type_other is required for work type 'other'")
        if self.work_type is not WorkType.OTHER and self.work_type_other:
            raise ValueError("work_type_other is only allowed for work type 'other'")
        if self.start_time > self.end_time:
            raise ValueError("start_time must not be later than end_time")

    @property
    def has_fault_code(self) -> bool:
        return self.fault_code is not None

    @property
    def fault_code_content(self) -> str | None:
        return self.fault_code.content if self.fault_code else None

    @property
    def part_number(self) -> str | None:
        return self.part_replacement.part_number if self.part_replacement else None

    @property
    def part_quantity(self) -> int | None:
        return self.part_replacement.quantity if self.part_replacement else None

    @property
    def work_duration_minutes(self) -> int:
        return compute_minutes(self.start_time, self.end_time, self.break_minutes)


@dataclass
class Report(ReportFields):
    """Core domain entity for a persisted work report."""

    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_fields(cls, report_fields: ReportFields) -> "Report":
        return cls(**{f.name: getattr(report_fields, f.name) for f in fields(ReportFields)})

    def replace_fields(self, report_fields: ReportFields) -> None:
        """Replace every editable field and refresh the updated_at timestamp."""
        for f in fields(ReportFields):
            setattr(self, f.name, getattr(report_fields, f.name))
        self.updated_at = datetime.now(timezone.utc)
