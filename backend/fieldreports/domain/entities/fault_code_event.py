"""Domain event emitted when a fault code newly appears on a report."""

from dataclasses import dataclass
from datetime import date

from fieldreports.domain.entities.report import Report


@dataclass(frozen=True)
class FaultCodeEvent:
    """Payload handed to fault-code notifiers.

    ``is_new`` distinguishes a freshly created report from an edit that
    switched the fault code on.
    """

    report_id: int
    work_date: date
    worker_name: str
    customer_name: str
    serial_number: str
    fault_code_content: str | None
    is_new: bool

    @classmethod
    def from_report(cls, report: Report, *, is_new: bool) -> "FaultCodeEvent":
        if report.id is None:
            raise ValueError("cannot build a fault code event for an unsaved report")
        return cls(
            report_id=report.id,
            work_date=report.work_date,
            worker_name=report.worker_name,
            customer_name=report.customer_name,
            serial_number=report.serial_number,
            fault_code_content=report.fault_code_content,
            is_new=is_new,
        )
