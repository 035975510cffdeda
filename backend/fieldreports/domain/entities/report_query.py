"""Domain value objects for report search — filters, ordering and paging."""

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from fieldreports.domain.entities.report import Report


class SortField(str, Enum):
    """Report columns a list may be ordered by."""

    WORK_DATE = "workDate"
    WORKER_NAME = "workerName"
    CUSTOMER_NAME = "customerName"
    SERIAL_NUMBER = "serialNumber"
    WORK_TYPE = "workType"
    CREATED_AT = "createdAt"

    @property
    def attribute(self) -> str:
        return _ATTRIBUTES[self.value]


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class FilterField(str, Enum):
    """Report columns that support substring search."""

    CUSTOMER_NAME = "customerName"
    SERIAL_NUMBER = "serialNumber"
    PART_NUMBER = "partNumber"

    @property
    def attribute(self) -> str:
        return _ATTRIBUTES[self.value]


_ATTRIBUTES = {
    "workDate": "work_date",
    "workerName": "worker_name",
    "customerName": "customer_name",
    "serialNumber": "serial_number",
    "partNumber": "part_number",
    "workType": "work_type",
    "createdAt": "created_at",
}


@dataclass(frozen=True)
class SubstringFilter:
    """Case-sensitive "contains" match on a single column."""

    field: FilterField
    value: str

    def matches(self, report: Report) -> bool:
        candidate = getattr(report, self.field.attribute)
        return candidate is not None and self.value in candidate


@dataclass(frozen=True)
class ReportQuery:
    """Filter + order + slice over the report collection.

    Filters are combined with AND. Handed to the repository port, which
    translates it into its own query language.
    """

    filters: tuple[SubstringFilter, ...] = field(default_factory=tuple)
    sort_field: SortField = SortField.WORK_DATE
    sort_order: SortOrder = SortOrder.DESC
    page: int = 1
    per_page: int = 20

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page

    @property
    def limit(self) -> int:
        return self.per_page

    @property
    def descending(self) -> bool:
        return self.sort_order is SortOrder.DESC

    def matches(self, report: Report) -> bool:
        return all(f.matches(report) for f in self.filters)

    def apply(self, reports: Sequence[Report]) -> tuple[list[Report], int]:
        """Evaluate the query in memory. Returns (page of reports, total matches)."""
        matched = [r for r in reports if self.matches(r)]
        attribute = self.sort_field.attribute
        ordered = sorted(
            matched,
            key=lambda r: (getattr(r, attribute), r.id or 0),
            reverse=self.descending,
        )
        return ordered[self.offset : self.offset + self.limit], len(matched)


@dataclass(frozen=True)
class Pagination:
    """Page metadata returned alongside a list of reports."""

    page: int
    per_page: int
    total: int
    total_pages: int

    @classmethod
    def from_total(cls, page: int, per_page: int, total: int) -> "Pagination":
        return cls(
            page=page,
            per_page=per_page,
            total=total,
            total_pages=math.ceil(total / per_page) if per_page > 0 else 0,
        )


@dataclass
class ReportPage:
    """One page of search results."""

    reports: list[Report]
    pagination: Pagination
