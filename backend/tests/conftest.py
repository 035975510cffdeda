"""Shared fakes and fixtures for report tests."""

from collections.abc import Callable
from copy import deepcopy
from typing import Any

import pytest

from fieldreports.application.interfaces import ReportRepository
from fieldreports.domain.entities import FaultCodeEvent, Report, ReportFields, ReportQuery
from fieldreports.domain.exceptions import EntityNotFoundError


class InMemoryReportRepository(ReportRepository):
    """In-memory fake repository; evaluates ReportQuery with its own ``apply``."""

    def __init__(self):
        self._reports: dict[int, Report] = {}
        self._next_id = 1
        self.commits = 0
        self.commit_error: Exception | None = None

    async def get_by_id(self, report_id: int) -> Report | None:
        report = self._reports.get(report_id)
        return deepcopy(report) if report else None

    async def find_many(self, query: ReportQuery) -> tuple[list[Report], int]:
        page, total = query.apply(list(self._reports.values()))
        return [deepcopy(r) for r in page], total

    async def create(self, fields: ReportFields) -> Report:
        report = Report.from_fields(fields)
        report.id = self._next_id
        self._next_id += 1
        self._reports[report.id] = report
        return deepcopy(report)

    async def update(self, report_id: int, fields: ReportFields) -> Report:
        report = self._reports.get(report_id)
        if report is None:
            raise EntityNotFoundError("Report", report_id)
        report.replace_fields(fields)
        return deepcopy(report)

    async def delete(self, report_id: int) -> bool:
        return self._reports.pop(report_id, None) is not None

    async def commit(self) -> None:
        if self.commit_error is not None:
            raise self.commit_error
        self.commits += 1


class RecordingDispatcher:
    """Stands in for NotificationDispatcher; remembers published events."""

    def __init__(self):
        self.events: list[FaultCodeEvent] = []

    def publish(self, event: FaultCodeEvent) -> bool:
        self.events.append(event)
        return True


_VALID_PAYLOAD: dict[str, Any] = {
    "workDate": "2024-04-01",
    "workerName": "山田太郎",
    "customerName": "株式会社ABC",
    "siteAddress": "東京都千代田区丸の内1-1-1",
    "serialNumber": "TM-001234",
    "workType": "adjustment",
    "hasFaultCode": False,
    "startTime": "09:00",
    "endTime": "17:00",
    "breakMinutes": 60,
}


@pytest.fixture
def make_payload() -> Callable[..., dict[str, Any]]:
    """Factory for a valid camelCase submission, with per-test overrides."""

    def _make(**overrides: Any) -> dict[str, Any]:
        payload = dict(_VALID_PAYLOAD)
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def report_repository() -> InMemoryReportRepository:
    return InMemoryReportRepository()


@pytest.fixture
def dispatcher() -> RecordingDispatcher:
    return RecordingDispatcher()
