"""Application service (use case) for Report operations."""

import logging

from fieldreports.application.interfaces import ReportRepository
from fieldreports.application.services.notification_dispatcher import NotificationDispatcher
from fieldreports.domain.entities import (
    FaultCodeEvent,
    Pagination,
    Report,
    ReportPage,
    ReportQuery,
)
from fieldreports.domain.exceptions import EntityNotFoundError
from fieldreports.domain.validation import ReportInput, normalize_report

logger = logging.getLogger(__name__)


class ReportService:
    """Orchestrates report CRUD logic. Depends on the repository port (DI).

    Every write re-validates the complete submission; there is no partial
    update. A fault code alert is published after a successful write when
    the report is created with a fault code, or edited from "no fault code"
    to "fault code". Alerts are queued only once the write is committed, so a
    rolled-back write never produces one.
    """

    def __init__(
        self,
        repository: ReportRepository,
        dispatcher: NotificationDispatcher | None = None,
    ):
        self._repository = repository
        self._dispatcher = dispatcher

    async def get_report(self, report_id: int) -> Report:
        report = await self._repository.get_by_id(report_id)
        if report is None:
            raise EntityNotFoundError("Report", report_id)
        return report

    async def list_reports(self, query: ReportQuery) -> ReportPage:
        reports, total = await self._repository.find_many(query)
        return ReportPage(
            reports=reports,
            pagination=Pagination.from_total(query.page, query.per_page, total),
        )

    async def create_report(self, submission: ReportInput) -> Report:
        fields = normalize_report(submission.with_canonical_identifiers())
        report = await self._repository.create(fields)
        await self._repository.commit()
        logger.info("Created report %s for serial %s", report.id, report.serial_number)

        if report.has_fault_code:
            self._publish(FaultCodeEvent.from_report(report, is_new=True))
        return report

    async def update_report(self, report_id: int, submission: ReportInput) -> Report:
        existing = await self.get_report(report_id)
        had_fault_code = existing.has_fault_code
        fields = normalize_report(submission.with_canonical_identifiers())
        report = await self._repository.update(report_id, fields)
        await self._repository.commit()
        logger.info("Updated report %s", report_id)

        if not had_fault_code and report.has_fault_code:
            self._publish(FaultCodeEvent.from_report(report, is_new=False))
        return report

    async def delete_report(self, report_id: int) -> bool:
        exists = await self._repository.get_by_id(report_id)
        if exists is None:
            raise EntityNotFoundError("Report", report_id)
        deleted = await self._repository.delete(report_id)
        await self._repository.commit()
        logger.info("Deleted report %s", report_id)
        return deleted

    def _publish(self, event: FaultCodeEvent) -> None:
        if self._dispatcher is None:
            logger.debug("No dispatcher wired; fault code alert for report %s not sent", event.report_id)
            return
        self._dispatcher.publish(event)
