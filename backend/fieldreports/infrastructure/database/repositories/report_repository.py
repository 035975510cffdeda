"""Concrete repository implementation for Report backed by SQLAlchemy."""

from datetime import datetime, timezone

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from fieldreports.application.interfaces import ReportRepository
from fieldreports.domain.entities import (
    FaultCode,
    FilterField,
    PartReplacement,
    Report,
    ReportFields,
    ReportQuery,
    SortField,
    WorkType,
)
from fieldreports.domain.exceptions import EntityNotFoundError
from fieldreports.infrastructure.database.models import ReportModel

# Whitelisted columns; only these are ever used in ORDER BY / LIKE clauses
_SORT_COLUMNS = {
    SortField.WORK_DATE: ReportModel.work_date,
    SortField.WORKER_NAME: ReportModel.worker_name,
    SortField.CUSTOMER_NAME: ReportModel.customer_name,
    SortField.SERIAL_NUMBER: ReportModel.serial_number,
    SortField.WORK_TYPE: ReportModel.work_type,
    SortField.CREATED_AT: ReportModel.created_at,
}

_FILTER_COLUMNS = {
    FilterField.CUSTOMER_NAME: ReportModel.customer_name,
    FilterField.SERIAL_NUMBER: ReportModel.serial_number,
    FilterField.PART_NUMBER: ReportModel.part_number,
}


class SQLAlchemyReportRepository(ReportRepository):
    """Implements the ReportRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ReportModel) -> Report:
        """Map ORM model → domain entity."""
        return Report(
            id=model.id,
            work_date=model.work_date,
            worker_name=model.worker_name,
            customer_name=model.customer_name,
            site_address=model.site_address,
            serial_number=model.serial_number,
            work_type=WorkType(model.work_type),
            work_type_other=model.work_type_other,
            fault_code=FaultCode(model.fault_code_content) if model.has_fault_code else None,
            part_replacement=(
                PartReplacement(model.part_number, model.part_quantity)
                if model.part_number
                else None
            ),
            start_time=model.start_time,
            end_time=model.end_time,
            break_minutes=model.break_minutes,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def _apply_fields(model: ReportModel, fields: ReportFields) -> None:
        """Copy the editable field set onto an ORM model."""
        model.work_date = fields.work_date
        model.worker_name = fields.worker_name
        model.customer_name = fields.customer_name
        model.site_address = fields.site_address
        model.serial_number = fields.serial_number
        model.work_type = fields.work_type.value
        model.work_type_other = fields.work_type_other
        model.has_fault_code = fields.has_fault_code
        model.fault_code_content = fields.fault_code_content
        model.part_number = fields.part_number
        model.part_quantity = fields.part_quantity
        model.start_time = fields.start_time
        model.end_time = fields.end_time
        model.break_minutes = fields.break_minutes

    async def get_by_id(self, report_id: int) -> Report | None:
        result = await self._session.get(ReportModel, report_id)
        return self._to_entity(result) if result else None

    async def find_many(self, query: ReportQuery) -> tuple[list[Report], int]:
        stmt = select(ReportModel)
        count_stmt = select(func.count()).select_from(ReportModel)

        for substring_filter in query.filters:
            column = _FILTER_COLUMNS[substring_filter.field]
            condition = column.contains(substring_filter.value, autoescape=True)
            stmt = stmt.where(condition)
            count_stmt = count_stmt.where(condition)

        total = (await self._session.execute(count_stmt)).scalar_one()
        if total == 0:
            return [], 0

        sort_column = _SORT_COLUMNS[query.sort_field]
        if query.descending:
            stmt = stmt.order_by(sort_column.desc(), ReportModel.id.desc())
        else:
            stmt = stmt.order_by(sort_column.asc(), ReportModel.id.asc())

        stmt = stmt.offset(query.offset).limit(query.limit)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()], total

    async def create(self, fields: ReportFields) -> Report:
        model = ReportModel()
        self._apply_fields(model, fields)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, report_id: int, fields: ReportFields) -> Report:
        model = await self._session.get(ReportModel, report_id)
        if model is None:
            raise EntityNotFoundError("Report", report_id)
        self._apply_fields(model, fields)
        model.updated_at = datetime.now(timezone.utc)
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, report_id: int) -> bool:
        model = await self._session.get(ReportModel, report_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

    async def commit(self) -> None:
        await self._session.commit()
