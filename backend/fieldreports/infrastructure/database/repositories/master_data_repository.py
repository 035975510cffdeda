"""Concrete read-only repository for master data backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fieldreports.application.interfaces import MasterDataRepository
from fieldreports.domain.entities import PartNumberMaster, SerialNumberMaster
from fieldreports.infrastructure.database.models import (
    PartNumberMasterModel,
    SerialNumberMasterModel,
)


class SQLAlchemyMasterDataRepository(MasterDataRepository):
    """Implements the MasterDataRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    @staticmethod
    def _serial_to_entity(model: SerialNumberMasterModel) -> SerialNumberMaster:
        return SerialNumberMaster(
            id=model.id,
            serial_number=model.serial_number,
            customer_name=model.customer_name,
            description=model.description,
        )

    @staticmethod
    def _part_to_entity(model: PartNumberMasterModel) -> PartNumberMaster:
        return PartNumberMaster(
            id=model.id,
            part_number=model.part_number,
            part_name=model.part_name,
            description=model.description,
        )

    async def list_serial_numbers(self) -> list[SerialNumberMaster]:
        stmt = select(SerialNumberMasterModel).order_by(SerialNumberMasterModel.serial_number.asc())
        result = await self._session.execute(stmt)
        return [self._serial_to_entity(row) for row in result.scalars().all()]

    async def list_part_numbers(self) -> list[PartNumberMaster]:
        stmt = select(PartNumberMasterModel).order_by(PartNumberMasterModel.part_number.asc())
        result = await self._session.execute(stmt)
        return [self._part_to_entity(row) for row in result.scalars().all()]

    async def find_serial_number(self, serial_number: str) -> SerialNumberMaster | None:
        stmt = select(SerialNumberMasterModel).where(
            SerialNumberMasterModel.serial_number == serial_number
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._serial_to_entity(model) if model else None
