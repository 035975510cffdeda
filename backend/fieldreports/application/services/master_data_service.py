"""Application service for read-only master data lookups."""

from fieldreports.application.interfaces import MasterDataRepository
from fieldreports.domain.entities import PartNumberMaster, SerialNumberMaster
from fieldreports.domain.exceptions import EntityNotFoundError
from fieldreports.domain.identifiers import canonical_serial_number


class MasterDataService:
    """Serves serial/part number lists used to pre-fill the report form."""

    def __init__(self, repository: MasterDataRepository):
        self._repository = repository

    async def list_serial_numbers(self) -> list[SerialNumberMaster]:
        return await self._repository.list_serial_numbers()

    async def list_part_numbers(self) -> list[PartNumberMaster]:
        return await self._repository.list_part_numbers()

    async def lookup_serial_number(self, raw_serial: str) -> SerialNumberMaster:
        """Find a serial number entered with or without its TM- prefix."""
        serial = canonical_serial_number(raw_serial)
        master = await self._repository.find_serial_number(serial) if serial else None
        if master is None:
            raise EntityNotFoundError("SerialNumberMaster", raw_serial)
        return master
