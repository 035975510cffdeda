"""Abstract repository interface (port) for read-only master data."""

from abc import ABC, abstractmethod

from fieldreports.domain.entities import PartNumberMaster, SerialNumberMaster


class MasterDataRepository(ABC):
    """Port for serial/part number reference lists."""

    @abstractmethod
    async def list_serial_numbers(self) -> list[SerialNumberMaster]:
        """All known serial numbers, ordered ascending."""
        ...

    @abstractmethod
    async def list_part_numbers(self) -> list[PartNumberMaster]:
        """All known part numbers, ordered ascending."""
        ...

    @abstractmethod
    async def find_serial_number(self, serial_number: str) -> SerialNumberMaster | None:
        """Look up a single serial number (canonical form)."""
        ...
