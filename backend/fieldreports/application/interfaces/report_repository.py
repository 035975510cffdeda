"""Abstract repository interface (port) for Report persistence."""

from abc import ABC, abstractmethod

from fieldreports.domain.entities import Report, ReportFields, ReportQuery


class ReportRepository(ABC):
    """Port for report persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, report_id: int) -> Report | None:
        """Retrieve a single report by its ID."""
        ...

    @abstractmethod
    async def find_many(self, query: ReportQuery) -> tuple[list[Report], int]:
        """Return the requested page of matching reports and the total match count."""
        ...

    @abstractmethod
    async def create(self, fields: ReportFields) -> Report:
        """Persist a new report and return it with the generated ID and timestamps."""
        ...

    @abstractmethod
    async def update(self, report_id: int, fields: ReportFields) -> Report:
        """Replace every editable field of an existing report."""
        ...

    @abstractmethod
    async def delete(self, report_id: int) -> bool:
        """Delete a report. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def commit(self) -> None:
        """Make pending writes durable. Raises if the transaction cannot be committed."""
        ...
