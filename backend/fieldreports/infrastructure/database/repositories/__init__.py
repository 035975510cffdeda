from .report_repository import SQLAlchemyReportRepository
from .master_data_repository import SQLAlchemyMasterDataRepository

__all__ = [
    "SQLAlchemyReportRepository",
    "SQLAlchemyMasterDataRepository",
]
