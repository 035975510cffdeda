from .report_repository import ReportRepository
from .master_data_repository import MasterDataRepository
from .fault_code_notifier import FaultCodeNotifier

__all__ = [
    "ReportRepository",
    "MasterDataRepository",
    "FaultCodeNotifier",
]
