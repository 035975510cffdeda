from .master_data_service import MasterDataService
from .notification_dispatcher import NotificationDispatcher
from .report_query_builder import build_report_query
from .report_service import ReportService

__all__ = [
    "MasterDataService",
    "NotificationDispatcher",
    "build_report_query",
    "ReportService",
]
