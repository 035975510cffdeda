from .report import FaultCode, PartReplacement, Report, ReportFields, WorkType
from .report_query import (
    FilterField,
    Pagination,
    ReportPage,
    ReportQuery,
    SortField,
    SortOrder,
    SubstringFilter,
)
from .master_data import PartNumberMaster, SerialNumberMaster
from .fault_code_event import FaultCodeEvent

__all__ = [
    "FaultCode",
    "PartReplacement",
    "Report",
    "ReportFields",
    "WorkType",
    "FilterField",
    "Pagination",
    "ReportPage",
    "ReportQuery",
    "SortField",
    "SortOrder",
    "SubstringFilter",
    "PartNumberMaster",
    "SerialNumberMaster",
    "FaultCodeEvent",
]
