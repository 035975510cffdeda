from .report import (
    ErrorResponse,
    FieldErrorSchema,
    PaginationSchema,
    ReportDetailResponse,
    ReportListResponse,
    ReportResponse,
    ReportSubmission,
    ValidationErrorResponse,
)
from .master_data import PartNumberMasterResponse, SerialNumberMasterResponse

__all__ = [
    "ErrorResponse",
    "FieldErrorSchema",
    "PaginationSchema",
    "ReportDetailResponse",
    "ReportListResponse",
    "ReportResponse",
    "ReportSubmission",
    "ValidationErrorResponse",
    "PartNumberMasterResponse",
    "SerialNumberMasterResponse",
]
