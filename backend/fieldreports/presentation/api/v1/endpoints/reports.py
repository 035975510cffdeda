"""Work report endpoints — search, detail, create, replace, delete.

Validation failures (``ReportValidationError``) and malformed ids
(``MalformedIdentifierError``) are mapped to HTTP 400 by the handlers
registered in ``fieldreports.main``.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from fieldreports.application.schemas import (
    ErrorResponse,
    PaginationSchema,
    ReportDetailResponse,
    ReportListResponse,
    ReportResponse,
    ReportSubmission,
    ValidationErrorResponse,
)
from fieldreports.application.services import ReportService, build_report_query
from fieldreports.config import get_settings
from fieldreports.domain.exceptions import EntityNotFoundError
from fieldreports.domain.identifiers import parse_report_id
from fieldreports.infrastructure.dependencies import get_report_service

_settings = get_settings()

router = APIRouter(prefix="/reports", tags=["Reports"])

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
}


@router.get("", response_model=ReportListResponse)
async def list_reports(
    customer_name: str | None = Query(None, alias="customerName", description="Substring of the customer name"),
    serial_number: str | None = Query(None, alias="serialNumber", description="Substring of the serial number"),
    part_number: str | None = Query(None, alias="partNumber", description="Substring of the part number"),
    page: int = Query(1, ge=1),
    per_page: int = Query(
        _settings.default_per_page, ge=1, le=_settings.max_per_page, alias="perPage"
    ),
    sort_by: str | None = Query(None, alias="sortBy"),
    sort_order: str | None = Query(None, alias="sortOrder"),
    service: ReportService = Depends(get_report_service),
) -> ReportListResponse:
    """Search reports with filters, sorting and pagination."""
    query = build_report_query(
        customer_name=customer_name,
        serial_number=serial_number,
        part_number=part_number,
        page=page,
        per_page=per_page,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    result = await service.list_reports(query)
    return ReportListResponse(
        reports=[ReportResponse.model_validate(r, from_attributes=True) for r in result.reports],
        pagination=PaginationSchema.model_validate(result.pagination, from_attributes=True),
    )


@router.get("/{report_id}", response_model=ReportDetailResponse, responses=_ERROR_RESPONSES)
async def get_report(
    report_id: str,
    service: ReportService = Depends(get_report_service),
) -> ReportDetailResponse:
    """Retrieve a single report, including its net working time."""
    try:
        report = await service.get_report(parse_report_id(report_id))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ReportDetailResponse.model_validate(report, from_attributes=True)


@router.post(
    "",
    response_model=ReportResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
async def create_report(
    data: ReportSubmission,
    service: ReportService = Depends(get_report_service),
) -> ReportResponse:
    """Create a new report."""
    report = await service.create_report(data.to_input())
    return ReportResponse.model_validate(report, from_attributes=True)


@router.put("/{report_id}", response_model=ReportResponse, responses=_ERROR_RESPONSES)
async def update_report(
    report_id: str,
    data: ReportSubmission,
    service: ReportService = Depends(get_report_service),
) -> ReportResponse:
    """Replace every editable field of an existing report."""
    try:
        report = await service.update_report(parse_report_id(report_id), data.to_input())
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ReportResponse.model_validate(report, from_attributes=True)


@router.delete("/{report_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_ERROR_RESPONSES)
async def delete_report(
    report_id: str,
    service: ReportService = Depends(get_report_service),
) -> None:
    """Delete a report by ID."""
    try:
        await service.delete_report(parse_report_id(report_id))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
