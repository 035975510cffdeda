"""Master data endpoints — read-only serial/part number lists."""

from fastapi import APIRouter, Depends, HTTPException, status

from fieldreports.application.schemas import (
    PartNumberMasterResponse,
    SerialNumberMasterResponse,
)
from fieldreports.application.services import MasterDataService
from fieldreports.domain.exceptions import EntityNotFoundError
from fieldreports.infrastructure.dependencies import get_master_data_service

router = APIRouter(prefix="/masters", tags=["Master Data"])


@router.get("/serial-numbers", response_model=list[SerialNumberMasterResponse])
async def list_serial_numbers(
    service: MasterDataService = Depends(get_master_data_service),
) -> list[SerialNumberMasterResponse]:
    """All known serial numbers, ascending."""
    masters = await service.list_serial_numbers()
    return [SerialNumberMasterResponse.model_validate(m, from_attributes=True) for m in masters]


@router.get("/serial-numbers/{serial_number}", response_model=SerialNumberMasterResponse)
async def get_serial_number(
    serial_number: str,
    service: MasterDataService = Depends(get_master_data_service),
) -> SerialNumberMasterResponse:
    """Look up a serial number (with or without the TM- prefix) to pre-fill the customer."""
    try:
        master = await service.lookup_serial_number(serial_number)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return SerialNumberMasterResponse.model_validate(master, from_attributes=True)


@router.get("/part-numbers", response_model=list[PartNumberMasterResponse])
async def list_part_numbers(
    service: MasterDataService = Depends(get_master_data_service),
) -> list[PartNumberMasterResponse]:
    """All known part numbers, ascending."""
    masters = await service.list_part_numbers()
    return [PartNumberMasterResponse.model_validate(m, from_attributes=True) for m in masters]
