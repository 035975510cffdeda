"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from fieldreports.presentation.api.v1.endpoints.health import router as health_router
from fieldreports.presentation.api.v1.endpoints.reports import router as reports_router
from fieldreports.presentation.api.v1.endpoints.masters import router as masters_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(reports_router)
router.include_router(masters_router)
