"""Analytics report endpoint."""

from fastapi import APIRouter, Depends

from warranty_manager.application.schemas import AnalyticsResponse
from warranty_manager.application.services import AnalyticsService
from warranty_manager.infrastructure.dependencies import get_analytics_service

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get("", response_model=AnalyticsResponse)
async def get_analytics(
    service: AnalyticsService = Depends(get_analytics_service),
) -> AnalyticsResponse:
    """Top brands, top-rated providers and products, and global warranty stats."""
    report = await service.build_report()
    return AnalyticsResponse.model_validate(report, from_attributes=True)
