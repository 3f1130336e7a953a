"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from warranty_manager.presentation.api.v1.endpoints.health import router as health_router
from warranty_manager.presentation.api.v1.endpoints.brands import router as brands_router
from warranty_manager.presentation.api.v1.endpoints.products import router as products_router
from warranty_manager.presentation.api.v1.endpoints.reviews import router as reviews_router
from warranty_manager.presentation.api.v1.endpoints.support_requests import (
    router as support_requests_router,
)
from warranty_manager.presentation.api.v1.endpoints.service_providers import (
    router as service_providers_router,
)
from warranty_manager.presentation.api.v1.endpoints.notifications import (
    router as notifications_router,
)
from warranty_manager.presentation.api.v1.endpoints.favorites import router as favorites_router
from warranty_manager.presentation.api.v1.endpoints.profile import router as profile_router
from warranty_manager.presentation.api.v1.endpoints.search import router as search_router
from warranty_manager.presentation.api.v1.endpoints.analytics import router as analytics_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(brands_router)
router.include_router(products_router)
router.include_router(reviews_router)
router.include_router(support_requests_router)
router.include_router(service_providers_router)
router.include_router(notifications_router)
router.include_router(favorites_router)
router.include_router(profile_router)
router.include_router(search_router)
router.include_router(analytics_router)
