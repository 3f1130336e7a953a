"""Health check endpoint — no database round-trip, always available."""

from fastapi import APIRouter

from warranty_manager.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Service status plus the settings that shape warranty calculations."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.app_title,
        "version": settings.app_version,
        "environment": settings.app_env,
        "database": settings.database_url.split(":", 1)[0],
        "warranty_years": settings.warranty_years,
    }
