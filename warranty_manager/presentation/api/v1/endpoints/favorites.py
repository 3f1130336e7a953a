"""Favorite products and providers."""

from fastapi import APIRouter, Depends

from warranty_manager.application.services import FavoriteService
from warranty_manager.domain.entities import FavoriteType
from warranty_manager.infrastructure.dependencies import get_favorite_service

router = APIRouter(prefix="/favorites", tags=["Favorites"])


@router.get("/{favorite_type}", response_model=list[str])
async def list_favorites(
    favorite_type: FavoriteType,
    service: FavoriteService = Depends(get_favorite_service),
) -> list[str]:
    """Ids of every favorited target of the given type."""
    return await service.list_favorites(favorite_type)


@router.get("/{favorite_type}/{target_id}")
async def check_favorite(
    favorite_type: FavoriteType,
    target_id: str,
    service: FavoriteService = Depends(get_favorite_service),
) -> dict:
    return {"is_favorite": await service.is_favorite(favorite_type, target_id)}


@router.post("/{favorite_type}/{target_id}/toggle")
async def toggle_favorite(
    favorite_type: FavoriteType,
    target_id: str,
    service: FavoriteService = Depends(get_favorite_service),
) -> dict:
    """Add the target to favorites, or remove it if already there."""
    return {"is_favorite": await service.toggle(favorite_type, target_id)}
