"""Application service for favorites."""

from warranty_manager.application.interfaces import FavoriteRepository
from warranty_manager.domain.entities import FavoriteType


class FavoriteService:

    def __init__(self, repository: FavoriteRepository):
        self._repository = repository

    async def list_favorites(self, favorite_type: FavoriteType) -> list[str]:
        return await self._repository.list_target_ids(favorite_type)

    async def toggle(self, favorite_type: FavoriteType, target_id: str) -> bool:
        return await self._repository.toggle(favorite_type, target_id)

    async def is_favorite(self, favorite_type: FavoriteType, target_id: str) -> bool:
        return await self._repository.is_favorite(favorite_type, target_id)
