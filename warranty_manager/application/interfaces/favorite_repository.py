"""Abstract repository interface (port) for favorites."""

from abc import ABC, abstractmethod

from warranty_manager.domain.entities import FavoriteType


class FavoriteRepository(ABC):

    @abstractmethod
    async def list_target_ids(self, favorite_type: FavoriteType) -> list[str]:
        ...

    @abstractmethod
    async def toggle(self, favorite_type: FavoriteType, target_id: str) -> bool:
        """Add the favorite if missing, remove it otherwise.

        Returns the resulting membership: True if it is now a favorite.
        """
        ...

    @abstractmethod
    async def is_favorite(self, favorite_type: FavoriteType, target_id: str) -> bool:
        ...
