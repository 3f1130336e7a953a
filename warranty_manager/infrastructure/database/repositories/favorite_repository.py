"""Concrete repository implementation for favorites backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from warranty_manager.application.interfaces import FavoriteRepository
from warranty_manager.domain.entities import Favorite, FavoriteType
from warranty_manager.infrastructure.database.models import FavoriteModel


class SQLAlchemyFavoriteRepository(FavoriteRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    async def _find(self, favorite_type: FavoriteType, target_id: str) -> FavoriteModel | None:
        result = await self._session.execute(
            select(FavoriteModel).where(
                FavoriteModel.type == favorite_type.value,
                FavoriteModel.target_id == target_id,
            )
        )
        return result.scalar_one_or_none()

    async def list_target_ids(self, favorite_type: FavoriteType) -> list[str]:
        result = await self._session.execute(
            select(FavoriteModel.target_id)
            .where(FavoriteModel.type == favorite_type.value)
            .order_by(FavoriteModel.created_at)
        )
        return list(result.scalars().all())

    async def toggle(self, favorite_type: FavoriteType, target_id: str) -> bool:
        existing = await self._find(favorite_type, target_id)
        if existing is not None:
            await self._session.delete(existing)
            await self._session.flush()
            return False

        favorite = Favorite(type=favorite_type, target_id=target_id)
        self._session.add(
            FavoriteModel(
                id=favorite.id,
                type=favorite.type.value,
                target_id=favorite.target_id,
                created_at=favorite.created_at,
            )
        )
        await self._session.flush()
        return True

    async def is_favorite(self, favorite_type: FavoriteType, target_id: str) -> bool:
        return await self._find(favorite_type, target_id) is not None
