"""Concrete repository implementation for Brand backed by SQLAlchemy."""

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from warranty_manager.application.interfaces import BrandRepository
from warranty_manager.domain.entities import Brand
from warranty_manager.infrastructure.database.models import BrandModel


class SQLAlchemyBrandRepository(BrandRepository):
    """Implements the BrandRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: BrandModel) -> Brand:
        """Map ORM model → domain entity."""
        return Brand(
            id=model.id,
            name=model.name,
            logo_url=model.logo_url,
            support_email=model.support_email,
            support_phone=model.support_phone,
            website=model.website,
            category=model.category,
            country_emails=dict(model.country_emails) if model.country_emails else None,
        )

    async def get_by_id(self, brand_id: str) -> Brand | None:
        result = await self._session.get(BrandModel, brand_id)
        return self._to_entity(result) if result else None

    async def get_by_name(self, name: str) -> Brand | None:
        result = await self._session.execute(
            select(BrandModel).where(BrandModel.name == name)
        )
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Brand]:
        result = await self._session.execute(select(BrandModel).order_by(BrandModel.name))
        return [self._to_entity(row) for row in result.scalars().all()]

    async def search(self, query: str) -> list[Brand]:
        pattern = f"%{query}%"
        stmt = (
            select(BrandModel)
            .where(or_(BrandModel.name.ilike(pattern), BrandModel.category.ilike(pattern)))
            .order_by(BrandModel.name)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, brand: Brand) -> Brand:
        model = BrandModel(
            id=brand.id,
            name=brand.name,
            logo_url=brand.logo_url,
            support_email=brand.support_email,
            support_phone=brand.support_phone,
            website=brand.website,
            category=brand.category,
            country_emails=brand.country_emails,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, brand: Brand) -> Brand | None:
        model = await self._session.get(BrandModel, brand.id)
        if model is None:
            return None
        model.logo_url = brand.logo_url
        model.support_email = brand.support_email
        model.support_phone = brand.support_phone
        model.website = brand.website
        model.category = brand.category
        model.country_emails = brand.country_emails
        await self._session.flush()
        return self._to_entity(model)
