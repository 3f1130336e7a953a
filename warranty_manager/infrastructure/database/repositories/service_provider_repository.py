"""Concrete repository implementations for service providers and their reviews."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from warranty_manager.application.interfaces import (
    ServiceProviderRepository,
    ServiceProviderReviewRepository,
)
from warranty_manager.domain.entities import ServiceProvider, ServiceProviderReview
from warranty_manager.infrastructure.database.models import (
    ServiceProviderModel,
    ServiceProviderReviewModel,
)
from warranty_manager.infrastructure.database.models._common import as_utc


class SQLAlchemyServiceProviderRepository(ServiceProviderRepository):
    """Implements the ServiceProviderRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ServiceProviderModel) -> ServiceProvider:
        return ServiceProvider(
            id=model.id,
            name=model.name,
            email=model.email,
            phone=model.phone,
            website=model.website,
            address=model.address,
            city=model.city,
            district=model.district,
            supported_brands=list(model.supported_brands or []),
            average_rating=model.average_rating or 0,
            created_at=as_utc(model.created_at),
        )

    def _ordered(self):
        return select(ServiceProviderModel).order_by(
            ServiceProviderModel.average_rating.desc(),
            ServiceProviderModel.created_at,
        )

    async def get_by_id(self, provider_id: str) -> ServiceProvider | None:
        result = await self._session.get(ServiceProviderModel, provider_id)
        return self._to_entity(result) if result else None

    async def get_all(self) -> list[ServiceProvider]:
        result = await self._session.execute(self._ordered())
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_by_district(self, district: str) -> list[ServiceProvider]:
        # casefold in Python: SQLite's lower() ignores accented letters ("Évora")
        wanted = district.casefold()
        result = await self._session.execute(self._ordered())
        return [
            self._to_entity(row)
            for row in result.scalars().all()
            if row.district.casefold() == wanted
        ]

    async def create(self, provider: ServiceProvider) -> ServiceProvider:
        model = ServiceProviderModel(
            id=provider.id,
            name=provider.name,
            email=provider.email,
            phone=provider.phone,
            website=provider.website,
            address=provider.address,
            city=provider.city,
            district=provider.district,
            supported_brands=list(provider.supported_brands),
            average_rating=provider.average_rating,
            created_at=provider.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, provider: ServiceProvider) -> ServiceProvider | None:
        model = await self._session.get(ServiceProviderModel, provider.id)
        if model is None:
            return None
        model.name = provider.name
        model.email = provider.email
        model.phone = provider.phone
        model.website = provider.website
        model.address = provider.address
        model.city = provider.city
        model.district = provider.district
        model.supported_brands = list(provider.supported_brands)
        model.average_rating = provider.average_rating
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, provider_id: str) -> bool:
        model = await self._session.get(ServiceProviderModel, provider_id)
        if model is None:
            return False
        await self._session.execute(
            delete(ServiceProviderReviewModel).where(
                ServiceProviderReviewModel.provider_id == provider_id
            )
        )
        await self._session.delete(model)
        await self._session.flush()
        return True


class SQLAlchemyServiceProviderReviewRepository(ServiceProviderReviewRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    @staticmethod
    def _to_entity(model: ServiceProviderReviewModel) -> ServiceProviderReview:
        return ServiceProviderReview(
            id=model.id,
            provider_id=model.provider_id,
            rating=model.rating,
            comment=model.comment,
            created_at=as_utc(model.created_at),
        )

    async def get_by_provider(self, provider_id: str) -> list[ServiceProviderReview]:
        stmt = (
            select(ServiceProviderReviewModel)
            .where(ServiceProviderReviewModel.provider_id == provider_id)
            .order_by(ServiceProviderReviewModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_all(self) -> list[ServiceProviderReview]:
        result = await self._session.execute(
            select(ServiceProviderReviewModel).order_by(
                ServiceProviderReviewModel.created_at.desc()
            )
        )
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, review: ServiceProviderReview) -> ServiceProviderReview:
        model = ServiceProviderReviewModel(
            id=review.id,
            provider_id=review.provider_id,
            rating=review.rating,
            comment=review.comment,
            created_at=review.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)
