"""Application service (use case) for service providers and their ratings."""

import logging

from warranty_manager.application.interfaces import (
    ServiceProviderRepository,
    ServiceProviderReviewRepository,
)
from warranty_manager.application.schemas import (
    ServiceProviderCreate,
    ServiceProviderReviewCreate,
    ServiceProviderUpdate,
)
from warranty_manager.domain.entities import (
    ServiceProvider,
    ServiceProviderReview,
    ServiceProviderWithReviews,
)
from warranty_manager.domain.exceptions import EntityNotFoundError
from warranty_manager.domain.ratings import mean_rating, round_half_up

from .projection_service import ProjectionService

logger = logging.getLogger(__name__)


class ServiceProviderService:
    """Provider CRUD plus review intake.

    Every new review recomputes the provider's mean over all of its reviews
    and persists it rounded to a whole number. Analytics uses one decimal
    instead; the two precisions are intentionally left as they are.
    """

    def __init__(
        self,
        provider_repo: ServiceProviderRepository,
        review_repo: ServiceProviderReviewRepository,
        projections: ProjectionService,
    ) -> None:
        self._provider_repo = provider_repo
        self._review_repo = review_repo
        self._projections = projections

    async def get_provider(self, provider_id: str) -> ServiceProvider:
        provider = await self._provider_repo.get_by_id(provider_id)
        if provider is None:
            raise EntityNotFoundError("ServiceProvider", provider_id)
        return provider

    async def get_provider_with_reviews(self, provider_id: str) -> ServiceProviderWithReviews:
        return await self._projections.with_reviews(await self.get_provider(provider_id))

    async def list_providers(self, district: str | None = None) -> list[ServiceProvider]:
        if district:
            return await self._provider_repo.get_by_district(district)
        return await self._provider_repo.get_all()

    async def create_provider(self, data: ServiceProviderCreate) -> ServiceProvider:
        provider = ServiceProvider(
            name=data.name,
            email=data.email,
            phone=data.phone,
            website=data.website,
            address=data.address,
            city=data.city,
            district=data.district.value,
            supported_brands=list(data.supported_brands),
        )
        return await self._provider_repo.create(provider)

    async def update_provider(
        self, provider_id: str, data: ServiceProviderUpdate
    ) -> ServiceProvider:
        provider = await self.get_provider(provider_id)
        changes = data.model_dump(exclude_unset=True)
        if changes.get("district") is not None:
            changes["district"] = data.district.value
        provider.update(**changes)
        updated = await self._provider_repo.update(provider)
        if updated is None:
            raise EntityNotFoundError("ServiceProvider", provider_id)
        return updated

    async def delete_provider(self, provider_id: str) -> bool:
        """Delete a provider and its reviews. False if absent."""
        return await self._provider_repo.delete(provider_id)

    async def average_rating(self, provider_id: str) -> float:
        reviews = await self._review_repo.get_by_provider(provider_id)
        return mean_rating(r.rating for r in reviews)

    async def add_review(self, data: ServiceProviderReviewCreate) -> ServiceProviderReview:
        provider = await self.get_provider(data.provider_id)

        review = await self._review_repo.create(
            ServiceProviderReview(
                provider_id=data.provider_id,
                rating=data.rating,
                comment=data.comment,
            )
        )

        mean = await self.average_rating(provider.id)
        provider.average_rating = int(round_half_up(mean))
        await self._provider_repo.update(provider)
        logger.info(
            "Provider %s rated %d; average now %.2f (stored %d)",
            provider.id, data.rating, mean, provider.average_rating,
        )
        return review
