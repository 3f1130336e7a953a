"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from warranty_manager.config import get_settings
from warranty_manager.application.services import (
    AnalyticsService,
    BrandService,
    ClientProfileService,
    FavoriteService,
    NotificationService,
    ProductService,
    ProjectionService,
    ReviewService,
    ServiceProviderService,
    SupportEmailComposer,
    SupportRequestService,
)
from warranty_manager.infrastructure.database.session import get_db_session
from warranty_manager.infrastructure.database.repositories import (
    SQLAlchemyBrandRepository,
    SQLAlchemyClientProfileRepository,
    SQLAlchemyFavoriteRepository,
    SQLAlchemyNotificationRepository,
    SQLAlchemyProductRepository,
    SQLAlchemyReviewRepository,
    SQLAlchemyServiceProviderRepository,
    SQLAlchemyServiceProviderReviewRepository,
    SQLAlchemySupportRequestRepository,
)


def _build_projections(session: AsyncSession) -> ProjectionService:
    return ProjectionService(
        brand_repo=SQLAlchemyBrandRepository(session),
        product_repo=SQLAlchemyProductRepository(session),
        review_repo=SQLAlchemyReviewRepository(session),
        support_request_repo=SQLAlchemySupportRequestRepository(session),
        provider_review_repo=SQLAlchemyServiceProviderReviewRepository(session),
        strict=get_settings().strict_references,
    )


async def get_owner_id(x_owner_id: str | None = Header(None)) -> str:
    """Identity of the client whose profile is used; no authentication."""
    return x_owner_id or get_settings().default_owner_id


async def get_projection_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ProjectionService, None]:
    yield _build_projections(session)


async def get_brand_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[BrandService, None]:
    """Provides a BrandService instance with its repository wired up."""
    yield BrandService(SQLAlchemyBrandRepository(session))


async def get_product_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ProductService, None]:
    """Provides a ProductService configured with the warranty rules from Settings."""
    settings = get_settings()
    yield ProductService(
        product_repo=SQLAlchemyProductRepository(session),
        brand_repo=SQLAlchemyBrandRepository(session),
        projections=_build_projections(session),
        warranty_years=settings.warranty_years,
        expiring_soon_days=settings.expiring_soon_days,
        enforce_extension_after_default=settings.enforce_extension_after_default,
    )


async def get_review_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ReviewService, None]:
    yield ReviewService(
        SQLAlchemyReviewRepository(session), SQLAlchemyProductRepository(session)
    )


async def get_support_request_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[SupportRequestService, None]:
    """Provides a SupportRequestService with the e-mail composer for the configured country."""
    yield SupportRequestService(
        support_request_repo=SQLAlchemySupportRequestRepository(session),
        product_repo=SQLAlchemyProductRepository(session),
        profile_repo=SQLAlchemyClientProfileRepository(session),
        projections=_build_projections(session),
        composer=SupportEmailComposer(get_settings().support_country_code),
    )


async def get_service_provider_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ServiceProviderService, None]:
    yield ServiceProviderService(
        provider_repo=SQLAlchemyServiceProviderRepository(session),
        review_repo=SQLAlchemyServiceProviderReviewRepository(session),
        projections=_build_projections(session),
    )


async def get_notification_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[NotificationService, None]:
    yield NotificationService(
        SQLAlchemyNotificationRepository(session), SQLAlchemyProductRepository(session)
    )


async def get_favorite_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[FavoriteService, None]:
    yield FavoriteService(SQLAlchemyFavoriteRepository(session))


async def get_client_profile_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ClientProfileService, None]:
    yield ClientProfileService(SQLAlchemyClientProfileRepository(session))


async def get_analytics_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AnalyticsService, None]:
    yield AnalyticsService(
        projections=_build_projections(session),
        review_repo=SQLAlchemyReviewRepository(session),
        provider_repo=SQLAlchemyServiceProviderRepository(session),
        provider_review_repo=SQLAlchemyServiceProviderReviewRepository(session),
        top_n=get_settings().analytics_top_n,
    )
