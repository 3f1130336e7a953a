from .brand_repository import SQLAlchemyBrandRepository
from .product_repository import SQLAlchemyProductRepository
from .review_repository import SQLAlchemyReviewRepository
from .support_request_repository import SQLAlchemySupportRequestRepository
from .service_provider_repository import (
    SQLAlchemyServiceProviderRepository,
    SQLAlchemyServiceProviderReviewRepository,
)
from .notification_repository import SQLAlchemyNotificationRepository
from .favorite_repository import SQLAlchemyFavoriteRepository
from .client_profile_repository import SQLAlchemyClientProfileRepository

__all__ = [
    "SQLAlchemyBrandRepository",
    "SQLAlchemyProductRepository",
    "SQLAlchemyReviewRepository",
    "SQLAlchemySupportRequestRepository",
    "SQLAlchemyServiceProviderRepository",
    "SQLAlchemyServiceProviderReviewRepository",
    "SQLAlchemyNotificationRepository",
    "SQLAlchemyFavoriteRepository",
    "SQLAlchemyClientProfileRepository",
]
