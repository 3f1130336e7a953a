from .brand_repository import BrandRepository
from .product_repository import ProductRepository
from .review_repository import ReviewRepository
from .support_request_repository import SupportRequestRepository
from .service_provider_repository import (
    ServiceProviderRepository,
    ServiceProviderReviewRepository,
)
from .notification_repository import NotificationRepository
from .favorite_repository import FavoriteRepository
from .client_profile_repository import ClientProfileRepository

__all__ = [
    "BrandRepository",
    "ProductRepository",
    "ReviewRepository",
    "SupportRequestRepository",
    "ServiceProviderRepository",
    "ServiceProviderReviewRepository",
    "NotificationRepository",
    "FavoriteRepository",
    "ClientProfileRepository",
]
