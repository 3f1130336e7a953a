from .base import Base
from .session import engine, async_session_factory, get_db_session
from .models import (
    BrandModel,
    ProductModel,
    ReviewModel,
    SupportRequestModel,
    NotificationModel,
    ServiceProviderModel,
    ServiceProviderReviewModel,
    FavoriteModel,
    ClientProfileModel,
)

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "get_db_session",
    "BrandModel",
    "ProductModel",
    "ReviewModel",
    "SupportRequestModel",
    "NotificationModel",
    "ServiceProviderModel",
    "ServiceProviderReviewModel",
    "FavoriteModel",
    "ClientProfileModel",
]
