from .brand import BrandModel
from .product import ProductModel, ReviewModel, SupportRequestModel, NotificationModel
from .service_provider import ServiceProviderModel, ServiceProviderReviewModel
from .client import FavoriteModel, ClientProfileModel

__all__ = [
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
