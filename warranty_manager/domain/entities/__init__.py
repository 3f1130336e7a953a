from .brand import Brand
from .product import Product, WarrantyExtension, MAX_PHOTOS
from .review import Review
from .support_request import (
    SupportRequest,
    SupportRequestStatus,
    IssueCategory,
    IssueSeverity,
)
from .service_provider import ServiceProvider, ServiceProviderReview, District
from .notification import Notification, NotificationType
from .favorite import Favorite, FavoriteType
from .client_profile import ClientProfile
from .projections import (
    ProductWithBrand,
    ProductWithDetails,
    ServiceProviderWithReviews,
    ReviewWithProduct,
    SupportRequestWithProduct,
)
from .analytics import AnalyticsReport, BrandCount, GlobalStats, RatedItem

__all__ = [
    "Brand",
    "Product",
    "WarrantyExtension",
    "MAX_PHOTOS",
    "Review",
    "SupportRequest",
    "SupportRequestStatus",
    "IssueCategory",
    "IssueSeverity",
    "ServiceProvider",
    "ServiceProviderReview",
    "District",
    "Notification",
    "NotificationType",
    "Favorite",
    "FavoriteType",
    "ClientProfile",
    "ProductWithBrand",
    "ProductWithDetails",
    "ServiceProviderWithReviews",
    "ReviewWithProduct",
    "SupportRequestWithProduct",
    "AnalyticsReport",
    "BrandCount",
    "GlobalStats",
    "RatedItem",
]
