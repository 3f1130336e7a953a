from .analytics_service import AnalyticsService
from .brand_service import BrandService
from .client_profile_service import ClientProfileService
from .favorite_service import FavoriteService
from .notification_service import NotificationService
from .product_service import ProductService, WarrantyCertificate
from .projection_service import ProjectionService
from .review_service import ReviewService
from .service_provider_service import ServiceProviderService
from .support_email import SupportEmail, SupportEmailComposer
from .support_request_service import SupportRequestReceipt, SupportRequestService

__all__ = [
    "AnalyticsService",
    "BrandService",
    "ClientProfileService",
    "FavoriteService",
    "NotificationService",
    "ProductService",
    "WarrantyCertificate",
    "ProjectionService",
    "ReviewService",
    "ServiceProviderService",
    "SupportEmail",
    "SupportEmailComposer",
    "SupportRequestReceipt",
    "SupportRequestService",
]
