from .brand import BrandCreate, BrandUpdate, BrandResponse
from .review import ReviewCreate, ReviewResponse
from .support_request import (
    SupportRequestCreate,
    SupportRequestUpdate,
    SupportRequestResponse,
    SupportRequestReceiptResponse,
)
from .product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductWithBrandResponse,
    ProductWithDetailsResponse,
    WarrantyExtensionRequest,
    WarrantyStatusResponse,
    SearchResponse,
    ReviewWithProductResponse,
    SupportRequestWithProductResponse,
)
from .service_provider import (
    ServiceProviderCreate,
    ServiceProviderUpdate,
    ServiceProviderResponse,
    ServiceProviderReviewCreate,
    ServiceProviderReviewResponse,
    ServiceProviderWithReviewsResponse,
)
from .notification import NotificationCreate, NotificationResponse
from .client_profile import ClientProfileSave, ClientProfileUpdate, ClientProfileResponse
from .analytics import (
    AnalyticsResponse,
    BrandCountResponse,
    GlobalStatsResponse,
    RatedItemResponse,
)

__all__ = [
    "BrandCreate",
    "BrandUpdate",
    "BrandResponse",
    "ReviewCreate",
    "ReviewResponse",
    "SupportRequestCreate",
    "SupportRequestUpdate",
    "SupportRequestResponse",
    "SupportRequestReceiptResponse",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "ProductWithBrandResponse",
    "ProductWithDetailsResponse",
    "WarrantyExtensionRequest",
    "WarrantyStatusResponse",
    "SearchResponse",
    "ReviewWithProductResponse",
    "SupportRequestWithProductResponse",
    "ServiceProviderCreate",
    "ServiceProviderUpdate",
    "ServiceProviderResponse",
    "ServiceProviderReviewCreate",
    "ServiceProviderReviewResponse",
    "ServiceProviderWithReviewsResponse",
    "NotificationCreate",
    "NotificationResponse",
    "ClientProfileSave",
    "ClientProfileUpdate",
    "ClientProfileResponse",
    "AnalyticsResponse",
    "BrandCountResponse",
    "GlobalStatsResponse",
    "RatedItemResponse",
]
