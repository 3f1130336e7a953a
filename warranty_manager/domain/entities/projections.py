"""Read-time compositions of stored entities."""

from dataclasses import dataclass, field

from .brand import Brand
from .product import Product
from .review import Review
from .service_provider import ServiceProvider, ServiceProviderReview
from .support_request import SupportRequest


@dataclass
class ProductWithBrand:
    product: Product
    brand: Brand


@dataclass
class ProductWithDetails:
    """A product with its brand, reviews and support history (newest first)."""

    product: Product
    brand: Brand
    reviews: list[Review] = field(default_factory=list)
    support_requests: list[SupportRequest] = field(default_factory=list)


@dataclass
class ServiceProviderWithReviews:
    """A provider with its reviews and the unrounded mean rating.

    ``average_rating_value`` is computed on read; prefer it over the
    persisted integer ``provider.average_rating`` where precision matters.
    """

    provider: ServiceProvider
    reviews: list[ServiceProviderReview] = field(default_factory=list)
    average_rating_value: float = 0.0


@dataclass
class ReviewWithProduct:
    review: Review
    product: ProductWithBrand


@dataclass
class SupportRequestWithProduct:
    support_request: SupportRequest
    product: ProductWithBrand
