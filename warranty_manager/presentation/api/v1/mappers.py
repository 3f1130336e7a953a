"""Domain projection → response DTO mapping shared by the v1 endpoints."""

from datetime import datetime

from warranty_manager.application.schemas import (
    BrandResponse,
    ProductResponse,
    ProductWithBrandResponse,
    ProductWithDetailsResponse,
    ReviewResponse,
    ReviewWithProductResponse,
    SupportRequestResponse,
    SupportRequestWithProductResponse,
    WarrantyStatusResponse,
)
from warranty_manager.config import get_settings
from warranty_manager.domain.entities import (
    ProductWithBrand,
    ProductWithDetails,
    ReviewWithProduct,
    SupportRequestWithProduct,
)
from warranty_manager.domain.warranty import WarrantyStatus, compute_status


def warranty_status(item: ProductWithBrand, now: datetime | None = None) -> WarrantyStatus:
    return compute_status(
        item.product.warranty_expiration,
        now,
        expiring_soon_days=get_settings().expiring_soon_days,
    )


def to_product_with_brand(
    item: ProductWithBrand, status: WarrantyStatus | None = None
) -> ProductWithBrandResponse:
    """Flatten a product, nesting its brand and current warranty status."""
    return ProductWithBrandResponse(
        **ProductResponse.model_validate(item.product).model_dump(),
        brand=BrandResponse.model_validate(item.brand),
        warranty=WarrantyStatusResponse.model_validate(status or warranty_status(item)),
    )


def to_product_details(item: ProductWithDetails) -> ProductWithDetailsResponse:
    base = to_product_with_brand(ProductWithBrand(product=item.product, brand=item.brand))
    return ProductWithDetailsResponse(
        **base.model_dump(),
        reviews=[ReviewResponse.model_validate(r) for r in item.reviews],
        support_requests=[SupportRequestResponse.model_validate(r) for r in item.support_requests],
    )


def to_review_with_product(item: ReviewWithProduct) -> ReviewWithProductResponse:
    return ReviewWithProductResponse(
        **ReviewResponse.model_validate(item.review).model_dump(),
        product=to_product_with_brand(item.product),
    )


def to_support_request_with_product(
    item: SupportRequestWithProduct,
) -> SupportRequestWithProductResponse:
    return SupportRequestWithProductResponse(
        **SupportRequestResponse.model_validate(item.support_request).model_dump(),
        product=to_product_with_brand(item.product),
    )
