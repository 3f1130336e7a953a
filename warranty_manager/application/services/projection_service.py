"""Read-time joins of products, brands, reviews and support requests."""

import logging

from warranty_manager.application.interfaces import (
    BrandRepository,
    ProductRepository,
    ReviewRepository,
    ServiceProviderReviewRepository,
    SupportRequestRepository,
)
from warranty_manager.domain.entities import (
    Brand,
    Product,
    ProductWithBrand,
    ProductWithDetails,
    ReviewWithProduct,
    ServiceProvider,
    ServiceProviderWithReviews,
    SupportRequestWithProduct,
)
from warranty_manager.domain.exceptions import DanglingReferenceError
from warranty_manager.domain.ratings import mean_rating

logger = logging.getLogger(__name__)


class ProjectionService:
    """Composes denormalized views on read.

    A product whose brand has disappeared is a dangling reference. By
    default it is silently left out of list results and single lookups
    return ``None``; with ``strict=True`` a ``DanglingReferenceError`` is
    raised instead.
    """

    def __init__(
        self,
        brand_repo: BrandRepository,
        product_repo: ProductRepository,
        review_repo: ReviewRepository,
        support_request_repo: SupportRequestRepository,
        provider_review_repo: ServiceProviderReviewRepository,
        *,
        strict: bool = False,
    ) -> None:
        self._brand_repo = brand_repo
        self._product_repo = product_repo
        self._review_repo = review_repo
        self._support_request_repo = support_request_repo
        self._provider_review_repo = provider_review_repo
        self._strict = strict

    # ── Single-entity projections ────────────────────────────────────

    async def with_brand(self, product: Product) -> ProductWithBrand | None:
        brand = await self._brand_repo.get_by_id(product.brand_id)
        if brand is None:
            return self._dangling(product)
        return ProductWithBrand(product=product, brand=brand)

    async def with_details(self, product: Product) -> ProductWithDetails | None:
        projected = await self.with_brand(product)
        if projected is None:
            return None
        reviews = await self._review_repo.get_by_product(product.id)
        requests = await self._support_request_repo.get_by_product(product.id)
        return ProductWithDetails(
            product=product,
            brand=projected.brand,
            reviews=sorted(reviews, key=lambda r: r.created_at, reverse=True),
            support_requests=sorted(requests, key=lambda r: r.created_at, reverse=True),
        )

    async def with_reviews(self, provider: ServiceProvider) -> ServiceProviderWithReviews:
        reviews = await self._provider_review_repo.get_by_provider(provider.id)
        return ServiceProviderWithReviews(
            provider=provider,
            reviews=reviews,
            average_rating_value=mean_rating(r.rating for r in reviews),
        )

    # ── List projections ─────────────────────────────────────────────

    async def list_products(self) -> list[ProductWithBrand]:
        """Every product with its brand, most recent purchase first."""
        return await self._join_brands(await self._product_repo.get_all())

    async def list_products_by_brand(self, brand_id: str) -> list[ProductWithBrand]:
        return await self._join_brands(await self._product_repo.get_by_brand(brand_id))

    async def search_products(self, query: str) -> list[ProductWithBrand]:
        return await self._join_brands(await self._product_repo.search(query))

    async def community_reviews(self) -> list[ReviewWithProduct]:
        """All reviews, newest first, each joined to its product and brand."""
        products = await self._products_by_id()
        return [
            ReviewWithProduct(review=review, product=products[review.product_id])
            for review in await self._review_repo.get_all()
            if review.product_id in products
        ]

    async def support_history(self) -> list[SupportRequestWithProduct]:
        """All support requests, newest first, each joined to its product and brand."""
        products = await self._products_by_id()
        return [
            SupportRequestWithProduct(support_request=request, product=products[request.product_id])
            for request in await self._support_request_repo.get_all()
            if request.product_id in products
        ]

    # ── Helpers ──────────────────────────────────────────────────────

    async def _products_by_id(self) -> dict[str, ProductWithBrand]:
        return {p.product.id: p for p in await self.list_products()}

    async def _join_brands(self, products: list[Product]) -> list[ProductWithBrand]:
        brands: dict[str, Brand | None] = {}
        joined: list[ProductWithBrand] = []
        for product in products:
            if product.brand_id not in brands:
                brands[product.brand_id] = await self._brand_repo.get_by_id(product.brand_id)
            brand = brands[product.brand_id]
            if brand is None:
                self._dangling(product)
                continue
            joined.append(ProductWithBrand(product=product, brand=brand))
        joined.sort(key=lambda p: p.product.purchase_date, reverse=True)
        return joined

    def _dangling(self, product: Product) -> None:
        if self._strict:
            raise DanglingReferenceError("Product", product.id, "Brand", product.brand_id)
        logger.warning(
            "Product %s references missing brand %s; leaving it out",
            product.id, product.brand_id,
        )
        return None
