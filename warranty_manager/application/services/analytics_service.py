"""Analytics aggregation over the full current entity set.

The ranking helpers are pure functions so they can be reused (and tested)
without a database; ``AnalyticsService`` only gathers their inputs.
"""

import logging
from collections import defaultdict
from collections.abc import Iterable
from datetime import datetime

from warranty_manager.application.interfaces import (
    ReviewRepository,
    ServiceProviderRepository,
    ServiceProviderReviewRepository,
)
from warranty_manager.domain.entities import (
    AnalyticsReport,
    BrandCount,
    GlobalStats,
    ProductWithBrand,
    RatedItem,
    Review,
    ServiceProvider,
    ServiceProviderReview,
)
from warranty_manager.domain.ratings import mean_rating, round_half_up
from warranty_manager.domain.warranty import compute_status

from .projection_service import ProjectionService

logger = logging.getLogger(__name__)

TOP_N = 5
UNKNOWN_PROVIDER = "Unknown"


def top_brands(products: Iterable[ProductWithBrand], limit: int = TOP_N) -> list[BrandCount]:
    """Brands ranked by number of registered products."""
    counts: dict[str, int] = {}
    names: dict[str, str] = {}
    for item in products:
        brand_id = item.product.brand_id
        counts[brand_id] = counts.get(brand_id, 0) + 1
        names.setdefault(brand_id, item.brand.name)

    ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
    return [
        BrandCount(id=brand_id, name=names[brand_id], product_count=count)
        for brand_id, count in ranked[:limit]
    ]


def _rank(
    ratings: dict[str, list[int]], labels: dict[str, str], limit: int, default_label: str
) -> list[RatedItem]:
    items = [
        RatedItem(
            id=item_id,
            name=labels.get(item_id, default_label),
            rating=round_half_up(mean_rating(values), 1),
            review_count=len(values),
        )
        for item_id, values in ratings.items()
        if values
    ]
    items.sort(key=lambda item: item.rating, reverse=True)
    return items[:limit]


def top_rated_providers(
    providers: Iterable[ServiceProvider],
    reviews: Iterable[ServiceProviderReview],
    limit: int = TOP_N,
) -> list[RatedItem]:
    """Providers ranked by mean review rating; providers without reviews are skipped."""
    labels = {p.id: p.name for p in providers}
    ratings: dict[str, list[int]] = defaultdict(list)
    for review in reviews:
        ratings[review.provider_id].append(review.rating)
    return _rank(ratings, labels, limit, UNKNOWN_PROVIDER)


def top_rated_products(
    products: Iterable[ProductWithBrand],
    reviews: Iterable[Review],
    limit: int = TOP_N,
) -> list[RatedItem]:
    """Products ranked by mean review rating, labelled ``"name (brand)"``.

    Only reviews of products present in ``products`` are counted.
    """
    labels = {p.product.id: f"{p.product.name} ({p.brand.name})" for p in products}
    ratings: dict[str, list[int]] = defaultdict(list)
    for review in reviews:
        if review.product_id in labels:
            ratings[review.product_id].append(review.rating)
    return _rank(ratings, labels, limit, "")


def global_stats(
    products: list[ProductWithBrand],
    total_providers: int,
    now: datetime | None = None,
) -> GlobalStats:
    """Totals plus the mean of each product's days remaining, clamped at zero."""
    remaining = sum(
        compute_status(p.product.warranty_expiration, now).display_days_remaining
        for p in products
    )
    average = remaining / max(len(products), 1)
    return GlobalStats(
        total_products=len(products),
        total_providers=total_providers,
        avg_warranty_days_remaining=int(round_half_up(average)),
    )


class AnalyticsService:
    """Builds the analytics report on demand."""

    def __init__(
        self,
        projections: ProjectionService,
        review_repo: ReviewRepository,
        provider_repo: ServiceProviderRepository,
        provider_review_repo: ServiceProviderReviewRepository,
        *,
        top_n: int = TOP_N,
    ) -> None:
        self._projections = projections
        self._review_repo = review_repo
        self._provider_repo = provider_repo
        self._provider_review_repo = provider_review_repo
        self._top_n = top_n

    async def build_report(self, now: datetime | None = None) -> AnalyticsReport:
        products = await self._projections.list_products()
        providers = await self._provider_repo.get_all()
        reviews = await self._review_repo.get_all()
        provider_reviews = await self._provider_review_repo.get_all()

        report = AnalyticsReport(
            top_brands=top_brands(products, self._top_n),
            top_rated_providers=top_rated_providers(providers, provider_reviews, self._top_n),
            top_rated_products=top_rated_products(products, reviews, self._top_n),
            stats=global_stats(products, len(providers), now),
        )
        logger.debug(
            "Analytics built over %d products, %d providers, %d reviews",
            len(products), len(providers), len(reviews) + len(provider_reviews),
        )
        return report
