"""Value objects produced by the analytics aggregation."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class BrandCount:
    id: str
    name: str
    product_count: int


@dataclass(frozen=True)
class RatedItem:
    """A provider or product ranked by mean rating (one decimal place)."""

    id: str
    name: str
    rating: float
    review_count: int


@dataclass(frozen=True)
class GlobalStats:
    total_products: int
    total_providers: int
    avg_warranty_days_remaining: int


@dataclass
class AnalyticsReport:
    top_brands: list[BrandCount] = field(default_factory=list)
    top_rated_providers: list[RatedItem] = field(default_factory=list)
    top_rated_products: list[RatedItem] = field(default_factory=list)
    stats: GlobalStats = field(default_factory=lambda: GlobalStats(0, 0, 0))
