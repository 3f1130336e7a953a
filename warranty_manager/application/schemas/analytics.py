"""Pydantic DTOs for the analytics report."""

from pydantic import BaseModel


class BrandCountResponse(BaseModel):
    id: str
    name: str
    product_count: int

    model_config = {"from_attributes": True}


class RatedItemResponse(BaseModel):
    id: str
    name: str
    rating: float
    review_count: int

    model_config = {"from_attributes": True}


class GlobalStatsResponse(BaseModel):
    total_products: int
    total_providers: int
    avg_warranty_days_remaining: int

    model_config = {"from_attributes": True}


class AnalyticsResponse(BaseModel):
    top_brands: list[BrandCountResponse]
    top_rated_providers: list[RatedItemResponse]
    top_rated_products: list[RatedItemResponse]
    stats: GlobalStatsResponse

    model_config = {"from_attributes": True}
