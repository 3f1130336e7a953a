"""Pydantic DTOs for products, warranty extensions and warranty status."""

from datetime import date

from pydantic import BaseModel, Field

from warranty_manager.domain.entities import MAX_PHOTOS
from warranty_manager.domain.warranty import WarrantyTier

from .brand import BrandResponse
from .review import ReviewResponse
from .support_request import SupportRequestResponse


class ProductCreate(BaseModel):
    """Schema for registering a product. The warranty expiration is computed."""

    brand_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=255)
    model: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1, max_length=100)
    purchase_date: date
    serial_number: str | None = Field(None, max_length=255)
    receipt_url: str | None = None
    photo_urls: list[str] = Field(default_factory=list, max_length=MAX_PHOTOS)
    notes: str | None = None


class ProductUpdate(BaseModel):
    """Partial product update — all fields optional."""

    name: str | None = Field(None, min_length=1, max_length=255)
    model: str | None = Field(None, min_length=1, max_length=255)
    serial_number: str | None = None
    category: str | None = Field(None, min_length=1, max_length=100)
    purchase_date: date | None = None
    receipt_url: str | None = None
    photo_urls: list[str] | None = Field(None, max_length=MAX_PHOTOS)
    notes: str | None = None


class WarrantyExtensionRequest(BaseModel):
    extended_expiration_date: date
    insurance_provider: str = Field(..., min_length=1)
    policy_number: str = Field(..., min_length=1)
    agent_name: str = ""
    extension_cost: int = Field(0, ge=0, description="Cost in cents")


class WarrantyStatusResponse(BaseModel):
    warranty_expiration: date
    days_remaining: int
    display_days_remaining: int
    expired: bool
    expiring_soon: bool
    tier: WarrantyTier

    model_config = {"from_attributes": True}


class ProductResponse(BaseModel):
    id: str
    brand_id: str
    name: str
    model: str
    serial_number: str | None
    category: str
    purchase_date: date
    warranty_expiration: date
    receipt_url: str | None
    photo_urls: list[str]
    notes: str | None
    has_extension: bool
    extended_expiration_date: date | None
    insurance_provider: str | None
    agent_name: str | None
    policy_number: str | None
    extension_cost: int | None

    model_config = {"from_attributes": True}


class ProductWithBrandResponse(ProductResponse):
    brand: BrandResponse
    warranty: WarrantyStatusResponse


class ProductWithDetailsResponse(ProductWithBrandResponse):
    reviews: list[ReviewResponse]
    support_requests: list[SupportRequestResponse]


class SearchResponse(BaseModel):
    products: list[ProductWithBrandResponse] = Field(default_factory=list)
    brands: list[BrandResponse] = Field(default_factory=list)


class ReviewWithProductResponse(ReviewResponse):
    product: ProductWithBrandResponse


class SupportRequestWithProductResponse(SupportRequestResponse):
    product: ProductWithBrandResponse
