"""Pydantic DTOs for service providers and provider reviews."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from warranty_manager.domain.entities import District


class ServiceProviderCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=255)
    email: EmailStr
    phone: str | None = Field(None, max_length=50)
    website: str | None = None
    address: str = Field(..., min_length=5)
    city: str = Field(..., min_length=2)
    district: District
    supported_brands: list[str] = Field(default_factory=list)


class ServiceProviderUpdate(BaseModel):
    name: str | None = Field(None, min_length=2, max_length=255)
    email: EmailStr | None = None
    phone: str | None = None
    website: str | None = None
    address: str | None = Field(None, min_length=5)
    city: str | None = Field(None, min_length=2)
    district: District | None = None
    supported_brands: list[str] | None = None


class ServiceProviderResponse(BaseModel):
    id: str
    name: str
    email: str
    phone: str | None
    website: str | None
    address: str
    city: str
    district: str
    supported_brands: list[str]
    average_rating: int
    created_at: datetime

    model_config = {"from_attributes": True}


class ServiceProviderReviewCreate(BaseModel):
    provider_id: str = Field(..., min_length=1)
    rating: int = Field(..., ge=1, le=5)
    comment: str | None = None


class ServiceProviderReviewResponse(BaseModel):
    id: str
    provider_id: str
    rating: int
    comment: str | None
    created_at: datetime

    model_config = {"from_attributes": True}


class ServiceProviderWithReviewsResponse(ServiceProviderResponse):
    reviews: list[ServiceProviderReviewResponse]
    average_rating_value: float
