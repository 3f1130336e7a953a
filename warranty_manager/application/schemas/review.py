"""Pydantic DTOs for product reviews."""

from datetime import datetime

from pydantic import BaseModel, Field


class ReviewCreate(BaseModel):
    product_id: str = Field(..., min_length=1)
    rating: int = Field(..., ge=1, le=5)
    title: str | None = Field(None, max_length=255)
    content: str | None = None
    pros: list[str] = Field(default_factory=list)
    cons: list[str] = Field(default_factory=list)
    recommend: bool = True


class ReviewResponse(BaseModel):
    id: str
    product_id: str
    rating: int
    title: str | None
    content: str | None
    pros: list[str]
    cons: list[str]
    recommend: bool
    created_at: datetime

    model_config = {"from_attributes": True}
