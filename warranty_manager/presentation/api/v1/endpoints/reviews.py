"""Product review endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from warranty_manager.application.schemas import (
    ReviewCreate,
    ReviewResponse,
    ReviewWithProductResponse,
)
from warranty_manager.application.services import ProjectionService, ReviewService
from warranty_manager.domain.exceptions import EntityNotFoundError
from warranty_manager.infrastructure.dependencies import get_projection_service, get_review_service
from warranty_manager.presentation.api.v1.mappers import to_review_with_product

router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.get("/community", response_model=list[ReviewWithProductResponse])
async def community_reviews(
    projections: ProjectionService = Depends(get_projection_service),
) -> list[ReviewWithProductResponse]:
    """Every review with the product and brand it belongs to, newest first."""
    return [to_review_with_product(r) for r in await projections.community_reviews()]


@router.get("/{review_id}", response_model=ReviewResponse)
async def get_review(
    review_id: str,
    service: ReviewService = Depends(get_review_service),
) -> ReviewResponse:
    try:
        review = await service.get_review(review_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ReviewResponse.model_validate(review, from_attributes=True)


@router.post("", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
async def create_review(
    data: ReviewCreate,
    service: ReviewService = Depends(get_review_service),
) -> ReviewResponse:
    try:
        review = await service.create_review(data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ReviewResponse.model_validate(review, from_attributes=True)
