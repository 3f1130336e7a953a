"""Service provider (repair shop) endpoints and provider reviews."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from warranty_manager.application.schemas import (
    ServiceProviderCreate,
    ServiceProviderResponse,
    ServiceProviderReviewCreate,
    ServiceProviderReviewResponse,
    ServiceProviderUpdate,
    ServiceProviderWithReviewsResponse,
)
from warranty_manager.application.services import ServiceProviderService
from warranty_manager.domain.exceptions import EntityNotFoundError
from warranty_manager.infrastructure.dependencies import get_service_provider_service

router = APIRouter(prefix="/service-providers", tags=["Service Providers"])


@router.get("", response_model=list[ServiceProviderResponse])
async def list_providers(
    district: str | None = Query(None, description="Filter by district (case-insensitive)"),
    service: ServiceProviderService = Depends(get_service_provider_service),
) -> list[ServiceProviderResponse]:
    """Providers ordered by average rating, best first."""
    providers = await service.list_providers(district)
    return [ServiceProviderResponse.model_validate(p, from_attributes=True) for p in providers]


@router.get("/{provider_id}", response_model=ServiceProviderWithReviewsResponse)
async def get_provider(
    provider_id: str,
    service: ServiceProviderService = Depends(get_service_provider_service),
) -> ServiceProviderWithReviewsResponse:
    try:
        projected = await service.get_provider_with_reviews(provider_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ServiceProviderWithReviewsResponse(
        **ServiceProviderResponse.model_validate(projected.provider).model_dump(),
        reviews=[ServiceProviderReviewResponse.model_validate(r) for r in projected.reviews],
        average_rating_value=projected.average_rating_value,
    )


@router.post("", response_model=ServiceProviderResponse, status_code=status.HTTP_201_CREATED)
async def create_provider(
    data: ServiceProviderCreate,
    service: ServiceProviderService = Depends(get_service_provider_service),
) -> ServiceProviderResponse:
    provider = await service.create_provider(data)
    return ServiceProviderResponse.model_validate(provider, from_attributes=True)


@router.patch("/{provider_id}", response_model=ServiceProviderResponse)
async def update_provider(
    provider_id: str,
    data: ServiceProviderUpdate,
    service: ServiceProviderService = Depends(get_service_provider_service),
) -> ServiceProviderResponse:
    try:
        provider = await service.update_provider(provider_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ServiceProviderResponse.model_validate(provider, from_attributes=True)


@router.delete("/{provider_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_provider(
    provider_id: str,
    service: ServiceProviderService = Depends(get_service_provider_service),
) -> None:
    """Delete a provider and its reviews."""
    if not await service.delete_provider(provider_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"ServiceProvider with id '{provider_id}' not found",
        )


@router.post(
    "/reviews",
    response_model=ServiceProviderReviewResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_provider_review(
    data: ServiceProviderReviewCreate,
    service: ServiceProviderService = Depends(get_service_provider_service),
) -> ServiceProviderReviewResponse:
    """Rate a provider; its stored average is recomputed."""
    try:
        review = await service.add_review(data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ServiceProviderReviewResponse.model_validate(review, from_attributes=True)
