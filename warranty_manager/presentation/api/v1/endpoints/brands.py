"""Brand endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from warranty_manager.application.schemas import (
    BrandCreate,
    BrandResponse,
    BrandUpdate,
    ProductWithBrandResponse,
)
from warranty_manager.application.services import BrandService, ProjectionService
from warranty_manager.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from warranty_manager.infrastructure.dependencies import get_brand_service, get_projection_service
from warranty_manager.presentation.api.v1.mappers import to_product_with_brand

router = APIRouter(prefix="/brands", tags=["Brands"])


@router.get("", response_model=list[BrandResponse])
async def list_brands(
    service: BrandService = Depends(get_brand_service),
) -> list[BrandResponse]:
    """All brands, alphabetically."""
    brands = await service.list_brands()
    return [BrandResponse.model_validate(b, from_attributes=True) for b in brands]


@router.get("/{brand_id}", response_model=BrandResponse)
async def get_brand(
    brand_id: str,
    service: BrandService = Depends(get_brand_service),
) -> BrandResponse:
    try:
        brand = await service.get_brand(brand_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return BrandResponse.model_validate(brand, from_attributes=True)


@router.get("/{brand_id}/products", response_model=list[ProductWithBrandResponse])
async def list_brand_products(
    brand_id: str,
    projections: ProjectionService = Depends(get_projection_service),
) -> list[ProductWithBrandResponse]:
    products = await projections.list_products_by_brand(brand_id)
    return [to_product_with_brand(p) for p in products]


@router.post("", response_model=BrandResponse, status_code=status.HTTP_201_CREATED)
async def create_brand(
    data: BrandCreate,
    service: BrandService = Depends(get_brand_service),
) -> BrandResponse:
    """Register a new brand. Names are unique."""
    try:
        brand = await service.create_brand(data)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return BrandResponse.model_validate(brand, from_attributes=True)


@router.patch("/{brand_id}", response_model=BrandResponse)
async def update_brand(
    brand_id: str,
    data: BrandUpdate,
    service: BrandService = Depends(get_brand_service),
) -> BrandResponse:
    try:
        brand = await service.update_brand(brand_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return BrandResponse.model_validate(brand, from_attributes=True)
