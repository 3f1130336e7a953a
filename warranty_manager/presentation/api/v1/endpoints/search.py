"""Free-text search over products and brands."""

from fastapi import APIRouter, Depends, Query

from warranty_manager.application.schemas import BrandResponse, SearchResponse
from warranty_manager.application.services import BrandService, ProjectionService
from warranty_manager.infrastructure.dependencies import get_brand_service, get_projection_service
from warranty_manager.presentation.api.v1.mappers import to_product_with_brand

router = APIRouter(prefix="/search", tags=["Search"])

MIN_QUERY_LENGTH = 2


@router.get("", response_model=SearchResponse)
async def search(
    q: str = Query("", description="Matches product name/model and brand name/category"),
    projections: ProjectionService = Depends(get_projection_service),
    brands: BrandService = Depends(get_brand_service),
) -> SearchResponse:
    query = q.strip()
    if len(query) < MIN_QUERY_LENGTH:
        return SearchResponse()
    products = await projections.search_products(query)
    matched_brands = await brands.search_brands(query)
    return SearchResponse(
        products=[to_product_with_brand(p) for p in products],
        brands=[BrandResponse.model_validate(b, from_attributes=True) for b in matched_brands],
    )
