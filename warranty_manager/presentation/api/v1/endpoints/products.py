"""Product endpoints: registration, warranty extension, certificate data."""

from fastapi import APIRouter, Depends, HTTPException, status

from warranty_manager.application.schemas import (
    NotificationResponse,
    ProductCreate,
    ProductResponse,
    ProductUpdate,
    ProductWithBrandResponse,
    ProductWithDetailsResponse,
    ReviewResponse,
    SupportRequestResponse,
    WarrantyExtensionRequest,
)
from warranty_manager.application.services import (
    NotificationService,
    ProductService,
    ReviewService,
    SupportRequestService,
)
from warranty_manager.domain.exceptions import EntityNotFoundError, InvalidExtensionError
from warranty_manager.infrastructure.dependencies import (
    get_notification_service,
    get_product_service,
    get_review_service,
    get_support_request_service,
)
from warranty_manager.presentation.api.v1.mappers import (
    to_product_details,
    to_product_with_brand,
)

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=list[ProductWithBrandResponse])
async def list_products(
    service: ProductService = Depends(get_product_service),
) -> list[ProductWithBrandResponse]:
    """All products with their brand, most recent purchase first."""
    return [to_product_with_brand(p) for p in await service.list_products()]


@router.get("/report", response_model=list[ProductWithBrandResponse])
async def warranty_report(
    service: ProductService = Depends(get_product_service),
) -> list[ProductWithBrandResponse]:
    """Data for the multi-product warranty report."""
    return [to_product_with_brand(c.product, c.status) for c in await service.warranty_report()]


@router.get("/{product_id}", response_model=ProductWithDetailsResponse)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> ProductWithDetailsResponse:
    """A product with brand, reviews and support history."""
    try:
        details = await service.get_product_details(product_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return to_product_details(details)


@router.get("/{product_id}/certificate", response_model=ProductWithBrandResponse)
async def get_certificate(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> ProductWithBrandResponse:
    """Data for a single-product warranty certificate."""
    try:
        certificate = await service.get_certificate(product_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return to_product_with_brand(certificate.product, certificate.status)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    data: ProductCreate,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Register a product; its warranty expiration is computed from the purchase date."""
    try:
        product = await service.create_product(data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ProductResponse.model_validate(product, from_attributes=True)


@router.patch("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str,
    data: ProductUpdate,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    try:
        product = await service.update_product(product_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidExtensionError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return ProductResponse.model_validate(product, from_attributes=True)


@router.post("/{product_id}/extension", response_model=ProductResponse)
async def add_extension(
    product_id: str,
    data: WarrantyExtensionRequest,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Attach an insurance-backed warranty extension."""
    try:
        product = await service.add_extension(product_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidExtensionError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return ProductResponse.model_validate(product, from_attributes=True)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> None:
    """Delete a product together with its reviews, support requests and notifications."""
    if not await service.delete_product(product_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product with id '{product_id}' not found",
        )


@router.get("/{product_id}/reviews", response_model=list[ReviewResponse])
async def list_product_reviews(
    product_id: str,
    service: ReviewService = Depends(get_review_service),
) -> list[ReviewResponse]:
    reviews = await service.list_for_product(product_id)
    return [ReviewResponse.model_validate(r, from_attributes=True) for r in reviews]


@router.get("/{product_id}/support-requests", response_model=list[SupportRequestResponse])
async def list_product_support_requests(
    product_id: str,
    service: SupportRequestService = Depends(get_support_request_service),
) -> list[SupportRequestResponse]:
    requests = await service.list_for_product(product_id)
    return [SupportRequestResponse.model_validate(r, from_attributes=True) for r in requests]


@router.get("/{product_id}/notifications", response_model=list[NotificationResponse])
async def list_product_notifications(
    product_id: str,
    service: NotificationService = Depends(get_notification_service),
) -> list[NotificationResponse]:
    notifications = await service.list_for_product(product_id)
    return [NotificationResponse.model_validate(n, from_attributes=True) for n in notifications]
