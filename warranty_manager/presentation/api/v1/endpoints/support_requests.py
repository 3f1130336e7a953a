"""Support request endpoints — filing a claim sends the manufacturer e-mail."""

from fastapi import APIRouter, Depends, HTTPException, status

from warranty_manager.application.schemas import (
    SupportRequestCreate,
    SupportRequestReceiptResponse,
    SupportRequestResponse,
    SupportRequestUpdate,
    SupportRequestWithProductResponse,
)
from warranty_manager.application.services import ProjectionService, SupportRequestService
from warranty_manager.domain.exceptions import EntityNotFoundError
from warranty_manager.infrastructure.dependencies import (
    get_owner_id,
    get_projection_service,
    get_support_request_service,
)
from warranty_manager.presentation.api.v1.mappers import to_support_request_with_product

router = APIRouter(prefix="/support-requests", tags=["Support Requests"])


@router.get("/history", response_model=list[SupportRequestWithProductResponse])
async def support_history(
    projections: ProjectionService = Depends(get_projection_service),
) -> list[SupportRequestWithProductResponse]:
    """Every support request with its product and brand, newest first."""
    return [to_support_request_with_product(r) for r in await projections.support_history()]


@router.get("/{request_id}", response_model=SupportRequestResponse)
async def get_support_request(
    request_id: str,
    service: SupportRequestService = Depends(get_support_request_service),
) -> SupportRequestResponse:
    try:
        request = await service.get_request(request_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return SupportRequestResponse.model_validate(request, from_attributes=True)


@router.post(
    "", response_model=SupportRequestReceiptResponse, status_code=status.HTTP_201_CREATED
)
async def file_support_request(
    data: SupportRequestCreate,
    owner_id: str = Depends(get_owner_id),
    service: SupportRequestService = Depends(get_support_request_service),
) -> SupportRequestReceiptResponse:
    """File a warranty claim with the product's manufacturer."""
    try:
        receipt = await service.file_request(data, owner_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return SupportRequestReceiptResponse(
        support_request=SupportRequestResponse.model_validate(
            receipt.support_request, from_attributes=True
        ),
        email_sent=receipt.email_sent,
        email_to=receipt.email.to,
        email_subject=receipt.email.subject,
    )


@router.patch("/{request_id}", response_model=SupportRequestResponse)
async def update_support_request(
    request_id: str,
    data: SupportRequestUpdate,
    service: SupportRequestService = Depends(get_support_request_service),
) -> SupportRequestResponse:
    try:
        request = await service.update_request(request_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return SupportRequestResponse.model_validate(request, from_attributes=True)
