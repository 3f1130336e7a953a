"""Client profile endpoints, scoped by the ``X-Owner-Id`` header."""

from fastapi import APIRouter, Depends, HTTPException, status

from warranty_manager.application.schemas import (
    ClientProfileResponse,
    ClientProfileSave,
    ClientProfileUpdate,
)
from warranty_manager.application.services import ClientProfileService
from warranty_manager.infrastructure.dependencies import get_client_profile_service, get_owner_id

router = APIRouter(prefix="/profile", tags=["Client Profile"])


@router.get("", response_model=ClientProfileResponse)
async def get_profile(
    owner_id: str = Depends(get_owner_id),
    service: ClientProfileService = Depends(get_client_profile_service),
) -> ClientProfileResponse:
    profile = await service.get_profile(owner_id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    return ClientProfileResponse.model_validate(profile, from_attributes=True)


@router.put("", response_model=ClientProfileResponse)
async def save_profile(
    data: ClientProfileSave,
    owner_id: str = Depends(get_owner_id),
    service: ClientProfileService = Depends(get_client_profile_service),
) -> ClientProfileResponse:
    """Create the owner's profile, or replace it if one exists."""
    profile = await service.save_profile(owner_id, data)
    return ClientProfileResponse.model_validate(profile, from_attributes=True)


@router.patch("", response_model=ClientProfileResponse)
async def update_profile(
    data: ClientProfileUpdate,
    owner_id: str = Depends(get_owner_id),
    service: ClientProfileService = Depends(get_client_profile_service),
) -> ClientProfileResponse:
    profile = await service.update_profile(owner_id, data)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    return ClientProfileResponse.model_validate(profile, from_attributes=True)
