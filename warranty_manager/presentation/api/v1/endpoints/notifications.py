"""Warranty reminder notification endpoints (fed by an external scheduler)."""

from fastapi import APIRouter, Depends, HTTPException, status

from warranty_manager.application.schemas import NotificationCreate, NotificationResponse
from warranty_manager.application.services import NotificationService
from warranty_manager.domain.exceptions import EntityNotFoundError
from warranty_manager.infrastructure.dependencies import get_notification_service

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("/unsent", response_model=list[NotificationResponse])
async def list_unsent(
    service: NotificationService = Depends(get_notification_service),
) -> list[NotificationResponse]:
    """Pending reminders, oldest first."""
    notifications = await service.list_unsent()
    return [NotificationResponse.model_validate(n, from_attributes=True) for n in notifications]


@router.post("", response_model=NotificationResponse, status_code=status.HTTP_201_CREATED)
async def create_notification(
    data: NotificationCreate,
    service: NotificationService = Depends(get_notification_service),
) -> NotificationResponse:
    try:
        notification = await service.create_notification(data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return NotificationResponse.model_validate(notification, from_attributes=True)


@router.post("/{notification_id}/mark-sent", status_code=status.HTTP_204_NO_CONTENT)
async def mark_sent(
    notification_id: str,
    service: NotificationService = Depends(get_notification_service),
) -> None:
    if not await service.mark_sent(notification_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Notification with id '{notification_id}' not found",
        )
