"""Pydantic DTOs for warranty reminder notifications."""

from datetime import datetime

from pydantic import BaseModel, Field

from warranty_manager.domain.entities import NotificationType


class NotificationCreate(BaseModel):
    product_id: str = Field(..., min_length=1)
    type: NotificationType


class NotificationResponse(BaseModel):
    id: str
    product_id: str
    type: NotificationType
    sent: bool
    sent_at: datetime | None
    created_at: datetime

    model_config = {"from_attributes": True}
