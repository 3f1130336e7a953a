"""Pydantic DTOs for support requests."""

from datetime import datetime

from pydantic import BaseModel, Field

from warranty_manager.domain.entities import (
    IssueCategory,
    IssueSeverity,
    SupportRequestStatus,
)


class SupportRequestCreate(BaseModel):
    """Schema for filing a support request. Status and timestamps are server-set."""

    product_id: str = Field(..., min_length=1)
    issue_description: str = Field(..., min_length=1)
    category: IssueCategory
    severity: IssueSeverity


class SupportRequestUpdate(BaseModel):
    status: SupportRequestStatus | None = None
    issue_description: str | None = Field(None, min_length=1)
    category: IssueCategory | None = None
    severity: IssueSeverity | None = None


class SupportRequestResponse(BaseModel):
    id: str
    product_id: str
    issue_description: str
    category: IssueCategory
    severity: IssueSeverity
    status: SupportRequestStatus
    email_sent_at: datetime | None
    created_at: datetime

    model_config = {"from_attributes": True}


class SupportRequestReceiptResponse(BaseModel):
    support_request: SupportRequestResponse
    email_sent: bool
    email_to: str
    email_subject: str
