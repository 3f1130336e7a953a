"""Pydantic DTOs for the client profile."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field


class ClientProfileSave(BaseModel):
    """Full profile payload — creates the owner's profile or replaces it."""

    full_name: str = Field(..., min_length=2)
    email: EmailStr
    phone_number: str = Field(..., min_length=9)
    tax_number: str | None = None
    address: str = Field(..., min_length=5)
    city: str = Field(..., min_length=2)
    postal_code: str | None = None


class ClientProfileUpdate(BaseModel):
    full_name: str | None = Field(None, min_length=2)
    email: EmailStr | None = None
    phone_number: str | None = Field(None, min_length=9)
    tax_number: str | None = None
    address: str | None = Field(None, min_length=5)
    city: str | None = Field(None, min_length=2)
    postal_code: str | None = None


class ClientProfileResponse(BaseModel):
    id: str
    owner_id: str
    full_name: str
    email: str
    phone_number: str
    tax_number: str | None
    address: str
    city: str
    postal_code: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
