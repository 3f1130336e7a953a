"""Pydantic DTOs for the Brand feature."""

from pydantic import BaseModel, EmailStr, Field


class BrandCreate(BaseModel):
    """Schema for registering a new brand."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Acme"])
    support_email: EmailStr
    category: str = Field(..., min_length=1, max_length=100, examples=["Eletrodomésticos"])
    logo_url: str | None = None
    support_phone: str | None = Field(None, max_length=50)
    website: str | None = None
    country_emails: dict[str, EmailStr] | None = Field(
        None, examples=[{"PT": "apoio@acme.pt", "ES": "soporte@acme.es"}],
    )


class BrandUpdate(BaseModel):
    """Schema for updating an existing brand — all fields optional."""

    logo_url: str | None = None
    support_email: EmailStr | None = None
    support_phone: str | None = None
    website: str | None = None
    category: str | None = Field(None, min_length=1, max_length=100)
    country_emails: dict[str, EmailStr] | None = None


class BrandResponse(BaseModel):
    id: str
    name: str
    logo_url: str | None
    support_email: str
    support_phone: str | None
    website: str | None
    category: str
    country_emails: dict[str, str] | None

    model_config = {"from_attributes": True}
