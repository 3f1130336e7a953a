"""Domain entity — the client's personal data used in support e-mails."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class ClientProfile:
    """Contact details of the person filing support requests.

    Profiles are keyed by ``owner_id`` (the user/session identity), so there
    is at most one profile per owner.
    """

    owner_id: str
    full_name: str
    email: str
    phone_number: str
    address: str
    city: str
    id: str = field(default_factory=lambda: str(uuid4()))
    tax_number: str | None = None
    postal_code: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(
        self,
        *,
        full_name: str | None = None,
        email: str | None = None,
        phone_number: str | None = None,
        tax_number: str | None = ...,  # type: ignore[assignment]
        address: str | None = None,
        city: str | None = None,
        postal_code: str | None = ...,  # type: ignore[assignment]
    ) -> None:
        """Update mutable fields and refresh the updated_at timestamp."""
        if full_name is not None:
            self.full_name = full_name
        if email is not None:
            self.email = email
        if phone_number is not None:
            self.phone_number = phone_number
        if tax_number is not ...:
            self.tax_number = tax_number
        if address is not None:
            self.address = address
        if city is not None:
            self.city = city
        if postal_code is not ...:
            self.postal_code = postal_code
        self.updated_at = datetime.now(timezone.utc)
