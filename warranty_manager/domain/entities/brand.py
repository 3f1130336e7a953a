"""Domain entity for manufacturer brands."""

from dataclasses import dataclass, field
from uuid import uuid4


@dataclass
class Brand:
    """A manufacturer whose products can be registered.

    ``country_emails`` maps ISO country codes to a country-specific support
    address; ``support_email`` is the fallback for every other country.
    """

    name: str
    support_email: str
    category: str
    id: str = field(default_factory=lambda: str(uuid4()))
    logo_url: str | None = None
    support_phone: str | None = None
    website: str | None = None
    country_emails: dict[str, str] | None = None

    def support_email_for(self, country_code: str | None) -> str:
        """Return the support address for a country, falling back to the main one."""
        if not country_code or not self.country_emails:
            return self.support_email
        return self.country_emails.get(country_code.upper(), self.support_email)

    def update(
        self,
        *,
        logo_url: str | None = ...,  # type: ignore[assignment]
        support_email: str | None = None,
        support_phone: str | None = ...,  # type: ignore[assignment]
        website: str | None = ...,  # type: ignore[assignment]
        category: str | None = None,
        country_emails: dict[str, str] | None = ...,  # type: ignore[assignment]
    ) -> None:
        """Apply an explicit partial update; omitted fields are left untouched, ``None`` clears optional ones."""
        if logo_url is not ...:
            self.logo_url = logo_url
        if support_email is not None:
            self.support_email = support_email
        if support_phone is not ...:
            self.support_phone = support_phone
        if website is not ...:
            self.website = website
        if category is not None:
            self.category = category
        if country_emails is not ...:
            self.country_emails = country_emails
