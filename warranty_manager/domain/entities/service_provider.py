"""Domain entities for repair/assistance service providers and their reviews."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4


class District(str, Enum):
    """Fixed districts used to filter providers by locality."""

    LISBOA = "Lisboa"
    PORTO = "Porto"
    BRAGA = "Braga"
    AVEIRO = "Aveiro"
    COVILHA = "Covilhã"
    FARO = "Faro"
    SETUBAL = "Setúbal"
    LEIRIA = "Leiria"
    SANTAREM = "Santarém"
    CASTELO_BRANCO = "Castelo Branco"
    BEJA = "Beja"
    EVORA = "Évora"


@dataclass
class ServiceProvider:
    """A company offering repairs or assistance for a set of brands.

    ``average_rating`` is the persisted, integer-rounded mean of the
    provider's reviews, refreshed every time a review is added.
    """

    name: str
    email: str
    address: str
    city: str
    district: str
    id: str = field(default_factory=lambda: str(uuid4()))
    phone: str | None = None
    website: str | None = None
    supported_brands: list[str] = field(default_factory=list)
    average_rating: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(
        self,
        *,
        name: str | None = None,
        email: str | None = None,
        phone: str | None = ...,  # type: ignore[assignment]
        website: str | None = ...,  # type: ignore[assignment]
        address: str | None = None,
        city: str | None = None,
        district: str | None = None,
        supported_brands: list[str] | None = None,
    ) -> None:
        if name is not None:
            self.name = name
        if email is not None:
            self.email = email
        if phone is not ...:
            self.phone = phone
        if website is not ...:
            self.website = website
        if address is not None:
            self.address = address
        if city is not None:
            self.city = city
        if district is not None:
            self.district = district
        if supported_brands is not None:
            self.supported_brands = list(supported_brands)


@dataclass
class ServiceProviderReview:
    """A rating (1–5) left on a service provider."""

    provider_id: str
    rating: int
    id: str = field(default_factory=lambda: str(uuid4()))
    comment: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
