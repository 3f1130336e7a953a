"""Domain entity for registered products and their warranty extensions."""

from dataclasses import dataclass, field
from datetime import date
from uuid import uuid4

MAX_PHOTOS = 5


@dataclass
class WarrantyExtension:
    """An insurance-backed override of the default warranty period."""

    extended_expiration_date: date
    insurance_provider: str
    policy_number: str
    agent_name: str = ""
    extension_cost: int = 0  # smallest currency unit (cents)


@dataclass
class Product:
    """A product registered by the user, owned by exactly one Brand.

    ``warranty_expiration`` is derived: purchase date + the legal warranty
    period, unless ``has_extension`` is set, in which case it equals
    ``extended_expiration_date``.
    """

    brand_id: str
    name: str
    model: str
    category: str
    purchase_date: date
    warranty_expiration: date
    id: str = field(default_factory=lambda: str(uuid4()))
    serial_number: str | None = None
    receipt_url: str | None = None
    photo_urls: list[str] = field(default_factory=list)
    notes: str | None = None

    has_extension: bool = False
    extended_expiration_date: date | None = None
    insurance_provider: str | None = None
    agent_name: str | None = None
    policy_number: str | None = None
    extension_cost: int | None = None

    def update(
        self,
        *,
        name: str | None = None,
        model: str | None = None,
        serial_number: str | None = ...,  # type: ignore[assignment]
        category: str | None = None,
        purchase_date: date | None = None,
        receipt_url: str | None = ...,  # type: ignore[assignment]
        photo_urls: list[str] | None = None,
        notes: str | None = ...,  # type: ignore[assignment]
    ) -> None:
        """Apply a partial update. Warranty fields are recomputed by the caller.

        Optional fields default to ``...`` so an explicit ``None`` clears them.
        """
        if name is not None:
            self.name = name
        if model is not None:
            self.model = model
        if serial_number is not ...:
            self.serial_number = serial_number
        if category is not None:
            self.category = category
        if purchase_date is not None:
            self.purchase_date = purchase_date
        if receipt_url is not ...:
            self.receipt_url = receipt_url
        if photo_urls is not None:
            self.photo_urls = list(photo_urls[:MAX_PHOTOS])
        if notes is not ...:
            self.notes = notes
