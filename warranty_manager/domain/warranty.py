"""Warranty lifecycle rules — pure functions, no I/O.

Covers the default expiration date (purchase date + legal period),
insurance-backed extensions, and the days-remaining / status derivation
used by projections, analytics and certificate renderers.
"""

import calendar
import math
from dataclasses import dataclass, replace
from datetime import date, datetime, time, timezone
from enum import Enum

from warranty_manager.domain.entities.product import Product, WarrantyExtension
from warranty_manager.domain.exceptions import InvalidExtensionError

DEFAULT_WARRANTY_YEARS = 3
EXPIRING_SOON_DAYS = 90
_SECONDS_PER_DAY = 86_400


class WarrantyTier(str, Enum):
    VALID = "valid"
    EXPIRING_SOON = "expiring_soon"
    EXPIRED = "expired"


@dataclass(frozen=True)
class WarrantyStatus:
    """Status derived from one raw signed day count.

    ``days_remaining`` keeps its sign and drives ``expired``;
    ``display_days_remaining`` is the same value clamped at zero for
    user-facing output.
    """

    warranty_expiration: date
    days_remaining: int
    expired: bool
    expiring_soon: bool

    @property
    def display_days_remaining(self) -> int:
        return max(self.days_remaining, 0)

    @property
    def tier(self) -> WarrantyTier:
        if self.expired:
            return WarrantyTier.EXPIRED
        if self.expiring_soon:
            return WarrantyTier.EXPIRING_SOON
        return WarrantyTier.VALID


def add_years(start: date, years: int) -> date:
    """Shift a date by whole calendar years, clamping Feb 29 to Feb 28."""
    target_year = start.year + years
    last_day = calendar.monthrange(target_year, start.month)[1]
    return start.replace(year=target_year, day=min(start.day, last_day))


def compute_default_expiration(
    purchase_date: date, years: int = DEFAULT_WARRANTY_YEARS
) -> date:
    """Expiration of the manufacturer warranty when no extension applies."""
    if isinstance(purchase_date, datetime):
        purchase_date = purchase_date.date()
    return add_years(purchase_date, years)


def check_extension_date(
    product_id: str,
    purchase_date: date,
    extended_expiration_date: date,
    years: int = DEFAULT_WARRANTY_YEARS,
) -> None:
    """Raise ``InvalidExtensionError`` unless the extension outlasts the default warranty."""
    default_expiration = compute_default_expiration(purchase_date, years)
    if extended_expiration_date <= default_expiration:
        raise InvalidExtensionError(
            product_id,
            f"extended date {extended_expiration_date.isoformat()} must be "
            f"after the default expiration {default_expiration.isoformat()}",
        )


def apply_extension(
    product: Product,
    extension: WarrantyExtension,
    *,
    years: int = DEFAULT_WARRANTY_YEARS,
    enforce_later: bool = True,
) -> Product:
    """Return a copy of ``product`` with the extension applied.

    The extended date replaces ``warranty_expiration`` regardless of any
    earlier extension. With ``enforce_later`` the extended date must fall
    after the default expiration computed from the purchase date.
    """
    if enforce_later:
        check_extension_date(
            product.id, product.purchase_date, extension.extended_expiration_date, years
        )

    return replace(
        product,
        has_extension=True,
        extended_expiration_date=extension.extended_expiration_date,
        insurance_provider=extension.insurance_provider,
        agent_name=extension.agent_name or "",
        policy_number=extension.policy_number,
        extension_cost=extension.extension_cost or 0,
        warranty_expiration=extension.extended_expiration_date,
        photo_urls=list(product.photo_urls),
    )


def recompute_expiration(product: Product, years: int = DEFAULT_WARRANTY_YEARS) -> date:
    """Expiration implied by the product's current state."""
    if product.has_extension and product.extended_expiration_date is not None:
        return product.extended_expiration_date
    return compute_default_expiration(product.purchase_date, years)


def compute_status(
    warranty_expiration: date,
    now: datetime | date | None = None,
    *,
    expiring_soon_days: int = EXPIRING_SOON_DAYS,
) -> WarrantyStatus:
    """Derive days remaining and expiry flags for an expiration date.

    ``days_remaining`` is ``ceil((expiration - now) / 1 day)``; calendar
    dates are taken at midnight UTC and naive datetimes are read as UTC.
    """
    expires_at = _as_utc_datetime(warranty_expiration)
    current = _as_utc_datetime(now if now is not None else datetime.now(timezone.utc))

    seconds = (expires_at - current).total_seconds()
    days_remaining = math.ceil(seconds / _SECONDS_PER_DAY)

    expired = days_remaining < 0
    return WarrantyStatus(
        warranty_expiration=expires_at.date(),
        days_remaining=days_remaining,
        expired=expired,
        expiring_soon=not expired and days_remaining <= expiring_soon_days,
    )


def _as_utc_datetime(value: datetime | date) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return datetime.combine(value, time.min, tzinfo=timezone.utc)
