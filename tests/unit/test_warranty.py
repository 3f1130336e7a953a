"""Unit tests for the warranty computation rules."""

from datetime import date, datetime, timezone

import pytest

from warranty_manager.domain.entities import Product, WarrantyExtension
from warranty_manager.domain.exceptions import InvalidExtensionError
from warranty_manager.domain.warranty import (
    WarrantyTier,
    apply_extension,
    compute_default_expiration,
    compute_status,
    recompute_expiration,
)


def _widget(**overrides) -> Product:
    fields = dict(
        brand_id="acme",
        name="Widget",
        model="W-1",
        category="Gadgets",
        purchase_date=date(2023, 1, 15),
        warranty_expiration=date(2026, 1, 15),
    )
    fields.update(overrides)
    return Product(**fields)


def test_default_expiration_is_three_years_after_purchase():
    assert compute_default_expiration(date(2023, 1, 15)) == date(2026, 1, 15)


def test_default_expiration_clamps_leap_day():
    assert compute_default_expiration(date(2024, 2, 29)) == date(2027, 2, 28)


def test_default_expiration_keeps_leap_day_when_target_is_leap():
    assert compute_default_expiration(date(2024, 2, 29), years=4) == date(2028, 2, 29)


def test_status_days_remaining_for_widget():
    now = datetime(2025, 6, 1, tzinfo=timezone.utc)
    status = compute_status(date(2026, 1, 15), now)
    assert status.days_remaining == 228
    assert status.expired is False
    assert status.expiring_soon is False
    assert status.tier == WarrantyTier.VALID


def test_status_rounds_partial_days_up():
    now = datetime(2026, 1, 14, 12, 0, tzinfo=timezone.utc)
    assert compute_status(date(2026, 1, 15), now).days_remaining == 1


def test_status_on_expiration_day_is_not_expired():
    now = datetime(2026, 1, 15, 0, 0, tzinfo=timezone.utc)
    status = compute_status(date(2026, 1, 15), now)
    assert status.days_remaining == 0
    assert status.expired is False
    assert status.expiring_soon is True


def test_status_after_expiration():
    now = datetime(2026, 3, 1, tzinfo=timezone.utc)
    status = compute_status(date(2026, 1, 15), now)
    assert status.days_remaining < 0
    assert status.display_days_remaining == 0
    assert status.expired is True
    assert status.tier == WarrantyTier.EXPIRED


def test_status_expiring_soon_threshold_is_inclusive():
    expiration = date(2026, 1, 15)
    at_threshold = compute_status(expiration, datetime(2025, 10, 17, tzinfo=timezone.utc))
    just_outside = compute_status(expiration, datetime(2025, 10, 16, tzinfo=timezone.utc))
    assert at_threshold.days_remaining == 90
    assert at_threshold.tier == WarrantyTier.EXPIRING_SOON
    assert just_outside.days_remaining == 91
    assert just_outside.tier == WarrantyTier.VALID


def test_naive_now_is_read_as_utc():
    aware = compute_status(date(2026, 1, 15), datetime(2025, 6, 1, tzinfo=timezone.utc))
    naive = compute_status(date(2026, 1, 15), datetime(2025, 6, 1))
    assert aware == naive


def test_extension_overrides_expiration():
    product = _widget()
    extended = apply_extension(
        product,
        WarrantyExtension(
            extended_expiration_date=date(2027, 1, 15),
            insurance_provider="Fidelidade",
            policy_number="POL-1",
        ),
    )
    assert extended.warranty_expiration == date(2027, 1, 15)
    assert extended.has_extension is True
    assert extended.agent_name == ""
    assert extended.extension_cost == 0
    # The original entity is left untouched
    assert product.has_extension is False
    assert product.warranty_expiration == date(2026, 1, 15)


def test_extension_must_be_after_default_expiration():
    with pytest.raises(InvalidExtensionError):
        apply_extension(
            _widget(),
            WarrantyExtension(
                extended_expiration_date=date(2025, 12, 1),
                insurance_provider="Fidelidade",
                policy_number="POL-1",
            ),
        )


def test_extension_check_can_be_disabled():
    extended = apply_extension(
        _widget(),
        WarrantyExtension(
            extended_expiration_date=date(2025, 12, 1),
            insurance_provider="Fidelidade",
            policy_number="POL-1",
        ),
        enforce_later=False,
    )
    assert extended.warranty_expiration == date(2025, 12, 1)


def test_recompute_expiration_prefers_extension():
    product = _widget(has_extension=True, extended_expiration_date=date(2028, 1, 1))
    assert recompute_expiration(product) == date(2028, 1, 1)
    assert recompute_expiration(_widget(purchase_date=date(2024, 5, 2))) == date(2027, 5, 2)
