"""Unit tests for brands, reviews, notifications, favorites and the client profile."""

from datetime import date

import pytest

from warranty_manager.application.schemas import (
    BrandCreate,
    BrandUpdate,
    ClientProfileSave,
    ClientProfileUpdate,
    NotificationCreate,
    ReviewCreate,
)
from warranty_manager.application.services import (
    BrandService,
    ClientProfileService,
    FavoriteService,
    NotificationService,
    ReviewService,
)
from warranty_manager.domain.entities import FavoriteType, NotificationType, Product
from warranty_manager.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from tests.fakes import (
    FakeBrandRepository,
    FakeClientProfileRepository,
    FakeFavoriteRepository,
    FakeNotificationRepository,
    FakeProductRepository,
    FakeReviewRepository,
)


@pytest.fixture
def products() -> FakeProductRepository:
    repo = FakeProductRepository()
    product = Product(
        id="p1",
        brand_id="acme",
        name="Widget",
        model="W-1",
        category="Gadgets",
        purchase_date=date(2023, 1, 15),
        warranty_expiration=date(2026, 1, 15),
    )
    repo.products[product.id] = product
    return repo


# ── Brands ───────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_brand_names_are_unique():
    service = BrandService(FakeBrandRepository())
    await service.create_brand(BrandCreate(name="Acme", support_email="svc@acme.com", category="X"))
    with pytest.raises(DuplicateEntityError):
        await service.create_brand(
            BrandCreate(name="Acme", support_email="other@acme.com", category="X")
        )


@pytest.mark.asyncio
async def test_brand_update_normalizes_country_codes():
    service = BrandService(FakeBrandRepository())
    brand = await service.create_brand(
        BrandCreate(name="Acme", support_email="svc@acme.com", category="X")
    )
    updated = await service.update_brand(
        brand.id, BrandUpdate(country_emails={"pt": "apoio@acme.pt"})
    )
    assert updated.country_emails == {"PT": "apoio@acme.pt"}
    assert updated.support_email_for("PT") == "apoio@acme.pt"
    assert updated.category == "X"


@pytest.mark.asyncio
async def test_brand_search_matches_category():
    service = BrandService(FakeBrandRepository())
    await service.create_brand(
        BrandCreate(name="Acme", support_email="svc@acme.com", category="Eletrodomésticos")
    )
    assert [b.name for b in await service.search_brands("eletro")] == ["Acme"]


# ── Reviews ──────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_review_defaults(products: FakeProductRepository):
    service = ReviewService(FakeReviewRepository(), products)
    review = await service.create_review(ReviewCreate(product_id="p1", rating=4))
    assert review.pros == []
    assert review.cons == []
    assert review.recommend is True
    assert await service.list_for_product("p1") == [review]


@pytest.mark.asyncio
async def test_review_requires_product(products: FakeProductRepository):
    service = ReviewService(FakeReviewRepository(), products)
    with pytest.raises(EntityNotFoundError):
        await service.create_review(ReviewCreate(product_id="nope", rating=4))


def test_review_rating_is_bounded():
    with pytest.raises(ValueError):
        ReviewCreate(product_id="p1", rating=6)


# ── Notifications ────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_notifications_lifecycle(products: FakeProductRepository):
    service = NotificationService(FakeNotificationRepository(), products)
    notification = await service.create_notification(
        NotificationCreate(product_id="p1", type=NotificationType.DAYS_30)
    )
    assert notification.sent is False
    assert await service.list_unsent() == [notification]

    assert await service.mark_sent(notification.id) is True
    assert await service.list_unsent() == []
    assert await service.mark_sent("unknown") is False


# ── Favorites ────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_favorite_toggle():
    service = FavoriteService(FakeFavoriteRepository())
    assert await service.toggle(FavoriteType.PRODUCT, "p1") is True
    assert await service.is_favorite(FavoriteType.PRODUCT, "p1") is True
    assert await service.is_favorite(FavoriteType.PROVIDER, "p1") is False
    assert await service.list_favorites(FavoriteType.PRODUCT) == ["p1"]

    assert await service.toggle(FavoriteType.PRODUCT, "p1") is False
    assert await service.list_favorites(FavoriteType.PRODUCT) == []


# ── Client profile ───────────────────────────────────────────────────


def _profile(**overrides) -> ClientProfileSave:
    fields = dict(
        full_name="Ana Silva",
        email="ana@example.com",
        phone_number="912345678",
        address="Rua das Flores 10",
        city="Porto",
        tax_number="123456789",
    )
    fields.update(overrides)
    return ClientProfileSave(**fields)


@pytest.mark.asyncio
async def test_save_profile_creates_then_replaces():
    service = ClientProfileService(FakeClientProfileRepository())
    assert await service.get_profile("ana") is None

    created = await service.save_profile("ana", _profile())
    replaced = await service.save_profile("ana", _profile(city="Braga", tax_number=None))

    assert replaced.id == created.id
    assert replaced.city == "Braga"
    assert replaced.tax_number is None


@pytest.mark.asyncio
async def test_profiles_are_per_owner():
    service = ClientProfileService(FakeClientProfileRepository())
    await service.save_profile("ana", _profile())
    assert await service.get_profile("rui") is None


@pytest.mark.asyncio
async def test_update_profile_requires_existing():
    service = ClientProfileService(FakeClientProfileRepository())
    assert await service.update_profile("ana", ClientProfileUpdate(city="Faro")) is None

    await service.save_profile("ana", _profile())
    updated = await service.update_profile("ana", ClientProfileUpdate(city="Faro"))
    assert updated.city == "Faro"
    assert updated.full_name == "Ana Silva"
