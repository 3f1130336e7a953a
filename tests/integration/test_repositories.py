"""Integration tests for the SQLAlchemy repositories against SQLite."""

from datetime import date

import pytest

from warranty_manager.domain.entities import (
    Brand,
    ClientProfile,
    FavoriteType,
    IssueCategory,
    IssueSeverity,
    Notification,
    NotificationType,
    Product,
    Review,
    ServiceProvider,
    ServiceProviderReview,
    SupportRequest,
)
from warranty_manager.infrastructure.database.repositories import (
    SQLAlchemyBrandRepository,
    SQLAlchemyClientProfileRepository,
    SQLAlchemyFavoriteRepository,
    SQLAlchemyNotificationRepository,
    SQLAlchemyProductRepository,
    SQLAlchemyReviewRepository,
    SQLAlchemyServiceProviderRepository,
    SQLAlchemyServiceProviderReviewRepository,
    SQLAlchemySupportRequestRepository,
)
from warranty_manager.infrastructure.database.seed import DEFAULT_BRANDS, seed_brands


async def _product(session, name: str = "Widget", purchased: date = date(2023, 1, 15)) -> Product:
    brands = SQLAlchemyBrandRepository(session)
    brand = await brands.get_by_name("Acme") or await brands.create(
        Brand(name="Acme", support_email="svc@acme.com", category="Gadgets")
    )
    return await SQLAlchemyProductRepository(session).create(
        Product(
            brand_id=brand.id,
            name=name,
            model="W-1",
            category="Gadgets",
            purchase_date=purchased,
            warranty_expiration=date(purchased.year + 3, purchased.month, purchased.day),
        )
    )


@pytest.mark.asyncio
async def test_product_round_trip_keeps_dates_and_defaults(session):
    product = await _product(session)
    stored = await SQLAlchemyProductRepository(session).get_by_id(product.id)

    assert stored.purchase_date == date(2023, 1, 15)
    assert stored.warranty_expiration == date(2026, 1, 15)
    assert stored.photo_urls == []
    assert stored.has_extension is False


@pytest.mark.asyncio
async def test_unknown_ids_are_absent_not_errors(session):
    products = SQLAlchemyProductRepository(session)
    assert await products.get_by_id("nope") is None
    assert await products.delete("nope") is False
    assert await SQLAlchemyBrandRepository(session).update(
        Brand(id="nope", name="X", support_email="x@x.com", category="X")
    ) is None


@pytest.mark.asyncio
async def test_products_ordered_by_purchase_date_desc(session):
    await _product(session, "Old", date(2021, 3, 3))
    await _product(session, "New", date(2024, 3, 3))
    await _product(session, "Mid", date(2022, 3, 3))

    products = await SQLAlchemyProductRepository(session).get_all()

    assert [p.name for p in products] == ["New", "Mid", "Old"]


@pytest.mark.asyncio
async def test_delete_product_cascades_to_children(session_factory):
    async with session_factory() as session:
        product = await _product(session)
        other = await _product(session, "Other")
        await SQLAlchemyReviewRepository(session).create(Review(product_id=product.id, rating=5))
        await SQLAlchemyReviewRepository(session).create(Review(product_id=other.id, rating=3))
        await SQLAlchemySupportRequestRepository(session).create(
            SupportRequest(
                product_id=product.id,
                issue_description="Broken",
                category=IssueCategory.DEFECT,
                severity=IssueSeverity.LOW,
            )
        )
        await SQLAlchemyNotificationRepository(session).create(
            Notification(product_id=product.id, type=NotificationType.DAYS_30)
        )
        await session.commit()

    async with session_factory() as session:
        assert await SQLAlchemyProductRepository(session).delete(product.id) is True
        await session.commit()

    async with session_factory() as session:
        assert await SQLAlchemyProductRepository(session).get_by_id(product.id) is None
        assert await SQLAlchemyReviewRepository(session).get_by_product(product.id) == []
        assert await SQLAlchemySupportRequestRepository(session).get_by_product(product.id) == []
        assert await SQLAlchemyNotificationRepository(session).get_by_product(product.id) == []
        assert len(await SQLAlchemyReviewRepository(session).get_all()) == 1
        assert await SQLAlchemyProductRepository(session).delete(product.id) is False


@pytest.mark.asyncio
async def test_providers_ordered_by_rating_and_filtered_by_district(session):
    providers = SQLAlchemyServiceProviderRepository(session)
    for name, district, rating in (
        ("Low", "Lisboa", 2),
        ("High", "Évora", 5),
        ("Mid", "Lisboa", 4),
    ):
        await providers.create(
            ServiceProvider(
                name=name,
                email="shop@example.com",
                address="Rua A 1",
                city="X",
                district=district,
                average_rating=rating,
            )
        )

    assert [p.name for p in await providers.get_all()] == ["High", "Mid", "Low"]
    assert [p.name for p in await providers.get_by_district("lisboa")] == ["Mid", "Low"]
    assert [p.name for p in await providers.get_by_district("ÉVORA")] == ["High"]


@pytest.mark.asyncio
async def test_delete_provider_cascades_reviews(session):
    providers = SQLAlchemyServiceProviderRepository(session)
    reviews = SQLAlchemyServiceProviderReviewRepository(session)
    provider = await providers.create(
        ServiceProvider(
            name="FixIt", email="fixit@example.com", address="Rua A 1", city="X", district="Porto"
        )
    )
    await reviews.create(ServiceProviderReview(provider_id=provider.id, rating=4))

    assert await providers.delete(provider.id) is True
    assert await reviews.get_by_provider(provider.id) == []
    assert await providers.delete(provider.id) is False


@pytest.mark.asyncio
async def test_unsent_notifications_and_mark_sent(session):
    product = await _product(session)
    notifications = SQLAlchemyNotificationRepository(session)
    first = await notifications.create(
        Notification(product_id=product.id, type=NotificationType.DAYS_90)
    )
    await notifications.create(Notification(product_id=product.id, type=NotificationType.DAYS_60))

    assert await notifications.mark_sent(first.id) is True
    unsent = await notifications.get_unsent()

    assert [n.type for n in unsent] == [NotificationType.DAYS_60]
    assert (await notifications.get_by_id(first.id)).sent_at is not None
    assert await notifications.mark_sent("nope") is False


@pytest.mark.asyncio
async def test_favorite_toggle(session):
    favorites = SQLAlchemyFavoriteRepository(session)

    assert await favorites.toggle(FavoriteType.PROVIDER, "prov-1") is True
    assert await favorites.is_favorite(FavoriteType.PROVIDER, "prov-1") is True
    assert await favorites.list_target_ids(FavoriteType.PROVIDER) == ["prov-1"]
    assert await favorites.list_target_ids(FavoriteType.PRODUCT) == []

    assert await favorites.toggle(FavoriteType.PROVIDER, "prov-1") is False
    assert await favorites.is_favorite(FavoriteType.PROVIDER, "prov-1") is False


@pytest.mark.asyncio
async def test_client_profile_save_is_upsert(session):
    profiles = SQLAlchemyClientProfileRepository(session)
    profile = ClientProfile(
        owner_id="ana",
        full_name="Ana Silva",
        email="ana@example.com",
        phone_number="912345678",
        address="Rua das Flores 10",
        city="Porto",
    )
    created = await profiles.save(profile)
    profile.city = "Braga"
    updated = await profiles.save(profile)

    assert updated.id == created.id
    assert (await profiles.get_by_owner("ana")).city == "Braga"
    assert await profiles.get_by_owner("rui") is None


@pytest.mark.asyncio
async def test_brand_search_and_seed(session):
    assert await seed_brands(session) == len(DEFAULT_BRANDS)
    assert await seed_brands(session) == 0

    brands = SQLAlchemyBrandRepository(session)
    names = [b.name for b in await brands.get_all()]
    assert names == sorted(names)
    assert len(names) == 13
    assert {b.name for b in await brands.search("informática")} == {"Apple", "Microsoft", "Dell", "HP"}
