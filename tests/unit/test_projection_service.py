"""Unit tests for read-time projections and the dangling-reference policy."""

from datetime import date

import pytest

from warranty_manager.application.services import ProjectionService
from warranty_manager.domain.entities import Brand, Product, Review
from warranty_manager.domain.exceptions import DanglingReferenceError
from tests.fakes import (
    FakeBrandRepository,
    FakeProductRepository,
    FakeReviewRepository,
    FakeServiceProviderReviewRepository,
    FakeSupportRequestRepository,
)


class Store:
    def __init__(self):
        self.brands = FakeBrandRepository()
        self.products = FakeProductRepository()
        self.reviews = FakeReviewRepository()
        self.requests = FakeSupportRequestRepository()

    def projections(self, strict: bool = False) -> ProjectionService:
        return ProjectionService(
            self.brands,
            self.products,
            self.reviews,
            self.requests,
            FakeServiceProviderReviewRepository(),
            strict=strict,
        )

    def add_product(self, brand_id: str, name: str, purchased: date) -> Product:
        product = Product(
            brand_id=brand_id,
            name=name,
            model="M",
            category="Misc",
            purchase_date=purchased,
            warranty_expiration=date(purchased.year + 3, purchased.month, purchased.day),
        )
        self.products.products[product.id] = product
        return product


@pytest.fixture
def store() -> Store:
    store = Store()
    brand = Brand(id="acme", name="Acme", support_email="svc@acme.com", category="Gadgets")
    store.brands.brands[brand.id] = brand
    store.add_product("acme", "Old", date(2022, 5, 1))
    store.add_product("acme", "New", date(2024, 5, 1))
    store.add_product("ghost", "Orphan", date(2023, 5, 1))
    return store


@pytest.mark.asyncio
async def test_list_products_drops_dangling_and_orders(store: Store):
    products = await store.projections().list_products()
    assert [p.product.name for p in products] == ["New", "Old"]
    assert all(p.brand.name == "Acme" for p in products)


@pytest.mark.asyncio
async def test_with_brand_returns_none_for_dangling(store: Store):
    orphan = next(p for p in store.products.products.values() if p.name == "Orphan")
    assert await store.projections().with_brand(orphan) is None


@pytest.mark.asyncio
async def test_strict_mode_raises(store: Store):
    with pytest.raises(DanglingReferenceError):
        await store.projections(strict=True).list_products()


@pytest.mark.asyncio
async def test_community_reviews_skip_orphaned_products(store: Store):
    products = {p.name: p for p in store.products.products.values()}
    await store.reviews.create(Review(product_id=products["New"].id, rating=5))
    await store.reviews.create(Review(product_id=products["Orphan"].id, rating=1))

    community = await store.projections().community_reviews()

    assert len(community) == 1
    assert community[0].product.product.name == "New"
    assert community[0].product.brand.name == "Acme"


@pytest.mark.asyncio
async def test_search_products(store: Store):
    found = await store.projections().search_products("ol")
    assert [p.product.name for p in found] == ["Old"]
