"""Unit tests for filing support requests."""

from datetime import date

import pytest

from warranty_manager.application.schemas import SupportRequestCreate, SupportRequestUpdate
from warranty_manager.application.services import (
    ProjectionService,
    SupportEmailComposer,
    SupportRequestService,
)
from warranty_manager.domain.entities import (
    Brand,
    ClientProfile,
    IssueCategory,
    IssueSeverity,
    Product,
    SupportRequestStatus,
)
from warranty_manager.domain.exceptions import EntityNotFoundError
from tests.fakes import (
    FakeBrandRepository,
    FakeClientProfileRepository,
    FakeProductRepository,
    FakeReviewRepository,
    FakeServiceProviderReviewRepository,
    FakeSupportRequestRepository,
)


@pytest.fixture
def brands() -> FakeBrandRepository:
    return FakeBrandRepository()


@pytest.fixture
def products() -> FakeProductRepository:
    return FakeProductRepository()


@pytest.fixture
def profiles() -> FakeClientProfileRepository:
    return FakeClientProfileRepository()


@pytest.fixture
def service(brands, products, profiles) -> SupportRequestService:
    requests = FakeSupportRequestRepository()
    projections = ProjectionService(
        brands, products, FakeReviewRepository(), requests, FakeServiceProviderReviewRepository()
    )
    return SupportRequestService(
        requests, products, profiles, projections, SupportEmailComposer("PT")
    )


@pytest.fixture
def widget(brands, products) -> Product:
    brand = Brand(
        name="Acme",
        support_email="svc@acme.com",
        category="Gadgets",
        country_emails={"PT": "apoio@acme.pt"},
    )
    brands.brands[brand.id] = brand
    product = Product(
        brand_id=brand.id,
        name="Widget",
        model="W-1",
        category="Gadgets",
        purchase_date=date(2023, 1, 15),
        warranty_expiration=date(2026, 1, 15),
    )
    products.products[product.id] = product
    return product


def _claim(product_id: str) -> SupportRequestCreate:
    return SupportRequestCreate(
        product_id=product_id,
        issue_description="Does not power on",
        category=IssueCategory.MALFUNCTION,
        severity=IssueSeverity.HIGH,
    )


@pytest.mark.asyncio
async def test_file_request_is_sent_immediately(service: SupportRequestService, widget: Product):
    receipt = await service.file_request(_claim(widget.id), owner_id="default")

    assert receipt.email_sent is True
    assert receipt.email.to == "apoio@acme.pt"
    assert receipt.email.subject == "Pedido de Assistência - Widget (W-1)"
    assert receipt.support_request.status == SupportRequestStatus.SENT
    assert receipt.support_request.email_sent_at is not None
    assert await service.list_for_product(widget.id) == [receipt.support_request]


@pytest.mark.asyncio
async def test_file_request_uses_owner_profile(
    service: SupportRequestService, widget: Product, profiles: FakeClientProfileRepository
):
    await profiles.save(
        ClientProfile(
            owner_id="ana",
            full_name="Ana Silva",
            email="ana@example.com",
            phone_number="912345678",
            address="Rua das Flores 10",
            city="Porto",
        )
    )

    mine = await service.file_request(_claim(widget.id), owner_id="ana")
    anonymous = await service.file_request(_claim(widget.id), owner_id="someone-else")

    assert "Ana Silva" in mine.email.body
    assert "Ana Silva" not in anonymous.email.body


@pytest.mark.asyncio
async def test_file_request_for_unknown_product(service: SupportRequestService):
    with pytest.raises(EntityNotFoundError):
        await service.file_request(_claim("missing"), owner_id="default")


@pytest.mark.asyncio
async def test_file_request_for_product_without_brand(
    service: SupportRequestService, widget: Product, brands: FakeBrandRepository
):
    brands.brands.clear()
    with pytest.raises(EntityNotFoundError):
        await service.file_request(_claim(widget.id), owner_id="default")


@pytest.mark.asyncio
async def test_resolve_request(service: SupportRequestService, widget: Product):
    receipt = await service.file_request(_claim(widget.id), owner_id="default")
    updated = await service.update_request(
        receipt.support_request.id, SupportRequestUpdate(status=SupportRequestStatus.RESOLVED)
    )
    assert updated.status == SupportRequestStatus.RESOLVED
    assert updated.issue_description == "Does not power on"
