"""End-to-end API tests over a temporary SQLite database."""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from warranty_manager.infrastructure.database.session import get_db_session
from warranty_manager.main import app


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncIterator[AsyncClient]:
    async def _session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


async def _register_widget(client: AsyncClient) -> tuple[dict, dict]:
    brand = (
        await client.post(
            "/api/v1/brands",
            json={
                "name": "Acme",
                "support_email": "svc@acme.com",
                "category": "Gadgets",
                "country_emails": {"PT": "apoio@acme.pt"},
            },
        )
    ).json()
    response = await client.post(
        "/api/v1/products",
        json={
            "brand_id": brand["id"],
            "name": "Widget",
            "model": "W-1",
            "category": "Gadgets",
            "purchase_date": "2023-01-15",
        },
    )
    assert response.status_code == 201
    return brand, response.json()


@pytest.mark.asyncio
async def test_register_product_and_extend(client: AsyncClient):
    _, product = await _register_widget(client)
    assert product["warranty_expiration"] == "2026-01-15"

    response = await client.post(
        f"/api/v1/products/{product['id']}/extension",
        json={
            "extended_expiration_date": "2027-01-15",
            "insurance_provider": "Fidelidade",
            "policy_number": "POL-1",
        },
    )
    assert response.status_code == 200
    assert response.json()["warranty_expiration"] == "2027-01-15"
    assert response.json()["has_extension"] is True

    rejected = await client.post(
        f"/api/v1/products/{product['id']}/extension",
        json={
            "extended_expiration_date": "2025-01-15",
            "insurance_provider": "Fidelidade",
            "policy_number": "POL-2",
        },
    )
    assert rejected.status_code == 422

    moved = await client.patch(
        f"/api/v1/products/{product['id']}", json={"purchase_date": "2025-01-01"}
    )
    assert moved.status_code == 422


@pytest.mark.asyncio
async def test_patch_null_clears_notes(client: AsyncClient):
    _, product = await _register_widget(client)
    noted = await client.patch(
        f"/api/v1/products/{product['id']}",
        json={"notes": "old note", "serial_number": "SN1"},
    )
    assert noted.json()["notes"] == "old note"

    response = await client.patch(f"/api/v1/products/{product['id']}", json={"notes": None})
    assert response.status_code == 200
    assert response.json()["notes"] is None
    assert response.json()["serial_number"] == "SN1"


@pytest.mark.asyncio
async def test_duplicate_brand_conflicts(client: AsyncClient):
    await _register_widget(client)
    response = await client.post(
        "/api/v1/brands",
        json={"name": "Acme", "support_email": "x@acme.com", "category": "Gadgets"},
    )
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_product_with_unknown_brand_is_404(client: AsyncClient):
    response = await client.post(
        "/api/v1/products",
        json={
            "brand_id": "missing",
            "name": "Widget",
            "model": "W-1",
            "category": "Gadgets",
            "purchase_date": "2023-01-15",
        },
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_too_many_photos_rejected(client: AsyncClient):
    brand, _ = await _register_widget(client)
    response = await client.post(
        "/api/v1/products",
        json={
            "brand_id": brand["id"],
            "name": "Camera",
            "model": "C-1",
            "category": "Gadgets",
            "purchase_date": "2023-01-15",
            "photo_urls": [f"/p/{i}.jpg" for i in range(6)],
        },
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_file_support_request_and_history(client: AsyncClient):
    _, product = await _register_widget(client)

    response = await client.post(
        "/api/v1/support-requests",
        json={
            "product_id": product["id"],
            "issue_description": "Does not power on",
            "category": "malfunction",
            "severity": "high",
        },
    )
    assert response.status_code == 201
    receipt = response.json()
    assert receipt["email_sent"] is True
    assert receipt["email_to"] == "apoio@acme.pt"
    assert receipt["support_request"]["status"] == "sent"

    history = (await client.get("/api/v1/support-requests/history")).json()
    assert len(history) == 1
    assert history[0]["product"]["brand"]["name"] == "Acme"


@pytest.mark.asyncio
async def test_delete_product_cascades_and_is_idempotent(client: AsyncClient):
    _, product = await _register_widget(client)
    review = await client.post(
        "/api/v1/reviews", json={"product_id": product["id"], "rating": 4}
    )
    assert review.status_code == 201

    assert (await client.delete(f"/api/v1/products/{product['id']}")).status_code == 204
    assert (await client.delete(f"/api/v1/products/{product['id']}")).status_code == 404
    assert (await client.get(f"/api/v1/reviews/{review.json()['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_product_details_include_status(client: AsyncClient):
    _, product = await _register_widget(client)
    details = (await client.get(f"/api/v1/products/{product['id']}")).json()

    assert details["brand"]["name"] == "Acme"
    assert details["reviews"] == []
    assert details["warranty"]["warranty_expiration"] == "2026-01-15"
    assert details["warranty"]["tier"] in {"valid", "expiring_soon", "expired"}


@pytest.mark.asyncio
async def test_search_requires_two_characters(client: AsyncClient):
    await _register_widget(client)

    short = (await client.get("/api/v1/search", params={"q": "w"})).json()
    assert short == {"products": [], "brands": []}

    found = (await client.get("/api/v1/search", params={"q": "wid"})).json()
    assert [p["name"] for p in found["products"]] == ["Widget"]


@pytest.mark.asyncio
async def test_provider_rating_flow(client: AsyncClient):
    provider = (
        await client.post(
            "/api/v1/service-providers",
            json={
                "name": "FixIt",
                "email": "fixit@example.com",
                "address": "Rua Augusta 100",
                "city": "Lisboa",
                "district": "Lisboa",
            },
        )
    ).json()
    for rating in (5, 4, 5, 1):
        response = await client.post(
            "/api/v1/service-providers/reviews",
            json={"provider_id": provider["id"], "rating": rating},
        )
        assert response.status_code == 201

    detail = (await client.get(f"/api/v1/service-providers/{provider['id']}")).json()
    assert detail["average_rating"] == 4
    assert detail["average_rating_value"] == 3.75

    analytics = (await client.get("/api/v1/analytics")).json()
    assert analytics["top_rated_providers"][0]["rating"] == 3.8
    assert analytics["stats"]["total_providers"] == 1


@pytest.mark.asyncio
async def test_profile_is_scoped_by_owner_header(client: AsyncClient):
    payload = {
        "full_name": "Ana Silva",
        "email": "ana@example.com",
        "phone_number": "912345678",
        "address": "Rua das Flores 10",
        "city": "Porto",
    }
    saved = await client.put("/api/v1/profile", json=payload, headers={"X-Owner-Id": "ana"})
    assert saved.status_code == 200

    mine = await client.get("/api/v1/profile", headers={"X-Owner-Id": "ana"})
    assert mine.json()["full_name"] == "Ana Silva"
    assert (await client.get("/api/v1/profile", headers={"X-Owner-Id": "rui"})).status_code == 404


@pytest.mark.asyncio
async def test_favorites_toggle(client: AsyncClient):
    first = (await client.post("/api/v1/favorites/product/p1/toggle")).json()
    assert first == {"is_favorite": True}
    assert (await client.get("/api/v1/favorites/product")).json() == ["p1"]

    second = (await client.post("/api/v1/favorites/product/p1/toggle")).json()
    assert second == {"is_favorite": False}
