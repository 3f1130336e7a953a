"""Application service (use case) for products and their warranty lifecycle."""

import logging
from dataclasses import dataclass
from datetime import datetime

from warranty_manager.application.interfaces import BrandRepository, ProductRepository
from warranty_manager.application.schemas import (
    ProductCreate,
    ProductUpdate,
    WarrantyExtensionRequest,
)
from warranty_manager.domain.entities import (
    Product,
    ProductWithBrand,
    ProductWithDetails,
    WarrantyExtension,
)
from warranty_manager.domain.exceptions import EntityNotFoundError
from warranty_manager.domain.warranty import (
    DEFAULT_WARRANTY_YEARS,
    EXPIRING_SOON_DAYS,
    WarrantyStatus,
    apply_extension,
    check_extension_date,
    compute_default_expiration,
    compute_status,
    recompute_expiration,
)

from .projection_service import ProjectionService

logger = logging.getLogger(__name__)


@dataclass
class WarrantyCertificate:
    """Everything a certificate or report renderer needs for one product."""

    product: ProductWithBrand
    status: WarrantyStatus


class ProductService:
    """Orchestrates product registration, updates, extensions and deletion."""

    def __init__(
        self,
        product_repo: ProductRepository,
        brand_repo: BrandRepository,
        projections: ProjectionService,
        *,
        warranty_years: int = DEFAULT_WARRANTY_YEARS,
        expiring_soon_days: int = EXPIRING_SOON_DAYS,
        enforce_extension_after_default: bool = True,
    ) -> None:
        self._product_repo = product_repo
        self._brand_repo = brand_repo
        self._projections = projections
        self._warranty_years = warranty_years
        self._expiring_soon_days = expiring_soon_days
        self._enforce_extension = enforce_extension_after_default

    # ── Reads ────────────────────────────────────────────────────────

    async def get_product(self, product_id: str) -> Product:
        product = await self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product", product_id)
        return product

    async def get_product_with_brand(self, product_id: str) -> ProductWithBrand:
        projected = await self._projections.with_brand(await self.get_product(product_id))
        if projected is None:
            raise EntityNotFoundError("Product", product_id)
        return projected

    async def get_product_details(self, product_id: str) -> ProductWithDetails:
        details = await self._projections.with_details(await self.get_product(product_id))
        if details is None:
            raise EntityNotFoundError("Product", product_id)
        return details

    async def list_products(self) -> list[ProductWithBrand]:
        return await self._projections.list_products()

    def status_of(self, product: Product, now: datetime | None = None) -> WarrantyStatus:
        return compute_status(
            product.warranty_expiration, now, expiring_soon_days=self._expiring_soon_days
        )

    async def get_certificate(
        self, product_id: str, now: datetime | None = None
    ) -> WarrantyCertificate:
        projected = await self.get_product_with_brand(product_id)
        return WarrantyCertificate(product=projected, status=self.status_of(projected.product, now))

    async def warranty_report(self, now: datetime | None = None) -> list[WarrantyCertificate]:
        return [
            WarrantyCertificate(product=p, status=self.status_of(p.product, now))
            for p in await self._projections.list_products()
        ]

    # ── Writes ───────────────────────────────────────────────────────

    async def create_product(self, data: ProductCreate) -> Product:
        if await self._brand_repo.get_by_id(data.brand_id) is None:
            raise EntityNotFoundError("Brand", data.brand_id)

        product = Product(
            brand_id=data.brand_id,
            name=data.name,
            model=data.model,
            category=data.category,
            purchase_date=data.purchase_date,
            warranty_expiration=compute_default_expiration(
                data.purchase_date, self._warranty_years
            ),
            serial_number=data.serial_number,
            receipt_url=data.receipt_url,
            photo_urls=list(data.photo_urls),
            notes=data.notes,
        )
        created = await self._product_repo.create(product)
        logger.info(
            "Registered product %s (%s), warranty until %s",
            created.id, created.name, created.warranty_expiration.isoformat(),
        )
        return created

    async def update_product(self, product_id: str, data: ProductUpdate) -> Product:
        product = await self.get_product(product_id)
        changes = data.model_dump(exclude_unset=True)
        new_purchase_date = changes.get("purchase_date")
        if (
            self._enforce_extension
            and new_purchase_date is not None
            and product.has_extension
            and product.extended_expiration_date is not None
        ):
            check_extension_date(
                product.id,
                new_purchase_date,
                product.extended_expiration_date,
                self._warranty_years,
            )
        product.update(**changes)
        product.warranty_expiration = recompute_expiration(product, self._warranty_years)
        updated = await self._product_repo.update(product)
        if updated is None:
            raise EntityNotFoundError("Product", product_id)
        return updated

    async def add_extension(self, product_id: str, data: WarrantyExtensionRequest) -> Product:
        product = await self.get_product(product_id)
        extended = apply_extension(
            product,
            WarrantyExtension(
                extended_expiration_date=data.extended_expiration_date,
                insurance_provider=data.insurance_provider,
                policy_number=data.policy_number,
                agent_name=data.agent_name,
                extension_cost=data.extension_cost,
            ),
            years=self._warranty_years,
            enforce_later=self._enforce_extension,
        )
        updated = await self._product_repo.update(extended)
        if updated is None:
            raise EntityNotFoundError("Product", product_id)
        logger.info(
            "Extended warranty of product %s to %s (policy %s)",
            product_id, extended.warranty_expiration.isoformat(), data.policy_number,
        )
        return updated

    async def delete_product(self, product_id: str) -> bool:
        """Delete a product and its reviews/support requests. False if absent."""
        deleted = await self._product_repo.delete(product_id)
        if deleted:
            logger.info("Deleted product %s", product_id)
        return deleted
