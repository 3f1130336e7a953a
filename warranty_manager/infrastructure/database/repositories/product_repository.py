"""Concrete repository implementation for Product backed by SQLAlchemy."""

import logging

from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from warranty_manager.application.interfaces import ProductRepository
from warranty_manager.domain.entities import Product
from warranty_manager.infrastructure.database.models import (
    NotificationModel,
    ProductModel,
    ReviewModel,
    SupportRequestModel,
)

logger = logging.getLogger(__name__)


class SQLAlchemyProductRepository(ProductRepository):
    """Implements the ProductRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ProductModel) -> Product:
        """Map ORM model → domain entity."""
        return Product(
            id=model.id,
            brand_id=model.brand_id,
            name=model.name,
            model=model.model,
            serial_number=model.serial_number,
            category=model.category,
            purchase_date=model.purchase_date,
            warranty_expiration=model.warranty_expiration,
            receipt_url=model.receipt_url,
            photo_urls=list(model.photo_urls or []),
            notes=model.notes,
            has_extension=bool(model.has_extension),
            extended_expiration_date=model.extended_expiration_date,
            insurance_provider=model.insurance_provider,
            agent_name=model.agent_name,
            policy_number=model.policy_number,
            extension_cost=model.extension_cost,
        )

    def _apply(self, model: ProductModel, entity: Product) -> None:
        """Copy every mutable field of the entity onto the ORM model."""
        model.name = entity.name
        model.model = entity.model
        model.serial_number = entity.serial_number
        model.category = entity.category
        model.purchase_date = entity.purchase_date
        model.warranty_expiration = entity.warranty_expiration
        model.receipt_url = entity.receipt_url
        model.photo_urls = list(entity.photo_urls)
        model.notes = entity.notes
        model.has_extension = entity.has_extension
        model.extended_expiration_date = entity.extended_expiration_date
        model.insurance_provider = entity.insurance_provider
        model.agent_name = entity.agent_name
        model.policy_number = entity.policy_number
        model.extension_cost = entity.extension_cost

    async def get_by_id(self, product_id: str) -> Product | None:
        result = await self._session.get(ProductModel, product_id)
        return self._to_entity(result) if result else None

    async def get_all(self) -> list[Product]:
        stmt = select(ProductModel).order_by(ProductModel.purchase_date.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_by_brand(self, brand_id: str) -> list[Product]:
        stmt = (
            select(ProductModel)
            .where(ProductModel.brand_id == brand_id)
            .order_by(ProductModel.purchase_date.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def search(self, query: str) -> list[Product]:
        pattern = f"%{query}%"
        stmt = (
            select(ProductModel)
            .where(or_(ProductModel.name.ilike(pattern), ProductModel.model.ilike(pattern)))
            .order_by(ProductModel.purchase_date.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, product: Product) -> Product:
        model = ProductModel(id=product.id, brand_id=product.brand_id)
        self._apply(model, product)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, product: Product) -> Product | None:
        model = await self._session.get(ProductModel, product.id)
        if model is None:
            return None
        self._apply(model, product)
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, product_id: str) -> bool:
        model = await self._session.get(ProductModel, product_id)
        if model is None:
            return False

        # Children go first, in the same transaction; SQLite does not enforce
        # ON DELETE CASCADE unless foreign keys are switched on.
        for child in (ReviewModel, SupportRequestModel, NotificationModel):
            result = await self._session.execute(
                delete(child).where(child.product_id == product_id)
            )
            logger.debug(
                "Cascade-deleted %d %s rows for product %s",
                result.rowcount, child.__tablename__, product_id,
            )
        await self._session.delete(model)
        await self._session.flush()
        return True
