"""Concrete repository implementation for Notification backed by SQLAlchemy."""

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from warranty_manager.application.interfaces import NotificationRepository
from warranty_manager.domain.entities import Notification, NotificationType
from warranty_manager.infrastructure.database.models import NotificationModel
from warranty_manager.infrastructure.database.models._common import as_utc


class SQLAlchemyNotificationRepository(NotificationRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            product_id=model.product_id,
            type=NotificationType(model.type),
            sent=bool(model.sent),
            sent_at=as_utc(model.sent_at),
            created_at=as_utc(model.created_at),
        )

    async def get_by_id(self, notification_id: str) -> Notification | None:
        result = await self._session.get(NotificationModel, notification_id)
        return self._to_entity(result) if result else None

    async def get_by_product(self, product_id: str) -> list[Notification]:
        stmt = (
            select(NotificationModel)
            .where(NotificationModel.product_id == product_id)
            .order_by(NotificationModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_unsent(self) -> list[Notification]:
        stmt = (
            select(NotificationModel)
            .where(NotificationModel.sent.is_(False))
            .order_by(NotificationModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, notification: Notification) -> Notification:
        model = NotificationModel(
            id=notification.id,
            product_id=notification.product_id,
            type=notification.type.value,
            sent=notification.sent,
            sent_at=notification.sent_at,
            created_at=notification.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def mark_sent(self, notification_id: str) -> bool:
        model = await self._session.get(NotificationModel, notification_id)
        if model is None:
            return False
        model.sent = True
        model.sent_at = datetime.now(timezone.utc)
        await self._session.flush()
        return True
