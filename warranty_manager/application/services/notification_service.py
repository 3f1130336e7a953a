"""Application service for warranty reminder notifications."""

from warranty_manager.application.interfaces import NotificationRepository, ProductRepository
from warranty_manager.application.schemas import NotificationCreate
from warranty_manager.domain.entities import Notification
from warranty_manager.domain.exceptions import EntityNotFoundError


class NotificationService:
    """Notifications are scheduled externally; this service records and drains them."""

    def __init__(self, repository: NotificationRepository, product_repo: ProductRepository):
        self._repository = repository
        self._product_repo = product_repo

    async def create_notification(self, data: NotificationCreate) -> Notification:
        if await self._product_repo.get_by_id(data.product_id) is None:
            raise EntityNotFoundError("Product", data.product_id)
        return await self._repository.create(
            Notification(product_id=data.product_id, type=data.type)
        )

    async def list_for_product(self, product_id: str) -> list[Notification]:
        return await self._repository.get_by_product(product_id)

    async def list_unsent(self) -> list[Notification]:
        return await self._repository.get_unsent()

    async def mark_sent(self, notification_id: str) -> bool:
        return await self._repository.mark_sent(notification_id)
