"""Abstract repository interface (port) for warranty reminder notifications."""

from abc import ABC, abstractmethod

from warranty_manager.domain.entities import Notification


class NotificationRepository(ABC):

    @abstractmethod
    async def get_by_id(self, notification_id: str) -> Notification | None:
        ...

    @abstractmethod
    async def get_by_product(self, product_id: str) -> list[Notification]:
        """Notifications of one product, newest first."""
        ...

    @abstractmethod
    async def get_unsent(self) -> list[Notification]:
        """Notifications not yet sent, oldest first."""
        ...

    @abstractmethod
    async def create(self, notification: Notification) -> Notification:
        ...

    @abstractmethod
    async def mark_sent(self, notification_id: str) -> bool:
        """Flag a notification as sent. False if not found."""
        ...
