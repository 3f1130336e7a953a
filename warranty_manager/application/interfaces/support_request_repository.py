"""Abstract repository interface (port) for SupportRequest persistence."""

from abc import ABC, abstractmethod

from warranty_manager.domain.entities import SupportRequest


class SupportRequestRepository(ABC):

    @abstractmethod
    async def get_by_id(self, request_id: str) -> SupportRequest | None:
        ...

    @abstractmethod
    async def get_by_product(self, product_id: str) -> list[SupportRequest]:
        """Requests for one product, newest first."""
        ...

    @abstractmethod
    async def get_all(self) -> list[SupportRequest]:
        """Every request, newest first."""
        ...

    @abstractmethod
    async def create(self, request: SupportRequest) -> SupportRequest:
        ...

    @abstractmethod
    async def update(self, request: SupportRequest) -> SupportRequest | None:
        ...
