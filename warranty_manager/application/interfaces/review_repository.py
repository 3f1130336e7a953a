"""Abstract repository interface (port) for product Review persistence."""

from abc import ABC, abstractmethod

from warranty_manager.domain.entities import Review


class ReviewRepository(ABC):
    """Reviews are append-only; there is no update or delete."""

    @abstractmethod
    async def get_by_id(self, review_id: str) -> Review | None:
        ...

    @abstractmethod
    async def get_by_product(self, product_id: str) -> list[Review]:
        """Reviews of one product, newest first."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Review]:
        """Every review, newest first."""
        ...

    @abstractmethod
    async def create(self, review: Review) -> Review:
        ...
