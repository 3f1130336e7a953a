"""Abstract repository interface (port) for Product persistence."""

from abc import ABC, abstractmethod

from warranty_manager.domain.entities import Product


class ProductRepository(ABC):
    """Port for product persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, product_id: str) -> Product | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[Product]:
        """All products, most recent purchase first."""
        ...

    @abstractmethod
    async def get_by_brand(self, brand_id: str) -> list[Product]:
        ...

    @abstractmethod
    async def search(self, query: str) -> list[Product]:
        """Products whose name or model contains ``query`` (case-insensitive)."""
        ...

    @abstractmethod
    async def create(self, product: Product) -> Product:
        ...

    @abstractmethod
    async def update(self, product: Product) -> Product | None:
        """Persist changes. Returns None if the product no longer exists."""
        ...

    @abstractmethod
    async def delete(self, product_id: str) -> bool:
        """Delete a product together with its reviews, support requests and
        notifications. Returns False if the product was not found."""
        ...
