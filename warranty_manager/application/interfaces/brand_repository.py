"""Abstract repository interface (port) for Brand persistence."""

from abc import ABC, abstractmethod

from warranty_manager.domain.entities import Brand


class BrandRepository(ABC):
    """Port for brand persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, brand_id: str) -> Brand | None:
        ...

    @abstractmethod
    async def get_by_name(self, name: str) -> Brand | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[Brand]:
        """All brands, alphabetically by name."""
        ...

    @abstractmethod
    async def search(self, query: str) -> list[Brand]:
        """Brands whose name or category contains ``query`` (case-insensitive)."""
        ...

    @abstractmethod
    async def create(self, brand: Brand) -> Brand:
        ...

    @abstractmethod
    async def update(self, brand: Brand) -> Brand | None:
        """Persist changes. Returns None if the brand no longer exists."""
        ...
