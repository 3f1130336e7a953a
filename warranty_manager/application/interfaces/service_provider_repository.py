"""Abstract repository interfaces (ports) for service providers and their reviews."""

from abc import ABC, abstractmethod

from warranty_manager.domain.entities import ServiceProvider, ServiceProviderReview


class ServiceProviderRepository(ABC):
    """Port for provider persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, provider_id: str) -> ServiceProvider | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[ServiceProvider]:
        """All providers, highest average rating first."""
        ...

    @abstractmethod
    async def get_by_district(self, district: str) -> list[ServiceProvider]:
        """Providers in a district (case-insensitive), highest rating first."""
        ...

    @abstractmethod
    async def create(self, provider: ServiceProvider) -> ServiceProvider:
        ...

    @abstractmethod
    async def update(self, provider: ServiceProvider) -> ServiceProvider | None:
        ...

    @abstractmethod
    async def delete(self, provider_id: str) -> bool:
        """Delete a provider and all of its reviews. False if not found."""
        ...


class ServiceProviderReviewRepository(ABC):

    @abstractmethod
    async def get_by_provider(self, provider_id: str) -> list[ServiceProviderReview]:
        """Reviews of one provider, newest first."""
        ...

    @abstractmethod
    async def get_all(self) -> list[ServiceProviderReview]:
        ...

    @abstractmethod
    async def create(self, review: ServiceProviderReview) -> ServiceProviderReview:
        ...
