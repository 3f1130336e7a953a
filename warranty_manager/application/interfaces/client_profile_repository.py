"""Abstract repository interface (port) for client profiles."""

from abc import ABC, abstractmethod

from warranty_manager.domain.entities import ClientProfile


class ClientProfileRepository(ABC):

    @abstractmethod
    async def get_by_owner(self, owner_id: str) -> ClientProfile | None:
        ...

    @abstractmethod
    async def save(self, profile: ClientProfile) -> ClientProfile:
        """Insert the profile, or overwrite the owner's existing one."""
        ...
