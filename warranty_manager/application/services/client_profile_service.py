"""Application service (use case) for the per-owner client profile."""

from warranty_manager.application.interfaces import ClientProfileRepository
from warranty_manager.application.schemas import ClientProfileSave, ClientProfileUpdate
from warranty_manager.domain.entities import ClientProfile


class ClientProfileService:
    """Saving is create-or-update: an owner never ends up with two profiles."""

    def __init__(self, repository: ClientProfileRepository):
        self._repository = repository

    async def get_profile(self, owner_id: str) -> ClientProfile | None:
        return await self._repository.get_by_owner(owner_id)

    async def save_profile(self, owner_id: str, data: ClientProfileSave) -> ClientProfile:
        existing = await self._repository.get_by_owner(owner_id)
        if existing is None:
            profile = ClientProfile(owner_id=owner_id, **data.model_dump())
        else:
            profile = existing
            profile.update(**data.model_dump())
        return await self._repository.save(profile)

    async def update_profile(
        self, owner_id: str, data: ClientProfileUpdate
    ) -> ClientProfile | None:
        profile = await self._repository.get_by_owner(owner_id)
        if profile is None:
            return None
        profile.update(**data.model_dump(exclude_unset=True))
        return await self._repository.save(profile)
