"""Concrete repository implementation for ClientProfile backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from warranty_manager.application.interfaces import ClientProfileRepository
from warranty_manager.domain.entities import ClientProfile
from warranty_manager.infrastructure.database.models import ClientProfileModel
from warranty_manager.infrastructure.database.models._common import as_utc


class SQLAlchemyClientProfileRepository(ClientProfileRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    @staticmethod
    def _to_entity(model: ClientProfileModel) -> ClientProfile:
        return ClientProfile(
            id=model.id,
            owner_id=model.owner_id,
            full_name=model.full_name,
            email=model.email,
            phone_number=model.phone_number,
            tax_number=model.tax_number,
            address=model.address,
            city=model.city,
            postal_code=model.postal_code,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    async def get_by_owner(self, owner_id: str) -> ClientProfile | None:
        result = await self._session.execute(
            select(ClientProfileModel).where(ClientProfileModel.owner_id == owner_id)
        )
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def save(self, profile: ClientProfile) -> ClientProfile:
        result = await self._session.execute(
            select(ClientProfileModel).where(ClientProfileModel.owner_id == profile.owner_id)
        )
        model = result.scalar_one_or_none()
        if model is None:
            model = ClientProfileModel(
                id=profile.id,
                owner_id=profile.owner_id,
                created_at=profile.created_at,
            )
            self._session.add(model)

        model.full_name = profile.full_name
        model.email = profile.email
        model.phone_number = profile.phone_number
        model.tax_number = profile.tax_number
        model.address = profile.address
        model.city = profile.city
        model.postal_code = profile.postal_code
        model.updated_at = profile.updated_at
        await self._session.flush()
        return self._to_entity(model)
