"""Application service (use case) for Brand operations."""

from warranty_manager.application.interfaces import BrandRepository
from warranty_manager.application.schemas import BrandCreate, BrandUpdate
from warranty_manager.domain.entities import Brand
from warranty_manager.domain.exceptions import DuplicateEntityError, EntityNotFoundError


class BrandService:
    """Orchestrates brand logic. Depends on the repository port (DI)."""

    def __init__(self, repository: BrandRepository):
        self._repository = repository

    async def get_brand(self, brand_id: str) -> Brand:
        brand = await self._repository.get_by_id(brand_id)
        if brand is None:
            raise EntityNotFoundError("Brand", brand_id)
        return brand

    async def list_brands(self) -> list[Brand]:
        return await self._repository.get_all()

    async def search_brands(self, query: str) -> list[Brand]:
        return await self._repository.search(query)

    async def create_brand(self, data: BrandCreate) -> Brand:
        if await self._repository.get_by_name(data.name) is not None:
            raise DuplicateEntityError("Brand", "name", data.name)
        brand = Brand(
            name=data.name,
            support_email=data.support_email,
            category=data.category,
            logo_url=data.logo_url,
            support_phone=data.support_phone,
            website=data.website,
            country_emails=_normalize_country_emails(data.country_emails),
        )
        return await self._repository.create(brand)

    async def update_brand(self, brand_id: str, data: BrandUpdate) -> Brand:
        brand = await self.get_brand(brand_id)
        changes = data.model_dump(exclude_unset=True)
        if "country_emails" in changes:
            changes["country_emails"] = _normalize_country_emails(changes["country_emails"])
        brand.update(**changes)
        updated = await self._repository.update(brand)
        if updated is None:
            raise EntityNotFoundError("Brand", brand_id)
        return updated


def _normalize_country_emails(emails: dict[str, str] | None) -> dict[str, str] | None:
    if not emails:
        return None
    return {code.upper(): str(address) for code, address in emails.items()}
