"""Concrete repository implementation for SupportRequest backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from warranty_manager.application.interfaces import SupportRequestRepository
from warranty_manager.domain.entities import (
    IssueCategory,
    IssueSeverity,
    SupportRequest,
    SupportRequestStatus,
)
from warranty_manager.infrastructure.database.models import SupportRequestModel
from warranty_manager.infrastructure.database.models._common import as_utc


class SQLAlchemySupportRequestRepository(SupportRequestRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    @staticmethod
    def _to_entity(model: SupportRequestModel) -> SupportRequest:
        return SupportRequest(
            id=model.id,
            product_id=model.product_id,
            issue_description=model.issue_description,
            category=IssueCategory(model.category),
            severity=IssueSeverity(model.severity),
            status=SupportRequestStatus(model.status),
            email_sent_at=as_utc(model.email_sent_at),
            created_at=as_utc(model.created_at),
        )

    async def get_by_id(self, request_id: str) -> SupportRequest | None:
        result = await self._session.get(SupportRequestModel, request_id)
        return self._to_entity(result) if result else None

    async def get_by_product(self, product_id: str) -> list[SupportRequest]:
        stmt = (
            select(SupportRequestModel)
            .where(SupportRequestModel.product_id == product_id)
            .order_by(SupportRequestModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_all(self) -> list[SupportRequest]:
        result = await self._session.execute(
            select(SupportRequestModel).order_by(SupportRequestModel.created_at.desc())
        )
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, request: SupportRequest) -> SupportRequest:
        model = SupportRequestModel(
            id=request.id,
            product_id=request.product_id,
            issue_description=request.issue_description,
            category=request.category.value,
            severity=request.severity.value,
            status=request.status.value,
            email_sent_at=request.email_sent_at,
            created_at=request.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, request: SupportRequest) -> SupportRequest | None:
        model = await self._session.get(SupportRequestModel, request.id)
        if model is None:
            return None
        model.issue_description = request.issue_description
        model.category = request.category.value
        model.severity = request.severity.value
        model.status = request.status.value
        model.email_sent_at = request.email_sent_at
        await self._session.flush()
        return self._to_entity(model)
