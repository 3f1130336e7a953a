"""Concrete repository implementation for product Reviews backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from warranty_manager.application.interfaces import ReviewRepository
from warranty_manager.domain.entities import Review
from warranty_manager.infrastructure.database.models import ReviewModel
from warranty_manager.infrastructure.database.models._common import as_utc


class SQLAlchemyReviewRepository(ReviewRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ReviewModel) -> Review:
        return Review(
            id=model.id,
            product_id=model.product_id,
            rating=model.rating,
            title=model.title,
            content=model.content,
            pros=list(model.pros or []),
            cons=list(model.cons or []),
            recommend=bool(model.recommend),
            created_at=as_utc(model.created_at),
        )

    async def get_by_id(self, review_id: str) -> Review | None:
        result = await self._session.get(ReviewModel, review_id)
        return self._to_entity(result) if result else None

    async def get_by_product(self, product_id: str) -> list[Review]:
        stmt = (
            select(ReviewModel)
            .where(ReviewModel.product_id == product_id)
            .order_by(ReviewModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_all(self) -> list[Review]:
        result = await self._session.execute(
            select(ReviewModel).order_by(ReviewModel.created_at.desc())
        )
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, review: Review) -> Review:
        model = ReviewModel(
            id=review.id,
            product_id=review.product_id,
            rating=review.rating,
            title=review.title,
            content=review.content,
            pros=list(review.pros),
            cons=list(review.cons),
            recommend=review.recommend,
            created_at=review.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)
